import pytest

from sets.cset import Set
from sets.mset import Multiset
import utils.utils as u


def test_multiset_initialization():
    ms = Multiset.from_iterable(['a','a','b','c','c','c'])
    assert ms.multiplicity('a') == 2
    assert ms.multiplicity('c') == 3
    assert ms.multiplicity('z') == 0
    assert ms.cardinality == 6
    assert ms.unique_count == 3
    assert len(ms) == 6
    assert 'b' in ms and 'z' not in ms

def test_empty_multiset():
    ms = Multiset()
    assert ms.is_empty
    assert ms.cardinality == 0 and ms.unique_count == 0
    assert str(ms) == '∅'

def test_add():
    ms = Multiset([1,2])
    ms.add(2)
    ms.add(3,2)
    assert ms.elements == {1:1,2:2,3:2}

def test_add_non_positive_count_is_ignored():
    ms = Multiset([1])
    ms.add(1,0)
    ms.add(1,-3)
    ms.add(2,-1)
    assert ms.elements == {1:1}

def test_remove():
    ms = Multiset([1,2,2,2,3])
    ms.remove(2)
    assert ms.multiplicity(2) == 2
    ms.remove(2,5) # more than available
    assert 2 not in ms
    assert ms.multiplicity(2) == 0
    ms.remove(3)
    assert ms.elements == {1:1}

def test_remove_missing_or_non_positive_is_ignored():
    ms = Multiset([1,2])
    ms.remove(3)
    ms.remove(1,0)
    ms.remove(1,-2)
    assert ms.elements == {1:1,2:1}

def test_extend():
    ms = Multiset(['x'])
    ms.extend(['x','y'])
    assert ms.elements == {'x':2,'y':1}

def test_operations():
    P = Multiset(['a','a','a','c','d','d'])
    Q = Multiset(['a','a','b','c','c'])
    assert P.union(Q).elements        == {'a':3,'b':1,'c':2,'d':2}
    assert P.intersection(Q).elements == {'a':2,'c':1}
    assert P.difference(Q).elements   == {'a':1,'d':2}
    assert P.sum(Q).elements          == {'a':5,'b':1,'c':3,'d':2}
    assert Q.difference(P).elements   == {'b':1,'c':1}
    assert P | Q == P.union(Q)
    assert P & Q == P.intersection(Q)
    assert P - Q == P.difference(Q)
    assert P + Q == P.sum(Q)

def test_operations_keep_int_counts():
    P = Multiset(['a','a'])
    Q = Multiset(['a','b'])
    for c in P.sum(Q).elements.values():
        assert type(c) is int

def test_operations_with_empty_multiset():
    P = Multiset([1,1,2])
    E = Multiset()
    assert P.union(E) == P
    assert P.intersection(E).is_empty
    assert P.difference(E) == P
    assert E.difference(P).is_empty
    assert P.sum(E) == P

def test_operations_do_not_mutate():
    P = Multiset([1,1,2])
    Q = Multiset([1,3])
    P.union(Q); P.intersection(Q); P.difference(Q); P.sum(Q)
    assert P.elements == {1:2,2:1}
    assert Q.elements == {1:1,3:1}

def test_to_set():
    ms = Multiset([1,1,1,2,2,3])
    s  = ms.to_set()
    assert s.cardinality == 3
    assert s == Set([1,2,3])

def test_round_trip_with_set():
    for xs in ([],[1],[3,1,3,2,1],list('mississippi')):
        assert Multiset.from_iterable(xs).to_set().equals(Set(xs))

def test_hardware_procurement():
    ti = Multiset(['PC']*100 + ['router']*40 + ['server']*5)
    ms = Multiset(['PC']*10 + ['router']*7 + ['mainframe']*2)

    shareable = ti.union(ms)
    assert shareable.multiplicity('PC') == 100
    assert shareable.multiplicity('router') == 40
    assert shareable.multiplicity('server') == 5
    assert shareable.multiplicity('mainframe') == 2

    total = ti.sum(ms)
    assert total.multiplicity('PC') == 110
    assert total.multiplicity('router') == 47

    ms_only = ms.difference(ti)
    assert ms_only.multiplicity('mainframe') == 2
    assert ms_only.multiplicity('PC') == 0
    assert ms_only.multiplicity('router') == 0

def test_rendering():
    assert str(Multiset(['a','a'])) == '{a:2}'

def test_mixed_types_fail():
    with pytest.raises(u.TypeMismatch):
        Multiset([1,'a'])
    with pytest.raises(u.TypeMismatch):
        Multiset([1]).union(Multiset(['a']))

# counts are python ints and do not wrap around
def test_large_counts():
    a, b = Multiset(), Multiset()
    a.add('a',2**62); b.add('a',2**62)
    assert a.sum(b).multiplicity('a') == 2**63
    b.add('a',2**64)
    assert a.union(b).multiplicity('a') == 2**62 + 2**64
    assert b.difference(a).multiplicity('a') == 2**64
    assert a.difference(b).is_empty

def test_unhashable_values_are_not_members():
    ms = Multiset(['a'])
    assert ms.multiplicity(['a']) == 0
    assert not ms.contains({})
    assert ['a'] not in ms
