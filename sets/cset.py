from itertools import compress
import numpy as np

import sets.etypes as et
import utils.limits as limits
import utils.utils as u

"""
Finite sets.

A set is an unordered collection of distinct elements of a single type (its etype,
see etypes.py). Elements must be hashable. Sets are hashable too (by content) so
they can be elements of other sets: equality and hashing of nested sets are
structural, not by identity.

Only add(), remove() and clear() mutate a set. All other operations construct
and return a new set. A set that has been added to another set (or used as a
dictionary key) should not be mutated afterwards since its hash would change.
"""

class Set:

    # only elements can be positional, etype is keyword only
    def __init__(self,elements=None,*,etype=None):
        # elements may be a one-shot iterator
        elements = [] if elements is None else list(elements)

        self._declared = etype is not None              # declared etypes never widen
        self._etype    = et.infer(elements,etype)       # None if empty and not declared
        self._elements = set(elements)

    # constructs a set from elements that are known to fit etype
    @classmethod
    def _of(cls,elements,etype,declared=False):
        s           = cls.__new__(cls)
        s._declared = declared and etype is not None
        s._etype    = etype
        s._elements = set(elements)
        return s

    @classmethod
    def empty(cls,etype=None):
        return cls(etype=etype)

    # elements of universe (any iterable) that satisfy predicate
    @classmethod
    def from_predicate(cls,universe,predicate,etype=None):
        return cls((e for e in universe if predicate(e)),etype=etype)

    # for printing
    def __str__(self):
        if self.is_empty: return '∅'
        return '{' + u.unpack(self._elements,str,', ') + '}'

    def __repr__(self):
        if self.is_empty: return 'Set()'
        return 'Set({' + u.unpack(self._elements,repr,', ') + '})'

    # read only attributes
    @property
    def elements(self):    return frozenset(self._elements)
    @property
    def etype(self):       return self._etype
    @property
    def cardinality(self): return len(self._elements)
    @property
    def is_empty(self):    return not self._elements
    @property
    def is_not_empty(self):return bool(self._elements)

    # python protocols
    def __len__(self):
        return len(self._elements)

    def __iter__(self):
        return iter(self._elements)

    def __contains__(self,e): # in
        return self.contains(e)

    # structural equality (never fails, unlike equals())
    def __eq__(self,other):
        return isinstance(other,Set) and et.compatible(self._etype,other._etype) \
            and self._elements == other._elements

    def __ne__(self,other):
        return not self == other

    # independent of the order in which elements were added
    def __hash__(self):
        return hash(frozenset(self._elements))

    # overloading operators
    # non-set operands are left to python (NotImplemented), which raises TypeError
    def __le__(self,other):  return self.__apply(Set.is_subset_of,other)          # <=
    def __lt__(self,other):  return self.__apply(Set.is_proper_subset_of,other)   # <
    def __ge__(self,other):  return self.__apply(Set.is_superset_of,other)        # >=
    def __gt__(self,other):  return self.__apply(Set.is_proper_superset_of,other) # >
    def __or__(self,other):  return self.__apply(Set.union,other)                 # |
    def __and__(self,other): return self.__apply(Set.intersection,other)          # &
    def __sub__(self,other): return self.__apply(Set.difference,other)            # -
    def __xor__(self,other): return self.__apply(Set.symmetric_difference,other)  # ^

    def __apply(self,method,other):
        if not isinstance(other,Set): return NotImplemented
        return method(self,other)


    """ membership and mutation """

    # unhashable values are never members
    def contains(self,e):
        try:
            return e in self._elements
        except TypeError:
            return False

    # returns whether e was inserted (False if already a member)
    def add(self,e):
        if e in self._elements:
            return False
        self._etype = et.extend(self._etype,e,self._declared)
        self._elements.add(e)
        return True

    # returns whether e was removed (False if not a member)
    def remove(self,e):
        if e not in self._elements:
            return False
        self._elements.remove(e)
        return True

    def clear(self):
        self._elements.clear()


    """ predicates """

    # etype of elements combining self and other, fails if incompatible
    def __common_etype(self,other):
        u.input_check(isinstance(other,Set),
            f'{other!r} is not a set')
        return et.common(self._etype,other._etype)

    # the empty set is a subset of every set (including itself)
    def is_subset_of(self,other):
        self.__common_etype(other)
        return all(e in other._elements for e in self._elements)

    # a subset with equal cardinality is the set itself
    def is_proper_subset_of(self,other):
        return self.is_subset_of(other) and self.cardinality < other.cardinality

    def is_superset_of(self,other):
        u.input_check(isinstance(other,Set),
            f'{other!r} is not a set')
        return other.is_subset_of(self)

    def is_proper_superset_of(self,other):
        u.input_check(isinstance(other,Set),
            f'{other!r} is not a set')
        return other.is_proper_subset_of(self)

    # same cardinality and subset implies superset
    def equals(self,other):
        self.__common_etype(other)
        return self.cardinality == other.cardinality and self.is_subset_of(other)

    # cardinal equivalence: elements (and their types) do not matter
    def is_equivalent_to(self,other):
        u.input_check(isinstance(other,Set),
            f'{other!r} is not a set')
        return self.cardinality == other.cardinality

    def is_disjoint_from(self,other):
        self.__common_etype(other)
        return not any(e in other._elements for e in self._elements)


    """ operations (return new sets) """

    def intersection(self,other):
        etype = self.__common_etype(other)
        s1, s2 = (self,other) if len(self) <= len(other) else (other,self)
        return Set._of((e for e in s1._elements if e in s2._elements),etype,self._declared)

    def union(self,other):
        etype = self.__common_etype(other)
        return Set._of(self._elements | other._elements,etype,self._declared)

    def difference(self,other):
        etype = self.__common_etype(other)
        return Set._of((e for e in self._elements if e not in other._elements),etype,self._declared)

    # (A ∪ B) - (A ∩ B)
    def symmetric_difference(self,other):
        return self.union(other).difference(self.intersection(other))

    # elements of universal not in self
    # elements of self outside universal are ignored
    def complement(self,universal):
        etype = self.__common_etype(universal)
        return Set._of((e for e in universal._elements if e not in self._elements),
                    etype,universal._declared)


    """ power set """

    # -subset i of the power set contains element j iff bit j of i is set, where
    #  elements are indexed by their position in a fixed list
    # -fails if subset indices do not fit the index type of limits.py, or if the
    #  power set will not fit in memory
    def power_set(self):
        n     = self.cardinality
        u.input_check(n <= limits.max_n,
            f'power set of {n} elements cannot be indexed by '
            f'{limits.index_bits}-bit integers (at most {limits.max_n} elements)',
            u.ResourceLimit)
        total = 1 << n # 2^n
        mem   = total*(limits.subset_size + 4*n)/(1024**3)
        ram   = u.system_RAM_GB()
        u.input_check(mem < ram,
            f'power set of {n} elements needs about {mem:.1f} GB (RAM is {ram:.1f} GB)',
            u.ResourceLimit)
        u.warning(n > limits.practical_power_set_n,
            f'constructing power set with {total} subsets')

        elements = list(self._elements) # fixed order
        bits     = np.arange(n,dtype=limits.index)
        subsets  = []
        # membership masks are computed for a block of indices at a time
        for start in range(0,total,limits.power_set_block):
            stop    = min(start+limits.power_set_block,total)
            indices = np.arange(start,stop,dtype=limits.index)
            masks   = ((indices[:,None] >> bits) & 1).astype(bool)
            for mask in masks.tolist():
                subsets.append(Set._of(compress(elements,mask),self._etype,self._declared))
        return Set._of(subsets,Set)
