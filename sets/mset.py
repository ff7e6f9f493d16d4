import numpy as np

import sets.etypes as et
from sets.cset import Set
import utils.utils as u

"""
Multi-Set class
"""

class Multiset:
    def __init__(self,elements=[]):
        # maps each element to its number of occurrences (must be > 0)
        # if an element does not appear in members keys, then it occurs 0 times
        self.members = {}
        self.etype   = None # type of elements, as for sets (see etypes.py)
        for e in elements:
            self.add(e)

    @classmethod
    def from_iterable(cls,elements):
        return cls(elements)

    def __str__(self):
        if self.is_empty: return '∅'
        s = ', '.join([f'{e}:{c}' for e,c in self.members.items()])
        return '{' + s + '}'

    def __repr__(self):
        return f'Multiset({self.members!r})'

    # iterates over distinct elements
    def __iter__(self):
        return iter(self.members)

    # overloading operators

    # same elements with same multiplicities
    def __eq__(self,other):
        return isinstance(other,Multiset) and self.members == other.members

    def __ne__(self,other):
        return not self == other

    def __or__(self,other): # |
        return self.union(other)

    def __and__(self,other): # &
        return self.intersection(other)

    def __sub__(self,other): # -
        return self.difference(other)

    def __add__(self,other): # +
        return self.sum(other)

    # number of occurrences (with repeats) in multi-set
    def __len__(self):
        return self.cardinality

    # whether multi-set contains element e (> 0 occurrences)
    def __contains__(self,e): # in
        return self.contains(e)

    # total number of occurrences
    @property
    def cardinality(self):
        return sum(self.members.values())

    # number of elements with > 0 occurrences
    @property
    def unique_count(self):
        return len(self.members)

    @property
    def is_empty(self):
        return not self.members

    # copy of the multiplicity map
    @property
    def elements(self):
        return dict(self.members)

    # interface

    # returns union of two multi-sets: takes max of their occurrences
    def union(self,other):
        return self.__combine(other,np.maximum)

    # returns intersection of two multi-sets: takes min of their occurrences
    def intersection(self,other):
        return self.__combine(other,np.minimum)

    # returns difference of two multi-sets: subtracts occurrences (down to 0)
    def difference(self,other):
        return self.__combine(other,lambda c1,c2: np.maximum(c1-c2,0))

    # returns sum of two multi-sets: adds their occurrences
    def sum(self,other):
        return self.__combine(other,np.add)

    # -aligns the occurrences of self and other over the elements of both,
    #  then applies op to the two count vectors
    # -count vectors hold python ints (object dtype) so counts never overflow
    # -only elements with positive counts make it to the result
    def __combine(self,other,op):
        u.input_check(isinstance(other,Multiset),
            f'{other!r} is not a multi-set')
        etype    = et.common(self.etype,other.etype)
        elements = [*self.members,*(e for e in other.members if e not in self.members)]
        c1       = np.array([self.multiplicity(e)  for e in elements],dtype=object)
        c2       = np.array([other.multiplicity(e) for e in elements],dtype=object)
        counts   = op(c1,c2)
        mset2 = Multiset()
        mset2.etype   = etype
        mset2.members = {e:int(c) for e,c in zip(elements,counts) if c > 0}
        return mset2

    # whether multi-set contains element e (> 0 occurrences)
    def contains(self,e):
        return self.multiplicity(e) > 0

    # number of occurrences of element e in multi-set (0 if e is unhashable)
    def multiplicity(self,e):
        try:
            return self.members.get(e,0)
        except TypeError:
            return 0

    # adds count occurrences of element e to multi-set (nothing if count <= 0)
    def add(self,e,count=1):
        if count <= 0: return
        self.etype = et.extend(self.etype,e)
        self.members[e] = self.multiplicity(e) + count

    # removes count occurrences of element e (nothing if count <= 0)
    # element is dropped when none are left
    def remove(self,e,count=1):
        if count <= 0 or e not in self.members: return
        c = self.members[e] - count
        if c <= 0:
            del self.members[e]
        else:
            self.members[e] = c

    # adds elements to multi-set
    def extend(self,elements):
        for e in elements:
            self.add(e)

    # distinct elements (multiplicities are dropped)
    def to_set(self):
        return Set(self.members.keys(),etype=self.etype)
