from sets.cset import Set
import utils.utils as u

"""
Basic set operations as functions of two sets.

These mirror the corresponding methods of Set (cset.py) so that both operands
appear symmetrically in calls, e.g. union(a,b) instead of a.union(b).
"""

def __check(*sets):
    u.input_check(all(isinstance(s,Set) for s in sets),
        'set operations are defined on sets only')

# A ∩ B
def intersection(a,b):
    __check(a,b)
    return a.intersection(b)

# A ∪ B
def union(a,b):
    __check(a,b)
    return a.union(b)

# A' = U - A
def complement(a,universal):
    __check(a,universal)
    return a.complement(universal)

# A - B
def difference(a,b):
    __check(a,b)
    return a.difference(b)

# A ⊕ B = (A ∪ B) - (A ∩ B)
def symmetric_difference(a,b):
    return difference(union(a,b),intersection(a,b))

# A ⊕ B = (A - B) ∪ (B - A)
# must agree with symmetric_difference() on all sets
def symmetric_difference_alt(a,b):
    return union(difference(a,b),difference(b,a))
