from itertools import combinations, product
from functools import reduce

from sets.cset import Set
import operations.basic as ops
import utils.utils as u

"""
Operations that involve more than two sets, or sets of sets:

 -- cartesian products of two or more sets
 -- checking whether a set of sets partitions a set
 -- counting the elements of a union using the inclusion-exclusion principle
"""

""" cartesian products """

# set of pairs (x,y) where x in a and y in b
# empty if a or b is empty
def cartesian_product(a,b):
    u.input_check(isinstance(a,Set) and isinstance(b,Set),
        'cartesian product is defined on sets only')
    return Set(product(a,b),etype=tuple)

# set of tuples (x1,...,xn) where xi in sets[i]
# empty if there are no sets or one of them is empty
def cartesian_product_n(sets):
    sets = list(sets) # may be a one-shot iterator
    u.input_check(all(isinstance(s,Set) for s in sets),
        'cartesian product is defined on sets only')
    if not sets or any(s.is_empty for s in sets):
        return Set(etype=tuple)
    tuples = [()]
    for s in sets: # extend each tuple by one position
        tuples = [(*t,e) for t in tuples for e in s]
    return Set(tuples,etype=tuple)


""" partitions """

# whether parts is a partition of original:
#   -every part is non-empty
#   -the union of parts is original
#   -parts are pairwise disjoint
def is_partition(parts,original):
    u.input_check(isinstance(parts,Set) and all(isinstance(p,Set) for p in parts),
        'partition must be a set of sets')
    u.input_check(isinstance(original,Set),
        f'{original!r} is not a set')

    if any(p.is_empty for p in parts):
        return False

    covered = reduce(ops.union,parts,Set.empty(original.etype))
    if not covered.equals(original):
        return False

    return all(p.is_disjoint_from(q) for p,q in combinations(list(parts),2))


""" inclusion-exclusion """

# |A ∪ B| = |A| + |B| - |A ∩ B|
def inclusion_exclusion2(a,b):
    return a.cardinality + b.cardinality - ops.intersection(a,b).cardinality

# |A ∪ B ∪ C| = |A| + |B| + |C| - |A ∩ B| - |A ∩ C| - |B ∩ C| + |A ∩ B ∩ C|
def inclusion_exclusion3(a,b,c):
    ab = ops.intersection(a,b)
    return a.cardinality + b.cardinality + c.cardinality \
        - ab.cardinality \
        - ops.intersection(a,c).cardinality \
        - ops.intersection(b,c).cardinality \
        + ops.intersection(ab,c).cardinality

# |S1 ∪ ... ∪ Sm| as the alternating sum, over k = 1..m, of the cardinalities
# of all intersections of k sets (2^m - 1 intersections)
def inclusion_exclusion(sets):
    count = 0
    for k in range(1,len(sets)+1):
        sign  = 1 if k % 2 else -1
        for group in combinations(sets,k):
            count += sign * reduce(ops.intersection,group).cardinality
    return count
