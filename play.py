from sets.cset import Set
from sets.mset import Multiset
import operations.basic as ops
import operations.advanced as adv
import operations.laws as laws
import utils.utils as u

""" demonstrations: comment out what you do not want to run """

def play():
    basics()
    advanced()
    multisets()
    counting()
    algebra()


""" membership, subsets and the basic operations """

def basics():
    a = Set([1,2,3,4])
    b = Set([3,4,5,6])
    c = Set([1,2])
    U = Set(range(1,11))

    u.show('\n===Basic operations')
    u.show(f'A = {a}, B = {b}, C = {c}, U = {U}')
    u.show(f'3 ∈ A: {a.contains(3)}, 5 ∈ A: {a.contains(5)}')
    u.show(f'|A| = {a.cardinality}, |B| = {b.cardinality}')
    u.show(f'C ⊆ A: {c.is_subset_of(a)}, C ⊂ A: {c.is_proper_subset_of(a)}')
    u.show(f'A ∩ B = {ops.intersection(a,b)}')
    u.show(f'A ∪ B = {ops.union(a,b)}')
    u.show(f'A - B = {ops.difference(a,b)}')
    u.show(f'A ⊕ B = {ops.symmetric_difference(a,b)}')
    u.show(f"A' = {ops.complement(a,U)}")


""" cartesian products, power sets and partitions """

def advanced():
    colors = Set(['red','green','blue'])
    shapes = Set(['circle','square'])
    sizes  = Set(['small','large'])

    u.show('\n===Advanced operations')
    product = adv.cartesian_product(colors,shapes)
    u.show(f'Colors × Shapes = {product}')
    u.show(f'|Colors × Shapes| = {product.cardinality}')
    product = adv.cartesian_product_n([colors,shapes,sizes])
    u.show(f'|Colors × Shapes × Sizes| = {product.cardinality}')

    base = Set([1,2,3])
    u.show(f'P({base}) = {base.power_set()}')
    u.show(f'P(∅) = {Set().power_set()}')

    original = Set(range(1,9))
    valid    = Set([Set([1]),Set([2,3,4]),Set([5,6]),Set([7,8])])
    overlaps = Set([Set([1,2,3]),Set([3,4,5]),Set([6,7,8])])
    missing  = Set([Set([1,2]),Set([3,4])])
    u.show(f'{valid} partitions {original}: {adv.is_partition(valid,original)}')
    u.show(f'{overlaps} partitions {original}: {adv.is_partition(overlaps,original)}')
    u.show(f'{missing} partitions {original}: {adv.is_partition(missing,original)}')


""" multi-sets: inventories of two offices """

def multisets():
    office1 = Multiset(['laptop']*20 + ['monitor']*15 + ['keyboard']*10 + ['printer']*5)
    office2 = Multiset(['laptop']*15 + ['monitor']*20 + ['keyboard']*12 + ['printer']*3 + ['scanner']*2)

    u.show('\n===Multi-sets')
    u.show(f'Office 1 = {office1}')
    u.show(f'Office 2 = {office2}')
    u.show(f'shared (union)      = {office1.union(office2)}')
    u.show(f'common (intersect)  = {office1.intersection(office2)}')
    u.show(f'total (sum)         = {office1.sum(office2)}')
    u.show(f'office 2 extra      = {office2.difference(office1)}')
    u.show(f'equipment types     = {office1.sum(office2).to_set()}')


""" inclusion-exclusion: users that bought products """

def counting():
    users = Set(range(1,1001))
    A = Set.from_predicate(users,lambda x: x % 7  == 0)
    B = Set.from_predicate(users,lambda x: x % 11 == 0)
    C = Set.from_predicate(users,lambda x: x % 13 == 0)

    u.show('\n===Inclusion-exclusion')
    u.show(f'|A| = {A.cardinality}, |B| = {B.cardinality}, |C| = {C.cardinality}')
    u.show(f'|A ∪ B|     = {adv.inclusion_exclusion2(A,B)} (union has {ops.union(A,B).cardinality})')
    u.show(f'|A ∪ B ∪ C| = {adv.inclusion_exclusion3(A,B,C)} '
           f'(union has {ops.union(ops.union(A,B),C).cardinality})')


""" laws of the algebra of sets """

def algebra():
    U = Set(range(1,11))
    a = Set([1,2,3,4])
    b = Set([3,4,5,6])
    c = Set([1,2])

    u.show('\n===Laws')
    results = laws.verify_all(a,b,c,U)
    u.show(f'{sum(results.values())} of {len(results)} laws hold')
