from sets.cset import Set
import operations.basic as ops
import utils.utils as u

"""
Laws of the algebra of sets.

Each law is evaluated on the given sets: the two sides of the identity are
computed using the basic operations and then compared. A law returning False
therefore indicates a broken operation (the laws double as tests).

Laws that involve complements take an explicit universal set U, which is
expected to contain the other sets. A' denotes U - A.
"""

def __empty(a):
    return Set.empty(a.etype)


""" identity: A ∪ ∅ = A, A ∩ U = A """

def identity_union(a):
    return ops.union(a,__empty(a)).equals(a)

def identity_intersection(a,universal):
    return ops.intersection(a,universal).equals(a)


""" null (domination): A ∩ ∅ = ∅, A ∪ U = U """

def null_intersection(a):
    return ops.intersection(a,__empty(a)).is_empty

def null_union(a,universal):
    return ops.union(a,universal).equals(universal)


""" complement: A ∪ A' = U, A ∩ A' = ∅ """

def complement_union(a,universal):
    complement = ops.complement(a,universal)
    return ops.union(a,complement).equals(universal)

def complement_intersection(a,universal):
    complement = ops.complement(a,universal)
    return ops.intersection(a,complement).is_empty


""" idempotent: A ∪ A = A, A ∩ A = A """

def idempotent_union(a):
    return ops.union(a,a).equals(a)

def idempotent_intersection(a):
    return ops.intersection(a,a).equals(a)


""" involution: (A')' = A """

def involution(a,universal):
    complement1 = ops.complement(a,universal)
    complement2 = ops.complement(complement1,universal)
    return complement2.equals(a)


""" absorption: A ∪ (A ∩ B) = A, A ∩ (A ∪ B) = A """

def absorption_union(a,b):
    return ops.union(a,ops.intersection(a,b)).equals(a)

def absorption_intersection(a,b):
    return ops.intersection(a,ops.union(a,b)).equals(a)


""" commutative: A ∪ B = B ∪ A, A ∩ B = B ∩ A """

def commutative_union(a,b):
    return ops.union(a,b).equals(ops.union(b,a))

def commutative_intersection(a,b):
    return ops.intersection(a,b).equals(ops.intersection(b,a))


""" associative: A ∪ (B ∪ C) = (A ∪ B) ∪ C, A ∩ (B ∩ C) = (A ∩ B) ∩ C """

def associative_union(a,b,c):
    left  = ops.union(a,ops.union(b,c))
    right = ops.union(ops.union(a,b),c)
    return left.equals(right)

def associative_intersection(a,b,c):
    left  = ops.intersection(a,ops.intersection(b,c))
    right = ops.intersection(ops.intersection(a,b),c)
    return left.equals(right)


""" distributive: A ∪ (B ∩ C) = (A ∪ B) ∩ (A ∪ C), A ∩ (B ∪ C) = (A ∩ B) ∪ (A ∩ C) """

def distributive_union(a,b,c):
    left  = ops.union(a,ops.intersection(b,c))
    right = ops.intersection(ops.union(a,b),ops.union(a,c))
    return left.equals(right)

def distributive_intersection(a,b,c):
    left  = ops.intersection(a,ops.union(b,c))
    right = ops.union(ops.intersection(a,b),ops.intersection(a,c))
    return left.equals(right)


""" De Morgan: (A ∩ B)' = A' ∪ B', (A ∪ B)' = A' ∩ B' """

def de_morgan_intersection(a,b,universal):
    left  = ops.complement(ops.intersection(a,b),universal)
    right = ops.union(ops.complement(a,universal),ops.complement(b,universal))
    return left.equals(right)

def de_morgan_union(a,b,universal):
    left  = ops.complement(ops.union(a,b),universal)
    right = ops.intersection(ops.complement(a,universal),ops.complement(b,universal))
    return left.equals(right)


""" 0/1 laws: ∅' = U, U' = ∅ """

def law_zero(universal):
    return ops.complement(__empty(universal),universal).equals(universal)

def law_one(universal):
    return ops.complement(universal,universal).is_empty


""" all laws """

# evaluates every law on sets a, b, c and universal set U
# returns a dict that maps law names to results (in the order laws are listed above)
def verify_all(a,b,c,universal):
    results = {
        'identity (union)'           : identity_union(a),
        'identity (intersection)'    : identity_intersection(a,universal),
        'null (intersection)'        : null_intersection(a),
        'null (union)'               : null_union(a,universal),
        'complement (union)'         : complement_union(a,universal),
        'complement (intersection)'  : complement_intersection(a,universal),
        'idempotent (union)'         : idempotent_union(a),
        'idempotent (intersection)'  : idempotent_intersection(a),
        'involution'                 : involution(a,universal),
        'absorption (union)'         : absorption_union(a,b),
        'absorption (intersection)'  : absorption_intersection(a,b),
        'commutative (union)'        : commutative_union(a,b),
        'commutative (intersection)' : commutative_intersection(a,b),
        'associative (union)'        : associative_union(a,b,c),
        'associative (intersection)' : associative_intersection(a,b,c),
        'distributive (union)'       : distributive_union(a,b,c),
        'distributive (intersection)': distributive_intersection(a,b,c),
        'De Morgan (intersection)'   : de_morgan_intersection(a,b,universal),
        'De Morgan (union)'          : de_morgan_union(a,b,universal),
        'zero'                       : law_zero(universal),
        'one'                        : law_one(universal),
    }
    for law, holds in results.items():
        u.show(f'  {law:28} {holds}')
    u.warning(not all(results.values()),
        f'{list(results.values()).count(False)} laws failed')
    return results
