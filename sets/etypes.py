import utils.utils as u

"""
Element types of sets and multisets.

The elements of a set (or the keys of a multiset) share a single type, its etype.
The etype is either declared when constructing the collection or inferred from
its elements. A collection with no elements and no declared etype has etype None,
which is compatible with any etype.

Two etypes are compatible when one is a subclass of the other, in which case
the more general one is their common etype.
"""

# returns etype extended by element e, or fails if e does not fit etype
# declared etypes never widen
def extend(etype,e,declared=False):
    if etype is None:
        return type(e)
    if isinstance(e,etype):
        return etype
    u.input_check(not declared,
        f'element {e!r} is not of declared type {name(etype)}')
    u.input_check(issubclass(etype,type(e)),
        f'element {e!r} of type {name(type(e))} mixed with elements of type {name(etype)}')
    return type(e)

# returns the etype of elements (or checks elements against declared etype)
def infer(elements,etype=None):
    declared = etype is not None
    for e in elements:
        etype = extend(etype,e,declared)
    return etype

# for error messages
def name(etype):
    return 'none' if etype is None else etype.__name__

# whether etypes t1 and t2 can be mixed
def compatible(t1,t2):
    return t1 is None or t2 is None or issubclass(t1,t2) or issubclass(t2,t1)

# common etype of t1 and t2 (the more general one)
def common(t1,t2):
    u.input_check(compatible(t1,t2),
        f'element types {name(t1)} and {name(t2)} are incompatible')
    if t1 is None: return t2
    if t2 is None: return t1
    return t2 if issubclass(t1,t2) else t1
