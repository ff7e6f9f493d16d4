import numpy as np

"""
Bounds on power set enumeration.

A subset of a set with n elements is addressed by an integer index whose bit j
decides membership of element j. The index must be representable as a
non-negative signed integer of the chosen width, so n <= bits - 1 (indices 0 .. 2^n - 1).
"""

index       = None # numpy integer type of subset indices
index_bits  = None # bit width of index
max_n       = None # largest set whose power set can be indexed
subset_size = 64   # estimated bytes per subset (excluding elements), for memory checks

practical_power_set_n = 20 # warn beyond this (about a million subsets)
power_set_block       = 1 << 16 # subset indices whose masks are computed at once

def set_64bit_index():
    global index, index_bits, max_n

    index      = np.int64
    info       = np.iinfo('int64')
    index_bits = info.bits
    max_n      = index_bits - 1

def set_32bit_index():
    global index, index_bits, max_n

    index      = np.int32
    info       = np.iinfo('int32')
    index_bits = info.bits
    max_n      = index_bits - 1


# narrow index can be set on the command line (-n option)
set_64bit_index()
