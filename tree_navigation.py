"""
Index navigation shared by segment trees and Fenwick trees.

Two indexings of the same complete binary tree of depth d are related here:

  * the interleaved segment-tree indexing, where moving to the active parent
    or to the previous segment is a matter of shifting bits off the low end,
  * the Fenwick indexing 0 .. 2**(d+1) - 1, where the same moves are the
    familiar  i + lsb(i)  and  i - lsb(i).

`forward_translate` maps Fenwick indices to interleaved ones and
`backward_translate` maps them back.  Conjugating `active_parent` /
`previous_segment` by this bijection yields `fenwick_next` (modulo
2**(d+1)) / `fenwick_previous`.

All functions are pure and take/return InfiniteBits.  Inputs on which the
underlying iteration would never stop are rejected with ValueError.
"""
from infinite_bits import (
    Bit, InfiniteBits, ZEROS, ONES,
    make, decompose, increment, decrement, add, lowest_set_bit,
    set_bit, clear_bit, test_bit_at, odd, even,
    shift_left, shift_right,
)


def iterate_until(predicate, step, x):
    """
    Apply `step` while `predicate` holds and return the first value for which
    it fails.  The caller guarantees that such a value is reached.
    """
    while predicate(x):
        x = step(x)
    return x


def _check_depth(depth: int) -> int:
    if isinstance(depth, bool) or not isinstance(depth, int):
        raise TypeError(f"depth must be an int, got {type(depth).__name__}")
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")
    return depth


#------------------------------------------------------------------------------
# shift / unshift
#------------------------------------------------------------------------------

def shift_toward(depth: int, bits: InfiniteBits) -> InfiniteBits:
    """Set bit `depth`, then drop trailing zeros."""
    return iterate_until(even, shift_right, set_bit(bits, _check_depth(depth)))


def unshift_from(depth: int, bits: InfiniteBits) -> InfiniteBits:
    """Shift left until bit `depth` is set, then clear it."""
    _check_depth(depth)
    if not any(test_bit_at(bits, i) for i in range(depth + 1)):
        raise ValueError(f"no set bit at or below position {depth} in {bits}")
    shifted = iterate_until(lambda b: not test_bit_at(b, depth), shift_left, bits)
    return clear_bit(shifted, depth)


def forward_translate(depth: int, bits: InfiniteBits) -> InfiniteBits:
    return decrement(shift_toward(_check_depth(depth) + 1, bits))


def backward_translate(depth: int, bits: InfiniteBits) -> InfiniteBits:
    return unshift_from(_check_depth(depth) + 1, increment(bits))


#------------------------------------------------------------------------------
# Moves inside the interleaved indexing
#------------------------------------------------------------------------------

def active_parent(bits: InfiniteBits) -> InfiniteBits:
    """Nearest ancestor whose subtree is not yet folded into its sibling."""
    parent = shift_right(bits)
    if parent == ONES:
        raise ValueError(f"{bits} has no active parent")
    return iterate_until(odd, shift_right, parent)


def previous_segment(bits: InfiniteBits) -> InfiniteBits:
    if bits == ZEROS:
        raise ValueError("zero has no previous segment")
    return decrement(iterate_until(even, shift_right, bits))


#------------------------------------------------------------------------------
# Moves inside the Fenwick indexing
#------------------------------------------------------------------------------

def at_lowest_set_bit(bits: InfiniteBits, f) -> InfiniteBits:
    """
    Apply `f` to the part of `bits` that starts at its lowest set bit,
    keeping the zeros below it.  Zero is returned unchanged.
    """
    if bits == ZEROS:
        return bits
    prefix, bit = decompose(bits)
    if bit is Bit.ZERO:
        return make(at_lowest_set_bit(prefix, f), Bit.ZERO)
    return f(bits)


def fenwick_previous(bits: InfiniteBits) -> InfiniteBits:
    """i - lsb(i): the start of the segment preceding Fenwick node i."""
    return at_lowest_set_bit(bits, decrement)


def fenwick_next(bits: InfiniteBits) -> InfiniteBits:
    """i + lsb(i): the next Fenwick node whose segment covers i."""
    return add(bits, lowest_set_bit(bits))
