from dataclasses import dataclass
from enum import Enum

DISPLAY_REPEAT = 3   # copies of the tail bit shown after the ellipsis

#------------------------------------------------------------------------------
# Bit
#------------------------------------------------------------------------------

class Bit(Enum):
    ZERO = 0
    ONE  = 1

    @classmethod
    def from_int(cls, value: int) -> "Bit":
        if value == 0:
            return cls.ZERO
        if value == 1:
            return cls.ONE
        raise ValueError(f"bit value must be 0 or 1, got {value!r}")

    def __int__(self) -> int:
        return self.value

    def __and__(self, other: "Bit") -> "Bit":
        return Bit.ONE if self is Bit.ONE and other is Bit.ONE else Bit.ZERO

    def __or__(self, other: "Bit") -> "Bit":
        return Bit.ONE if self is Bit.ONE or other is Bit.ONE else Bit.ZERO

    def __invert__(self) -> "Bit":
        return Bit.ZERO if self is Bit.ONE else Bit.ONE

    def __str__(self) -> str:
        return str(self.value)


#------------------------------------------------------------------------------
# InfiniteBits: Repeating(b) | Extended(prefix, b)
#------------------------------------------------------------------------------

class InfiniteBits:
    """
    Two's-complement integer as an eventually-constant bit string.

    Only the finite part that differs from the constant tail is stored:
      Repeating(b)        ...bbbb        (0 for ZERO, -1 for ONE)
      Extended(p, b)      p followed by one more low bit b

    Never instantiate the variants by hand; build values with `make`,
    `from_integer` or the operations below so that
    Extended(Repeating(b), b) can never exist.
    """
    __slots__ = ()

    @classmethod
    def from_int(cls, n: int) -> "InfiniteBits":
        return from_integer(n)

    def __int__(self) -> int:
        return to_integer(self)

    # ---- arithmetic --------------------------------------------------------
    def __add__(self, other):
        if not isinstance(other, InfiniteBits):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other):
        if not isinstance(other, InfiniteBits):
            return NotImplemented
        return subtract(self, other)

    def __neg__(self):
        return negate(self)

    # ---- bitwise -----------------------------------------------------------
    def __and__(self, other):
        if not isinstance(other, InfiniteBits):
            return NotImplemented
        return bitwise_and(self, other)

    def __or__(self, other):
        if not isinstance(other, InfiniteBits):
            return NotImplemented
        return bitwise_or(self, other)

    def __invert__(self):
        return bitwise_not(self)

    def __lshift__(self, count: int):
        bits = self
        for _ in range(_check_index(count)):
            bits = shift_left(bits)
        return bits

    def __rshift__(self, count: int):
        bits = self
        for _ in range(_check_index(count)):
            bits = shift_right(bits)
        return bits

    # ---- display -----------------------------------------------------------
    def __str__(self) -> str:
        low = []
        bits = self
        while isinstance(bits, Extended):
            low.append(str(bits.bit))
            bits = bits.prefix
        tail = str(bits.bit) * DISPLAY_REPEAT
        return "..." + tail + "".join(reversed(low))

    def __repr__(self) -> str:
        return f"InfiniteBits({self})"


@dataclass(frozen=True, repr=False)
class Repeating(InfiniteBits):
    bit: Bit


@dataclass(frozen=True, repr=False)
class Extended(InfiniteBits):
    prefix: InfiniteBits
    bit: Bit


ZEROS = Repeating(Bit.ZERO)
ONES  = Repeating(Bit.ONE)


#------------------------------------------------------------------------------
# Construction & normalization
#------------------------------------------------------------------------------

def make(prefix: InfiniteBits, bit: Bit) -> InfiniteBits:
    """Append `bit` below `prefix`, collapsing a redundant repeat."""
    if isinstance(prefix, Repeating) and prefix.bit is bit:
        return prefix
    return Extended(prefix, bit)


def decompose(bits: InfiniteBits):
    """Split into (prefix, least significant bit)."""
    if isinstance(bits, Repeating):
        return bits, bits.bit
    return bits.prefix, bits.bit


def from_integer(n: int) -> InfiniteBits:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if n == 0:
        return ZEROS
    if n == -1:
        return ONES
    return make(from_integer(n // 2), Bit.from_int(n % 2))


def to_integer(bits: InfiniteBits) -> int:
    if isinstance(bits, Repeating):
        return 0 if bits.bit is Bit.ZERO else -1
    return 2 * to_integer(bits.prefix) + int(bits.bit)


#------------------------------------------------------------------------------
# Arithmetic
#------------------------------------------------------------------------------

def increment(bits: InfiniteBits) -> InfiniteBits:
    if bits == ONES:
        return ZEROS
    prefix, bit = decompose(bits)
    if bit is Bit.ZERO:
        return make(prefix, Bit.ONE)
    return make(increment(prefix), Bit.ZERO)          # carry


def decrement(bits: InfiniteBits) -> InfiniteBits:
    if bits == ZEROS:
        return ONES
    prefix, bit = decompose(bits)
    if bit is Bit.ONE:
        return make(prefix, Bit.ZERO)
    return make(decrement(prefix), Bit.ONE)           # borrow


def add(x: InfiniteBits, y: InfiniteBits) -> InfiniteBits:
    if y == ZEROS:
        return x
    if x == ZEROS:
        return y
    if x == ONES and y == ONES:
        return make(ONES, Bit.ZERO)                   # -2
    xs, xb = decompose(x)
    ys, yb = decompose(y)
    if xb is Bit.ONE and yb is Bit.ONE:
        return make(increment(add(xs, ys)), Bit.ZERO)
    return make(add(xs, ys), xb | yb)


def negate(bits: InfiniteBits) -> InfiniteBits:
    return increment(bitwise_not(bits))


def subtract(x: InfiniteBits, y: InfiniteBits) -> InfiniteBits:
    return add(x, negate(y))


#------------------------------------------------------------------------------
# Bitwise operations
#------------------------------------------------------------------------------

def bitwise_and(x: InfiniteBits, y: InfiniteBits) -> InfiniteBits:
    if isinstance(x, Repeating) and isinstance(y, Repeating):
        return Repeating(x.bit & y.bit)
    xs, xb = decompose(x)
    ys, yb = decompose(y)
    return make(bitwise_and(xs, ys), xb & yb)


def bitwise_or(x: InfiniteBits, y: InfiniteBits) -> InfiniteBits:
    if isinstance(x, Repeating) and isinstance(y, Repeating):
        return Repeating(x.bit | y.bit)
    xs, xb = decompose(x)
    ys, yb = decompose(y)
    return make(bitwise_or(xs, ys), xb | yb)


def bitwise_not(bits: InfiniteBits) -> InfiniteBits:
    if isinstance(bits, Repeating):
        return Repeating(~bits.bit)
    return make(bitwise_not(bits.prefix), ~bits.bit)


def lowest_set_bit(bits: InfiniteBits) -> InfiniteBits:
    """
    Isolate the least significant 1 bit:  ...011010 -> ...000010.
    Zero has no set bit and maps to itself.
    """
    if bits == ZEROS:
        return ZEROS
    prefix, bit = decompose(bits)
    if bit is Bit.ZERO:
        return make(lowest_set_bit(prefix), Bit.ZERO)
    return make(ZEROS, Bit.ONE)


lsb = lowest_set_bit


#------------------------------------------------------------------------------
# Indexed access
#------------------------------------------------------------------------------

def _check_index(idx: int) -> int:
    if isinstance(idx, bool) or not isinstance(idx, int):
        raise TypeError(f"bit index must be an int, got {type(idx).__name__}")
    if idx < 0:
        raise ValueError(f"bit index must be non-negative, got {idx}")
    return idx


def set_bit_at(bits: InfiniteBits, idx: int, new_bit: Bit) -> InfiniteBits:
    return _set_bit_at(bits, _check_index(idx), new_bit)


def _set_bit_at(bits, idx, new_bit):
    prefix, bit = decompose(bits)
    if idx == 0:
        return make(prefix, new_bit)
    return make(_set_bit_at(prefix, idx - 1, new_bit), bit)


def set_bit(bits: InfiniteBits, idx: int) -> InfiniteBits:
    return set_bit_at(bits, idx, Bit.ONE)


def clear_bit(bits: InfiniteBits, idx: int) -> InfiniteBits:
    return set_bit_at(bits, idx, Bit.ZERO)


def test_bit_at(bits: InfiniteBits, idx: int) -> bool:
    for _ in range(_check_index(idx)):
        # past the stored prefix every bit is the tail bit
        if isinstance(bits, Repeating):
            break
        bits = bits.prefix
    return decompose(bits)[1] is Bit.ONE


def odd(bits: InfiniteBits) -> bool:
    return test_bit_at(bits, 0)


def even(bits: InfiniteBits) -> bool:
    return not odd(bits)


#------------------------------------------------------------------------------
# Shifts
#------------------------------------------------------------------------------

def shift_right(bits: InfiniteBits) -> InfiniteBits:
    return decompose(bits)[0]


def shift_left(bits: InfiniteBits) -> InfiniteBits:
    return make(bits, Bit.ZERO)
