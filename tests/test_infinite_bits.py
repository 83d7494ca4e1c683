import unittest
import os, sys

sys.path.insert(
    0,
    os.path.abspath(
        os.path.join(os.path.dirname(__file__), os.pardir)
    )
)

import infinite_bits as ib
from infinite_bits import Bit, Repeating, Extended, ZEROS, ONES


def is_normal(bits):
    """True if no Extended(Repeating(b), b) node occurs anywhere in bits."""
    while isinstance(bits, Extended):
        if isinstance(bits.prefix, Repeating) and bits.prefix.bit is bits.bit:
            return False
        bits = bits.prefix
    return True


class BitTests(unittest.TestCase):
    def test_logic(self):
        O, I = Bit.ZERO, Bit.ONE
        self.assertIs(I & I, I)
        self.assertIs(I & O, O)
        self.assertIs(O | I, I)
        self.assertIs(O | O, O)
        self.assertIs(~O, I)
        self.assertIs(~I, O)

    def test_int_conversion(self):
        self.assertIs(Bit.from_int(0), Bit.ZERO)
        self.assertIs(Bit.from_int(1), Bit.ONE)
        self.assertEqual(int(Bit.ONE), 1)
        self.assertEqual(int(Bit.ZERO), 0)
        with self.assertRaises(ValueError):
            Bit.from_int(2)


class InfiniteBitsTests(unittest.TestCase):
    def setUp(self):
        self.ints = list(range(-70, 71)) + [
            255, 256, -256, -257, 2**40 + 5, -(2**40) - 3, 2**63 - 1, -(2**63)
        ]
        self.small = range(-20, 21)

    def test_roundtrip(self):
        for n in self.ints:
            self.assertEqual(ib.to_integer(ib.from_integer(n)), n)
            self.assertEqual(int(ib.InfiniteBits.from_int(n)), n)

    def test_fixed_points(self):
        self.assertEqual(ib.from_integer(0), Repeating(Bit.ZERO))
        self.assertEqual(ib.from_integer(-1), Repeating(Bit.ONE))

    def test_structure_of_26(self):
        O, I = Bit.ZERO, Bit.ONE
        exp = ib.make(ib.make(ib.make(ib.make(ib.make(ZEROS, I), I), O), I), O)
        self.assertEqual(ib.from_integer(26), exp)
        self.assertIsInstance(exp, Extended)
        self.assertIs(exp.bit, O)

    def test_make_collapses_redundant_bit(self):
        self.assertIs(ib.make(ZEROS, Bit.ZERO), ZEROS)
        self.assertIs(ib.make(ONES, Bit.ONE), ONES)
        self.assertEqual(ib.make(ZEROS, Bit.ONE), ib.from_integer(1))
        self.assertEqual(ib.make(ONES, Bit.ZERO), ib.from_integer(-2))

    def test_normalization(self):
        for n in self.ints:
            self.assertTrue(is_normal(ib.from_integer(n)), n)
        for a in self.small:
            for b in self.small:
                x, y = ib.from_integer(a), ib.from_integer(b)
                for r in (x + y, x & y, x | y, x - y, ~x, -x):
                    self.assertTrue(is_normal(r), (a, b))

    def test_equality_is_value_equality(self):
        x = ib.add(ib.from_integer(19), ib.from_integer(-7))
        y = ib.from_integer(12)
        self.assertEqual(x, y)
        self.assertEqual(hash(x), hash(y))
        self.assertNotEqual(ib.from_integer(12), ib.from_integer(13))
        self.assertEqual(len({ib.from_integer(n % 5) for n in range(40)}), 5)

    def test_decompose(self):
        self.assertEqual(ib.decompose(ZEROS), (ZEROS, Bit.ZERO))
        self.assertEqual(ib.decompose(ONES), (ONES, Bit.ONE))
        self.assertEqual(ib.decompose(ib.from_integer(5)),
                         (ib.from_integer(2), Bit.ONE))
        self.assertEqual(ib.decompose(ib.from_integer(-2)), (ONES, Bit.ZERO))

    def test_from_integer_rejects_non_int(self):
        for bad in (1.5, "3", None, True):
            with self.assertRaises(TypeError):
                ib.from_integer(bad)

    # ------------------------------------------------------------
    # arithmetic
    # ------------------------------------------------------------
    def test_increment_decrement(self):
        for n in self.ints:
            x = ib.from_integer(n)
            self.assertEqual(ib.to_integer(ib.increment(x)), n + 1)
            self.assertEqual(ib.to_integer(ib.decrement(x)), n - 1)

    def test_add_negate_subtract(self):
        for a in self.small:
            x = ib.from_integer(a)
            self.assertEqual(ib.to_integer(ib.negate(x)), -a)
            for b in self.small:
                y = ib.from_integer(b)
                self.assertEqual(ib.to_integer(ib.add(x, y)), a + b)
                self.assertEqual(ib.to_integer(ib.subtract(x, y)), a - b)

    def test_add_large(self):
        pairs = [(2**40 + 5, 2**40 - 5), (-(2**63), 2**63 - 1), (123456789, -987654321)]
        for a, b in pairs:
            self.assertEqual(int(ib.from_integer(a) + ib.from_integer(b)), a + b)

    def test_minus_one_plus_minus_one(self):
        self.assertEqual(ib.add(ONES, ONES), ib.make(ONES, Bit.ZERO))
        self.assertEqual(ib.to_integer(ib.add(ONES, ONES)), -2)

    def test_operators(self):
        x, y = ib.from_integer(3), ib.from_integer(4)
        self.assertEqual(x + y, ib.from_integer(7))
        self.assertEqual(x - y, ib.from_integer(-1))
        self.assertEqual(-x, ib.from_integer(-3))
        self.assertEqual(x & y, ib.from_integer(0))
        self.assertEqual(x | y, ib.from_integer(7))
        self.assertEqual(~x, ib.from_integer(-4))
        self.assertEqual(x << 3, ib.from_integer(24))
        self.assertEqual(ib.from_integer(-13) >> 2, ib.from_integer(-4))
        with self.assertRaises(TypeError):
            x + 1
        with self.assertRaises(ValueError):
            x << -1

    # ------------------------------------------------------------
    # bitwise
    # ------------------------------------------------------------
    def test_bitwise(self):
        for a in self.small:
            x = ib.from_integer(a)
            self.assertEqual(ib.to_integer(ib.bitwise_not(x)), ~a)
            for b in self.small:
                y = ib.from_integer(b)
                self.assertEqual(ib.to_integer(ib.bitwise_and(x, y)), a & b)
                self.assertEqual(ib.to_integer(ib.bitwise_or(x, y)), a | b)

    def test_lowest_set_bit(self):
        self.assertEqual(ib.to_integer(ib.lowest_set_bit(ib.from_integer(26))), 2)
        self.assertEqual(ib.lowest_set_bit(ZEROS), ZEROS)
        self.assertEqual(ib.to_integer(ib.lsb(ONES)), 1)
        for n in self.ints:
            self.assertEqual(ib.to_integer(ib.lsb(ib.from_integer(n))), n & -n)

    # ------------------------------------------------------------
    # shifts and indexed access
    # ------------------------------------------------------------
    def test_shifts(self):
        for n in self.ints:
            x = ib.from_integer(n)
            self.assertEqual(ib.to_integer(ib.shift_right(x)), n // 2)
            self.assertEqual(ib.to_integer(ib.shift_left(x)), n * 2)

    def test_test_bit_at(self):
        for n in self.ints:
            x = ib.from_integer(n)
            for k in range(12):
                self.assertEqual(ib.test_bit_at(x, k), (n >> k) & 1 == 1, (n, k))
            self.assertEqual(ib.odd(x), n % 2 == 1)
            self.assertEqual(ib.even(x), n % 2 == 0)

    def test_set_and_clear(self):
        for n in range(-40, 41):
            x = ib.from_integer(n)
            for k in range(8):
                s = ib.set_bit(x, k)
                c = ib.clear_bit(x, k)
                self.assertTrue(ib.test_bit_at(s, k))
                self.assertFalse(ib.test_bit_at(c, k))
                self.assertEqual(ib.to_integer(s), n | (1 << k))
                self.assertEqual(ib.to_integer(c), n & ~(1 << k))
                self.assertTrue(is_normal(s) and is_normal(c))

    def test_set_bit_at(self):
        self.assertEqual(ib.set_bit_at(ZEROS, 0, Bit.ZERO), ZEROS)
        self.assertEqual(ib.set_bit_at(ONES, 0, Bit.ONE), ONES)
        self.assertEqual(ib.to_integer(ib.set_bit_at(ONES, 3, Bit.ZERO)), -9)
        self.assertEqual(ib.to_integer(ib.set_bit_at(ZEROS, 5, Bit.ONE)), 32)

    def test_scenarios(self):
        self.assertEqual(ib.to_integer(ib.set_bit(ib.from_integer(24), 3)), 24)
        self.assertEqual(ib.to_integer(ib.set_bit(ib.from_integer(16), 3)), 24)
        self.assertEqual(ib.to_integer(ib.decrement(ib.from_integer(0))), -1)
        self.assertEqual(ib.to_integer(ib.increment(ib.from_integer(-1))), 0)

    def test_negative_index(self):
        x = ib.from_integer(26)
        with self.assertRaises(ValueError):
            ib.set_bit(x, -1)
        with self.assertRaises(ValueError):
            ib.clear_bit(x, -2)
        with self.assertRaises(ValueError):
            ib.test_bit_at(x, -1)
        with self.assertRaises(TypeError):
            ib.set_bit_at(x, 1.0, Bit.ONE)

    # ------------------------------------------------------------
    # display
    # ------------------------------------------------------------
    def test_display(self):
        self.assertEqual(str(ib.from_integer(26)), "...00011010")
        self.assertEqual(str(ib.from_integer(0)), "...000")
        self.assertEqual(str(ib.from_integer(-1)), "...111")
        self.assertEqual(str(ib.from_integer(-6)), "...111010")
        self.assertEqual(repr(ib.from_integer(5)), "InfiniteBits(...000101)")


if __name__ == '__main__':
    unittest.main()
