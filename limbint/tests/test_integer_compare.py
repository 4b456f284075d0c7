"""
Unit tests for Integer comparison, predicates and conversions.
"""

import unittest
import random

from limbint import (
    Integer, IntegerRing, Sign, ZZ,
    MAX_NUMBER, MIN_NUMBER, RangeViolation, InvalidDigit,
)


class TestCompare(unittest.TestCase):

    def setUp(self):
        rng = random.Random(11)
        self.values = [0, 1, -1, 2**53, -(2**53), 10**30, -(10**30)]
        self.values += [rng.randint(-10**20, 10**20) for _ in range(15)]

    def test_total_order_matches_int(self):
        for x in self.values:
            for y in self.values:
                a = IntegerRing("Z10", 10).from_int(x)
                b = IntegerRing("Z16", 16).from_int(y)
                want = (x > y) - (x < y)
                self.assertEqual(a.cmp(b), want, f"cmp({x}, {y})")
                self.assertEqual(a.eq(b), x == y)
                self.assertEqual(a.ne(b), x != y)
                self.assertEqual(a.lt(b), x < y)
                self.assertEqual(a.le(b), x <= y)
                self.assertEqual(a.gt(b), x > y)
                self.assertEqual(a.ge(b), x >= y)

    def test_native_variants(self):
        for x in self.values:
            a = ZZ.from_int(x)
            self.assertEqual(a.cmpn(5), (x > 5) - (x < 5))
            self.assertEqual(a.eqn(x), True)
            self.assertEqual(a.nen(x), False)
            self.assertEqual(a.ltn(0), x < 0)
            self.assertEqual(a.len_(0), x <= 0)
            self.assertEqual(a.gtn(0), x > 0)
            self.assertEqual(a.gen(0), x >= 0)

    def test_zero_equals_zero_regardless_of_limbs(self):
        a = Integer(10, Sign.NEGATIVE, [0, 0, 0])
        b = Integer(7, Sign.NONNEGATIVE, [])
        self.assertEqual(a.cmp(b), 0)
        self.assertTrue(a.eq(b))

    def test_leading_zeros_ignored(self):
        a = Integer(10, Sign.NEGATIVE, [0, 0, 4, 2])
        b = Integer(10, Sign.NEGATIVE, [4, 2])
        self.assertEqual(a.cmp(b), 0)


class TestPredicates(unittest.TestCase):

    def test_sign(self):
        self.assertEqual(ZZ.from_int(-5).sign(), -1)
        self.assertEqual(ZZ.from_int(0).sign(), 0)
        self.assertEqual(ZZ.from_int(5).sign(), 1)

    def test_predicates(self):
        for x in [-3, -2, -1, 0, 1, 2, 3]:
            a = ZZ.from_int(x)
            self.assertEqual(a.iszero(), x == 0)
            self.assertEqual(a.isnonzero(), x != 0)
            self.assertEqual(a.isone(), x == 1)
            self.assertEqual(a.isnegative(), x < 0)
            self.assertEqual(a.isnonnegative(), x >= 0)
            self.assertEqual(a.ispositive(), x > 0)
            self.assertEqual(a.isnonpositive(), x <= 0)
            self.assertEqual(a.iseven(), x % 2 == 0)
            self.assertEqual(a.isodd(), x % 2 == 1)
            self.assertEqual(int(a.parity()), x % 2)

    def test_isone_with_leading_zeros(self):
        self.assertTrue(Integer(10, Sign.NONNEGATIVE, [0, 1]).isone())


class TestConversions(unittest.TestCase):

    def test_scenario_hex_to_decimal(self):
        self.assertEqual(ZZ.from_string("ff", 16).to_string(10), "255")

    def test_round_trip(self):
        rng = random.Random(77)
        for radix in [2, 10, 2**16, 94906265]:
            ring = IntegerRing(f"Z{radix}", radix)
            for base in [2, 3, 8, 10, 16, 36]:
                for _ in range(10):
                    x = rng.randint(-10**40, 10**40)
                    v = ring.from_int(x)
                    text = v.to_string(base)
                    self.assertEqual(int(text, base), x)
                    self.assertTrue(ring.from_string(text, base).eq(v))

    def test_text_format(self):
        a = ZZ.from_int(-255)
        self.assertEqual(a.to_string(), "-255")
        self.assertEqual(a.bin(), "-11111111")
        self.assertEqual(a.oct(), "-377")
        self.assertEqual(a.hex(), "-ff")
        self.assertEqual(a.to_json(), "-ff")
        self.assertEqual(ZZ.from_int(0).to_string(2), "0")
        self.assertEqual(ZZ.from_int(35).to_string(36), "z")

    def test_bad_display_base(self):
        with self.assertRaises(InvalidDigit):
            ZZ.from_int(5).to_string(37)

    def test_digits_little_endian(self):
        a = ZZ.from_int(-1234)
        self.assertEqual(a.digits(), [4, 3, 2, 1])
        self.assertEqual(a.digits(16), [2, 13, 4])
        self.assertEqual(ZZ.from_int(6).bits(), [0, 1, 1])
        self.assertEqual(ZZ.from_int(0).digits(), [0])

    def test_digits_rejects_degenerate_base(self):
        for base in [1, 0, -2]:
            with self.assertRaises(InvalidDigit):
                ZZ.from_int(5).digits(base)

    def test_value_of(self):
        for x in [0, 1, -1, MAX_NUMBER, MIN_NUMBER, 123456789012]:
            for radix in [2, 10, 2**16]:
                a = IntegerRing("Z", radix).from_int(x)
                self.assertEqual(a.value_of(), x)
                self.assertEqual(a.to_number(), x)
                self.assertIs(type(a.value_of()), int)

    def test_value_of_outside_safe_window(self):
        for x in [MAX_NUMBER + 1, MIN_NUMBER - 1, 10**30, -(10**30)]:
            with self.assertRaises(RangeViolation):
                ZZ.from_int(x).value_of()
            with self.assertRaises(ValueError):
                ZZ.from_int(x).to_number()


if __name__ == "__main__":
    unittest.main()
