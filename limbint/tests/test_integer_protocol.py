"""
Tests for the Python number protocol on Integer.
"""

import pytest

from limbint import Integer, IntegerRing, ZZ, DivisionByZero


@pytest.fixture
def small():
    return IntegerRing("Z10", 10)


class TestOperators:
    @pytest.mark.parametrize("x,y", [(17, 5), (-17, 5), (17, -5), (-17, -5), (0, 3)])
    def test_binary_with_integers(self, small, x, y):
        a, b = small.from_int(x), small.from_int(y)
        assert int(a + b) == x + y
        assert int(a - b) == x - y
        assert int(a * b) == x * y
        assert int(a // b) == x // y
        assert int(a % b) == x % y
        q, r = divmod(a, b)
        assert (int(q), int(r)) == divmod(x, y)

    @pytest.mark.parametrize("x,y", [(17, 5), (-17, 5), (17, -5), (-17, -5)])
    def test_mixed_with_native_int(self, small, x, y):
        a = small.from_int(x)
        assert int(a + y) == x + y
        assert int(y + a) == x + y
        assert int(a - y) == x - y
        assert int(y - a) == y - x
        assert int(y * a) == x * y
        assert int(a // y) == x // y
        assert int(y // a) == y // x
        assert int(a % y) == x % y
        assert int(y % a) == y % x
        q, r = divmod(y, a)
        assert (int(q), int(r)) == divmod(y, x)

    def test_result_radix_follows_left_integer(self, small):
        assert (small.from_int(3) + 4).radix == 10
        assert (4 + small.from_int(3)).radix == 10

    def test_unary(self, small):
        a = small.from_int(-9)
        assert int(-a) == 9
        assert int(+a) == -9
        assert int(abs(a)) == 9
        assert +a is not a

    def test_power(self):
        assert int(ZZ.from_int(-3) ** 5) == -243
        assert int(ZZ.from_int(2) ** ZZ.from_int(70)) == 2 ** 70

    def test_three_argument_pow_unsupported(self):
        with pytest.raises(TypeError):
            pow(ZZ.from_int(2), 5, 3)

    def test_unsupported_operand(self):
        with pytest.raises(TypeError):
            ZZ.from_int(1) + 1.5
        with pytest.raises(TypeError):
            ZZ.from_int(1) < "2"

    def test_division_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            ZZ.from_int(1) // 0
        with pytest.raises(DivisionByZero):
            ZZ.from_int(1) % ZZ.from_int(0)

    def test_augmented_assignment_rebinds(self):
        a = ZZ.from_int(5)
        alias = a
        a += 1
        assert int(a) == 6
        assert int(alias) == 5


class TestComparisonsAndHashing:
    def test_rich_comparison(self, small):
        a, b = small.from_int(-3), ZZ.from_int(2)
        assert a < b and a <= b and b > a and b >= a
        assert a != b
        assert a == small.from_string("-3")
        assert a < 0 and a == -3 and 2 == b

    def test_sorting(self, small):
        values = [5, -2, 10**20, 0, -(10**20), 3]
        ints = sorted(small.from_int(v) for v in values)
        assert [int(v) for v in ints] == sorted(values)

    def test_hash_consistent_across_radices(self, small):
        assert hash(small.from_int(-12345)) == hash(ZZ.from_int(-12345))
        assert hash(ZZ.from_int(7)) == hash(7)
        assert len({small.from_int(4), ZZ.from_int(4), Integer.from_number(4)}) == 1

    def test_not_equal_to_other_types(self):
        assert ZZ.from_int(1) != 1.0
        assert ZZ.from_int(1) != "1"

    def test_bool(self):
        assert not ZZ.from_int(0)
        assert ZZ.from_int(-1)


class TestConversions:
    def test_int_is_exact(self, small):
        x = -(3 ** 400)
        assert int(small.from_int(x)) == x

    def test_str_and_repr(self, small):
        a = small.from_int(-255)
        assert str(a) == "-255"
        assert repr(a) == "Integer(-255, radix=10)"

    def test_to_sympy(self):
        sympy = pytest.importorskip("sympy")
        got = ZZ.from_int(-(10 ** 30)).to_sympy()
        assert isinstance(got, sympy.Integer)
        assert got == -(10 ** 30)
