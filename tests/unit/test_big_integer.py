"""
Тесты для BigInteger

Проверяет:
1. Конструирование из int / str / BigInteger и отказ для прочих типов
2. Арифметические тождества на случайных значениях (эталон — Python int)
3. Деление с усечением и остаток со знаком делимого
4. Полный порядок, согласованный с арифметикой
5. Десятичный round-trip и канонический ноль
6. Сериализацию в контракт big_integer
"""

import io

import pytest
from jsonschema import ValidationError

from exactarith import BigInteger, DivisionByZero, InvalidDecimalFormat
from tests.helpers import random_int, truncating_divmod

# =============================================================================
# КОНКРЕТНЫЕ СЦЕНАРИИ
# =============================================================================


class TestScenarios:
    """Эталонные сценарии"""

    def test_carry_across_limbs(self) -> None:
        assert str(BigInteger("99999999") + BigInteger("1")) == "100000000"

    def test_multi_limb_product(self) -> None:
        product = BigInteger("1000000000000") * BigInteger("999999999999")
        assert str(product) == "999999999999000000000000"

    def test_truncating_division(self) -> None:
        assert str(BigInteger("7") // BigInteger("2")) == "3"
        assert str(BigInteger("7") % BigInteger("2")) == "1"
        assert str(BigInteger("-7") // BigInteger("2")) == "-3"
        assert str(BigInteger("-7") % BigInteger("2")) == "-1"

    def test_negative_zero_literal(self) -> None:
        zero = BigInteger("-0")
        assert str(zero) == "0"
        assert not zero.is_negative
        assert zero == BigInteger(0)


# =============================================================================
# КОНСТРУИРОВАНИЕ
# =============================================================================


class TestConstruction:
    """Тесты конструкторов"""

    def test_default_is_zero(self) -> None:
        assert BigInteger().is_zero()
        assert BigInteger().limbs == (0,)

    def test_from_int(self) -> None:
        value = BigInteger(-123456789)
        assert value.is_negative
        assert value.limbs == (6789, 2345, 1)

    def test_from_str(self) -> None:
        assert BigInteger("000123") == 123

    def test_copy_is_independent_value(self) -> None:
        original = BigInteger(5)
        copy = BigInteger(original)
        copy += 1
        assert original == 5
        assert copy == 6

    def test_invalid_string_raises(self) -> None:
        with pytest.raises(InvalidDecimalFormat):
            BigInteger("12x")

    @pytest.mark.parametrize("value", [1.5, None, [1], True])
    def test_unsupported_type_raises(self, value) -> None:
        with pytest.raises(TypeError):
            BigInteger(value)

    def test_read_from_stream(self) -> None:
        stream = io.StringIO("17 -0042\n")
        assert BigInteger.read(stream) == 17
        assert BigInteger.read(stream) == -42


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


class TestArithmeticProperties:
    """Арифметические тождества"""

    def test_add_then_subtract(self, rng) -> None:
        for _ in range(50):
            a, b = BigInteger(random_int(rng, 50)), BigInteger(random_int(rng, 50))
            assert (a + b) - b == a

    def test_additive_inverse(self, rng) -> None:
        for _ in range(30):
            a = BigInteger(random_int(rng, 50))
            result = a + (-a)
            assert result == 0
            assert not result.is_negative

    def test_multiplicative_identity_and_zero(self, rng) -> None:
        for _ in range(20):
            a = BigInteger(random_int(rng, 60))
            assert a * 1 == a
            zero = a * 0
            assert zero == 0
            assert not zero.is_negative

    def test_matches_int(self, rng) -> None:
        for _ in range(40):
            x, y = random_int(rng, 80), random_int(rng, 80)
            a, b = BigInteger(x), BigInteger(y)
            assert int(a + b) == x + y
            assert int(a - b) == x - y
            assert int(a * b) == x * y

    def test_product_sign_is_xor(self) -> None:
        assert BigInteger(-3) * BigInteger(4) == -12
        assert BigInteger(-3) * BigInteger(-4) == 12
        assert BigInteger(3) * BigInteger(-4) == -12

    def test_negative_times_zero_is_canonical(self) -> None:
        result = BigInteger(-5) * 0
        assert not result.is_negative
        assert str(result) == "0"

    def test_division_identity(self, rng) -> None:
        for _ in range(40):
            x = random_int(rng, 50)
            y = random_int(rng, 20) or 7
            a, b = BigInteger(x), BigInteger(y)
            q, r = divmod(a, b)
            assert q * b + r == a
            assert (int(q), int(r)) == truncating_divmod(x, y)
            assert r.is_zero() or r.is_negative == a.is_negative

    def test_floordiv_and_mod_agree_with_divmod(self) -> None:
        a, b = BigInteger("-123456789012345"), BigInteger("9876")
        assert (a // b, a % b) == divmod(a, b)

    def test_division_by_zero(self) -> None:
        with pytest.raises(DivisionByZero):
            BigInteger(5) // 0
        with pytest.raises(DivisionByZero):
            BigInteger(5) % BigInteger(0)

    def test_reflected_operators_with_int(self) -> None:
        a = BigInteger(10)
        assert 5 + a == 15
        assert 5 - a == -5
        assert 3 * a == 30
        assert 25 // a == 2
        assert -25 % a == -5
        assert divmod(-25, a) == (BigInteger(-2), BigInteger(-5))

    def test_unsupported_operand(self) -> None:
        with pytest.raises(TypeError):
            BigInteger(1) + 1.5

    def test_compound_operators_rebind(self) -> None:
        value = BigInteger(10)
        alias = value
        value += 5
        value *= 2
        value -= 1
        value //= 3
        value %= 4
        assert value == 1
        assert alias == 10

    def test_increment_decrement(self) -> None:
        assert BigInteger(9999).increment() == 10000
        assert BigInteger(10000).decrement() == 9999
        assert BigInteger(0).decrement() == -1
        assert BigInteger(-1).increment() == 0

    def test_unary(self) -> None:
        assert -BigInteger(5) == -5
        assert +BigInteger(5) == 5
        assert abs(BigInteger(-5)) == 5
        assert not (-BigInteger(0)).is_negative

    def test_shift(self) -> None:
        assert BigInteger(-12).shift(5) == -1200000
        assert BigInteger(0).shift(3) == 0

    def test_digit_count(self) -> None:
        assert BigInteger(0).digit_count() == 1
        assert BigInteger(-10000).digit_count() == 5


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


class TestOrdering:
    """Полный порядок, согласованный с арифметикой"""

    def test_matches_int_order(self, rng) -> None:
        for _ in range(60):
            x, y = random_int(rng, 12), random_int(rng, 12)
            a, b = BigInteger(x), BigInteger(y)
            assert (a < b) == (x < y)
            assert (a <= b) == (x <= y)
            assert (a > b) == (x > y)
            assert (a >= b) == (x >= y)
            assert (a == b) == (x == y)
            assert a.compare(b) == (x > y) - (x < y)

    def test_negation_reverses_order(self, rng) -> None:
        for _ in range(30):
            a, b = BigInteger(random_int(rng, 20)), BigInteger(random_int(rng, 20))
            if a < b:
                assert -a > -b

    def test_multiplication_by_positive_preserves_order(self, rng) -> None:
        for _ in range(20):
            a, b = BigInteger(random_int(rng, 20)), BigInteger(random_int(rng, 20))
            c = BigInteger(abs(random_int(rng, 10)) + 1)
            if a < b:
                assert a * c < b * c

    def test_reflexive(self) -> None:
        a = BigInteger("-98765432109876543210")
        assert a == a
        assert a.compare(a) == 0

    def test_comparison_with_int(self) -> None:
        assert BigInteger(5) > 3
        assert 3 < BigInteger(5)
        assert BigInteger(-5) == -5

    def test_compare_unsupported_type_raises(self) -> None:
        with pytest.raises(TypeError):
            BigInteger(1).compare("1")

    def test_hash_consistent_with_int(self) -> None:
        assert hash(BigInteger(12345678901234567890)) == hash(12345678901234567890)
        assert len({BigInteger(3), BigInteger("3"), 3}) == 1

    def test_bool(self) -> None:
        assert BigInteger(7)
        assert not BigInteger("-0")


# =============================================================================
# ТЕКСТ И СЕРИАЛИЗАЦИЯ
# =============================================================================


class TestTextRoundTrip:
    """Десятичный round-trip"""

    def test_parse_format(self, rng) -> None:
        for _ in range(40):
            value = BigInteger(random_int(rng, 70))
            assert BigInteger(str(value)) == value

    @pytest.mark.parametrize(
        "text, expected",
        [("0007", "7"), ("-0", "0"), ("-000", "0"), ("-00120", "-120"), ("00000000", "0")],
    )
    def test_normalizes_input(self, text: str, expected: str) -> None:
        assert str(BigInteger(text)) == expected

    def test_repr(self) -> None:
        assert repr(BigInteger(-42)) == "BigInteger('-42')"


class TestSerialization:
    """Тесты to_dict / from_dict"""

    def test_round_trip(self) -> None:
        value = BigInteger("-123456789")
        data = value.to_dict()
        assert data == {"negative": True, "limbs": [6789, 2345, 1]}
        assert BigInteger.from_dict(data) == value

    def test_schema_violation(self) -> None:
        with pytest.raises(ValidationError):
            BigInteger.from_dict({"negative": False, "limbs": [10000]})

    def test_trailing_zero_rejected(self) -> None:
        with pytest.raises(ValueError, match="trailing zero"):
            BigInteger.from_dict({"negative": False, "limbs": [1, 0]})

    def test_negative_zero_rejected(self) -> None:
        with pytest.raises(ValueError, match="negative"):
            BigInteger.from_dict({"negative": True, "limbs": [0]})
