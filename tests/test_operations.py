import builtins

import pytest

from largeprimes.operations import gcd, pow, pow_mod, trailing_zero_count


@pytest.mark.parametrize("base", [0, 1, 2, 10**50])
def test_pow_zero_exponent_is_one(base):
    assert pow(base, 0) == 1


def test_pow_values():
    assert pow(2, 10) == 1024
    assert pow(2, 100) == 1267650600228229401496703205376
    assert pow(0, 5) == 0
    assert pow(7, 1) == 7
    assert pow(12345678901234567890, 7) == 12345678901234567890 ** 7


def test_pow_rejects_negative_operands():
    with pytest.raises(ValueError):
        pow(2, -1)
    with pytest.raises(ValueError):
        pow(-2, 3)


@pytest.mark.parametrize(
    "base, exp, modulus, expected",
    [
        (2, 2, 3, 1),
        (2, 0, 3, 1),
        (2, 1, 2, 0),
        (4, 13, 497, 445),
        (2, 10, 100, 24),
        (2, 100, 1000, 376),
        (2, 1000, 10000, 9376),
    ],
)
def test_pow_mod_known_values(base, exp, modulus, expected):
    assert pow_mod(base, exp, modulus) == expected


def test_pow_mod_matches_builtin_on_large_operands():
    base = 3**200 + 17
    exp = 2**127 - 1
    modulus = 10**60 + 7
    assert pow_mod(base, exp, modulus) == builtins.pow(base, exp, modulus)
    assert pow_mod(2, 10000, 100000) == builtins.pow(2, 10000, 100000)


def test_pow_mod_result_is_reduced():
    assert pow_mod(5, 0, 1) == 0
    assert pow_mod(10**30, 0, 7) == 1
    for m in range(1, 40):
        assert 0 <= pow_mod(123456789, 987, m) < m


@pytest.mark.parametrize("e1, e2", [(0, 0), (0, 9), (3, 5), (100, 257), (2**70, 31)])
def test_pow_mod_exponent_addition(e1, e2):
    base, modulus = 987654321, 1000000007
    combined = pow_mod(base, e1 + e2, modulus)
    split = pow_mod(base, e1, modulus) * pow_mod(base, e2, modulus) % modulus
    assert combined == split


def test_pow_mod_zero_modulus_fails_loudly():
    with pytest.raises(ZeroDivisionError):
        pow_mod(2, 3, 0)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (0, 0, 0),
        (1, 0, 1),
        (0, 1, 1),
        (2, 2, 2),
        (2, 3, 1),
        (2, 4, 2),
        (3, 5, 1),
        (3, 6, 3),
        (4, 7, 1),
        (4, 8, 4),
        (5, 9, 1),
        (5, 10, 5),
        (123456, 123456, 123456),
        (123456, 123457, 1),
        (123456, 123458, 2),
        (123456, 123459, 3),
        (123456, 123460, 4),
        (123456, 123462, 6),
        (123456, 123464, 8),
        (123456, 123465, 3),
    ],
)
def test_gcd_known_values(a, b, expected):
    assert gcd(a, b) == expected
    assert gcd(b, a) == expected


@pytest.mark.parametrize("a", [0, 1, 17, 10**40 + 3])
def test_gcd_identities(a):
    assert gcd(a, 0) == a
    assert gcd(0, a) == a
    assert gcd(a, a) == a


def test_gcd_big_operands():
    p, q, r = 2**89 - 1, 2**61 - 1, 10**20 + 39
    assert gcd(p * r, q * r) == r


@pytest.mark.parametrize(
    "num, expected",
    [(1, 0), (2, 1), (3, 0), (8, 3), (12, 2), (96, 5), (2**200, 200), (3 * 2**200, 200)],
)
def test_trailing_zero_count(num, expected):
    assert trailing_zero_count(num) == expected


def test_trailing_zero_count_rejects_zero():
    with pytest.raises(ValueError):
        trailing_zero_count(0)
