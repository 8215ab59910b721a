# largeprimes/operations/pow.py
from .utils import require_non_negative


def pow(base: int, exp: int) -> int:
    """Binary (square-and-multiply) exponentiation without a modulus.

    The result grows with ``exp``; ``pow(b, 0) == 1`` for every ``b``.
    """
    require_non_negative("base", base)
    require_non_negative("exp", exp)
    result = 1
    while exp > 0:
        if exp & 1:
            result = result * base
        exp >>= 1
        base = base * base
    return result


def pow_mod(base: int, exp: int, modulus: int) -> int:
    """``base ** exp % modulus`` with every product reduced as it is formed.

    A zero modulus raises ``ZeroDivisionError``.
    """
    require_non_negative("base", base)
    require_non_negative("exp", exp)
    require_non_negative("modulus", modulus)
    if modulus == 0:
        raise ZeroDivisionError("pow_mod() modulus must be non-zero")
    result = 1 % modulus
    base %= modulus
    while exp > 0:
        if exp & 1:
            result = (result * base) % modulus
        exp >>= 1
        base = (base * base) % modulus
    return result
