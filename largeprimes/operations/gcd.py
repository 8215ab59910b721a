# largeprimes/operations/gcd.py
from .utils import require_non_negative


def gcd(a: int, b: int) -> int:
    # Euclid; gcd(0, 0) == 0
    require_non_negative("a", a)
    require_non_negative("b", b)
    while b:
        a, b = b, a % b
    return a
