# largeprimes/primality/lucas_lehmer.py
from ..operations import pow


def lucas_lehmer_test(p: int) -> bool:
    """Whether the Mersenne number ``2**p - 1`` is prime.

    Exact, but only for numbers of the Mersenne form. ``p == 2`` is answered
    directly since M2 = 3 is prime.
    """
    if p <= 1:
        return False
    if p == 2:
        return True
    mersenne = pow(2, p) - 1
    s = 4
    for _ in range(p - 2):
        s = (s * s - 2) % mersenne
    return s == 0
