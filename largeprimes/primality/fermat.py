# largeprimes/primality/fermat.py
import logging

from ..operations import gcd, pow_mod

logger = logging.getLogger(__name__)

FERMAT_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29)


def fermat(num: int) -> bool:
    """Fermat probable-prime test over a fixed set of witnesses.

    A composite is reported whenever some witness ``a`` coprime to ``num``
    breaks ``a**num == a (mod num)``. There are no false negatives, but
    Carmichael numbers such as 561 satisfy the congruence for every coprime
    base and are reported prime. Witnesses sharing a factor with ``num`` are
    skipped rather than counted as failures.
    """
    if num <= 1:
        return False
    for a in FERMAT_WITNESSES:
        if gcd(a, num) != 1:
            continue
        if pow_mod(a, num, num) != a % num:
            logger.debug("Fermat test failed for %d, witness %d", num, a)
            return False
    return True
