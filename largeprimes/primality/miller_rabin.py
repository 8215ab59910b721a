# largeprimes/primality/miller_rabin.py
import logging
from typing import Tuple

from ..operations import pow, pow_mod, trailing_zero_count

logger = logging.getLogger(__name__)

MILLER_RABIN_WITNESSES = (2, 3, 5, 7, 11)

# Smallest strong pseudoprime to every base in MILLER_RABIN_WITNESSES.
# Below it the test is exact; at and above it the answer is probable only.
DETERMINISTIC_BOUND = 2152302898747


def _decompose(num: int) -> Tuple[int, int]:
    # num - 1 == 2**r * d with d odd
    n_minus_one = num - 1
    r = trailing_zero_count(n_minus_one)
    d = n_minus_one // pow(2, r)
    return r, d


def miller_rabin(num: int) -> bool:
    """Strong probable-prime test with witnesses 2, 3, 5, 7 and 11.

    Exact for ``num < DETERMINISTIC_BOUND``; beyond that a composite that is
    a strong pseudoprime to all five bases (``DETERMINISTIC_BOUND`` itself is
    the first one) is reported prime.
    """
    if num <= 1:
        return False
    if num == 2:
        return True

    r, d = _decompose(num)
    for a in MILLER_RABIN_WITNESSES:
        if a >= num:
            continue
        if pow_mod(a, d, num) == 1:
            continue
        for j in range(r):
            if (pow_mod(a, d * pow(2, j), num) + 1) % num == 0:
                break
        else:
            logger.debug("Miller-Rabin test failed for %d, witness %d", num, a)
            return False
    return True
