# largeprimes/generators/primes.py
import logging
from math import isqrt
from typing import List

import numpy as np
from mpmath import li, mp, mpf
from sympy import mobius

logger = logging.getLogger(__name__)


def sieve_primes_upto(maximum: int) -> List[int]:
    """All primes ``p <= maximum`` in ascending order (Sieve of Eratosthenes).

    ``maximum`` is a native-width bound: the sieve table holds ``maximum + 1``
    flags and lives only for the duration of the call.
    """
    if maximum < 2:
        return []
    logger.debug("sieving %d entries", maximum + 1)
    sieve = np.ones(maximum + 1, dtype=bool)
    sieve[:2] = False
    # every composite <= maximum has a prime factor <= isqrt(maximum)
    for i in range(2, isqrt(maximum) + 1):
        if sieve[i]:
            sieve[i * i::i] = False
    return np.flatnonzero(sieve).tolist()


def riemann_r(x, terms: int = 50) -> float:
    """Riemann's R(x), a smooth estimate of the number of primes <= x."""
    if x < 2:
        return 0.0
    with mp.workdps(20):
        s = mpf(0)
        for n in range(1, terms + 1):
            mu = mobius(n)
            if mu == 0:
                continue
            s += mpf(int(mu)) / n * li(mpf(x) ** (mpf(1) / n))
        return float(s)
