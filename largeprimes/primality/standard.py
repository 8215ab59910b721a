# largeprimes/primality/standard.py
import logging
from math import isqrt

logger = logging.getLogger(__name__)


def trial_division(num: int) -> bool:
    """Exact primality by testing every factor from 2 to ``isqrt(num) + 1``.

    Costs O(sqrt(num)) big-integer divisions, so it is only practical for
    candidates of a few dozen digits.
    """
    if num <= 1:
        return False
    if num == 2:
        return True
    bound = isqrt(num) + 1
    factor = 2
    while factor <= bound:
        if num % factor == 0:
            logger.debug("%d is divisible by %d", num, factor)
            return False
        factor += 1
    return True


standard = trial_division
