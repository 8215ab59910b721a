# largeprimes/primality/__init__.py
from .fermat import FERMAT_WITNESSES, fermat
from .lucas_lehmer import lucas_lehmer_test
from .miller_rabin import DETERMINISTIC_BOUND, MILLER_RABIN_WITNESSES, miller_rabin
from .standard import standard, trial_division

__all__ = [
    "DETERMINISTIC_BOUND",
    "FERMAT_WITNESSES",
    "MILLER_RABIN_WITNESSES",
    "fermat",
    "lucas_lehmer_test",
    "miller_rabin",
    "standard",
    "trial_division",
]
