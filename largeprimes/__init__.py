# largeprimes/__init__.py
from .generators import riemann_r, sieve_primes_upto
from .operations import gcd, pow, pow_mod, trailing_zero_count
from .primality import fermat, lucas_lehmer_test, miller_rabin, standard, trial_division

__version__ = "0.5.1"

__all__ = [
    "fermat",
    "gcd",
    "lucas_lehmer_test",
    "miller_rabin",
    "pow",
    "pow_mod",
    "riemann_r",
    "sieve_primes_upto",
    "standard",
    "trailing_zero_count",
    "trial_division",
]
