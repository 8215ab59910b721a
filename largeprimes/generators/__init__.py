# largeprimes/generators/__init__.py
from .primes import riemann_r, sieve_primes_upto

__all__ = ["riemann_r", "sieve_primes_upto"]
