# largeprimes/operations/__init__.py
from .gcd import gcd
from .pow import pow, pow_mod
from .utils import trailing_zero_count

__all__ = ["gcd", "pow", "pow_mod", "trailing_zero_count"]
