"""
Exact rational arithmetic for spline derivation.
"""

from .rational import Rational, RationalLike, as_rational
from .matrix import RationalMatrix

__all__ = [
    "Rational",
    "RationalLike",
    "as_rational",
    "RationalMatrix",
]
