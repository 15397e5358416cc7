"""
modulo_tools - modular arithmetic and Montgomery multiplication.

    >>> from modulo_tools import add_mod, mul_mod, pow_mod, Montgomery64
    >>> a = add_mod(3, 4, 5)
    >>> mul_mod(3, a, 5)
    1
    >>> pow_mod(2, 6, 7)
    1
    >>> Montgomery64(57).powmod(5, 42)
    7
"""

from .arith import add_mod, mul_mod, mul_pow_mod, pow_mod, sub_mod
from .errors import ModuloError, PreconditionError, WidthOverflowError
from .montgomery import (
    Montgomery,
    Montgomery32,
    Montgomery64,
    MontgomeryOperation,
    bits,
)

__version__ = "0.1.0"

__all__ = [
    "add_mod",
    "sub_mod",
    "mul_mod",
    "pow_mod",
    "mul_pow_mod",
    "MontgomeryOperation",
    "Montgomery32",
    "Montgomery64",
    "Montgomery",
    "bits",
    "ModuloError",
    "PreconditionError",
    "WidthOverflowError",
]
