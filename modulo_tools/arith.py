"""
Plain modular arithmetic helpers.

Operands are signed residues in [-modulo, modulo]. add_mod and sub_mod
apply a single corrective step, so they are only valid for operands that
already lie in that range; mul_mod leans on the type's own remainder.
All helpers are duck-typed and work for Python ints as well as other
integer types (e.g. gmpy2.mpz).
"""

from .errors import PreconditionError


def _reduce(a, modulo):
    if a >= modulo:
        a -= modulo
    elif a <= -modulo:
        a += modulo
    return a


def add_mod(a, b, modulo):
    """
    Compute a + b mod modulo.

    Args:
        a: First operand, -modulo <= a <= modulo
        b: Second operand, -modulo <= b <= modulo
        modulo: Positive modulus

    Returns:
        A residue congruent to a + b in [-modulo, modulo].

    >>> add_mod(3, 4, 5)
    2
    >>> add_mod(-3, -2, 4)
    -1
    """
    return _reduce(a + b, modulo)


def sub_mod(a, b, modulo):
    """
    Compute a - b mod modulo.

    Same input range and output range as add_mod.

    >>> sub_mod(3, 4, 5)
    -1
    >>> sub_mod(-2, -3, 4)
    1
    """
    return _reduce(a - b, modulo)


def mul_mod(a, b, modulo):
    """
    Compute a * b mod modulo using the native remainder.

    >>> mul_mod(-2, -3, 4)
    2
    """
    return (a * b) % modulo


def _check_exponent(power):
    if power < 0:
        raise PreconditionError(f"Exponent must be non-negative, got {power}")


def mul_pow_mod(a, base, power, modulo):
    """
    Compute a * base**power mod modulo.

    Right-to-left binary method: the base is squared every iteration and
    folded into the accumulator whenever the current exponent bit is set.

    Args:
        a: Starting value of the accumulator
        base: Base, -modulo <= base <= modulo
        power: Non-negative exponent
        modulo: Positive modulus

    Returns:
        A residue congruent to a * base**power.

    Raises:
        PreconditionError: If power is negative.

    >>> mul_pow_mod(1, 2, 5, 6)
    2
    """
    _check_exponent(power)
    x = base
    y = a
    while power > 0:
        if power & 1:
            y = mul_mod(x, y, modulo)
        x = mul_mod(x, x, modulo)
        power >>= 1
    return y


def pow_mod(a, b, modulo):
    """
    Compute a**b mod modulo.

    >>> pow_mod(2, 6, 7)
    1
    >>> pow_mod(3, 4, 5)
    1
    """
    return mul_pow_mod(type(a)(1), a, b, modulo)
