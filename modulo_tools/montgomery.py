"""
Montgomery modular multiplication.

A context is built once per odd modulus N. Construction computes
n' (N * n' = -1 mod R) by Hensel lifting and R^2 mod N; afterwards every
multiplication is a plain product followed by REDC, with no division.

Three variants share one interface:

    Montgomery32  R = 2^32, products held in a 64-bit container
    Montgomery64  R = 2^64, products held in a 128-bit container
    Montgomery    R = 2^s,  s = bit length of N, any integer-like type

Example:
    >>> Montgomery64(57).powmod(5, 42)
    7
    >>> Montgomery32(89).powmod(3, 57)
    23
"""

import logging
from abc import ABC, abstractmethod

from .errors import PreconditionError, WidthOverflowError

logger = logging.getLogger(__name__)

WORD32_BITS = 32
WORD64_BITS = 64


def bits(n):
    """
    Bit length of n, counted by 64-bit strides and then single bits.

    Only needs comparison and right shift, so it works for any integer-like
    type (int, gmpy2.mpz, ...).
    """
    zero = type(n)(0)
    c64 = type(n)(1) << 64
    b = 0
    while n > c64:
        n >>= 64
        b += 64
    while n > zero:
        n >>= 1
        b += 1
    return b


class MontgomeryOperation(ABC):
    """Interface shared by every Montgomery context."""

    __slots__ = ()

    @classmethod
    @abstractmethod
    def calc_n_prime(cls, n, s):
        """Return n' such that n * n' = -1 mod 2^s."""

    @abstractmethod
    def reduction(self, x):
        """
        Montgomery reduction (REDC).

        Args:
            x: Double-width value, 0 <= x < N * R

        Returns:
            x * R^-1 mod N, in [0, N)
        """

    def convert(self, x):
        """Map x (0 <= x < N) into Montgomery form: x * R mod N."""
        return self.reduction(x * self.r2)

    def multiply(self, x, y):
        """Montgomery product of two Montgomery-form values: x * y * R^-1 mod N."""
        return self.reduction(x * y)

    def revert(self, x):
        """Leave Montgomery form: x * R^-1 mod N."""
        return self.reduction(x)

    def powmod(self, a, p):
        """
        Calculate a^p mod N.

        The base and the identity are converted into Montgomery form, the
        right-to-left binary method runs entirely on Montgomery products,
        and a final reduction brings the accumulator back to an ordinary
        residue.

        Args:
            a: Base, an ordinary residue
            p: Non-negative exponent

        Returns:
            a^p mod N

        Raises:
            PreconditionError: If p is negative.
        """
        if p < 0:
            raise PreconditionError(f"Exponent must be non-negative, got {p}")
        x = self.convert(a)
        y = self.convert(type(a)(1))
        while p > 0:
            if p & 1:
                y = self.multiply(x, y)
            x = self.multiply(x, x)
            p >>= 1
        return self.revert(y)

    @property
    @abstractmethod
    def n(self):
        """The modulus N."""

    @property
    @abstractmethod
    def np(self):
        """n' with N * n' = -1 mod R."""

    @property
    @abstractmethod
    def r2(self):
        """R^2 mod N."""

    @property
    @abstractmethod
    def radix_bits(self):
        """Bit length of R."""

    def __repr__(self):
        return f"{type(self).__name__}({self.n})"


class _FixedWidthMontgomery(MontgomeryOperation):
    """
    Montgomery context over a fixed machine word of WORD_BITS bits.

    Native wraparound is emulated with WORD_MASK. The double-width container
    is checked explicitly: a product or REDC intermediate that would not fit
    in 2 * WORD_BITS bits raises WidthOverflowError.
    """

    __slots__ = ("_n", "_np", "_r2")

    @classmethod
    def calc_n_prime(cls, n, s):
        x = (-n) % 8  # 3 bits
        b = 3
        while True:
            nx = ((n * x + 2) * x) & cls.WORD_MASK
            b *= 2
            if b >= s:
                return nx
            x = nx

    def __init__(self, n):
        if n < 0 or n > self.WORD_MASK:
            raise WidthOverflowError(n, self.WORD_BITS, what="modulus")
        if n % 2 == 0:
            raise PreconditionError(f"Montgomery modulus must be odd, got {n}")
        r_mod_n = (1 << self.WORD_BITS) % n
        self._n = n
        self._np = self.calc_n_prime(n, self.WORD_BITS)
        self._r2 = (r_mod_n * r_mod_n) % n
        logger.debug(
            "%s context: n=%d np=%#x r2=%d", type(self).__name__, n, self._np, self._r2
        )

    def _check_wide(self, x, what):
        if x < 0 or x >> self.WIDE_BITS:
            raise WidthOverflowError(x, self.WIDE_BITS, what=what)

    def reduction(self, x):
        self._check_wide(x, "REDC input")
        t = ((x & self.WORD_MASK) * self._np) & self.WORD_MASK
        t = x + self._n * t
        self._check_wide(t, "REDC intermediate")
        t >>= self.WORD_BITS
        if t >= self._n:
            return t - self._n
        return t

    @property
    def n(self):
        return self._n

    @property
    def np(self):
        return self._np

    @property
    def r2(self):
        return self._r2

    @property
    def radix_bits(self):
        return self.WORD_BITS


class Montgomery64(_FixedWidthMontgomery):
    """
    Montgomery context with R = 2^64.

    >>> Montgomery64(97).powmod(2, 77)
    65
    """

    __slots__ = ()

    WORD_BITS = WORD64_BITS
    WORD_MASK = (1 << WORD64_BITS) - 1
    WIDE_BITS = 2 * WORD64_BITS


class Montgomery32(_FixedWidthMontgomery):
    """Montgomery context with R = 2^32."""

    __slots__ = ()

    WORD_BITS = WORD32_BITS
    WORD_MASK = (1 << WORD32_BITS) - 1
    WIDE_BITS = 2 * WORD32_BITS


class Montgomery(MontgomeryOperation):
    """
    Montgomery context for arbitrary-width integers.

    R = 2^s where s = bits(n). There is no native word to wrap around, so
    every "mod R" is an explicit AND with rm = R - 1, and a REDC input outside
    [0, N * R) raises WidthOverflowError. Constants are built
    with type(n), which keeps the arithmetic in the modulus' own integer
    type (int, gmpy2.mpz, ...).
    """

    __slots__ = ("_n", "_np", "_s", "_rm", "_r2", "_nr")

    @staticmethod
    def _mask(one, s):
        t = one << s
        t -= one
        return t

    @classmethod
    def calc_n_prime(cls, n, s):
        one = type(n)(1)
        two = type(n)(2)
        x = (-n) & type(n)(7)
        b = 3
        rm = cls._mask(one, s)
        while True:
            nx = x * n
            nx += two
            nx *= x
            nx &= rm
            b *= 2
            if b >= s:
                return nx
            x = nx

    def __init__(self, n):
        if n < 1:
            raise PreconditionError(f"Montgomery modulus must be positive, got {n}")
        if n & 1 == 0:
            raise PreconditionError(f"Montgomery modulus must be odd, got {n}")
        one = type(n)(1)
        s = bits(n)
        self._n = n
        self._s = s
        self._rm = self._mask(one, s)
        self._np = self.calc_n_prime(n, s)
        self._r2 = (one << (2 * s)) % n
        self._nr = n << s
        logger.debug("Montgomery context: %d-bit modulus, np=%s r2=%s", s, self._np, self._r2)

    def reduction(self, x):
        if x < 0 or x >= self._nr:
            raise WidthOverflowError(x, 2 * self._s, what="REDC input", limit=self._nr)
        t = x & self._rm
        t *= self._np
        t &= self._rm
        t *= self._n
        t += x
        t >>= self._s
        if t >= self._n:
            return t - self._n
        return t

    @property
    def n(self):
        return self._n

    @property
    def np(self):
        return self._np

    @property
    def r2(self):
        return self._r2

    @property
    def radix_bits(self):
        return self._s

    @property
    def rm(self):
        """The mask R - 1."""
        return self._rm
