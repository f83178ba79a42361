"""Arithmetic in the KoalaBear prime field and its degree-4 binomial extension."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import ClassVar, Iterable, Union

P = 2**31 - 2**24 + 1
"""The KoalaBear prime."""

TWO_ADICITY = 24
"""Largest k such that 2**k divides P - 1."""

GENERATOR = 3
"""A generator of the multiplicative group of the base field."""

EXT_DEGREE = 4
EXT_W = 3
"""The extension is F_p[X] / (X^4 - EXT_W)."""


def inverse(value: int) -> int:
    """Return the multiplicative inverse of ``value`` in the base field."""
    reduced = value % P
    if reduced == 0:
        raise ZeroDivisionError("zero has no inverse in the base field")
    return pow(reduced, P - 2, P)


def two_adic_generator(bits: int) -> int:
    """Return a generator of the multiplicative subgroup of order ``2**bits``."""
    if not 0 <= bits <= TWO_ADICITY:
        raise ValueError(f"bits must lie in [0, {TWO_ADICITY}], got {bits}")
    return pow(GENERATOR, (P - 1) >> bits, P)


def random_base(rng: random.Random) -> int:
    """Draw a uniformly random base-field element."""
    return rng.randrange(P)


Operand = Union["ExtField", int]


@dataclass(frozen=True)
class ExtField:
    """An element c0 + c1·X + c2·X² + c3·X³ of the degree-4 extension."""

    coeffs: tuple[int, int, int, int]

    ZERO: ClassVar["ExtField"]
    ONE: ClassVar["ExtField"]

    def __post_init__(self) -> None:
        coeffs = tuple(self.coeffs)
        if len(coeffs) != EXT_DEGREE:
            raise ValueError(f"expected {EXT_DEGREE} coefficients, got {len(coeffs)}")
        object.__setattr__(self, "coeffs", tuple(int(c) % P for c in coeffs))

    @classmethod
    def from_base(cls, value: int) -> "ExtField":
        """Embed a base-field element."""
        return cls((value, 0, 0, 0))

    @classmethod
    def random(cls, rng: random.Random) -> "ExtField":
        """Draw a uniformly random extension element."""
        return cls(tuple(random_base(rng) for _ in range(EXT_DEGREE)))

    @staticmethod
    def _coerce(other: object) -> "ExtField | None":
        if isinstance(other, ExtField):
            return other
        if isinstance(other, int):
            return ExtField.from_base(other)
        return None

    def __add__(self, other: Operand) -> "ExtField":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return ExtField(tuple(a + b for a, b in zip(self.coeffs, rhs.coeffs)))

    __radd__ = __add__

    def __sub__(self, other: Operand) -> "ExtField":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return ExtField(tuple(a - b for a, b in zip(self.coeffs, rhs.coeffs)))

    def __rsub__(self, other: Operand) -> "ExtField":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __neg__(self) -> "ExtField":
        return ExtField(tuple(-c for c in self.coeffs))

    def __mul__(self, other: Operand) -> "ExtField":
        if isinstance(other, int):
            return ExtField(tuple(c * other for c in self.coeffs))
        if not isinstance(other, ExtField):
            return NotImplemented
        product = [0] * (2 * EXT_DEGREE - 1)
        for i, a in enumerate(self.coeffs):
            if a:
                for j, b in enumerate(other.coeffs):
                    product[i + j] += a * b
        low = product[:EXT_DEGREE]
        for k, high in enumerate(product[EXT_DEGREE:]):
            low[k] += EXT_W * high
        return ExtField(tuple(low))

    __rmul__ = __mul__

    def __truediv__(self, other: Operand) -> "ExtField":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self * rhs.inverse()

    def __rtruediv__(self, other: Operand) -> "ExtField":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs * self.inverse()

    def __pow__(self, power: int) -> "ExtField":
        return self.exp(power)

    def __bool__(self) -> bool:
        return any(self.coeffs)

    def exp(self, power: int) -> "ExtField":
        """Raise to an integer power; negative powers use the inverse."""
        if power < 0:
            return self.inverse().exp(-power)
        result = ExtField.ONE
        base = self
        while power:
            if power & 1:
                result = result * base
            base = base * base
            power >>= 1
        return result

    def inverse(self) -> "ExtField":
        """Return the multiplicative inverse."""
        if not self:
            raise ZeroDivisionError("zero has no inverse in the extension field")
        return self.exp(P**EXT_DEGREE - 2)

    def __iter__(self) -> Iterable[int]:
        return iter(self.coeffs)


ExtField.ZERO = ExtField((0, 0, 0, 0))
ExtField.ONE = ExtField((1, 0, 0, 0))