"""Poseidon2 permutation over KoalaBear (width 16) and a two-to-one digest hash."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Sequence

from .field import P, inverse, random_base

WIDTH = 16
DIGEST_SIZE = 8
EXTERNAL_ROUNDS = 8
INTERNAL_ROUNDS = 20
SBOX_DEGREE = 3

Digest = tuple[int, ...]

_M4 = (
    (2, 3, 1, 1),
    (1, 2, 3, 1),
    (1, 1, 2, 3),
    (3, 1, 1, 2),
)


def _frac(num: int, den: int) -> int:
    return num * inverse(den) % P


_INTERNAL_DIAGONAL = tuple(
    v % P
    for v in (
        -2, 1, 2, _frac(1, 2), 3, 4, _frac(-1, 2), -3, -4,
        _frac(1, 2**8), _frac(1, 8), _frac(1, 2**24),
        _frac(-1, 2**8), _frac(-1, 8), _frac(-1, 16), _frac(-1, 2**24),
    )
)


def _sbox(x: int) -> int:
    return pow(x, SBOX_DEGREE, P)


def _external_linear_layer(state: list[int]) -> list[int]:
    mixed: list[int] = []
    for start in range(0, WIDTH, 4):
        chunk = state[start:start + 4]
        mixed.extend(sum(c * x for c, x in zip(row, chunk)) for row in _M4)
    column_sums = [sum(mixed[k::4]) for k in range(4)]
    return [(x + column_sums[i % 4]) % P for i, x in enumerate(mixed)]


def _internal_linear_layer(state: list[int]) -> list[int]:
    total = sum(state)
    return [(x * d + total) % P for x, d in zip(state, _INTERNAL_DIAGONAL)]


@dataclass(frozen=True)
class Poseidon2:
    """A Poseidon2 permutation with fixed round constants."""

    external_constants: tuple[tuple[int, ...], ...]
    internal_constants: tuple[int, ...]

    def __post_init__(self) -> None:
        external = tuple(tuple(int(c) % P for c in row) for row in self.external_constants)
        internal = tuple(int(c) % P for c in self.internal_constants)
        if len(external) != EXTERNAL_ROUNDS or any(len(row) != WIDTH for row in external):
            raise ValueError(f"expected {EXTERNAL_ROUNDS} external rounds of {WIDTH} constants")
        if len(internal) != INTERNAL_ROUNDS:
            raise ValueError(f"expected {INTERNAL_ROUNDS} internal round constants")
        object.__setattr__(self, "external_constants", external)
        object.__setattr__(self, "internal_constants", internal)

    @classmethod
    def from_rng(cls, rng: random.Random) -> "Poseidon2":
        """Draw all round constants from ``rng``."""
        external = tuple(
            tuple(random_base(rng) for _ in range(WIDTH)) for _ in range(EXTERNAL_ROUNDS)
        )
        internal = tuple(random_base(rng) for _ in range(INTERNAL_ROUNDS))
        return cls(external, internal)

    def _external_round(self, state: list[int], constants: Sequence[int]) -> list[int]:
        return _external_linear_layer([_sbox(x + c) for x, c in zip(state, constants)])

    def permute(self, state: Sequence[int]) -> tuple[int, ...]:
        """Apply the permutation to a state of WIDTH field elements."""
        if len(state) != WIDTH:
            raise ValueError(f"state must hold {WIDTH} elements, got {len(state)}")
        current = _external_linear_layer([x % P for x in state])
        half = EXTERNAL_ROUNDS // 2
        for constants in self.external_constants[:half]:
            current = self._external_round(current, constants)
        for constant in self.internal_constants:
            current[0] = _sbox(current[0] + constant)
            current = _internal_linear_layer(current)
        for constants in self.external_constants[half:]:
            current = self._external_round(current, constants)
        return tuple(current)


def hash_poseidon2(perm: Poseidon2, left: Sequence[int], right: Sequence[int]) -> Digest:
    """Compress two digests into one by permuting their concatenation and truncating."""
    if len(left) != DIGEST_SIZE or len(right) != DIGEST_SIZE:
        raise ValueError(f"digests must hold {DIGEST_SIZE} elements")
    return perm.permute([*left, *right])[:DIGEST_SIZE]