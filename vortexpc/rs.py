"""Radix-2 discrete Fourier transforms and Reed-Solomon encoding."""

from __future__ import annotations

from typing import Sequence, TypeVar, Union

from .field import P, TWO_ADICITY, ExtField, inverse, two_adic_generator

Element = Union[int, ExtField]
T = TypeVar("T", int, ExtField)


def _log2_size(n: int) -> int:
    if n < 1 or n & (n - 1):
        raise ValueError(f"length must be a positive power of two, got {n}")
    bits = n.bit_length() - 1
    if bits > TWO_ADICITY:
        raise ValueError(f"length 2**{bits} exceeds the field's two-adicity")
    return bits


def _bit_reversed(values: list[int], bits: int) -> list[int]:
    if bits == 0:
        return list(values)
    return [values[int(format(i, f"0{bits}b")[::-1], 2)] for i in range(len(values))]


def _ntt(values: list[int], root: int, bits: int) -> list[int]:
    a = _bit_reversed(values, bits)
    n = len(a)
    length = 2
    while length <= n:
        half = length // 2
        step = pow(root, n // length, P)
        twiddles = [1] * half
        for k in range(1, half):
            twiddles[k] = twiddles[k - 1] * step % P
        for start in range(0, n, length):
            lo = a[start:start + half]
            hi = [x * t % P for x, t in zip(a[start + half:start + length], twiddles)]
            a[start:start + half] = [(u + v) % P for u, v in zip(lo, hi)]
            a[start + half:start + length] = [(u - v) % P for u, v in zip(lo, hi)]
        length *= 2
    return a


def _transform_base(values: list[int], bits: int, inverse_direction: bool) -> list[int]:
    root = two_adic_generator(bits)
    if inverse_direction:
        root = inverse(root)
    result = _ntt([v % P for v in values], root, bits)
    if inverse_direction:
        n_inv = inverse(len(values))
        result = [v * n_inv % P for v in result]
    return result


def _transform(values: Sequence[Element], inverse_direction: bool) -> list:
    items = list(values)
    bits = _log2_size(len(items))
    if any(isinstance(v, ExtField) for v in items):
        elements = [v if isinstance(v, ExtField) else ExtField.from_base(v) for v in items]
        coordinates = zip(*(e.coeffs for e in elements))
        transformed = [
            _transform_base(list(coord), bits, inverse_direction) for coord in coordinates
        ]
        return [ExtField(coeffs) for coeffs in zip(*transformed)]
    return _transform_base(items, bits, inverse_direction)


def dft(values: Sequence[T]) -> list[T]:
    """Evaluate the polynomial with these coefficients on the subgroup of size len(values)."""
    return _transform(values, inverse_direction=False)


def idft(values: Sequence[T]) -> list[T]:
    """Interpolate evaluations on the subgroup back into coefficients."""
    return _transform(values, inverse_direction=True)


def _check_rate(rho: int) -> None:
    if rho < 1 or rho & (rho - 1):
        raise ValueError(f"rate must be a positive power of two, got {rho}")


def encode_reed_solomon(values: Sequence[int], rho: int) -> list[int]:
    """Reed-Solomon encode base-field values with blow-up factor ``rho``."""
    _check_rate(rho)
    coeffs = idft(values)
    coeffs.extend([0] * (len(coeffs) * (rho - 1)))
    return dft(coeffs)


def encode_reed_solomon_ext(values: Sequence[ExtField], rho: int) -> list[ExtField]:
    """Reed-Solomon encode extension-field values with blow-up factor ``rho``."""
    _check_rate(rho)
    coeffs = [v if isinstance(v, ExtField) else ExtField.from_base(v) for v in idft(values)]
    coeffs.extend([ExtField.ZERO] * (len(coeffs) * (rho - 1)))
    return dft(coeffs)