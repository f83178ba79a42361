"""Vortex polynomial commitment: commit to a matrix, open columns, verify."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .field import ExtField
from .hash import DIGEST_SIZE, Digest, Poseidon2, hash_poseidon2
from .merkle_tree import MerkleTree, verify_merkle_proof
from .rs import encode_reed_solomon, encode_reed_solomon_ext

RS_RATE = 2
"""Blow-up factor of the Reed-Solomon code applied to each row."""

_ZERO_DIGEST: Digest = (0,) * DIGEST_SIZE


class VerificationError(Exception):
    """Raised when a Vortex opening proof does not verify."""


@dataclass
class OpenProof:
    """Opened columns with their Merkle paths and the random row combination."""

    columns: list[list[int]]
    merkle_proofs: list[list[Digest]]
    lin_comb: list[ExtField]
    column_ids: list[int]
    beta: ExtField


def _powers(base: ExtField, count: int) -> list[ExtField]:
    powers = []
    current = ExtField.ONE
    for _ in range(count):
        powers.append(current)
        current = current * base
    return powers


def _hash_column(perm: Poseidon2, column: Sequence[int]) -> Digest:
    digest = _ZERO_DIGEST
    for start in range(0, len(column), DIGEST_SIZE):
        digest = hash_poseidon2(perm, digest, column[start:start + DIGEST_SIZE])
    return digest


def _check_matrix(w: Sequence[Sequence[int]], nb_row: int, nb_col: int) -> None:
    if nb_row <= 0 or nb_row % DIGEST_SIZE:
        raise ValueError(f"row count must be a positive multiple of {DIGEST_SIZE}, got {nb_row}")
    if len(w) != nb_row:
        raise ValueError(f"expected {nb_row} rows, got {len(w)}")
    if any(len(row) != nb_col for row in w):
        raise ValueError(f"every row must hold {nb_col} elements")


def commit(
    perm: Poseidon2, nb_row: int, nb_col: int, w: Sequence[Sequence[int]]
) -> tuple[MerkleTree, list[list[int]]]:
    """Encode each row, hash each encoded column, and build a Merkle tree over them."""
    _check_matrix(w, nb_row, nb_col)
    encoded = [encode_reed_solomon(row, RS_RATE) for row in w]
    leaves = [_hash_column(perm, column) for column in zip(*encoded)]
    return MerkleTree.build(perm, leaves), encoded


def _eval_lin_comb(
    w: Sequence[Sequence[int]], nb_row: int, nb_col: int, beta: ExtField
) -> list[ExtField]:
    betas = _powers(beta, nb_row)
    return [
        sum((b * row[j] for b, row in zip(betas, w[:nb_row])), ExtField.ZERO)
        for j in range(nb_col)
    ]


def evaluate(
    w: Sequence[Sequence[int]], nb_row: int, nb_col: int, coin: ExtField
) -> list[ExtField]:
    """Evaluate each row, read as polynomial coefficients, at ``coin``."""
    xs = _powers(coin, nb_col)
    return [
        sum((x * value for x, value in zip(xs, row[:nb_col])), ExtField.ZERO)
        for row in w[:nb_row]
    ]


def open_proof(
    w: Sequence[Sequence[int]],
    w_encoded: Sequence[Sequence[int]],
    nb_row: int,
    nb_col: int,
    tree: MerkleTree,
    beta: ExtField,
    column_ids: Sequence[int],
) -> OpenProof:
    """Open the requested encoded columns and combine the rows with powers of ``beta``."""
    ids = list(column_ids)
    columns = [[w_encoded[i][col] for i in range(nb_row)] for col in ids]
    return OpenProof(
        columns=columns,
        merkle_proofs=[tree.open(col) for col in ids],
        lin_comb=_eval_lin_comb(w, nb_row, nb_col, beta),
        column_ids=ids,
        beta=beta,
    )


def verify(
    perm: Poseidon2,
    proof: OpenProof,
    nb_row: int,
    nb_col: int,
    root: Sequence[int],
    y: Sequence[ExtField],
    coin: ExtField,
) -> None:
    """Check an opening proof against ``root`` and the claimed evaluations ``y``."""
    if len(y) < nb_row:
        raise ValueError(f"expected {nb_row} evaluations, got {len(y)}")
    if len(proof.lin_comb) < nb_col:
        raise ValueError(f"expected {nb_col} combined entries, got {len(proof.lin_comb)}")
    betas = _powers(proof.beta, nb_row)
    xs = _powers(coin, nb_col)

    ux = sum((u * x for u, x in zip(proof.lin_comb, xs)), ExtField.ZERO)
    beta_y = sum((v * b for v, b in zip(y, betas)), ExtField.ZERO)
    if beta_y != ux:
        raise VerificationError("failed to verify evaluation")

    u_encoded = encode_reed_solomon_ext(proof.lin_comb, RS_RATE)
    root = tuple(root)

    for col, column, path in zip(proof.column_ids, proof.columns, proof.merkle_proofs):
        if not verify_merkle_proof(col, _hash_column(perm, column), root, path, perm):
            raise VerificationError("Failed to verify merkle proof")
        beta_column = sum(
            (b * value for b, value in zip(betas, column[:nb_row])), ExtField.ZERO
        )
        if beta_column != u_encoded[col]:
            raise VerificationError("failed to verify RS linearity")