import dataclasses
import random

import pytest

from vortexpc.field import ExtField, random_base
from vortexpc.hash import Poseidon2
from vortexpc.merkle_tree import verify_merkle_proof
from vortexpc.rs import encode_reed_solomon, encode_reed_solomon_ext
from vortexpc.vortex import (
    RS_RATE,
    OpenProof,
    VerificationError,
    commit,
    evaluate,
    open_proof,
    verify,
)

NB_ROW = 8
NB_COL = 4


@pytest.fixture(scope="module")
def scenario():
    rng = random.Random(1)
    perm = Poseidon2.from_rng(rng)
    w = [[random_base(rng) for _ in range(NB_COL)] for _ in range(NB_ROW)]
    tree, encoded = commit(perm, NB_ROW, NB_COL, w)
    beta = ExtField.random(rng)
    columns = rng.sample(range(NB_COL * RS_RATE), 3)
    coin = ExtField.random(rng)
    y = evaluate(w, NB_ROW, NB_COL, coin)
    proof = open_proof(w, encoded, NB_ROW, NB_COL, tree, beta, columns)
    return perm, w, tree, encoded, beta, columns, coin, y, proof


def test_commit_encodes_rows(scenario):
    _, w, _, encoded, *_ = scenario
    assert encoded == [encode_reed_solomon(row, RS_RATE) for row in w]
    assert all(len(row) == NB_COL * RS_RATE for row in encoded)


def test_commit_tree_has_one_leaf_per_encoded_column(scenario):
    _, _, tree, *_ = scenario
    assert len(tree.digest_layers[0]) == NB_COL * RS_RATE


def test_open_columns_and_paths(scenario):
    perm, _, tree, encoded, beta, columns, _, _, proof = scenario
    assert proof.column_ids == columns
    assert proof.beta == beta
    for col, column, path in zip(columns, proof.columns, proof.merkle_proofs):
        assert column == [encoded[i][col] for i in range(NB_ROW)]
        assert verify_merkle_proof(col, tree.digest_layers[0][col], tree.root(), path, perm)


def test_lin_comb_is_rs_consistent(scenario):
    _, _, _, encoded, beta, _, _, _, proof = scenario
    betas = [beta ** i for i in range(NB_ROW)]
    u_encoded = encode_reed_solomon_ext(proof.lin_comb, RS_RATE)
    for col in range(NB_COL * RS_RATE):
        combined = sum((b * encoded[i][col] for i, b in enumerate(betas)), ExtField.ZERO)
        assert combined == u_encoded[col]


def test_honest_proof_verifies_and_tampering_is_caught(scenario):
    perm, _, tree, _, _, _, coin, y, proof = scenario
    assert verify(perm, proof, NB_ROW, NB_COL, tree.root(), y, coin) is None
    bad_y = list(y)
    bad_y[0] = bad_y[0] + 1
    with pytest.raises(VerificationError, match="evaluation"):
        verify(perm, proof, NB_ROW, NB_COL, tree.root(), bad_y, coin)


def test_tampered_lin_comb_fails_evaluation(scenario):
    perm, _, tree, _, _, _, coin, y, proof = scenario
    lin_comb = list(proof.lin_comb)
    lin_comb[1] = lin_comb[1] + 5
    bad = dataclasses.replace(proof, lin_comb=lin_comb)
    with pytest.raises(VerificationError, match="evaluation"):
        verify(perm, bad, NB_ROW, NB_COL, tree.root(), y, coin)


def test_tampered_column_fails_merkle(scenario):
    perm, _, tree, _, _, _, coin, y, proof = scenario
    columns = [list(c) for c in proof.columns]
    columns[0][2] = (columns[0][2] + 1)
    bad = dataclasses.replace(proof, columns=columns)
    with pytest.raises(VerificationError, match="merkle"):
        verify(perm, bad, NB_ROW, NB_COL, tree.root(), y, coin)


def test_wrong_root_fails_merkle(scenario):
    perm, _, tree, _, _, _, coin, y, proof = scenario
    root = tuple((v + 1) for v in tree.root())
    with pytest.raises(VerificationError, match="merkle"):
        verify(perm, proof, NB_ROW, NB_COL, root, y, coin)


def test_evaluate_small_matrix():
    w = [[1, 2], [3, 4]]
    y = evaluate(w, 2, 2, ExtField.from_base(5))
    assert y == [ExtField.from_base(11), ExtField.from_base(23)]


def test_commit_rejects_row_count_not_multiple_of_eight():
    perm = Poseidon2.from_rng(random.Random(4))
    with pytest.raises(ValueError):
        commit(perm, 4, 2, [[1, 2]] * 4)


def test_commit_rejects_ragged_rows():
    perm = Poseidon2.from_rng(random.Random(4))
    w = [[1, 2]] * 7 + [[1]]
    with pytest.raises(ValueError):
        commit(perm, 8, 2, w)


def test_open_proof_fields():
    proof = OpenProof(columns=[[1]], merkle_proofs=[[]], lin_comb=[ExtField.ONE],
                      column_ids=[0], beta=ExtField.ZERO)
    assert proof.column_ids == [0]
    assert proof.lin_comb == [ExtField.ONE]