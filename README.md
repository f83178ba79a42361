# vortexpc

A small, dependency-free implementation of a Vortex-style polynomial
commitment scheme over the KoalaBear prime field (p = 2^31 - 2^24 + 1).

A matrix of field elements is committed row by row. Each row is
Reed-Solomon encoded with rate 2. Each column of the encoded matrix is
hashed with Poseidon2, eight elements at a time, and the column hashes
become the leaves of a Merkle tree. A prover then opens a random linear
combination of the rows together with a chosen set of encoded columns.
A verifier checks the claimed row evaluations against the Merkle root.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `vortexpc.field`: base-field helpers `inverse`, `two_adic_generator`
  and `random_base`, with base-field elements held as plain `int`s. The
  degree-4 extension F_p[X]/(X^4 - 3) is `ExtField`, a frozen dataclass
  with arithmetic operators, `ExtField.ZERO`, `ExtField.ONE`,
  `from_base`, `random`, `exp` and `inverse`.
- `vortexpc.rs`: radix-2 `dft` and `idft` over the two-adic subgroup.
  They accept lists of `int` or of `ExtField`. Also
  `encode_reed_solomon` and `encode_reed_solomon_ext`, which interpolate,
  zero-pad by the blow-up factor `rho` and evaluate again.
- `vortexpc.hash`: the width-16 `Poseidon2` permutation (8 external
  rounds, 20 internal rounds, S-box x^3), built with
  `Poseidon2.from_rng` or from explicit round constants and applied with
  `Poseidon2.permute`, plus the two-to-one compression `hash_poseidon2`.
- `vortexpc.merkle_tree`: `MerkleTree` (`build`, `open`, `root`) and
  `verify_merkle_proof`.
- `vortexpc.vortex`: the commitment scheme itself. It provides `commit`,
  `evaluate`, `open_proof` and `verify`, the `OpenProof` dataclass, the
  `VerificationError` exception and the constant `RS_RATE` (2).

## Sizes

An `nb_row x nb_col` matrix encodes to `nb_row x 2*nb_col`.

- `nb_col` must be a power of two, and `2*nb_col` must not exceed 2^24,
  the two-adicity of the field.
- `nb_row` must be a positive multiple of 8, and `commit` raises
  `ValueError` otherwise.

## Example

```python
import random

from vortexpc.field import ExtField, random_base
from vortexpc.hash import Poseidon2
from vortexpc.vortex import commit, evaluate, open_proof, verify

rng = random.Random(1)
perm = Poseidon2.from_rng(rng)

nb_row, nb_col = 16, 32
w = [[random_base(rng) for _ in range(nb_col)] for _ in range(nb_row)]

tree, w_encoded = commit(perm, nb_row, nb_col, w)

coin = ExtField.random(rng)
y = evaluate(w, nb_row, nb_col, coin)

beta = ExtField.random(rng)
columns = rng.sample(range(2 * nb_col), 8)
proof = open_proof(w, w_encoded, nb_row, nb_col, tree, beta, columns)

# Raises VerificationError if any check fails.
verify(perm, proof, nb_row, nb_col, tree.root(), y, coin)
```

`verify` returns nothing on success. It raises `VerificationError` when
the evaluation claim, a Merkle path or the Reed-Solomon linearity check
fails.

## What it does not do

- It has no command-line tool. It is a library only.
- The Poseidon2 round constants are drawn from whatever `random.Random`
  you pass to `Poseidon2.from_rng`, or supplied by you. No fixed,
  published constant set is built in.
- Proofs are in-memory dataclasses. No serialisation format is provided.
- Everything is pure Python and single-threaded. It suits experiments
  and small instances, and it is not built for speed.