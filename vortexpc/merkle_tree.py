"""Binary Merkle tree over Poseidon2 digests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .hash import Digest, Poseidon2, hash_poseidon2


def _hash_layer(perm: Poseidon2, layer: Sequence[Digest]) -> list[Digest]:
    pairs = zip(layer[0::2], layer[1::2])
    return [hash_poseidon2(perm, left, right) for left, right in pairs]


@dataclass(frozen=True)
class MerkleTree:
    """All digest layers of a Merkle tree, from the leaves up to the root."""

    digest_layers: tuple[tuple[Digest, ...], ...]

    @classmethod
    def build(cls, perm: Poseidon2, leaves: Sequence[Sequence[int]]) -> "MerkleTree":
        """Hash ``leaves`` pairwise, layer by layer, up to a single root.

        Only the first ``2**floor(log2(len(leaves)))`` leaves reach the root.
        """
        if not leaves:
            raise ValueError("a Merkle tree needs at least one leaf")
        layer = [tuple(leaf) for leaf in leaves]
        depth = len(layer).bit_length() - 1
        layers = [tuple(layer)]
        for _ in range(depth):
            layer = _hash_layer(perm, layer)
            layers.append(tuple(layer))
        if len(layers[-1]) != 1:
            raise ValueError("the top layer of the tree must hold exactly one digest")
        return cls(tuple(layers))

    def open(self, index: int) -> list[Digest]:
        """Return the sibling path from leaf ``index`` to the root."""
        if not 0 <= index < len(self.digest_layers[0]):
            raise IndexError(f"leaf index {index} out of range")
        proof = []
        for layer in self.digest_layers[:-1]:
            proof.append(layer[index ^ 1])
            index >>= 1
        return proof

    def root(self) -> Digest:
        """Return the root digest."""
        return self.digest_layers[-1][0]


def verify_merkle_proof(
    index: int,
    leaf: Sequence[int],
    root: Sequence[int],
    proof: Sequence[Sequence[int]],
    perm: Poseidon2,
) -> bool:
    """Check that ``leaf`` sits at ``index`` in the tree with the given ``root``."""
    current = tuple(leaf)
    for sibling in proof:
        if index & 1 == 0:
            current = hash_poseidon2(perm, current, sibling)
        else:
            current = hash_poseidon2(perm, sibling, current)
        index >>= 1
    return current == tuple(root)