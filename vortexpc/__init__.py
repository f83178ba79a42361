"""Vortex-style polynomial commitments over the KoalaBear field."""

__version__ = "0.1.0"

__all__ = ["field", "rs", "hash", "merkle_tree", "vortex"]