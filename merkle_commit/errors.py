"""Errors raised while building a Merkle commitment."""
from __future__ import annotations


class MerkleError(Exception):
    pass


class InvalidBlockError(MerkleError, TypeError):
    """A block is not bytes-like."""

    def __init__(self, index: int, block: object) -> None:
        self.index = index
        super().__init__(f"Block {index} must be bytes-like, got {type(block).__name__}")


class InvalidDigestError(MerkleError, ValueError):
    """A child digest has the wrong length for the fixed hash."""
