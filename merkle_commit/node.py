"""Merkle tree nodes."""
from __future__ import annotations
from dataclasses import dataclass
from merkle_commit.crypto.hashing import hash_internal, hash_leaf


@dataclass(frozen=True)
class Node:
    """A leaf (no children) or an internal node (two children).

    The digest depends only on the node kind and on the block data (leaf)
    or the two child digests (internal). Nodes never change once built.
    """
    digest: bytes
    left: Node | None = None
    right: Node | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    @classmethod
    def leaf(cls, data: bytes) -> Node:
        return cls(digest=hash_leaf(data))

    @classmethod
    def internal(cls, left: Node, right: Node | None = None) -> Node:
        """Combine two children; a lone left child is paired with itself."""
        if right is None:
            right = left
        return cls(digest=hash_internal(left.digest, right.digest), left=left, right=right)
