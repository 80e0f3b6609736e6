"""Merkle Commit — a single root digest committing to an ordered list of blocks."""
__version__ = "0.1.0"
from merkle_commit.crypto.hashing import DIGEST_SIZE, INTERNAL_PREFIX, LEAF_PREFIX, hash_internal, hash_leaf
from merkle_commit.errors import InvalidBlockError, InvalidDigestError, MerkleError
from merkle_commit.node import Node
from merkle_commit.tree import Tree, build
__all__ = ["DIGEST_SIZE", "INTERNAL_PREFIX", "InvalidBlockError", "InvalidDigestError", "LEAF_PREFIX",
           "MerkleError", "Node", "Tree", "build", "hash_internal", "hash_leaf"]
