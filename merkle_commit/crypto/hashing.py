"""Domain-separated SHA-256 for Merkle leaves and internal nodes.

    hash_leaf(data)            = SHA256(0x00 || data)
    hash_internal(left, right) = SHA256(0x01 || left || right)

The hash is fixed for the whole process; callers never pick it.
"""
from __future__ import annotations
from cryptography.hazmat.primitives import hashes
from merkle_commit.errors import InvalidDigestError

HASH_ALGORITHM = hashes.SHA256()
DIGEST_SIZE = HASH_ALGORITHM.digest_size

LEAF_PREFIX = b"\x00"
INTERNAL_PREFIX = b"\x01"


def sha256(*parts: bytes) -> bytes:
    h = hashes.Hash(HASH_ALGORITHM)
    for part in parts:
        h.update(part)
    return h.finalize()


def hash_leaf(data: bytes) -> bytes:
    return sha256(LEAF_PREFIX, data)


def hash_internal(left: bytes, right: bytes) -> bytes:
    # Fixed-length operands keep the untagged concatenation unambiguous.
    for side, digest in (("left", left), ("right", right)):
        if len(digest) != DIGEST_SIZE:
            raise InvalidDigestError(
                f"{side} digest must be {DIGEST_SIZE} bytes, got {len(digest)}")
    return sha256(INTERNAL_PREFIX, left, right)
