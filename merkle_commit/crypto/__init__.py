from merkle_commit.crypto.hashing import (DIGEST_SIZE, INTERNAL_PREFIX, LEAF_PREFIX,
                                          hash_internal, hash_leaf, sha256)
__all__ = ["DIGEST_SIZE", "INTERNAL_PREFIX", "LEAF_PREFIX", "hash_internal", "hash_leaf", "sha256"]
