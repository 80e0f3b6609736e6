"""Merkle tree construction over an ordered sequence of data blocks."""
from __future__ import annotations
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from merkle_commit.errors import InvalidBlockError
from merkle_commit.node import Node

logger = logging.getLogger("merkle_commit.tree")

BLOCK_TYPES = (bytes, bytearray, memoryview)


@dataclass(frozen=True)
class Tree:
    root: Node | None = None
    leaf_count: int = 0

    @property
    def root_digest(self) -> bytes | None:
        return self.root.digest if self.root is not None else None

    @property
    def height(self) -> int:
        levels, node = 0, self.root
        while node is not None and node.left is not None:
            levels, node = levels + 1, node.left
        return levels

    def to_dict(self) -> dict:
        digest = self.root_digest
        return {"leaf_count": self.leaf_count, "height": self.height,
                "root_digest": digest.hex() if digest is not None else None}


def build(blocks: Iterable[bytes]) -> Tree:
    """Build a Merkle tree and return it; empty input gives a tree with no root.

    Block order is significant. At every level with an odd number of nodes the
    last node is hashed together with itself.
    """
    level = [Node.leaf(_as_block(i, block)) for i, block in enumerate(blocks)]
    if not level:
        logger.debug("Built empty Merkle tree")
        return Tree()
    leaf_count = len(level)
    while len(level) > 1:
        level = _reduce_level(level)
    tree = Tree(root=level[0], leaf_count=leaf_count)
    logger.debug(f"Built Merkle tree: {leaf_count} leaves, height {tree.height}")
    return tree


def _reduce_level(level: list[Node]) -> list[Node]:
    next_level = [Node.internal(level[i], level[i + 1]) for i in range(0, len(level) - 1, 2)]
    if len(level) % 2 == 1:
        next_level.append(_pair_odd_node(level[-1]))
    return next_level


def _pair_odd_node(node: Node) -> Node:
    # Duplicate, never promote: the unpaired node becomes both children.
    return Node.internal(node, node)


def _as_block(index: int, block: object) -> bytes:
    if not isinstance(block, BLOCK_TYPES):
        raise InvalidBlockError(index, block)
    return bytes(block)
