#!/usr/bin/env python3
"""
Merkle Commit host: root digest of one or more files

Reads each file as one block (or as fixed-size chunks, or as lines), builds the
Merkle tree in the order given, and prints the root digest as hex.

Usage:
    python run_merkle.py a.bin b.bin c.bin
    python run_merkle.py --chunk-size 4096 image.iso
    python run_merkle.py --lines --json ledger.txt

    # Default chunk size from the environment:
    export MERKLE_CHUNK_SIZE=65536
"""
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from merkle_commit import Tree, build

logger = logging.getLogger("merkle_commit.host")


# ── Block readers ───────────────────────────────────────────────────


def read_blocks(paths: list[str | Path], chunk_size: int | None = None,
                lines: bool = False) -> list[bytes]:
    """Turn files into blocks, in path order. Raises OSError on unreadable files."""
    blocks: list[bytes] = []
    for path in paths:
        data = Path(path).read_bytes()
        if lines:
            blocks.extend(data.splitlines())
        elif chunk_size:
            blocks.extend(data[i:i + chunk_size] for i in range(0, len(data), chunk_size))
        else:
            blocks.append(data)
        logger.debug(f"Read {len(data)} bytes from {path}")
    return blocks


def format_tree(tree: Tree, as_json: bool = False) -> str:
    if as_json:
        return json.dumps(tree.to_dict(), indent=2)
    digest = tree.root_digest
    return digest.hex() if digest is not None else "N/A"


# ── CLI ─────────────────────────────────────────────────────────────


def positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}")
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {n}")
    return n


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Merkle root digest of files")
    parser.add_argument("paths", nargs="*", help="Files to commit to, in order")
    parser.add_argument("--chunk-size", type=positive_int,
                        default=os.environ.get("MERKLE_CHUNK_SIZE"),
                        help="Split each file into blocks of this many bytes "
                             "(default: $MERKLE_CHUNK_SIZE, else one block per file)")
    parser.add_argument("--lines", action="store_true",
                        help="One block per line; takes precedence over --chunk-size")
    parser.add_argument("--json", action="store_true", help="Print a JSON summary")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s: %(message)s")

    try:
        blocks = read_blocks(args.paths, chunk_size=args.chunk_size, lines=args.lines)
    except OSError as e:
        logger.error(f"Could not read input: {e}")
        return 1

    tree = build(blocks)
    print(format_tree(tree, as_json=args.json))
    return 0


if __name__ == "__main__":
    sys.exit(main())
