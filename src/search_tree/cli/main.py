# Demo CLI: builds sample trees and prints every tree operation's result.
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, TextIO

from search_tree.core.config import TreeConfig, load_config
from search_tree.core.errors import SearchTreeError
from search_tree.core.tree import BinarySearchTree

DEFAULT_VALUES = [33, 20, 30, 40, 50, 41, 31, 21, 11]
NUMS = 50
GAP = 10


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bst-demo", description="Exercise an unbalanced binary search tree"
    )
    p.add_argument(
        "--values",
        type=int,
        nargs="+",
        default=DEFAULT_VALUES,
        help="Values inserted into the first tree, in order",
    )
    p.add_argument(
        "--rotate", type=int, default=20, help="Element to rotate right, then left"
    )
    p.add_argument("--config", type=Path, help="TOML file with a [tree] table")
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return p


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def gap_sequence() -> List[int]:
    """GAP, 2*GAP, ... stepping modulo NUMS until wrapping to 0."""
    values = []
    i = GAP
    while i != 0:
        values.append(i)
        i = (i + GAP) % NUMS
    return values


def run_demo(values: List[int], rotate: int, config: TreeConfig, out: TextIO) -> None:
    tree1: BinarySearchTree[int] = BinarySearchTree(config)
    tree2: BinarySearchTree[int] = BinarySearchTree(config)
    same_shape: BinarySearchTree[int] = BinarySearchTree(config)
    for v in values:
        tree1.insert(v)
        same_shape.insert(v)
    for v in gap_sequence():
        tree2.insert(v)

    image = tree1.mirror()

    def say(*items: object) -> None:
        print(*items, sep="", file=out)

    say("printing tree tree1:", tree1)
    say("printing tree tree2:", tree2)
    say("checking for equality ")
    say(tree1.equals(tree2))
    say("checking for is full")
    say(tree1.is_full())
    say("Node count of tree t is")
    say(tree1.node_count())
    say("checking for structures")
    say(tree1.compare_structure(same_shape))
    say(tree1.compare_structure(tree2))
    say("checking for copy")
    say(tree1.copy())
    say(tree2.copy())
    say("Mirrored tree of tree1 is:")
    say(tree1.mirror())
    say("checking for ismirror condition")
    say(tree1.is_mirror(image))
    say(tree2.is_mirror(image))
    say("performing rotate right:")
    tree1.rotate_right(rotate, out)
    say("performing rotate left:")
    tree1.rotate_left(rotate, out)
    say("printing levels")
    tree1.print_levels(out)


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        config = load_config(args.config) if args.config else TreeConfig()
        run_demo(args.values, args.rotate, config, sys.stdout)
    except SearchTreeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
