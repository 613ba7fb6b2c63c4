# Minimal CLI using argparse that loads a tree from TOML and prints its traversal.
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from generic_containers.core.config import ORDERS
from generic_containers.core.errors import ContainerError
from generic_containers.core.loader import load_tree

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="gc-tree", description="Print the traversal of a binary tree stored in TOML"
    )
    p.add_argument("input", type=Path, help="Input TOML file")
    p.add_argument("--add", type=float, help="Add this number to every value")
    p.add_argument("--scale", type=float, help="Multiply every value by this number")
    p.add_argument(
        "--order",
        choices=ORDERS,
        help="Traversal order (default: from file, else inorder)",
    )
    p.add_argument(
        "--render", action="store_true", help="Also print a drawing of the tree"
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def _number(x: float) -> int | float:
    return int(x) if float(x).is_integer() else x


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        tree, config = load_tree(args.input)
    except (ContainerError, ValueError) as e:
        print(f"Error loading tree: {e}")
        return 2

    # --verbose wins over the file's log_level
    if not args.verbose:
        root.setLevel(config.level)

    if args.add is not None or args.scale is not None:
        scale = args.scale if args.scale is not None else 1
        add = args.add if args.add is not None else 0
        logger.info(f"Mapping values with x * {scale} + {add}")
        try:
            tree = tree.map(lambda x: _number(x * scale + add))
        except TypeError as e:
            print(f"Error transforming tree: {e}")
            return 2

    order = args.order or config.order
    if order == "preorder":
        values = tree.preorder_values()
    elif order == "postorder":
        values = tree.postorder_values()
    else:
        values = tree.values()

    print(" ".join(str(v) for v in values))
    if args.render or config.render:
        print(tree.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
