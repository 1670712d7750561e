# Minimal demo driver using argparse: builds a list, mutates it and prints the values.
from __future__ import annotations

import argparse
import logging
import sys

from linked_lists.core.errors import LinkedListError
from linked_lists.core.singly_linked_list import SinglyLinkedList

DEFAULT_VALUES = ["10", "5", "16"]


def _parse_value(raw: str) -> int | str:
    try:
        return int(raw)
    except ValueError:
        return raw


def _parse_insert(raw: str) -> tuple[int, int | str]:
    index, sep, value = raw.partition(":")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected INDEX:VALUE, got {raw!r}")
    try:
        return int(index), _parse_value(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid index in {raw!r}") from e


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="linked-lists", description="Build and mutate a singly linked list"
    )
    p.add_argument("values", nargs="*", help="Initial values (default: 10 5 16)")
    p.add_argument(
        "--insert",
        type=_parse_insert,
        action="append",
        default=[],
        metavar="INDEX:VALUE",
        help="Insert VALUE at INDEX (repeatable)",
    )
    p.add_argument(
        "--remove",
        type=int,
        action="append",
        default=[],
        metavar="INDEX",
        help="Remove the node after INDEX (repeatable)",
    )
    p.add_argument("--reverse", action="store_true", help="Reverse the list last")
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    demo = not (args.values or args.insert or args.remove or args.reverse)
    values = args.values or DEFAULT_VALUES
    linked = SinglyLinkedList.from_iterable(_parse_value(v) for v in values)
    print(linked.print_list())

    try:
        for index, value in args.insert:
            linked.insert(index, value)
        for index in args.remove:
            linked.remove(index)
    except LinkedListError as e:
        print(f"Error: {e}")
        return 2

    if args.reverse or demo:
        print(linked.reverse())
    elif args.insert or args.remove:
        print(linked.print_list())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
