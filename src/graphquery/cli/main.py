"""Command line interface for graphquery."""

from __future__ import annotations

import argparse
import logging

from ..core import FQB
from .query_cmds import run_compile, run_get


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="graphquery")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    compile_parser = subparsers.add_parser("compile", help="Print the compiled request path")
    _add_query_arguments(compile_parser)
    compile_parser.add_argument(
        "--tree",
        action="store_true",
        help="Also render the requested fields as a tree",
    )

    get_parser = subparsers.add_parser("get", help="Send a GET request and print the JSON body")
    _add_query_arguments(get_parser)
    get_parser.add_argument(
        "--access-token",
        default=None,
        help="Access token to use instead of the configured one",
    )
    return parser


def _add_query_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("edge_name", help="Root node or edge, e.g. 'me' or '1234/photos'")
    parser.add_argument("--fields", default="", help="Comma-separated field names")
    parser.add_argument("--limit", type=int, default=0, help="Pagination limit")
    parser.add_argument(
        "--edge",
        action="append",
        default=[],
        metavar="NAME=FIELDS",
        help="Nested edge with comma-separated fields, may be repeated",
    )


def build_query(args: argparse.Namespace, parser: argparse.ArgumentParser) -> FQB:
    if args.limit < 0:
        parser.error("--limit must be non-negative")

    builder = FQB(args.edge_name, _split_fields(args.fields)).limit(args.limit)
    for spec in args.edge:
        name, _, fields = spec.partition("=")
        if not name:
            parser.error(f"Invalid --edge value: {spec!r}")
        builder.fields(builder.edge(name, _split_fields(fields)))
    return builder


def _split_fields(value: str) -> list[str]:
    return [field.strip() for field in value.split(",") if field.strip()]


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    builder = build_query(args, parser)
    if args.command == "compile":
        return run_compile(builder, tree=args.tree)
    if args.command == "get":
        return run_get(builder, access_token=args.access_token)

    parser.error("Unknown command")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
