"""floyd-cycles CLI entry point.

Usage: floyd-cycles detect graph.json [--normalize]
       floyd-cycles floyd graph.json --start 3
"""
import argparse
import json
import logging
import sys
from importlib.metadata import PackageNotFoundError, version

from floyd_cycles.domain.options import DetectOptions
from floyd_cycles.graph.detect import detect_cycles
from floyd_cycles.graph.floyd import Cycle, floyd
from floyd_cycles.graph.loader import GraphFormatError, LoadedPath, read_path


def _version() -> str:
    try:
        return version("floyd-cycles")
    except PackageNotFoundError:
        return "unknown"


def _add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "file", type=argparse.FileType("r"),
        help="JSON graph: an array of nodes, or an object of label -> [labels]. "
             "Use - for stdin.",
    )
    p.add_argument(
        "--normalize", action="store_true",
        help="Turn in-edges into out-edges before detection.",
    )
    p.add_argument(
        "--out-field", default="out",
        help="Key holding out-edges on record nodes (default: out)",
    )
    p.add_argument(
        "--in-field", default="in",
        help="Key holding in-edges on record nodes (default: in)",
    )
    p.add_argument(
        "--exclude", type=int, nargs="+", default=[], metavar="INDEX",
        help="Node indices the search never steps into.",
    )


def _options(args: argparse.Namespace) -> DetectOptions:
    return DetectOptions(
        out_edge_field=args.out_field,
        in_edge_field=args.in_field,
        normalize_path=args.normalize,
        exclude_indices=frozenset(args.exclude),
    )


def _render(cycle: Cycle, loaded: LoadedPath) -> dict:
    out: dict = cycle.to_dict()
    if loaded.labels is not None:
        out["first"] = loaded.label(cycle.first_index)
    return out


def _load(args: argparse.Namespace) -> LoadedPath:
    with args.file as fp:
        return read_path(fp, args.out_field, args.in_field)


def _run_detect(args: argparse.Namespace) -> None:
    loaded = _load(args)
    cycles = detect_cycles(loaded.path, _options(args))
    print(json.dumps([_render(c, loaded) for c in cycles], indent=2))


def _run_floyd(args: argparse.Namespace) -> None:
    loaded = _load(args)
    if loaded.path and not 0 <= args.start < len(loaded.path):
        raise GraphFormatError(
            f"--start {args.start} is outside the graph (0..{len(loaded.path) - 1})"
        )
    cycle = floyd(loaded.path, args.start, _options(args)) if loaded.path else None
    print(json.dumps(_render(cycle, loaded) if cycle else None, indent=2))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="floyd-cycles",
        description="Find cycles in indexed graphs with a frontier-based Floyd search.",
    )
    parser.add_argument("--version", action="version", version=_version())
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log each search phase at DEBUG level.",
    )
    subparsers = parser.add_subparsers(dest="command")

    p = subparsers.add_parser("detect", help="Find every cycle, starting from each node.")
    _add_common_args(p)

    p = subparsers.add_parser("floyd", help="Find the cycle reachable from one node.")
    _add_common_args(p)
    p.add_argument(
        "--start", type=int, default=0,
        help="Start index (default: 0)",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        if args.command == "detect":
            _run_detect(args)
        elif args.command == "floyd":
            _run_floyd(args)
    except (GraphFormatError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        print(f"floyd-cycles: invalid graph: {exc}", file=sys.stderr)
        sys.exit(2)
    except OSError as exc:
        print(f"floyd-cycles: {exc}", file=sys.stderr)
        sys.exit(2)
