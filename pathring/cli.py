"""Command-line interface for pathring."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable, List, Optional

from pathring.algebra.path_value import PathValue
from pathring.closure import ClosureEngine
from pathring.config import ClosureConfig
from pathring.dataset import Dataset, IndexMapper, load_dataset
from pathring.graph import build_adjacency_matrix
from pathring.logging import configure_from_flags, get_logger, set_global_log_level

logger = get_logger(__name__)

QUIT_WORDS = {"", "q", "quit", "exit"}


def _format_km(distance: float) -> str:
    """Return ``distance`` with thousands separators and at most three decimals."""
    text = f"{distance:,.3f}".rstrip("0")
    return text[:-1] if text.endswith(".") else text


def _format_table(headers: List[str], rows: List[List[str]]) -> str:
    """Lay out ``rows`` under ``headers`` as left-aligned ``|``-separated columns."""
    if not rows:
        return ""
    widths = [max(len(cell) for cell in column) for column in zip(headers, *rows)]

    def line(cells: List[str]) -> str:
        return " | ".join(cell.ljust(width) for cell, width in zip(cells, widths))

    rule = "-+-".join("-" * width for width in widths)
    return "\n".join([line(headers), rule] + [line(row) for row in rows])


def render_route(value: PathValue, mapper: IndexMapper, origin: int, destination: int) -> str:
    """Render a query result as ordered city names with total distance."""
    if not value.reachable:
        return (
            f"No route between {mapper.name_of(origin)} "
            f"and {mapper.name_of(destination)}"
        )
    names = " -> ".join(mapper.names(value.route))
    return f"{names} (distance: {_format_km(value.distance)} km)"


def route_payload(value: PathValue, mapper: IndexMapper) -> dict:
    """Return the query output contract extended with city names."""
    payload = value.to_dict()
    payload["names"] = mapper.names(value.route) if value.reachable else None
    return payload


def _prepare(dataset_path: Path, parallelism: int) -> tuple[Dataset, ClosureEngine]:
    dataset = load_dataset(dataset_path)
    graph_input = dataset.to_graph_input()
    matrix = build_adjacency_matrix(graph_input)
    engine = ClosureEngine(matrix, config=ClosureConfig(parallelism=parallelism))
    return dataset, engine


def _route(
    dataset_path: Path,
    origin: str,
    destination: str,
    as_json: bool,
    parallelism: int,
) -> None:
    dataset, engine = _prepare(dataset_path, parallelism)
    mapper = dataset.index_mapper()
    src = mapper.resolve(origin)
    dst = mapper.resolve(destination)
    value = engine.query(src, dst)
    if as_json:
        print(json.dumps(route_payload(value, mapper), indent=2, ensure_ascii=False))
    else:
        print(render_route(value, mapper, src, dst))


def _table(dataset_path: Path, parallelism: int) -> None:
    dataset, engine = _prepare(dataset_path, parallelism)
    mapper = dataset.index_mapper()
    closed = engine.all_pairs()

    headers = ["#", "City"] + [str(i) for i in range(1, len(mapper) + 1)]
    rows = []
    for i, row in enumerate(closed, start=1):
        cells = [_format_km(v.distance) if v.reachable else "-" for v in row]
        rows.append([str(i), mapper.name_of(i)] + cells)
    print(_format_table(headers, rows))


def _shell(
    dataset_path: Path,
    parallelism: int,
    read: Optional[Callable[[str], str]] = None,
) -> None:
    read = read or input
    dataset, engine = _prepare(dataset_path, parallelism)
    mapper = dataset.index_mapper()
    engine.run()

    print(f"{len(mapper)} cities loaded:")
    for idx in range(1, len(mapper) + 1):
        print(f"  {idx:>3}  {mapper.name_of(idx)}")
    print("Enter origin and destination (index, code or name); blank line to quit.")

    while True:
        try:
            origin = read("origin> ").strip()
            if origin.lower() in QUIT_WORDS:
                break
            destination = read("destination> ").strip()
            if destination.lower() in QUIT_WORDS:
                break
        except EOFError:
            break
        try:
            src = mapper.resolve(origin)
            dst = mapper.resolve(destination)
        except KeyError as e:
            print(f"ERROR: {e.args[0]}")
            continue
        print(render_route(engine.query(src, dst), mapper, src, dst))


def _run(handler: Callable[..., None], path: Path, **kwargs: Any) -> None:
    try:
        handler(path, **kwargs)
    except FileNotFoundError:
        logger.error(f"Dataset file not found: {path}")
        print(f"ERROR: Dataset file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Command failed: {type(e).__name__}: {e}")
        print(f"ERROR: {type(e).__name__}: {e}")
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``pathring`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="pathring",
        description="Shortest routes between cities by semiring matrix closure.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{route,table,shell}",
        help="Available commands",
    )

    route_parser = subparsers.add_parser("route", help="Shortest route between two cities")
    route_parser.add_argument("dataset", type=Path, help="Path to dataset YAML")
    route_parser.add_argument("origin", help="Origin index, code or name")
    route_parser.add_argument("destination", help="Destination index, code or name")
    route_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON (logs only errors unless --verbose)",
    )

    table_parser = subparsers.add_parser("table", help="All-pairs distance table")
    table_parser.add_argument("dataset", type=Path, help="Path to dataset YAML")

    shell_parser = subparsers.add_parser("shell", help="Interactive route queries")
    shell_parser.add_argument("dataset", type=Path, help="Path to dataset YAML")

    for p in (route_parser, table_parser, shell_parser):
        p.add_argument(
            "--parallelism",
            "-p",
            type=int,
            default=1,
            help="Worker threads per squaring (default: 1)",
        )

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)
    configure_from_flags(verbose=args.verbose, quiet=args.quiet)
    if getattr(args, "json", False) and not args.verbose:
        # Log records share stdout with the JSON document
        set_global_log_level(logging.ERROR)

    if args.command == "route":
        _run(
            _route,
            args.dataset,
            origin=args.origin,
            destination=args.destination,
            as_json=args.json,
            parallelism=args.parallelism,
        )
    elif args.command == "table":
        _run(_table, args.dataset, parallelism=args.parallelism)
    elif args.command == "shell":
        _run(_shell, args.dataset, parallelism=args.parallelism)


if __name__ == "__main__":
    main()
