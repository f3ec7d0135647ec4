import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from gridcross import GraphValidationError, LayoutOptions, compute_layout, parse_edge_list
from gridcross.model import DEFAULT_SEED

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as fin:
        return fin.read()


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Lay out a graph on a jittered grid")
    parser.add_argument("path", help="Edge list file with one 'u v' pair per line ('-' for stdin)")
    parser.add_argument(
        "--heuristic",
        type=int,
        default=0,
        help="0=auto, 1=spiral, 2=degree-greedy, 3=barycentric, 4=refined (default: 0)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_SEED,
        help=f"Random seed for the grid jitter and refinement (default: {DEFAULT_SEED})",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--output",
        help="Write the JSON result to this path instead of stdout",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    logger.info("Reading edge list from %s", args.path)
    try:
        graph = parse_edge_list(_read_source(args.path))
        graph.validate()
    except GraphValidationError as exc:
        logger.error("Invalid edge list: %s", exc)
        raise SystemExit(1) from exc

    logger.info("Parsed graph with %d vertices and %d edges", graph.vertex_count, graph.edge_count)
    result = compute_layout(
        graph.vertex_count,
        graph.edge_count,
        graph.adjacency,
        args.heuristic,
        options=LayoutOptions(seed=args.seed),
    )

    payload = {
        "k": result.k,
        "heuristic": result.heuristic.name.lower() if result.heuristic is not None else None,
        "crossings": result.crossings,
        "positions": [[x, y] for x, y in result.positions],
    }
    text = json.dumps(payload, indent=2)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as fout:
            fout.write(text + "\n")
        logger.info("Wrote layout to %s", args.output)
    else:
        print(text)


if __name__ == "__main__":
    main()
