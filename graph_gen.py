#!/usr/bin/env python3
"""
graph_gen.py

Convenience tool to generate pseudo-random Erdős–Rényi graphs.

Examples:
    graph-gen -n 10 -p 0.3
    graph-gen -n 10 -p 0.3 --digraph --loops -o dot
    graph-gen -n 50 -p 0.1 -w 1 2 3 --seed 42
"""

import argparse
import sys

from config import GraphConfig, InvalidConfiguration, build
from rand_source import RNG_KINDS
from render import render

__version__ = "0.1.0"


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graph-gen",
        description="Generate pseudo-random Erdős–Rényi G(n, p) graphs",
    )

    parser.add_argument("-n", "--nb_vertices", type=int, required=True,
                        help="The number of vertices in the generated graph")
    parser.add_argument("-p", "--probability", type=float, required=True,
                        help="The likelihood of any edge to be picked")
    parser.add_argument("-l", "--loops", action="store_true",
                        help="If set, self loops are allowed in the generated graph")
    parser.add_argument("-d", "--digraph", action="store_true",
                        help="If set, the generated graph will be a digraph")
    parser.add_argument("-o", "--output", type=str, default="dimacs",
                        help="The output language: dimacs (default), graphviz or dot")
    parser.add_argument("-w", "--weights", nargs="+", default=[], metavar="W",
                        help="Optional weight candidates, one is picked per edge")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--rng", type=str, default="python", choices=RNG_KINDS,
                        help="Random number backend")
    parser.add_argument("--no-comments", action="store_true",
                        help="Omit the comment header of the DIMACS output")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Print a summary on stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def main(argv=None) -> int:
    parser = make_parser()
    args = parser.parse_args(argv)

    try:
        cfg = GraphConfig.from_args(args).validate()
    except InvalidConfiguration as exc:
        parser.error(str(exc))

    if args.verbose:
        kind = "digraph" if cfg.digraph else "graph"
        print(f"=== Generating ER {kind} G({cfg.nb_vertices}, {cfg.probability}) ===", file=sys.stderr)

    graph = build(cfg)

    if args.verbose:
        print("Nodes:", graph.n, file=sys.stderr)
        print("Edges:", graph.nb_edges, file=sys.stderr)

    sys.stdout.write(render(graph, cfg.output, comments=cfg.comments))
    return 0


if __name__ == "__main__":
    sys.exit(main())
