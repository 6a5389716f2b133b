# dimacs.py
"""
DIMACS writer.

    c <comment lines>
    p edge <n> <m>
    e <u> <v> [<w>]

Vertices are written 1-based (index + 1). The weight column is present
on every edge line of a weighted graph and absent on every line of an
unweighted one.
"""

from typing import List

from er_graph import Graph


def header(graph: Graph) -> List[str]:
    kind = "digraph" if graph.directed else "graph"
    model = f"G({graph.n}, {graph.probability})" if graph.probability is not None else f"G({graph.n})"
    loops = "" if graph.loops else " NOT"
    weighted = "WEIGHTED" if graph.weighted else "UNWEIGHTED"
    return [
        f"c Pseudo-random Erdos-Renyi {kind} {model}",
        f"c it was generated to{loops} allow self loops",
        f"c This graph has {graph.n} vertices and {graph.nb_edges} edges",
        f"c The edges of this graph are {weighted}",
        "c -------------------------------------------------------------",
    ]


def to_dimacs(graph: Graph, comments: bool = True) -> str:
    out = header(graph) if comments else []
    out.append(f"p edge {graph.n} {graph.nb_edges}")

    for e in graph.edges:
        if graph.weighted:
            out.append(f"e {e.source + 1} {e.target + 1} {e.weight}")
        else:
            out.append(f"e {e.source + 1} {e.target + 1}")

    return "\n".join(out) + "\n"
