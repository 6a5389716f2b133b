# er_graph.py
"""
Graph representation shared by the generator and the writers.

Unlike the adjacency dicts used for analysis, a generated graph keeps its
edges as an ordered edge list (generation order) because the output
formats are edge lists themselves.

    - Vertices are 0, 1, ..., n-1 and carry no attributes.
    - Each edge is (source, target, weight); weight is None when the graph
      has no weight candidates.
"""

from typing import Any, Iterable, NamedTuple, Optional, Sequence, Tuple

import networkx as nx


class Edge(NamedTuple):
    source: int
    target: int
    weight: Optional[Any] = None

    def is_self_loop(self) -> bool:
        return self.source == self.target

    def rev(self) -> "Edge":
        return Edge(self.target, self.source, self.weight)


class Graph:
    """
    An immutable generated graph.

    Args:
        n: Number of vertices (>= 0).
        edges: Edges in generation order.
        directed: Whether (u, v) and (v, u) are distinct edges.
        loops: Whether self-loops were allowed during generation.
        weights: Weight candidates; empty means the graph is unweighted.
        probability: Edge probability the graph was drawn with, if any.

    Raises:
        ValueError: if an edge breaks one of the invariants above.
    """

    def __init__(
        self,
        n: int,
        edges: Iterable[Edge] = (),
        directed: bool = False,
        loops: bool = False,
        weights: Sequence[Any] = (),
        probability: Optional[float] = None,
    ):
        if n < 0:
            raise ValueError("n must be non-negative")

        self.n = n
        self.directed = directed
        self.loops = loops
        self.weights: Tuple[Any, ...] = tuple(weights)
        self.probability = probability
        self.edges: Tuple[Edge, ...] = tuple(Edge(*e) for e in edges)

        self._check()

    def _check(self) -> None:
        seen = set()
        for e in self.edges:
            if not (0 <= e.source < self.n and 0 <= e.target < self.n):
                raise ValueError(f"edge {e.source}-{e.target} out of range for n={self.n}")
            if e.is_self_loop() and not self.loops:
                raise ValueError(f"self-loop on {e.source} but loops are disallowed")

            key = (e.source, e.target)
            if not self.directed:
                key = (min(key), max(key))
            if key in seen:
                raise ValueError(f"duplicate edge {e.source}-{e.target}")
            seen.add(key)

            if self.weights:
                if e.weight is None or e.weight not in self.weights:
                    raise ValueError(f"edge {e.source}-{e.target} has weight {e.weight!r} outside the candidates")
            elif e.weight is not None:
                raise ValueError(f"edge {e.source}-{e.target} is weighted but the graph is not")

    @property
    def nb_edges(self) -> int:
        return len(self.edges)

    @property
    def weighted(self) -> bool:
        return bool(self.weights)

    def vertices(self) -> range:
        return range(self.n)

    def to_networkx(self) -> nx.Graph:
        """Export as a networkx (Di)Graph; weights land in the 'weight' attribute."""
        G = nx.DiGraph() if self.directed else nx.Graph()
        G.add_nodes_from(self.vertices())
        for e in self.edges:
            if e.weight is None:
                G.add_edge(e.source, e.target)
            else:
                G.add_edge(e.source, e.target, weight=e.weight)
        return G

    def __repr__(self) -> str:
        kind = "digraph" if self.directed else "graph"
        return f"Graph({kind}, n={self.n}, m={self.nb_edges})"
