# erdos.py
"""
Erdős–Rényi G(n, p) random graph generator.

Every candidate vertex pair gets exactly one independent Bernoulli(p)
trial. Which pairs are candidates depends on two switches:

    directed  loops   pairs            count
    yes       yes     all (i, j)       n^2
    yes       no      i != j           n(n-1)
    no        yes     i <= j           n(n+1)/2
    no        no      i < j            n(n-1)/2

Pairs are visited with i ascending, then j ascending, and that order is
also the edge order of the returned graph. Nodes are labeled 0..n-1.
"""

from typing import Any, Iterator, Optional, Sequence, Tuple

from er_graph import Edge, Graph
from rand_source import RandomSource, PyRandomSource


def candidate_pairs(n: int, directed: bool = False, loops: bool = False) -> Iterator[Tuple[int, int]]:
    for i in range(n):
        start = 0 if directed else (i if loops else i + 1)
        for j in range(start, n):
            if i == j and not loops:
                continue
            yield i, j


def nb_possible_edges(n: int, directed: bool = False, loops: bool = False) -> int:
    """Number of pairs candidate_pairs() yields, i.e. the edge count at p = 1."""
    if directed:
        return n * n if loops else n * (n - 1)
    return n * (n + 1) // 2 if loops else n * (n - 1) // 2


def generate_erdos_renyi(
    n: int,
    p: float,
    directed: bool = False,
    loops: bool = False,
    weights: Sequence[Any] = (),
    rng: Optional[RandomSource] = None,
) -> Graph:
    """
    Generate an Erdős–Rényi G(n, p) graph.

    Args:
        n: Number of nodes (>= 0), nodes will be 0..n-1.
        p: Edge probability in [0, 1].
        directed: Generate a digraph (ordered pairs).
        loops: Allow self-loops.
        weights: Weight candidates; each kept edge gets one picked uniformly.
                 Empty means unweighted.
        rng: Random source; a freshly seeded one is used if omitted.

    Returns:
        The generated Graph.

    n and p are expected to be validated by the caller (see config.py).
    """
    if rng is None:
        rng = PyRandomSource()

    weights = tuple(weights)
    edges = []

    for i, j in candidate_pairs(n, directed, loops):
        if rng.next_probability() < p:
            weight = rng.choose(weights) if weights else None
            edges.append(Edge(i, j, weight))

    return Graph(n, edges, directed=directed, loops=loops, weights=weights, probability=p)


if __name__ == "__main__":
    # Tiny smoke test (not analysis: just sanity-check)
    G = generate_erdos_renyi(10, 0.3, rng=PyRandomSource(42))
    print("Generated ER graph with", G.n, "nodes and", G.nb_edges, "edges.")
