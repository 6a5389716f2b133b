# render.py
"""Output format selection."""

from enum import Enum

from dimacs import to_dimacs
from dot import to_dot
from er_graph import Graph


class Output(Enum):
    DIMACS = "dimacs"
    GRAPHVIZ = "graphviz"

    @classmethod
    def parse(cls, text: str) -> "Output":
        key = text.strip().lower()
        if key == "dimacs":
            return cls.DIMACS
        if key in ("graphviz", "dot"):
            return cls.GRAPHVIZ
        raise ValueError(f"unknown output format {text!r} (expected dimacs, graphviz or dot)")


def render(graph: Graph, output: Output = Output.DIMACS, comments: bool = True) -> str:
    if output is Output.GRAPHVIZ:
        return to_dot(graph)
    return to_dimacs(graph, comments=comments)
