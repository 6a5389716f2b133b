# dot.py
"""
GraphViz dot writer.

Vertex ids are bare 1-based integers, matching the DIMACS output, and
every vertex is declared so isolated ones still show up when rendered.
"""

from er_graph import Graph


def quote(value) -> str:
    text = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'


def to_dot(graph: Graph, name: str = "g") -> str:
    kind = "digraph" if graph.directed else "graph"
    connector = "->" if graph.directed else "--"

    out = [f"{kind} {name} {{"]
    for v in graph.vertices():
        out.append(f"  {v + 1};")

    for e in graph.edges:
        stmt = f"  {e.source + 1} {connector} {e.target + 1}"
        if e.weight is not None:
            stmt += f" [label={quote(e.weight)}]"
        out.append(stmt + ";")

    out.append("}")
    return "\n".join(out) + "\n"
