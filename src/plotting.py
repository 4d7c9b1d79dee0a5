"""DOT serialization and Graphviz rendering of family tree graphs."""

from pathlib import Path

import networkx as nx
import pydot

from errors import IoError

RENDER_FORMATS = ("png", "svg", "pdf")


def to_dot(G: nx.MultiDiGraph) -> pydot.Dot:
    """
    Convert the family graph into a pydot digraph.

    Each node is declared under its positional index with its display label,
    plus an ``image`` attribute when a portrait was written for it. Edges carry
    no label or attributes.
    """
    P = pydot.Dot(graph_type="digraph")

    # Add nodes
    for node, data in G.nodes(data=True):
        attrs = {"label": data["label"]}
        if data.get("image"):
            attrs["image"] = data["image"]
        P.add_node(pydot.Node(str(node), **attrs))

    # Add edges
    for u, v in G.edges():
        P.add_edge(pydot.Edge(str(u), str(v)))

    return P


def write_dot(G: nx.MultiDiGraph, output_path: Path):
    """Write the DOT text of ``G`` to ``output_path`` (UTF-8, overwriting)."""
    text = to_dot(G).to_string()
    try:
        Path(output_path).write_text(text, encoding="utf-8")
    except OSError as exc:
        raise IoError(f"cannot write DOT file {output_path}: {exc}") from exc


def render_graph(G: nx.MultiDiGraph, output_path: Path, fmt: str | None = None):
    """
    Render the family tree through Graphviz.

    Args:
        G: The family graph
        output_path: Destination image file
        fmt: One of png, svg, pdf. Taken from the file extension when None,
            falling back to png.
    """
    output_path = Path(output_path)
    if fmt is None:
        fmt = output_path.suffix.lower().lstrip(".")
    if fmt not in RENDER_FORMATS:
        fmt = "png"

    try:
        to_dot(G).write(str(output_path), format=fmt)
    except (OSError, AssertionError) as exc:
        # pydot asserts on a non-zero Graphviz exit status
        raise IoError(f"cannot render {output_path} with Graphviz: {exc}") from exc
