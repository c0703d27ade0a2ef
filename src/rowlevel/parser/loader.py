"""Build graphs from JSON-shaped documents.

The document shape is::

    {
        "nodes": [{"name": "lead_time", ...}, ...],
        "edges": [{"source": "design", "target": "lead_time", ...}, ...]
    }

Any extra node or edge keys are kept as passthrough attributes. A ``row``
key on an input node is dropped, since leveling always starts from scratch.
"""

from __future__ import annotations

__all__ = ["graph_from_dict", "load_graph"]

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from rowlevel.errors import GraphFormatError
from rowlevel.parser.model import Edge, Graph, Node

MERMAID_SUFFIXES = (".mmd", ".mermaid")


def graph_from_dict(data: Mapping[str, Any]) -> Graph:
    """Build a Graph from a ``{"nodes": [...], "edges": [...]}`` mapping."""
    if not isinstance(data, Mapping) or "nodes" not in data:
        raise GraphFormatError("Graph document must be an object with a 'nodes' list")

    nodes = data["nodes"]
    edges = data.get("edges")
    if edges is None:
        edges = []
    if not isinstance(nodes, list):
        raise GraphFormatError("'nodes' must be a list")
    if not isinstance(edges, list):
        raise GraphFormatError("'edges' must be a list")

    graph = Graph()
    for i, item in enumerate(nodes):
        if not isinstance(item, Mapping) or "name" not in item:
            raise GraphFormatError(f"Node #{i} has no 'name'")
        name = str(item["name"])
        if name in graph.nodes:
            raise GraphFormatError(f"Duplicate node name '{name}'")
        attrs = {k: v for k, v in item.items() if k not in ("name", "row")}
        graph.add_node(Node(name=name, attrs=attrs))

    for i, item in enumerate(edges):
        if not isinstance(item, Mapping) or "source" not in item or "target" not in item:
            raise GraphFormatError(f"Edge #{i} needs both 'source' and 'target'")
        attrs = {k: v for k, v in item.items() if k not in ("source", "target")}
        graph.add_edge(
            Edge(source=str(item["source"]), target=str(item["target"]), attrs=attrs)
        )

    return graph


def load_graph(path: Path) -> Graph:
    """Read a graph file: JSON, or Mermaid text for .mmd/.mermaid files."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise GraphFormatError(f"{path}: not a UTF-8 text file: {e}") from e
    if path.suffix.lower() in MERMAID_SUFFIXES:
        from rowlevel.parser.mermaid import parse_mermaid

        return parse_mermaid(text)

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise GraphFormatError(f"{path}: invalid JSON: {e}") from e
    return graph_from_dict(data)
