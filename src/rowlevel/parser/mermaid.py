"""Parser for Mermaid-style graph definitions.

Uses a simple line-by-line approach rather than a full grammar parser,
since the subset we need is small: node declarations and single-arrow edges.

    graph TB
        lead_time[Lead time]
        design --> lead_time
        build -->|blocks| design
"""

from __future__ import annotations

__all__ = ["parse_mermaid"]

import re

from rowlevel.errors import GraphFormatError
from rowlevel.parser.model import Edge, Graph, Node


def parse_mermaid(text: str) -> Graph:
    """Parse a Mermaid graph definition into a Graph.

    Node labels are kept as the ``label`` attribute, edge labels as the
    edge's ``label`` attribute. Nodes first seen in an edge are created bare.
    Subgraph grouping is ignored: ``subgraph`` and ``end`` lines are skipped and
    the nodes inside them belong to the one graph.
    """
    graph = Graph()

    for lineno, line in enumerate(text.split("\n"), start=1):
        stripped = line.strip()
        if not stripped:
            continue

        # Skip comments and graph declaration
        if stripped.startswith("%%") or _HEADER_PATTERN.match(stripped):
            continue

        # Subgraph start and end
        if stripped == "end" or _SUBGRAPH_PATTERN.match(stripped):
            continue

        # Try edge first (contains arrow)
        if "-->" in stripped or "---" in stripped or "==>" in stripped:
            if not _parse_edge(stripped, graph):
                raise GraphFormatError(f"Line {lineno}: cannot parse edge: {stripped!r}")
            continue

        if not _parse_node(stripped, graph):
            raise GraphFormatError(f"Line {lineno}: cannot parse node: {stripped!r}")

    return graph


_HEADER_PATTERN = re.compile(r"^(graph|flowchart)(\s+(TB|TD|BT|LR|RL))?\s*;?$")

# Subgraph pattern: subgraph id [Display Name]
_SUBGRAPH_PATTERN = re.compile(r"^subgraph\s+(\w+)\s*(?:\[(.+?)\])?\s*$")

# Regex patterns for node shapes
_NODE_PATTERNS = [
    # stadium: node_id([label])
    re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)\(\[(.+?)\]\)$"),
    # square bracket: node_id[label]
    re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)\[(.+?)\]$"),
    # round bracket: node_id(label)
    re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)\((.+?)\)$"),
    # bare id
    re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)$"),
]

# Edge pattern: source -->|label| target  or  source --> target
_EDGE_PATTERN = re.compile(
    r"^([a-zA-Z_][a-zA-Z0-9_]*)\s*"  # source
    r"(-->|---|==>)"  # arrow
    r"(?:\|([^|]*)\|)?\s*"  # optional |label|
    r"([a-zA-Z_][a-zA-Z0-9_]*)$"  # target
)


def _parse_node(line: str, graph: Graph) -> bool:
    """Parse a node definition line. Returns False if nothing matched."""
    for pattern in _NODE_PATTERNS:
        m = pattern.match(line)
        if m:
            name = m.group(1)
            node = graph.nodes.get(name)
            if node is None:
                node = Node(name=name)
                graph.add_node(node)
            if m.lastindex >= 2:
                # Also labels nodes auto-created from an earlier edge
                node.attrs["label"] = m.group(2).strip()
            return True
    return False


def _parse_edge(line: str, graph: Graph) -> bool:
    """Parse an edge definition line. Returns False if nothing matched."""
    m = _EDGE_PATTERN.match(line)
    if not m:
        return False

    source = m.group(1)
    target = m.group(4)
    for name in (source, target):
        if name not in graph.nodes:
            graph.add_node(Node(name=name))

    attrs = {"label": m.group(3).strip()} if m.group(3) else {}
    graph.add_edge(Edge(source=source, target=target, attrs=attrs))
    return True
