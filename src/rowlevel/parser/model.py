"""Data model for leveled graphs."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Node:
    """A named node. ``attrs`` are passed through leveling untouched."""

    name: str
    attrs: dict[str, Any] = field(default_factory=dict)
    # Populated by the leveler
    row: int | None = None

    def to_dict(self, row_format: str = "int") -> dict[str, Any]:
        from rowlevel.layout.labels import format_row_label

        data: dict[str, Any] = {"name": self.name, **self.attrs}
        if row_format == "label" and self.row is not None:
            data["row"] = format_row_label(self.row)
        else:
            data["row"] = self.row
        return data


@dataclass(frozen=True)
class Edge:
    """A directed edge: ``source`` sits one row further from the root than ``target``."""

    source: str
    target: str
    attrs: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def to_dict(self) -> dict[str, Any]:
        return {"source": self.source, "target": self.target, **self.attrs}


@dataclass
class Graph:
    """Input graph: nodes unique by name, edges in caller order."""

    nodes: dict[str, Node] = field(default_factory=dict)
    edges: list[Edge] = field(default_factory=list)

    def add_node(self, node: Node) -> None:
        self.nodes[node.name] = node

    def add_edge(self, edge: Edge) -> None:
        self.edges.append(edge)

    def __contains__(self, name: object) -> bool:
        return name in self.nodes


@dataclass
class LeveledGraph:
    """Result of leveling: fresh node copies annotated with rows."""

    root: str
    nodes: dict[str, Node] = field(default_factory=dict)
    edges: list[Edge] = field(default_factory=list)
    unreachable: list[str] = field(default_factory=list)

    def rows(self) -> dict[str, int]:
        """Return node name -> row for every ranked node."""
        return {
            name: node.row for name, node in self.nodes.items() if node.row is not None
        }

    def by_row(self) -> dict[int, list[str]]:
        """Return row -> node names, rows ascending, names in node order."""
        groups: dict[int, list[str]] = defaultdict(list)
        for name, node in self.nodes.items():
            if node.row is not None:
                groups[node.row].append(name)
        return {row: groups[row] for row in sorted(groups)}

    def outgoing(self, name: str) -> list[Edge]:
        """Return the edges leaving a node, in edge order."""
        return [edge for edge in self.edges if edge.source == name]

    def to_dict(
        self, row_format: str = "int", include_unreachable: bool = True
    ) -> dict[str, Any]:
        nodes = [
            node.to_dict(row_format)
            for node in self.nodes.values()
            if include_unreachable or node.row is not None
        ]
        return {
            "root": self.root,
            "nodes": nodes,
            "edges": [edge.to_dict() for edge in self.edges],
            "unreachable": list(self.unreachable),
        }
