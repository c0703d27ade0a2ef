"""Errors raised while loading or leveling a graph."""

from __future__ import annotations

__all__ = [
    "CyclicGraphError",
    "DanglingEdgeError",
    "GraphFormatError",
    "LevelingError",
    "RootNotFoundError",
    "UnreachableNodesError",
]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rowlevel.parser.model import Edge


class LevelingError(Exception):
    """Base class for every error raised by rowlevel."""


class GraphFormatError(LevelingError, ValueError):
    """Raised when an input document does not describe a graph."""


class RootNotFoundError(LevelingError, KeyError):
    """Raised when the root node is not part of the graph."""

    def __init__(self, root: str) -> None:
        super().__init__(root)
        self.root = root

    def __str__(self) -> str:
        return f"Root node '{self.root}' is not in the graph"


class DanglingEdgeError(LevelingError):
    """Raised when an edge references a node name that does not exist."""

    def __init__(self, edge: Edge, missing: str) -> None:
        super().__init__(
            f"Edge {edge.source} -> {edge.target} references unknown node '{missing}'"
        )
        self.edge = edge
        self.missing = missing


class CyclicGraphError(LevelingError):
    """Raised when the repair pass cannot converge.

    ``cycle`` holds one offending cycle as ``(source, target)`` pairs when
    one could be located among the ranked nodes.
    """

    def __init__(
        self, corrections: int, cycle: list[tuple[str, str]] | None = None
    ) -> None:
        self.corrections = corrections
        self.cycle = list(cycle or [])
        message = f"Row repair did not converge after {corrections} corrections"
        if self.cycle:
            path = " -> ".join([src for src, _ in self.cycle] + [self.cycle[0][0]])
            message += f"; cycle: {path}"
        super().__init__(message)


class UnreachableNodesError(LevelingError):
    """Raised when nodes cannot be reached from the root and full coverage was required."""

    def __init__(self, names: list[str]) -> None:
        self.names = list(names)
        super().__init__(
            f"{len(self.names)} node(s) unreachable from the root: "
            + ", ".join(self.names)
        )
