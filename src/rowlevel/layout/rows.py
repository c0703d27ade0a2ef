"""Row assignment (Y-level) for leveled graphs.

Every edge ``(source, target)`` must end up pointing from a higher row to a
strictly lower one, with the root on row 1. Leveling runs in two phases:

1. Seed pass: a depth-first walk from the root against edge direction. A
   node keeps the row of the first path that reaches it, which may be too
   shallow when two nodes are joined by paths of different lengths.
2. Repair pass: raise ``row(source)`` to ``row(target) + 1`` for every
   violated edge until none is left.
"""

from __future__ import annotations

__all__ = ["index_sources", "level", "repair_rows", "seed_rows"]

import logging
from collections import defaultdict, deque
from collections.abc import Iterable

import networkx as nx

from rowlevel.errors import (
    CyclicGraphError,
    DanglingEdgeError,
    RootNotFoundError,
    UnreachableNodesError,
)
from rowlevel.layout.constants import CORRECTION_BUDGET_FLOOR, ROOT_ROW
from rowlevel.parser.model import Edge, Graph, LeveledGraph, Node

logger = logging.getLogger(__name__)


def index_sources(edges: Iterable[Edge]) -> dict[str, list[Edge]]:
    """Group edges by target, preserving edge order (duplicates included)."""
    incoming: dict[str, list[Edge]] = defaultdict(list)
    for edge in edges:
        incoming[edge.target].append(edge)
    return dict(incoming)


def seed_rows(graph: Graph, root: str) -> dict[str, int]:
    """Assign initial rows by walking edges backward from the root.

    Sources of a node are visited in edge order, each explored fully before
    the next (pre-order depth-first). A node takes its row on first visit and
    is never revisited, so the result depends on edge order and is neither
    the shortest nor the longest path length.

    Returns a dict mapping node name -> row for every node reached.
    """
    incoming = index_sources(graph.edges)
    logger.debug("Indexed %d edges into %d targets", len(graph.edges), len(incoming))

    rows: dict[str, int] = {}
    stack: list[tuple[str, int]] = [(root, ROOT_ROW)]
    while stack:
        name, row = stack.pop()
        if name in rows:
            continue
        rows[name] = row
        # Reversed so the first source in edge order is explored first
        for edge in reversed(incoming.get(name, [])):
            if edge.source not in rows:
                stack.append((edge.source, row + 1))

    logger.debug("Seed pass reached %d nodes", len(rows))
    return rows


def repair_rows(
    rows: dict[str, int],
    edges: Iterable[Edge],
    max_corrections: int | None = None,
) -> dict[str, int]:
    """Raise rows until every edge between ranked nodes points downward.

    Uses a worklist of edges: when a node is raised, the edges that target it
    are queued again. Rows only ever grow, so the fixpoint is the same one a
    restart-from-the-first-edge scan reaches.

    Args:
        rows: Seed rows, usually from seed_rows(). Not modified.
        edges: Graph edges; edges touching unranked nodes are ignored.
        max_corrections: Correction budget. Defaults to
            row ceiling x ranked edges.

    Returns a new dict mapping node name -> row.

    Raises CyclicGraphError when the budget runs out or a row climbs above
    the ceiling. Without a cycle every row is some seed plus the length of a
    simple path, so no row exceeds the highest seed plus the ranked node
    count; that is the ceiling.
    """
    rows = dict(rows)
    ranked = [e for e in edges if e.source in rows and e.target in rows]
    incoming = index_sources(ranked)
    ceiling = max(rows.values(), default=0) + len(rows)
    if max_corrections is None:
        max_corrections = max(ceiling * len(ranked), CORRECTION_BUDGET_FLOOR)

    queue: deque[Edge] = deque(ranked)
    corrections = 0
    while queue:
        edge = queue.popleft()
        if rows[edge.source] > rows[edge.target]:
            continue
        if corrections >= max_corrections:
            raise CyclicGraphError(corrections, _find_cycle(ranked, edge.source))
        corrections += 1
        rows[edge.source] = rows[edge.target] + 1
        logger.debug(
            "Raised %s to row %d (edge %s -> %s)",
            edge.source, rows[edge.source], edge.source, edge.target,
        )
        if rows[edge.source] > ceiling:
            raise CyclicGraphError(corrections, _find_cycle(ranked, edge.source))
        queue.extend(incoming.get(edge.source, []))

    logger.debug("Repair pass made %d corrections", corrections)
    return rows


def _find_cycle(edges: list[Edge], start: str) -> list[tuple[str, str]]:
    """Locate one directed cycle among the given edges, preferring one near start."""
    G = nx.DiGraph()
    for edge in edges:
        G.add_edge(edge.source, edge.target)

    for source in (start, None):
        try:
            return [(u, v) for u, v in nx.find_cycle(G, source=source)]
        except nx.NetworkXNoCycle:
            continue
    return []


def _check_edges(graph: Graph) -> None:
    for edge in graph.edges:
        for name in (edge.source, edge.target):
            if name not in graph.nodes:
                raise DanglingEdgeError(edge, name)


def level(
    graph: Graph,
    root: str,
    *,
    require_all: bool = False,
    max_corrections: int | None = None,
) -> LeveledGraph:
    """Assign every node reachable from ``root`` a row.

    The input graph is left untouched; the result holds fresh Node copies
    carrying the same attributes plus ``row``. Nodes the backward walk never
    reaches keep ``row = None`` and are listed in ``LeveledGraph.unreachable``.

    Args:
        graph: Nodes and edges to level.
        root: Name of the node placed on row 1.
        require_all: Raise UnreachableNodesError instead of reporting
            unreachable nodes on the result.
        max_corrections: Override the repair pass correction budget.

    Raises:
        RootNotFoundError: ``root`` is not a node of the graph.
        DanglingEdgeError: An edge names a node that does not exist.
        CyclicGraphError: The ranked nodes contain a cycle.
        UnreachableNodesError: Only with ``require_all``.
    """
    if root not in graph.nodes:
        raise RootNotFoundError(root)
    _check_edges(graph)

    rows = repair_rows(
        seed_rows(graph, root), graph.edges, max_corrections=max_corrections
    )

    nodes = {
        name: Node(name=name, attrs=dict(node.attrs), row=rows.get(name))
        for name, node in graph.nodes.items()
    }
    unreachable = [name for name in graph.nodes if name not in rows]
    if unreachable:
        if require_all:
            raise UnreachableNodesError(unreachable)
        logger.warning(
            "%d node(s) unreachable from root '%s': %s",
            len(unreachable), root, ", ".join(unreachable),
        )

    logger.info(
        "Leveled %d of %d nodes into %d rows from root '%s'",
        len(rows), len(nodes), max(rows.values()), root,
    )
    return LeveledGraph(
        root=root, nodes=nodes, edges=list(graph.edges), unreachable=unreachable
    )
