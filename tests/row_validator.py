"""Row validator: programmatic checks for leveling defects.

Runs a suite of checks against a LeveledGraph (and the Graph it came from)
and returns a list of Violation objects describing any problems found.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from rowlevel.layout.constants import ROOT_ROW
from rowlevel.parser.model import Graph, LeveledGraph


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class Violation:
    check: str
    severity: Severity
    message: str
    context: dict = field(default_factory=dict)


def validate_rows(source: Graph, leveled: LeveledGraph) -> list[Violation]:
    """Run all row checks and return violations."""
    violations: list[Violation] = []
    violations.extend(check_root_row(leveled))
    violations.extend(check_edge_order(leveled))
    violations.extend(check_node_set(source, leveled))
    violations.extend(check_passthrough(source, leveled))
    violations.extend(check_unreachable(leveled))
    return violations


def check_root_row(leveled: LeveledGraph) -> list[Violation]:
    """The root must sit on row 1."""
    row = leveled.nodes[leveled.root].row
    if row == ROOT_ROW:
        return []
    return [
        Violation(
            check="root_row",
            severity=Severity.ERROR,
            message=f"Root '{leveled.root}' is on row {row}, expected {ROOT_ROW}",
            context={"root": leveled.root, "row": row},
        )
    ]


def check_edge_order(leveled: LeveledGraph) -> list[Violation]:
    """Every edge between ranked nodes must point to a strictly lower row."""
    violations: list[Violation] = []
    for edge in leveled.edges:
        src = leveled.nodes[edge.source].row
        tgt = leveled.nodes[edge.target].row
        if src is None or tgt is None:
            continue
        if src <= tgt:
            violations.append(
                Violation(
                    check="edge_order",
                    severity=Severity.ERROR,
                    message=(
                        f"Edge {edge.source} -> {edge.target} goes from row "
                        f"{src} to row {tgt}"
                    ),
                    context={"source": edge.source, "target": edge.target},
                )
            )
    return violations


def check_node_set(source: Graph, leveled: LeveledGraph) -> list[Violation]:
    """Leveling must neither drop nor invent nodes, and must keep node order."""
    if list(source.nodes) == list(leveled.nodes):
        return []
    return [
        Violation(
            check="node_set",
            severity=Severity.ERROR,
            message="Leveled node list differs from the input node list",
            context={
                "missing": sorted(set(source.nodes) - set(leveled.nodes)),
                "extra": sorted(set(leveled.nodes) - set(source.nodes)),
            },
        )
    ]


def check_passthrough(source: Graph, leveled: LeveledGraph) -> list[Violation]:
    """Node attributes must come through unchanged."""
    violations: list[Violation] = []
    for name, node in source.nodes.items():
        out = leveled.nodes.get(name)
        if out is not None and out.attrs != node.attrs:
            violations.append(
                Violation(
                    check="passthrough",
                    severity=Severity.ERROR,
                    message=f"Attributes of '{name}' changed during leveling",
                    context={"node": name},
                )
            )
    return violations


def check_unreachable(leveled: LeveledGraph) -> list[Violation]:
    """Nodes without a row should be exactly the reported unreachable ones."""
    unranked = [name for name, node in leveled.nodes.items() if node.row is None]
    violations: list[Violation] = []
    if unranked != leveled.unreachable:
        violations.append(
            Violation(
                check="unreachable",
                severity=Severity.ERROR,
                message="Unranked nodes do not match the unreachable report",
                context={"unranked": unranked, "reported": leveled.unreachable},
            )
        )
    for name in unranked:
        violations.append(
            Violation(
                check="unreachable",
                severity=Severity.WARNING,
                message=f"Node '{name}' has no row",
                context={"node": name},
            )
        )
    return violations
