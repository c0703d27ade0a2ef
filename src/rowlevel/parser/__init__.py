"""Graph model and input parsers."""

from rowlevel.parser.loader import graph_from_dict, load_graph
from rowlevel.parser.mermaid import parse_mermaid
from rowlevel.parser.model import Edge, Graph, LeveledGraph, Node

__all__ = [
    "Edge",
    "Graph",
    "LeveledGraph",
    "Node",
    "graph_from_dict",
    "load_graph",
    "parse_mermaid",
]
