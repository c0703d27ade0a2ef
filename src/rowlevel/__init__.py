"""rowlevel: assign rows (topological depth) to the nodes of a rooted graph."""

__version__ = "0.1.0"
