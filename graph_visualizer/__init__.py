"""Interactive editor for weighted undirected graphs."""

__version__ = "0.1.0"
