"""Classic algorithms for binary trees, linked lists, grids, graphs, intervals and arrays."""

__version__ = "0.1.0"