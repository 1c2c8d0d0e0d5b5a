"""Classic algorithms and data structures in plain Python.

Graphs, strings, range queries, number theory, dynamic programming and
2D geometry, each in its own submodule.
"""

__version__ = "0.1.0"