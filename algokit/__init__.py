"""Algorithms and data structures for contest-style problems: range structures, graphs, flows, geometry, strings and number theory."""

__version__ = "0.1.0"