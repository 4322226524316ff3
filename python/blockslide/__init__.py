"""Shortest-path solver for sliding block puzzles."""

__version__ = "0.1.0"
