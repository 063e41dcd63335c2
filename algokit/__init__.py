"""Classic algorithms and data structures.

Contains sorting, searching, number-theory helpers, union-find and Kruskal,
binary tree utilities, LRU caches, backtracking solvers and a
rock-paper-scissors game.
"""

__version__ = "0.1.0"