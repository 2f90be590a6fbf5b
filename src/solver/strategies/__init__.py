"""
Strategies Package - Concrete strategy implementations.

Import this module to register all built-in strategies.
"""

from .breadth_first import BreadthFirstStrategy, solve

__all__ = [
    "BreadthFirstStrategy",
    "solve",
]
