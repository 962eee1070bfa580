"""
Graphviz DOT identifiers and serialization.
"""

from .identifier import is_valid_identifier, validate_identifier
from .writer import graph_to_dot, graph_to_pydot

__all__ = [
    'is_valid_identifier',
    'validate_identifier',
    'graph_to_dot',
    'graph_to_pydot'
]
