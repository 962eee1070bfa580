"""
packageGraph: renders the target dependency graph of a Swift package as Graphviz DOT.
"""

__version__ = "0.1.0"
__author__ = "packageGraph Team"

from .core import (
    Manifest,
    Target,
    TargetType,
    DependencyGraphBuilder,
    NodeOrigin,
    graph_to_dot,
    load_manifest,
    write_output
)

__all__ = [
    "Manifest",
    "Target",
    "TargetType",
    "DependencyGraphBuilder",
    "NodeOrigin",
    "graph_to_dot",
    "load_manifest",
    "write_output"
]
