"""
Target dependency graph modeling for a single package.
"""

from .graph_builder import DependencyGraphBuilder, NodeOrigin, build_dependency_graph

__all__ = ['DependencyGraphBuilder', 'NodeOrigin', 'build_dependency_graph']
