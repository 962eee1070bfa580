"""
Dependency Graph Builder turning a package manifest into a styled directed graph.
"""

import networkx as nx
from enum import Enum
from typing import Any, Dict, Iterable, Optional

from loguru import logger

from packageGraph.core.dot.identifier import is_valid_identifier, validate_identifier
from packageGraph.core.manifest.models import Manifest, Target
from packageGraph.utils.config_manager import ConfigManager, config_manager


class NodeOrigin(Enum):
    """Where a node's name is defined"""
    INTERNAL = "internal"  # a target of this manifest
    EXTERNAL = "external"  # a product supplied by another package


class DependencyGraphBuilder:
    """Builds the target dependency graph of a single package."""

    def __init__(
        self,
        skip_test_targets: bool = False,
        skip_product_dependencies: bool = False,
        config: Optional[ConfigManager] = None
    ):
        """
        Initialize dependency graph builder.

        Args:
            skip_test_targets: Leave out test targets and their outgoing edges
            skip_product_dependencies: Leave out external product nodes and edges
            config: Configuration manager, defaults to the shared instance
        """
        self.config_manager = config or config_manager
        self.graph_config = self.config_manager.get_graph_config()

        self.skip_test_targets = skip_test_targets
        self.skip_product_dependencies = skip_product_dependencies

        self.node_shape = self.graph_config.get("node_shape", "box")
        self.quote_identifiers = self.graph_config.get("quote_identifiers", False)
        self.colors = {
            NodeOrigin.INTERNAL: self.graph_config.get("internal_color", "black"),
            NodeOrigin.EXTERNAL: self.graph_config.get("external_color", "blue"),
        }

    def build(self, manifest: Manifest) -> nx.MultiDiGraph:
        """
        Build the dependency graph of ``manifest``.

        Targets are visited in manifest order. Each node keeps the origin it
        was given when its name was first seen.

        Args:
            manifest: Parsed package manifest

        Returns:
            Non-strict directed multigraph named after the package
        """
        graph = nx.MultiDiGraph(name=self._check_name(manifest.name), strict=False)

        skipped = 0
        for target in manifest.targets:
            if self.skip_test_targets and target.is_test:
                logger.debug(f"Skipping test target {target.name}")
                skipped += 1
                continue
            self._add_target(graph, target)

        logger.info(
            f"Built graph '{manifest.name}' with {graph.number_of_nodes()} nodes "
            f"and {graph.number_of_edges()} edges ({skipped} test targets skipped)"
        )
        return graph

    def _add_target(self, graph: nx.MultiDiGraph, target: Target):
        self._add_node(graph, target.name, NodeOrigin.INTERNAL)

        self._add_dependencies(graph, target.name, target.target_dependencies, NodeOrigin.INTERNAL)

        if not self.skip_product_dependencies:
            self._add_dependencies(graph, target.name, target.product_dependencies, NodeOrigin.EXTERNAL)

    def _add_dependencies(
        self,
        graph: nx.MultiDiGraph,
        source: str,
        names: Iterable[str],
        origin: NodeOrigin
    ):
        for name in names:
            self._add_node(graph, name, origin)
            graph.add_edge(source, self._check_name(name))

    def _add_node(self, graph: nx.MultiDiGraph, name: str, origin: NodeOrigin):
        """Insert ``name`` unless already present; re-insertion never restyles."""
        name = self._check_name(name)
        if name in graph:
            return
        graph.add_node(name, **self._node_attributes(origin))

    def _node_attributes(self, origin: NodeOrigin) -> Dict[str, Any]:
        return {
            "origin": origin,
            "color": self.colors[origin],
            "shape": self.node_shape,
        }

    def _check_name(self, name: str) -> str:
        if self.quote_identifiers:
            if not is_valid_identifier(name):
                logger.debug(f"Name {name!r} will be quoted")
            return name
        return validate_identifier(name)


def build_dependency_graph(
    manifest: Manifest,
    skip_test_targets: bool = False,
    skip_product_dependencies: bool = False,
    config: Optional[ConfigManager] = None
) -> nx.MultiDiGraph:
    """Build the dependency graph of ``manifest`` with the given filters."""
    builder = DependencyGraphBuilder(
        skip_test_targets=skip_test_targets,
        skip_product_dependencies=skip_product_dependencies,
        config=config
    )
    return builder.build(manifest)
