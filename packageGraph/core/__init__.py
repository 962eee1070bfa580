"""
Core modules for packageGraph.
"""

from .errors import (
    PackageGraphError,
    ManifestCommandError,
    ManifestFormatError,
    InvalidIdentifierError,
    ConfigError,
    OutputError,
    RendererError
)
from .manifest import Manifest, Target, TargetType, ManifestLoader, load_manifest
from .dependency_graph import DependencyGraphBuilder, NodeOrigin, build_dependency_graph
from .dot import graph_to_dot
from .output import OutputDispatcher, default_output_path, write_output

__all__ = [
    "PackageGraphError",
    "ManifestCommandError",
    "ManifestFormatError",
    "InvalidIdentifierError",
    "ConfigError",
    "OutputError",
    "RendererError",
    "Manifest",
    "Target",
    "TargetType",
    "ManifestLoader",
    "load_manifest",
    "DependencyGraphBuilder",
    "NodeOrigin",
    "build_dependency_graph",
    "graph_to_dot",
    "OutputDispatcher",
    "default_output_path",
    "write_output"
]
