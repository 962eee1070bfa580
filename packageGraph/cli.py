#!/usr/bin/env python3
"""
Command-line interface for packageGraph.

Describes a Swift package, builds its target dependency graph and writes it as
a DOT file or renders it to SVG/PNG with Graphviz.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from packageGraph import __version__
from packageGraph.core.dependency_graph import DependencyGraphBuilder
from packageGraph.core.dot import graph_to_dot
from packageGraph.core.errors import ConfigError, PackageGraphError
from packageGraph.core.manifest import ManifestLoader
from packageGraph.core.output import OutputDispatcher, default_output_path
from packageGraph.utils.config_manager import ConfigManager, config_manager
from packageGraph.utils.logger import setup_logger


def generate_graph(
    input_dir: Optional[str] = None,
    output: Optional[str] = None,
    skip_test_targets: bool = False,
    skip_product_dependencies: bool = False,
    config: Optional[ConfigManager] = None
) -> bool:
    """
    Generate the dependency graph of the package in ``input_dir``.

    Args:
        input_dir: Directory containing the package, defaults to the current directory
        output: Output file, defaults to ``<package-name>.dot``
        skip_test_targets: Leave out test targets
        skip_product_dependencies: Leave out external product dependencies
        config: Configuration manager, defaults to the shared instance

    Returns:
        True if output was written, False if the output extension is unknown

    Raises:
        PackageGraphError: On any fatal manifest, identifier or renderer error
    """
    config = config or config_manager

    manifest = ManifestLoader(config).load(input_dir)

    builder = DependencyGraphBuilder(
        skip_test_targets=skip_test_targets,
        skip_product_dependencies=skip_product_dependencies,
        config=config
    )
    graph = builder.build(manifest)
    dot_text = graph_to_dot(graph, quote_identifiers=builder.quote_identifiers)

    output_path = Path(output) if output else default_output_path(manifest.name)
    return OutputDispatcher(config).dispatch(dot_text, output_path)


def configure_logging(config: ConfigManager, verbose: bool = False):
    """Apply the configured log level and log directory."""
    general_config = config.get_general_config()
    level = "DEBUG" if verbose else general_config.get("log_level", "INFO")
    try:
        setup_logger(str(level), general_config.get("log_dir"))
    except (ValueError, TypeError, OSError) as e:
        setup_logger("DEBUG" if verbose else "INFO")
        raise ConfigError(f"Invalid logging configuration: {e}") from e


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog="package-graph",
        description="Render the target dependency graph of a Swift package",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Write MyPackage.dot for the package in the current directory
  package-graph

  # Render an SVG without test targets
  package-graph path/to/package graph.svg --skip-test-targets

  # Only internal targets, as PNG
  package-graph path/to/package graph.png --skip-product-dependencies
        """
    )

    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="Directory containing the Swift package (default: current directory)"
    )

    parser.add_argument(
        "output",
        nargs="?",
        default=None,
        help="Output file, .dot, .svg or .png (default: <package name>.dot)"
    )

    parser.add_argument(
        "--skip-test-targets",
        action="store_true",
        help="Skip unit test targets"
    )

    parser.add_argument(
        "--skip-product-dependencies",
        action="store_true",
        help="Skip external product dependencies"
    )

    parser.add_argument(
        "--config-dir",
        default=None,
        help="Directory containing graph_config.yaml"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI function."""
    args = parse_arguments(argv)

    # Console logging first so configuration errors are reported too
    setup_logger("DEBUG" if args.verbose else "INFO")

    try:
        config = ConfigManager(args.config_dir) if args.config_dir else config_manager
        configure_logging(config, args.verbose)

        generate_graph(
            input_dir=args.input,
            output=args.output,
            skip_test_targets=args.skip_test_targets,
            skip_product_dependencies=args.skip_product_dependencies,
            config=config
        )
    except PackageGraphError as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
