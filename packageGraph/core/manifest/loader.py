"""
Runs the package tool and parses its JSON package description.
"""

import json
import subprocess
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from loguru import logger

from packageGraph.core.errors import ManifestCommandError, ManifestFormatError
from packageGraph.core.manifest.models import Manifest
from packageGraph.utils.config_manager import ConfigManager, config_manager


class ManifestLoader:
    """Describes a package by running the package tool in its directory."""

    def __init__(self, config: Optional[ConfigManager] = None):
        """
        Initialize manifest loader.

        Args:
            config: Configuration manager, defaults to the shared instance
        """
        self.config_manager = config or config_manager
        self.manifest_config = self.config_manager.get_manifest_config()

        self.command: List[str] = list(self.manifest_config["command"])
        self.timeout = self.manifest_config.get("timeout_seconds")

    def load(self, package_dir: Optional[Union[str, Path]] = None) -> Manifest:
        """
        Describe the package in ``package_dir`` and parse the result.

        Args:
            package_dir: Directory containing the package manifest, defaults
                to the current working directory

        Returns:
            Parsed manifest
        """
        stdout = self.describe(package_dir)
        return self.parse(stdout)

    def describe(self, package_dir: Optional[Union[str, Path]] = None) -> str:
        """Run the describe command and return its standard output."""
        cwd = str(package_dir) if package_dir is not None else None
        if cwd is not None and not Path(cwd).is_dir():
            raise ManifestCommandError(f"Package directory not found: {cwd}")
        logger.debug(f"Running {' '.join(self.command)} in {cwd or 'current directory'}")

        try:
            result = subprocess.run(
                self.command,
                cwd=cwd,
                capture_output=True,
                text=True,
                timeout=self.timeout
            )
        except FileNotFoundError as e:
            raise ManifestCommandError(f"Failed to execute {self.command[0]!r}: {e}") from e
        except subprocess.TimeoutExpired as e:
            raise ManifestCommandError(f"{' '.join(self.command)} timed out after {self.timeout}s") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ManifestCommandError(f"Failed to execute {' '.join(self.command)}: {e}") from e

        if result.returncode != 0:
            raise ManifestCommandError(
                f"{' '.join(self.command)} exited with status {result.returncode}: {result.stderr.strip()}",
                returncode=result.returncode,
                stderr=result.stderr
            )

        return result.stdout

    @staticmethod
    def parse(document: str) -> Manifest:
        """
        Parse a JSON package description.

        Raises:
            ManifestFormatError: If the document is not valid JSON or not a package description
        """
        try:
            data: Dict[str, Any] = json.loads(document)
        except json.JSONDecodeError as e:
            raise ManifestFormatError(f"Package description is not valid JSON: {e}") from e

        manifest = Manifest.from_dict(data)
        logger.info(f"Loaded package '{manifest.name}' with {len(manifest.targets)} targets")
        return manifest


def load_manifest(
    package_dir: Optional[Union[str, Path]] = None,
    config: Optional[ConfigManager] = None
) -> Manifest:
    """Describe and parse the package in ``package_dir``."""
    return ManifestLoader(config).load(package_dir)
