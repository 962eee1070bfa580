"""
Configuration management for packageGraph.
"""

import copy
import yaml
from typing import Dict, Any, Optional
from pathlib import Path

from packageGraph.core.errors import ConfigError


DEFAULT_CONFIG: Dict[str, Dict[str, Any]] = {
    "manifest": {
        "command": ["swift", "package", "describe", "--type", "json"],
        "timeout_seconds": None,
    },
    "graph": {
        "node_shape": "box",
        "internal_color": "black",
        "external_color": "blue",
        "quote_identifiers": False,
    },
    "render": {
        "renderer": "dot",
        "timeout_seconds": None,
    },
    "general": {
        "log_level": "INFO",
        "log_dir": None,
    },
}


class ConfigManager:
    """Manages the graph configuration file and its built-in defaults."""

    CONFIG_FILE_NAME = "graph_config.yaml"

    def __init__(self, config_dir: Optional[str] = None):
        """
        Initialize configuration manager.

        Args:
            config_dir: Directory containing configuration files
        """
        if config_dir is None:
            # Default to config directory relative to project root
            project_root = Path(__file__).parent.parent.parent
            config_dir = project_root / "config"

        self.config_dir = Path(config_dir)
        self._config = None

    def load_config(self) -> Dict[str, Any]:
        """Load graph configuration."""
        if self._config is None:
            config_file = self.config_dir / self.CONFIG_FILE_NAME
            if config_file.exists():
                try:
                    with open(config_file, 'r', encoding='utf-8') as f:
                        config = yaml.safe_load(f) or {}
                except (OSError, yaml.YAMLError) as e:
                    raise ConfigError(f"Failed to load {config_file}: {e}") from e
                if not isinstance(config, dict):
                    raise ConfigError(f"{config_file} must contain a mapping of sections")
                self._config = config
            else:
                # Default configuration
                self._config = copy.deepcopy(DEFAULT_CONFIG)
        return self._config

    def get_section(self, section_name: str) -> Dict[str, Any]:
        """
        Get configuration for a section, merged over its defaults.

        Args:
            section_name: Name of the section (e.g., 'manifest', 'graph', 'render')

        Returns:
            Section configuration dictionary
        """
        config = self.load_config()
        section = copy.deepcopy(DEFAULT_CONFIG.get(section_name, {}))
        overrides = config.get(section_name) or {}
        if not isinstance(overrides, dict):
            raise ConfigError(f"Section '{section_name}' of {self.CONFIG_FILE_NAME} must be a mapping")
        section.update(copy.deepcopy(overrides))
        return section

    def get_manifest_config(self) -> Dict[str, Any]:
        """Get manifest command settings."""
        return self.get_section("manifest")

    def get_graph_config(self) -> Dict[str, Any]:
        """Get node styling and identifier settings."""
        return self.get_section("graph")

    def get_render_config(self) -> Dict[str, Any]:
        """Get external renderer settings."""
        return self.get_section("render")

    def get_general_config(self) -> Dict[str, Any]:
        """Get general configuration settings."""
        return self.get_section("general")


# Global config manager instance
config_manager = ConfigManager()
