"""
Output dispatch: writes DOT text directly or renders it to an image with Graphviz.
"""

import subprocess
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from packageGraph.core.errors import OutputError, RendererError
from packageGraph.utils.config_manager import ConfigManager, config_manager


DOT_FORMAT = "dot"
IMAGE_FORMATS = ("svg", "png")


def default_output_path(package_name: str) -> Path:
    """Output path used when none is given: ``<package-name>.dot`` in the current directory."""
    return Path(f"{package_name}.{DOT_FORMAT}")


def output_format(output_path: Union[str, Path]) -> str:
    """Lower-cased extension of ``output_path``; paths without one are DOT files."""
    suffix = Path(output_path).suffix
    return suffix[1:].lower() if suffix else DOT_FORMAT


class OutputDispatcher:
    """Sends DOT text to a file or to the external renderer based on the output extension."""

    def __init__(self, config: Optional[ConfigManager] = None):
        """
        Initialize output dispatcher.

        Args:
            config: Configuration manager, defaults to the shared instance
        """
        self.config_manager = config or config_manager
        self.render_config = self.config_manager.get_render_config()

        self.renderer = self.render_config.get("renderer", "dot")
        self.timeout = self.render_config.get("timeout_seconds")

    def dispatch(self, dot_text: str, output_path: Union[str, Path]) -> bool:
        """
        Write ``dot_text`` to ``output_path`` in the format its extension names.

        Args:
            dot_text: DOT language graph description
            output_path: Destination file

        Returns:
            True if something was written, False for an unknown extension
        """
        output_path = Path(output_path)
        fmt = output_format(output_path)

        if fmt == DOT_FORMAT:
            self.write_dot(dot_text, output_path)
        elif fmt in IMAGE_FORMATS:
            self.render(dot_text, output_path, fmt)
        else:
            logger.warning(f"Unknown output extension '.{fmt}' for {output_path}, nothing written")
            return False

        logger.info(f"Saved {fmt} output to {output_path}")
        return True

    def write_dot(self, dot_text: str, output_path: Path):
        """
        Write the DOT text to ``output_path`` as is.

        Raises:
            OutputError: If the file cannot be written
        """
        try:
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(dot_text)
        except OSError as e:
            raise OutputError(f"Failed to write {output_path}: {e}") from e

    def render(self, dot_text: str, output_path: Path, fmt: str):
        """
        Pipe the DOT text to the renderer and wait for it to finish.

        Raises:
            RendererError: If the renderer is missing, times out or exits non-zero
        """
        cmd = [self.renderer, f"-T{fmt}", "-o", str(output_path)]
        logger.debug(f"Rendering with: {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd,
                input=dot_text,
                capture_output=True,
                text=True,
                timeout=self.timeout
            )
        except FileNotFoundError as e:
            raise RendererError(f"Failed to execute renderer {self.renderer!r}: {e}") from e
        except subprocess.TimeoutExpired as e:
            raise RendererError(f"Renderer timed out after {self.timeout}s") from e
        except OSError as e:
            raise RendererError(f"Failed to execute renderer {self.renderer!r}: {e}") from e

        if result.returncode != 0:
            raise RendererError(
                f"Renderer exited with status {result.returncode}: {result.stderr.strip()}",
                returncode=result.returncode,
                stderr=result.stderr
            )
        if result.stderr:
            logger.debug(f"Renderer output: {result.stderr.strip()}")


def write_output(
    dot_text: str,
    output_path: Union[str, Path],
    config: Optional[ConfigManager] = None
) -> bool:
    """Dispatch ``dot_text`` to ``output_path``; see ``OutputDispatcher.dispatch``."""
    return OutputDispatcher(config).dispatch(dot_text, output_path)
