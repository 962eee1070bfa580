"""
Exception hierarchy for packageGraph.

Every fatal condition raised by the core derives from ``PackageGraphError`` so
the command line can report it and exit non-zero in a single place.
"""

from typing import Optional


class PackageGraphError(Exception):
    """Base class for all packageGraph errors."""


class ManifestCommandError(PackageGraphError):
    """The manifest-describing command could not be run or failed."""

    def __init__(self, message: str, returncode: Optional[int] = None, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class ManifestFormatError(PackageGraphError):
    """The manifest JSON is malformed or does not match the expected schema."""


class InvalidIdentifierError(PackageGraphError, ValueError):
    """A name is not a syntactically valid DOT identifier."""

    def __init__(self, name: str):
        super().__init__(f"Invalid graph identifier: {name!r}")
        self.name = name


class ConfigError(PackageGraphError):
    """The configuration file is unreadable or has invalid values."""


class OutputError(PackageGraphError):
    """The output file could not be written."""


class RendererError(PackageGraphError):
    """The external graph renderer could not be run or failed."""

    def __init__(self, message: str, returncode: Optional[int] = None, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


__all__ = [
    "PackageGraphError",
    "ManifestCommandError",
    "ManifestFormatError",
    "InvalidIdentifierError",
    "ConfigError",
    "OutputError",
    "RendererError",
]
