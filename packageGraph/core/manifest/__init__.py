"""
Package manifest parsing: targets, their kinds and their dependency names.
"""

from packageGraph.core.manifest.models import (
    Manifest,
    Target,
    TargetType,
    DependencyKind,
    DependencyReference
)
from packageGraph.core.manifest.loader import ManifestLoader, load_manifest

__all__ = [
    'Manifest',
    'Target',
    'TargetType',
    'DependencyKind',
    'DependencyReference',
    'ManifestLoader',
    'load_manifest'
]
