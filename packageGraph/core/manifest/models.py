"""
Manifest data structures parsed from the package tool's JSON description.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Any, Tuple, Union

from packageGraph.core.errors import ManifestFormatError


class TargetType(Enum):
    """Kind of buildable unit declared by a manifest"""
    EXECUTABLE = "executable"
    LIBRARY = "library"
    MACRO = "macro"
    TEST = "test"


class DependencyKind(Enum):
    """Shape of a dependency entry in the manifest"""
    BY_NAME = "by_name"   # {"byName": ["Foo", null]} or a bare string
    TARGET = "target"     # {"target": ["Foo", null]}
    PRODUCT = "product"   # {"product": ["Foo", "package-id", null, null]}


_DEPENDENCY_KEYS = {
    "byName": DependencyKind.BY_NAME,
    "target": DependencyKind.TARGET,
    "product": DependencyKind.PRODUCT,
}


@dataclass(frozen=True)
class DependencyReference:
    """A single dependency entry, normalized to its kind and referenced name"""
    kind: DependencyKind
    name: str

    @classmethod
    def from_raw(cls, raw: Union[str, Dict[str, Any]]) -> 'DependencyReference':
        """
        Parse a dependency entry in any of the shapes the manifest uses.

        Args:
            raw: Either a plain name or a single-key mapping such as
                ``{"product": ["Logging", "swift-log", null, null]}``

        Returns:
            Parsed dependency reference
        """
        if isinstance(raw, str):
            return cls(kind=DependencyKind.BY_NAME, name=raw)

        if isinstance(raw, dict) and len(raw) == 1:
            key, value = next(iter(raw.items()))
            kind = _DEPENDENCY_KEYS.get(key)
            if kind is not None:
                # Descriptor payloads are [name, ...] with the name first
                if isinstance(value, list) and value and isinstance(value[0], str):
                    return cls(kind=kind, name=value[0])
                if isinstance(value, dict) and isinstance(value.get("name"), str):
                    return cls(kind=kind, name=value["name"])

        raise ManifestFormatError(f"Unrecognized dependency entry: {raw!r}")


@dataclass(frozen=True)
class Target:
    """A named buildable unit and the names it depends on"""
    name: str
    target_type: TargetType
    target_dependencies: Tuple[str, ...] = ()
    product_dependencies: Tuple[str, ...] = ()

    @property
    def is_test(self) -> bool:
        return self.target_type is TargetType.TEST


@dataclass(frozen=True)
class Manifest:
    """Parsed package description: the package name and its targets in declaration order"""
    name: str
    targets: Tuple[Target, ...] = field(default_factory=tuple)

    @property
    def target_names(self) -> List[str]:
        return [target.name for target in self.targets]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Manifest':
        """
        Create a manifest from the package tool's JSON document.

        Unknown fields (platforms, products, tool version, sources, resources)
        are ignored.

        Args:
            data: Decoded JSON document

        Returns:
            Parsed manifest

        Raises:
            ManifestFormatError: If a required field is missing or has the wrong type
        """
        if not isinstance(data, dict):
            raise ManifestFormatError(f"Manifest must be a JSON object, got {type(data).__name__}")

        name = _require_str(data, "name", "package")
        raw_targets = data.get("targets")
        if not isinstance(raw_targets, list):
            raise ManifestFormatError(f"Package '{name}' has no 'targets' list")

        declared_names = set()
        for raw_target in raw_targets:
            if isinstance(raw_target, dict) and isinstance(raw_target.get("name"), str):
                declared_names.add(raw_target["name"])

        targets = tuple(_parse_target(raw_target, declared_names) for raw_target in raw_targets)
        return cls(name=name, targets=targets)


def _require_str(data: Dict[str, Any], key: str, owner: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ManifestFormatError(f"Missing or invalid '{key}' in {owner}: {value!r}")
    return value


def _parse_name_list(raw_target: Dict[str, Any], key: str, owner: str) -> List[DependencyReference]:
    value = raw_target.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ManifestFormatError(f"'{key}' of {owner} must be a list, got {type(value).__name__}")
    return [DependencyReference.from_raw(entry) for entry in value]


def _parse_target(raw_target: Any, declared_names: set) -> Target:
    """Parse one target and flatten its dependency entries into name lists."""
    if not isinstance(raw_target, dict):
        raise ManifestFormatError(f"Target must be a JSON object, got {raw_target!r}")

    name = _require_str(raw_target, "name", "target")
    owner = f"target '{name}'"

    raw_type = raw_target.get("type")
    try:
        target_type = TargetType(raw_type)
    except ValueError:
        raise ManifestFormatError(f"Unknown type {raw_type!r} for {owner}") from None

    internal = [ref.name for ref in _parse_name_list(raw_target, "target_dependencies", owner)]
    external = [ref.name for ref in _parse_name_list(raw_target, "product_dependencies", owner)]

    # dump-package style entries; byName resolves against the declared targets
    for ref in _parse_name_list(raw_target, "dependencies", owner):
        if ref.kind is DependencyKind.TARGET:
            is_internal = True
        elif ref.kind is DependencyKind.PRODUCT:
            is_internal = False
        else:
            is_internal = ref.name in declared_names

        names = internal if is_internal else external
        if ref.name not in names:
            names.append(ref.name)

    return Target(
        name=name,
        target_type=target_type,
        target_dependencies=tuple(internal),
        product_dependencies=tuple(external),
    )
