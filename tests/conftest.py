"""
Shared fixtures for packageGraph tests.
"""

import json
import subprocess
import sys
from pathlib import Path

import pytest
from loguru import logger

# Add project root directory to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from packageGraph.core.manifest import Manifest
from packageGraph.utils.config_manager import ConfigManager


FOO_PACKAGE = {
    "name": "Foo",
    "manifest_display_name": "Foo",
    "path": "/tmp/Foo",
    "tools_version": "5.9",
    "platforms": [{"name": "macos", "version": "13.0"}],
    "products": [{"name": "A", "targets": ["A"], "type": {"library": ["automatic"]}}],
    "targets": [
        {
            "name": "A",
            "type": "library",
            "c99name": "A",
            "module_type": "SwiftTarget",
            "path": "Sources/A",
            "sources": ["A.swift"],
            "target_dependencies": ["B"],
            "product_dependencies": ["Logging"]
        },
        {
            "name": "B",
            "type": "library",
            "c99name": "B",
            "module_type": "SwiftTarget",
            "path": "Sources/B",
            "sources": ["B.swift"]
        }
    ]
}


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added by the CLI so they never outlive a captured stream"""
    yield
    logger.remove()


@pytest.fixture
def foo_package():
    """JSON document as printed by ``swift package describe --type json``"""
    return json.loads(json.dumps(FOO_PACKAGE))


@pytest.fixture
def foo_manifest(foo_package):
    return Manifest.from_dict(foo_package)


@pytest.fixture
def config(tmp_path):
    """Configuration with built-in defaults only"""
    return ConfigManager(str(tmp_path / "config"))


class FakeRun:
    """Stand-in for ``subprocess.run`` that records calls and replays canned results"""

    def __init__(self, stdout="", returncode=0, stderr="", raises=None):
        self.stdout = stdout
        self.returncode = returncode
        self.stderr = stderr
        self.raises = raises
        self.calls = []

    def __call__(self, cmd, **kwargs):
        self.calls.append((list(cmd), kwargs))
        if self.raises is not None:
            raise self.raises
        return subprocess.CompletedProcess(cmd, self.returncode, self.stdout, self.stderr)


@pytest.fixture
def fake_run(monkeypatch):
    """Patch ``subprocess.run``; call the fixture to configure the canned result"""
    def install(**kwargs):
        runner = FakeRun(**kwargs)
        monkeypatch.setattr(subprocess, "run", runner)
        return runner
    return install
