"""
End-to-end tests for the package-graph command line.
"""

import json
import subprocess

import pytest

from packageGraph import __version__
from packageGraph.cli import main, parse_arguments


@pytest.fixture
def fake_tools(monkeypatch, foo_package):
    """Fake ``swift`` printing the Foo package and a succeeding ``dot``"""
    calls = []

    def run(cmd, **kwargs):
        calls.append((list(cmd), kwargs))
        if cmd[0] == "swift":
            return subprocess.CompletedProcess(cmd, 0, json.dumps(foo_package), "")
        return subprocess.CompletedProcess(cmd, 0, "", "")

    monkeypatch.setattr(subprocess, "run", run)
    return calls


@pytest.fixture
def config_dir(tmp_path):
    path = tmp_path / "config"
    path.mkdir()
    return path


def test_parse_arguments_defaults():
    args = parse_arguments([])

    assert args.input is None
    assert args.output is None
    assert args.skip_test_targets is False
    assert args.skip_product_dependencies is False


def test_parse_arguments_flags():
    args = parse_arguments(["pkg", "out.svg", "--skip-test-targets", "--skip-product-dependencies"])

    assert (args.input, args.output) == ("pkg", "out.svg")
    assert args.skip_test_targets and args.skip_product_dependencies


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        parse_arguments(["--version"])

    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_default_output_named_after_package(fake_tools, config_dir, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    assert main(["--config-dir", str(config_dir)]) == 0

    text = (tmp_path / "Foo.dot").read_text(encoding="utf-8")
    assert text.startswith("digraph Foo {")
    assert "A -> Logging;" in text
    assert fake_tools[0][1]["cwd"] is None


def test_explicit_output_and_flags(fake_tools, config_dir, tmp_path):
    output = tmp_path / "graph.dot"

    assert main([str(tmp_path), str(output), "--skip-product-dependencies", "--config-dir", str(config_dir)]) == 0

    text = output.read_text(encoding="utf-8")
    assert "Logging" not in text
    assert "A -> B;" in text
    assert fake_tools[0][1]["cwd"] == str(tmp_path)


def test_svg_output_invokes_renderer(fake_tools, config_dir, tmp_path):
    output = tmp_path / "graph.svg"

    assert main([str(tmp_path), str(output), "--config-dir", str(config_dir)]) == 0

    render_cmd, render_kwargs = fake_tools[1]
    assert render_cmd == ["dot", "-Tsvg", "-o", str(output)]
    assert render_kwargs["input"].startswith("digraph Foo {")


def test_unknown_extension_is_not_fatal(fake_tools, config_dir, tmp_path, capsys):
    assert main([str(tmp_path), str(tmp_path / "graph.jpg"), "--config-dir", str(config_dir)]) == 0

    assert not (tmp_path / "graph.jpg").exists()
    assert "Unknown output extension" in capsys.readouterr().err


def test_manifest_failure_exits_non_zero(monkeypatch, config_dir, tmp_path, capsys):
    def run(cmd, **kwargs):
        raise FileNotFoundError(2, "No such file or directory", cmd[0])

    monkeypatch.setattr(subprocess, "run", run)

    assert main([str(tmp_path), "--config-dir", str(config_dir)]) == 1
    assert "swift" in capsys.readouterr().err


def test_invalid_identifier_exits_non_zero(monkeypatch, config_dir, tmp_path, capsys):
    package = {"name": "swift-nio", "targets": [{"name": "NIO", "type": "library"}]}

    def run(cmd, **kwargs):
        return subprocess.CompletedProcess(cmd, 0, json.dumps(package), "")

    monkeypatch.setattr(subprocess, "run", run)
    monkeypatch.chdir(tmp_path)

    assert main(["--config-dir", str(config_dir)]) == 1
    assert "swift-nio" in capsys.readouterr().err
    assert list(tmp_path.glob("*.dot")) == []


def test_malformed_config_exits_non_zero(fake_tools, config_dir, tmp_path, capsys):
    (config_dir / "graph_config.yaml").write_text("graph: [unclosed\n", encoding="utf-8")

    assert main([str(tmp_path), str(tmp_path / "graph.dot"), "--config-dir", str(config_dir)]) == 1

    assert "graph_config.yaml" in capsys.readouterr().err
    assert not (tmp_path / "graph.dot").exists()


def test_invalid_log_level_exits_non_zero(fake_tools, config_dir, tmp_path, capsys):
    (config_dir / "graph_config.yaml").write_text("general:\n  log_level: LOUD\n", encoding="utf-8")

    assert main([str(tmp_path), str(tmp_path / "graph.dot"), "--config-dir", str(config_dir)]) == 1

    assert "Invalid logging configuration" in capsys.readouterr().err


def test_unwritable_output_exits_non_zero(fake_tools, config_dir, tmp_path, capsys):
    output = tmp_path / "missing" / "graph.dot"

    assert main([str(tmp_path), str(output), "--config-dir", str(config_dir)]) == 1

    assert "Failed to write" in capsys.readouterr().err
