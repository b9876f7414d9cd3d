"""Tests for the clashyaml command-line interface."""

from __future__ import annotations

import json

import pytest

from clashyaml.cli import main
from tests.conftest import SAMPLE_CONFIG_YAML


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(SAMPLE_CONFIG_YAML, encoding="utf-8")
    return path


class TestCheck:
    def test_valid_config(self, config_file, capsys) -> None:
        assert main(["check", str(config_file)]) == 0
        out, err = capsys.readouterr()
        assert out.strip() == "valid"
        assert err == ""

    def test_warnings_on_stderr(self, tmp_path, capsys) -> None:
        path = tmp_path / "partial.yaml"
        path.write_text("rules: []\n", encoding="utf-8")
        assert main(["check", str(path)]) == 0
        _, err = capsys.readouterr()
        assert err.count("warning:") == 3

    def test_invalid_config(self, tmp_path, capsys) -> None:
        path = tmp_path / "broken.yaml"
        path.write_text("a: [", encoding="utf-8")
        assert main(["check", str(path)]) == 1
        _, err = capsys.readouterr()
        assert err.startswith("invalid: YAML")

    def test_no_shape(self, tmp_path, capsys) -> None:
        path = tmp_path / "partial.yaml"
        path.write_text("foo: bar\n", encoding="utf-8")
        assert main(["check", "--no-shape", str(path)]) == 0
        _, err = capsys.readouterr()
        assert "warning" not in err

    def test_missing_file(self, tmp_path) -> None:
        assert main(["check", str(tmp_path / "absent.yaml")]) == 2


class TestTokens:
    def test_json_output(self, tmp_path, capsys) -> None:
        path = tmp_path / "c.yaml"
        path.write_text("count: 42\n", encoding="utf-8")
        assert main(["tokens", "--json", str(path)]) == 0
        spans = json.loads(capsys.readouterr().out)
        assert [s["kind"] for s in spans] == ["key", "number"]

    def test_table_output(self, tmp_path, capsys) -> None:
        path = tmp_path / "c.yaml"
        path.write_text("- item\n", encoding="utf-8")
        assert main(["tokens", "--unit", "codepoint", str(path)]) == 0
        assert capsys.readouterr().out == "0\t1\tarray_marker\t'-'\n"

    def test_stdin(self, monkeypatch, capsys) -> None:
        import io

        monkeypatch.setattr("sys.stdin", io.StringIO("proxies:\n"))
        assert main(["tokens", "-"]) == 0
        assert "main_section" in capsys.readouterr().out
