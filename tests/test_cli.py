from __future__ import annotations

import json

from typer.testing import CliRunner

from treeyaml.cli import app
from treeyaml.utils import tests_data_path

runner = CliRunner()


def test_check_valid_file():
    result = runner.invoke(app, ["check", str(tests_data_path("config.yaml"))])
    assert result.exit_code == 0, result.output
    assert "1 file(s) ok" in result.output


def test_check_directory_reports_failures():
    result = runner.invoke(app, ["check", str(tests_data_path())])
    assert result.exit_code == 1
    assert "3 of 4 file(s) failed" in result.output


def test_export_mapping_json():
    result = runner.invoke(
        app, ["export", str(tests_data_path("config.yaml")), "--shape", "mapping"]
    )
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["MainDatabase"]["Connection"]["Timeout"] == "30"
    assert data["Description"] == "Sample application\nwith two lines."


def test_export_to_file(tmp_path):
    out = tmp_path / "tree.json"
    result = runner.invoke(
        app, ["export", str(tests_data_path("config.yaml")), "--out", str(out), "--pretty"]
    )
    assert result.exit_code == 0, result.output
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["children"][0]["name"] == "AppName"


def test_export_invalid_file_fails():
    result = runner.invoke(app, ["export", str(tests_data_path("invalid", "tab.yaml"))])
    assert result.exit_code == 1


def test_fmt_rewrites_with_options(tmp_path):
    src = tmp_path / "in.yaml"
    src.write_text("a:\n    b: 1\n# dropped\nc: \"x\"\n", encoding="utf-8")
    out = tmp_path / "out.yaml"

    result = runner.invoke(app, ["fmt", str(src), "--indent", "2", "--quote", "'", "--out", str(out)])
    assert result.exit_code == 0, result.output
    assert out.read_text(encoding="utf-8") == "a:\n  b: '1'\nc: 'x'\n"


def test_fmt_in_place(tmp_path):
    target = tmp_path / "config.yaml"
    target.write_text("a:\n  b: 1\n", encoding="utf-8")

    result = runner.invoke(app, ["fmt", str(target), "--in-place"])
    assert result.exit_code == 0, result.output
    assert target.read_text(encoding="utf-8") == "a:\n    b: 1\n"


def test_stats():
    result = runner.invoke(app, ["stats", str(tests_data_path("config.yaml"))])
    assert result.exit_code == 0, result.output
    assert "Tree Statistics" in result.output
    assert "16" in result.output


def test_fmt_refuses_multi_line_values(tmp_path):
    target = tmp_path / "blocks.yaml"
    text = "Description: |\n    line one\n    line two\nNext: 1\n"
    target.write_text(text, encoding="utf-8")

    result = runner.invoke(app, ["fmt", str(target), "--in-place"])
    assert result.exit_code == 1
    assert target.read_text(encoding="utf-8") == text

    check = runner.invoke(app, ["check", str(target)])
    assert check.exit_code == 0, check.output


def test_fmt_refuses_sample_file_with_blocks(tmp_path):
    out = tmp_path / "out.yaml"
    result = runner.invoke(app, ["fmt", str(tests_data_path("config.yaml")), "--out", str(out)])
    assert result.exit_code == 1
    assert not out.exists()
