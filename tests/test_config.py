from __future__ import annotations

from treeyaml import config as config_module
from treeyaml.config import TYConfig, get_config, load_config, reset_config
from treeyaml.loader import TreeReader
from treeyaml.utils import resolve_project_path


def test_project_config_file_loads():
    cfg = load_config(resolve_project_path("config/treeyaml.yml"))
    assert cfg.reader["quote_char"] == '"'
    assert cfg.writer["indent_width"] == 4
    assert cfg.writer["quote_char"] == ""
    assert cfg.debug is False


def test_missing_config_file_uses_defaults(tmp_path):
    cfg = load_config(tmp_path / "nope.yml")
    assert cfg.writer == {"indent_width": 4, "quote_char": "", "spacing": 1}
    assert cfg.logging["level"] == "INFO"


def test_partial_sections_are_merged_with_defaults(tmp_path):
    path = tmp_path / "cfg.yml"
    path.write_text("writer:\n  indent_width: 2\n", encoding="utf-8")
    cfg = load_config(path)
    assert cfg.writer["indent_width"] == 2
    assert cfg.writer["spacing"] == 1
    assert cfg.reader["quote_char"] == '"'


def test_env_override_and_cache(tmp_path, monkeypatch):
    path = tmp_path / "cfg.yml"
    path.write_text("reader:\n  quote_char: \"'\"\n", encoding="utf-8")
    monkeypatch.setenv(config_module.CONFIG_ENV_VAR, str(path))
    reset_config()
    try:
        cfg = get_config()
        assert cfg.reader["quote_char"] == "'"
        assert get_config() is cfg
    finally:
        monkeypatch.delenv(config_module.CONFIG_ENV_VAR)
        reset_config()


def test_reader_from_config():
    reader = TreeReader.from_config(TYConfig({"reader": {"quote_char": ""}}))
    assert reader.parser.quote_char == ""
