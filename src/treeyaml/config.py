import os
from pathlib import Path

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "treeyaml.yml"
CONFIG_ENV_VAR = "TREEYAML_CONFIG"

DEFAULTS = {
    "reader": {"quote_char": '"'},
    "writer": {"indent_width": 4, "quote_char": "", "spacing": 1},
    "logging": {"level": "INFO", "to_file": False},
    "debug": False,
}


class TYConfig:
    def __init__(self, data):
        self.reader = {**DEFAULTS["reader"], **(data.get("reader") or {})}
        self.writer = {**DEFAULTS["writer"], **(data.get("writer") or {})}
        self.logging = {**DEFAULTS["logging"], **(data.get("logging") or {})}
        self.paths = data.get("paths", {}) or {}
        self.debug = data.get("debug", DEFAULTS["debug"])


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH


def load_config(path=None) -> 'TYConfig':
    path = Path(path) if path is not None else config_path()
    if not path.exists():
        # Installed copies ship without the settings file.
        return TYConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return TYConfig(data)

_config_cache = None

def get_config() -> 'TYConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    global _config_cache
    _config_cache = None
