from __future__ import annotations

import logging

from treeyaml.logging import get_logger


def test_module_loggers_nest_under_base():
    logger = get_logger("treeyaml.loader.reader")
    assert logger.name == "treeyaml.loader.reader"
    assert logger.propagate is True


def test_foreign_names_are_nested():
    assert get_logger("plugins.extra").name == "treeyaml.plugins.extra"


def test_base_logger_configured_once():
    base = get_logger()
    assert base.name == "treeyaml"
    assert base.propagate is False

    handlers = list(base.handlers)
    get_logger("another.module")
    assert base.handlers == handlers
    assert any(isinstance(h, logging.StreamHandler) for h in handlers)
