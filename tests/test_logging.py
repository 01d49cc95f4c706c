"""Tests for centralized logging behavior and configuration."""

import logging
from io import StringIO

import pytest

from log import (
    ROOT_LOGGER_NAME,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    """Reset logging state before and after each test to avoid cross-test bleed."""
    reset_logging()
    yield
    reset_logging()


def test_module_names_are_rerooted():
    assert get_logger("graph.graph").name == "route_visualizer.graph.graph"
    assert get_logger("route_visualizer.main").name == "route_visualizer.main"
    assert get_logger(ROOT_LOGGER_NAME).name == ROOT_LOGGER_NAME


def test_setup_is_applied_once():
    capture = StringIO()
    setup_root_logger(handler=logging.StreamHandler(capture))
    setup_root_logger()

    root = logging.getLogger(ROOT_LOGGER_NAME)
    assert len(root.handlers) == 1

    get_logger("engine.session").info("hello")
    assert "hello" in capture.getvalue()


def test_debug_is_filtered_until_enabled():
    capture = StringIO()
    setup_root_logger(handler=logging.StreamHandler(capture))
    logger = get_logger("engine.recorder")

    logger.debug("debug-1")
    assert "debug-1" not in capture.getvalue()

    enable_debug_logging()
    logger.debug("debug-2")
    assert "debug-2" in capture.getvalue()


def test_global_level_silences_info():
    capture = StringIO()
    setup_root_logger(handler=logging.StreamHandler(capture))
    set_global_log_level(logging.WARNING)

    get_logger("main").info("quiet")
    get_logger("main").warning("loud")
    assert "quiet" not in capture.getvalue()
    assert "loud" in capture.getvalue()
