"""Tests for environment-driven configuration."""

import logging

import pytest

from config import VisualizerConfig


def test_defaults():
    cfg = VisualizerConfig()
    assert (cfg.canvas_width, cfg.canvas_height, cfg.node_margin) == (900, 600, 50)
    assert cfg.layout_seed is None
    assert cfg.log_level == logging.INFO
    assert cfg.port == 5000
    assert not cfg.debug


def test_secret_key_is_random_per_instance():
    assert VisualizerConfig().secret_key != VisualizerConfig().secret_key


def test_from_env_reads_prefixed_variables():
    cfg = VisualizerConfig.from_env({
        "ROUTE_VISUALIZER_CANVAS_WIDTH": "1200",
        "ROUTE_VISUALIZER_LAYOUT_SEED": "42",
        "ROUTE_VISUALIZER_SECRET_KEY": "s3cret",
        "ROUTE_VISUALIZER_LOG_LEVEL": "debug",
        "ROUTE_VISUALIZER_PORT": "8080",
        "ROUTE_VISUALIZER_DEBUG": "true",
        "CANVAS_HEIGHT": "1",
    })

    assert cfg.canvas_width == 1200
    assert cfg.canvas_height == 600
    assert cfg.layout_seed == 42
    assert cfg.secret_key == "s3cret"
    assert cfg.log_level == logging.DEBUG
    assert cfg.port == 8080
    assert cfg.debug


def test_empty_values_keep_defaults():
    cfg = VisualizerConfig.from_env({"ROUTE_VISUALIZER_PORT": ""})
    assert cfg.port == 5000


def test_numeric_log_level():
    assert VisualizerConfig.from_env({"ROUTE_VISUALIZER_LOG_LEVEL": "30"}).log_level == 30


def test_unknown_log_level():
    with pytest.raises(ValueError, match="LOUD"):
        VisualizerConfig.from_env({"ROUTE_VISUALIZER_LOG_LEVEL": "LOUD"})


def test_max_sessions_from_env():
    assert VisualizerConfig().max_sessions == 1000
    cfg = VisualizerConfig.from_env({"ROUTE_VISUALIZER_MAX_SESSIONS": "25"})
    assert cfg.max_sessions == 25
