"""
Configuration for the City Route Visualizer.

Every tunable lives on VisualizerConfig.  Defaults are the values the
app ships with; `from_env()` lets a deployment override them through
ROUTE_VISUALIZER_* environment variables.  Secrets are never hardcoded:
without ROUTE_VISUALIZER_SECRET_KEY a random key is generated per process.
"""

import logging
import os
import secrets
from dataclasses import dataclass, field
from typing import Mapping, Optional

ENV_PREFIX = "ROUTE_VISUALIZER_"


@dataclass
class VisualizerConfig:
    """Settings for the Flask app, the canvas and logging."""

    # canvas size in pixels, shared by Layout and the SVG renderer
    canvas_width: int = 900
    canvas_height: int = 600

    # new cities are never placed closer than this to a border
    node_margin: int = 50

    # fixed seed makes city placement reproducible (tests, demos)
    layout_seed: Optional[int] = None

    secret_key: str = field(default_factory=lambda: secrets.token_hex(32))

    log_level: int = logging.INFO

    host: str = "0.0.0.0"
    # oldest idle sessions are evicted past this many
    max_sessions: int = 1000

    port: int = 5000
    debug: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "VisualizerConfig":
        """Build a config from ROUTE_VISUALIZER_* variables."""
        env = os.environ if environ is None else environ
        cfg = cls()

        def get(name: str) -> Optional[str]:
            value = env.get(ENV_PREFIX + name)
            return value if value not in (None, "") else None

        if get("CANVAS_WIDTH"):
            cfg.canvas_width = int(get("CANVAS_WIDTH"))
        if get("CANVAS_HEIGHT"):
            cfg.canvas_height = int(get("CANVAS_HEIGHT"))
        if get("NODE_MARGIN"):
            cfg.node_margin = int(get("NODE_MARGIN"))
        if get("LAYOUT_SEED"):
            cfg.layout_seed = int(get("LAYOUT_SEED"))
        if get("SECRET_KEY"):
            cfg.secret_key = get("SECRET_KEY")
        if get("LOG_LEVEL"):
            cfg.log_level = _parse_level(get("LOG_LEVEL"))
        if get("HOST"):
            cfg.host = get("HOST")
        if get("PORT"):
            cfg.port = int(get("PORT"))
        if get("MAX_SESSIONS"):
            cfg.max_sessions = int(get("MAX_SESSIONS"))
        if get("DEBUG"):
            cfg.debug = get("DEBUG").lower() in ("1", "true", "yes", "on")
        return cfg


def _parse_level(value: str) -> int:
    """Accept either a level name ("DEBUG") or a number ("10")."""
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {value}")
    return level
