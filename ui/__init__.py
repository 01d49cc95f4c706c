"""
ui/
---
Presentation layer.

    from ui import render_canvas, normalize_city, parse_distance
    from ui import path_form, search_form, result_panel, …
"""

from ui.canvas import render_canvas, is_on_route, CanvasConfig
from ui.forms import InvalidInput, normalize_city, parse_distance

from ui.controls import (
    path_form,
    search_form,
    result_lines,
    result_panel,
    analytics_panel,
    playback_controls,
    pseudocode_viewer,
    explanation_panel,
)

__all__ = [
    "render_canvas",
    "is_on_route",
    "CanvasConfig",
    "InvalidInput",
    "normalize_city",
    "parse_distance",
    "path_form",
    "search_form",
    "result_lines",
    "result_panel",
    "analytics_panel",
    "playback_controls",
    "pseudocode_viewer",
    "explanation_panel",
]
