"""
canvas.py — SVG Graph Renderer
================================
Pure rendering function: GraphStore + Layout (+ route / Step) → SVG string.

The renderer consumes:
  • store   – cities and the paths between them
  • layout  – where each city sits on the canvas
  • path    – a search result to highlight (optional)
  • step    – a replay snapshot whose states override colours (optional)
  • config  – colours, radii, fonts

Design decisions:
  - NO mutation.  Reads the store and layout, returns a string.
  - Each user-added path is drawn once, with its distance at the midpoint.
    Parallel paths between the same two cities stack their labels.
  - A path is on the route when its two cities are consecutive on the
    route, in either direction.
  - City names are user text and are escaped before going into markup.
"""

import math
from typing import Dict, List, Optional, Sequence

from markupsafe import escape

from graph import GraphStore, Layout
from algorithms.step import Step, edge_key, route_keys, format_route


# ---------------------------------------------------------------------------
# Visual Config: colour palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    bg: str = "#0d1117"

    node_colors: Dict[str, str] = {
        "default":  "#1c2128",   # dark grey
        "frontier": "#0ea5e9",   # cyan blue
        "visited":  "#10b981",   # emerald green
        "current":  "#06b6d4",   # bright teal
        "path":     "#a855f7",   # purple, on the route
    }

    edge_colors: Dict[str, str] = {
        "default":  "#30363d",
        "relaxed":  "#06b6d4",
        "chosen":   "#a855f7",
        "ignored":  "#21262d",
    }

    node_radius:        int = 20
    node_stroke:        str = "#30363d"
    node_stroke_width:  int = 2
    node_label_color:   str = "#e6edf3"
    node_label_size:    int = 13

    edge_width:         int = 2
    edge_width_chosen:  int = 4
    edge_weight_color:  str = "#7d8590"
    edge_weight_size:   int = 12
    edge_weight_bg:     str = "#161b22"

    overlay_bg:         str = "#161b22"
    overlay_border:     str = "#30363d"
    overlay_text:       str = "#7d8590"
    overlay_accent:     str = "#0ea5e9"
    overlay_font_size:  int = 13
    overlay_rows:       int = 8


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_canvas(
    store: GraphStore,
    layout: Layout,
    path: Optional[Sequence[str]] = None,
    step: Optional[Step] = None,
    config: CanvasConfig = CONFIG,
    show_overlays: bool = True,
) -> str:
    """
    Returns an SVG string.

    Args:
        store         : The graph to draw.
        layout        : City positions; cities without one are skipped.
        path          : Route to highlight (ignored while a step is shown).
        step          : Replay snapshot, or None for the static graph.
        config        : Visual config.
        show_overlays : Draw the frontier panel for `step`.
    """
    width, height = layout.width, layout.height
    route = list(path or [])
    route_edges = set(route_keys(route))

    svg_parts = [
        f'<svg width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">',
        f'<rect width="{width}" height="{height}" fill="{config.bg}"/>',
    ]

    # -- paths (draw first so cities sit on top) --
    seen: Dict[str, int] = {}
    for a, b, weight in store.paths():
        key = edge_key(a, b)
        nth = seen.get(key, 0)
        seen[key] = nth + 1
        state = _edge_state(key, route_edges, step)
        svg_parts.append(_render_edge(layout, a, b, weight, state, nth, config))

    # -- cities --
    for node_id in store.node_ids():
        state = _node_state(node_id, route, step)
        is_current = step is not None and step.current_node == node_id
        svg_parts.append(_render_node(layout, node_id, state, is_current, config))

    # -- overlays --
    if show_overlays and step is not None:
        svg_parts.append(_render_overlays(step, width, config))

    svg_parts.append("</svg>")
    return "\n".join(p for p in svg_parts if p)


def is_on_route(a: str, b: str, route: Sequence[str]) -> bool:
    """True when a and b are consecutive on `route`, in either order."""
    return edge_key(a, b) in set(route_keys(route))


# ---------------------------------------------------------------------------
# State resolution
# ---------------------------------------------------------------------------
def _node_state(node_id: str, route: List[str], step: Optional[Step]) -> str:
    if step is not None:
        return step.node_states.get(node_id, "default")
    return "path" if node_id in route else "default"


def _edge_state(key: str, route_edges: set, step: Optional[Step]) -> str:
    if step is not None:
        return step.edge_states.get(key, "default")
    return "chosen" if key in route_edges else "default"


# ---------------------------------------------------------------------------
# City Rendering
# ---------------------------------------------------------------------------
def _render_node(layout: Layout, node_id: str, state: str, is_current: bool, config: CanvasConfig) -> str:
    pos = layout.position(node_id)
    if pos is None:
        return ""
    cx, cy = pos
    r = config.node_radius
    fill = config.node_colors.get(state, config.node_colors["default"])

    stroke = config.node_stroke
    stroke_width = config.node_stroke_width
    glow = ""
    if is_current:
        stroke = config.node_colors["current"]
        stroke_width = 3
        glow = (
            f'<circle cx="{cx}" cy="{cy}" r="{r + 8}" fill="none" '
            f'stroke="{config.node_colors["current"]}" stroke-width="2" opacity="0.3"/>'
        )

    label = escape(node_id)
    parts = [
        f'<g class="node {state}" data-id="{label}">',
        glow,
        f'  <circle cx="{cx}" cy="{cy}" r="{r}" '
        f'fill="{fill}" stroke="{stroke}" stroke-width="{stroke_width}"/>',
        f'  <text x="{cx}" y="{cy + 5}" text-anchor="middle" '
        f'font-size="{config.node_label_size}" font-family="\'DM Sans\', sans-serif" '
        f'fill="{config.node_label_color}" font-weight="600">{label}</text>',
        '</g>',
    ]
    return "\n".join(p for p in parts if p)


# ---------------------------------------------------------------------------
# Path Rendering
# ---------------------------------------------------------------------------
def _render_edge(
    layout: Layout,
    a: str,
    b: str,
    weight,
    state: str,
    nth: int,
    config: CanvasConfig,
) -> str:
    pa, pb = layout.position(a), layout.position(b)
    if pa is None or pb is None:
        return ""

    stroke = config.edge_colors.get(state, config.edge_colors["default"])
    stroke_width = config.edge_width_chosen if state in ("chosen", "relaxed") else config.edge_width

    x1, y1 = pa
    x2, y2 = pb
    dx, dy = x2 - x1, y2 - y1
    dist = math.sqrt(dx * dx + dy * dy)
    key = escape(edge_key(a, b))

    if dist < 0.001:
        # self-loop or stacked cities: nothing sensible to draw but the label
        ux, uy = 1.0, 0.0
    else:
        ux, uy = dx / dist, dy / dist

    r = config.node_radius
    parts = [f'<g class="edge {state}" data-key="{key}">']
    if dist > 2 * r:
        parts.append(
            f'  <line x1="{x1 + ux * r:.1f}" y1="{y1 + uy * r:.1f}" '
            f'x2="{x2 - ux * r:.1f}" y2="{y2 - uy * r:.1f}" '
            f'stroke="{stroke}" stroke-width="{stroke_width}"/>'
        )

    # distance label at the midpoint, offset perpendicular to the line
    offset = 12 + 24 * nth
    mx = (x1 + x2) / 2 - uy * offset
    my = (y1 + y2) / 2 + ux * offset
    parts.append(
        f'  <circle cx="{mx:.1f}" cy="{my:.1f}" r="12" fill="{config.edge_weight_bg}" opacity="0.9"/>'
    )
    parts.append(
        f'  <text x="{mx:.1f}" y="{my + 4:.1f}" text-anchor="middle" '
        f'font-size="{config.edge_weight_size}" font-family="\'DM Sans\', sans-serif" '
        f'fill="{config.edge_weight_color}" font-weight="600">{escape(str(weight))}</text>'
    )
    parts.append('</g>')
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# Frontier Panel
# ---------------------------------------------------------------------------
def _render_overlays(step: Step, canvas_width: float, config: CanvasConfig) -> str:
    if "queue" in step.overlay:
        title, rows = "Queue", step.overlay["queue"]
    elif "stack" in step.overlay:
        # top of stack first
        title, rows = "Stack", list(reversed(step.overlay["stack"]))
    else:
        return ""

    x = canvas_width - 280
    y = 20
    parts = [
        f'<g class="frontier-panel" transform="translate({x},{y})">',
        f'  <rect width="260" height="180" fill="{config.overlay_bg}" stroke="{config.overlay_border}" '
        f'stroke-width="1" rx="8" opacity="0.95"/>',
        f'  <text x="12" y="22" font-size="13" font-weight="700" fill="{config.overlay_accent}" '
        f'font-family="\'DM Sans\', sans-serif">{title}</text>',
    ]
    limit = config.overlay_rows
    for i, item in enumerate(rows[:limit]):
        if isinstance(item, (tuple, list)) and len(item) == 2 and not isinstance(item[1], str):
            cost, route = item
            txt = f"{cost}: {format_route(route)}"
        else:
            txt = format_route(item)
        parts.append(
            f'  <text x="16" y="{48 + i * 16}" font-size="{config.overlay_font_size}" '
            f'font-family="\'JetBrains Mono\', monospace" fill="{config.overlay_text}">{escape(txt)}</text>'
        )
    if len(rows) > limit:
        parts.append(
            f'  <text x="16" y="{48 + limit * 16}" font-size="11" fill="#484f58">… +{len(rows) - limit} more</text>'
        )
    parts.append('</g>')
    return "\n".join(parts)
