"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • path_form           – from / to / distance inputs + "Add Path"
  • search_form         – start / end inputs, one button per search, reset
  • result_panel        – "Path: A → B → C" and "Total Distance: N"
  • analytics_panel     – cities expanded, paths examined, steps, time
  • playback_controls   – prev / next / rewind / end over a recorded trace
  • pseudocode_viewer   – with live line highlighting
  • explanation_panel   – "why this step happened"

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - Anything that came from the user is escaped.
  - The main app stitches them together.
"""

from typing import List, Optional, Sequence

from markupsafe import escape

from algorithms import AlgoInfo
from algorithms.step import format_route
from engine import RunMetrics


NO_PATH_TEXT = "No path found"


# ---------------------------------------------------------------------------
# Add-Path Form
# ---------------------------------------------------------------------------
def path_form() -> str:
    return """
    <div class="panel path-form">
      <h3>🛣 Add Path</h3>
      <label>From: <input type="text" id="path-from" placeholder="e.g. A" autocomplete="off"></label>
      <label>To: <input type="text" id="path-to" placeholder="e.g. B" autocomplete="off"></label>
      <label>Distance: <input type="number" id="path-distance" min="0" step="1" placeholder="e.g. 5"></label>
      <button id="btn-add-path" class="btn-primary">Add Path</button>
      <p class="form-error" id="path-error"></p>
    </div>
    """


# ---------------------------------------------------------------------------
# Search Form
# ---------------------------------------------------------------------------
def search_form(
    algorithms: List[AlgoInfo],
    node_ids: Sequence[str] = (),
    start: str = "",
    end: str = "",
) -> str:
    options = "".join(f'<option value="{escape(n)}"></option>' for n in node_ids)
    buttons = "".join(
        f'<button class="btn-search" data-algo="{a.key}" title="{escape(a.description)}">'
        f'{a.key.upper()}</button>'
        for a in algorithms
    )

    return f"""
    <div class="panel search-form">
      <h3>🎯 Find Route</h3>
      <datalist id="city-list">{options}</datalist>
      <label>Start: <input type="text" id="search-start" list="city-list" value="{escape(start)}" autocomplete="off"></label>
      <label>End: <input type="text" id="search-end" list="city-list" value="{escape(end)}" autocomplete="off"></label>
      <div class="button-row">
        {buttons}
      </div>
      <button id="btn-reset" class="btn-secondary">Reset Graph</button>
      <p class="form-error" id="search-error"></p>
    </div>
    """


# ---------------------------------------------------------------------------
# Result Panel
# ---------------------------------------------------------------------------
def result_lines(metrics: Optional[RunMetrics]) -> List[str]:
    """Plain-text result of a run: route and distance, or the not-found line."""
    if metrics is None:
        return []
    if not metrics.path_found:
        return [NO_PATH_TEXT]
    return [
        f"Path: {format_route(metrics.path)}",
        f"Total Distance: {metrics.total_distance}",
    ]


def result_panel(metrics: Optional[RunMetrics] = None) -> str:
    if metrics is None:
        return """
        <div class="panel result-panel">
          <h3>📍 Result</h3>
          <p class="placeholder">Add some paths, then pick a search.</p>
        </div>
        """

    body = "".join(f"<p>{escape(line)}</p>" for line in result_lines(metrics))
    status = "found" if metrics.path_found else "not-found"
    return f"""
    <div class="panel result-panel {status}">
      <h3>📍 Result — {escape(metrics.algo_label)}</h3>
      {body}
    </div>
    """


# ---------------------------------------------------------------------------
# Analytics Panel
# ---------------------------------------------------------------------------
def analytics_panel(metrics: Optional[RunMetrics] = None) -> str:
    if not metrics:
        return """
        <div class="panel analytics-panel">
          <h3>📊 Analytics</h3>
          <p class="placeholder">Run a search to see metrics.</p>
        </div>
        """

    distance = metrics.total_distance if metrics.path_found else "—"
    return f"""
    <div class="panel analytics-panel">
      <h3>📊 Analytics</h3>
      <table>
        <tr><td>Cities Expanded:</td><td><strong>{metrics.nodes_expanded}</strong></td></tr>
        <tr><td>Paths Examined:</td><td><strong>{metrics.edges_examined}</strong></td></tr>
        <tr><td>Hops:</td><td><strong>{metrics.path_length}</strong></td></tr>
        <tr><td>Distance:</td><td><strong>{distance}</strong></td></tr>
        <tr><td>Total Steps:</td><td><strong>{metrics.total_steps}</strong></td></tr>
        <tr><td>Wall Time:</td><td><strong>{metrics.wall_time_ms:.2f} ms</strong></td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
def playback_controls(
    current_step: int = 0,
    total_steps: int = 0,
    is_finished: bool = False,
) -> str:
    return f"""
    <div class="panel playback-controls">
      <h3>⏯ Replay</h3>
      <div class="button-row">
        <button id="btn-rewind" title="Rewind to start">⏮</button>
        <button id="btn-prev" title="Previous step">◀</button>
        <button id="btn-next" title="Next step">▶</button>
        <button id="btn-end" title="Jump to end">⏭</button>
      </div>
      <div class="step-info">
        Step <span id="current-step">{current_step}</span> / <span id="total-steps">{total_steps}</span>
        {' <span class="finished-badge">FINISHED</span>' if is_finished else ''}
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(
    pseudocode_lines: List[str],
    current_line: int = -1,
) -> str:
    if not pseudocode_lines:
        return """
        <div class="code-block">
          <div style="color: #7d8590; padding: 20px; text-align: center;">
            Run a search to view its pseudocode
          </div>
        </div>
        """

    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        highlight = 'highlight' if i == current_line else ''
        lines_html.append(f'<div class="code-line {highlight}" data-line="{i}">{escape(line)}</div>')

    return f"""
    <div class="code-block">
      {''.join(lines_html)}
    </div>
    """


# ---------------------------------------------------------------------------
# Explanation Panel
# ---------------------------------------------------------------------------
def explanation_panel(explanation: str = "") -> str:
    if not explanation:
        return (
            '<div class="explanation-text">▶ Pick <strong>BFS</strong>, <strong>DFS</strong> '
            'or <strong>UCS</strong> to see step-by-step explanations of the search.</div>'
        )

    return f"""<div class="explanation-text">{escape(explanation)}</div>"""
