"""
main.py — City Route Visualizer Flask App
==========================================
The web server that powers the visualizer.

Routes:
  GET  /                       – main UI
  GET  /api/graph              – cities, paths and the rendered map
  POST /api/paths              – add an undirected path {from, to, distance}
  POST /api/search             – run a search {start, end, algorithm}
  POST /api/step/next          – advance one step of the last run
  POST /api/step/prev          – rewind one step
  POST /api/step/goto          – jump to step N {index}
  POST /api/reset              – forget every city, path and run

State management:
  The Flask session cookie holds only an opaque token.  The graph, its
  layout and the last run live in a Session object kept by the app's
  SessionRegistry, so nothing about the map is module-level state.
  Only routes that change the map create a Session; the registry keeps
  the most recently used `max_sessions` of them.
"""

from typing import Any, Dict, Optional

from flask import Flask, current_app, jsonify, render_template_string, request, session

from config import VisualizerConfig
from graph import EdgeNotFound, UnknownAlgorithm
from algorithms import get_algorithm, list_algorithms
from algorithms.step import Step
from engine import Session, SessionRegistry
from log import get_logger, set_global_log_level
from ui import (
    InvalidInput,
    normalize_city,
    parse_distance,
    render_canvas,
    path_form,
    search_form,
    result_lines,
    result_panel,
    analytics_panel,
    playback_controls,
    pseudocode_viewer,
    explanation_panel,
)

logger = get_logger(__name__)

REGISTRY_KEY = "route_visualizer.sessions"
TOKEN_KEY = "token"


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(config: Optional[VisualizerConfig] = None) -> Flask:
    config = config or VisualizerConfig()
    set_global_log_level(config.log_level)

    app = Flask(__name__)
    app.secret_key = config.secret_key
    app.config["VISUALIZER"] = config
    app.extensions[REGISTRY_KEY] = SessionRegistry(config)

    _register_routes(app)
    _register_error_handlers(app)

    logger.debug("App created (%sx%s canvas)", config.canvas_width, config.canvas_height)
    return app


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def current_session() -> Session:
    """Session for this browser, created on first use."""
    registry: SessionRegistry = current_app.extensions[REGISTRY_KEY]
    sess = registry.get(session.get(TOKEN_KEY))
    if sess is None:
        token = registry.create()
        session[TOKEN_KEY] = token
        sess = registry.get(token)
    return sess


def existing_session() -> Session:
    """Session for this browser, or an empty unregistered one.

    Read-only routes use this so a visit without a cookie stores nothing.
    """
    registry: SessionRegistry = current_app.extensions[REGISTRY_KEY]
    sess = registry.get(session.get(TOKEN_KEY))
    return sess if sess is not None else Session(current_app.config["VISUALIZER"])


def _json_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _graph_payload(sess: Session) -> Dict[str, Any]:
    data = sess.store.to_dict()
    return {
        "nodes": data["nodes"],
        "paths": data["paths"],
        "svg":   render_canvas(sess.store, sess.layout, path=_current_route(sess)),
    }


def _current_route(sess: Session):
    metrics = sess.metrics
    return metrics.path if metrics else None


def _step_payload(sess: Session, step: Step) -> Dict[str, Any]:
    stepper = sess.recorder.stepper
    info = get_algorithm(sess.metrics.algo_key)
    return {
        "svg":          render_canvas(sess.store, sess.layout, step=step),
        "pseudocode":   pseudocode_viewer(info.pseudocode, current_line=step.pseudocode_line),
        "explanation":  explanation_panel(step.explanation),
        "current_step": stepper.current_idx,
        "total_steps":  stepper.total_steps_fetched,
        "is_finished":  stepper.is_finished,
    }


def _require_stepper(sess: Session):
    if sess.recorder is None or sess.recorder.stepper is None:
        raise InvalidInput("step", "Run a search first.")
    return sess.recorder.stepper


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
def _register_routes(app: Flask) -> None:

    @app.route("/")
    def index():
        sess = existing_session()
        metrics = sess.metrics
        info = get_algorithm(metrics.algo_key) if metrics else None
        stepper = sess.recorder.stepper if sess.recorder else None

        html = render_template_string(INDEX_TEMPLATE,
            svg=render_canvas(sess.store, sess.layout, path=_current_route(sess)),
            path_form=path_form(),
            search_form=search_form(
                list_algorithms(),
                node_ids=sess.store.node_ids(),
                start=metrics.start if metrics else "",
                end=metrics.end if metrics else "",
            ),
            result=result_panel(metrics),
            analytics=analytics_panel(metrics),
            playback=playback_controls(
                current_step=stepper.current_idx if stepper else 0,
                total_steps=stepper.total_steps_fetched if stepper else 0,
                is_finished=stepper.is_finished if stepper else False,
            ),
            pseudocode=pseudocode_viewer(info.pseudocode if info else []),
            explanation=explanation_panel(),
        )
        return html

    @app.route("/api/graph", methods=["GET"])
    def api_graph():
        return jsonify(_graph_payload(existing_session()))

    @app.route("/api/paths", methods=["POST"])
    def api_add_path():
        data = _json_body()
        from_id = normalize_city(data.get("from"), field="from")
        to_id = normalize_city(data.get("to"), field="to")
        distance = parse_distance(data.get("distance"))

        sess = current_session()
        sess.add_path(from_id, to_id, distance)

        payload = _graph_payload(sess)
        payload["search_form"] = search_form(list_algorithms(), node_ids=sess.store.node_ids())
        return jsonify(payload)

    @app.route("/api/search", methods=["POST"])
    def api_search():
        data = _json_body()
        start = normalize_city(data.get("start"), field="start")
        end = normalize_city(data.get("end"), field="end")
        algo_key = str(data.get("algorithm", "")).strip().lower()

        sess = current_session()
        metrics = sess.search(algo_key, start, end)
        info = get_algorithm(algo_key)
        stepper = sess.recorder.stepper

        return jsonify({
            "result":         "\n".join(result_lines(metrics)),
            "path":           metrics.path if metrics.path_found else None,
            "total_distance": metrics.total_distance,
            "metrics":        metrics.to_dict(),
            "svg":            render_canvas(sess.store, sess.layout, path=metrics.path),
            "result_html":    result_panel(metrics),
            "analytics":      analytics_panel(metrics),
            "pseudocode":     pseudocode_viewer(info.pseudocode),
            "explanation":    explanation_panel(),
            "current_step":   stepper.current_idx,
            "total_steps":    stepper.total_steps_fetched,
        })

    # -- step navigation --
    @app.route("/api/step/next", methods=["POST"])
    def api_step_next():
        sess = existing_session()
        stepper = _require_stepper(sess)
        if not stepper.next_step():
            raise InvalidInput("step", "Already at last step.")
        return jsonify(_step_payload(sess, stepper.current_step))

    @app.route("/api/step/prev", methods=["POST"])
    def api_step_prev():
        sess = existing_session()
        stepper = _require_stepper(sess)
        if not stepper.prev_step():
            raise InvalidInput("step", "Already at first step.")
        return jsonify(_step_payload(sess, stepper.current_step))

    @app.route("/api/step/goto", methods=["POST"])
    def api_step_goto():
        sess = existing_session()
        stepper = _require_stepper(sess)
        idx = _json_body().get("index", 0)
        if isinstance(idx, bool) or not isinstance(idx, int):
            raise InvalidInput("index", "Step index must be a whole number.")
        if not stepper.goto_step(idx):
            raise InvalidInput("index", f"No step {idx}.")
        return jsonify(_step_payload(sess, stepper.current_step))

    @app.route("/api/reset", methods=["POST"])
    def api_reset():
        sess = existing_session()
        sess.reset()
        payload = _graph_payload(sess)
        payload["search_form"] = search_form(list_algorithms())
        payload["result_html"] = result_panel()
        payload["analytics"] = analytics_panel()
        return jsonify(payload)


# ---------------------------------------------------------------------------
# Error handlers
# ---------------------------------------------------------------------------
def _register_error_handlers(app: Flask) -> None:

    @app.errorhandler(InvalidInput)
    def handle_invalid_input(exc: InvalidInput):
        logger.debug("Rejected %s: %s", exc.field, exc)
        return jsonify({"error": str(exc), "field": exc.field}), 400

    @app.errorhandler(UnknownAlgorithm)
    def handle_unknown_algorithm(exc: UnknownAlgorithm):
        return jsonify({"error": str(exc)}), 400

    @app.errorhandler(EdgeNotFound)
    def handle_edge_not_found(exc: EdgeNotFound):
        logger.exception("Route refers to a missing path", exc_info=exc)
        return jsonify({"error": "Internal error while measuring the route."}), 500


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>City Route Visualizer</title>
  <link rel="preconnect" href="https://fonts.googleapis.com">
  <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
  <link href="https://fonts.googleapis.com/css2?family=JetBrains+Mono:wght@400;500;700&family=DM+Sans:wght@400;500;700&display=swap" rel="stylesheet">
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --accent-cyan: #0ea5e9;
      --accent-teal: #06b6d4;
      --accent-emerald: #10b981;
      --accent-rose: #f43f5e;
      --accent-purple: #a855f7;
    }

    body {
      font-family: 'DM Sans', -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      height: 100vh;
      overflow: hidden;
    }

    #sidebar {
      width: 340px;
      background: var(--bg-dark);
      border-right: 1px solid var(--border);
      overflow-y: auto;
      padding: 24px 16px;
    }

    #main { flex: 1; display: flex; flex-direction: column; }

    #canvas-container {
      flex: 1;
      display: flex;
      align-items: center;
      justify-content: center;
      border-bottom: 1px solid var(--border);
    }
    #canvas-svg { max-width: 100%; max-height: 100%; }

    #bottom-panel {
      display: grid;
      grid-template-columns: 1fr 1fr;
      gap: 20px;
      padding: 20px;
      background: var(--bg-dark);
      min-height: 280px;
      max-height: 360px;
      overflow: hidden;
    }
    #bottom-panel > div {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 20px;
      overflow-y: auto;
    }
    #bottom-panel h3 {
      font-size: 14px;
      text-transform: uppercase;
      margin-bottom: 16px;
      color: var(--accent-cyan);
    }

    .code-block {
      font-family: 'JetBrains Mono', 'Courier New', monospace;
      font-size: 13px;
      line-height: 1.6;
      white-space: pre;
    }
    .code-line { padding: 2px 12px; border-radius: 6px; }
    .code-line.highlight {
      background: rgba(6, 182, 212, 0.15);
      border-left: 3px solid var(--accent-cyan);
    }
    .explanation-text { color: var(--text-secondary); line-height: 1.8; font-size: 14px; }
    .explanation-text strong { color: var(--text-primary); }

    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 18px;
      margin-bottom: 16px;
    }
    .panel h3 {
      font-size: 13px;
      margin-bottom: 14px;
      text-transform: uppercase;
      letter-spacing: 0.5px;
    }
    .result-panel p { font-family: 'JetBrains Mono', monospace; margin: 4px 0; }
    .result-panel.found p { color: var(--accent-purple); }
    .result-panel.not-found p { color: var(--accent-rose); }

    .button-row { display: flex; gap: 8px; margin: 12px 0; }
    button {
      background: linear-gradient(135deg, var(--accent-cyan), var(--accent-teal));
      color: #fff;
      border: none;
      padding: 10px 16px;
      border-radius: 8px;
      cursor: pointer;
      font-size: 13px;
      font-weight: 600;
    }
    .btn-primary { background: linear-gradient(135deg, var(--accent-emerald), #059669); }
    .btn-secondary { background: var(--bg-darker); border: 1px solid var(--border); }

    input {
      width: 100%;
      padding: 10px 12px;
      margin: 6px 0;
      background: var(--bg-darker);
      border: 1px solid var(--border);
      border-radius: 8px;
      color: var(--text-primary);
      font-size: 13px;
    }
    label {
      display: block;
      margin: 10px 0 4px;
      font-size: 12px;
      color: var(--text-secondary);
      text-transform: uppercase;
    }
    .form-error { color: var(--accent-rose); font-size: 12px; min-height: 16px; }
    .placeholder { color: var(--text-secondary); font-size: 13px; }

    .step-info {
      font-size: 13px;
      color: var(--text-secondary);
      font-family: 'JetBrains Mono', monospace;
    }
    .finished-badge {
      background: var(--accent-emerald);
      color: #fff;
      padding: 2px 8px;
      border-radius: 6px;
      font-size: 11px;
    }

    table { width: 100%; font-size: 13px; }
    table td:last-child { text-align: right; color: var(--accent-cyan); }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="path-form">{{ path_form|safe }}</div>
    <div id="search-form">{{ search_form|safe }}</div>
    <div id="result">{{ result|safe }}</div>
    <div id="playback">{{ playback|safe }}</div>
    <div id="analytics">{{ analytics|safe }}</div>
  </div>

  <div id="main">
    <div id="canvas-container">
      <div id="canvas-svg">{{ svg|safe }}</div>
    </div>

    <div id="bottom-panel">
      <div id="pseudocode-container">
        <h3>Pseudocode</h3>
        <div id="pseudocode">{{ pseudocode|safe }}</div>
      </div>
      <div id="explanation-container">
        <h3>Step Explanation</h3>
        <div id="explanation">{{ explanation|safe }}</div>
      </div>
    </div>
  </div>

  <script>
    const $ = (id) => document.getElementById(id);

    async function send(method, url, data) {
      const res = await fetch(url, {
        method,
        headers: {'Content-Type': 'application/json'},
        body: data === undefined ? undefined : JSON.stringify(data),
      });
      return await res.json();
    }

    function showStep(data) {
      if (data.error) return;
      $('canvas-svg').innerHTML = data.svg;
      $('pseudocode').innerHTML = data.pseudocode;
      $('explanation').innerHTML = data.explanation;
      $('current-step').textContent = data.current_step;
      $('total-steps').textContent = data.total_steps;
    }

    function bindSearchForm() {
      document.querySelectorAll('.btn-search').forEach(btn => {
        btn.addEventListener('click', async () => {
          const data = await send('POST', '/api/search', {
            start: $('search-start').value,
            end: $('search-end').value,
            algorithm: btn.dataset.algo,
          });
          $('search-error').textContent = data.error || '';
          if (data.error) return;
          $('canvas-svg').innerHTML = data.svg;
          $('result').innerHTML = data.result_html;
          $('analytics').innerHTML = data.analytics;
          $('pseudocode').innerHTML = data.pseudocode;
          $('explanation').innerHTML = data.explanation;
          $('current-step').textContent = data.current_step;
          $('total-steps').textContent = data.total_steps;
        });
      });

      $('btn-reset')?.addEventListener('click', async () => {
        const data = await send('POST', '/api/reset', {});
        $('canvas-svg').innerHTML = data.svg;
        $('search-form').innerHTML = data.search_form;
        $('result').innerHTML = data.result_html;
        $('analytics').innerHTML = data.analytics;
        $('current-step').textContent = 0;
        $('total-steps').textContent = 0;
        ['path-from', 'path-to', 'path-distance'].forEach(id => $(id).value = '');
        bindSearchForm();
      });
    }

    $('btn-add-path')?.addEventListener('click', async () => {
      const data = await send('POST', '/api/paths', {
        from: $('path-from').value,
        to: $('path-to').value,
        distance: $('path-distance').value,
      });
      $('path-error').textContent = data.error || '';
      if (data.error) return;
      $('canvas-svg').innerHTML = data.svg;
      const start = $('search-start').value, end = $('search-end').value;
      $('search-form').innerHTML = data.search_form;
      $('search-start').value = start;
      $('search-end').value = end;
      bindSearchForm();
      ['path-from', 'path-to', 'path-distance'].forEach(id => $(id).value = '');
    });

    // Replay controls
    $('btn-next')?.addEventListener('click', async () => showStep(await send('POST', '/api/step/next', {})));
    $('btn-prev')?.addEventListener('click', async () => showStep(await send('POST', '/api/step/prev', {})));
    $('btn-rewind')?.addEventListener('click', async () => showStep(await send('POST', '/api/step/goto', {index: 0})));
    $('btn-end')?.addEventListener('click', async () => {
      const total = +$('total-steps').textContent;
      if (total > 0) showStep(await send('POST', '/api/step/goto', {index: total - 1}));
    });

    bindSearchForm();
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    cfg = VisualizerConfig.from_env()
    logger.info("City Route Visualizer on http://%s:%s", cfg.host, cfg.port)
    create_app(cfg).run(host=cfg.host, port=cfg.port, debug=cfg.debug)
