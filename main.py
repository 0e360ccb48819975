"""
main.py — AlgoTrace Flask App
===============================
HTTP front for the step engines.

Routes:
  GET  /api/algorithms                 – registry entries (?category=sorting)
  GET  /api/algorithms/<id>            – one registry entry
  POST /api/visualizations/generate    – run an algorithm, return every step
  POST /api/visualizations             – save a finished trace
  GET  /api/visualizations/<id>        – fetch a saved trace
  GET  /api/visualizations             – page over public saved traces

Errors:
  Every VisualizationError becomes {"error": message} with its status code
  (400 bad input, 404 unknown id, 422 no engine for that category).
"""

from typing import Any, Mapping, Optional

from flask import Flask, jsonify, request

from algorithms import Category, algorithms_by_category, get_algorithm, list_algorithms
from config import Config
from engine import VisualizationStore, generate
from engine.logger import get_logger, setup_logging
from errors import InvalidInput, NotFound, VisualizationError

log = get_logger(__name__)


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(Config)
    if config:
        app.config.update(config)

    setup_logging(app.config["LOG_LEVEL"])
    store = VisualizationStore()
    app.extensions["visualization_store"] = store

    # ------------------------------------------------------------------
    # Errors
    # ------------------------------------------------------------------
    @app.errorhandler(VisualizationError)
    def handle_visualization_error(err: VisualizationError):
        log.warning("%s %s -> %d: %s", request.method, request.path, err.status_code, err.message)
        return jsonify({"error": err.message}), err.status_code

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------
    @app.route("/api/algorithms")
    def api_algorithms():
        category = request.args.get("category")
        if category is None:
            infos = list_algorithms()
        else:
            try:
                infos = algorithms_by_category(Category(category))
            except ValueError:
                raise InvalidInput(f"Unknown category: {category}") from None
        return jsonify({"algorithms": [a.to_dict() for a in infos]})

    @app.route("/api/algorithms/<algorithm_id>")
    def api_algorithm(algorithm_id: str):
        info = get_algorithm(algorithm_id)
        if info is None:
            raise NotFound(f"Unknown algorithm: {algorithm_id}")
        return jsonify(info.to_dict())

    # ------------------------------------------------------------------
    # Visualizations
    # ------------------------------------------------------------------
    @app.route("/api/visualizations/generate", methods=["POST"])
    def api_generate():
        body = _json_body()
        algorithm_id = body.get("algorithm")
        if not isinstance(algorithm_id, str):
            raise InvalidInput("Field 'algorithm' must be a string")
        raw_input = body.get("input")
        _check_size(app.config, raw_input)

        vis = generate(algorithm_id, raw_input)
        return jsonify(vis.to_dict())

    @app.route("/api/visualizations", methods=["POST"])
    def api_save():
        body = _json_body()
        algorithm_id = body.get("algorithmId")
        input_data = body.get("inputData")
        steps = body.get("steps")
        if not isinstance(algorithm_id, str) or get_algorithm(algorithm_id) is None:
            raise InvalidInput("Field 'algorithmId' must name a known algorithm")
        if not isinstance(input_data, dict):
            raise InvalidInput("Field 'inputData' must be an object")
        if not isinstance(steps, list):
            raise InvalidInput("Field 'steps' must be a list")

        saved = store.save(
            algorithm_id,
            input_data,
            steps,
            user_id=body.get("userId"),
            is_public=bool(body.get("isPublic", False)),
        )
        return jsonify(saved.to_dict()), 201

    @app.route("/api/visualizations/<vis_id>")
    def api_get_saved(vis_id: str):
        return jsonify(store.get(vis_id).to_dict())

    @app.route("/api/visualizations")
    def api_list_saved():
        limit = _int_arg("limit", 20)
        offset = _int_arg("offset", 0)
        items = store.list(limit=limit, offset=offset, is_public=True)
        return jsonify({
            "visualizations": [v.to_dict() for v in items],
            "limit":  limit,
            "offset": offset,
        })

    return app


# ---------------------------------------------------------------------------
# Request helpers
# ---------------------------------------------------------------------------
def _json_body() -> Mapping[str, Any]:
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise InvalidInput("Request body must be a JSON object")
    return body


def _int_arg(name: str, default: int) -> int:
    raw = request.args.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise InvalidInput(f"Query parameter '{name}' must be an integer") from None


def _check_size(settings: Mapping[str, Any], raw_input: Any) -> None:
    """Reject inputs whose traces would be too large to ship."""
    if not isinstance(raw_input, Mapping):
        return
    array = raw_input.get("array")
    if isinstance(array, list) and len(array) > settings["MAX_ARRAY_LENGTH"]:
        raise InvalidInput(f"Array too long (max {settings['MAX_ARRAY_LENGTH']} elements)")
    nodes = raw_input.get("nodes")
    if isinstance(nodes, list) and len(nodes) > settings["MAX_GRAPH_NODES"]:
        raise InvalidInput(f"Too many nodes (max {settings['MAX_GRAPH_NODES']})")
    edges = raw_input.get("edges")
    if isinstance(edges, list) and len(edges) > settings["MAX_GRAPH_EDGES"]:
        raise InvalidInput(f"Too many edges (max {settings['MAX_GRAPH_EDGES']})")


app = create_app()


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    log.info("AlgoTrace listening on http://%s:%d", app.config["HOST"], app.config["PORT"])
    app.run(debug=app.config["DEBUG"], host=app.config["HOST"], port=app.config["PORT"])
