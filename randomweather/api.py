"""Flask application exposing the resolver as ``GET /api/randomWeather``."""

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from randomweather.models import Success

EXHAUSTED_BODY = {
    "error": "Service Unavailable",
    "message": (
        "Unable to resolve a valid location after multiple attempts. "
        "The geocoding service may be temporarily unavailable or rate-limited. "
        "Please try again in a few moments."
    ),
}


def create_app(resolver, store=None) -> Flask:
    """
    Args:
        resolver: Object with ``resolve() -> Success | Exhausted``.
        store: Optional city store, only used to report the dataset size on /api/health.
    """
    app = Flask(__name__)
    app.json.ensure_ascii = False

    @app.route("/api/randomWeather")
    def random_weather():
        outcome = resolver.resolve()
        if isinstance(outcome, Success):
            return jsonify(outcome.result.to_dict())
        return jsonify(EXHAUSTED_BODY), 503

    @app.route("/api/health")
    def health():
        body = {"status": "ok"}
        if store is not None:
            body["cities"] = len(store)
        return jsonify(body)

    @app.errorhandler(HTTPException)
    def http_error(e):
        return jsonify({"error": e.name, "message": e.description}), e.code

    return app
