"""
HTTP API for wordfinder.

Routes:
  GET  /health     liveness probe
  POST /api/solve  JSON body with acceptedChars/deniedChars/knownPositions/rejectedPositions
  GET  /api/solve  same fields as query params (comma-separated chars, JSON maps)

Configuration comes from the environment (or a dict passed to create_app):
  WORDFINDER_SOURCE      word source id (default: enumerate)
  WORDFINDER_DICTIONARY  dictionary word list or hunspell .dic path (default: wordfreq)
  WORDFINDER_WORDS       word-list path for the "wordlist" source
  PORT                   listen port for main() (default: 3000)
"""

from __future__ import annotations

import logging
import os

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from packages.dictionary import get_dictionary
from packages.engine.normalize import parse_constraints_from_body, parse_constraints_from_query
from packages.solve import solve
from packages.sources import create_source

log = logging.getLogger(__name__)


def _build_source(config):
    source_id = config["WORDFINDER_SOURCE"]
    if source_id == "wordlist":
        return create_source("wordlist", path=config["WORDFINDER_WORDS"])
    return create_source(source_id)


def create_app(config=None):
    """Factory function to create and configure the Flask app."""
    app = Flask(__name__)
    app.config["WORDFINDER_SOURCE"] = os.environ.get("WORDFINDER_SOURCE", "enumerate")
    app.config["WORDFINDER_DICTIONARY"] = os.environ.get("WORDFINDER_DICTIONARY") or None
    app.config["WORDFINDER_WORDS"] = os.environ.get("WORDFINDER_WORDS")
    app.config["WORDFINDER_ORACLE"] = None  # explicit oracle override (tests, embedding)
    if config:
        app.config.update(config)

    # One source per app; list sources cache their words after the first solve
    source = _build_source(app.config)

    def _oracle():
        if source.prevalidated:
            return None
        if app.config["WORDFINDER_ORACLE"] is not None:
            return app.config["WORDFINDER_ORACLE"]
        return get_dictionary(app.config["WORDFINDER_DICTIONARY"])

    def _solve(constraints):
        result = solve(constraints, source, _oracle())
        return jsonify(result.to_dict())

    @app.route("/health")
    def health():
        return jsonify({"status": "ok", "message": "wordfinder API is running"})

    @app.route("/api/solve", methods=["POST"])
    def solve_post():
        constraints = parse_constraints_from_body(request.get_json(silent=True))
        if constraints is None:
            return jsonify({
                "error": "Invalid request body",
                "message": "Request body must be a valid WordConstraints object",
            }), 400
        return _solve(constraints)

    @app.route("/api/solve", methods=["GET"])
    def solve_get():
        return _solve(parse_constraints_from_query(request.args))

    @app.errorhandler(404)
    def not_found(_err):
        return jsonify({
            "error": "Not found",
            "message": "The requested endpoint does not exist",
        }), 404

    @app.errorhandler(Exception)
    def internal_error(err):
        if isinstance(err, HTTPException):
            return err
        log.exception("Error solving request")
        return jsonify({
            "error": "Internal server error",
            "message": str(err) or err.__class__.__name__,
        }), 500

    return app


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = create_app()
    # Fail fast on a missing dictionary instead of on the first request
    source = _build_source(app.config)
    if not source.prevalidated:
        get_dictionary(app.config["WORDFINDER_DICTIONARY"])
    port = int(os.environ.get("PORT", 3000))
    log.info("wordfinder API listening on port %d", port)
    app.run(host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
