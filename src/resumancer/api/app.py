"""HTTP API exposing the idea generation pipeline."""

from __future__ import annotations

import asyncio
import logging
import os

from flask import Flask, jsonify, request
from flask_cors import CORS

from resumancer.clients.llm_client import API_KEY_ENV
from resumancer.config import AppConfig, load_config
from resumancer.pipeline.orchestrator import IdeaOrchestrator

logger = logging.getLogger(__name__)


def create_app(
    config: AppConfig | None = None,
    orchestrator: IdeaOrchestrator | None = None,
) -> Flask:
    """Build the Flask app. Each request runs the pipeline on its own event loop."""
    config = config or load_config()
    orchestrator = orchestrator or IdeaOrchestrator.from_config(config)

    app = Flask(__name__)
    CORS(app)  # the web UI is served separately

    @app.route("/api/ideas", methods=["POST"])
    def generate_ideas():
        body = request.get_json(silent=True)
        status, payload = asyncio.run(orchestrator.handle(body))
        return jsonify(payload), status

    @app.route("/api/env-test", methods=["GET"])
    def env_test():
        """Report whether the provider credential is configured, without revealing it."""
        return jsonify({"hasKey": bool(os.environ.get(API_KEY_ENV))})

    return app
