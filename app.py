# app.py
from __future__ import annotations

import logging
import os
from typing import Callable, Optional

from flask import Flask, jsonify, render_template, request
from openai import OpenAI
from pydantic import ValidationError as SchemaError
from werkzeug.exceptions import BadRequest

from errors import ConfigurationError, GenerationError, MalformedRequestError
from game_engine import generate_game
from instructions import IDEA_SUGGESTIONS, PLACEHOLDER_HTML
from openai_client import Settings, get_client, load_settings
from schemas import GenerationRequest

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _schema_problem(err: SchemaError) -> str:
    first = err.errors()[0]
    where = ".".join(str(p) for p in first.get("loc", ())) or "body"
    return f"{MalformedRequestError.default_message} {where}: {first.get('msg')}"


def create_app(
    settings: Optional[Settings] = None,
    client_factory: Callable[[Settings], OpenAI] = get_client,
) -> Flask:
    """
    Build the Flask app. Settings are read once here; every request after
    that only reads them.
    """
    settings = settings or load_settings()
    # one shared client per process; without a key each request fails instead
    client = client_factory(settings) if settings.api_key else None

    app = Flask(__name__)

    # ---------- Pages ----------
    @app.get("/")
    def create_page():
        return render_template(
            "create.html",
            placeholder_html=PLACEHOLDER_HTML,
            suggestions=IDEA_SUGGESTIONS,
        )

    # ---------- APIs ----------
    @app.post("/api/generate-game")
    def api_generate_game():
        """
        Relay one conversation turn to the model.
        Returns {reply, game} or {error}.
        """
        if client is None:
            raise ConfigurationError()

        try:
            data = request.get_json(force=True)
        except BadRequest as e:
            raise MalformedRequestError() from e

        try:
            req = GenerationRequest.model_validate(data)
        except SchemaError as e:
            raise MalformedRequestError(_schema_problem(e)) from e

        result = generate_game(req, client=client, model=settings.model)
        return jsonify(result.to_wire())

    @app.errorhandler(GenerationError)
    def handle_generation_error(err: GenerationError):
        if err.status_code >= 500:
            logger.error("Generation failed: %s", err.message, exc_info=err if err.__cause__ else None)
        else:
            logger.warning("Rejected request: %s", err.message)
        return jsonify({"error": err.message}), err.status_code

    return app


app = create_app()


if __name__ == "__main__":
    app.run(host="127.0.0.1", port=5000, debug=True)
