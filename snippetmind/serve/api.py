# serve/api.py
import os

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException, MethodNotAllowed

from ..config import load_config
from ..errors import InvalidRequest, SnippetMindError
from ..log import logger
from ..model_interface import ModelClient
from ..pipeline import VARIANTS, ExtractionPipeline, ImagePipeline
from ..responses import error_payload, image_payload, success_payload

TEXT_LABEL = "Text (non-empty string)"
PROMPT_LABEL = "Prompt (non-empty string)"


def read_input(field):
    """Pull the input string from a JSON object, a bare JSON string or a text/plain body"""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data.get(field)
    if isinstance(data, str):
        return data
    if data is None and request.mimetype == "text/plain":
        return request.get_data(as_text=True)
    return None


def validate_text(value, label):
    if not isinstance(value, str) or not value.strip():
        raise InvalidRequest(f"{label} is required")
    return value


def create_app(config=None, client=None):
    config = config or load_config()
    client = client or ModelClient(config)

    app = Flask(__name__)

    pipelines = {name: ExtractionPipeline(client, options) for name, options in VARIANTS.items()}
    imager = ImagePipeline(client)

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    def make_text_endpoint(name, pipeline):
        def endpoint():
            text = validate_text(read_input("text"), TEXT_LABEL)
            result = pipeline.run(text)
            return jsonify(success_payload(result))

        endpoint.__name__ = f"{name}_endpoint"
        return endpoint

    for name, pipeline in pipelines.items():
        app.add_url_rule(f"/api/{name}", view_func=make_text_endpoint(name, pipeline), methods=["POST"])

    @app.route("/api/imagine", methods=["POST"])
    def imagine():
        prompt = validate_text(read_input("prompt"), PROMPT_LABEL)
        return jsonify(image_payload(imager.run(prompt)))

    @app.errorhandler(InvalidRequest)
    def handle_invalid(e):
        return jsonify(error_payload(e.message)), e.status

    @app.errorhandler(SnippetMindError)
    def handle_pipeline_error(e):
        return jsonify(error_payload(e.message, e.details)), e.status

    @app.errorhandler(MethodNotAllowed)
    def handle_method(e):
        allowed = ", ".join(sorted(m for m in (e.valid_methods or ["POST"]) if m not in ("HEAD", "OPTIONS")))
        return jsonify(error_payload("Method not allowed")), 405, {"Allow": allowed or "POST"}

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify(error_payload(e.name)), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        logger.exception("Unhandled error while serving request")
        return jsonify(error_payload("Internal Server Error", str(e))), 500

    return app


def main():
    app = create_app()
    host = os.environ.get("HOST", "0.0.0.0")
    port = int(os.environ.get("PORT", 5000))
    logger.info(f"SnippetMind listening on {host}:{port}")
    app.run(host=host, port=port)


if __name__ == "__main__":
    main()
