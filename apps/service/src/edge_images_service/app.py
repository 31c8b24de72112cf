"""Flask application factory for the Edge Images service."""

from __future__ import annotations

import logging
import sys

from flask import Flask, g, jsonify, request
from flask_cors import CORS

from edge_images import EdgeImagesError, RenderContext, SizeRegistry

from .config import ServiceConfig
from .routes import images_bp, parse_int

logger = logging.getLogger(__name__)


def create_app(config: ServiceConfig | None = None) -> Flask:
    """Create and configure the Flask application."""
    if config is None:
        config = ServiceConfig.load()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    app = Flask(__name__)
    CORS(app, resources={r"/api/*": {"origins": config.cors_origins}})

    app.config["engine_config"] = config.engine
    app.config["size_registry"] = SizeRegistry()

    @app.before_request
    def open_render_context():
        # One ceiling cache per request; nothing carries over between requests.
        g.render_context = RenderContext(
            config.engine,
            content_width=parse_int(request.args.get("content_width")),
        )

    @app.errorhandler(EdgeImagesError)
    def handle_engine_error(e: EdgeImagesError):
        logger.info("Rejected %s: %s", request.path, e)
        return jsonify({"type": "error", "error": type(e).__name__, "description": str(e)}), 400

    app.register_blueprint(images_bp)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    logger.info("Edge Images service initialized for %s", config.engine.provider_prefix)
    return app


def main() -> None:
    """Entry point for running the development server."""
    config = ServiceConfig.load()
    app = create_app(config)
    app.run(host=config.host, port=config.port, debug=True, use_reloader=False)


if __name__ == "__main__":
    main()
