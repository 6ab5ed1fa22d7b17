"""Flask application factory."""

import structlog
from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import RequestEntityTooLarge

from contact_analyzer import __version__
from contact_analyzer.config import get_settings
from contact_analyzer.logging import configure_logging
from contact_analyzer.services import ContactService, ContactValidator
from contact_analyzer.store import ContactStore, InMemoryContactStore

logger = structlog.get_logger()


def create_app(
    config_override: dict | None = None,
    store: ContactStore | None = None,
) -> Flask:
    """Create and configure the Flask application.

    The application owns its contact store: every app gets a fresh,
    empty one unless a store is passed in.

    Args:
        config_override: Optional config values for testing
        store: Optional store to serve instead of a new in-memory one

    Returns:
        Configured Flask application
    """
    settings = get_settings()
    configure_logging()

    app = Flask(__name__)

    # Core configuration
    app.config.update(
        DEBUG=settings.debug,
        TESTING=settings.is_testing,
        SECRET_KEY=settings.secret_key,
        MAX_CONTENT_LENGTH=settings.max_upload_bytes,
        MAX_UPLOAD_ROWS=settings.max_upload_rows,
        EXPORT_FILENAME=settings.export_filename,
    )

    # Apply any test overrides
    if config_override:
        app.config.update(config_override)

    CORS(
        app,
        resources={f"{settings.api_prefix}/*": {"origins": settings.cors_origins}},
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Origin", "Content-Type", "Accept", "Authorization"],
    )

    app.extensions["contact_service"] = ContactService(
        store=store if store is not None else InMemoryContactStore(),
        validator=ContactValidator(),
    )

    # Register blueprints
    from contact_analyzer.api import api_bp
    app.register_blueprint(api_bp, url_prefix=settings.api_prefix)

    @app.errorhandler(RequestEntityTooLarge)
    def upload_too_large(error):
        return jsonify({"error": "Uploaded file is too large"}), 413

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "healthy", "version": __version__}

    logger.info(
        "app_created",
        app=settings.app_name,
        env=settings.app_env,
        debug=app.debug,
        api_prefix=settings.api_prefix,
    )
    return app
