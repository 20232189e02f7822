"""
API gateway: combines the auth, events, and attendance blueprints.
This is the entrypoint for local development and deployment.
"""

import logging
from typing import Optional

from flask import Flask, jsonify
from flask_cors import CORS

from eventoz.attendance_service.routes import attendance_bp
from eventoz.auth_service.routes import auth_bp
from eventoz.config import Settings, load_settings
from eventoz.container import build_services
from eventoz.database.db_connection import connect
from eventoz.database.document_store import PostgresDocumentStore
from eventoz.events_service.routes import events_bp

LOG_FORMAT = "[%(levelname)s] %(asctime)s - %(message)s"


def create_app(settings: Optional[Settings] = None, store=None) -> Flask:
    """
    Application factory for creating the Flask app.

    Args:
        settings (Settings, optional): Configuration; read from the
            environment when omitted.
        store (optional): Document store to use. When omitted, one
            PostgreSQL connection is opened from DATABASE_URL and shared
            by every request.

    Returns:
        Flask: The configured Flask application.
    """
    settings = settings or load_settings()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    if store is None:
        if not settings.database_url:
            raise RuntimeError("DATABASE_URL is not set. Please set the environment variable.")
        store = PostgresDocumentStore(connect(settings.database_url))

    app = Flask(__name__)
    CORS(app, resources={
        r"/*": {
            "origins": settings.cors_origins,
            "methods": ["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"],
            "allow_headers": ["Content-Type", "Authorization"],
            "supports_credentials": True
        }
    })

    app.extensions["eventoz"] = build_services(settings, store)

    # --- REGISTER BLUEPRINTS ---
    app.register_blueprint(auth_bp)
    app.register_blueprint(events_bp)
    app.register_blueprint(attendance_bp)
    logging.info("All blueprints registered successfully.")

    # --- BASIC HEALTH CHECKPOINTS ---
    @app.route("/")
    def hello():
        return "Hello World!", 200

    @app.route("/health")
    def health():
        """
        Health check endpoint.
        """
        return jsonify({"status": "ok"}), 200

    return app


if __name__ == "__main__":
    settings = load_settings()
    app = create_app(settings)
    logging.info(f"Eventoz listening on port {settings.port}")
    app.run(host="0.0.0.0", port=settings.port)
