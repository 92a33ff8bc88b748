import os
from flask import Flask
from dotenv import load_dotenv

load_dotenv()


def create_app(config_name=None):
    flask_app = Flask(__name__)

    if config_name is None:
        config_name = os.environ.get("FLASK_ENV")
        if not config_name:
            # Default to production on managed platforms to avoid accidental
            # debug mode/weak defaults when env selection is omitted.
            if os.environ.get("RAILWAY_ENVIRONMENT") or os.environ.get("PORT"):
                config_name = "production"
            else:
                config_name = "development"

    from variant_builder.config import config_map

    config_cls = config_map.get(config_name, config_map["development"])
    flask_app.config.from_object(config_cls)

    if hasattr(config_cls, "init_app"):
        config_cls.init_app(flask_app)

    # Initialize extensions
    from variant_builder.extensions import db, migrate, init_record_store

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    init_record_store(flask_app)

    # Import models so Alembic sees them
    from variant_builder.models import StoredRecord  # noqa: F401

    # Register blueprints
    from variant_builder.blueprints.editor import editor_bp

    flask_app.register_blueprint(editor_bp, url_prefix="/api")

    # Register CLI commands
    from variant_builder.cli import register_cli

    register_cli(flask_app)

    # Health check
    @flask_app.route("/health")
    def health():
        from variant_builder import extensions

        checks = {"status": "ok"}
        try:
            db.session.execute(db.text("SELECT 1"))
            checks["db"] = "ok"
        except Exception:
            flask_app.logger.exception("Health check DB probe failed")
            checks["db"] = "error"
            checks["status"] = "degraded"
        try:
            extensions.record_store.ping()
            checks["records"] = type(extensions.record_store).__name__
        except Exception:
            flask_app.logger.exception("Health check record store probe failed")
            checks["records"] = "error"
            checks["status"] = "degraded"
        status_code = 200 if checks["status"] == "ok" else 503
        return checks, status_code

    return flask_app
