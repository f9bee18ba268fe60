from flask import Flask

from nutribase.extensions import db, migrate, cors
from nutribase.routes import register_routes
from nutribase.utils.errors import register_error_handlers


def create_app(config_object="config.Config"):
    app = Flask(__name__)
    app.config.from_object(config_object)

    # Initialize database
    db.init_app(app)

    # Initialize Flask-Migrate
    migrate.init_app(app, db)

    cors.init_app(app,
                  origins=app.config.get("CORS_ORIGINS", "*"),
                  allow_headers=["Content-Type"],
                  methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"])

    register_routes(app)
    register_error_handlers(app)
    register_commands(app)

    return app


def register_commands(app):
    @app.cli.command("init-db")
    def init_db():
        """Create all tables without running migrations."""
        from nutribase import models  # noqa: F401

        db.create_all()
        print("Database tables created!")
