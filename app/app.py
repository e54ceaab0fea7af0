"""
TaggedFS - Hierarchical file tagging
Application Factory e Inicialização
"""
import os
import sys
import logging

import flask.cli
flask.cli.show_server_banner = lambda *args: None

from flask import Flask
import structlog

from constants import BUILD_VERSION
from settings import load_settings, verify_settings, get_database_uri
from db import db, init_db
from exceptions import ValidationException, register_exception_handlers
from middleware.cors import init_cors
from routes.tags import tags_bp
from routes.files import files_bp
from utils import ColoredFormatter, FilterRemoveDateFromWerkzeugLogs

# Logging configuration
formatter = ColoredFormatter(
    '[%(asctime)s.%(msecs)03d] %(levelname)s (%(module)s) %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
)
handler = logging.StreamHandler(sys.stdout)
handler.setFormatter(formatter)

logging.basicConfig(
    level=os.environ.get('LOG_LEVEL', 'INFO').upper(),
    handlers=[handler]
)

structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer() if os.environ.get('LOG_FORMAT') == 'json' else structlog.dev.ConsoleRenderer()
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger('main')

# Apply filter to hide date from http access logs
logging.getLogger('werkzeug').addFilter(FilterRemoveDateFromWerkzeugLogs())


def create_app(config=None):
    """Application factory"""
    config = config or {}
    app_settings = load_settings()

    for section in ("server", "cors"):
        success, errors = verify_settings(section, app_settings[section])
        if not success:
            raise ValidationException("; ".join(e["error"] for e in errors))

    app = Flask(__name__)
    app.config["SQLALCHEMY_DATABASE_URI"] = get_database_uri(app_settings)
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['CORS_ALLOWED_HOSTS'] = app_settings["cors"]["allowed_hosts"]
    app.config.update(config)

    # Initialize components
    db.init_app(app)

    # Register exception handlers
    register_exception_handlers(app)
    init_cors(app)

    # Register blueprints
    app.register_blueprint(tags_bp)
    app.register_blueprint(files_bp)

    # Initialize database
    init_db(app)

    logger.info(f"TaggedFS {BUILD_VERSION} ready", database=app.config["SQLALCHEMY_DATABASE_URI"])
    return app


def main():
    """Run the HTTP API on the configured host and port"""
    app_settings = load_settings()
    app = create_app()
    host = app_settings["server"]["host"]
    port = app_settings["server"]["port"]
    logger.info(f"Listening on http://{host}:{port}")
    app.run(host=host, port=port)


if __name__ == '__main__':
    main()
