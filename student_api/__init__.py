import time

from flask import Flask
from flask_cors import CORS

from .config import Config, cors_origins
from .database import Database
from .errors import register_error_handlers
from .logging_setup import configure_logging
from .middleware import register_request_logging
from .routes import register_routes
from .schemas import MongoJSONProvider

__version__ = '1.0.0'


def create_app(config_object=Config, overrides=None, database=None, logger=None):
    """Build the Flask app.

    The persistence client and the logger are injected when given, so tests
    can swap in an in-memory database; otherwise both are built from config.
    """
    app = Flask(__name__, static_folder=None)
    app.config.from_object(config_object)
    if overrides:
        app.config.update(overrides)
    app.config['STARTED_AT'] = time.monotonic()

    app.json = MongoJSONProvider(app)

    if logger is None:
        logger = configure_logging(app.config)
    if database is None:
        database = Database.from_config(app.config)
    database.ensure_indexes(logger)

    app.extensions['database'] = database
    app.extensions['app_logger'] = logger

    CORS(app, resources={r"/api/*": {"origins": cors_origins(app.config['CORS_ORIGINS'])}})

    register_request_logging(app, logger)
    register_error_handlers(app, logger)
    register_routes(app, database, logger)

    return app
