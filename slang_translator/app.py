"""
Slang Translator Application
============================
Flask application factory and main entry point.
"""
from pathlib import Path

from flask import Flask
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from slang_translator.config import config
from slang_translator.config.constants import APP_VERSION
from slang_translator.database.connection import Database, get_database
from slang_translator.database.repositories import LearnedTermRepository
from slang_translator.services.discovery import SlangDiscoveryService
from slang_translator.services.engine import LinguisticsEngine, get_engine
from slang_translator.services.urban_dictionary import UrbanDictionaryClient
from slang_translator.api.routes import (
    create_linguistics_blueprint,
    create_terms_blueprint,
    create_health_blueprint,
    create_logs_blueprint
)
from slang_translator.api.middleware import add_rate_limit_headers
from slang_translator.utils.logging import get_logger, debug_print


def create_app(
    testing: bool = False,
    engine: LinguisticsEngine = None,
    db_path: str = None,
    lookup_client: UrbanDictionaryClient = None
) -> Flask:
    """
    Application factory for Flask app.

    Args:
        testing: If True, configure for testing
        engine: Engine to serve; a fresh one is built when testing, the
            process-wide default otherwise
        db_path: Learned-terms database file (defaults to configured path)
        lookup_client: Urban Dictionary client override

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)

    app.config.update(
        SECRET_KEY=config.server.secret_key,
        JSON_SORT_KEYS=False,
        TESTING=testing
    )

    cors_origins = ['*'] if testing else config.server.cors_origins
    CORS(app, resources={r"/api/*": {"origins": cors_origins}})

    if engine is None:
        engine = LinguisticsEngine() if testing else get_engine()

    if db_path:
        database = Database(Path(db_path))
        database.initialize()
    else:
        database = get_database()

    discovery = SlangDiscoveryService(engine, LearnedTermRepository(database), lookup_client)
    discovery.initialize()

    app.extensions['slang_translator'] = {
        'engine': engine,
        'discovery': discovery,
        'database': database
    }

    app.register_blueprint(create_linguistics_blueprint(engine))
    app.register_blueprint(create_terms_blueprint(discovery))
    app.register_blueprint(create_health_blueprint(engine, discovery, database))
    app.register_blueprint(create_logs_blueprint())

    app.after_request(add_rate_limit_headers)

    @app.errorhandler(HTTPException)
    def http_error(e):
        return {'error': e.name, 'details': e.description}, e.code

    @app.errorhandler(Exception)
    def internal_error(e):
        get_logger().api_logger.exception(f"Internal error: {e}")
        return {'error': 'Internal server error'}, 500

    get_logger().api_logger.info(
        f"Slang Translator started on {config.server.host}:{config.server.port} "
        f"({engine.static_count} bundled terms, {engine.dynamic_count} learned)"
    )
    debug_print("Application initialized", 'INFO', 'APP')

    return app


def run_server():
    """Run the Flask development server."""
    app = create_app()

    print(f"""
Slang Translator v{APP_VERSION}
  Server: http://{config.server.host}:{config.server.port}
  Debug:  {'Enabled' if config.server.debug else 'Disabled'}
    """)

    app.run(
        host=config.server.host,
        port=config.server.port,
        debug=config.server.debug,
        threaded=True
    )


if __name__ == '__main__':
    run_server()
