"""
API Routes
==========
Flask blueprints for all API endpoints.
"""
import sqlite3

import psutil
from flask import Blueprint, request, jsonify

from slang_translator.config.constants import APP_VERSION
from slang_translator.database.connection import Database
from slang_translator.models.schemas import TranslateRequest, RegisterTermRequest, HealthStatus
from slang_translator.services.discovery import SlangDiscoveryService
from slang_translator.services.engine import LinguisticsEngine
from slang_translator.services.patterns import count_by_category
from slang_translator.services.prompting import format_terms_for_prompt, format_terms_inline
from slang_translator.utils.validators import validate_term
from slang_translator.api.middleware import rate_limit, require_api_key
from slang_translator.utils.logging import get_logger, log_buffer


def create_linguistics_blueprint(engine: LinguisticsEngine) -> Blueprint:
    """Create translate routes blueprint."""
    bp = Blueprint('linguistics', __name__, url_prefix='/api')
    logger = get_logger().api_logger

    @bp.route('/translate', methods=['POST'])
    @rate_limit
    def translate():
        """Detect slang terms in the submitted text."""
        req = TranslateRequest.from_json(request.get_json(silent=True))
        errors = req.validate()
        if errors:
            return jsonify({'error': errors[0]}), 400

        result = engine.translate(req.text)
        if request.args.get('style') == 'inline':
            prompt_context = format_terms_inline(result.terms)
        else:
            prompt_context = format_terms_for_prompt(result.terms)

        if result.terms:
            logger.info(
                f"Decoded {len(result.terms)} dialect terms: {', '.join(t.term for t in result.terms)}"
            )

        response = result.to_dict()
        response['promptContext'] = prompt_context
        return jsonify(response)

    @bp.route('/terms/random', methods=['GET'])
    def random_term():
        """Get a random bundled term."""
        return jsonify(engine.get_random_term().to_dict())

    @bp.route('/categories', methods=['GET'])
    def list_categories():
        """List bundled categories with their term counts."""
        return jsonify({'categories': count_by_category(engine.dictionary)})

    return bp


def create_terms_blueprint(discovery: SlangDiscoveryService) -> Blueprint:
    """Create learned-term routes blueprint."""
    bp = Blueprint('terms', __name__, url_prefix='/api/terms')
    logger = get_logger().api_logger

    @bp.route('', methods=['POST'])
    @require_api_key
    @rate_limit
    def register_term():
        """Register and persist a learned term."""
        req = RegisterTermRequest.from_json(request.get_json(silent=True))
        errors = req.validate()
        if errors:
            return jsonify({'errors': errors}), 400

        try:
            learned = discovery.learn_term(req.term, req.meaning.strip(), req.category.strip())
        except sqlite3.Error as e:
            logger.error(f"Error storing learned term {req.term!r}: {e}")
            return jsonify({'error': 'Could not store term'}), 500

        if not learned:
            return jsonify({'errors': [f"term {req.term!r} was rejected"]}), 400

        logger.info(f"Registered learned term {req.term!r} ({req.category})")
        return jsonify({
            'term': req.term.strip(),
            'meaning': req.meaning.strip(),
            'category': req.category.strip()
        }), 201

    @bp.route('/learned', methods=['GET'])
    def list_learned():
        """List persisted learned terms, optionally filtered by category."""
        category = request.args.get('category')
        terms = discovery.repository.get_all(category=category)
        return jsonify({'terms': [t.to_dict() for t in terms]})

    @bp.route('/lookup', methods=['GET'])
    def lookup_term():
        """Look up a term in the engine and the learned-terms store."""
        term = request.args.get('term', '')
        valid, error = validate_term(term)
        if not valid:
            return jsonify({'error': error}), 400
        return jsonify(discovery.find_term(term).to_dict())

    @bp.route('/discover', methods=['POST'])
    @require_api_key
    @rate_limit
    def discover_term():
        """Resolve a term, learning it from Urban Dictionary if needed."""
        data = request.get_json(silent=True) or {}
        term = data.get('term', '')
        valid, error = validate_term(term)
        if not valid:
            return jsonify({'error': error}), 400

        result = discovery.discover_and_cache(term)
        return jsonify(result.to_dict()), 200 if result.found else 404

    return bp


def create_health_blueprint(engine: LinguisticsEngine, discovery: SlangDiscoveryService, database: Database) -> Blueprint:
    """Create health check routes blueprint."""
    bp = Blueprint('health', __name__, url_prefix='/api')

    @bp.route('/health', methods=['GET'])
    def health_check():
        database_ok = database.is_healthy()
        status = HealthStatus(
            status='healthy' if database_ok else 'degraded',
            static_terms=engine.static_count,
            dynamic_terms=engine.dynamic_count,
            database_connected=database_ok,
            version=APP_VERSION
        )
        return jsonify(status.to_dict())

    @bp.route('/metrics', methods=['GET'])
    def get_metrics():
        """Term counts, learned-term statistics and process memory."""
        memory = psutil.Process().memory_info()
        return jsonify({
            'engine_metrics': {
                'static_terms': engine.static_count,
                'dynamic_terms': engine.dynamic_count,
            },
            'learned_terms': discovery.repository.get_stats(),
            'system_metrics': {
                'rss_bytes': memory.rss,
                'memory_percent': psutil.Process().memory_percent(),
            }
        })

    return bp


def create_logs_blueprint() -> Blueprint:
    """Create logs routes blueprint for the frontend console panel."""
    bp = Blueprint('logs', __name__)

    @bp.route('/logs', methods=['GET'])
    def get_logs():
        """Recent log entries; ?since=<id> for polling, ?level=WARNING to filter."""
        logs = log_buffer.entries(
            since_id=request.args.get('since', 0, type=int),
            min_level=request.args.get('level')
        )
        return jsonify({'logs': logs})

    @bp.route('/logs/clear', methods=['POST'])
    def clear_logs():
        log_buffer.clear()
        return jsonify({'message': 'Logs cleared'})

    return bp
