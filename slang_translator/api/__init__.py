"""
API Module
==========
Flask API routes and blueprints.
"""
from slang_translator.api.routes import (
    create_linguistics_blueprint,
    create_terms_blueprint,
    create_health_blueprint,
    create_logs_blueprint
)

__all__ = [
    'create_linguistics_blueprint',
    'create_terms_blueprint',
    'create_health_blueprint',
    'create_logs_blueprint'
]
