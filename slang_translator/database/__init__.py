"""
Database Module
===============
Database connection and repository implementations.
"""
from slang_translator.database.connection import Database, get_database
from slang_translator.database.repositories import LearnedTermRepository

__all__ = [
    'Database',
    'get_database',
    'LearnedTermRepository'
]
