"""
Slang Translator - Test Suite
=============================
Unit and integration tests for the Slang Translator engine and API.
Run with: pytest tests/ -v
"""
import os
import sys
import tempfile

# Keep logs and databases out of the working tree
os.environ.setdefault('SLANG_TRANSLATOR_APP_DIR', tempfile.mkdtemp(prefix='slang_translator_tests_'))
os.environ.setdefault('VERBOSE_DEBUG', 'false')

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
