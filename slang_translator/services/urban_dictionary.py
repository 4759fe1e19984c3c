"""
Urban Dictionary Client
=======================
Looks up slang definitions from the public Urban Dictionary API.
"""
import re
from dataclasses import dataclass
from typing import Optional

import requests

from slang_translator.config import config
from slang_translator.config.constants import MIN_LOOKUP_CONFIDENCE, MAX_LOOKUP_CONFIDENCE
from slang_translator.utils.logging import get_logger, debug_print

MARKUP_PATTERN = re.compile(r'[\[\]]')


@dataclass
class UrbanDefinition:
    """Top-voted definition of a term."""
    word: str
    meaning: str
    permalink: Optional[str] = None
    thumbs_up: int = 0
    thumbs_down: int = 0

    @property
    def confidence(self) -> int:
        """Net votes clamped to the 50-100 range."""
        return min(MAX_LOOKUP_CONFIDENCE, max(MIN_LOOKUP_CONFIDENCE, self.thumbs_up - self.thumbs_down))


def clean_definition(text: str, max_length: int = None) -> str:
    """Strip [link] markup and keep the first line, truncated."""
    max_length = max_length or config.discovery.max_meaning_length
    first_line = MARKUP_PATTERN.sub('', text or '').strip().split('\n')[0]
    return first_line.strip()[:max_length]


class UrbanDictionaryClient:
    """Client for the Urban Dictionary define endpoint."""

    def __init__(self, base_url: str = None, timeout: float = None):
        self.base_url = base_url or config.discovery.urban_dictionary_url
        self.timeout = timeout or config.discovery.timeout
        self.logger = get_logger().app_logger

        self.session = requests.Session()
        adapter = requests.adapters.HTTPAdapter(max_retries=config.discovery.max_retries)
        self.session.mount('http://', adapter)
        self.session.mount('https://', adapter)

    def define(self, term: str) -> Optional[UrbanDefinition]:
        """
        Fetch the top definition of a term.

        Args:
            term: Term to look up

        Returns:
            UrbanDefinition, or None if the term is unknown or the lookup failed
        """
        debug_print(f"[LOOKUP] Urban Dictionary: {term}", 'DEBUG', 'DISCOVERY')

        try:
            response = self.session.get(
                self.base_url,
                params={'term': term},
                timeout=self.timeout
            )
            if response.status_code != 200:
                self.logger.warning(f"Urban Dictionary API error: {response.status_code}")
                return None
            data = response.json()
        except requests.Timeout:
            self.logger.warning(f"Urban Dictionary lookup timed out for {term!r}")
            return None
        except requests.RequestException as e:
            self.logger.error(f"Urban Dictionary lookup failed: {e}")
            return None
        except ValueError as e:
            self.logger.error(f"Invalid JSON from Urban Dictionary: {e}")
            return None

        entries = data.get('list') or []
        if not entries:
            return None

        top = entries[0]
        meaning = clean_definition(top.get('definition', ''))
        if not meaning:
            return None

        return UrbanDefinition(
            word=top.get('word') or term,
            meaning=meaning,
            permalink=top.get('permalink'),
            thumbs_up=int(top.get('thumbs_up') or 0),
            thumbs_down=int(top.get('thumbs_down') or 0)
        )

    def close(self):
        """Close the session."""
        self.session.close()
