"""
API Middleware
==============
Rate limiting and API key checks for the JSON endpoints.
"""
import time
import hashlib
import threading
from collections import deque
from functools import wraps
from typing import Callable, Dict, Optional, Tuple
from flask import request, jsonify, g

from slang_translator.config import config
from slang_translator.utils.logging import get_logger

WINDOW_SECONDS = 60


def client_id() -> str:
    """Hash of the caller's address and API key."""
    forwarded = request.headers.get('X-Forwarded-For')
    ip = forwarded.split(',')[0].strip() if forwarded else (request.remote_addr or 'unknown')
    api_key = request.headers.get('X-API-Key', '')
    return hashlib.sha256(f"{ip}:{api_key}".encode()).hexdigest()[:16]


class RateLimiter:
    """Sliding-window request counter per client."""

    def __init__(self, requests_per_minute: int = 60):
        self.requests_per_minute = requests_per_minute
        self._hits: Dict[str, deque] = {}
        self._lock = threading.Lock()
        self._last_sweep = 0.0
        self.logger = get_logger().api_logger

    @property
    def tracked_clients(self) -> int:
        return len(self._hits)

    def check(self, client: str, now: float = None) -> Tuple[bool, dict]:
        """
        Record a request and report whether it fits in the window.

        Returns:
            Tuple of (allowed, info) where info feeds the X-RateLimit headers
        """
        now = time.time() if now is None else now
        window_start = now - WINDOW_SECONDS

        with self._lock:
            if now - self._last_sweep >= WINDOW_SECONDS:
                self._sweep(window_start)
                self._last_sweep = now

            hits = self._hits.setdefault(client, deque())
            _prune(hits, window_start)

            if len(hits) >= self.requests_per_minute:
                self.logger.warning(f"Rate limit exceeded for client {client}")
                return False, {
                    'limit': self.requests_per_minute,
                    'remaining': 0,
                    'reset': int(hits[0] - window_start) + 1
                }

            hits.append(now)
            return True, {
                'limit': self.requests_per_minute,
                'remaining': self.requests_per_minute - len(hits),
                'reset': WINDOW_SECONDS
            }

    def _sweep(self, window_start: float) -> None:
        """Drop clients with no requests left in the window. Caller holds the lock."""
        for client in list(self._hits):
            hits = self._hits[client]
            _prune(hits, window_start)
            if not hits:
                del self._hits[client]


def _prune(hits: deque, window_start: float) -> None:
    while hits and hits[0] <= window_start:
        hits.popleft()


_rate_limiter: Optional[RateLimiter] = None


def get_rate_limiter() -> RateLimiter:
    global _rate_limiter
    if _rate_limiter is None:
        _rate_limiter = RateLimiter(config.security.rate_limit_per_minute)
    return _rate_limiter


def rate_limit(f: Callable) -> Callable:
    """Rate limiting decorator."""
    @wraps(f)
    def decorated(*args, **kwargs):
        allowed, info = get_rate_limiter().check(client_id())
        g.rate_limit_info = info

        if not allowed:
            return jsonify({
                'error': 'Rate limit exceeded',
                'retry_after': info['reset']
            }), 429

        return f(*args, **kwargs)

    return decorated


def require_api_key(f: Callable) -> Callable:
    """Reject writes without the configured X-API-Key (no-op when none is configured)."""
    @wraps(f)
    def decorated(*args, **kwargs):
        expected = config.security.api_key
        if not expected:
            return f(*args, **kwargs)

        api_key = request.headers.get('X-API-Key')
        if not api_key:
            return jsonify({'error': 'API key required'}), 401
        if api_key != expected:
            return jsonify({'error': 'Invalid API key'}), 403

        return f(*args, **kwargs)

    return decorated


def add_rate_limit_headers(response):
    """Add rate limit headers to response."""
    info = g.get('rate_limit_info')
    if info:
        response.headers['X-RateLimit-Limit'] = str(info['limit'])
        response.headers['X-RateLimit-Remaining'] = str(info['remaining'])
        response.headers['X-RateLimit-Reset'] = str(info['reset'])
    return response
