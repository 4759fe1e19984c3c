"""
Unit Tests for Rate Limiting and the Log Feed
=============================================
"""
import logging

from slang_translator.api.middleware import RateLimiter, WINDOW_SECONDS
from slang_translator.utils.logging import BufferHandler, LogBuffer


class TestRateLimiter:

    def test_allows_up_to_limit(self):
        limiter = RateLimiter(requests_per_minute=2)
        allowed, info = limiter.check('a', now=1000)
        assert allowed and info['remaining'] == 1
        allowed, info = limiter.check('a', now=1001)
        assert allowed and info['remaining'] == 0

        allowed, info = limiter.check('a', now=1002)
        assert not allowed
        assert info['remaining'] == 0
        assert info['reset'] > 0

    def test_window_slides(self):
        limiter = RateLimiter(requests_per_minute=1)
        assert limiter.check('a', now=1000)[0]
        assert not limiter.check('a', now=1000 + WINDOW_SECONDS - 1)[0]
        assert limiter.check('a', now=1000 + WINDOW_SECONDS + 1)[0]

    def test_clients_counted_separately(self):
        limiter = RateLimiter(requests_per_minute=1)
        assert limiter.check('a', now=1000)[0]
        assert limiter.check('b', now=1000)[0]

    def test_idle_clients_are_dropped(self):
        limiter = RateLimiter(requests_per_minute=5)
        limiter.check('a', now=1000)
        limiter.check('b', now=1010)
        assert limiter.tracked_clients == 2

        limiter.check('c', now=1000 + 3 * WINDOW_SECONDS)
        assert limiter.tracked_clients == 1


class TestLogBuffer:

    def test_ids_increase_across_clear(self):
        buffer = LogBuffer(max_size=10)
        first = buffer.add('INFO', 'APP', 'one')
        buffer.clear()
        second = buffer.add('INFO', 'APP', 'two')
        assert second['id'] > first['id']
        assert [e['message'] for e in buffer.entries()] == ['two']

    def test_since_and_level(self):
        buffer = LogBuffer(max_size=10)
        first = buffer.add('info', 'APP', 'started')
        buffer.add('WARNING', 'ENGINE', 'rejected')
        buffer.add('DEBUG', 'ENGINE', 'trace')

        assert [e['message'] for e in buffer.entries(since_id=first['id'])] == ['rejected', 'trace']
        assert [e['message'] for e in buffer.entries(min_level='warning')] == ['rejected']
        assert buffer.entries()[0]['level'] == 'INFO'

    def test_bounded(self):
        buffer = LogBuffer(max_size=2)
        for i in range(5):
            buffer.add('INFO', 'APP', str(i))
        assert [e['message'] for e in buffer.entries()] == ['3', '4']

    def test_strips_ansi(self):
        buffer = LogBuffer(max_size=2)
        assert buffer.add('INFO', 'APP', '\033[92mready\033[0m')['message'] == 'ready'


class TestBufferHandler:

    def test_mirrors_warnings_only(self):
        buffer = LogBuffer(max_size=10)
        logger = logging.getLogger('slang_translator.tests.buffer_handler')
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
        handler = BufferHandler(buffer, 'ENGINE')
        logger.addHandler(handler)
        try:
            logger.info("compiled patterns")
            logger.warning("Rejected learned term %r", '')
        finally:
            logger.removeHandler(handler)

        entries = buffer.entries()
        assert len(entries) == 1
        assert entries[0]['source'] == 'ENGINE'
        assert entries[0]['level'] == 'WARNING'
        assert entries[0]['message'] == "Rejected learned term ''"
