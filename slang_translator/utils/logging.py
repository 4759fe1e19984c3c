"""
Logging Utilities
=================
Named subsystem loggers plus the in-memory feed behind ``/logs``.

Every subsystem (app, engine, api, database) gets its own rotating file.
Warnings and errors from those loggers are mirrored into ``log_buffer`` so
the web console shows rejected terms and failed lookups without tailing
files; ``debug_print`` adds free-form trace lines to the same feed.
"""
import os
import re
import logging
import threading
from collections import deque
from datetime import datetime
from logging.handlers import RotatingFileHandler
from typing import List, Dict, Optional
from slang_translator.config import config


ANSI_PATTERN = re.compile(r'\033\[[0-9;]*m')

# Subsystem -> log file
SUBSYSTEMS = {
    'app': 'app.log',
    'engine': 'engine.log',
    'api': 'api.log',
    'database': 'database.log',
}

LEVEL_ORDER = {'DEBUG': 10, 'INFO': 20, 'WARNING': 30, 'ERROR': 40, 'CRITICAL': 50}

FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
CONSOLE_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


class LogBuffer:
    """Bounded, thread-safe feed of recent entries with increasing ids."""

    def __init__(self, max_size: int = None):
        self._entries = deque(maxlen=max_size or config.logging.log_buffer_size)
        self._lock = threading.Lock()
        self._next_id = 1

    def add(self, level: str, source: str, message: str) -> Dict:
        entry = {
            'timestamp': datetime.now().strftime('%H:%M:%S.%f')[:-3],
            'level': level.upper(),
            'source': source,
            'message': ANSI_PATTERN.sub('', message)
        }
        with self._lock:
            entry['id'] = self._next_id
            self._next_id += 1
            self._entries.append(entry)
        return entry

    def entries(self, since_id: int = 0, min_level: str = None) -> List[Dict]:
        """
        Entries newer than ``since_id``, optionally at or above ``min_level``.

        Unknown level names are treated as DEBUG so nothing is hidden.
        """
        threshold = LEVEL_ORDER.get((min_level or 'DEBUG').upper(), 0)
        with self._lock:
            return [
                e for e in self._entries
                if e['id'] > since_id and LEVEL_ORDER.get(e['level'], 0) >= threshold
            ]

    def clear(self):
        with self._lock:
            self._entries.clear()


log_buffer = LogBuffer()


class BufferHandler(logging.Handler):
    """Mirror log records into a LogBuffer, tagged with the subsystem name."""

    def __init__(self, buffer: LogBuffer, source: str, level=logging.WARNING):
        super().__init__(level)
        self.buffer = buffer
        self.source = source

    def emit(self, record):
        try:
            self.buffer.add(record.levelname, self.source, record.getMessage())
        except Exception:
            self.handleError(record)


class ANSIStripFormatter(logging.Formatter):
    def format(self, record):
        return ANSI_PATTERN.sub('', super().format(record))


class AppLogger:
    """Holds one configured logger per subsystem."""

    def __init__(self, log_dir: str = None, buffer: LogBuffer = None):
        self.log_dir = log_dir or config.paths.log_folder
        self.buffer = buffer or log_buffer
        self.level = logging.DEBUG if config.logging.verbose_debug else logging.INFO
        os.makedirs(self.log_dir, exist_ok=True)

        self._loggers = {
            name: self._setup_logger(name, filename)
            for name, filename in SUBSYSTEMS.items()
        }

    @property
    def app_logger(self) -> logging.Logger:
        return self._loggers['app']

    @property
    def engine_logger(self) -> logging.Logger:
        return self._loggers['engine']

    @property
    def api_logger(self) -> logging.Logger:
        return self._loggers['api']

    @property
    def db_logger(self) -> logging.Logger:
        return self._loggers['database']

    def _setup_logger(self, subsystem: str, filename: str) -> logging.Logger:
        logger = logging.getLogger(f'slang_translator.{subsystem}')
        logger.setLevel(self.level)
        logger.propagate = False

        # Loggers are process-wide; configure each only once
        if logger.handlers:
            return logger

        file_handler = RotatingFileHandler(
            os.path.join(self.log_dir, filename),
            maxBytes=config.logging.log_file_max_bytes,
            backupCount=config.logging.log_file_backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(ANSIStripFormatter(FILE_FORMAT))

        console_handler = logging.StreamHandler()
        console_handler.setLevel(self.level)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
        logger.addHandler(BufferHandler(self.buffer, subsystem.upper()))
        return logger


_logger_instance: Optional[AppLogger] = None


def get_logger() -> AppLogger:
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = AppLogger()
    return _logger_instance


def debug_print(message: str, level: str = 'INFO', source: str = 'DEBUG'):
    """Add a trace line to the /logs feed; echo it to stdout in verbose mode."""
    log_buffer.add(level, source, message)

    if config.logging.verbose_debug:
        print(message)
