"""
Shared logging setup, JSON formatting and sensitive-data filtering.
"""

import json
import logging
import re
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SENSITIVE_PATTERNS = [
    # Email addresses (submitter emails, login)
    (re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b"), "[EMAIL]"),
    # Bearer tokens / raw JWTs
    (re.compile(r"(?i)bearer\s+[A-Za-z0-9._~+/=-]+"), "Bearer [TOKEN]"),
    (re.compile(r"\beyJ[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+\b"), "[TOKEN]"),
    # Payment capture ids passed around as sponsor_payment_id
    (re.compile(r"(sponsor_payment_id['\"]?\s*[:=]\s*['\"]?)[^'\",\s}]+"), r"\1[PAYMENT]"),
]

_EXTRA_FIELDS = (
    "request_id",
    "user_id",
    "method",
    "path",
    "status_code",
    "duration_ms",
    "error_code",
    "error_type",
    "client_ip",
)


def filter_sensitive(text: str) -> str:
    """Replace sensitive values in text with placeholders."""
    if not text:
        return text

    filtered = text
    for pattern, replacement in SENSITIVE_PATTERNS:
        filtered = pattern.sub(replacement, filtered)
    return filtered


class JSONLogFormatter(logging.Formatter):
    """Format log records as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": filter_sensitive(record.getMessage()),
        }

        for field in _EXTRA_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_data[field] = value

        if record.exc_info:
            log_data["exception"] = filter_sensitive(self.formatException(record.exc_info))

        return json.dumps(log_data, default=str)


def setup_logging(
    level: str = "INFO", json_format: bool = False, log_file: str | None = None
) -> None:
    """
    Configure root logger.

    Args:
        level: Log level ('DEBUG', 'INFO', 'WARNING', 'ERROR')
        json_format: Emit one JSON object per record instead of plain text
        log_file: Optional log file path
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter: logging.Formatter
    if json_format:
        formatter = JSONLogFormatter()
    else:
        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)

    # Root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.addHandler(console_handler)

    # File handler if specified
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
