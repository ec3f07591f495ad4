"""
Logging utilities for the greeting function.

Log records are written to stdout as single-line JSON documents so that
CloudWatch Logs Insights can query them by field.
"""

import json
import logging
import os
import sys
import time
from datetime import datetime, timezone
from functools import wraps
from typing import Any, Dict, Optional

LOG_LEVEL_ENV = 'GREETING_LOG_LEVEL'


class StructuredFormatter(logging.Formatter):
    """
    Formatter that outputs structured JSON logs.

    Each entry carries the Lambda function name and version taken from the
    runtime environment, plus any keyword fields passed to the logger.
    """

    def __init__(self):
        super().__init__()
        self.function_name = os.environ.get('AWS_LAMBDA_FUNCTION_NAME', 'unknown')
        self.function_version = os.environ.get('AWS_LAMBDA_FUNCTION_VERSION', 'unknown')

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as structured JSON.

        Args:
            record: The log record to format

        Returns:
            str: JSON-formatted log entry
        """
        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'function_name': self.function_name,
            'function_version': self.function_version,
        }

        if hasattr(record, 'request_id'):
            log_entry['request_id'] = record.request_id

        if hasattr(record, 'extra_fields'):
            log_entry.update(record.extra_fields)

        if record.exc_info:
            log_entry['exception'] = {
                'type': record.exc_info[0].__name__ if record.exc_info[0] else None,
                'message': str(record.exc_info[1]) if record.exc_info[1] else None,
                'traceback': self.formatException(record.exc_info)
            }

        return json.dumps(log_entry, default=str, separators=(',', ':'))


class GreetingLogger:
    """
    Logger wrapper that accepts structured keyword fields.

    Usage:
        logger = get_logger(__name__)
        logger.info("Request received", body=raw_body)
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)
        self._setup_logger()
        self._request_id: Optional[str] = None

    def _setup_logger(self) -> None:
        """Attach the stdout handler once per underlying logger."""
        if self.logger.handlers:
            return

        log_level = os.environ.get(LOG_LEVEL_ENV, 'INFO').upper()
        self.logger.setLevel(getattr(logging, log_level, logging.INFO))

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(StructuredFormatter())
        self.logger.addHandler(handler)

        # Lambda also installs a root handler; avoid printing twice
        self.logger.propagate = False

    def set_request_id(self, request_id: Optional[str]) -> None:
        self._request_id = request_id

    def _context(self, extra_fields: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        extra = {}

        if self._request_id:
            extra['request_id'] = self._request_id

        if extra_fields:
            extra['extra_fields'] = extra_fields

        return extra

    def _log_with_context(self, level: int, message: str, extra_fields: Optional[Dict[str, Any]] = None) -> None:
        self.logger.log(level, message, extra=self._context(extra_fields))

    def diagnostic(self, message: str, **kwargs) -> None:
        """Log an INFO line that is written whatever the configured level."""
        record = self.logger.makeRecord(self.logger.name, logging.INFO, '(diagnostic)', 0,
                                        message, (), None, extra=self._context(kwargs))
        self.logger.handle(record)

    def debug(self, message: str, **kwargs) -> None:
        self._log_with_context(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._log_with_context(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._log_with_context(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._log_with_context(logging.ERROR, message, kwargs)

    def log_performance(self, operation: str, duration_ms: float, **kwargs) -> None:
        """
        Log timing for an operation.

        Args:
            operation: Name of the operation
            duration_ms: Duration in milliseconds
            **kwargs: Additional fields to log
        """
        self.debug(f"Performance: {operation} completed",
                   operation=operation, duration_ms=duration_ms, **kwargs)


def get_logger(name: str) -> GreetingLogger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__ from calling module)

    Returns:
        GreetingLogger: Configured logger instance
    """
    return GreetingLogger(name)


def performance_timer(operation_name: str):
    """
    Decorator that logs how long the wrapped function took.

    Args:
        operation_name: Name of the operation being timed
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            logger = get_logger(func.__module__)
            start_time = time.time()

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                duration_ms = (time.time() - start_time) * 1000
                logger.log_performance(operation_name, duration_ms, success=False, error=str(e))
                raise

            duration_ms = (time.time() - start_time) * 1000
            logger.log_performance(operation_name, duration_ms, success=True)
            return result

        return wrapper
    return decorator


def log_lambda_context(logger: GreetingLogger, context) -> None:
    """
    Log Lambda context information at the start of an invocation.

    The request ID is also stored on ``logger`` so that later lines from the
    same invocation carry it.

    Args:
        logger: Logger to annotate and write to
        context: Lambda context object, or None for local calls
    """
    if context is None:
        logger.set_request_id(None)
        return

    logger.set_request_id(getattr(context, 'aws_request_id', None))

    get_remaining = getattr(context, 'get_remaining_time_in_millis', None)
    logger.debug("Lambda invocation started",
                 function_name=getattr(context, 'function_name', 'unknown'),
                 function_version=getattr(context, 'function_version', 'unknown'),
                 memory_limit_mb=getattr(context, 'memory_limit_in_mb', 'unknown'),
                 remaining_time_ms=get_remaining() if callable(get_remaining) else 'unknown')
