"""
Structured logging infrastructure for Phone Finder.

Provides JSON logging with:
- Multiple log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
- Rotating file handlers (daily rotation, 30-day retention)
- Separate error log file
- Performance tracking (latency metrics)
- Request tracking (request_id, query, response shape)

Usage:
    from core.structured_logging import get_logger, log_query_turn

    logger = get_logger(__name__)
    logger.info("Catalog loaded", extra={"products_found": 12})
"""

import json
import logging
import sys
import time
import traceback
import uuid
from datetime import datetime, timezone
from functools import wraps
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Callable, Dict, Optional


ROOT_LOGGER_NAME = "phonefinder"


# =============================================================================
# JSON Formatter
# =============================================================================

class JSONFormatter(logging.Formatter):
    """
    Formats log records as JSON for structured logging.

    Output format:
    {
        "timestamp": "2026-01-08T10:30:00.123456Z",
        "level": "INFO",
        "logger": "phonefinder.core.orchestrator",
        "message": "Query turn: summary",
        "event": "query_turn",
        "request_id": "a1b2c3d4",
        ...
    }
    """

    EXTRA_FIELDS = [
        # Request fields
        "event", "request_id", "user_query", "query_kind", "response_shape",
        # Filter fields
        "filters", "brand", "budget", "features", "faq_topic",
        # Results
        "products_found", "products_shown",
        # Performance timing
        "response_time_ms", "elapsed_ms", "function", "total_latency_ms",
        # Error tracking
        "error_type", "stack_trace",
        # Transport
        "api_endpoint", "status_code", "catalog_path",
    ]

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            "timestamp": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in self.EXTRA_FIELDS:
            if hasattr(record, field):
                value = getattr(record, field)
                if value is not None:
                    log_data[field] = value

        if record.exc_info:
            log_data["error_type"] = record.exc_info[0].__name__ if record.exc_info[0] else None
            log_data["stack_trace"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str, ensure_ascii=False)


class ConsoleFormatter(logging.Formatter):
    """
    Human-readable formatter for console output.

    Output format:
    2026-01-08 10:30:00 | INFO     | phonefinder.api | Chat request | request_id=abc123
    """

    COLORS = {
        "DEBUG": "\033[36m",    # Cyan
        "INFO": "\033[32m",     # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",    # Red
        "CRITICAL": "\033[35m", # Magenta
        "RESET": "\033[0m",
    }

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        """Format log record for console."""
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        level = record.levelname

        if self.use_color:
            color = self.COLORS.get(level, "")
            reset = self.COLORS["RESET"]
        else:
            color = reset = ""

        msg = f"{timestamp} | {color}{level:8}{reset} | {record.name} | {record.getMessage()}"

        context_parts = []
        for field in ["request_id", "event", "response_time_ms"]:
            if hasattr(record, field) and getattr(record, field) is not None:
                context_parts.append(f"{field}={getattr(record, field)}")

        if context_parts:
            msg += f" | {', '.join(context_parts)}"

        if record.exc_info:
            msg += f"\n{self.formatException(record.exc_info)}"

        return msg


# =============================================================================
# Logger Setup
# =============================================================================

_loggers: Dict[str, logging.Logger] = {}
_initialized = False


def setup_logging(
    log_dir: str = "logs",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    enable_console: bool = True,
    enable_file: bool = True,
    enable_error_log: bool = True,
) -> None:
    """
    Initialize the logging system.

    Creates:
    - logs/phonefinder.log (all logs, rotating daily, 30-day retention)
    - logs/errors.log (ERROR and above, rotating daily, 30-day retention)
    - Console output (if enabled)

    Args:
        log_dir: Directory for log files
        console_level: Minimum level for console output
        file_level: Minimum level for file output
        enable_console: Whether to output to console
        enable_file: Whether to write phonefinder.log
        enable_error_log: Whether to write errors.log (ERROR and above)
    """
    global _initialized
    if _initialized:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)  # Capture all, handlers filter
    root_logger.handlers = []

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(console_level)
        console_handler.setFormatter(ConsoleFormatter(use_color=sys.stdout.isatty()))
        root_logger.addHandler(console_handler)

    if enable_file or enable_error_log:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        if enable_file:
            file_handler = TimedRotatingFileHandler(
                filename=str(log_path / "phonefinder.log"),
                when="midnight",
                interval=1,
                backupCount=30,  # Keep 30 days
                encoding="utf-8",
            )
            file_handler.setLevel(file_level)
            file_handler.setFormatter(JSONFormatter())
            file_handler.suffix = "%Y-%m-%d"
            root_logger.addHandler(file_handler)

        if enable_error_log:
            error_handler = TimedRotatingFileHandler(
                filename=str(log_path / "errors.log"),
                when="midnight",
                interval=1,
                backupCount=30,
                encoding="utf-8",
            )
            error_handler.setLevel(logging.ERROR)
            error_handler.setFormatter(JSONFormatter())
            error_handler.suffix = "%Y-%m-%d"
            root_logger.addHandler(error_handler)

    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Module name (usually __name__)

    Returns:
        Logger under the phonefinder namespace

    Example:
        logger = get_logger(__name__)
        logger.info("Search started", extra={"user_query": "samsung phone"})
    """
    # Don't auto-initialize here - let the entry point control logging setup
    if name.startswith(ROOT_LOGGER_NAME + "."):
        logger_name = name
    else:
        logger_name = f"{ROOT_LOGGER_NAME}.{name}"

    if logger_name not in _loggers:
        _loggers[logger_name] = logging.getLogger(logger_name)

    return _loggers[logger_name]


# =============================================================================
# Context Manager for Request Tracking
# =============================================================================

class LogContext:
    """
    Context manager for tracking request-level logging context.

    Usage:
        with LogContext() as ctx:
            ctx.log_request("/api/chat")
            # ... do work ...
            ctx.log_response(status_code=200)
    """

    def __init__(self, request_id: Optional[str] = None):
        self.request_id = request_id or str(uuid.uuid4())[:8]
        self.start_time = None
        self.logger = get_logger("request")

    def __enter__(self) -> "LogContext":
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is not None:
            self.log_error(exc_val, exc_tb)
        return False  # Don't suppress exceptions

    def elapsed_ms(self) -> float:
        """Get elapsed time in milliseconds."""
        if self.start_time is None:
            return 0.0
        return (time.perf_counter() - self.start_time) * 1000

    def log_request(self, endpoint: str, **extra) -> None:
        """Log an incoming request."""
        self.logger.info(
            "Request received",
            extra={
                "event": "request_received",
                "request_id": self.request_id,
                "api_endpoint": endpoint,
                **extra
            }
        )

    def log_response(self, **extra) -> None:
        """Log the response being sent."""
        self.logger.info(
            "Response sent",
            extra={
                "event": "response_sent",
                "request_id": self.request_id,
                "total_latency_ms": round(self.elapsed_ms(), 2),
                **extra
            }
        )

    def log_error(self, error: BaseException, tb=None) -> None:
        """Log an error with its stack trace."""
        self.logger.error(
            f"Error: {error}",
            extra={
                "event": "error",
                "request_id": self.request_id,
                "error_type": type(error).__name__,
                "stack_trace": "".join(traceback.format_tb(tb)) if tb else None,
            },
            exc_info=(type(error), error, tb) if tb else None
        )


# =============================================================================
# Convenience Functions
# =============================================================================

def log_query_turn(
    user_query: str,
    query_kind: str,
    response_shape: str,
    products_found: int = 0,
    products_shown: int = 0,
    filters: Optional[Dict[str, Any]] = None,
    faq_topic: Optional[str] = None,
    response_time_ms: Optional[float] = None,
    request_id: Optional[str] = None,
    **extra
) -> None:
    """
    Log one handled message with everything about it in a single event.

    Args:
        user_query: The raw user message
        query_kind: guarded, faq, detail or search
        response_shape: Terminal outcome (summary, top_pick, not_found, ...)
        products_found: Phones that passed the filters
        products_shown: Phones attached to the reply
        filters: Filter dimensions that were set
        faq_topic: FAQ topic answered, if any
        response_time_ms: Time spent handling the message
        request_id: Request identifier, when called from the API
    """
    logger = get_logger("conversation")
    filters = filters or {}

    logger.info(
        f"Query turn: {response_shape}",
        extra={
            "event": "query_turn",
            "request_id": request_id,
            "user_query": user_query,
            "query_kind": query_kind,
            "response_shape": response_shape,
            "filters": filters,
            "brand": filters.get("brand"),
            "budget": filters.get("budget"),
            "features": filters.get("features"),
            "faq_topic": faq_topic,
            "products_found": products_found,
            "products_shown": products_shown,
            "response_time_ms": round(response_time_ms, 2) if response_time_ms is not None else None,
            **extra
        }
    )


def log_error(
    error: Exception,
    context: Optional[str] = None,
    request_id: Optional[str] = None,
    **extra
) -> None:
    """Log an error with its type and stack trace."""
    logger = get_logger("errors")
    logger.error(
        f"Error in {context or 'unknown'}: {error}",
        extra={
            "event": "error",
            "request_id": request_id,
            "error_type": type(error).__name__,
            "stack_trace": traceback.format_exc(),
            **extra
        },
    )


# =============================================================================
# Performance Timing
# =============================================================================

def timed(event_name: str, logger_name: str = "performance"):
    """
    Decorator to time function execution and log it.

    Usage:
        @timed("catalog_load")
        def load_catalog(path): ...
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                elapsed_ms = (time.perf_counter() - start) * 1000
                get_logger(logger_name).error(
                    f"{event_name} failed after {elapsed_ms:.2f}ms",
                    extra={
                        "event": f"{event_name}_error",
                        "elapsed_ms": round(elapsed_ms, 2),
                        "function": func.__name__,
                        "error_type": type(e).__name__,
                    },
                    exc_info=True
                )
                raise
            elapsed_ms = (time.perf_counter() - start) * 1000
            get_logger(logger_name).debug(
                f"{event_name} completed",
                extra={
                    "event": f"{event_name}_timing",
                    "elapsed_ms": round(elapsed_ms, 2),
                    "function": func.__name__,
                }
            )
            return result
        return wrapper
    return decorator


class Timer:
    """
    Context manager for timing code blocks.

    Usage:
        with Timer() as t:
            # ... do work ...
        print(f"Took {t.elapsed_ms}ms")
    """

    def __init__(self):
        self.start_time = None
        self.end_time = None
        self.elapsed_ms = 0.0

    def __enter__(self) -> "Timer":
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, *args) -> None:
        self.end_time = time.perf_counter()
        self.elapsed_ms = (self.end_time - self.start_time) * 1000
