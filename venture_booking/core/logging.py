"""
Logging Configuration and Utilities

Structured logging for the booking backend: structlog processors for
request context, python-json-logger for JSON output on stdlib handlers.
"""

import logging
import logging.handlers
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import structlog
from pythonjsonlogger import jsonlogger

from venture_booking.config.settings import settings

# Context variables for request tracking
request_id: ContextVar[Optional[str]] = ContextVar('request_id', default=None)

_configured = False


class RequestContextProcessor:
    """Add request context to log records"""

    def __call__(self, logger, method_name, event_dict):
        req_id = request_id.get()
        if req_id:
            event_dict['request_id'] = req_id

        event_dict['timestamp'] = datetime.now(timezone.utc).isoformat()
        event_dict['service'] = 'venture-booking'
        event_dict['environment'] = settings.ENVIRONMENT

        return event_dict


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter for structured logging"""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['environment'] = settings.ENVIRONMENT

        req_id = request_id.get()
        if req_id and 'request_id' not in log_record:
            log_record['request_id'] = req_id

        if record.exc_info:
            log_record['exception'] = self.formatException(record.exc_info)


class LoggingConfig:
    """Centralized logging configuration"""

    @staticmethod
    def shared_processors() -> list:
        """structlog processors applied to every stdlib record"""
        return [
            RequestContextProcessor(),
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.ExtraAdder(),
            structlog.processors.StackInfoRenderer(),
        ]

    @staticmethod
    def configure_structured_logging() -> logging.Formatter:
        """
        Configure structlog and return a stdlib formatter that renders
        records through its processor chain.
        """
        if settings.LOG_FORMAT == "json":
            renderer = structlog.processors.JSONRenderer()
        else:
            renderer = structlog.processors.KeyValueRenderer(
                key_order=['timestamp', 'level', 'logger', 'event']
            )

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                *LoggingConfig.shared_processors(),
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            logger_factory=structlog.stdlib.LoggerFactory(),
            context_class=dict,
            cache_logger_on_first_use=True,
        )

        return structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=LoggingConfig.shared_processors(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.format_exc_info,
                structlog.processors.UnicodeDecoder(),
                renderer,
            ],
        )

    @staticmethod
    def configure_standard_logging(formatter: Optional[logging.Formatter] = None):
        """Configure standard Python logging"""

        level = getattr(logging, settings.LOG_LEVEL)
        root_logger = logging.getLogger()
        root_logger.setLevel(level)

        root_logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)

        if formatter is None:
            if settings.LOG_FORMAT == "json":
                formatter = CustomJsonFormatter(
                    '%(asctime)s %(name)s %(levelname)s %(message)s'
                )
            else:
                formatter = logging.Formatter(
                    '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
                )

        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

        if settings.LOG_FILE:
            log_path = Path(settings.LOG_FILE)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.TimedRotatingFileHandler(
                log_path,
                when='midnight',
                interval=1,
                backupCount=settings.LOG_RETENTION,
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

        LoggingConfig._configure_library_loggers()

    @staticmethod
    def _configure_library_loggers():
        """Configure logging for external libraries"""

        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
        logging.getLogger("uvicorn.error").setLevel(logging.INFO)

        if settings.LOG_SQL_QUERIES:
            logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
        else:
            logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

        logging.getLogger("httpx").setLevel(logging.WARNING)


class LoggerAdapter:
    """Thin wrapper over a stdlib logger that always passes an `extra` mapping"""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    @property
    def name(self) -> str:
        return self.logger.name

    def _log(self, level: int, message: str, *args, **kwargs):
        kwargs['extra'] = dict(kwargs.get('extra') or {})
        self.logger.log(level, message, *args, **kwargs)

    def debug(self, message: str, *args, **kwargs):
        self._log(logging.DEBUG, message, *args, **kwargs)

    def info(self, message: str, *args, **kwargs):
        self._log(logging.INFO, message, *args, **kwargs)

    def warning(self, message: str, *args, **kwargs):
        self._log(logging.WARNING, message, *args, **kwargs)

    def error(self, message: str, *args, **kwargs):
        self._log(logging.ERROR, message, *args, **kwargs)

    def exception(self, message: str, *args, **kwargs):
        kwargs.setdefault('exc_info', True)
        self._log(logging.ERROR, message, *args, **kwargs)

    def critical(self, message: str, *args, **kwargs):
        self._log(logging.CRITICAL, message, *args, **kwargs)


def get_logger(name: Optional[str] = None) -> LoggerAdapter:
    """
    Get configured logger instance.

    Args:
        name: Logger name (defaults to the package logger)

    Returns:
        Context-aware logger adapter
    """
    return LoggerAdapter(logging.getLogger(name or "venture_booking"))


def setup_logging(force: bool = False) -> None:
    """Initialize logging configuration once per process"""
    global _configured
    if _configured and not force:
        return

    formatter = None
    if settings.ENABLE_STRUCTURED_LOGGING:
        formatter = LoggingConfig.configure_structured_logging()

    LoggingConfig.configure_standard_logging(formatter)
    _configured = True

    get_logger(__name__).info(
        "Logging system initialized",
        extra={
            'log_level': settings.LOG_LEVEL,
            'log_format': settings.LOG_FORMAT,
            'structured_logging': settings.ENABLE_STRUCTURED_LOGGING,
        },
    )


__all__ = [
    'get_logger',
    'setup_logging',
    'LoggerAdapter',
    'LoggingConfig',
    'request_id',
]
