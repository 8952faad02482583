"""
Logging Configuration
Console and rotating-file logging with text or JSON output
"""
import json
import logging
import logging.handlers
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, TextIO, Union

from larajinja.defaults import DEFAULT_LOG_BACKUP_COUNT, DEFAULT_LOG_FORMAT, DEFAULT_LOG_MAX_BYTES

# LogRecord attributes that are never copied into the JSON payload as extras
RESERVED_ATTRS = frozenset(vars(logging.LogRecord('', 0, '', 0, '', None, None))) | {'message', 'asctime'}


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record

    Anything passed through ``extra=`` (for instance ``template`` or
    ``renderer``) lands in the payload next to the standard keys.
    """

    def __init__(self, include_fields: Optional[Iterable[str]] = None):
        super().__init__()
        # Standard record attributes to copy in addition to the default keys
        self.include_fields: List[str] = list(include_fields or [])

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            'timestamp': datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'location': f'{record.module}.{record.funcName}:{record.lineno}',
        }

        payload.update({field: getattr(record, field) for field in self.include_fields if hasattr(record, field)})
        payload.update({
            key: value for key, value in vars(record).items()
            if key not in RESERVED_ATTRS and key not in payload
        })

        if record.exc_info:
            payload['exception'] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


class LoggerConfig:
    """
    Centralized logging configuration

    Example:
        logger = LoggerConfig.setup_logger(
            'larajinja',
            level='debug',
            format_type='json',
            file_path='storage/logs/views.log'
        )
    """

    TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    ENVIRONMENT_LEVELS = {
        'production': logging.WARNING,
        'staging': logging.INFO,
        'development': logging.DEBUG,
        'local': logging.DEBUG,
        'testing': logging.ERROR,
    }

    @staticmethod
    def setup_logger(
        name: str,
        level: Union[int, str, None] = None,
        format_type: Optional[str] = None,
        environment: str = 'production',
        stream: Optional[TextIO] = None,
        file_path: Optional[Union[str, Path]] = None,
        max_bytes: Optional[int] = None,
        backup_count: Optional[int] = None,
        propagate: bool = False
    ) -> logging.Logger:
        """
        Configure a logger from scratch, replacing its handlers

        Args:
            name: Logger name
            level: Explicit level (name or number); derived from environment when omitted
            format_type: 'json' or 'text'
            environment: Environment name used to pick the default level
            stream: Stream for the console handler (stderr by default)
            file_path: Log file; no file handler when omitted
            max_bytes: Size at which the log file rotates
            backup_count: Rotated files kept
            propagate: Whether records also reach ancestor loggers
        """
        if level is None:
            level = LoggerConfig.get_level_by_environment(environment)
        elif isinstance(level, str):
            level = logging.getLevelName(level.upper())

        if (format_type or DEFAULT_LOG_FORMAT) == 'json':
            formatter: logging.Formatter = JSONFormatter()
        else:
            formatter = logging.Formatter(LoggerConfig.TEXT_FORMAT)

        handlers: List[logging.Handler] = [logging.StreamHandler(stream)]
        if file_path:
            log_file = Path(file_path)
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=DEFAULT_LOG_MAX_BYTES if max_bytes is None else max_bytes,
                backupCount=DEFAULT_LOG_BACKUP_COUNT if backup_count is None else backup_count,
                encoding='utf-8'
            ))

        logger = logging.getLogger(name)
        logger.setLevel(level)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        for handler in handlers:
            handler.setFormatter(formatter)
            logger.addHandler(handler)
        logger.propagate = propagate

        return logger

    @staticmethod
    def get_level_by_environment(environment: Optional[str]) -> int:
        """Default level for an environment name; INFO for unknown names"""
        return LoggerConfig.ENVIRONMENT_LEVELS.get((environment or '').lower(), logging.INFO)
