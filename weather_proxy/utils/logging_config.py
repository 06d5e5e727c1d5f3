import logging
import sys
from pathlib import Path
from typing import List

import structlog
from structlog.typing import Processor

from weather_proxy.config.config import config


class CustomFormatter(logging.Formatter):
    """Custom formatter that implements the format: [yyyy-mm-dd hh:mm:ss] [log_type] [module_name]: {message}"""

    def format(self, record):
        # Last component of the dotted logger name
        module_name = record.name.split('.')[-1] if '.' in record.name else record.name

        timestamp = self.formatTime(record, '%Y-%m-%d %H:%M:%S')

        formatted_message = f"[{timestamp}] [{record.levelname}] [{module_name}]: {record.getMessage()}"

        if record.exc_info:
            formatted_message += '\n' + self.formatException(record.exc_info)

        return formatted_message


def get_log_file_path() -> Path:
    """Get the configured log file path, creating its directory."""
    log_file_path = Path(config.log_file)
    log_file_path.parent.mkdir(parents=True, exist_ok=True)
    return log_file_path


def setup_logging():
    """
    Configure logging for the application.

    structlog events are rendered and handed to the stdlib root logger, which
    writes to stdout and, when LOG_FILE is set, to that file. Text format uses
    [yyyy-mm-dd hh:mm:ss] [log_type] [module_name]: {message}; json format
    emits one JSON object per line.
    """
    level = getattr(logging, config.log_level.upper())
    use_json = config.log_format == "json"

    processors: List[Processor] = [structlog.contextvars.merge_contextvars]

    if use_json:
        processors += [
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
        formatter = logging.Formatter("%(message)s")
    else:
        # CustomFormatter already prefixes timestamp and level
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ]
        formatter = CustomFormatter()

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if config.log_file:
        handlers.append(logging.FileHandler(get_log_file_path(), encoding='utf-8'))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    logger = structlog.get_logger(__name__)
    logger.info(
        "Logging configured",
        environment=config.environment,
        log_format=config.log_format,
        log_file=config.log_file,
    )
