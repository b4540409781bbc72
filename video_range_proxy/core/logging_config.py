"""
Logging configuration for the Video Range Proxy.

Console output is coloured; an optional log file rotates at 10MB. The proxy,
origin and web server loggers get their own levels so that per-request lines
stay readable.
"""

import logging
import logging.handlers
import os
import sys
from typing import Optional
from datetime import datetime


CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5


class ColoredFormatter(logging.Formatter):
    """Colored formatter for console output"""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record):
        # Color a copy so the file handler keeps the plain level name
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname)
        if color:
            record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def _create_file_handler(log_file: str) -> Optional[logging.Handler]:
    """Rotating file handler that records everything, or None if the file is unusable"""
    try:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS
        )
    except OSError as e:
        print(f"Warning: Could not setup file logging: {e}")
        return None

    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def _set_component_levels(log_level: str) -> None:
    debugging = log_level == 'DEBUG'

    # one line per request and reply, more only when debugging
    logging.getLogger('video_range_proxy.proxy').setLevel(logging.DEBUG if debugging else logging.INFO)
    logging.getLogger('video_range_proxy.origin').setLevel(logging.INFO)

    # uvicorn access logs are noise unless debugging
    logging.getLogger('uvicorn').setLevel(logging.INFO if debugging else logging.WARNING)
    logging.getLogger('fastapi').setLevel(logging.WARNING)


def install_exception_hook() -> None:
    """Route uncaught exceptions through logging"""

    def handle_exception(exc_type, exc_value, exc_traceback):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return
        logging.getLogger("uncaught_exception").critical(
            "Uncaught exception",
            exc_info=(exc_type, exc_value, exc_traceback)
        )

    sys.excepthook = handle_exception


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Setup logging for the entire application"""
    log_level = log_level.upper()
    level = getattr(logging, log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT))
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = _create_file_handler(log_file)
        if file_handler is not None:
            root_logger.addHandler(file_handler)

    _set_component_levels(log_level)
    install_exception_hook()

    logging.getLogger(__name__).info(f"Logging initialized - Level: {log_level}, File: {log_file}")


class ErrorTracker:
    """Logs errors and warnings for one component and counts them"""

    def __init__(self, component_name: str):
        self.component_name = component_name
        self.logger = logging.getLogger(f"errors.{component_name}")
        self.error_count = 0
        self.warning_count = 0
        self.last_error_time: Optional[datetime] = None

    def _format(self, kind: str, message: str, context: str) -> str:
        prefix = f"{kind} in {self.component_name}"
        if context:
            prefix += f" ({context})"
        return f"{prefix}: {message}"

    def log_error(self, error: Exception, context: str = "") -> None:
        """Log an error with context and tracking"""
        self.error_count += 1
        self.last_error_time = datetime.now()
        self.logger.error(self._format("Error", str(error), context), exc_info=error)

    def log_warning(self, message: str, context: str = "") -> None:
        """Log a recoverable problem with context"""
        self.warning_count += 1
        self.logger.warning(self._format("Warning", message, context))

    def get_error_stats(self) -> dict:
        return {
            "component": self.component_name,
            "error_count": self.error_count,
            "warning_count": self.warning_count,
            "last_error_time": self.last_error_time.isoformat() if self.last_error_time else None
        }


def get_error_tracker(component_name: str) -> ErrorTracker:
    """Get an error tracker for a component"""
    return ErrorTracker(component_name)
