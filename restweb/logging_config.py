"""
Logging configuration
"""

import logging
import logging.handlers
import os

from pathlib import Path
from typing import Optional
from urllib.parse import quote

DEFAULT_LOGS_DIR = "logs"
LOG_FORMAT = '%(asctime)s | %(name)s | %(levelname)s | %(message)s'
ACCESS_LOG_FORMAT = '%(asctime)s | ACCESS | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
MB = 1024 * 1024


def _rotating_handler(path: Path, max_mb: int, backups: int, level: int,
                      formatter: logging.Formatter) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        path, maxBytes=max_mb * MB, backupCount=backups, encoding='utf-8'
    )
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def _reset_handlers(logger: logging.Logger) -> None:
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()


class LoggingConfig:
    """Console output plus rotating app, error and access logs under `logs_dir`"""
    def __init__(self, logs_dir: str = DEFAULT_LOGS_DIR):
        self.logs_dir = Path(logs_dir)
        self.logs_dir.mkdir(parents=True, exist_ok=True)
        self.app_log_file = self.logs_dir / "restweb.log"
        self.error_log_file = self.logs_dir / "restweb_errors.log"
        self.access_log_file = self.logs_dir / "restweb_access.log"

    def setup_logging(self):
        """Install handlers; safe to call again, old handlers are closed"""
        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

        root_logger = logging.getLogger()
        root_logger.setLevel(logging.DEBUG)
        _reset_handlers(root_logger)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)
        root_logger.addHandler(_rotating_handler(self.app_log_file, 10, 5, logging.DEBUG, formatter))
        root_logger.addHandler(_rotating_handler(self.error_log_file, 5, 3, logging.ERROR, formatter))

        # Access lines go only to their own file
        access_logger = logging.getLogger("access")
        access_logger.setLevel(logging.INFO)
        access_logger.propagate = False
        _reset_handlers(access_logger)
        access_logger.addHandler(_rotating_handler(
            self.access_log_file, 10, 5, logging.INFO,
            logging.Formatter(fmt=ACCESS_LOG_FORMAT, datefmt=DATE_FORMAT)
        ))

        return root_logger


_logging_config: Optional[LoggingConfig] = None


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def get_logging_config() -> LoggingConfig:
    global _logging_config
    if _logging_config is None:
        _logging_config = LoggingConfig(os.getenv("RESTWEB_LOGS_DIR", DEFAULT_LOGS_DIR))
    return _logging_config


def log_api_access(method: str, path: str, client: str = None, status_code: int = None,
                   response_time: float = None, error: str = None):
    """Write one access line; the path is percent-encoded so it holds no spaces or `|`"""
    access_logger = logging.getLogger("access")

    log_parts = [
        f"method={method}",
        f"path={quote(path, safe='/')}",
        f"client={client or 'unknown'}",
        f"status={status_code or 'N/A'}",
    ]

    if response_time is not None:
        log_parts.append(f"response_time={response_time:.3f}s")

    if error:
        log_parts.append(f"error={error}")

    access_logger.info(" | ".join(log_parts))
