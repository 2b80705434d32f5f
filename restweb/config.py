import os

from .logging_config import get_logger, get_logging_config

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080


class AppConfig:
    def __init__(self):
        self.host = os.getenv("RESTWEB_HOST", DEFAULT_HOST)
        self.port = int(os.getenv("RESTWEB_PORT", str(DEFAULT_PORT)))

        self.logging_config = get_logging_config()
        self.logs_dir = self.logging_config.logs_dir

        self.logging_config.setup_logging()
        self.logger = get_logger(__name__)

_app_config = None

def get_app_config() -> AppConfig:
    global _app_config
    if _app_config is None:
        _app_config = AppConfig()
    return _app_config
