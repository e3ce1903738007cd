import logging
import os
from pathlib import Path
from logging.handlers import RotatingFileHandler

DEFAULT_LOG_DIR = Path(__file__).parent.parent / "logs"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# google-generativeai and httpx are chatty at INFO
NOISY_LOGGERS = ("httpx", "google", "urllib3", "multipart")


def setup_logging(level: str | None = None):
    """
    Configure the root logger for the workbench.

    Console output always; a rotating app.log (10 MB x 5) under LOG_DIR
    (default backend/logs) unless LOG_TO_FILE=false.
    """
    root = logging.getLogger()
    root.setLevel((level or os.getenv("LOG_LEVEL", "INFO")).upper())
    root.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if os.getenv("LOG_TO_FILE", "true").lower() == "true":
        log_dir = Path(os.getenv("LOG_DIR", str(DEFAULT_LOG_DIR)))
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / "app.log",
            maxBytes=10*1024*1024,
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    for noisy in NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)

    root.info("logging_config: logging initialized level=%s", logging.getLevelName(root.level))
