"""
Runtime configuration read from the environment, plus logging setup.
"""
import os
import logging
from pathlib import Path

GOALS_FILE = os.getenv("EQ_GOALS_FILE", "goals.txt")
DATABASE_URL = os.getenv("EQ_DATABASE_URL", "sqlite:///./eternal_quest.db")

LOG_DIR = os.getenv("EQ_LOG_DIR", "./logs")
LOG_FILE = os.getenv("EQ_LOG_FILE", "eternal_quest.log")
LOG_LEVEL = os.getenv("EQ_LOG_LEVEL", "INFO")

FALLBACK_LOG_DIR = "."


def configure_logging(log_dir: str = None, level: str = None) -> Path:
    """
    Configure file + console logging for an application embedding the library.

    The library itself never calls this; it only emits through the
    ``eternal_quest.*`` loggers. Existing root handlers are replaced.

    Returns:
        Path of the log file in use
    """
    log_dir = log_dir or LOG_DIR
    level = (level or LOG_LEVEL).upper()

    try:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        log_path = Path(log_dir) / LOG_FILE
    except PermissionError:
        # Fallback to working directory if the configured one is not writable
        log_path = Path(FALLBACK_LOG_DIR) / LOG_FILE

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_path, encoding="utf-8"),
            logging.StreamHandler()
        ],
        force=True
    )
    return log_path
