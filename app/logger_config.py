import logging
import os
from logging.handlers import RotatingFileHandler

# Logger name and level
LOG_NAME = os.getenv("APP_LOGGER_NAME", "business_records")
LOG_LEVEL = os.getenv("APP_LOG_LEVEL", "DEBUG").upper()

# Console lines carry an ISO-like timestamp with milliseconds
CONSOLE_FORMAT = "%(asctime)s.%(msecs)03d - %(filename)s - %(funcName)s - %(levelname)s - %(message)s"
FILE_FORMAT = "[%(asctime)s] %(levelname)s in %(module)s: %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# 5 MB per file, three backups
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 3

logger = logging.getLogger(LOG_NAME)
logger.setLevel(LOG_LEVEL)

if not logger.handlers:
    console_handler = logging.StreamHandler()
    console_handler.setLevel(LOG_LEVEL)
    console_handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)

# Avoid duplicate lines through the root logger
logger.propagate = False


def add_file_handler(log_dir: str = "logs", filename: str = "app.log") -> RotatingFileHandler:
    """
    Also write INFO and above to a rotating file under log_dir.
    Calling it again for the same file returns the existing handler.
    """
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.abspath(os.path.join(log_dir, filename))

    for handler in logger.handlers:
        if isinstance(handler, RotatingFileHandler) and handler.baseFilename == log_file:
            return handler

    file_handler = RotatingFileHandler(log_file, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUP_COUNT)
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    logger.addHandler(file_handler)
    return file_handler
