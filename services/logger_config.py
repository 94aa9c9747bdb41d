# services/logger_config.py
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from config import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'


def setup_logging(
    log_file: Optional[str] = None,
    logger_name: Optional[str] = None
) -> logging.Logger:
    """
    Configures the service logger once per process.

    Search and planner activity goes to a size-rotated file at LOG_LEVEL; the
    console handler mirrors everything so request traces show up under uvicorn.
    A log directory that cannot be created leaves the console handler only.
    """
    logger = logging.getLogger(logger_name or settings.LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(LOG_FORMAT)
    path = log_file or settings.LOG_FILE_PATH

    try:
        log_dir = os.path.dirname(path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            path,
            maxBytes=settings.LOG_MAX_BYTES,
            backupCount=settings.LOG_BACKUP_COUNT,
            encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(settings.LOG_LEVEL)
        logger.addHandler(file_handler)
    except OSError as e:
        logging.getLogger(__name__).warning(f"File logging disabled for {path}: {e}")

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.DEBUG)
    logger.addHandler(console_handler)

    # SQL echo stays in the engine's own logger unless DB_ECHO is set
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.DB_ECHO else logging.WARNING
    )

    logger.debug(f"Logging to {path} at {settings.LOG_LEVEL}")
    return logger
