"""Setting up a file logger for editor events.

Returns a lazily initialized module logger that writes to a file
`{logging_dir}/{filename}` in the message format only, without metadata.
"""
# feedback_questions/core/logging.py
import os
from logging import DEBUG, FileHandler, Formatter, INFO, getLogger

from feedback_questions.core.config import settings


def get_logs_writer_logger(logging_dir=settings.LOG_PATH, filename=settings.LOG_FILENAME):
    os.makedirs(logging_dir, exist_ok=True)
    log_path = os.path.join(logging_dir, filename)

    logger = getLogger(__name__)

    if logger.handlers:
        return logger

    logger.setLevel(DEBUG if settings.DEBUG else INFO)
    logger.propagate = False

    handler = FileHandler(log_path, mode="a", encoding="utf-8", delay=True)
    handler.setFormatter(Formatter("%(message)s"))
    logger.addHandler(handler)

    return logger
