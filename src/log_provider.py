# src/log_provider.py

import logging

LOGGER_NAME = "vaajoor"
LOG_FORMAT = "%(asctime)s : %(message)s"


def setup_logging(log_file: str, level: int = logging.INFO) -> logging.Logger:
    """
    Send solver progress both to the console and to an appended log file.
    Safe to call more than once; handlers are only attached the first time.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

    file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    return logger
