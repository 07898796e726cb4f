# utils/logger.py
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

LOGGER_NAME = "pos"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logger(log_dir="data/logs", level=logging.INFO):
    """
    Set up the "pos" logger the till writes to.

    pos.log under log_dir rolls over at midnight and the last 7 days are
    kept; the same lines go to the console. cart, checkout, pricing and
    repository log through pos.<module> children and share these handlers.
    Calling it again returns the already configured logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if logger.handlers:
        return logger

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / "pos.log"

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    daily = TimedRotatingFileHandler(
        filename=log_path, when="midnight", backupCount=7, encoding="utf-8"
    )
    console = logging.StreamHandler()
    for handler in (daily, console):
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info("till logging to %s", log_path)
    return logger
