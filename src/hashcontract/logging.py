import logging
import os


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    # Library default is WARNING; HASHCONTRACT_LOG_LEVEL overrides it
    default_level = logging.WARNING
    level_name = os.getenv("HASHCONTRACT_LOG_LEVEL", logging.getLevelName(default_level))
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        level = default_level

    logger.setLevel(level)
    return logger
