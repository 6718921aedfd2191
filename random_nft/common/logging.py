import logging
from logging import Logger
from sys import stdout
from typing import Optional

LOG_FORMAT = "[%(asctime)s] %(levelname)s:%(name)s.%(module)s:%(message)s"


class RandomNftLogger:
    _instance: Optional[logging.Logger] = None

    @classmethod
    def get_logger(cls) -> logging.Logger:
        """
        Return the singleton logger instance with a stream handler.
        Log format: "[%(asctime)s] %(levelname)s:%(name)s.%(module)s:%(message)s"
        The logger level is set to DEBUG.
        Ensures only one stream handler exists.
        """
        if cls._instance is None:
            logger = logging.getLogger("random_nft")
            logger.setLevel(logging.DEBUG)

            if not logger.handlers:
                stream_handler = logging.StreamHandler(stdout)
                stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
                logger.addHandler(stream_handler)

            cls._instance = logger

        return cls._instance


def get_random_nft_logger() -> logging.Logger:
    """
    Convenience function to get the random nft logger.
    """
    return RandomNftLogger.get_logger()


def setup_logging(logger: Logger, log_level: str) -> None:
    """
    Set up the logging configuration based on the provided log level.

    Args:
        logger: The logger to update
        log_level: The logging level to set (e.g., "DEBUG", "INFO").
    """
    numeric_log_level = getattr(logging, log_level.upper(), None)
    if not isinstance(numeric_log_level, int):
        raise ValueError(f"Invalid log level: {log_level}")

    formatter = logging.Formatter(LOG_FORMAT)

    for handler in logger.handlers:
        handler.setFormatter(formatter)
        handler.setLevel(numeric_log_level)

    # If no handlers exist, add a stream handler
    if not logger.handlers:
        stream_handler = logging.StreamHandler(stdout)
        stream_handler.setFormatter(formatter)
        stream_handler.setLevel(numeric_log_level)
        logger.addHandler(stream_handler)

    # Set logger and root logger levels
    logger.setLevel(numeric_log_level)
    logging.getLogger().setLevel(numeric_log_level)
