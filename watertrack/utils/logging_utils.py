import logging
from watertrack.config import Config

formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(f"watertrack.{name}")
    if logger.handlers:
        return logger

    logger.setLevel(Config.LOG_LEVEL)

    # Logging in the terminal
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if Config.LOG_FILE:
        handler = logging.FileHandler(Config.LOG_FILE)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
