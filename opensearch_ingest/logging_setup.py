import logging

from pythonjsonlogger import jsonlogger

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str = "INFO", json_output: bool = True) -> None:
    """Configure the root logger with a single stream handler.

    Args:
        level (str): Log level name, e.g. ``"INFO"``.
        json_output (bool): Emit JSON records when True, plain text otherwise.
    """
    logger = logging.getLogger()
    logger.setLevel(level.upper())
    handler = logging.StreamHandler()
    if json_output:
        formatter = jsonlogger.JsonFormatter(LOG_FORMAT)
    else:
        formatter = logging.Formatter(LOG_FORMAT)
    handler.setFormatter(formatter)
    logger.handlers = [handler]
