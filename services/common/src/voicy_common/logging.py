import logging
import sys

from pythonjsonlogger import jsonlogger

_NOISY_LOGGERS = ["pika", "httpx", "telegram.ext", "sqlalchemy.engine"]


def setup_logging():
    """
    Configures structured JSON logging for the service.

    Installs a JSON formatter carrying timestamp, level, logger name, message,
    trace_id and span_id on a stdout handler attached to the root logger.
    Chatty client libraries (pika, httpx, python-telegram-bot, SQLAlchemy)
    are raised to WARNING and routed through the same handler.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
    )
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)
    root_logger.handlers = []
    root_logger.addHandler(stream_handler)

    for logger_name in _NOISY_LOGGERS:
        lib_logger = logging.getLogger(logger_name)
        lib_logger.setLevel(logging.WARNING)

        lib_logger.handlers = []

        lib_logger.addHandler(stream_handler)

        lib_logger.propagate = False

    return root_logger
