from __future__ import annotations

import logging

from rich.logging import RichHandler

LOG_NAME_PREFIX = __package__.split(".")[0]


def enable_logs(level: int = logging.DEBUG) -> None:
    class Logger(logging.Logger):

        def __init__(self, name: str) -> None:
            super().__init__(name)
            if self.name.startswith(LOG_NAME_PREFIX):
                add_rich_handler_to_package_logger(self, level)

    logging.setLoggerClass(Logger)
    for name in list(logging.root.manager.loggerDict):
        if name.startswith(LOG_NAME_PREFIX):
            logger = logging.getLogger(name)
            add_rich_handler_to_package_logger(logger, level)


def add_rich_handler_to_package_logger(logger: logging.Logger, level: int) -> None:
    logger.setLevel(level)
    logger.propagate = False
    if any(isinstance(handler, RichHandler) for handler in logger.handlers):
        for handler in logger.handlers:
            handler.setLevel(level)
        return
    handler = RichHandler(rich_tracebacks=True)
    handler.setLevel(level)
    logger.addHandler(handler)
