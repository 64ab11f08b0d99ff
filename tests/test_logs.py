import logging

from rich.logging import RichHandler

from mime_to_ext import enable_logs


def test_enable_logs() -> None:
    enable_logs(logging.INFO)
    logger = logging.getLogger("mime_to_ext.database")
    assert logger.level == logging.INFO
    assert not logger.propagate
    handlers = [handler for handler in logger.handlers if isinstance(handler, RichHandler)]
    assert len(handlers) == 1
    assert handlers[0].level == logging.INFO


def test_enable_logs_twice() -> None:
    enable_logs()
    enable_logs(logging.WARNING)
    logger = logging.getLogger("mime_to_ext.lookup")
    handlers = [handler for handler in logger.handlers if isinstance(handler, RichHandler)]
    assert len(handlers) == 1
    assert handlers[0].level == logging.WARNING


def test_new_loggers() -> None:
    enable_logs()
    logger = logging.getLogger("mime_to_ext.new_module")
    assert any(isinstance(handler, RichHandler) for handler in logger.handlers)
    other = logging.getLogger("other.module")
    assert not any(isinstance(handler, RichHandler) for handler in other.handlers)
