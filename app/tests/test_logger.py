from logging.handlers import TimedRotatingFileHandler

from app.logger import Logger


def test_module_loggers_share_handlers():
    first = Logger.get_logger("autoassist.tests.first")
    second = Logger.get_logger("autoassist.tests.second")

    assert first.handlers == second.handlers
    assert sum(isinstance(h, TimedRotatingFileHandler) for h in first.handlers) <= 1


def test_get_logger_is_idempotent():
    logger = Logger.get_logger("autoassist.tests.repeat")
    count = len(logger.handlers)

    assert Logger.get_logger("autoassist.tests.repeat") is logger
    assert len(logger.handlers) == count
