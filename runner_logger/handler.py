"""
Bridge from the standard ``logging`` module

Lets libraries that log through ``logging.getLogger(...)`` render their
records in the task runner console layout.
"""

import logging
from typing import Optional

from runner_logger.core.log_level import LogLevel
from runner_logger.core.logger_provider import TaskRunnerLoggerProvider


class TaskRunnerLogHandler(logging.Handler):
    """
    logging.Handler that routes records to a TaskRunnerLoggerProvider.

    The record's logger name becomes the category. Level filtering happens
    twice: first by the logging framework, then by the provider's filter.

    Example:
        provider = LoggerProviderBuilder().with_min_level(LogLevel.DEBUG).build()
        logging.getLogger().addHandler(TaskRunnerLogHandler(provider))
    """

    def __init__(
        self,
        provider: TaskRunnerLoggerProvider,
        level: int = logging.NOTSET,
        formatter: Optional[logging.Formatter] = None,
    ):
        super().__init__(level)
        self.provider = provider
        self.setFormatter(formatter or logging.Formatter("%(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            logger = self.provider.create_logger(record.name)
            logger.log(
                LogLevel.from_logging_level(record.levelno),
                record,
                formatter=lambda state, exception: self.format(state),
            )
        except Exception:
            self.handleError(record)
