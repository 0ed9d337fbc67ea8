#!/usr/bin/env python3
"""Basic usage example"""

import logging
import time

from runner_logger import (
    Activity,
    LoggerProviderBuilder,
    LogLevel,
    TaskRunnerLogHandler,
)

def main():
    # Create provider with builder pattern
    provider = (LoggerProviderBuilder()
        .with_min_level(LogLevel.DEBUG)
        .with_category_level("noisy", LogLevel.NONE)
        .build())

    logger = provider.create_logger("build")

    # Log messages
    logger.trace("This is trace")
    logger.debug("This is debug")
    logger.info("Build started\nwith two lines")
    logger.warning("This is warning")

    # Nested activities
    build = Activity("BUILD", "solution")
    with logger.begin_scope(build):
        with logger.begin_activity("TASK", "compile") as handle:
            time.sleep(0.1)
            handle.activity.success = True
            handle.activity.conclusion = "3 projects"

        test = Activity("TASK", "test")
        with logger.begin_scope(test):
            test.conclusion = "2 failed"
        build.conclusion = "with errors"

    # Route records from the logging module through the provider
    logging.getLogger().addHandler(TaskRunnerLogHandler(provider))
    logging.getLogger("third_party").warning("Message from logging")
    logging.getLogger("noisy").warning("Never shown")

    provider.dispose()

if __name__ == "__main__":
    main()
