# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.
import logging
import sys


class ColoredFormatter(logging.Formatter):
    """Colors each record by level; the source location helps tell which
    scanner reported a finding."""

    grey = "\x1b[38;20m"
    yellow = "\x1b[33;20m"
    red = "\x1b[31;20m"
    bold_red = "\x1b[31;1m"
    reset = "\x1b[0m"
    log_format = "%(asctime)s - %(levelname)s - %(message)s (%(filename)s:%(lineno)d)"

    FORMATS = {
        logging.DEBUG: grey + log_format + reset,
        logging.INFO: grey + log_format + reset,
        logging.WARNING: yellow + log_format + reset,
        logging.ERROR: red + log_format + reset,
        logging.CRITICAL: bold_red + log_format + reset,
    }

    def format(self, record: logging.LogRecord) -> str:
        formatter = logging.Formatter(self.FORMATS.get(record.levelno))
        return formatter.format(record)


# handler installed by the last setup_logging call
_console_handler: logging.Handler | None = None


def parse_log_level(level_name: str) -> int:
    """Translate a level name such as "info" or "WARNING" into its numeric value."""
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise ValueError(
            f"Invalid log level: {level_name}. Valid levels: DEBUG, INFO, WARNING, ERROR, CRITICAL"
        )
    return level


def setup_logging(level: int) -> None:
    """Send log records at `level` and above to stderr.

    Calling it again (one CLI command after another in the same process)
    replaces the stderr handler installed before instead of adding a second one.
    """
    global _console_handler
    root_logger = logging.getLogger()
    if _console_handler is not None:
        root_logger.removeHandler(_console_handler)

    _console_handler = logging.StreamHandler(sys.stderr)
    _console_handler.setFormatter(ColoredFormatter())
    root_logger.setLevel(level)
    root_logger.addHandler(_console_handler)
