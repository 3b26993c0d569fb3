# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging
from collections.abc import Iterator

import pytest

import jar_copyright.utils.logging as logging_utils
from jar_copyright.utils.collections import unique_in_order
from jar_copyright.utils.logging import parse_log_level, setup_logging


def test_unique_in_order_keeps_first_occurrence() -> None:
    assert unique_in_order(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


def test_unique_in_order_is_exact_match_only() -> None:
    assert unique_in_order(["Acme Corp", "Acme Corp.", "acme corp"]) == [
        "Acme Corp",
        "Acme Corp.",
        "acme corp",
    ]


@pytest.mark.parametrize(
    "name,level",
    [("debug", logging.DEBUG), ("INFO", logging.INFO), ("Warning", logging.WARNING)],
)
def test_parse_log_level(name: str, level: int) -> None:
    assert parse_log_level(name) == level


def test_parse_log_level_invalid() -> None:
    with pytest.raises(ValueError, match="Invalid log level: LOUD"):
        parse_log_level("LOUD")


@pytest.fixture
def restore_root_logger() -> Iterator[logging.Logger]:
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    root_logger.handlers = handlers
    root_logger.setLevel(level)
    logging_utils._console_handler = None


def test_setup_logging_replaces_its_handler(
    restore_root_logger: logging.Logger,
) -> None:
    setup_logging(logging.INFO)
    first = logging_utils._console_handler
    setup_logging(logging.DEBUG)
    second = logging_utils._console_handler

    assert first is not None and second is not None
    assert first not in restore_root_logger.handlers
    assert restore_root_logger.handlers.count(second) == 1
    assert restore_root_logger.level == logging.DEBUG
    assert isinstance(second.formatter, logging_utils.ColoredFormatter)
