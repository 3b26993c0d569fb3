# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging
import re
import threading
from collections.abc import Iterable

from jar_copyright.adaptors.os import open_file, read_package_resource

logger = logging.getLogger("jar_copyright")

FILTER_RESOURCE_PACKAGE = "jar_copyright.copyright_extractor.resources"
FILTER_RESOURCE_NAME = "copyright-filters.txt"


class FilterRuleSet:
    """An immutable list of patterns describing text that follows the word
    "Copyright" in license prose without being a copyright statement."""

    def __init__(self, patterns: Iterable[re.Pattern[str]] = ()) -> None:
        self._patterns = tuple(patterns)

    @staticmethod
    def from_lines(lines: Iterable[str]) -> "FilterRuleSet":
        """
        Compile one case-insensitive pattern per line. Lines starting with
        "#" are comments, blank lines are skipped and invalid expressions
        are reported and skipped.
        """
        patterns = []
        for line in lines:
            line = line.rstrip("\r\n")
            if line.startswith("#") or not line.strip():
                continue
            try:
                patterns.append(re.compile(line, re.IGNORECASE))
            except re.error as e:
                logger.warning(f"Skipping invalid copyright filter '{line}': {e}")
        return FilterRuleSet(patterns)

    @staticmethod
    def from_file(file_path: str) -> "FilterRuleSet":
        return FilterRuleSet.from_lines(open_file(file_path).splitlines())

    @property
    def patterns(self) -> tuple[re.Pattern[str], ...]:
        return self._patterns

    def ignore(self, text: str) -> bool:
        return any(pattern.search(text) for pattern in self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)


_default_rules: FilterRuleSet | None = None
_default_rules_lock = threading.Lock()


def load_default_filter_rules() -> FilterRuleSet:
    """Return the bundled filter rules, loading them on first use only.

    When the bundled resource cannot be read no filtering is applied.
    """
    global _default_rules
    rules = _default_rules
    if rules is not None:
        return rules
    with _default_rules_lock:
        if _default_rules is None:
            try:
                content = read_package_resource(
                    FILTER_RESOURCE_PACKAGE, FILTER_RESOURCE_NAME
                )
                _default_rules = FilterRuleSet.from_lines(content.splitlines())
            except (OSError, ModuleNotFoundError, UnicodeDecodeError) as e:
                logger.error(
                    f"Could not read copyright filters, no filtering will be applied: {e}"
                )
                _default_rules = FilterRuleSet()
        return _default_rules
