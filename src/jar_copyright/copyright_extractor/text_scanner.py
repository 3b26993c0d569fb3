# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import io
import logging
from collections.abc import Iterable, Iterator

from jar_copyright.copyright_extractor.filter_rules import FilterRuleSet
from jar_copyright.copyright_extractor.patterns import (
    is_block_end,
    is_block_start,
    match_copyright_line,
    post_process_line,
    strip_block_keyword,
)

logger = logging.getLogger("jar_copyright")


class CopyrightTextScanner:
    """Finds copyright statements in license and notice files.

    Single lines starting with "Copyright" are reported on their own. A
    "## Copyright" markdown header starts a block whose lines, up to the next
    "## " header, are joined into one statement.
    """

    def __init__(self, filter_rules: FilterRuleSet) -> None:
        self.filter_rules = filter_rules

    def scan_text(self, text: str, source: str = "<text>") -> list[str]:
        # universal newlines: "\r\n" and "\r" both end a line
        lines = (line.rstrip("\n") for line in io.StringIO(text, newline=None))
        return self.scan_lines(lines, source)

    def scan_lines(self, lines: Iterable[str], source: str = "<text>") -> list[str]:
        copyrights: list[str] = []
        line_iterator = iter(lines)
        for line in line_iterator:
            found = self.match_line(line)
            if found is not None:
                logger.info(f"Found match in {source}: {found}")
                copyrights.append(found)
            elif is_block_start(line):
                # the block reads from the same iterator, scanning resumes
                # after its closing header
                copyrights.extend(self.extract_block(line_iterator, source))
        return copyrights

    def extract_block(self, lines: Iterator[str], source: str = "<text>") -> list[str]:
        copyrights: list[str] = []
        block_lines: list[str] = []
        for line in lines:
            trimmed_line = line.strip()
            if is_block_end(trimmed_line):
                break
            if not trimmed_line:
                continue
            # statements inside a block are kept as written
            found = self.find_statement(line)
            if found is not None:
                logger.info(f"Found match in {source}: {found}")
                copyrights.append(found)
            else:
                block_lines.append(trimmed_line + " ")

        block = strip_block_keyword("".join(block_lines))
        if block:
            block = post_process_line(block)
            logger.info(f"Found copyright block in {source}: {block}")
            copyrights.append(block)
        return copyrights

    def find_statement(self, line: str) -> str | None:
        """Return the trimmed statement following "Copyright" in the line, or
        None when the line has none or the statement is filtered out."""
        statement = match_copyright_line(line)
        if statement is None or self.filter_rules.ignore(statement):
            return None
        return statement.strip()

    def match_line(self, line: str) -> str | None:
        statement = self.find_statement(line)
        if statement is None:
            return None
        return post_process_line(statement)
