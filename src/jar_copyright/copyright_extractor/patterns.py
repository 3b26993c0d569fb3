# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Regular expressions used to recognize copyright statements in text files.

Capture boundaries matter: the text captured by COPYRIGHT_LINE_PATTERN is
what ends up in the attribution, so changes here change reported results.
"""

import re

# "Copyright", an optional marker, then the statement itself. The marker is
# one of the copyright sign (also in its latin-1 mojibake form), "(c)", or
# the tail of a templated "copyright holder> =" placeholder. Trailing blanks
# and double quotes are left out of the capture.
COPYRIGHT_LINE_PATTERN = re.compile(
    r"Copyright\s+(?:(?:©|Â©|\(c\)|holder>\s*=)\s+)?(.+?)[\s\"]*$",
    re.IGNORECASE,
)

# A markdown "## Copyright" header opening a multi-line copyright block.
COPYRIGHT_BLOCK_PATTERN = re.compile(r"^\s*##\s*Copyright\s*$", re.IGNORECASE)

# Any other "## " header closes the block.
BLOCK_TERMINATOR_PREFIX = "## "

# "<copyright>. <license reference> license." on a single line.
COPYRIGHT_LICENSE_COMBINATION_PATTERN = re.compile(
    r"(.+)\.\s.+license\.", re.IGNORECASE
)

BLOCK_KEYWORD_PATTERN = re.compile(r"^copyright\s*", re.IGNORECASE)


def match_copyright_line(line: str) -> str | None:
    """Return the raw statement following "Copyright" in the line, if any."""
    match = COPYRIGHT_LINE_PATTERN.search(line)
    if match is None:
        return None
    return match.group(1)


def is_block_start(line: str) -> bool:
    return COPYRIGHT_BLOCK_PATTERN.search(line) is not None


def is_block_end(trimmed_line: str) -> bool:
    return trimmed_line.startswith(BLOCK_TERMINATOR_PREFIX)


def post_process_line(line: str) -> str:
    """
    Drop a license reference sentence glued after a copyright statement,
    e.g. "2023 Jane Doe. Released under the MIT license." -> "2023 Jane Doe".
    Anything else is returned unchanged.
    """
    match = COPYRIGHT_LICENSE_COMBINATION_PATTERN.fullmatch(line)
    if match is not None:
        return match.group(1)
    return line


def strip_block_keyword(block: str) -> str:
    return BLOCK_KEYWORD_PATTERN.sub("", block, count=1).strip()
