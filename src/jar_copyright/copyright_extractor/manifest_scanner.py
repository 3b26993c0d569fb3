# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import io
import logging

from jar_copyright.config.cli_configs import Config, default_config

logger = logging.getLogger("jar_copyright")


class ManifestError(ValueError):
    """Raised when a jar manifest does not follow the "Name: value" layout."""


def parse_manifest_main_attributes(content: str) -> dict[str, str]:
    """Parse the main section of a jar manifest.

    The main section ends at the first blank line. Each header is a
    "Name: value" pair; a line starting with a single space continues the
    previous value. Names are returned lower-cased since they are matched
    case-insensitively.
    """
    attributes: dict[str, str] = {}
    last_name: str | None = None
    for line_number, line in enumerate(io.StringIO(content, newline=None), 1):
        line = line.rstrip("\n")
        if not line:
            break
        if line.startswith(" "):
            if last_name is None:
                raise ManifestError(
                    f"Continuation line without a header at line {line_number}"
                )
            attributes[last_name] += line[1:]
            continue
        name, separator, value = line.partition(": ")
        if not separator or not name:
            raise ManifestError(f"Invalid manifest header at line {line_number}: {line}")
        last_name = name.lower()
        attributes[last_name] = value
    return attributes


class ManifestScanner:
    """Reads vendor attributes of a jar manifest. They are not copyright
    statements, but are the best hint available when no license or notice
    file names a copyright holder."""

    def __init__(self, config: Config = default_config) -> None:
        self.vendor_attributes = config.manifest_vendor_attributes

    def scan_text(self, content: str, source: str = "<manifest>") -> list[str]:
        attributes = parse_manifest_main_attributes(content)
        vendors = []
        for attribute in self.vendor_attributes:
            value = attributes.get(attribute.lower(), "").strip()
            if value:
                logger.info(f"Found {attribute} in {source}: {value}")
                vendors.append(value)
        return vendors
