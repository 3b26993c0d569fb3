# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import re
from enum import Enum

from jar_copyright.config.cli_configs import Config, default_config


class EntryKind(Enum):
    NOTICE = "notice"
    MANIFEST = "manifest"
    IGNORE = "ignore"


class FileClassifier:
    """Decides which archive entries are worth scanning for copyrights.

    Notice candidates are files anywhere in the archive, optionally prefixed
    by a component name and a hyphen, whose base name without a known
    extension is one of the configured notice names (e.g.
    "META-INF/jackson-core-NOTICE", "license.txt", "META-INF/maven/g/a/pom.xml").
    """

    def __init__(self, config: Config = default_config) -> None:
        names = "|".join(re.escape(name) for name in config.notice_file_names)
        extensions = "|".join(
            re.escape(extension) for extension in config.notice_file_extensions
        )
        self._notice_pattern = re.compile(
            rf"(?:.+/)?(?:[^/]+-)?(?:{names})(?:\.(?:{extensions}))?",
            re.IGNORECASE,
        )
        self._manifest_path = config.manifest_entry_path.lower()

    def classify(self, entry_name: str) -> EntryKind:
        file_name = entry_name.lower()
        if self._notice_pattern.fullmatch(file_name):
            return EntryKind.NOTICE
        if file_name == self._manifest_path:
            return EntryKind.MANIFEST
        return EntryKind.IGNORE
