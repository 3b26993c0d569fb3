# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import zipfile
from collections.abc import Callable
from pathlib import Path

import pytest

JarBuilder = Callable[[str, dict[str, str | bytes]], str]


@pytest.fixture
def make_jar(tmp_path: Path) -> JarBuilder:
    """Write a jar with the given entries into tmp_path and return its path."""

    def builder(name: str, entries: dict[str, str | bytes]) -> str:
        jar_path = tmp_path / name
        jar_path.parent.mkdir(parents=True, exist_ok=True)
        with zipfile.ZipFile(jar_path, "w") as jar:
            for entry_name, content in entries.items():
                if isinstance(content, str):
                    content = content.encode("utf-8")
                jar.writestr(entry_name, content)
        return str(jar_path)

    return builder
