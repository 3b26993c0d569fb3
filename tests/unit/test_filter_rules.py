# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
import pytest_mock

import jar_copyright.copyright_extractor.filter_rules as filter_rules_module
from jar_copyright.copyright_extractor.filter_rules import (
    FilterRuleSet,
    load_default_filter_rules,
)


@pytest.fixture
def reset_default_rules() -> Iterator[None]:
    filter_rules_module._default_rules = None
    yield
    filter_rules_module._default_rules = None


def test_from_lines_skips_comments_and_blank_lines() -> None:
    rules = FilterRuleSet.from_lines(["# a comment", "", "   ", "^notice", "owner\n"])
    assert len(rules) == 2
    assert [p.pattern for p in rules.patterns] == ["^notice", "owner"]


def test_ignore_is_a_case_insensitive_substring_search() -> None:
    rules = FilterRuleSet.from_lines(["name of copyright owner"])
    assert rules.ignore("[yyyy] [NAME OF COPYRIGHT OWNER]")
    assert not rules.ignore("2020 Acme Corp")


def test_empty_rule_set_ignores_nothing() -> None:
    assert not FilterRuleSet().ignore("notice and this permission notice")


def test_invalid_pattern_is_skipped(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        rules = FilterRuleSet.from_lines(["[unclosed", "^owner"])
    assert len(rules) == 1
    assert "Skipping invalid copyright filter '[unclosed'" in caplog.text


def test_from_file(tmp_path: Path) -> None:
    filter_file = tmp_path / "filters.txt"
    filter_file.write_text("# comment\n^holders?\n\\[yyyy\\]\n")
    rules = FilterRuleSet.from_file(str(filter_file))
    assert rules.ignore("HOLDERS BE LIABLE")
    assert rules.ignore("[yyyy] [name of copyright owner]")
    assert not rules.ignore("2020 Acme Corp")


@pytest.mark.parametrize(
    "boilerplate",
    [
        "[yyyy] [name of copyright owner]",
        "{yyyy} {name of copyright owner}",
        "notice and this permission notice shall be included in all",
        "owner or by an individual or Legal Entity authorized to submit on behalf of",
        "license to reproduce, prepare Derivative Works of,",
        "statement to Your modifications and may provide additional or",
        "HOLDERS AND CONTRIBUTORS \"AS IS\" AND ANY EXPRESS OR IMPLIED",
        "HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY,",
        "owner or contributors be liable for any direct, indirect,",
        "law. You must not remove this notice, or any other, from this software.",
    ],
)
def test_default_rules_filter_license_boilerplate(
    reset_default_rules: None, boilerplate: str
) -> None:
    assert load_default_filter_rules().ignore(boilerplate)


@pytest.mark.parametrize(
    "statement",
    [
        "2020 Acme Corp",
        "2002-2023 The Apache Software Foundation",
        "2023 Jane Doe. This is free software, released under the MIT license.",
        "2018 Oracle and/or its affiliates. All rights reserved.",
        "2007-, Tatu Saloranta (tatu.saloranta@iki.fi)",
    ],
)
def test_default_rules_keep_copyright_statements(
    reset_default_rules: None, statement: str
) -> None:
    assert not load_default_filter_rules().ignore(statement)


def test_default_rules_are_loaded_once(
    reset_default_rules: None, mocker: pytest_mock.MockFixture
) -> None:
    mock_read = mocker.patch(
        "jar_copyright.copyright_extractor.filter_rules.read_package_resource",
        return_value="# comment\n^owner\n",
    )
    first = load_default_filter_rules()
    second = load_default_filter_rules()
    assert first is second
    assert len(first) == 1
    mock_read.assert_called_once_with(
        "jar_copyright.copyright_extractor.resources", "copyright-filters.txt"
    )


def test_loaded_default_rules_skip_the_lock(
    reset_default_rules: None, mocker: pytest_mock.MockFixture
) -> None:
    rules = FilterRuleSet.from_lines(["^owner"])
    filter_rules_module._default_rules = rules
    mock_lock = mocker.patch(
        "jar_copyright.copyright_extractor.filter_rules._default_rules_lock"
    )

    assert load_default_filter_rules() is rules
    mock_lock.__enter__.assert_not_called()


def test_missing_resource_falls_back_to_no_filtering(
    reset_default_rules: None,
    mocker: pytest_mock.MockFixture,
    caplog: pytest.LogCaptureFixture,
) -> None:
    mocker.patch(
        "jar_copyright.copyright_extractor.filter_rules.read_package_resource",
        side_effect=FileNotFoundError("copyright-filters.txt"),
    )
    with caplog.at_level(logging.ERROR):
        rules = load_default_filter_rules()
    assert len(rules) == 0
    assert not rules.ignore("[yyyy] [name of copyright owner]")
    assert "Could not read copyright filters" in caplog.text
