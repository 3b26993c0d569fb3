# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from dataclasses import dataclass


@dataclass
class Config:
    notice_file_names: list[str]
    notice_file_extensions: list[str]
    manifest_entry_path: str
    manifest_vendor_attributes: list[str]
    archive_extension: str
    aggregator_packagings: list[str]
    packaging_aliases: dict[str, str]
    source_packaging: str
    source_classifier: str
    copyright_separator: str
    packaging_extensions: dict[str, str]


default_config = Config(
    notice_file_names=[
        "notice",
        "license",
        "licence",  # I know it is misspelled, but it is common in the wild
        "pom",
    ],
    notice_file_extensions=["md", "txt", "xml"],
    manifest_entry_path="meta-inf/manifest.mf",
    manifest_vendor_attributes=[
        "Implementation-Vendor",
        "Bundle-Vendor",
    ],
    archive_extension=".jar",
    # parent projects carry no binary payload
    aggregator_packagings=["pom"],
    # OSGi bundles are published as plain jars
    packaging_aliases={"bundle": "jar"},
    source_packaging="java-source",
    source_classifier="sources",
    copyright_separator="; ",
    packaging_extensions={
        "jar": "jar",
        "java-source": "jar",
        "bundle": "jar",
        "test-jar": "jar",
        "pom": "pom",
        "war": "war",
    },
)
