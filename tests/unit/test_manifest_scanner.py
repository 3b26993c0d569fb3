# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import pytest

from jar_copyright.copyright_extractor.manifest_scanner import (
    ManifestError,
    ManifestScanner,
    parse_manifest_main_attributes,
)

MANIFEST = (
    "Manifest-Version: 1.0\r\n"
    "Bundle-Name: MicroProfile Context Propagation API\r\n"
    "Bundle-Vendor: Eclipse Foundation\r\n"
    "Bundle-Description: A very long description that does not fit on a sin\r\n"
    " gle line of the manifest\r\n"
    "\r\n"
    "Name: org/eclipse/microprofile/\r\n"
    "Implementation-Vendor: Section Vendor\r\n"
)


def test_parse_main_attributes() -> None:
    attributes = parse_manifest_main_attributes(MANIFEST)
    assert attributes["manifest-version"] == "1.0"
    assert attributes["bundle-vendor"] == "Eclipse Foundation"
    assert (
        attributes["bundle-description"]
        == "A very long description that does not fit on a single line of the manifest"
    )
    # per-entry sections are not part of the main attributes
    assert "implementation-vendor" not in attributes
    assert "name" not in attributes


def test_parse_rejects_invalid_header() -> None:
    with pytest.raises(ManifestError, match="Invalid manifest header at line 2"):
        parse_manifest_main_attributes("Manifest-Version: 1.0\nnot a header\n")


def test_parse_rejects_leading_continuation() -> None:
    with pytest.raises(ManifestError, match="Continuation line without a header"):
        parse_manifest_main_attributes(" orphan\n")


def test_scan_returns_bundle_vendor() -> None:
    assert ManifestScanner().scan_text(MANIFEST) == ["Eclipse Foundation"]


def test_scan_returns_both_vendors_in_configured_order() -> None:
    manifest = (
        "Manifest-Version: 1.0\n"
        "Bundle-Vendor: The Apache Software Foundation\n"
        "implementation-vendor: Apache\n"
    )
    assert ManifestScanner().scan_text(manifest) == [
        "Apache",
        "The Apache Software Foundation",
    ]


def test_scan_skips_empty_vendor() -> None:
    manifest = "Manifest-Version: 1.0\nImplementation-Vendor: \nCreated-By: Maven\n"
    assert ManifestScanner().scan_text(manifest) == []
