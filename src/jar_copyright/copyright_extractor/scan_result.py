# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from dataclasses import dataclass, field
from enum import Enum

from jar_copyright.artifact_management.artifact import ArtifactDescriptor
from jar_copyright.copyright_extractor.file_classifier import EntryKind
from jar_copyright.utils.collections import unique_in_order


class ScanStatus(Enum):
    SCANNED = "scanned"
    SKIPPED = "skipped"  # unresolved, missing or not an archive
    FAILED = "failed"  # archive could not be opened or listed


@dataclass
class EntryScanResult:
    entry_name: str
    kind: EntryKind
    copyrights: list[str] = field(default_factory=list)
    error: str | None = None


@dataclass
class ArchiveScanResult:
    archive_path: str | None
    status: ScanStatus
    entries: list[EntryScanResult] = field(default_factory=list)
    error: str | None = None

    def _copyrights_of(self, kind: EntryKind) -> list[str]:
        return [
            copyright_item
            for entry in self.entries
            if entry.kind == kind
            for copyright_item in entry.copyrights
        ]

    @property
    def text_copyrights(self) -> list[str]:
        return self._copyrights_of(EntryKind.NOTICE)

    @property
    def manifest_copyrights(self) -> list[str]:
        return self._copyrights_of(EntryKind.MANIFEST)

    @property
    def failed_entries(self) -> list[EntryScanResult]:
        return [entry for entry in self.entries if entry.error is not None]


@dataclass
class ArtifactScanReport:
    """Everything found for one artifact across its primary and source archives."""

    artifact: ArtifactDescriptor | None
    archives: list[ArchiveScanResult] = field(default_factory=list)

    @property
    def text_copyrights(self) -> list[str]:
        return unique_in_order(
            copyright_item
            for archive in self.archives
            for copyright_item in archive.text_copyrights
        )

    @property
    def manifest_copyrights(self) -> list[str]:
        return unique_in_order(
            copyright_item
            for archive in self.archives
            for copyright_item in archive.manifest_copyrights
        )

    @property
    def scanned(self) -> bool:
        return any(archive.status == ScanStatus.SCANNED for archive in self.archives)

    def attribution(self, separator: str = "; ") -> str | None:
        # Manifest vendors only stand in when no text file named a holder.
        copyrights = self.text_copyrights or self.manifest_copyrights
        if not copyrights:
            return None
        return separator.join(copyrights)
