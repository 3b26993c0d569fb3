# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging
import zipfile
import zlib

from jar_copyright.copyright_extractor.file_classifier import EntryKind, FileClassifier
from jar_copyright.copyright_extractor.manifest_scanner import (
    ManifestError,
    ManifestScanner,
)
from jar_copyright.copyright_extractor.scan_result import (
    ArchiveScanResult,
    EntryScanResult,
    ScanStatus,
)
from jar_copyright.copyright_extractor.text_scanner import CopyrightTextScanner

logger = logging.getLogger("jar_copyright")

# Failures reading a single entry; the rest of the archive is still scanned.
ENTRY_READ_ERRORS = (
    OSError,
    EOFError,
    zipfile.BadZipFile,
    zlib.error,
    UnicodeDecodeError,
    ManifestError,
    # unsupported compression method
    NotImplementedError,
    # encrypted entry
    RuntimeError,
)


class ArchiveScanner:
    def __init__(
        self,
        file_classifier: FileClassifier,
        text_scanner: CopyrightTextScanner,
        manifest_scanner: ManifestScanner,
    ) -> None:
        self.file_classifier = file_classifier
        self.text_scanner = text_scanner
        self.manifest_scanner = manifest_scanner

    def scan_archive(self, archive_path: str) -> ArchiveScanResult:
        result = ArchiveScanResult(archive_path=archive_path, status=ScanStatus.SCANNED)
        try:
            with zipfile.ZipFile(archive_path) as zip_file:
                for info in zip_file.infolist():
                    if info.is_dir():
                        continue
                    kind = self.file_classifier.classify(info.filename)
                    if kind == EntryKind.IGNORE:
                        continue
                    result.entries.append(
                        self.scan_entry(zip_file, info, kind, archive_path)
                    )
        except (OSError, zipfile.BadZipFile) as e:
            logger.warning(f"Could not read Zip file {archive_path}: {e}")
            result.status = ScanStatus.FAILED
            result.error = str(e)
        return result

    def scan_entry(
        self,
        zip_file: zipfile.ZipFile,
        info: zipfile.ZipInfo,
        kind: EntryKind,
        archive_path: str,
    ) -> EntryScanResult:
        source = f"{archive_path}/{info.filename}"
        entry_result = EntryScanResult(entry_name=info.filename, kind=kind)
        try:
            with zip_file.open(info) as entry_stream:
                content = entry_stream.read().decode("utf-8")
            if kind == EntryKind.MANIFEST:
                entry_result.copyrights = self.manifest_scanner.scan_text(
                    content, source
                )
            else:
                entry_result.copyrights = self.text_scanner.scan_text(content, source)
        except ENTRY_READ_ERRORS as e:
            logger.warning(f"Could not scan {source} for copyrights: {e}")
            entry_result.error = str(e)
        return entry_result
