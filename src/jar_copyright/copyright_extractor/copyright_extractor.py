# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Copyright extractor collects copyright statements from the license and
notice files shipped inside the archives of a dependency, falling back on
the vendor attributes of the jar manifest."""

import logging
from collections.abc import Iterable

from jar_copyright.adaptors.os import is_file
from jar_copyright.artifact_management.artifact import ArtifactDescriptor
from jar_copyright.artifact_management.artifact_resolver import (
    ArtifactResolutionError,
    ArtifactResolver,
)
from jar_copyright.config.cli_configs import Config, default_config
from jar_copyright.copyright_extractor.archive_scanner import ArchiveScanner
from jar_copyright.copyright_extractor.file_classifier import FileClassifier
from jar_copyright.copyright_extractor.filter_rules import (
    FilterRuleSet,
    load_default_filter_rules,
)
from jar_copyright.copyright_extractor.manifest_scanner import ManifestScanner
from jar_copyright.copyright_extractor.scan_result import (
    ArchiveScanResult,
    ArtifactScanReport,
    ScanStatus,
)
from jar_copyright.copyright_extractor.text_scanner import CopyrightTextScanner

logger = logging.getLogger("jar_copyright")


class CopyrightExtractor:
    def __init__(
        self,
        resolver: ArtifactResolver,
        filter_rules: FilterRuleSet | None = None,
        config: Config = default_config,
    ) -> None:
        self.resolver = resolver
        self.config = config
        self.filter_rules = (
            filter_rules if filter_rules is not None else load_default_filter_rules()
        )
        self.archive_scanner = ArchiveScanner(
            FileClassifier(config),
            CopyrightTextScanner(self.filter_rules),
            ManifestScanner(config),
        )

    def extract_copyright(self, artifact: ArtifactDescriptor) -> str | None:
        """Return the attribution for the artifact, or None if no copyright
        information was found."""
        report = self.scan_artifact(artifact)
        return report.attribution(self.config.copyright_separator)

    def extract_from_archives(self, archive_paths: Iterable[str]) -> str | None:
        """Treat local archives as the files of a single artifact."""
        report = ArtifactScanReport(artifact=None)
        for archive_path in archive_paths:
            report.archives.append(self._scan_file(archive_path, archive_path))
        return report.attribution(self.config.copyright_separator)

    def scan_artifact(self, artifact: ArtifactDescriptor) -> ArtifactScanReport:
        report = ArtifactScanReport(artifact=artifact)
        if artifact.packaging in self.config.aggregator_packagings:
            logger.debug(f"Skipping {artifact}, {artifact.packaging} has no archive")
            return report

        alias = self.config.packaging_aliases.get(artifact.packaging)
        if alias is not None:
            artifact = artifact.with_packaging(
                alias, artifact.classifier, file=artifact.file
            )

        source_artifact = artifact.with_packaging(
            self.config.source_packaging, self.config.source_classifier
        )
        report.archives.append(self._process_artifact(artifact))
        report.archives.append(self._process_artifact(source_artifact))
        return report

    def _process_artifact(self, artifact: ArtifactDescriptor) -> ArchiveScanResult:
        try:
            artifact_file = self.resolver.resolve(artifact)
        except ArtifactResolutionError as e:
            logger.warning(
                f"Artifact {artifact} could not be resolved, cannot extract copyright information: {e}"
            )
            return ArchiveScanResult(
                archive_path=None, status=ScanStatus.SKIPPED, error=str(e)
            )
        return self._scan_file(artifact_file, str(artifact))

    def _scan_file(self, artifact_file: str | None, name: str) -> ArchiveScanResult:
        if artifact_file is None or not is_file(artifact_file):
            logger.warning(
                f"Artifact {name} has no valid file set, cannot extract copyright information."
            )
            return ArchiveScanResult(
                archive_path=artifact_file,
                status=ScanStatus.SKIPPED,
                error="missing file",
            )
        if not artifact_file.endswith(self.config.archive_extension):
            logger.debug(f"Skipping {artifact_file}, not a {self.config.archive_extension} archive")
            return ArchiveScanResult(archive_path=artifact_file, status=ScanStatus.SKIPPED)
        return self.archive_scanner.scan_archive(artifact_file)
