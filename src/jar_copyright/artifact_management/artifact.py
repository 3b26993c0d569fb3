# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

from dataclasses import dataclass, replace

@dataclass(frozen=True)
class ArtifactDescriptor:
    """Coordinates of a build dependency, plus its local file once resolved."""

    group_id: str
    artifact_id: str
    version: str
    packaging: str = "jar"
    classifier: str | None = None
    scope: str | None = None
    file: str | None = None

    @staticmethod
    def parse(coordinates: str) -> "ArtifactDescriptor":
        """Parse a coordinate string into an ArtifactDescriptor.

        Handles:
          - group:artifact:version
          - group:artifact:version:packaging
          - group:artifact:version:packaging:classifier
        """
        parts = coordinates.strip().split(":")
        if len(parts) < 3 or len(parts) > 5 or not all(parts):
            raise ValueError(
                f"Invalid artifact coordinates: {coordinates}. Expected format: "
                "'group:artifact:version[:packaging[:classifier]]'"
            )
        group_id, artifact_id, version = parts[:3]
        packaging = parts[3] if len(parts) > 3 else "jar"
        classifier = parts[4] if len(parts) > 4 else None
        return ArtifactDescriptor(
            group_id=group_id,
            artifact_id=artifact_id,
            version=version,
            packaging=packaging,
            classifier=classifier,
        )

    def with_packaging(
        self, packaging: str, classifier: str | None, file: str | None = None
    ) -> "ArtifactDescriptor":
        """Derive a sibling descriptor with the same group, artifact and version.

        The sibling refers to a different file, so the resolved file is
        dropped unless a new one is given.
        """
        return replace(self, packaging=packaging, classifier=classifier, file=file)

    @property
    def coordinates(self) -> str:
        coordinates = f"{self.group_id}:{self.artifact_id}:{self.version}:{self.packaging}"
        if self.classifier:
            coordinates += f":{self.classifier}"
        return coordinates

    def __str__(self) -> str:
        return self.coordinates
