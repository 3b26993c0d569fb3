# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import logging
from abc import ABC, abstractmethod

from jar_copyright.adaptors.os import expand_user, path_join
from jar_copyright.artifact_management.artifact import ArtifactDescriptor
from jar_copyright.config.cli_configs import Config, default_config

logger = logging.getLogger("jar_copyright")


class ArtifactResolutionError(Exception):
    """Raised when an artifact descriptor cannot be turned into a local file."""


class ArtifactResolver(ABC):
    @abstractmethod
    def resolve(self, artifact: ArtifactDescriptor) -> str | None:
        raise NotImplementedError


class LocalRepositoryResolver(ArtifactResolver):
    """Maps artifact coordinates onto the layout of a local Maven repository.

    No download is attempted: the returned path may not exist, callers are
    expected to check it.
    """

    def __init__(
        self,
        repository_dir: str = "~/.m2/repository",
        config: Config = default_config,
    ) -> None:
        self.repository_dir = expand_user(repository_dir)
        self.config = config

    def resolve(self, artifact: ArtifactDescriptor) -> str | None:
        if artifact.file is not None:
            return artifact.file

        extension = self.config.packaging_extensions.get(artifact.packaging)
        if extension is None:
            raise ArtifactResolutionError(
                f"Unknown packaging {artifact.packaging} for {artifact}"
            )

        file_name = f"{artifact.artifact_id}-{artifact.version}"
        if artifact.classifier:
            file_name += f"-{artifact.classifier}"
        file_name += f".{extension}"

        resolved = path_join(
            self.repository_dir,
            *artifact.group_id.split("."),
            artifact.artifact_id,
            artifact.version,
            file_name,
        )
        logger.debug("Resolved %s to %s", artifact, resolved)
        return resolved
