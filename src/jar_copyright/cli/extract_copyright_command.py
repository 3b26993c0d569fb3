# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

# Commands extracting copyright attributions from jar archives

import json
from typing import Annotated, Optional

import typer

from jar_copyright.artifact_management.artifact import ArtifactDescriptor
from jar_copyright.artifact_management.artifact_resolver import (
    LocalRepositoryResolver,
)
from jar_copyright.config.cli_configs import Config, default_config
from jar_copyright.config.json_config_parser import JsonConfigParser
from jar_copyright.copyright_extractor.copyright_extractor import CopyrightExtractor
from jar_copyright.copyright_extractor.filter_rules import FilterRuleSet
from jar_copyright.utils.logging import parse_log_level, setup_logging

FiltersOption = Annotated[
    Optional[str],
    typer.Option(
        "--filters",
        help=(
            "File with one regular expression per line describing text that "
            "is not a copyright statement. Replaces the bundled filters."
        ),
    ),
]
ConfigOption = Annotated[
    Optional[str],
    typer.Option(
        "--config",
        help="JSON file overriding the default extraction settings.",
    ),
]
LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Logging level: DEBUG, INFO, WARNING, ERROR or CRITICAL.",
    ),
]


def _prepare(
    log_level: str, filters: str | None, config_file: str | None
) -> tuple[Config, FilterRuleSet | None]:
    try:
        setup_logging(parse_log_level(log_level))
        config = (
            JsonConfigParser.load_config(config_file)
            if config_file is not None
            else default_config
        )
        filter_rules = FilterRuleSet.from_file(filters) if filters is not None else None
    except FileNotFoundError as e:
        typer.echo(f"Error: File '{e.filename}' not found.", err=True)
        raise typer.Exit(code=1)
    except json.JSONDecodeError as e:
        typer.echo(f"Error: Invalid JSON in configuration file: {e}", err=True)
        raise typer.Exit(code=1)
    except (ValueError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    return config, filter_rules


def extract_copyright(
    coordinates: Annotated[
        list[str],
        typer.Argument(
            help=(
                "Artifact coordinates in the form "
                "group:artifact:version[:packaging[:classifier]]."
            )
        ),
    ],
    repository: Annotated[
        str,
        typer.Option(
            "--repository",
            help="Local Maven repository holding the resolved artifacts.",
        ),
    ] = "~/.m2/repository",
    filters: FiltersOption = None,
    config_file: ConfigOption = None,
    log_level: LogLevelOption = "WARNING",
) -> None:
    """
    Print the copyright attribution of each artifact, one tab separated line
    per artifact. The attribution is empty when nothing was found.
    """
    try:
        artifacts = [ArtifactDescriptor.parse(c) for c in coordinates]
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    config, filter_rules = _prepare(log_level, filters, config_file)
    extractor = CopyrightExtractor(
        LocalRepositoryResolver(repository, config), filter_rules, config
    )
    for artifact in artifacts:
        attribution = extractor.extract_copyright(artifact)
        typer.echo(f"{artifact.coordinates}\t{attribution or ''}")


def scan_archives(
    archives: Annotated[
        list[str],
        typer.Argument(
            help="Jar files of a single component, e.g. its binary and source jars."
        ),
    ],
    filters: FiltersOption = None,
    config_file: ConfigOption = None,
    log_level: LogLevelOption = "WARNING",
) -> None:
    """
    Print the copyright attribution found in the given jar files, taken
    together as one component.
    """
    config, filter_rules = _prepare(log_level, filters, config_file)
    extractor = CopyrightExtractor(
        LocalRepositoryResolver(config=config), filter_rules, config
    )
    attribution = extractor.extract_from_archives(archives)
    if attribution is not None:
        typer.echo(attribution)
