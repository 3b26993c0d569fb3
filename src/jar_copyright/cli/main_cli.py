# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

# Main entry point for the jar-copyright CLI tool

import typer

from jar_copyright.cli.extract_copyright_command import (
    extract_copyright,
    scan_archives,
)

app = typer.Typer(add_completion=False)
app.command()(extract_copyright)
app.command()(scan_archives)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        ctx.exit(2)


if __name__ == "__main__":
    app()
