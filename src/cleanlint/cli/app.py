# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point for the whitespace linter."""

from __future__ import annotations

from typing import Annotated

import typer

from .. import __version__
from ..errors import ConfigError, SinkError
from ..models import ExitCode, FileError
from ..reporting import render_report, write_output
from ..runner import run_lint
from .options import (
    DIRECTORIES_ARGUMENT,
    EMOJI_OPTION,
    GIT_OPTION,
    IGNORE_OPTION,
    JSON_OPTION,
    OUTPUT_OPTION,
    VERBOSE_OPTION,
    YAML_OPTION,
    LintCLIOptions,
    build_lint_options,
)
from .shared import CLIError, CLILogger, build_cli_logger, forward_package_logs
from .typer_ext import GitFlagCommand, create_typer

app = create_typer(
    name="cleanlint",
    help="Check text files for trailing whitespace, missing final newlines, CRLF endings and trailing blank lines.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    """Print the package version and exit when ``--version`` is supplied."""

    if value:
        typer.echo(f"cleanlint {__version__}")
        raise typer.Exit(code=ExitCode.SUCCESS)


@app.command(cls=GitFlagCommand)
def lint(
    directories: DIRECTORIES_ARGUMENT = None,
    json_output: JSON_OPTION = False,
    yaml_output: YAML_OPTION = False,
    ignore: IGNORE_OPTION = None,
    output: OUTPUT_OPTION = None,
    git: GIT_OPTION = None,
    emoji: EMOJI_OPTION = True,
    verbose: VERBOSE_OPTION = False,
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    """Lint every text file under the given directories."""

    _ = version
    options = build_lint_options(
        directories=directories,
        json_output=json_output,
        yaml_output=yaml_output,
        ignore=ignore,
        output=output,
        git=git,
        emoji=emoji,
        verbose=verbose,
    )
    logger = build_cli_logger(emoji=options.emoji, debug=options.verbose)
    with forward_package_logs(logger):
        try:
            exit_code = execute_lint(options, logger=logger)
        except CLIError as exc:
            raise typer.Exit(code=exc.exit_code) from exc
    raise typer.Exit(code=exit_code)


def execute_lint(options: LintCLIOptions, *, logger: CLILogger) -> int:
    """Run the lint pipeline for ``options`` and deliver the report.

    Args:
        options: Normalised CLI options.
        logger: Logger used for diagnostics on standard error.

    Returns:
        int: Exit status derived from the report.

    Raises:
        CLIError: When configuration is invalid or the report cannot be written.
    """

    config = options.to_config()
    logger.debug(
        f"roots={len(config.discovery.roots)} patterns={len(config.discovery.ignore_patterns)} "
        f"tracked={config.discovery.tracked_mode.value} format={config.output.format.value}"
    )

    def _on_file_error(path: str, error: FileError) -> None:
        logger.warn(f"{path}: skipped ({error.kind.value}): {error.message}")

    try:
        report = run_lint(config, on_file_error=_on_file_error)
    except ConfigError as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc), exit_code=ExitCode.ERROR) from exc

    payload = render_report(report, config.output.format)
    try:
        write_output(payload, config.output.output_path)
    except SinkError as exc:
        message = f"lint completed but writing output failed: {exc}"
        logger.fail(message)
        raise CLIError(message, exit_code=ExitCode.ERROR) from exc

    logger.debug(f"scanned={report.files_scanned} issues={report.files_with_issues}")
    if config.output.output_path is not None and options.verbose:
        logger.ok(f"report written to {config.output.output_path}")
    return int(report.exit_code)


def main() -> None:
    """Console-script entry point."""

    app()


__all__ = ["app", "execute_lint", "main"]
