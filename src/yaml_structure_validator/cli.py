"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click
import yaml

from yaml_structure_validator.batch_validation import MessageLevel, ReportMessage
from yaml_structure_validator.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from yaml_structure_validator.document_loading import DocumentParseError, load_document
from yaml_structure_validator.run_execution import (
    RunExecutionError,
    RunRequest,
    execute_validation_run,
)
from yaml_structure_validator.structure_checks import infer_shape_template, shape_template_to_data

logger = logging.getLogger(__name__)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="yaml-structure-validator")
def cli() -> None:
    """Validate YAML documents against required keys, a shape template and type requirements."""


@cli.command(name="validate")
@click.argument("document_paths", nargs=-1, type=click.Path(path_type=str))
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON validation configuration file",
)
@click.option(
    "--key",
    "keys",
    multiple=True,
    help="Required top-level key; repeat for several keys",
)
@click.option(
    "--structure",
    "structure_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to a YAML/JSON shape template",
)
@click.option(
    "--types",
    "types_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to a YAML/JSON mapping of key to type name",
)
@click.option(
    "--write-json",
    is_flag=True,
    default=False,
    help="Write a JSON copy next to every document.",
)
@click.option(
    "--log",
    "log_path",
    required=False,
    type=click.Path(path_type=str),
    help="Write every reported message to this plain text file",
)
@click.option(
    "--report-workbook",
    "report_workbook_path",
    required=False,
    type=click.Path(path_type=str),
    help="Write a summary workbook with one row per document",
)
@click.option(
    "--workers",
    required=False,
    type=click.IntRange(min=1),
    help="Number of documents validated concurrently",
)
@click.option(
    "--allow-duplicate-keys",
    is_flag=True,
    default=False,
    help="Do not report duplicated mapping keys as parser warnings.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Show informational messages.")
def validate(  # pylint: disable=too-many-arguments
    document_paths: tuple[str, ...],
    config_path: str | None,
    keys: tuple[str, ...],
    structure_path: str | None,
    types_path: str | None,
    write_json: bool,
    log_path: str | None,
    report_workbook_path: str | None,
    workers: int | None,
    allow_duplicate_keys: bool,
    verbose: bool,
) -> None:
    """Validate documents given as paths/glob patterns or selected by the configuration."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(message)s")
    try:
        outcome = execute_validation_run(
            RunRequest(
                config_path=config_path,
                document_paths=document_paths,
                keys=keys,
                structure_path=structure_path,
                types_path=types_path,
                write_json=write_json,
                log_path=log_path,
                report_workbook_path=report_workbook_path,
                workers=workers,
                allow_duplicate_keys=allow_duplicate_keys,
            ),
            on_message=_echo_message,
        )
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc

    report = outcome.report
    click.echo(
        f"Out of {report.total_files} files, {report.files_with_errors} have validation errors"
    )
    if outcome.log_path:
        click.echo(f"log written: {outcome.log_path}")
    if outcome.report_workbook_path:
        click.echo(f"report workbook written: {outcome.report_workbook_path}")
    if outcome.has_failures:
        click.get_current_context().exit(1)


@cli.command(name="infer-structure")
@click.argument("document_path", type=click.Path(path_type=str))
def infer_structure(document_path: str) -> None:
    """Print the shape template a sample document follows, as YAML."""
    try:
        loaded = load_document(document_path, allow_duplicate_keys=True)
    except (DocumentParseError, OSError) as exc:
        raise CliError(str(exc)) from exc
    template = shape_template_to_data(infer_shape_template(loaded.node))
    click.echo(yaml.safe_dump(template, sort_keys=False, default_flow_style=False), nl=False)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML validation configuration scaffold to write",
)
def generate_config(output_path: str) -> None:
    """Generate a validation configuration scaffold with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


def _echo_message(message: ReportMessage) -> None:
    if message.level is MessageLevel.INFO:
        logger.info(message.text)
        return
    if message.level is MessageLevel.WARNING:
        click.secho(message.text, fg="yellow", err=True)
        return
    if message.is_word_list:
        click.secho(message.text, fg="bright_black", err=True)
        return
    click.secho(f">> {message.text}", fg="red", err=True)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        exit_code = cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return exit_code if isinstance(exit_code, int) else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
