"""Command line interface entry point."""

from __future__ import annotations

import shlex
import sys

import click

from robot_build_step.artifact_resolution import (
    ArtifactKind,
    LogArtifactResolver,
    TranscriptUnavailable,
    read_transcript,
)
from robot_build_step.command_assembly import assemble_command_line
from robot_build_step.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_run_configuration,
    write_placeholder_configuration,
)
from robot_build_step.run_execution import (
    RunExecutionError,
    RunRequest,
    execute_robot_run,
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="robot-build-step")
def cli() -> None:
    """Robot Framework build step utility."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML run configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML run configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="command")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON run configuration file",
)
def show_command(config_path: str) -> None:
    """Print the pybot command line for a run configuration."""
    try:
        command_line = assemble_command_line(load_run_configuration(config_path))
    except (ConfigurationError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(shlex.join(command_line))


@cli.command(name="run")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON run configuration file",
)
@click.option(
    "--workspace",
    "workspace",
    required=False,
    default=".",
    show_default=True,
    type=click.Path(file_okay=False, path_type=str),
    help="Working directory for pybot",
)
@click.option(
    "--transcript",
    "transcript_path",
    required=False,
    type=click.Path(dir_okay=False, path_type=str),
    help="Console log for pybot output, replaced each run (default: <workspace>/console.log)",
)
@click.option(
    "--output-dir",
    "output_dir",
    required=False,
    type=click.Path(path_type=str),
    help="Optional directory for storing the artifact manifest workbook",
)
def run_robot(
    config_path: str, workspace: str, transcript_path: str | None, output_dir: str | None
) -> None:
    """Run pybot and record the artifacts it produced."""
    try:
        outcome = execute_robot_run(
            RunRequest(
                config_path=config_path,
                workspace=workspace,
                transcript_path=transcript_path,
                output_dir=output_dir,
            )
        )
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(outcome.manifest_path))


@cli.command(name="resolve")
@click.option(
    "--transcript",
    "transcript_path",
    required=True,
    type=click.Path(path_type=str),
    help="Console log of a finished pybot run",
)
@click.option(
    "--kind",
    "kinds",
    multiple=True,
    type=click.Choice([kind.value for kind in ArtifactKind]),
    help="Artifact kind to resolve; repeat for several (default: all)",
)
@click.option(
    "--working-dir",
    "working_dir",
    required=False,
    type=click.Path(file_okay=False, path_type=str),
    help="Directory pybot ran in; relative announced paths are resolved against it",
)
def resolve(transcript_path: str, kinds: tuple[str, ...], working_dir: str | None) -> None:
    """Print the artifact paths announced in a console log."""
    try:
        transcript = read_transcript(transcript_path, working_directory=working_dir)
    except TranscriptUnavailable as exc:
        raise CliError(str(exc)) from exc
    selected = tuple(ArtifactKind(kind) for kind in kinds) or tuple(ArtifactKind)
    for kind, path in LogArtifactResolver().resolve_all(transcript, selected).items():
        click.echo(f"{kind.value}: {path if path is not None else 'not found'}")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
