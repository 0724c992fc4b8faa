"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from metaform_scaffold.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from metaform_scaffold.run_execution import (
    GenerationRequest,
    GenerationRunError,
    execute_generation_run,
)


class CliError(Exception):
    """Custom CLI error."""


_VERBOSE_HELP = "Enable debug logging."


def _configure_logging(ctx: click.Context, verbose: bool) -> None:
    verbose = verbose or bool((ctx.obj or {}).get("verbose", False))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="metaform-scaffold")
@click.option("--verbose", "-v", is_flag=True, default=False, help=_VERBOSE_HELP)
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Generate metaform form specifications from Swagger definitions."""
    ctx.ensure_object(dict)["verbose"] = verbose


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML generator configuration template to write",
)
@click.pass_context
def generate_config(ctx: click.Context, output_path: str) -> None:
    """Generate a placeholder YAML generator configuration with guidance comments."""
    _configure_logging(ctx, verbose=False)
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON generator configuration file",
)
@click.option(
    "--target",
    "target_names",
    multiple=True,
    help="Only generate the named target (repeatable); defaults to all targets",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help=_VERBOSE_HELP)
@click.pass_context
def generate(
    ctx: click.Context, config_path: str, target_names: tuple[str, ...], verbose: bool
) -> None:
    """Generate form and locale documents for the configured schemas."""
    _configure_logging(ctx, verbose)
    try:
        outcome = execute_generation_run(
            GenerationRequest(config_path=config_path, target_names=tuple(target_names))
        )
    except GenerationRunError as exc:
        raise CliError(str(exc)) from exc

    for path in outcome.written_paths:
        click.echo(str(path))
    problems = [target.error for target in outcome.failed_targets if target.error]
    if outcome.failures:
        details = "; ".join(
            f"{failure.definition_name} ({failure.operation.value}): {failure.message}"
            for failure in outcome.failures
        )
        problems.append(f"{len(outcome.failures)} form(s) could not be generated: {details}")
    if problems:
        raise CliError("\n".join(problems))


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
