"""CLI commands for weld-numbering."""

import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import TextIO

import click

from weld_numbering import (
    NamingConvention,
    NumberingConfig,
    WeldNumberValidator,
    default_convention,
    detect_dominant,
    find_gaps,
    format_weld_number,
    parse,
    propose_next_identifiers,
)
from weld_numbering.decoder import WeldNumberDecoder
from weld_numbering.exceptions import WeldNumberingError


def _read_identifiers(identifiers: tuple[str, ...], file: TextIO | None) -> list[str]:
    """Combine weld numbers from arguments and from a one-per-line file."""
    collected = list(identifiers)
    if file is not None:
        collected.extend(line.strip() for line in file if line.strip())
    return collected


def _convention_option(func):
    func = click.option(
        "--padding", type=click.IntRange(min=0), default=0, help="Zero-padding width (default: 0)"
    )(func)
    func = click.option("--prefix", default="", help="Weld number prefix (default: none)")(func)
    return func


file_option = click.option(
    "--file",
    "-f",
    type=click.File("r"),
    help="Read existing weld numbers from a file, one per line ('-' for stdin)",
)


@click.group()
@click.version_option(package_name="weld-numbering")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to weld-numbering.toml (default: search from current directory)",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (default: from config, WARNING)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, log_level: str | None) -> None:
    """weld-numbering - detect weld number conventions and propose the next weld number."""
    try:
        config = (
            NumberingConfig.from_toml(config_path)
            if config_path is not None
            else NumberingConfig.find_and_load()
        )
    except WeldNumberingError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    logging.basicConfig(level=(log_level or config.log_level).upper(), stream=sys.stderr)
    ctx.obj = config


@cli.command("next")
@click.argument("identifiers", nargs=-1)
@file_option
@click.option("--count", "-n", type=click.IntRange(min=1), default=1, help="Number of proposals")
@click.pass_obj
def next_(
    config: NumberingConfig, identifiers: tuple[str, ...], file: TextIO | None, count: int
) -> None:
    """Propose the next weld number(s) for a project."""
    existing = _read_identifiers(identifiers, file)
    proposals = propose_next_identifiers(existing, count, fallback=default_convention(config))
    for proposal in proposals:
        click.echo(proposal)


@cli.command()
@click.argument("identifiers", nargs=-1)
@file_option
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def detect(
    config: NumberingConfig,
    identifiers: tuple[str, ...],
    file: TextIO | None,
    output_json: bool,
) -> None:
    """Detect the dominant weld number convention."""
    existing = _read_identifiers(identifiers, file)
    convention = detect_dominant(existing, fallback=default_convention(config))

    if output_json:
        click.echo(json.dumps(asdict(convention), indent=2))
    else:
        click.echo(f"Convention: {convention.template}")
        click.echo(f"  prefix:        {convention.prefix!r}")
        click.echo(f"  padding_width: {convention.padding_width}")
        click.echo(f"  has_prefix:    {convention.has_prefix}")


@cli.command("parse")
@click.argument("identifier")
@_convention_option
def parse_(identifier: str, prefix: str, padding: int) -> None:
    """Print the sequence value of a weld number."""
    convention = NamingConvention.from_prefix(prefix, padding)
    value = parse(identifier, convention)
    if value is None:
        click.echo(f"Error: {identifier} does not follow {convention.template}", err=True)
        sys.exit(1)
    click.echo(value)


@cli.command("format")
@click.argument("value", type=click.IntRange(min=0))
@_convention_option
def format_(value: int, prefix: str, padding: int) -> None:
    """Render a sequence value as a weld number."""
    click.echo(format_weld_number(value, NamingConvention.from_prefix(prefix, padding)))


@cli.command()
@click.argument("identifiers", nargs=-1)
@file_option
@click.option("--limit", type=click.IntRange(min=1), default=100, help="Maximum gaps to list")
@click.pass_obj
def gaps(
    config: NumberingConfig, identifiers: tuple[str, ...], file: TextIO | None, limit: int
) -> None:
    """List unused weld numbers below the highest one."""
    existing = _read_identifiers(identifiers, file)
    convention = detect_dominant(existing, fallback=default_convention(config))
    numbers = WeldNumberDecoder(convention).decode_all(existing)

    for value in find_gaps(numbers, limit=limit):
        click.echo(format_weld_number(value, convention))


@cli.command()
@click.argument("candidate")
@click.argument("identifiers", nargs=-1)
@file_option
@click.option("--quiet", "-q", is_flag=True, help="Only output result (0=valid, 1=invalid)")
def validate(
    candidate: str, identifiers: tuple[str, ...], file: TextIO | None, quiet: bool
) -> None:
    """Validate a new weld number against existing ones."""
    validator = WeldNumberValidator(_read_identifiers(identifiers, file))
    result = validator.validate(candidate)

    if quiet:
        sys.exit(0 if result.valid else 1)

    for warning in result.warnings or []:
        click.echo(f"Warning: {warning}", err=True)

    if result.valid:
        click.echo(f"✓ Valid weld number: {candidate}")
        sys.exit(0)
    else:
        click.echo(f"✗ Invalid weld number: {result.error}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
