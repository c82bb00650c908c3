"""CLI interface for mastodon-content.

Commands:
    setup   - Choose the parser backend and default output format
    parse   - Parse status content markup and print it as JSON, text or CSV
    status  - Show the effective configuration
"""

import sys
import tomllib
from pathlib import Path

import click

from .config import (
    CONFIG_FILE,
    OUTPUT_FORMATS,
    AppConfig,
    config_exists,
    load_config_or_default,
    save_config,
)
from .logging_config import setup_logging
from .visit import DEFAULT_PARSER


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--config", type=click.Path(), default=None, help="Config file path")
@click.pass_context
def main(ctx, verbose, config):
    """Mastodon Content — Turn status HTML into paragraphs, links, mentions and hashtags."""
    setup_logging(debug=verbose)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = Path(config) if config else CONFIG_FILE


def _load(config_path: Path) -> AppConfig:
    try:
        return load_config_or_default(config_path)
    except (ValueError, tomllib.TOMLDecodeError) as e:
        click.echo(f"Error: Invalid config {config_path}: {e}", err=True)
        sys.exit(1)


@main.command()
@click.pass_context
def setup(ctx):
    """Write a config file with parser and output defaults."""
    config_path = ctx.obj["config_path"]

    click.echo("Mastodon Content — Setup")
    click.echo("=" * 40)
    click.echo()
    click.echo("The parser backend is the BeautifulSoup tree builder used to read markup.")
    click.echo("'html5lib' follows browser parsing rules; 'html.parser' and 'lxml' are faster.")
    click.echo()

    backend = click.prompt("parser backend", default=DEFAULT_PARSER)
    output_format = click.prompt(
        "default output format",
        type=click.Choice(OUTPUT_FORMATS),
        default="tree",
    )
    indent = click.prompt("JSON indent", type=click.IntRange(min=0), default=2)

    config = AppConfig(
        parser_backend=backend,
        output_format=output_format,
        indent=indent,
    )
    save_config(config, config_path)
    click.echo(f"\nConfig saved to {config_path}")


@main.command()
@click.argument("input_file", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format (default from config: tree)",
)
@click.option("--parser", "backend", default=None, help="BeautifulSoup parser backend")
@click.option("-o", "--output", type=click.Path(), default=None, help="Output file")
@click.pass_context
def parse(ctx, input_file, output_format, backend, output):
    """Parse status content.

    INPUT_FILE holds the HTML of a status' content field. Reads stdin when
    omitted or '-'.
    """
    from bs4 import FeatureNotFound

    from .converter import content_to_json, events_to_json, links_to_csv
    from .parse import parse_content
    from .visitors import extract_text, record_events

    config = _load(ctx.obj["config_path"])
    output_format = output_format or config.output_format
    backend = backend or config.parser_backend
    indent = config.indent or None

    markup = input_file.read()

    try:
        if output_format == "events":
            result = events_to_json(record_events(markup, parser=backend), indent=indent)
        elif output_format == "text":
            result = extract_text(markup, parser=backend) + "\n"
        elif output_format == "links":
            result = links_to_csv(parse_content(markup, parser=backend))
        else:
            result = content_to_json(parse_content(markup, parser=backend), indent=indent)
    except FeatureNotFound:
        click.echo(f"Error: Parser backend {backend!r} is not available.", err=True)
        sys.exit(1)

    if output:
        output_path = Path(output)
        output_path.write_text(result, encoding="utf-8")
        click.echo(f"Output written to {output_path}", err=True)
    else:
        click.echo(result, nl=False)


@main.command()
@click.pass_context
def status(ctx):
    """Show the effective configuration."""
    config_path = ctx.obj["config_path"]
    has_config = config_exists(config_path)

    click.echo("Mastodon Content — Status")
    click.echo("=" * 40)
    click.echo(f"Config: {'Found' if has_config else 'Not configured'} ({config_path})")

    config = _load(config_path)
    click.echo(f"Parser backend: {config.parser_backend}")
    click.echo(f"Output format: {config.output_format}")
    click.echo(f"JSON indent: {config.indent}")

    if not has_config:
        click.echo("\nRun 'mastodon-content setup' to change the defaults.")
