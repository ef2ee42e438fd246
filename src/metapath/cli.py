"""Command-line interface for metapath."""
import json
import logging
import os
import sys

import click
from rich.markup import escape
from rich.table import Table

from . import __version__
from .core.components import split_components
from .core.models import Config, MetaTarget
from .core.normalizer import normalize as normalize_path
from .exceptions import MetapathError
from .metadata import YamlMetaReader
from .utils.console import THEMES, make_console

FLAVOURS = ['posix', 'windows', 'native']


def load_config() -> Config:
    """Build the configuration, reporting bad environment values as usage errors."""
    try:
        return Config()
    except ValueError as e:
        raise click.UsageError(f"Invalid configuration: {e}") from e


def setup_logging(debug: bool) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else logging.WARNING
    format_string = '[%(levelname)s] %(message)s'

    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=[logging.StreamHandler(sys.stderr)]
    )


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option('--theme', '-t', type=click.Choice(list(THEMES)), default='manhattan',
              help='Terminal color theme')
@click.version_option(version=__version__)
@click.pass_context
def main(ctx: click.Context, debug: bool, theme: str) -> None:
    """
    Lexical path normalization and path-keyed metadata.

    Examples:

        metapath normalize foo/bar/../baz ./qux//

        metapath components 'C:\\Music\\..\\Video' --flavour windows

        metapath read albums/taggu_item.yml --json
    """
    setup_logging(debug)
    ctx.ensure_object(dict)
    ctx.obj['debug'] = debug
    ctx.obj['console'] = make_console(theme)


@main.command()
@click.argument('paths', nargs=-1, required=True)
@click.option('--flavour', '-f', type=click.Choice(FLAVOURS), default=None,
              help='Path syntax (default: METAPATH_FLAVOUR or native)')
def normalize(paths, flavour):
    """Print the normalized form of each PATH, one per line."""
    flavour = flavour or load_config().flavour
    for path in paths:
        click.echo(normalize_path(path, flavour))


@main.command()
@click.argument('path')
@click.option('--flavour', '-f', type=click.Choice(FLAVOURS), default=None,
              help='Path syntax (default: METAPATH_FLAVOUR or native)')
@click.pass_context
def components(ctx, path, flavour):
    """Show how PATH is split into typed components."""
    console = ctx.obj['console']
    flavour = flavour or load_config().flavour

    table = Table(title=escape(f"Components of {path!r}"), header_style="header")
    table.add_column("#", style="number", justify="right")
    table.add_column("Kind", style="kind")
    table.add_column("Text", style="path")

    for i, component in enumerate(split_components(path, flavour)):
        table.add_row(str(i), component.kind.name, escape(component.text))

    console.print(table)
    console.print(f"[info]normalized:[/info] [path]{escape(normalize_path(path, flavour))}[/path]")


@main.command()
@click.argument('file', type=click.Path())
@click.option('--target', type=click.Choice([t.value for t in MetaTarget]), default=None,
              help='What the file describes (default: inferred from the file name)')
@click.option('--flavour', '-f', type=click.Choice(FLAVOURS), default=None,
              help='Path syntax used for item keys')
@click.option('--json', 'as_json', is_flag=True, help='Print the listing as JSON')
@click.pass_context
def read(ctx, file, target, flavour, as_json):
    """Read a YAML metadata FILE and print its records."""
    console = ctx.obj['console']

    config = load_config()
    if flavour:
        config.flavour = flavour

    if target is None:
        inferred = config.target_for_file(os.path.basename(file))
        if inferred is None:
            raise click.UsageError(
                f"Cannot infer target from {os.path.basename(file)!r}; pass --target"
            )
        meta_target = inferred
    else:
        meta_target = MetaTarget(target)

    try:
        listing = YamlMetaReader(config).from_file(file, meta_target)
    except MetapathError as e:
        console.print(f"[error]> ERROR:[/error] {escape(str(e))}", soft_wrap=True)
        if ctx.obj['debug'] and e.__cause__ is not None:
            console.print(f"[dim]  caused by: {escape(str(e.__cause__))}[/dim]", soft_wrap=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(listing, indent=2, ensure_ascii=False))
        return

    table = Table(title=escape(f"{meta_target.value}: {file}"), header_style="header")
    table.add_column("Path", style="path")
    table.add_column("Field", style="kind")
    table.add_column("Value")

    for item_path, metadata in listing.items():
        if not metadata:
            table.add_row(escape(item_path), "", "")
        for name, value in metadata.items():
            shown = value if isinstance(value, str) else json.dumps(value, ensure_ascii=False)
            table.add_row(escape(item_path), escape(name), escape(shown))

    console.print(table)
    console.print(f"[success]{len(listing)} record(s)[/success]")


if __name__ == '__main__':
    main()
