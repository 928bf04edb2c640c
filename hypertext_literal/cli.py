"""
Developer tooling for hypertext-literal.
Escapes text, serializes attribute sets, shows the markup context after each
fragment, and renders template files with context-aware escaping.
"""

from __future__ import annotations

import json
import logging
import string
from pathlib import Path

import click
from .attributes import serialize_attributes
from .builder import HTMLBuilder
from .config import ConfigError, HypertextConfig, build_config
from .escaping import escape
from .parser import ContextParser

__all__ = ["cli"]


def _load_json_object(text: str, source: str) -> dict:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as error:
        raise click.BadParameter(f"{source} is not valid JSON: {error}") from error
    if not isinstance(data, dict):
        raise click.BadParameter(f"{source} must be a JSON object")
    return data


def render_template_text(
    template: str, values: dict, config: HypertextConfig | None = None
) -> str:
    """Render `{name[:spec]}` fields of `template` with context-aware escaping.

    Literal braces are written as ``{{`` and ``}}``. The ``unsafe`` and
    ``comment`` specs select explicit insertion modes; other specs are applied
    with `format`.

    Raises:
        KeyError: If a field name has no value.
        ValueError: If the template has unbalanced braces.
        TypeError: If a format spec does not apply to its value.
    """
    builder = HTMLBuilder(config)
    for literal, field_name, format_spec, conversion in string.Formatter().parse(template):
        builder.append_literal(literal)
        if field_name is None:
            continue
        builder.append_field(values[field_name], conversion, format_spec or "")
    return str(builder.build())


@click.group()
@click.version_option(package_name="hypertext-literal")
@click.option("--verbose", is_flag=True, help="Log each interpolation to stderr")
@click.option("--markup-separator", help="Separator between items of a markup list")
@click.option("--attribute-separator", help="Separator between items of an attribute list")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool = False,
    markup_separator: str | None = None,
    attribute_separator: str | None = None,
):
    """
    Context-aware HTML building tools.

    Args:
        ctx: Click context used to share the loaded configuration.
        verbose: Enable debug logging.
        markup_separator: Override for the markup list separator.
        attribute_separator: Override for the attribute list separator.

    Raises:
        click.BadParameter: If the configuration is invalid.

    Examples:
        hypertext-literal escape "<b>bold</b>"
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    try:
        config = build_config(
            Path.cwd(),
            markup_separator=markup_separator,
            attribute_separator=attribute_separator,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error
    ctx.obj = config


@cli.command("escape")
@click.argument("text")
def escape_command(text: str):
    """Print TEXT with markup characters replaced by entity references."""
    click.echo(escape(text))


@cli.command("attributes")
@click.argument("data")
@click.option("--element", default="", help="Element the attributes belong to")
@click.pass_obj
def attributes_command(config: HypertextConfig, data: str, element: str):
    """Print the canonical attribute string for a JSON object."""
    entries = _load_json_object(data, "DATA")
    click.echo(serialize_attributes(entries, element, config.nested_attribute_groups))


@cli.command("context")
@click.argument("fragments", nargs=-1, required=True)
def context_command(fragments: tuple[str, ...]):
    """Print the markup context in effect after each fragment."""
    parser = ContextParser()
    for fragment in fragments:
        click.echo(str(parser.feed(fragment)))


@cli.command("render")
@click.argument("template", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--values",
    "values_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON file holding an object of template values",
)
@click.pass_obj
def render_command(config: HypertextConfig, template: Path, values_path: Path | None):
    """
    Render TEMPLATE, replacing {name} fields with escaped values.

    Raises:
        click.BadParameter: If the values file is not a JSON object.
        click.ClickException: If the template cannot be read, has unbalanced
            braces, references a missing value, or applies a format spec the
            value does not support.
    """
    values: dict = {}
    try:
        if values_path is not None:
            values = _load_json_object(values_path.read_text(encoding="utf-8"), str(values_path))
        text = template.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as error:
        raise click.ClickException(str(error)) from error

    try:
        rendered = render_template_text(text, values, config)
    except KeyError as error:
        raise click.ClickException(f"{template}: no value for field {error}") from error
    except (ValueError, TypeError) as error:
        raise click.ClickException(f"{template}: {error}") from error

    click.echo(rendered, nl=False)


if __name__ == "__main__":
    cli()
