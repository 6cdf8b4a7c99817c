"""clicolor command line.

Inspect how text, rgb values and hex pairs map onto the console palette.
Run with `clicolor --help` or `python -m clicolor --help`.
"""
import click
from rich.console import Console
from rich.table import Table

from .config import Settings
from .errors import ColorError, FormatError
from .logger import setup_logging
from .palette import Palette, rgb_to_index_approx, rgb_to_index_nearest
from .pair import ColorPair, get_context, parse_style_string
from .parse import parse, parse_strict

LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _describe_(color: Palette) -> str:
    return f"{color.name} ({color.index:X}) {color.rgb.hex}"


class PaletteColor(click.ParamType):
    name = "color"

    def convert(self, value, param, ctx):
        if isinstance(value, Palette):
            return value
        try:
            return parse_strict(value)
        except FormatError as error:
            self.fail(str(error), param, ctx)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LEVELS, case_sensitive=False),
    default=None,
    help="Logging level. Defaults to $CLICOLOR_LOG_LEVEL or WARNING.",
)
def cli(log_level: str | None):
    """Console color conversions."""
    setup_logging(log_level or Settings.from_env().LOG_LEVEL)


@cli.command("parse")
@click.argument("text")
@click.option("--default", "default", type=PaletteColor(), help="Color used when TEXT is not understood.")
def parse_command(text: str, default: Palette | None):
    """Parse TEXT as a single console color."""
    click.echo(_describe_(parse(text, Palette.Gray if default is None else default)))


@cli.command()
@click.argument("fore")
@click.argument("back", required=False, default="")
def pair(fore: str, back: str):
    """Build a color pair from FORE and BACK tokens."""
    result = ColorPair.from_text(fore, back)
    click.echo(str(result))
    click.echo(result.to_hex_pair())
    click.echo(result.to_style_string())


@cli.command()
@click.argument("text")
def style(text: str):
    """Parse a `forecolor:NAME; backcolor:NAME;` style string."""
    result = parse_style_string(text, get_context().default)
    click.echo(str(result))
    click.echo(result.to_hex_pair())


@cli.command()
@click.argument("code")
def decode(code: str):
    """Decode a two digit hex pair like 1F."""
    try:
        result = ColorPair.from_hex_pair(code)
    except ColorError as error:
        raise click.BadParameter(str(error), param_hint="CODE") from error
    click.echo(str(result))
    click.echo(result.to_style_string())


@cli.command()
@click.argument("red", type=click.IntRange(0, 255))
@click.argument("green", type=click.IntRange(0, 255))
@click.argument("blue", type=click.IntRange(0, 255))
@click.option("--fast", is_flag=True, help="Use the bit pattern approximation.")
def nearest(red: int, green: int, blue: int, fast: bool):
    """Quantize an rgb value to the console palette."""
    convert = rgb_to_index_approx if fast else rgb_to_index_nearest
    click.echo(_describe_(Palette(convert(red, green, blue))))


@cli.command()
def palette():
    """List the console palette."""
    table = Table(title="Console palette")
    table.add_column("Index", justify="right")
    table.add_column("Hex")
    table.add_column("Name")
    table.add_column("RGB")

    for color in Palette:
        table.add_row(str(color.index), f"{color.index:X}", color.name, color.rgb.hex)

    Console().print(table)


if __name__ == "__main__":
    cli()
