"""CLI module for encoding, decoding, shortening and recovering codes."""

import os
import warnings
from typing import Annotated, Optional, cast

import click
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from olcodec._constants import DEFAULT_CODE_LENGTH, MAX_DIGIT_COUNT
from olcodec._exceptions import InvalidCodeError, InvalidCodeLengthError
from olcodec.code_area import LatLon

app = typer.Typer(
    context_settings={"help_option_names": ["-h", "--help"]},
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Allows passing negative coordinates (like `-1.2,5`) without the `--` separator.
_COORDINATES_CONTEXT = {"ignore_unknown_options": True}


def _console(stderr: bool = False) -> Console:
    force_terminal = os.getenv("FORCE_TERMINAL_MODE", "false").lower() == "true"
    return Console(stderr=stderr, force_terminal=force_terminal or None)


def _version_callback(value: bool) -> None:
    if value:
        from olcodec import __app_name__, __version__

        typer.echo(f"{__app_name__} {__version__}")
        raise typer.Exit()


def _report_warnings(caught: list[warnings.WarningMessage]) -> None:
    console = _console(stderr=True)
    for warning in caught:
        console.print(f"[yellow]Warning:[/yellow] {warning.message}")


class LatLonParser(click.ParamType):  # type: ignore
    """Parser for location in `LAT,LON` form."""

    name = "LAT,LON"

    def convert(self, value, param=None, ctx=None):  # type: ignore
        """Convert parameter value."""
        if isinstance(value, LatLon):
            return value
        try:
            latitude, longitude = (float(x.strip()) for x in value.split(","))
        except ValueError:  # ValueError raised when passing non-numbers or wrong count
            raise typer.BadParameter(
                "Cannot parse provided location."
                " Valid value must contain 2 floating point numbers (latitude and longitude)"
                " separated by a comma."
            ) from None
        return LatLon(latitude, longitude)


@app.callback()  # type: ignore
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-v",
            help="Show the application's version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    OLCodec CLI.

    Encodes locations into Open Location Codes, decodes them into areas,
    shortens codes relative to a reference location and recovers full codes.
    """


@app.command(context_settings=_COORDINATES_CONTEXT)  # type: ignore
def encode(
    location: Annotated[
        str,
        typer.Argument(
            help="Location to encode in the [bold dark_orange]LAT,LON[/bold dark_orange] form.",
            metavar="LAT,LON",
            click_type=LatLonParser(),
            show_default=False,
        ),
    ],
    code_length: Annotated[
        int,
        typer.Option(
            "--length",
            "--code-length",
            help=(
                "Number of significant digits of the code."
                " Lengths below 10 must be even."
                f" Lengths above {MAX_DIGIT_COUNT} will be clamped."
            ),
            show_default=True,
        ),
    ] = DEFAULT_CODE_LENGTH,
) -> None:
    """Encode a location into a code."""
    from olcodec.codec import encode_location

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        try:
            code = encode_location(cast("LatLon", location), code_length=code_length)
        except InvalidCodeLengthError as ex:
            raise typer.BadParameter(str(ex), param_hint="'--length'") from None
    _report_warnings(caught)

    typer.echo(code)


@app.command()  # type: ignore
def decode(
    code: Annotated[str, typer.Argument(help="Code to decode.", show_default=False)],
    geojson: Annotated[
        bool,
        typer.Option(
            "--geojson/",
            help="Whether to print the area of the code as a GeoJSON geometry.",
            show_default=False,
        ),
    ] = False,
) -> None:
    """Decode a code into the area it represents."""
    from olcodec.codec import decode as decode_code

    try:
        area = decode_code(code)
    except InvalidCodeError as ex:
        raise typer.BadParameter(str(ex), param_hint="'CODE'") from None

    if geojson:
        from shapely import to_geojson

        typer.echo(to_geojson(area.to_geometry()))
        return

    center = area.center()
    table = Table(title=escape(code), show_header=True)
    table.add_column("Property")
    table.add_column("Latitude", justify="right")
    table.add_column("Longitude", justify="right")
    table.add_row("South-west", f"{area.lo.lat:.10f}", f"{area.lo.lon:.10f}")
    table.add_row("North-east", f"{area.hi.lat:.10f}", f"{area.hi.lon:.10f}")
    table.add_row("Center", f"{center.lat:.10f}", f"{center.lon:.10f}")
    _console().print(table)
    _console().print(f"Code length: [bold]{area.length}[/bold]")


@app.command(context_settings=_COORDINATES_CONTEXT)  # type: ignore
def shorten(
    code: Annotated[str, typer.Argument(help="Full code to shorten.", show_default=False)],
    reference: Annotated[
        str,
        typer.Argument(
            help="Reference location in the [bold dark_orange]LAT,LON[/bold dark_orange] form.",
            metavar="LAT,LON",
            click_type=LatLonParser(),
            show_default=False,
        ),
    ],
) -> None:
    """Shorten a full code relative to a reference location."""
    from olcodec.shorten import shorten as shorten_code

    try:
        result = shorten_code(code, *cast("LatLon", reference))
    except InvalidCodeError as ex:
        raise typer.BadParameter(str(ex), param_hint="'CODE'") from None

    typer.echo(result)


@app.command(context_settings=_COORDINATES_CONTEXT)  # type: ignore
def recover(
    short_code: Annotated[
        str,
        typer.Argument(help="Short code to recover.", metavar="CODE", show_default=False),
    ],
    reference: Annotated[
        str,
        typer.Argument(
            help="Reference location in the [bold dark_orange]LAT,LON[/bold dark_orange] form.",
            metavar="LAT,LON",
            click_type=LatLonParser(),
            show_default=False,
        ),
    ],
) -> None:
    """Recover the full code nearest to a reference location from a short code."""
    from olcodec.shorten import recover_nearest

    try:
        result = recover_nearest(short_code, *cast("LatLon", reference))
    except InvalidCodeError as ex:
        raise typer.BadParameter(str(ex), param_hint="'CODE'") from None

    typer.echo(result)


@app.command()  # type: ignore
def check(
    codes: Annotated[
        list[str],
        typer.Argument(help="Codes to check.", metavar="CODE...", show_default=False),
    ],
) -> None:
    """Classify codes as valid, short or full and show their length."""
    from olcodec.codec import code_length, is_full, is_short, is_valid

    table = Table(show_header=True)
    table.add_column("Code")
    table.add_column("Valid")
    table.add_column("Short")
    table.add_column("Full")
    table.add_column("Length", justify="right")

    for code in codes:
        valid = is_valid(code)
        table.add_row(
            escape(code),
            str(valid),
            str(is_short(code)),
            str(is_full(code)),
            str(code_length(code)) if valid else "-",
        )

    _console().print(table)
