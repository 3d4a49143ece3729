"""gains: developer CLI over the presentation helpers.

Handy for eyeballing locale output and checking payload sizes before wiring
an image into an API request::

    gains weight 185.5 --unit kg
    gains date 2026-10-19T15:30 --locale de_DE
    gains encode-image meal.png --quality 0.5 | wc -c
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from gains.settings import get_settings
from gains.utils.dates import date_only_rule, date_time_rule
from gains.utils.images import encode_image_bytes
from gains.utils.weight import WeightUnit, format_weight

app = typer.Typer(name="gains", no_args_is_help=True)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Gains presentation helpers."""
    level = logging.DEBUG if verbose else getattr(logging, get_settings().log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(name)s %(levelname)s  %(message)s")


@app.command("weight")
def weight_command(
    value: float = typer.Argument(..., help="Weight value"),
    unit: WeightUnit = typer.Option(WeightUnit.POUNDS, "--unit", "-u", help="Display unit"),
    locale: Optional[str] = typer.Option(None, "--locale", "-l", help="CLDR locale, e.g. en_US"),
):
    """Format a weight for display."""
    typer.echo(format_weight(value, unit, locale=locale))


@app.command("date")
def date_command(
    timestamp: Optional[str] = typer.Argument(None, help="ISO 8601 timestamp (default: now)"),
    date_only: bool = typer.Option(False, "--date-only", "-d", help="Omit the time of day"),
    locale: Optional[str] = typer.Option(None, "--locale", "-l", help="CLDR locale, e.g. en_US"),
):
    """Format a timestamp with the shared workout date rules."""
    if timestamp:
        try:
            value = datetime.fromisoformat(timestamp)
        except ValueError:
            raise typer.BadParameter(f"Not an ISO 8601 timestamp: {timestamp}")
    else:
        value = datetime.now()

    rule = date_only_rule() if date_only else date_time_rule()
    if locale:
        rule = rule.with_locale(locale)
    typer.echo(rule.format(value))


@app.command("encode-image")
def encode_image_command(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Image file"),
    quality: Optional[float] = typer.Option(None, "--quality", "-q", min=0.0, max=1.0, help="JPEG quality 0.0-1.0"),
    max_dimension: Optional[int] = typer.Option(None, "--max-dimension", "-m", min=1, help="Longest side in px"),
    no_resize: bool = typer.Option(False, "--no-resize", help="Keep the original dimensions"),
):
    """Print an image as a JPEG data URL."""
    settings = get_settings()
    quality = settings.image_jpeg_quality if quality is None else quality
    max_dimension = max_dimension or settings.image_max_dimension

    url = encode_image_bytes(
        path.read_bytes(), quality, max_dimension=max_dimension, resize=not no_resize,
    )

    if url is None:
        typer.echo(f"Could not encode {path} as JPEG", err=True)
        raise typer.Exit(1)
    typer.echo(url)
