"""Typer-based command line interface for previewing generators.

``combinable sample KIND`` builds a generator for ``integers``,
``characters`` or ``strings``, applies the requested shape and refinements
and prints one sample per line.  ``None`` from null injection prints as
``null``.

Exit codes
----------
0 success
4 configuration error (bad config file, bad shape parameters)
5 constraint failure (filter/unique could not be satisfied)
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError

from .config import load_config
from .generators import DrawContext, Generator, characters, integers, strings
from .generators.domains import width_for
from .source import backend_for
from .utils.constants import MAX_CODE_POINT
from .utils.errors import ConfigurationError, ConstraintFailure
from .utils.logging import configure_logging, get_logger

log = get_logger(__name__)

app = typer.Typer(
    name="combinable",
    help="Preview constrained random generators. Use 'combinable sample' to draw values.",
)


class Kind(str, Enum):
    integers = "integers"
    characters = "characters"
    strings = "strings"


INTEGER_PRESETS = ("positive", "negative", "even", "odd", "ascii")
CHARACTER_PRESETS = (
    "alpha",
    "numeric",
    "alpha_numeric",
    "ascii",
    "uppercase",
    "lowercase",
    "korean",
    "emoji",
    "whitespace",
)
STRING_PRESETS = ("numeric", "alphabetic", "alpha_numeric", "ascii", "korean")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _apply_preset(gen: Generator, preset: str | None, allowed: tuple[str, ...]) -> Generator:
    """Call the shape method named ``preset`` on ``gen``."""

    if preset is None:
        return gen
    shape = getattr(gen, preset, None) if preset in allowed else None
    if shape is None:
        raise ConfigurationError(f"preset {preset!r} is not available for {gen!r}")
    return shape()


def _build(
    kind: Kind,
    context: DrawContext,
    *,
    width: int,
    minimum: int | None,
    maximum: int | None,
    preset: str | None,
    min_length: int | None,
    max_length: int | None,
) -> Generator:
    """Return the shaped base generator for ``kind``."""

    if preset is not None and (minimum is not None or maximum is not None):
        raise ConfigurationError("--preset cannot be combined with --min/--max")

    if kind is Kind.integers:
        int_gen = _apply_preset(integers(width, context=context), preset, INTEGER_PRESETS)
        if minimum is not None or maximum is not None:
            limits = width_for(width)
            int_gen = int_gen.with_range(
                minimum if minimum is not None else limits.minimum,
                maximum if maximum is not None else limits.maximum,
            )
        return int_gen

    if kind is Kind.characters:
        char_gen = _apply_preset(characters(context=context), preset, CHARACTER_PRESETS)
        if minimum is not None or maximum is not None:
            char_gen = char_gen.with_range(
                minimum if minimum is not None else 0,
                maximum if maximum is not None else MAX_CODE_POINT,
            )
        return char_gen

    str_gen = _apply_preset(strings(context=context), preset, STRING_PRESETS)
    if min_length is not None or max_length is not None:
        str_gen = str_gen.with_length(
            min_length if min_length is not None else context.min_length,
            max_length if max_length is not None else context.max_length,
        )
    return str_gen


@app.callback()
def main() -> None:
    """Entry point for the combinable command group."""
    pass


@app.command()
def sample(  # noqa: PLR0913
    kind: Kind = typer.Argument(..., help="Generator kind"),  # noqa: B008
    count: int = typer.Option(5, "--count", "-n", min=1, help="Number of samples"),  # noqa: B008
    width: int = typer.Option(32, help="Integer width in bits (8, 16, 32, 64)"),  # noqa: B008
    minimum: Optional[int] = typer.Option(  # noqa: B008
        None, "--min", help="Inclusive lower bound (integer or code point)"
    ),
    maximum: Optional[int] = typer.Option(  # noqa: B008
        None, "--max", help="Inclusive upper bound (integer or code point)"
    ),
    preset: Optional[str] = typer.Option(  # noqa: B008
        None,
        "--preset",
        help=(
            "Shape preset, e.g. positive/even/ascii for integers or alpha/korean for text. "
            "Cannot be combined with --min/--max"
        ),
    ),
    min_length: Optional[int] = typer.Option(None, help="Minimum string length"),  # noqa: B008
    max_length: Optional[int] = typer.Option(None, help="Maximum string length"),  # noqa: B008
    unique: bool = typer.Option(False, "--unique", help="Never repeat a value"),  # noqa: B008
    null_probability: float = typer.Option(  # noqa: B008
        0.0, "--null-probability", help="Probability of emitting null instead of a value"
    ),
    seed: Optional[int] = typer.Option(None, help="Seed for reproducible output"),  # noqa: B008
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit a JSON array"),  # noqa: B008
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit debug logging to stderr"
    ),
) -> None:
    """Draw ``count`` values from a shaped and refined generator."""

    configure_logging(verbose)

    try:
        cfg = load_config(config_path)
    except (ValidationError, yaml.YAMLError, OSError, ValueError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    log.debug("loaded config (max_tries=%d)", cfg.retry.max_tries)

    try:
        context = DrawContext.from_config(
            cfg, source=backend_for(seed if seed is not None else cfg.seed.value)
        )
        gen = _build(
            kind,
            context,
            width=width,
            minimum=minimum,
            maximum=maximum,
            preset=preset,
            min_length=min_length,
            max_length=max_length,
        )
        if unique:
            gen = gen.unique()
        if null_probability:
            gen = gen.inject_null(null_probability)
    except ConfigurationError as exc:
        _safe_exit(4, str(exc))

    try:
        values = gen.samples(count)
    except ConstraintFailure as exc:
        _safe_exit(5, str(exc))

    if as_json:
        typer.echo(json.dumps(values, ensure_ascii=False))
        return
    for value in values:
        typer.echo("null" if value is None else str(value))


__all__ = ["app"]
