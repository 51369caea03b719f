"""Typer-based command line interface.

``chance generate METHOD`` calls one generator and prints its results;
``chance methods`` lists the available generator names.  Option values given
with ``--opt key=value``, positional values given with ``--arg`` and seed
components given with ``--seed`` are parsed as YAML scalars, so ``--opt
max=10`` passes an integer and ``--opt casing=upper`` a string.

Exit codes
----------
0 success
2 usage error (unknown generator, malformed or unexpected options)
4 configuration error
5 generator error (range, invalid argument or exhaustion)
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Any, List, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import load_config
from .generator import Chance
from .utils.errors import ChanceError
from .utils.logging import configure, get_logger

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

LOG = get_logger(__name__)

app = typer.Typer(
    name="chance",
    help="Seeded random data generation. Use 'chance generate METHOD' to produce values.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _scalar(raw: str) -> Any:
    """Parse ``raw`` as a YAML scalar, falling back to the plain string."""

    try:
        value = yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw
    return raw if value is None and raw.strip() else value


def _parse_opts(pairs: list[str]) -> dict[str, Any]:
    options: dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            _safe_exit(2, f"--opt expects key=value, got {pair!r}")
        options[key.strip()] = _scalar(raw)
    return options


def _render(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, default=str, ensure_ascii=False)
    if isinstance(value, bytes):
        return value.hex()
    return str(value)


@app.callback()
def main() -> None:
    """Entry point for the chance command group."""
    pass


@app.command()
def generate(  # noqa: PLR0913
    method: str = typer.Argument(..., help="Generator to call, e.g. 'name' or 'cc'"),
    seed: Optional[List[str]] = typer.Option(  # noqa: B008
        None, "--seed", "-s", help="Seed component; repeat to combine several"
    ),
    count: Optional[int] = typer.Option(  # noqa: B008
        None, "--count", "-n", min=1, help="Number of values to generate"
    ),
    opts: Optional[List[str]] = typer.Option(  # noqa: B008
        None, "--opt", "-o", help="Generator option as key=value; repeatable"
    ),
    args: Optional[List[str]] = typer.Option(  # noqa: B008
        None, "--arg", "-a", help="Positional generator argument; repeatable"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    as_json: bool = typer.Option(  # noqa: B008
        False, "--json", help="Print all values as one JSON array"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Log progress messages to stderr"
    ),
) -> None:
    """Generate COUNT values with METHOD and print them, one per line."""

    try:
        cfg = load_config(config_path)
    except (ValidationError, OSError, yaml.YAMLError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])

    settings = cfg.logging.model_copy(update={"level": "INFO"}) if verbose else cfg.logging
    configure(settings)

    if method not in Chance.generator_names():
        _safe_exit(2, f"Unknown generator {method!r}; run 'chance methods' to list them.")

    try:
        if seed:
            chance = Chance(*[_scalar(part) for part in seed], config=cfg)
        else:
            chance = Chance.from_config(cfg)
    except ChanceError as exc:
        _safe_exit(2, f"Bad seed: {exc}")
    LOG.info("generating %s with %r", method, chance)

    options = _parse_opts(opts or [])
    positional = [_scalar(raw) for raw in args or []]
    fn = getattr(chance, method)
    total = count if count is not None else cfg.cli.count

    results: list[Any] = []
    try:
        for _ in range(total):
            results.append(fn(*positional, **options))
    except ChanceError as exc:
        _safe_exit(5, f"{type(exc).__name__}: {exc}")
    except TypeError as exc:
        _safe_exit(2, f"Bad arguments for {method!r}: {exc}")
    LOG.info("generated %d value(s)", len(results))

    if as_json:
        typer.echo(json.dumps(results, default=str, ensure_ascii=False))
        return
    for value in results:
        typer.echo(_render(value))


@app.command()
def methods() -> None:
    """List the available generator names."""

    for name in Chance.generator_names():
        typer.echo(name)


if __name__ == "__main__":  # pragma: no cover
    app()
