"""CLI de seedpass (Typer).

Comandos:
- `generate`: contraseña a partir de cinco cadenas semilla.
- `validate`: comprueba candidatos contra el patrón fijo.

La línea de resultado de cada comando se escribe con `typer.echo` (texto
plano); los detalles opcionales van por Rich a stderr.
"""

from __future__ import annotations

import json
import logging
import random
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.text import Text

from cli.ui_components import build_failures_panel, build_generation_panel, build_validation_table
from core.config import AppSettings
from core.domain.models import SeedInputs
from core.domain.policy import TruncationPolicy
from core.errors import SeedpassError
from core.interfaces.random_source import RandomSource
from core.logging import configure_logging
from core.services.password_generator import generate_password
from core.services.pattern_validator import DEMO_CASES, explain, format_verdict

app = typer.Typer(
    no_args_is_help=True,
    help="Seed-based password generator and fixed-pattern validator.",
)

_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _load_settings() -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as exc:
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"])
            name = f"SEEDPASS_{field.upper()}" if field else "settings"
            _console.print(Text.assemble(("Invalid configuration: ", "red"), f"{name}: {error['msg']}"))
        raise typer.Exit(code=1) from exc


def _build_rng(seed: int | None) -> RandomSource | None:
    # None lets the generator fall back to SystemRandom.
    if seed is None:
        return None
    return random.Random(seed)


@app.command()
def generate(
    first_name: str = typer.Option("khuzaifa", "--first-name", help="First name (2-char prefix)."),
    last_name: str = typer.Option("awan", "--last-name", help="Last name (2-char prefix)."),
    reg_number: str = typer.Option("020", "--reg-number", help="Registration number (used verbatim)."),
    movie: str = typer.Option("The Last Kingdom", "--movie", help="Favourite movie (2-char prefix)."),
    food: str = typer.Option("Chinese Rice", "--food", help="Favourite food (2-char prefix)."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for a reproducible password."),
    max_length: Optional[int] = typer.Option(None, "--max-length", min=2, max=128, help="Maximum password length."),
    truncation: Optional[TruncationPolicy] = typer.Option(
        None,
        "--truncation",
        case_sensitive=False,
        help="reserve keeps the inserted characters; legacy truncates blindly.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show generation details and debug logs."),
) -> None:
    """Generate a password from personal seed strings."""

    settings = _load_settings()
    configure_logging("DEBUG" if verbose else settings.log_level)

    seeds = SeedInputs(
        first_name=first_name,
        last_name=last_name,
        reg_number=reg_number,
        movie=movie,
        food=food,
    )
    rng = _build_rng(seed if seed is not None else settings.random_seed)

    try:
        result = generate_password(
            seeds,
            rng=rng,
            max_length=max_length if max_length is not None else settings.max_password_length,
            policy=truncation or settings.truncation_policy,
        )
    except SeedpassError as exc:
        _console.print(f"[red]Error:[/red] {exc}", highlight=False)
        raise typer.Exit(code=1) from exc

    if as_json:
        typer.echo(json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=2, sort_keys=True))
        return

    typer.echo(f"Generated Password: {result.password}")
    if verbose:
        _console.print(build_generation_panel(result))


@app.command()
def validate(
    candidates: Optional[List[str]] = typer.Argument(None, help="Strings to check (defaults to the demo cases)."),
    explain_rules: bool = typer.Option(False, "--explain", help="Show which pattern rules each candidate breaks."),
    strict: bool = typer.Option(False, "--strict", help="Exit with code 1 if any candidate is invalid."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logs."),
) -> None:
    """Check candidates against the fixed validation pattern."""

    settings = _load_settings()
    configure_logging("DEBUG" if verbose else settings.log_level)

    items = list(candidates) if candidates else list(DEMO_CASES)
    reports = [explain(candidate) for candidate in items]

    for report in reports:
        typer.echo(format_verdict(report.candidate, report.is_valid))

    if explain_rules:
        _console.print(build_validation_table(reports))
        _console.print(build_failures_panel(reports))

    invalid = sum(1 for r in reports if not r.is_valid)
    logger.debug("validated %d candidates, %d invalid", len(reports), invalid)
    if strict and invalid:
        raise typer.Exit(code=1)


def run() -> None:
    app()
