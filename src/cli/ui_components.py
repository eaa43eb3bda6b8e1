"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Los comandos imprimen su línea de resultado en texto plano; Rich solo se
  usa para los detalles opcionales (tablas, paneles).
"""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import GeneratedPassword, ValidationReport
from core.services.pattern_validator import RULE_DESCRIPTIONS, RULES


def build_validation_table(reports: list[ValidationReport]) -> Table:
    """Tabla con una fila por candidato y una columna por regla del patrón."""

    table = Table(title="Pattern rules")
    table.add_column("Candidate", style="cyan", no_wrap=True)
    for name, _, _ in RULES:
        table.add_column(name, justify="center")
    table.add_column("Result", style="bold")

    for report in reports:
        cells = [
            Text("ok", style="green") if name not in report.failed_rules else Text("fail", style="red")
            for name, _, _ in RULES
        ]
        verdict = Text("valid", style="green") if report.is_valid else Text("invalid", style="red")
        table.add_row(Text(report.candidate), *cells, verdict)
    return table


def build_generation_panel(result: GeneratedPassword) -> Panel:
    """Panel con los detalles de una generación (modo --verbose)."""

    body = Text()
    body.append("Base: ", style="bold")
    body.append(f"{result.base} ({len(result.base)} chars)\n")
    body.append("Policy: ", style="bold")
    body.append(result.policy.label() + "\n")
    body.append("Uppercase: ", style="bold")
    body.append("yes\n" if result.has_uppercase else "no\n", style="green" if result.has_uppercase else "red")
    body.append("Special: ", style="bold")
    body.append("yes" if result.has_special else "no", style="green" if result.has_special else "red")
    if result.truncated:
        body.append("\nDropped by truncation: ", style="bold yellow")
        body.append(result.dropped)

    return Panel(body, title=Text("Generation details", style="bold cyan"), border_style="cyan")


def build_failures_panel(reports: list[ValidationReport]) -> Panel:
    """Panel con la descripción de cada regla incumplida, por candidato."""

    body = Text()
    for report in reports:
        if report.is_valid:
            continue
        body.append(f"{report.candidate}\n", style="bold cyan")
        for name in report.failed_rules:
            body.append(f"  - must have {RULE_DESCRIPTIONS[name]}\n")
    if not body.plain:
        body.append("All candidates match the pattern.", style="green")

    body.rstrip()
    return Panel(body, title=Text("Failed rules", style="bold red"), border_style="red")
