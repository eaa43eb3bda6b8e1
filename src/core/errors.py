"""Errores del Core.

Por qué aquí:
- La CLI traduce estas excepciones a mensajes legibles; el Core solo las lanza.
"""

from __future__ import annotations


class SeedpassError(Exception):
    """Base para errores del dominio."""


class SeedTooShortError(SeedpassError, ValueError):
    """A seed string is too short for prefix extraction."""

    def __init__(self, field: str, value: str, minimum: int) -> None:
        self.field = field
        self.value = value
        self.minimum = minimum
        super().__init__(
            f"seed string too short: {field} must have at least {minimum} characters "
            f"(got {len(value)})"
        )
