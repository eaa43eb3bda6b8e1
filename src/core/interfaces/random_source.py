"""Contrato de la fuente aleatoria.

Por qué Protocol:
- `random.Random`, `random.SystemRandom` y `secrets.SystemRandom` ya lo
  cumplen sin adaptadores.
- Un test puede pasar un stub con valores fijos.
"""

from __future__ import annotations

from typing import Protocol, Sequence, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class RandomSource(Protocol):
    """Minimal RNG surface used by the generator."""

    def randrange(self, start: int, stop: int) -> int:
        """Uniform integer in ``[start, stop)``."""

        ...

    def choice(self, seq: Sequence[T]) -> T:
        """Uniform element of a non-empty sequence."""

        ...
