"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación y documentación autocontenida (Field) sin acoplar el Core
  a la CLI.
- Los resultados se serializan tal cual a JSON (`--json`) con `model_dump`.

Nota:
- Estos modelos describen *qué* produce cada herramienta, no *cómo*.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field
from pydantic.config import ConfigDict

from core.domain.charsets import GENERATOR_SPECIALS, UPPERCASE
from core.domain.policy import TruncationPolicy


class SeedInputs(BaseModel):
    """Las cinco cadenas semilla del generador.

    La longitud mínima de los prefijos no se valida aquí: el generador lanza
    `SeedTooShortError` con el nombre del campo afectado.
    """

    model_config = ConfigDict(frozen=True)

    first_name: str = Field(..., description="Nombre; aporta un prefijo de 2 caracteres.")
    last_name: str = Field(..., description="Apellido; aporta un prefijo de 2 caracteres.")
    reg_number: str = Field(
        ...,
        description="Número de registro; se usa literal, sin restricción de longitud.",
    )
    movie: str = Field(..., description="Película favorita; aporta un prefijo de 2 caracteres.")
    food: str = Field(..., description="Comida favorita; aporta un prefijo de 2 caracteres.")


class GeneratedPassword(BaseModel):
    """Resultado de una generación.

    Por qué guardar `dropped`:
    - Con la política `legacy` el truncado puede eliminar los caracteres
      insertados; `dropped` deja constancia de qué se perdió.
    """

    password: str = Field(..., description="Contraseña final.")
    base: str = Field(..., description="Cadena base (prefijos + registro) antes de barajar.")
    policy: TruncationPolicy = Field(
        default=TruncationPolicy.RESERVE,
        description="Política de truncado aplicada.",
    )
    truncated: bool = Field(
        default=False,
        description="Indica si se recortó algún carácter para respetar la longitud máxima.",
    )
    dropped: str = Field(
        default="",
        description="Caracteres eliminados por el truncado (vacío si no hubo).",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_uppercase(self) -> bool:
        return any(c in UPPERCASE for c in self.password)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_special(self) -> bool:
        return any(c in GENERATOR_SPECIALS for c in self.password)


class ValidationReport(BaseModel):
    """Resultado de validar un candidato contra el patrón fijo."""

    candidate: str = Field(..., description="Cadena evaluada.")
    is_valid: bool = Field(..., description="Resultado del patrón completo.")
    failed_rules: list[str] = Field(
        default_factory=list,
        description="Reglas individuales del patrón que no se cumplen.",
    )
