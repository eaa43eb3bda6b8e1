"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Los defaults reproducen el comportamiento fijo del generador; las env vars
  solo sirven para ajustar ejecuciones (semilla, nivel de log).
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.policy import TruncationPolicy

DEFAULT_MAX_LENGTH = 12


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para la CLI y los servicios.
    """

    model_config = SettingsConfigDict(
        env_prefix="SEEDPASS_",
        extra="ignore",
        case_sensitive=False,
    )

    max_password_length: int = Field(
        default=DEFAULT_MAX_LENGTH,
        ge=2,
        le=128,
        description="Longitud máxima de la contraseña generada.",
    )
    truncation_policy: TruncationPolicy = Field(
        default=TruncationPolicy.default(),
        description="reserve: garantiza mayúscula y especial; legacy: truncado ciego.",
    )
    random_seed: int | None = Field(
        default=None,
        description="Semilla para una generación reproducible (None = SystemRandom).",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Nivel de logging (DEBUG, INFO, WARNING...).",
    )
