"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- La CLI y el runner leen la misma configuración.
"""

from __future__ import annotations

import json
import logging
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from core.domain.principle import Principle


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI y runner.
    """

    model_config = SettingsConfigDict(
        env_prefix="SOLID_SHOWCASE_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    principles: Annotated[list[Principle], NoDecode] = Field(
        default_factory=lambda: list(Principle),
        min_length=1,
        description="Showcases que ejecuta `run` cuando no se indica ninguno (p.ej. 'srp,dip').",
    )
    show_banner: bool = Field(
        default=True,
        description="Mostrar el banner en modo texto.",
    )
    styled_output: bool = Field(
        default=True,
        description="Salida con estilos Rich (False -> print plano).",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )

    @field_validator("principles", mode="before")
    @classmethod
    def _parse_principles(cls, value: object) -> object:
        if isinstance(value, str) and value.strip().startswith("["):
            value = json.loads(value)
        elif isinstance(value, str):
            value = [part for part in value.split(",") if part.strip()]
        if isinstance(value, (list, tuple)):
            return [Principle.parse(v) if isinstance(v, str) else v for v in value]
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"invalid log level: {value!r}")
        return level
