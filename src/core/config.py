"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/RecordStore) y servicios lean config de forma
  consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.models import StatusRule


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "hotel-seeder"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "hotel-seeder"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "hotel-seeder"
    return Path.home() / ".config" / "hotel-seeder"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], *, env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# hotel-seeder user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters/servicios.
    """

    model_config = SettingsConfigDict(
        env_prefix="HOTEL_SEEDER_",
        extra="ignore",
        case_sensitive=False,
        env_file_encoding="utf-8",
    )

    store_url: str | None = Field(
        default=None,
        description="URL base del proyecto (p.ej. https://xyz.supabase.co).",
    )
    store_api_key: str | None = Field(
        default=None,
        description="API key (anon/service role) enviada como `apikey` y Bearer.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="hotel-seeder/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para las peticiones al RecordStore.",
    )

    breakfast_price: int = Field(
        default=15,
        ge=0,
        description="Precio del desayuno por huésped y noche.",
    )
    status_rule: StatusRule = Field(
        default=StatusRule.LAST_MATCH,
        description="Cómo combinar las reglas de estado de una reserva.",
    )

    log_level: str = Field(
        default="INFO",
        min_length=1,
        description="Nivel de logging (DEBUG, INFO, WARNING...).",
    )

    def __init__(self, **values: Any) -> None:
        # Orden: proyecto primero (dev), luego config global de usuario.
        # La ruta de usuario se resuelve en cada instancia, no al importar.
        values.setdefault("_env_file", (".env", get_user_env_file()))
        super().__init__(**values)

    @property
    def store_configured(self) -> bool:
        return bool(self.store_url) and bool(self.store_api_key)
