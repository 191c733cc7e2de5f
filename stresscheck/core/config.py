"""
Configuración central de la app (fuente única de verdad).
Lee variables de entorno y expone un objeto Settings tipado.
"""
import os
from pathlib import Path
from pydantic import BaseModel, ConfigDict, Field

from ..services.typing import Method

DEFAULT_CATALOG = Path(__file__).resolve().parents[1] / "resources" / "questions_57.json"

def _csv_env(name: str, default: str) -> list[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]

class Settings(BaseModel):
    # los default_factory también se validan: un DEFAULT_METHOD inválido falla al arrancar
    model_config = ConfigDict(validate_default=True)

    CATALOG_PATH: str = Field(default_factory=lambda: os.getenv("CATALOG_PATH", str(DEFAULT_CATALOG)))
    DEFAULT_METHOD: Method = Field(default_factory=lambda: os.getenv("DEFAULT_METHOD", "sumup"))
    LOG_LEVEL: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    CORS_ORIGINS: list[str] = Field(default_factory=lambda: _csv_env("CORS_ORIGINS", "*"))
    BULK_MAX_RECORDS: int = Field(default_factory=lambda: int(os.getenv("BULK_MAX_RECORDS", "1000")))

settings = Settings()
