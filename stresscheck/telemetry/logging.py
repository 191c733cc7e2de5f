"""
Configuración de logging estructurado.
- Nivel INFO por defecto; DEBUG en desarrollo (LOG_LEVEL).
- Formato con timestamps y nombre del logger.
- Integra con Uvicorn (hereda handlers) para no duplicar.
"""
import logging

from ..core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

def setup_logging(level: str | None = None) -> None:
    level = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # Ajusta loggers de uvicorn para no duplicar formato
    for uv_logger in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(uv_logger).setLevel(level)
