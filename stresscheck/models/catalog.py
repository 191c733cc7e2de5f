# stresscheck/models/catalog.py
"""
Catálogo maestro de las 57 preguntas (texto y opciones).
Se construye una vez (lifespan de la API o main del CLI) y se inyecta; es de solo lectura.
El flag `reverse` es informativo: la inversión que puntúa es la de services/scoring_sumup.py.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from ..services.typing import QUESTION_COUNT

logger = logging.getLogger("stresscheck.catalog")


class CatalogError(ValueError):
    """Catálogo ausente, ilegible o con numeración distinta de 1..57."""


class Choice(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int
    text: str


class Question(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    text: str
    reverse: bool
    scores: tuple[Choice, ...]


class QuestionBlock(BaseModel):
    """Sub-bloque con su propio enunciado (p. ej. las tres preguntas de apoyo de C)."""
    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    questions: tuple[Question, ...]


class Theme(BaseModel):
    model_config = ConfigDict(frozen=True)

    theme: str
    questions: tuple[QuestionBlock, ...]


class QuestionCatalog(BaseModel):
    model_config = ConfigDict(frozen=True)

    simple_stress: tuple[Theme, ...]

    @model_validator(mode="after")
    def _numbered_1_to_57(self) -> "QuestionCatalog":
        ids = [q.id for q in self.questions()]
        if ids != list(range(1, QUESTION_COUNT + 1)):
            raise ValueError(f"Se esperaban las preguntas 1..{QUESTION_COUNT} en orden")
        return self

    def questions(self) -> list[Question]:
        return [
            question
            for theme in self.simple_stress
            for block in theme.questions
            for question in block.questions
        ]

    def get(self, index: int) -> Optional[Question]:
        """Pregunta por posición (0-based)."""
        questions = self.questions()
        if 0 <= index < len(questions):
            return questions[index]
        return None

    def question(self, question_id: int) -> Optional[Question]:
        """Pregunta por número (1-based)."""
        return next((q for q in self.questions() if q.id == question_id), None)


def load_catalog(path: str | Path) -> QuestionCatalog:
    """Lee y valida el catálogo JSON."""
    p = Path(path)
    try:
        with p.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise CatalogError(f"Catálogo no encontrado: {p}") from e
    except OSError as e:
        raise CatalogError(f"No se puede leer el catálogo {p}: {e}") from e
    except UnicodeDecodeError as e:
        raise CatalogError(f"El catálogo {p} no está en UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"JSON inválido en {p}: {e}") from e

    try:
        catalog = QuestionCatalog.model_validate(data)
    except ValidationError as e:
        raise CatalogError(f"Catálogo inválido {p}: {e}") from e

    logger.info(f"Catálogo cargado: {p.name} ({len(catalog.questions())} preguntas)")
    return catalog
