"""
Entrega el catálogo de preguntas inyectado (cargado una vez en lifespan).
"""
from fastapi import APIRouter, Depends, HTTPException, status
from ..core.deps import current_catalog
from ..models.catalog import Question, QuestionCatalog

router = APIRouter()

@router.get("", response_model=QuestionCatalog, summary="Catálogo completo (temas, bloques, preguntas)")
async def catalog(catalog: QuestionCatalog = Depends(current_catalog)):
    return catalog

@router.get("/{question_id}", response_model=Question, summary="Una pregunta por número (1..57)")
async def question(question_id: int, catalog: QuestionCatalog = Depends(current_catalog)):
    q = catalog.question(question_id)
    if q is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pregunta no encontrada")
    return q
