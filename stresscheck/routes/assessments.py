import logging

from fastapi import APIRouter, HTTPException, status
from ..core.config import settings
from ..models.assessment import (
    BatchRecordOut,
    StressCheckBatchSubmit,
    StressCheckSubmit,
    StressResult,
)
from ..services.errors import StressCheckError
from ..services.evaluation import build_store, build_store_by_question, evaluate

router = APIRouter()
logger = logging.getLogger("stresscheck.http")

@router.post("/stress-check", response_model=StressResult, summary="Puntuar la check de estrés (57 ítems)")
async def stress_check_submit(payload: StressCheckSubmit):
    method = payload.method or settings.DEFAULT_METHOD
    try:
        if payload.answers is not None:
            store = build_store(payload.answers)
        else:
            store = build_store_by_question(payload.answers_by_question)
        return evaluate(store, method)
    except StressCheckError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"error": e.code, "message": str(e)},
        )

@router.post("/stress-check/batch", response_model=list[BatchRecordOut], summary="Puntuar varios registros (id + 57 respuestas)")
async def stress_check_batch(payload: StressCheckBatchSubmit):
    """
    Cada registro se puntúa por separado; un registro con error no bloquea a los demás.
    """
    if len(payload.records) > settings.BULK_MAX_RECORDS:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Máximo {settings.BULK_MAX_RECORDS} registros por llamada",
        )
    method = payload.method or settings.DEFAULT_METHOD
    out = []
    for record in payload.records:
        try:
            result = evaluate(build_store(record.answers), method)
        except StressCheckError as e:
            logger.warning(f"registro {record.id} rechazado: {e.code} {e}")
            out.append(BatchRecordOut(id=record.id, error=e.code, message=str(e)))
            continue
        out.append(BatchRecordOut(id=record.id, result=result))
    return out
