"""
Dependencias comunes para FastAPI:
- current_catalog (construido en lifespan, vive en app.state)
"""
from fastapi import HTTPException, Request, status
from ..models.catalog import QuestionCatalog

def current_catalog(request: Request) -> QuestionCatalog:
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Catálogo no cargado")
    return catalog
