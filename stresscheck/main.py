# stresscheck/main.py
"""
App FastAPI: CORS, lifespan (carga del catálogo), routers + middleware de trazas.
"""
import logging, time

from dotenv import load_dotenv, find_dotenv
load_dotenv(find_dotenv(usecwd=True))

from contextlib import asynccontextmanager
from anyio import to_thread
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .models.catalog import load_catalog
from .routes import assessments, questions
from .telemetry.logging import setup_logging

setup_logging()
http_logger = logging.getLogger("stresscheck.http")

@asynccontextmanager
async def lifespan(app: FastAPI):
    # catálogo inmutable, una instancia para todo el proceso
    app.state.catalog = await to_thread.run_sync(load_catalog, settings.CATALOG_PATH)
    yield
    app.state.catalog = None

app = FastAPI(title="Stress Check API", version="0.1.0", lifespan=lifespan)

# ---------------- CORS ----------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------- Middleware de trazas ----------------
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    try:
        response = await call_next(request)
        dur = round(time.time() - start, 4)
        http_logger.info(f"{request.method} {request.url.path} -> {response.status_code} in {dur}s")
        return response
    except Exception as e:
        dur = round(time.time() - start, 4)
        http_logger.exception(f"{request.method} {request.url.path} EXC after {dur}s: {e}")
        raise

# ---------------- Healthcheck ----------------
@app.get("/health", tags=["misc"])
async def health():
    return {"ok": True}

# ---------------- Routers ----------------
app.include_router(questions.router,   prefix="/questions",   tags=["questions"])
app.include_router(assessments.router, prefix="/assessments", tags=["assessments"])
