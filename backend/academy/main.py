"""
Point d'entrée principal de l'API de l'académie.
Démarrage : uvicorn academy.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import academy.models  # noqa: F401  (enregistre tous les modèles dans Base.metadata avant les routers)
from academy.config import settings
from academy.database import Base, SessionLocal, engine
from academy.exceptions import AcademyError
from academy.routers import admin, auth, events, grades, schedules, student_portal
from academy.routers import settings as settings_router
from academy.scheduler import start_scheduler, stop_scheduler
from academy.services.bootstrap_service import bootstrap

logger = logging.getLogger(__name__)


def _initialize_database() -> None:
    """Crée les tables si demandé, puis le coordinateur initial s'il est configuré."""
    if settings.AUTO_CREATE_TABLES:
        Base.metadata.create_all(bind=engine)
    if not settings.BOOTSTRAP_COORDINATOR_EMAIL:
        return
    db = SessionLocal()
    try:
        bootstrap(db, settings)
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Cycle de vie : initialisation de la base puis démarrage/arrêt du scheduler."""
    _initialize_database()
    start_scheduler()
    yield
    stop_scheduler()


app = FastAPI(
    title="Academy API",
    description="API de gestion de l'académie : élèves, check-in géolocalisé, tableau de bord",
    version="0.1.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

# CORS : autorise tous les ports localhost en développement (à restreindre en production).
app.add_middleware(
    CORSMiddleware,
    allow_origins=[],
    allow_origin_regex=r"https?://(localhost|127\.0\.0\.1)(:\d+)?",
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["Content-Type", "Authorization", "Accept"],
)


app.include_router(auth.router)
app.include_router(student_portal.router)
app.include_router(admin.router)
app.include_router(schedules.router)
app.include_router(events.router)
app.include_router(grades.router)
app.include_router(settings_router.router)


@app.exception_handler(AcademyError)
async def academy_error_handler(request: Request, exc: AcademyError) -> JSONResponse:
    """Traduit une erreur métier en réponse JSON avec le statut porté par l'exception."""
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
        headers=headers,
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Intercepte toutes les exceptions non gérées pour garantir que la réponse 500
    passe bien par CORSMiddleware (qui injecte les headers CORS).
    """
    logger.error("Exception non gérée : %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Une erreur interne est survenue."},
    )


@app.get("/api/health", tags=["Santé"])
def health_check():
    """Vérifie que l'API est opérationnelle."""
    return {"status": "ok", "service": "Academy API", "version": "0.1.0"}
