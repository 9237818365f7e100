"""
Point d'entrée principal de l'API du back-office de formation.
Démarrage : uvicorn backoffice.main:app --reload (depuis backend/)
"""

import json
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from backoffice.cms.client import CmsApiError
from backoffice.config import settings
from backoffice.datasources.base import NotFoundError
from backoffice.datasources.factory import build_backend
from backoffice.dependencies import request_notifications
from backoffice.routers import (
    appointments,
    articles,
    auth,
    contacts,
    custom_programmes,
    learners,
    media,
    programmes,
    stats,
    users,
)

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s : %(message)s",
)
logger = logging.getLogger(__name__)

NOTIFICATIONS_HEADER = "X-Notifications"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Cycle de vie : construit la source de données et ses clients, puis les libère à l'arrêt."""
    app.state.backend = build_backend(settings)
    yield
    app.state.backend.close()
    logger.info("Ressources du back-office libérées.")


app = FastAPI(
    title="Back-office Formation API",
    description="Gestion des programmes, apprenants, rendez-vous, articles et utilisateurs",
    version="0.1.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

# CORS : tous les ports localhost en développement (à restreindre en production)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[],
    allow_origin_regex=r"https?://(localhost|127\.0\.0\.1)(:\d+)?",
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["Content-Type", "Authorization", "Accept"],
    expose_headers=[NOTIFICATIONS_HEADER],
)


@app.middleware("http")
async def expose_notifications(request: Request, call_next):
    """Renvoie au client les notifications (toasts) de la requête, au format JSON."""
    response = await call_next(request)
    notifications = request_notifications(request)
    if notifications:
        response.headers[NOTIFICATIONS_HEADER] = json.dumps(notifications)
    return response


app.include_router(programmes.router)
app.include_router(learners.router)
app.include_router(appointments.router)
app.include_router(users.router)
app.include_router(articles.router)
app.include_router(custom_programmes.router)
app.include_router(stats.router)
app.include_router(media.router)
app.include_router(auth.router)
app.include_router(contacts.router)


def error_response(request: Request, status_code: int, content: dict, headers=None) -> JSONResponse:
    """Réponse d'erreur JSON, accompagnée des notifications de la requête s'il y en a."""
    notifications = request_notifications(request)
    if notifications:
        content = {**content, "notifications": notifications}
    return JSONResponse(status_code=status_code, content=content, headers=headers)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(request, exc.status_code, {"detail": exc.detail}, headers=exc.headers)


@app.exception_handler(CmsApiError)
async def cms_error_handler(request: Request, exc: CmsApiError) -> JSONResponse:
    """Relaie le statut du CMS et le détail des champs invalides."""
    logger.warning("Erreur CMS %s sur %s : %s", exc.status, request.url.path, exc.message)
    return error_response(request, exc.status, {"detail": exc.message, "field_errors": exc.field_errors})


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return error_response(request, 404, {"detail": str(exc)})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Intercepte toutes les exceptions non gérées (réseau, base de données...)
    pour renvoyer un message générique qui passe par CORSMiddleware.
    """
    logger.error("Exception non gérée : %s", exc, exc_info=True)
    return error_response(request, 500, {"detail": "Une erreur est survenue"})


@app.get("/api/health", tags=["Santé"])
def health_check():
    """Vérifie que l'API est opérationnelle et indique la source de données active."""
    backend = getattr(app.state, "backend", None)
    mode = backend.data_source.mode if backend is not None else settings.data_mode
    return {"status": "ok", "service": "Back-office Formation API", "version": "0.1.0", "data_mode": mode}
