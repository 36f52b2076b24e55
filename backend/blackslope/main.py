from __future__ import annotations

import time
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from blackslope.api.router import api_router
from blackslope.core.settings import settings, split_csv
from blackslope.core.logging import setup_logging
from blackslope.core.errors import (
    ApiException,
    ApiHttpStatusCode,
    HandledException,
    error_payload,
    status_error,
)
from blackslope.core.correlation import ensure_correlation_id, set_correlation_id
from blackslope.db.session import dispose_engine
from blackslope.schemas.common import ApiError

"""
Application FastAPI (entrypoint).

Rôle (fonctionnel) :
- Configure l’application (settings, CORS, middlewares, routers, Swagger).
- Centralise l’observabilité :
  - correlation id propagé (header CorrelationId, configurable)
  - logs structurés JSON (timing, status, client_ip)
  - seuil de “slow request”
- Uniformise les erreurs côté client (enveloppe {data, errors}).

Ce fichier ne contient pas de logique métier :
- La logique métier est dans blackslope.services (+ validators)
- Les routes sont dans blackslope.api
- Les composants transverses sont dans blackslope.core
"""


class UTF8JSONResponse(JSONResponse):
    """Réponse JSON avec charset UTF-8 explicite (cohérent sur tous les endpoints)."""
    media_type = "application/json; charset=utf-8"


setup_logging(
    settings.LOG_LEVEL,
    to_console=settings.LOG_TO_CONSOLE,
    to_file=settings.LOG_TO_FILE,
    file_name=settings.LOG_FILE_NAME,
)

# logger principal projet
log = logging.getLogger("blackslope")

# logger dédié observabilité HTTP (séparé du métier)
http_log = logging.getLogger("blackslope.http")

CORRELATION_HEADER = settings.CORRELATION_ID_HEADER


@asynccontextmanager
async def lifespan(_: FastAPI):
    log.info("startup", extra={"path": settings.SWAGGER_PATH})
    yield
    await dispose_engine()


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Movies API : CRUD films, health checks et version.",
    debug=settings.DEBUG,
    default_response_class=UTF8JSONResponse,
    docs_url=settings.SWAGGER_PATH,
    openapi_url=f"{settings.SWAGGER_PATH}/v1/swagger.json",
    redoc_url=None,
    lifespan=lifespan,
)

# --- CORS ---
origins = split_csv(settings.CORS_ORIGINS) or ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=False,  # pas de cookies (API stateless, auth par bearer)
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=[CORRELATION_HEADER],
)

# --- Routers ---
app.include_router(api_router)


def _error_response(request: Request, status_code: int, errors, data=None) -> UTF8JSONResponse:
    response = UTF8JSONResponse(status_code=status_code, content=error_payload(errors=errors, data=data))
    cid = getattr(request.state, "correlation_id", None)
    if cid:
        response.headers[CORRELATION_HEADER] = cid
    return response


def _internal_error_response(request: Request, exc: Exception) -> UTF8JSONResponse:
    """500 générique : la stacktrace reste dans les logs serveur."""
    log.exception("Unhandled error: %s", exc)
    return _error_response(
        request,
        ApiHttpStatusCode.INTERNAL_SERVER_ERROR,
        [status_error(ApiHttpStatusCode.INTERNAL_SERVER_ERROR)],
    )


# --- Middleware observabilité : correlation id + timing + logs structurés ---
@app.middleware("http")
async def request_observability(request: Request, call_next):
    # Reprend le header s’il contient un UUID valide, sinon en génère un
    cid = ensure_correlation_id(request.headers.get(CORRELATION_HEADER))
    request.state.correlation_id = cid

    start = time.perf_counter()
    response = None
    try:
        try:
            response = await call_next(request)
        except Exception as exc:
            # Traité ici tant que le correlation id est encore dans le contexte
            response = _internal_error_response(request, exc)
        response.headers[CORRELATION_HEADER] = cid
        return response
    finally:
        duration_ms = int((time.perf_counter() - start) * 1000)

        # Slow request => WARNING, sinon INFO
        level = logging.WARNING if duration_ms >= settings.SLOW_REQUEST_MS else logging.INFO
        http_log.log(
            level,
            "request",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": getattr(response, "status_code", 500),
                "duration_ms": duration_ms,
                "client_ip": request.client.host if request.client else None,
            },
        )

        set_correlation_id(None)


# --- Error handlers : enveloppe standard, pas de stacktrace côté client ---
@app.exception_handler(ApiException)
async def api_exception_handler(request: Request, exc: ApiException):
    """Erreurs applicatives explicites (validation métier, ressource introuvable)."""
    return _error_response(request, exc.status_code, exc.errors, data=exc.data)


@app.exception_handler(HandledException)
async def handled_exception_handler(request: Request, exc: HandledException):
    """Erreurs typées : le statut HTTP découle du type (Authentication -> 401, etc.)."""
    if exc.status_code >= 500:
        log.error("%s error: %s", exc.exception_type.value, exc.message)
    else:
        log.info("%s error: %s", exc.exception_type.value, exc.message)
    return _error_response(request, exc.status_code, [exc.to_api_error()])


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Erreurs HTTP natives (404 route inconnue, 405, etc.)."""
    message = exc.detail if isinstance(exc.detail, str) and exc.detail else None
    return _error_response(request, exc.status_code, [status_error(exc.status_code, message)])


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Payload / paramètres mal formés -> 400, une erreur par problème détecté."""
    errors = []
    for err in exc.errors():
        location = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        message = err.get("msg", "Invalid value")
        errors.append(
            ApiError(
                code=ApiHttpStatusCode.BAD_REQUEST,
                message=f"{location}: {message}" if location else message,
            )
        )
    return _error_response(request, ApiHttpStatusCode.BAD_REQUEST, errors)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Dernier filet (erreur levée hors du middleware d’observabilité) -> 500 + log serveur."""
    return _internal_error_response(request, exc)
