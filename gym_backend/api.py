"""
FastAPI app entry point aggregating per-domain routers under gym_backend/routes.
Run with `uvicorn gym_backend.api:app`.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .constants import ERROR_MESSAGES
from .db import ensure_schema, get_setting
from .domain.response import ServiceResponse
from .errors import ServiceError
from .routes.common import respond

logger = logging.getLogger(__name__)

_DEFAULT_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]


def _cors_origins() -> list[str]:
    origins = get_setting("cors_origins")
    if isinstance(origins, str):
        origins = [o.strip() for o in origins.split(",") if o.strip()]
    return list(origins or _DEFAULT_ORIGINS)


app = FastAPI(title="gym-backend-api", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def on_startup():
    ensure_schema()


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    return respond(ServiceResponse.from_error(exc))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return respond(ServiceResponse.fail(500, ERROR_MESSAGES["SERVER_ERROR"]))


# Include routers (split by business domain)
from .routes import base as base_routes
from .routes import careers as careers_routes
from .routes import blogs as blogs_routes
from .routes import contact as contact_routes
from .routes import franchise as franchise_routes
from .routes import payments as payments_routes
from .routes import user_logins as user_logins_routes
from .routes import users as users_routes
from .routes import admin_auth as admin_auth_routes
from .routes import public as public_routes
from .routes import maintenance as maintenance_routes
from .routes import logs as logs_routes

app.include_router(base_routes.router)
app.include_router(careers_routes.router)
app.include_router(blogs_routes.router)
app.include_router(contact_routes.router)
app.include_router(franchise_routes.router)
app.include_router(payments_routes.router)
app.include_router(user_logins_routes.router)
app.include_router(users_routes.router)
app.include_router(admin_auth_routes.router)
app.include_router(public_routes.router)
app.include_router(maintenance_routes.router)
app.include_router(logs_routes.router)
