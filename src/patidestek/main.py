# src/patidestek/main.py
"""Main entry point for the PatiDestek application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from patidestek.api import (
    auth_router,
    categories_router,
    comment_reports_router,
    comments_router,
    locations_router,
    posts_router,
    system_router,
    tags_router,
    users_router,
)
from patidestek.core.errors import PatiDestekError
from patidestek.core.settings import settings
from patidestek.services.locations import get_location_service

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Lost, found and adoptable pet classifieds API",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_origin_regex=settings.cors_origin_regex,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)


@app.exception_handler(PatiDestekError)
async def handle_domain_error(request: Request, exc: PatiDestekError) -> JSONResponse:
    """Render service-layer errors as ``{"detail": message}``."""
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


# Include API routers
app.include_router(system_router)
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(categories_router)
app.include_router(tags_router)
app.include_router(posts_router)
app.include_router(comments_router)
app.include_router(comment_reports_router)
app.include_router(locations_router)


@app.on_event("startup")
async def on_startup() -> None:
    # Load the location fixtures before the first request needs them.
    get_location_service()
    logger.info("%s %s started", settings.app_name, settings.app_version)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("patidestek.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
