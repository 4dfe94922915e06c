"""Liveness and maintenance endpoints."""

from __future__ import annotations

import hmac
import logging

from fastapi import APIRouter, HTTPException, Query, status

from patidestek.api.dependencies import SessionDep
from patidestek.core.settings import settings
from patidestek.services.seeding import seed_database

logger = logging.getLogger(__name__)

router = APIRouter(tags=["system"])


@router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Lost, found and adoptable pet classifieds",
        "docs": "/docs",
        "redoc": "/redoc",
    }


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@router.post("/health/seed")
async def seed(db: SessionDep, secret: str = Query(...)) -> dict[str, object]:
    """Load the demo data set when the configured seed secret matches.

    Args:
        db: Database session
        secret: Shared secret compared against SEED_SECRET

    Returns:
        Names of the records created and of those already present

    Raises:
        HTTPException: If seeding is disabled or the secret does not match
    """
    expected = settings.seed_secret
    if not expected or not hmac.compare_digest(secret.encode(), expected.encode()):
        logger.warning("Rejected seed request")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Seeding is disabled or the secret is invalid",
        )
    report = seed_database(db)
    return {"created": report.created, "existing": report.existing}
