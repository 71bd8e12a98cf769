"""API v1 Router — Book search and health endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from bookbridge.api.v1.endpoints.books import router as books_router
from bookbridge.api.v1.endpoints.health import router as health_router

router = APIRouter(tags=["v1"])
router.include_router(books_router)
router.include_router(health_router)
