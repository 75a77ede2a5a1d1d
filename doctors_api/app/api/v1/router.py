"""
Top‑level router for version 1 of the API.

This router aggregates resource routers under a unified prefix.  When
new resources are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import doctors

router = APIRouter()

router.include_router(doctors.router, prefix="/doctors", tags=["doctors"])
