"""Confirmation Engine - API Routers"""
from .eligibility import router as eligibility_router
from .cases import router as cases_router

__all__ = [
    "eligibility_router",
    "cases_router",
]
