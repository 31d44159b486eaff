"""
Routers package for Reports module

Exports all report router instances for easy importing.
"""

from .financial import router as financial_router
from .distribution import router as distribution_router
from .barbers import router as barbers_router

__all__ = [
    "financial_router",
    "distribution_router",
    "barbers_router"
]
