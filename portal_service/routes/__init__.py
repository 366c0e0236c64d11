"""
Portal service route modules.

Each module handles one area of the HTTP surface.
"""

from .applications import router as applications_router
from .jobs import router as jobs_router
from .session import router as session_router

__all__ = [
    "applications_router",
    "jobs_router",
    "session_router",
]
