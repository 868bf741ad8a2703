"""HTTP Controllers."""

from schools.presentation.http.controllers.health import router as health_router
from schools.presentation.http.controllers.schools import router as schools_router

__all__ = ["health_router", "schools_router"]
