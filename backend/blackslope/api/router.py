from fastapi import APIRouter

from blackslope.api.health import router as health_router
from blackslope.api.movies import router as movies_router
from blackslope.api.version import router as version_router

"""
Router principal de l’API.

Rôle (fonctionnel) :
- Regroupe les routeurs par domaine (movies, health, version).
- Sert de point d’entrée unique pour l’inclusion dans l’application FastAPI.
"""

api_router = APIRouter()

api_router.include_router(movies_router)
api_router.include_router(health_router)
api_router.include_router(version_router)
