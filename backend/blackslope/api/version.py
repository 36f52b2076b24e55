from fastapi import APIRouter, Depends

from blackslope.core.version import ApiVersion, VersionService, get_version_service

"""
API Version.

Rôle (fonctionnel) :
- GET /api/version : renvoie la version déployée de l’API ({"version": "1.0.0"}).
- La source (fichier JSON ou package installé) est choisie par la configuration (VERSION_FILE).
"""

router = APIRouter(prefix="/api", tags=["version"])


@router.get("/version", response_model=ApiVersion)
def get_version(version_service: VersionService = Depends(get_version_service)):
    return version_service.get_version()
