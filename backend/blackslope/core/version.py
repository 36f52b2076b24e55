from __future__ import annotations

import json
from importlib import metadata
from pathlib import Path
from typing import Protocol

from pydantic import BaseModel

import blackslope
from blackslope.core.settings import settings

"""
Core Version.

Rôle (fonctionnel) :
- Expose la version de l’API (endpoint /api/version).
- Deux sources possibles :
  - JsonVersionService : lit un fichier JSON {"version": "1.2.3"} (ex : généré par la CI),
  - PackageVersionService : version du package installé (fallback : blackslope.__version__).

Notes :
- Un fichier JSON invalide (pas un objet, pas de propriété "version") lève VersionFileError.
"""

DISTRIBUTION_NAME = "blackslope-api"


class VersionFileError(ValueError):
    """Fichier de version illisible ou mal formé."""


class ApiVersion(BaseModel):
    version: str


class VersionService(Protocol):
    def get_version(self) -> ApiVersion: ...


class PackageVersionService:
    """Version issue des métadonnées du package installé."""

    def get_version(self) -> ApiVersion:
        try:
            return ApiVersion(version=metadata.version(DISTRIBUTION_NAME))
        except metadata.PackageNotFoundError:
            return ApiVersion(version=blackslope.__version__)


class JsonVersionService:
    """Version lue depuis un fichier JSON {"version": "..."}."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    @staticmethod
    def parse(raw: str) -> ApiVersion:
        try:
            doc = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise VersionFileError(f"Invalid version JSON: {exc.msg}") from exc

        if not isinstance(doc, dict):
            raise VersionFileError("Version JSON must be an object")

        version = doc.get("version")
        if not isinstance(version, str) or not version.strip():
            raise VersionFileError("Version JSON has no 'version' property")

        return ApiVersion(version=version.strip())

    def get_version(self) -> ApiVersion:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise VersionFileError(f"Cannot read version file {self.path}") from exc
        return self.parse(raw)


def get_version_service() -> VersionService:
    """Dépendance FastAPI : choisit la source de version selon VERSION_FILE."""
    if settings.VERSION_FILE:
        return JsonVersionService(settings.VERSION_FILE)
    return PackageVersionService()
