from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, List, Optional

from pydantic import ConfigDict, Field, field_validator

from blackslope.schemas.common import ApiResponse, CamelModel

"""
Schemas Movies (Pydantic).

Rôle (fonctionnel) :
- Définit le contrat HTTP autour des films (view models requests / responses).
- Les payloads d’entrée sont volontairement permissifs sur la présence des champs
  (title/description optionnels) : les règles métier (vide, longueur, doublon)
  sont portées par blackslope.validators afin de renvoyer des codes d’erreur stables (400xx).
- Pydantic reste responsable du typage (ex : releaseDate doit être une date ISO).

Notes :
- JSON en camelCase (releaseDate, deletedMovieId), attributs Python en snake_case.
- Les réponses sont enveloppées dans ApiResponse ({"data": ...}).
"""


def _as_utc(v: Optional[datetime]) -> Optional[datetime]:
    """Si tzinfo absent : UTC par défaut."""
    if v is not None and v.tzinfo is None:
        return v.replace(tzinfo=timezone.utc)
    return v


class CreateMovieViewModel(CamelModel):
    """Payload de création d’un film."""
    title: Optional[str] = None
    description: Optional[str] = None
    release_date: Optional[datetime] = None

    # Refuse les champs inattendus (API contract strict : pas d’id à la création)
    model_config = ConfigDict(extra="forbid")

    @field_validator("title", "description", mode="before")
    @classmethod
    def _strip_strings(cls, v: Any) -> Any:
        """Strip des champs texte (évite espaces en entrée)."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("release_date")
    @classmethod
    def _release_date_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return _as_utc(v)


class UpdateMovieViewModel(CreateMovieViewModel):
    """Payload de mise à jour : l’id du body est optionnel mais doit correspondre à celui de la route."""
    id: Optional[int] = None


class MovieViewModel(CamelModel):
    """Sortie API pour un film."""
    id: int
    title: str
    description: str
    release_date: Optional[datetime] = None


class MoviesData(CamelModel):
    movies: List[MovieViewModel] = Field(default_factory=list)


class MovieData(CamelModel):
    movie: MovieViewModel


class DeletedMovieData(CamelModel):
    deleted_movie_id: int


class GetMoviesResponse(ApiResponse):
    """Réponse de GET /api/v1/movies."""
    data: Optional[MoviesData] = None


class MovieResponse(ApiResponse):
    """Réponse de GET / POST / PUT sur un film."""
    data: Optional[MovieData] = None


class DeletedMovieResponse(ApiResponse):
    """Réponse de DELETE /api/v1/movies/{id}."""
    data: Optional[DeletedMovieData] = None
