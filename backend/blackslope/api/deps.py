from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from blackslope.core.security import require_jwt
from blackslope.db.session import get_db
from blackslope.repositories.movie_repository import MovieRepository
from blackslope.services.movie_service import MovieService
from blackslope.validators.movies import CreateMovieRequestValidator, UpdateMovieRequestValidator

"""
Dépendances API.

Rôle (fonctionnel) :
- Centralise les dépendances réutilisables sur les routes (équivalent d’un conteneur DI) :
  session DB -> repository -> service -> validateurs.
- Protection JWT prête à l’emploi (JwtAuthDep).

Durée de vie : une instance par requête (la session DB est “scoped” à la requête).
"""


def get_movie_repository(db: AsyncSession = Depends(get_db)) -> MovieRepository:
    return MovieRepository(db)


def get_movie_service(repository: MovieRepository = Depends(get_movie_repository)) -> MovieService:
    return MovieService(repository)


def get_create_movie_validator(
    movie_service: MovieService = Depends(get_movie_service),
) -> CreateMovieRequestValidator:
    return CreateMovieRequestValidator(movie_service)


def get_update_movie_validator() -> UpdateMovieRequestValidator:
    return UpdateMovieRequestValidator()


# Dépendance prête à l’emploi pour protéger un endpoint / un routeur
JwtAuthDep = Depends(require_jwt)
