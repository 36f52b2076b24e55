from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

from blackslope.schemas.movies import CreateMovieViewModel, UpdateMovieViewModel
from blackslope.services.movie_service import MovieService
from blackslope.validators.base import (
    BlackSlopeValidator,
    CompositeValidator,
    ErrorCode,
    ValidationFailure,
    length_between,
    not_empty,
)

"""
Validators Movies.

Rôle (fonctionnel) :
- Codes d’erreur métier des films (MovieErrorCode, 400xx, 404xx, 409xx).
- Règles de champs communes create / update :
  - title : non vide, 2..50 caractères,
  - description : non vide, 2..50 caractères
  (la règle de longueur n’est évaluée que si le champ est renseigné).
- Création : body obligatoire + pas de doublon (même titre + même date de sortie).
- Mise à jour : body obligatoire, id de route > 0, id du body (si fourni) = id de route.
"""

TITLE_MIN, TITLE_MAX = 2, 50
DESCRIPTION_MIN, DESCRIPTION_MAX = 2, 50


class MovieErrorCode(ErrorCode):
    NULL_REQUEST_MODEL = 40001, "Request model cannot be null"
    EMPTY_OR_NULL_MOVIE_ID = 40002, "Movie Id cannot be null or empty"
    EMPTY_OR_NULL_MOVIE_TITLE = 40003, "Movie Title cannot be null or empty"
    EMPTY_OR_NULL_MOVIE_DESCRIPTION = 40004, "Movie Description cannot be null or empty"
    TITLE_NOT_BETWEEN_2_AND_50_CHARACTERS = 40005, "Movie Title should be between 2 and 50 characters"
    DESCRIPTION_NOT_BETWEEN_2_AND_50_CHARACTERS = 40006, "Movie Description should be between 2 and 50 characters"
    MOVIE_ALREADY_EXISTS = 40007, "Movie already exists"
    ID_CONFLICT = 40901, "Id in URL does not match with id in body"
    MOVIE_NOT_FOUND = 40401, "Movie not found"


@dataclass
class CreateMovieRequest:
    movie: Optional[CreateMovieViewModel]


@dataclass
class UpdateMovieRequest:
    id: int
    movie: Optional[UpdateMovieViewModel]


class MovieViewModelValidator(BlackSlopeValidator[CreateMovieViewModel]):
    """Règles de champs (title / description) partagées par create et update."""

    async def validate(self, instance: CreateMovieViewModel) -> List[ValidationFailure]:
        failures: List[ValidationFailure] = []

        if not not_empty(instance.title):
            failures.append(ValidationFailure("title", MovieErrorCode.EMPTY_OR_NULL_MOVIE_TITLE))
        elif not length_between(instance.title, TITLE_MIN, TITLE_MAX):
            failures.append(ValidationFailure("title", MovieErrorCode.TITLE_NOT_BETWEEN_2_AND_50_CHARACTERS))

        if not not_empty(instance.description):
            failures.append(ValidationFailure("description", MovieErrorCode.EMPTY_OR_NULL_MOVIE_DESCRIPTION))
        elif not length_between(instance.description, DESCRIPTION_MIN, DESCRIPTION_MAX):
            failures.append(
                ValidationFailure("description", MovieErrorCode.DESCRIPTION_NOT_BETWEEN_2_AND_50_CHARACTERS)
            )

        return failures


class MovieNotDuplicatedValidator(BlackSlopeValidator[CreateMovieViewModel]):
    """Refuse un film déjà présent (même titre + même date de sortie)."""

    def __init__(self, movie_service: MovieService) -> None:
        self.movie_service = movie_service

    async def validate(self, instance: CreateMovieViewModel) -> List[ValidationFailure]:
        if not not_empty(instance.title):
            return []
        if await self.movie_service.check_if_movie_exists(instance.title, instance.release_date):
            return [ValidationFailure("title", MovieErrorCode.MOVIE_ALREADY_EXISTS)]
        return []


class CreateMovieRequestValidator(BlackSlopeValidator[CreateMovieRequest]):
    def __init__(self, movie_service: MovieService) -> None:
        self.movie_validator = CompositeValidator(
            [MovieViewModelValidator(), MovieNotDuplicatedValidator(movie_service)]
        )

    def payload(self, instance: CreateMovieRequest) -> Any:
        return instance.movie

    async def validate(self, instance: CreateMovieRequest) -> List[ValidationFailure]:
        if instance.movie is None:
            return [ValidationFailure("movie", MovieErrorCode.NULL_REQUEST_MODEL)]
        return await self.movie_validator.validate(instance.movie)


class UpdateMovieRequestValidator(BlackSlopeValidator[UpdateMovieRequest]):
    def __init__(self) -> None:
        self.movie_validator = MovieViewModelValidator()

    def payload(self, instance: UpdateMovieRequest) -> Any:
        return instance.movie

    async def validate(self, instance: UpdateMovieRequest) -> List[ValidationFailure]:
        if instance.movie is None:
            return [ValidationFailure("movie", MovieErrorCode.NULL_REQUEST_MODEL)]

        failures: List[ValidationFailure] = []
        if instance.id <= 0:
            failures.append(ValidationFailure("id", MovieErrorCode.EMPTY_OR_NULL_MOVIE_ID))
        elif instance.movie.id is not None and instance.movie.id != instance.id:
            failures.append(ValidationFailure("id", MovieErrorCode.ID_CONFLICT))

        failures.extend(await self.movie_validator.validate(instance.movie))
        return failures
