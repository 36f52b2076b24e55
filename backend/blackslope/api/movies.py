from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, Path, status

from blackslope.api.deps import (
    JwtAuthDep,
    get_create_movie_validator,
    get_movie_service,
    get_update_movie_validator,
)
from blackslope.core.errors import ApiException, ApiHttpStatusCode
from blackslope.mappers.movies import (
    create_request_to_domain,
    domain_to_response,
    domains_to_response,
    update_request_to_domain,
)
from blackslope.schemas.common import ApiResponse
from blackslope.schemas.movies import (
    CreateMovieViewModel,
    DeletedMovieData,
    DeletedMovieResponse,
    GetMoviesResponse,
    MovieData,
    MovieResponse,
    MoviesData,
    UpdateMovieViewModel,
)
from blackslope.services.movie_service import MovieService
from blackslope.validators.movies import (
    CreateMovieRequest,
    CreateMovieRequestValidator,
    MovieErrorCode,
    UpdateMovieRequest,
    UpdateMovieRequestValidator,
)

"""
API Movies (contrôleur).

Rôle (fonctionnel) :
- CRUD sur les films : liste, détail, création, mise à jour, suppression.
- Chaque action suit le même pipeline :
  validation (validators) -> mapping vers le domaine (mappers) -> service -> mapping vers le view model
  -> enveloppe ApiResponse {"data": ...}.

Notes :
- Routes protégées par JWT (bypass en dev si l’auth n’est pas configurée).
- Un id inconnu renvoie 404 avec le code 40401.
- Les champs null sont omis des réponses (response_model_exclude_none).
"""

router = APIRouter(prefix="/api/v1/movies", tags=["movies"], dependencies=[JwtAuthDep])
log = logging.getLogger("blackslope.movies")

# movies.id est un INTEGER (int4 sous Postgres)
MIN_MOVIE_ID, MAX_MOVIE_ID = -2_147_483_648, 2_147_483_647

# Réponses d’erreur documentées dans Swagger (même enveloppe que le succès)
ERROR_RESPONSES = {
    400: {"model": ApiResponse, "description": "Bad Request"},
    401: {"model": ApiResponse, "description": "Unauthorized"},
    500: {"model": ApiResponse, "description": "Internal Server Error"},
}
NOT_FOUND_RESPONSE = {404: {"model": ApiResponse, "description": "Movie not found"}}


def _not_found() -> ApiException:
    return ApiException.single(
        ApiHttpStatusCode.NOT_FOUND,
        MovieErrorCode.MOVIE_NOT_FOUND,
        MovieErrorCode.MOVIE_NOT_FOUND.description,
    )


@router.get(
    "",
    response_model=GetMoviesResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
    summary="Return a list of all movies",
)
async def get_movies(movie_service: MovieService = Depends(get_movie_service)):
    movies = await movie_service.get_all_movies()
    log.info("movies_listed", extra={"movie_count": len(movies)})
    return GetMoviesResponse(data=MoviesData(movies=domains_to_response(movies)))


@router.get(
    "/{movie_id}",
    response_model=MovieResponse,
    response_model_exclude_none=True,
    responses={**ERROR_RESPONSES, **NOT_FOUND_RESPONSE},
    summary="Return a single movie",
)
async def get_movie(
    movie_id: int = Path(..., ge=MIN_MOVIE_ID, le=MAX_MOVIE_ID),
    movie_service: MovieService = Depends(get_movie_service),
):
    movie = await movie_service.get_movie(movie_id)
    if movie is None:
        raise _not_found()
    return MovieResponse(data=MovieData(movie=domain_to_response(movie)))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=MovieResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
    summary="Create a new movie",
)
async def create_movie(
    payload: Optional[CreateMovieViewModel] = Body(None),
    movie_service: MovieService = Depends(get_movie_service),
    validator: CreateMovieRequestValidator = Depends(get_create_movie_validator),
):
    request = CreateMovieRequest(movie=payload)
    await validator.validate_or_raise(request)

    created = await movie_service.create_movie(create_request_to_domain(request.movie))
    return MovieResponse(data=MovieData(movie=domain_to_response(created)))


@router.put(
    "/{movie_id}",
    response_model=MovieResponse,
    response_model_exclude_none=True,
    responses={**ERROR_RESPONSES, **NOT_FOUND_RESPONSE},
    summary="Update an existing movie",
)
async def update_movie(
    movie_id: int = Path(..., ge=MIN_MOVIE_ID, le=MAX_MOVIE_ID),
    payload: Optional[UpdateMovieViewModel] = Body(None),
    movie_service: MovieService = Depends(get_movie_service),
    validator: UpdateMovieRequestValidator = Depends(get_update_movie_validator),
):
    request = UpdateMovieRequest(id=movie_id, movie=payload)
    await validator.validate_or_raise(request)

    updated = await movie_service.update_movie(update_request_to_domain(movie_id, request.movie))
    if updated is None:
        raise _not_found()
    return MovieResponse(data=MovieData(movie=domain_to_response(updated)))


@router.delete(
    "/{movie_id}",
    response_model=DeletedMovieResponse,
    response_model_exclude_none=True,
    responses={**ERROR_RESPONSES, **NOT_FOUND_RESPONSE},
    summary="Delete an existing movie",
)
async def delete_movie(
    movie_id: int = Path(..., ge=MIN_MOVIE_ID, le=MAX_MOVIE_ID),
    movie_service: MovieService = Depends(get_movie_service),
):
    deleted_id = await movie_service.delete_movie(movie_id)
    if deleted_id is None:
        raise _not_found()
    return DeletedMovieResponse(data=DeletedMovieData(deleted_movie_id=deleted_id))
