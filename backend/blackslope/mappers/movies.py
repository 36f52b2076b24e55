from __future__ import annotations

from typing import Iterable, List

from blackslope.models.movie import Movie
from blackslope.schemas.movies import CreateMovieViewModel, MovieViewModel, UpdateMovieViewModel
from blackslope.services.domain import MovieDomainModel

"""
Mapper Movies.

Rôle (fonctionnel) :
- view model (requête) -> domaine : création / mise à jour.
- domaine -> entité ORM : persistance.
- entité ORM -> domaine : lecture.
- domaine -> view model (réponse).

Notes :
- Les view models d’entrée ont déjà été validés (validators) : title/description sont présents.
- Pour une mise à jour, l’id de la route fait foi.
"""


def create_request_to_domain(view_model: CreateMovieViewModel) -> MovieDomainModel:
    return MovieDomainModel(
        title=view_model.title or "",
        description=view_model.description or "",
        release_date=view_model.release_date,
    )


def update_request_to_domain(movie_id: int, view_model: UpdateMovieViewModel) -> MovieDomainModel:
    return MovieDomainModel(
        id=movie_id,
        title=view_model.title or "",
        description=view_model.description or "",
        release_date=view_model.release_date,
    )


def domain_to_entity(movie: MovieDomainModel) -> Movie:
    entity = Movie(
        title=movie.title,
        description=movie.description,
        release_date=movie.release_date,
    )
    if movie.id is not None:
        entity.id = movie.id
    return entity


def entity_to_domain(entity: Movie) -> MovieDomainModel:
    return MovieDomainModel(
        id=entity.id,
        title=entity.title,
        description=entity.description,
        release_date=entity.release_date,
    )


def entities_to_domain(entities: Iterable[Movie]) -> List[MovieDomainModel]:
    return [entity_to_domain(e) for e in entities]


def domain_to_response(movie: MovieDomainModel) -> MovieViewModel:
    return MovieViewModel(
        id=movie.id,
        title=movie.title,
        description=movie.description,
        release_date=movie.release_date,
    )


def domains_to_response(movies: Iterable[MovieDomainModel]) -> List[MovieViewModel]:
    return [domain_to_response(m) for m in movies]
