from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from blackslope.mappers.movies import domain_to_entity, entities_to_domain, entity_to_domain
from blackslope.repositories.movie_repository import MovieRepository
from blackslope.services.domain import MovieDomainModel

"""
Movie Service.

Rôle (fonctionnel) :
- Point d’entrée métier des opérations sur les films.
- Convertit domaine <-> entité autour des appels au repository.
- Ne lève pas d’erreur “introuvable” : renvoie None, la couche API choisit la réponse HTTP.
"""


class MovieService:
    def __init__(self, repository: MovieRepository) -> None:
        self.repository = repository

    async def get_all_movies(self) -> List[MovieDomainModel]:
        return entities_to_domain(await self.repository.get_all())

    async def get_movie(self, movie_id: int) -> Optional[MovieDomainModel]:
        entity = await self.repository.get_single(movie_id)
        return entity_to_domain(entity) if entity is not None else None

    async def create_movie(self, movie: MovieDomainModel) -> MovieDomainModel:
        entity = await self.repository.create(domain_to_entity(movie))
        return entity_to_domain(entity)

    async def update_movie(self, movie: MovieDomainModel) -> Optional[MovieDomainModel]:
        entity = await self.repository.update(domain_to_entity(movie))
        return entity_to_domain(entity) if entity is not None else None

    async def delete_movie(self, movie_id: int) -> Optional[int]:
        return await self.repository.delete(movie_id)

    async def check_if_movie_exists(self, title: str, release_date: Optional[datetime]) -> bool:
        return await self.repository.movie_exists(title, release_date)
