from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from blackslope.models.movie import Movie

"""
Movie Repository.

Rôle (fonctionnel) :
- Encapsule toutes les requêtes SQL sur la table movies.
- Opérations : liste, lecture unitaire, création, mise à jour, suppression, test d’existence.

Conventions :
- “Introuvable” = None (la couche API décide du statut HTTP).
- Chaque écriture est commitée immédiatement (1 requête HTTP = 1 unité de travail).
"""

log = logging.getLogger("blackslope.repositories.movies")


class MovieRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_all(self) -> Sequence[Movie]:
        rows = await self.db.execute(select(Movie).order_by(Movie.id))
        return rows.scalars().all()

    async def get_single(self, movie_id: int) -> Optional[Movie]:
        return await self.db.get(Movie, movie_id)

    async def create(self, movie: Movie) -> Movie:
        self.db.add(movie)
        await self.db.commit()
        await self.db.refresh(movie)
        log.info("movie_created", extra={"movie_id": movie.id})
        return movie

    async def update(self, movie: Movie) -> Optional[Movie]:
        existing = await self.db.get(Movie, movie.id)
        if existing is None:
            return None

        existing.title = movie.title
        existing.description = movie.description
        existing.release_date = movie.release_date

        await self.db.commit()
        await self.db.refresh(existing)
        log.info("movie_updated", extra={"movie_id": existing.id})
        return existing

    async def delete(self, movie_id: int) -> Optional[int]:
        result = await self.db.execute(delete(Movie).where(Movie.id == movie_id))
        await self.db.commit()
        if not result.rowcount:
            return None
        log.info("movie_deleted", extra={"movie_id": movie_id})
        return movie_id

    async def movie_exists(self, title: str, release_date: Optional[datetime]) -> bool:
        """Un film “existe” si un autre a le même titre (insensible à la casse) et la même date de sortie."""
        stmt = select(func.count(Movie.id)).where(func.lower(Movie.title) == title.strip().lower())
        if release_date is None:
            stmt = stmt.where(Movie.release_date.is_(None))
        else:
            stmt = stmt.where(Movie.release_date == release_date)
        total = (await self.db.execute(stmt)).scalar_one()
        return total > 0

    async def count(self) -> int:
        return (await self.db.execute(select(func.count(Movie.id)))).scalar_one()
