from __future__ import annotations

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from blackslope.core.health import CheckResult, HealthCheckRegistration, HealthCheckTag, HealthStatus
from blackslope.repositories.movie_repository import MovieRepository

"""
Health checks Movies.

Rôle (fonctionnel) :
- MOVIES.DB : la base répond (SELECT 1).
- MOVIES.API : la table movies est lisible ; une table vide est signalée Degraded
  (l’API répond mais le seed n’a pas été appliqué).

Chaque check lève en cas d’échec : run_health_checks le transforme en Unhealthy.
"""


async def check_movies_database(db: AsyncSession) -> CheckResult:
    await db.execute(text("SELECT 1"))
    return HealthStatus.HEALTHY, None


async def check_movies_api(db: AsyncSession) -> CheckResult:
    total = await MovieRepository(db).count()
    if total == 0:
        return HealthStatus.DEGRADED, "Movies table is empty"
    return HealthStatus.HEALTHY, f"{total} movies available"


HEALTH_CHECKS = [
    HealthCheckRegistration(
        name="MOVIES.DB",
        check=check_movies_database,
        tags=(HealthCheckTag.MOVIES, HealthCheckTag.DATABASE),
    ),
    HealthCheckRegistration(
        name="MOVIES.API",
        check=check_movies_api,
        tags=(HealthCheckTag.MOVIES, HealthCheckTag.API),
    ),
]
