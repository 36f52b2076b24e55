from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Awaitable, Callable, List, Optional, Sequence, Tuple

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

"""
Core Health.

Rôle (fonctionnel) :
- Décrit les health checks de l’application de façon déclarative (nom + fonction + tags).
- Exécute un ensemble de checks (tous, ou filtrés par tag) avec un timeout par check.
- Agrège un statut global : Healthy / Degraded / Unhealthy.

Format de rapport (exposé par /health et /health/{tag}) :
{
  "status": "Healthy",
  "details": [
    {"key": "MOVIES.DB", "value": "Healthy", "description": null, "duration": 0.0012, "exception": null}
  ]
}

Notes :
- Un check est une coroutine qui reçoit la session DB de la requête et renvoie
  (status, description) ; toute exception le rend Unhealthy.
- Les checks s’exécutent séquentiellement : ils partagent la même AsyncSession,
  qui ne supporte pas les opérations concurrentes ; un check en échec annule la
  transaction pour que les suivants repartent sur une session saine.
"""

log = logging.getLogger("blackslope.health")


class HealthStatus(str, Enum):
    HEALTHY = "Healthy"
    DEGRADED = "Degraded"
    UNHEALTHY = "Unhealthy"


class HealthCheckTag:
    """Tags disponibles pour filtrer les checks (/health/{tag})."""
    MOVIES = "movies"
    DATABASE = "database"
    API = "api"

    ALL = (MOVIES, DATABASE, API)


CheckResult = Tuple[HealthStatus, Optional[str]]
CheckFn = Callable[[AsyncSession], Awaitable[CheckResult]]


@dataclass
class HealthCheckRegistration:
    """Déclaration d’un check : nom, coroutine, tags."""
    name: str
    check: CheckFn
    tags: Tuple[str, ...] = field(default_factory=tuple)


class HealthEntry(BaseModel):
    """Résultat d’un check (une ligne de "details")."""
    key: str
    value: HealthStatus
    description: Optional[str] = None
    duration: float
    exception: Optional[str] = None


class HealthReport(BaseModel):
    """Rapport agrégé."""
    status: HealthStatus
    details: List[HealthEntry]


def aggregate_status(entries: Sequence[HealthEntry]) -> HealthStatus:
    """Le statut global est le pire statut observé (Healthy si aucun check)."""
    statuses = {e.value for e in entries}
    if HealthStatus.UNHEALTHY in statuses:
        return HealthStatus.UNHEALTHY
    if HealthStatus.DEGRADED in statuses:
        return HealthStatus.DEGRADED
    return HealthStatus.HEALTHY


async def _reset_session(db: AsyncSession) -> None:
    """Annule la transaction en échec : la session reste utilisable par les checks suivants."""
    try:
        await db.rollback()
    except Exception as exc:
        log.warning("Health session rollback failed: %s", exc)


async def _run_one(registration: HealthCheckRegistration, db: AsyncSession, timeout_s: float) -> HealthEntry:
    start = time.perf_counter()
    try:
        status, description = await asyncio.wait_for(registration.check(db), timeout=timeout_s)
        return HealthEntry(
            key=registration.name,
            value=status,
            description=description,
            duration=round(time.perf_counter() - start, 4),
        )
    except asyncio.TimeoutError:
        await _reset_session(db)
        return HealthEntry(
            key=registration.name,
            value=HealthStatus.UNHEALTHY,
            description="Health check timed out",
            duration=round(time.perf_counter() - start, 4),
            exception="TimeoutError",
        )
    except Exception as exc:
        log.warning("Health check %s failed: %s", registration.name, exc)
        await _reset_session(db)
        return HealthEntry(
            key=registration.name,
            value=HealthStatus.UNHEALTHY,
            duration=round(time.perf_counter() - start, 4),
            exception=f"{type(exc).__name__}: {exc}"[:300],
        )


async def run_health_checks(
    registrations: Sequence[HealthCheckRegistration],
    db: AsyncSession,
    *,
    tag: Optional[str] = None,
    timeout_s: float = 5.0,
) -> HealthReport:
    """Exécute les checks (filtrés par tag si fourni) et retourne le rapport agrégé."""
    selected = [r for r in registrations if tag is None or tag in r.tags]

    entries: List[HealthEntry] = []
    for registration in selected:
        entries.append(await _run_one(registration, db, timeout_s))

    return HealthReport(status=aggregate_status(entries), details=entries)
