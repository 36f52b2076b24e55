from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.responses import JSONResponse

from blackslope.core.errors import ApiException, ApiHttpStatusCode, status_error
from blackslope.core.health import HealthCheckTag, HealthReport, HealthStatus, run_health_checks
from blackslope.core.settings import settings
from blackslope.db.session import get_db
from blackslope.services.health_checks import HEALTH_CHECKS

"""
API Health.

Rôle (fonctionnel) :
- GET /health : exécute tous les health checks et renvoie le rapport agrégé.
- GET /health/{tag} : n’exécute que les checks portant ce tag (movies, database, api).
- Statut HTTP : 200 si Healthy ou Degraded, 503 si Unhealthy (monitoring / load balancer).
- Pas d’authentification : endpoint d’infrastructure.
"""

router = APIRouter(prefix=settings.HEALTH_ENDPOINT, tags=["health"])


def _report_response(report: HealthReport) -> JSONResponse:
    code = 503 if report.status == HealthStatus.UNHEALTHY else 200
    return JSONResponse(status_code=code, content=report.model_dump(mode="json"))


@router.get("", response_model=HealthReport, responses={503: {"model": HealthReport}})
async def health(db: AsyncSession = Depends(get_db)):
    report = await run_health_checks(HEALTH_CHECKS, db, timeout_s=settings.HEALTH_CHECK_TIMEOUT_S)
    return _report_response(report)


@router.get("/{tag}", response_model=HealthReport, responses={503: {"model": HealthReport}})
async def health_by_tag(tag: str, db: AsyncSession = Depends(get_db)):
    if tag not in HealthCheckTag.ALL:
        raise ApiException(
            ApiHttpStatusCode.NOT_FOUND,
            errors=[status_error(ApiHttpStatusCode.NOT_FOUND, f"Unknown health check tag '{tag}'")],
        )

    report = await run_health_checks(HEALTH_CHECKS, db, tag=tag, timeout_s=settings.HEALTH_CHECK_TIMEOUT_S)
    return _report_response(report)
