from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any

from .correlation import get_correlation_id

"""
Core Logging.

Rôle (fonctionnel) :
- Configure un logging JSON uniforme pour toute l’application (API + uvicorn).
- Injecte le correlation_id dans chaque log afin de corréler les événements d’une même requête.
- Supporte des “extras” structurés (method, path, status_code, duration_ms, movie_id, etc.).
- Sorties configurables :
  - console (stdout),
  - fichier avec rotation journalière (LOG_TO_FILE + LOG_FILE_NAME).

Notes :
- Le format JSON est adapté aux agrégateurs de logs (ELK, Datadog, Loki, CloudWatch…).
- Le root logger est configuré et uvicorn est aligné sur les mêmes handlers.
"""

# Extras standardisés recopiés dans le JSON s’ils sont présents sur le record
STRUCTURED_EXTRAS = (
    "method",
    "path",
    "status_code",
    "duration_ms",
    "client_ip",
    "movie_id",
    "movie_count",
    "error_codes",
    "health_status",
)


class CorrelationIdFilter(logging.Filter):
    """Ajoute correlation_id au LogRecord (valeur '-' si absent)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "-"
        return True


class JsonFormatter(logging.Formatter):
    """Formateur JSON pour logs structurés (1 event = 1 ligne JSON)."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "correlation_id": getattr(record, "correlation_id", "-"),
            "msg": record.getMessage(),
        }

        for key in STRUCTURED_EXTRAS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)

        # Stacktrace si exception attachée au record
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def _build_handlers(to_console: bool, to_file: bool, file_name: str) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []

    if to_console:
        handlers.append(logging.StreamHandler(sys.stdout))

    if to_file:
        path = Path(file_name)
        path.parent.mkdir(parents=True, exist_ok=True)
        # Rotation journalière, 7 fichiers conservés
        handlers.append(
            TimedRotatingFileHandler(path, when="midnight", backupCount=7, encoding="utf-8", utc=True)
        )

    return handlers


def setup_logging(
    level: str = "INFO",
    *,
    to_console: bool = True,
    to_file: bool = False,
    file_name: str = "logs/blackslope.log",
) -> None:
    """
    Initialise le logging global (root) en JSON et aligne uvicorn sur la même configuration.

    - Nettoie les handlers existants pour éviter les doublons (notamment avec --reload).
    - Chaque handler reçoit JsonFormatter + CorrelationIdFilter.
    """
    lvl = level.upper()

    root = logging.getLogger()
    root.setLevel(lvl)

    # Éviter doublons avec --reload (FastAPI/Uvicorn)
    if root.handlers:
        root.handlers.clear()

    for handler in _build_handlers(to_console, to_file, file_name):
        handler.setFormatter(JsonFormatter())
        handler.addFilter(CorrelationIdFilter())
        root.addHandler(handler)

    # Aligner uvicorn logs sur les mêmes handlers
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logger = logging.getLogger(name)
        logger.handlers = root.handlers
        logger.propagate = False
        logger.setLevel(lvl)
