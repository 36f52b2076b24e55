from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List

"""
DB Seed.

Rôle (fonctionnel) :
- Fournit les films “placeholder” de démonstration (50 par défaut).
- Utilisé par :
  - la migration Alembic initiale (op.bulk_insert),
  - scripts/seed_movies.py (reset / reseed d’une base existante).

Les valeurs sont déterministes : mêmes lignes à chaque exécution.
"""

DEFAULT_MOVIE_COUNT = 50


def movie_seed_rows(count: int = DEFAULT_MOVIE_COUNT) -> List[Dict[str, Any]]:
    """Lignes de seed (id attribué par la base, titre/description courts, date de sortie étalée sur 20 ans)."""
    rows: List[Dict[str, Any]] = []
    for i in range(1, count + 1):
        rows.append(
            {
                "title": f"Movie {i}",
                "description": f"Description of movie {i}",
                "release_date": datetime(2000 + (i % 20), (i % 12) + 1, (i % 28) + 1, tzinfo=timezone.utc),
            }
        )
    return rows
