# backend/scripts/seed_movies.py
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from sqlalchemy import create_engine, delete, func, insert, select
from sqlalchemy.orm import sessionmaker

# Permet de lancer le script depuis backend/ sans souci d'import
BACKEND_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(BACKEND_DIR))

from blackslope.core.settings import settings
from blackslope.db.seed import DEFAULT_MOVIE_COUNT, movie_seed_rows
from blackslope.models.movie import Movie

"""
Seed des films de démonstration.

Usage :
    python scripts/seed_movies.py            # insère les films si la table est vide
    python scripts/seed_movies.py --reset    # vide la table puis réinsère
    python scripts/seed_movies.py --count 10
"""


def seed(reset: bool, count: int) -> None:
    engine = create_engine(settings.DATABASE_URL_SYNC, future=True)
    SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)

    with SessionLocal() as db:
        if reset:
            db.execute(delete(Movie))
            db.commit()
            print("✅ Reset done (all movies deleted).")

        existing = db.execute(select(func.count()).select_from(Movie)).scalar_one()
        if existing:
            print(f"ℹ️ Table movies already contains {existing} rows, nothing inserted (use --reset).")
            return

        rows = movie_seed_rows(count)
        if rows:
            db.execute(insert(Movie), rows)
        db.commit()
        print(f"✅ Seed done: {len(rows)} movies inserted.")


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--reset", action="store_true", help="Supprime les films avant de reseed")
    parser.add_argument("--count", type=int, default=DEFAULT_MOVIE_COUNT, help="Nombre de films à générer")
    args = parser.parse_args()

    seed(reset=args.reset, count=args.count)


if __name__ == "__main__":
    main()
