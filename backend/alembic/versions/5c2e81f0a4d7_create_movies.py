"""Création de la table movies + données de démonstration.

Rôle (fonctionnel) :
- Crée la table `movies` (id, title, description, release_date).
- Ajoute l’index (title, release_date) utilisé par la détection de doublon.
- Insère les 50 films placeholder (blackslope.db.seed).

Revision ID: 5c2e81f0a4d7
Revises:
Create Date: 2026-10-17 10:12:41.208311
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from blackslope.db.seed import movie_seed_rows

# Identifiants Alembic
revision: str = "5c2e81f0a4d7"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Application des changements de schéma."""
    movies = op.create_table(
        "movies",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(length=50), nullable=False),
        sa.Column("description", sa.String(length=50), nullable=False),
        sa.Column("release_date", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_movies_title_release_date", "movies", ["title", "release_date"], unique=False)

    op.bulk_insert(movies, movie_seed_rows())


def downgrade() -> None:
    """Retour arrière des changements de schéma."""
    op.drop_index("ix_movies_title_release_date", table_name="movies")
    op.drop_table("movies")
