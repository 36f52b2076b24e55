from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from blackslope.db.base import Base

"""
Model Movie.

Rôle (fonctionnel) :
- Représente un film (seule entité persistée de l’API).
- Aucune relation : simple ressource CRUD.

Champs :
- id : clé primaire entière (auto-incrément).
- title / description : textes courts (2..50 caractères, contrôlés par les validateurs).
- release_date : date de sortie (optionnelle).

Index :
- (title, release_date) : accélère la détection de doublon à la création.
"""


class Movie(Base):
    __tablename__ = "movies"

    # Identifiant technique (auto-incrément)
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    title: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str] = mapped_column(String(50), nullable=False)

    # Date de sortie (optionnelle)
    release_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        Index("ix_movies_title_release_date", "title", "release_date"),
    )

    def __repr__(self) -> str:
        return f"<Movie id={self.id} title={self.title!r}>"
