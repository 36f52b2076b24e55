"""
blackslope.models

Package ORM (SQLAlchemy) : définition des entités persistées en base.

Rôle (fonctionnel) :
- Centralise les modèles de l’application (Movie).
- Permet des imports plus simples depuis blackslope.models.
- Garantit l’enregistrement des tables dans Base.metadata (Alembic, tests).
"""

from blackslope.models.movie import Movie

__all__ = ["Movie"]
