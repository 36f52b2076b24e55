from sqlalchemy.orm import DeclarativeBase

"""
DB Base.

Rôle (fonctionnel) :
- Définit la classe Base SQLAlchemy commune aux modèles ORM (ici : Movie).
- Sert de point d’ancrage pour :
  - la déclaration des tables (models/*),
  - les migrations Alembic (target_metadata),
  - la création de schéma en tests (Base.metadata.create_all).
"""


class Base(DeclarativeBase):
    """Classe racine ORM (SQLAlchemy Declarative)."""
    pass
