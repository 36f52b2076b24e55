from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

"""
Modèle domaine Movies.

Rôle (fonctionnel) :
- Représentation “métier” d’un film manipulée par la couche service.
- Indépendante du contrat HTTP (schemas) et de la persistance (models).
- id = None tant que le film n’est pas persisté.
"""


@dataclass
class MovieDomainModel:
    """Film côté domaine."""
    title: str
    description: str
    release_date: Optional[datetime] = None
    id: Optional[int] = None
