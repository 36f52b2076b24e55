from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

"""
Schemas communs (Pydantic).

Rôle (fonctionnel) :
- Définit l’enveloppe de réponse unique de l’API :
  {
    "data": {...},
    "errors": [{"code": 40003, "message": "..."}]
  }
- Les champs null sont omis à la sérialisation (response_model_exclude_none côté routes).
- Les clés JSON sont en camelCase (alias), les attributs Python en snake_case.
"""


class CamelModel(BaseModel):
    """Base des contrats HTTP : alias camelCase, lecture depuis objets (ORM / domaine)."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiError(CamelModel):
    """Une erreur exposée au client (code stable + message lisible)."""
    code: int
    message: str


class ApiResponse(CamelModel):
    """Enveloppe standard : data (succès) et/ou errors (échec)."""
    data: Optional[Any] = None
    errors: Optional[List[ApiError]] = None
