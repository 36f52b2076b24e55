from __future__ import annotations

import uuid
from contextvars import ContextVar

"""
Core Correlation ID.

Rôle (fonctionnel) :
- Gère un identifiant de corrélation (correlation id) stocké dans un ContextVar.
- Permet de corréler logs, erreurs et réponses pour une même requête.
- Le correlation id peut être :
  - fourni par un header entrant (par défaut : CorrelationId), s’il s’agit d’un UUID valide,
  - ou généré automatiquement (UUID4) sinon.

Notes :
- ContextVar est adapté aux contextes async (FastAPI) : chaque requête garde sa propre valeur.
- Ce module est utilisé par :
  - logging (injection dans les logs),
  - le middleware HTTP (lecture du header + réécriture sur la réponse),
  - les handlers d’erreurs.
"""

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def set_correlation_id(cid: str | None) -> None:
    """Force la valeur du correlation id pour le contexte courant."""
    _correlation_id.set(cid)


def get_correlation_id() -> str | None:
    """Retourne le correlation id du contexte courant (ou None)."""
    return _correlation_id.get()


def current_correlation_id() -> str:
    """
    Retourne le correlation id de la requête en cours.

    Lève RuntimeError si aucun correlation id n’a été positionné
    (appel hors d’une requête HTTP).
    """
    cid = _correlation_id.get()
    if cid is None:
        raise RuntimeError("CorrelationId has not been set")
    return cid


def read_correlation_id(incoming: str | None) -> str | None:
    """Valide un correlation id entrant : renvoie l’UUID normalisé, ou None s’il est absent/invalide."""
    value = (incoming or "").strip()
    if not value:
        return None
    try:
        return str(uuid.UUID(value))
    except ValueError:
        return None


def ensure_correlation_id(incoming: str | None = None) -> str:
    """
    Garantit un correlation id pour le contexte courant.

    - Si un correlation id entrant valide est fourni, il est réutilisé.
    - Sinon, on génère un UUID4.
    """
    cid = read_correlation_id(incoming) or str(uuid.uuid4())
    set_correlation_id(cid)
    return cid
