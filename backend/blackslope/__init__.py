"""
blackslope

Package racine du backend BlackSlope (API REST "Movies" de référence).

Rôle (fonctionnel) :
- Contient tout le code applicatif (API, validation, mapping, services, accès DB).
- Sert de point d’ancrage pour les imports : `from blackslope...`

Organisation (haut niveau) :
- blackslope.api          : routes FastAPI (contrôleurs, dépendances, enveloppe de réponse)
- blackslope.validators   : règles de validation (codes d’erreur métier)
- blackslope.mappers      : conversions view model <-> domaine <-> entité ORM
- blackslope.services     : logique applicative (use-cases movies)
- blackslope.repositories : accès aux données (SQLAlchemy async)
- blackslope.core         : briques transverses (settings, erreurs, logs, corrélation, sécurité, santé, version)
- blackslope.db           : base SQLAlchemy + session async + données de seed
- blackslope.models       : modèles ORM (tables)
- blackslope.schemas      : schémas Pydantic (contrats HTTP, enveloppe ApiResponse)
"""

__version__ = "1.0.0"
