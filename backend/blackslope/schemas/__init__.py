"""
blackslope.schemas

Package des schémas API (Pydantic).

Rôle (fonctionnel) :
- Définit les modèles d’entrée/sortie utilisés par l’API (request/response), en camelCase côté JSON.
- Sépare clairement :
  - les modèles ORM (blackslope.models) = persistance DB
  - le modèle domaine (blackslope.services.domain) = logique métier
  - les schémas Pydantic (blackslope.schemas) = contrat HTTP
"""
