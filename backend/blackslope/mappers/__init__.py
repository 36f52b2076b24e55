"""
blackslope.mappers

Package de mapping entre les représentations d’un film :
- view models HTTP (blackslope.schemas.movies),
- modèle domaine (blackslope.services.domain),
- entité ORM (blackslope.models.movie).

Chaque fonction est pure (pas d’accès DB) : facile à tester.
"""
