"""
blackslope.validators

Validation métier des requêtes, en amont des services.

- base : contrat commun (BlackSlopeValidator), agrégation (CompositeValidator),
  conversion des échecs en ApiException(400) avec un code par règle.
- movies : codes d’erreur (MovieErrorCode) et validateurs create / update.
"""
