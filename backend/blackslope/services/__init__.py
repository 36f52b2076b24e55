"""
blackslope.services

Package “services” : logique applicative (use-cases) indépendante des endpoints HTTP.

Rôle (fonctionnel) :
- movie_service : orchestration CRUD des films (repository + mapping entité <-> domaine).
- health_checks : checks de santé spécifiques à l’application (DB, table movies).
- domain : modèle domaine (MovieDomainModel).

Principe :
- blackslope.api = transport HTTP (routes, validation, dépendances)
- blackslope.services = orchestration métier (réutilisable, testable)
- blackslope.repositories / blackslope.models = persistance
"""
