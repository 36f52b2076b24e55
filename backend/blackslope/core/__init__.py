"""
blackslope.core

Package “cœur” de l’application : il regroupe tout ce qui est transversal (cross-cutting concerns),
c’est-à-dire ce qui s’applique à plusieurs endpoints/services et ne dépend pas du domaine films.

On y trouve :

- settings
  Configuration (variables d’environnement, .env, appsettings.json / appsettings.<ENV>.json).

- errors
  Enveloppe d’erreur uniforme {data, errors}, statuts HTTP, ExceptionType, ApiException / HandledException.

- logging
  Logs JSON (console + fichier à rotation journalière) enrichis du correlation id.

- correlation
  Identifiant de corrélation par requête (header CorrelationId, ContextVar).

- security
  Authentification JWT Bearer (secret partagé ou JWKS).

- health
  Exécution et agrégation des health checks (filtrage par tag).

- version
  Source de la version exposée par /api/version.
"""
