from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Dict, Optional

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from blackslope.core.errors import ApiHttpStatusCode, ExceptionType, HandledException
from blackslope.core.settings import settings, split_csv

"""
Core Security (JWT Bearer).

Rôle (fonctionnel) :
- Authentifie les appels via un jeton JWT : Authorization: Bearer <token>.
- Deux sources de clé de vérification :
  - JWT_JWKS_URL : clés publiques du fournisseur d’identité (authority), résolues par `kid`,
  - JWT_SECRET : secret partagé (HS256), pratique en dev / tests.
- Vérifie expiration, audience (JWT_AUDIENCE) et issuer (JWT_ISSUER) s’ils sont configurés.

Comportement :
- Si aucune source de clé n’est configurée et ENV != prod : bypass (pratique en dev / local).
- Si aucune source de clé n’est configurée et ENV = prod : erreur 500 (configuration serveur invalide).
- Jeton absent, invalide ou expiré : HandledException(Authentication) -> 401.

Notes :
- La cryptographie est entièrement déléguée à PyJWT.
- HTTPBearer(auto_error=False) déclare le schéma "Bearer" dans Swagger sans lever d’erreur
  native : on garde la main sur le format de réponse.
"""

log = logging.getLogger("blackslope.security")

bearer_scheme = HTTPBearer(auto_error=False, description="JWT avec le préfixe Bearer")


@lru_cache(maxsize=4)
def _jwks_client(url: str) -> jwt.PyJWKClient:
    """Client JWKS partagé (cache des clés côté PyJWT)."""
    return jwt.PyJWKClient(url)


def auth_configured() -> bool:
    return bool(settings.JWT_SECRET or settings.JWT_JWKS_URL)


def _verification_key(token: str) -> Any:
    """Retourne la clé de vérification : clé JWKS (par kid) en priorité, sinon le secret partagé."""
    if settings.JWT_JWKS_URL:
        return _jwks_client(settings.JWT_JWKS_URL).get_signing_key_from_jwt(token).key
    return settings.JWT_SECRET


def decode_token(token: str) -> Dict[str, Any]:
    """
    Décode et vérifie un JWT selon la configuration courante.

    Lève HandledException(Authentication) si le jeton est invalide.
    """
    options = {"require": ["exp"]}
    kwargs: Dict[str, Any] = {}

    if settings.JWT_AUDIENCE:
        kwargs["audience"] = settings.JWT_AUDIENCE
    else:
        options["verify_aud"] = False
    if settings.JWT_ISSUER:
        kwargs["issuer"] = settings.JWT_ISSUER

    try:
        return jwt.decode(
            token,
            _verification_key(token),
            algorithms=split_csv(settings.JWT_ALGORITHMS) or ["HS256"],
            options=options,
            **kwargs,
        )
    except jwt.ExpiredSignatureError as exc:
        raise HandledException(ExceptionType.AUTHENTICATION, "Token expired") from exc
    except jwt.PyJWKClientError as exc:
        log.warning("JWKS lookup failed: %s", exc)
        raise HandledException(ExceptionType.AUTHENTICATION, "Unable to resolve signing key") from exc
    except jwt.InvalidTokenError as exc:
        raise HandledException(ExceptionType.AUTHENTICATION, "Invalid token") from exc


async def require_jwt(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[Dict[str, Any]]:
    """
    Dépendance FastAPI : vérifie le jeton bearer et renvoie ses claims.

    Usage :
    - À brancher sur les routes protégées (dependencies=[Depends(require_jwt)]).
    - Renvoie None en mode bypass (dev sans configuration d’auth).
    """
    if not auth_configured():
        # En prod, une auth non configurée est une mauvaise config serveur
        if settings.is_prod:
            raise HandledException(
                ExceptionType.SECURITY,
                "JWT authentication is not configured on the server",
                status_code=ApiHttpStatusCode.INTERNAL_SERVER_ERROR,
            )
        # En dev/local : on bypass pour faciliter les tests
        return None

    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise HandledException(ExceptionType.AUTHENTICATION, "Missing bearer token")

    return decode_token(credentials.credentials)
