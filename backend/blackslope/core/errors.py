from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any, Dict, Iterable, List, Optional

from fastapi.encoders import jsonable_encoder

from blackslope.schemas.common import ApiError, ApiResponse

"""
Core Errors.

Rôle (fonctionnel) :
- Standardise le format des erreurs renvoyées par l’API (enveloppe ApiResponse homogène).
- Définit la taxonomie fermée des erreurs applicatives (ExceptionType) et sa correspondance HTTP.
- Fournit deux exceptions applicatives :
  - ApiException : statut HTTP explicite + liste d’erreurs {code, message} + data optionnelle
    (ex : erreurs de validation, ressource introuvable).
  - HandledException : erreur typée (General, Service, Validation, Warning, Authentication, Security)
    dont le statut HTTP découle du type.

Convention de réponse (exemple) :
{
  "data": {"title": "d", ...},
  "errors": [
    {"code": 40005, "message": "Movie Title should be between 2 and 50 characters"}
  ]
}

Le correlation id n’est pas dans le corps : il est renvoyé dans le header de réponse.
"""


class ApiHttpStatusCode(IntEnum):
    """Statuts HTTP utilisés par l’API (avec description lisible)."""
    OK = 200
    CREATED = 201
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    INTERNAL_SERVER_ERROR = 500
    SERVICE_UNAVAILABLE = 503

    @property
    def description(self) -> str:
        return _STATUS_DESCRIPTIONS[self]

    @classmethod
    def describe(cls, status_code: int) -> str:
        """Description d’un statut quelconque (fallback générique si inconnu)."""
        try:
            return cls(status_code).description
        except ValueError:
            return "HTTP Error."


_STATUS_DESCRIPTIONS: Dict[ApiHttpStatusCode, str] = {
    ApiHttpStatusCode.OK: "OK.",
    ApiHttpStatusCode.CREATED: "Created.",
    ApiHttpStatusCode.BAD_REQUEST: "Bad Request.",
    ApiHttpStatusCode.UNAUTHORIZED: "Unauthorized.",
    ApiHttpStatusCode.FORBIDDEN: "Forbidden.",
    ApiHttpStatusCode.NOT_FOUND: "Not Found.",
    ApiHttpStatusCode.METHOD_NOT_ALLOWED: "Method Not Allowed.",
    ApiHttpStatusCode.INTERNAL_SERVER_ERROR: "Internal Server Error.",
    ApiHttpStatusCode.SERVICE_UNAVAILABLE: "Service Unavailable.",
}


class ExceptionType(str, Enum):
    """Catégories d’erreurs applicatives (ensemble fermé)."""
    GENERAL = "General"
    SERVICE = "Service"
    VALIDATION = "Validation"
    WARNING = "Warning"
    AUTHENTICATION = "Authentication"
    SECURITY = "Security"


# Type d’erreur -> statut HTTP
EXCEPTION_TYPE_STATUS: Dict[ExceptionType, ApiHttpStatusCode] = {
    ExceptionType.GENERAL: ApiHttpStatusCode.INTERNAL_SERVER_ERROR,
    ExceptionType.SERVICE: ApiHttpStatusCode.INTERNAL_SERVER_ERROR,
    ExceptionType.VALIDATION: ApiHttpStatusCode.BAD_REQUEST,
    ExceptionType.WARNING: ApiHttpStatusCode.BAD_REQUEST,
    ExceptionType.AUTHENTICATION: ApiHttpStatusCode.UNAUTHORIZED,
    ExceptionType.SECURITY: ApiHttpStatusCode.FORBIDDEN,
}


class HandledException(Exception):
    """
    Exception applicative typée.

    Usage :
    - Lever une erreur avec une catégorie stable (ExceptionType) et un message explicite.
    - Le handler global produit une réponse avec le statut correspondant au type.

    Exemple :
        raise HandledException(ExceptionType.AUTHENTICATION, "Token expiré")
    """

    def __init__(
        self,
        exception_type: ExceptionType,
        message: str,
        code: Optional[int] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.exception_type = exception_type
        self.message = message
        self._code = code
        # Surcharge ponctuelle du statut (ex : mauvaise configuration serveur -> 500)
        self._status_code = status_code

    @property
    def status_code(self) -> int:
        if self._status_code is not None:
            return int(self._status_code)
        return int(EXCEPTION_TYPE_STATUS[self.exception_type])

    @property
    def code(self) -> int:
        return self._code if self._code is not None else self.status_code

    def to_api_error(self) -> ApiError:
        return ApiError(code=self.code, message=self.message)


class ApiException(Exception):
    """
    Exception HTTP porteuse d’une liste d’erreurs {code, message}.

    - status_code : statut HTTP de la réponse
    - data : objet renvoyé tel quel dans "data" (ex : le payload invalide)
    - errors : une ou plusieurs ApiError
    """

    def __init__(
        self,
        status_code: int,
        data: Any = None,
        errors: Optional[Iterable[ApiError]] = None,
        message: Optional[str] = None,
    ):
        self.status_code = int(status_code)
        self.data = data
        self.errors: List[ApiError] = list(errors or [])
        super().__init__(message or ApiHttpStatusCode.describe(self.status_code))

    @classmethod
    def single(cls, status_code: int, code: int, message: str, data: Any = None) -> "ApiException":
        """Raccourci pour une erreur unique."""
        return cls(status_code, data=data, errors=[ApiError(code=code, message=message)])


def error_payload(*, errors: Iterable[ApiError], data: Any = None) -> Dict[str, Any]:
    """Construit le payload d’erreur homogène (enveloppe ApiResponse, nulls omis)."""
    response = ApiResponse(data=data, errors=list(errors))
    return jsonable_encoder(response, by_alias=True, exclude_none=True)


def status_error(status_code: int, message: Optional[str] = None) -> ApiError:
    """Erreur générique dont le code est le statut HTTP lui-même."""
    return ApiError(code=int(status_code), message=message or ApiHttpStatusCode.describe(status_code))
