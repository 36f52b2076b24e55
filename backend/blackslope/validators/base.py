from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Generic, List, Optional, Sequence, TypeVar

from blackslope.core.errors import ApiException, ApiHttpStatusCode
from blackslope.schemas.common import ApiError

"""
Validators Base.

Rôle (fonctionnel) :
- BlackSlopeValidator : un validateur renvoie la liste de ses échecs (ValidationFailure).
  validate_or_raise() transforme ces échecs en ApiException(400) :
    - "data"   : le payload invalide,
    - "errors" : un {code, message} par règle en échec.
- CompositeValidator : exécute plusieurs validateurs sur le même objet et concatène
  leurs échecs (ordre conservé).
- Règles élémentaires réutilisables : champ non vide, longueur bornée.

Notes :
- validate() est async : certaines règles interrogent la base (ex : doublon).
"""

T = TypeVar("T")

log = logging.getLogger("blackslope.validation")


class ErrorCode(IntEnum):
    """Base des énumérations de codes d’erreur : chaque membre porte une description."""

    def __new__(cls, value: int, description: str = ""):
        member = int.__new__(cls, value)
        member._value_ = value
        member.description = description
        return member


@dataclass(frozen=True)
class ValidationFailure:
    """Échec d’une règle sur une propriété."""
    property_name: str
    code: ErrorCode

    @property
    def message(self) -> str:
        return self.code.description

    def to_api_error(self) -> ApiError:
        return ApiError(code=int(self.code), message=self.message)


class BlackSlopeValidator(Generic[T]):
    """Validateur abstrait."""

    async def validate(self, instance: T) -> List[ValidationFailure]:
        raise NotImplementedError

    def payload(self, instance: T) -> Any:
        """Objet renvoyé dans "data" en cas d’échec (par défaut : l’instance validée)."""
        return instance

    async def validate_or_raise(self, instance: T) -> None:
        failures = await self.validate(instance)
        if not failures:
            return

        log.info(
            "validation_failed",
            extra={"error_codes": [int(f.code) for f in failures]},
        )
        raise ApiException(
            ApiHttpStatusCode.BAD_REQUEST,
            data=self.payload(instance),
            errors=[f.to_api_error() for f in failures],
        )


class CompositeValidator(BlackSlopeValidator[T]):
    """Agrège plusieurs validateurs appliqués au même objet."""

    def __init__(self, validators: Sequence[BlackSlopeValidator[T]]) -> None:
        self.validators = list(validators)

    async def validate(self, instance: T) -> List[ValidationFailure]:
        failures: List[ValidationFailure] = []
        for validator in self.validators:
            failures.extend(await validator.validate(instance))
        return failures


def not_empty(value: Optional[str]) -> bool:
    return value is not None and bool(value.strip())


def length_between(value: Optional[str], minimum: int, maximum: int) -> bool:
    return value is not None and minimum <= len(value) <= maximum
