"""
Identity Validator

Structural check for caller-supplied document ids, run before any query or
mutation keyed by such an id so malformed keys never reach the store.
"""

from enum import StrEnum
from typing import Any

import attrs

from src.platform.exception.exceptions import DomainError, ForbiddenError
from src.platform.types.object_id_types import is_object_id_hex


class ValidationFailure(StrEnum):
    MISSING = 'missing'
    MALFORMED_IDENTIFIER = 'malformed_identifier'


@attrs.frozen
class ValidationResult:
    is_valid: bool
    reason: ValidationFailure | None = None

    @classmethod
    def valid(cls) -> 'ValidationResult':
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, reason: ValidationFailure) -> 'ValidationResult':
        return cls(is_valid=False, reason=reason)


def validate(candidate_id: Any) -> ValidationResult:
    """Pure format check, no store lookup."""
    if candidate_id is None or candidate_id == '':
        return ValidationResult.invalid(ValidationFailure.MISSING)
    if not is_object_id_hex(candidate_id):
        return ValidationResult.invalid(ValidationFailure.MALFORMED_IDENTIFIER)
    return ValidationResult.valid()


def require_valid_identifier(candidate_id: Any, *, field: str) -> str:
    """
    Raises:
        DomainError: `{field} is required` or `Invalid {field} format`
    """
    result = validate(candidate_id)
    if result.reason is ValidationFailure.MISSING:
        raise DomainError(f'{field} is required')
    if not result.is_valid:
        raise DomainError(f'Invalid {field} format')
    return str(candidate_id).lower()


def require_matching_principal(candidate_id: Any, principal_id: str | None) -> str:
    """
    Protected actions: the id in the request must be the authenticated principal.

    Raises:
        ForbiddenError: no principal, malformed id, or a different identity
    """
    if not principal_id or not validate(candidate_id).is_valid:
        raise ForbiddenError('Unauthorized: Invalid Owner ID')
    if str(candidate_id).lower() != principal_id.lower():
        raise ForbiddenError('Unauthorized: Invalid Owner ID')
    return str(candidate_id).lower()
