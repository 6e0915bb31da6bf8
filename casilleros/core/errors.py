from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    STORE_UNAVAILABLE = "store_unavailable"
    STORE_ERROR = "store_error"


class CasillerosError(Exception):
    kind: ErrorKind = ErrorKind.STORE_ERROR


class ValidationError(CasillerosError):
    """Caller input failed a static rule; raised before any store call."""

    kind = ErrorKind.VALIDATION


class NotFoundError(CasillerosError):
    kind = ErrorKind.NOT_FOUND
