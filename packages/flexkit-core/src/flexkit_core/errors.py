"""Shared error codes and exception hierarchy for the flexkit framework.

``CoreErrorCode`` contains the error/warning codes common to all flexkit
resource packages.  The exception classes are raised by helpers (identifier
codec, mapping, lookup, client construction) and translated into
diagnostics by the resource lifecycle methods.
"""

from __future__ import annotations

from enum import Enum


class CoreErrorCode(str, Enum):
    """Error codes shared across all flexkit packages.

    Each package maintains its own *complete* ``ErrorCode`` enum that includes
    both the shared codes here and package-specific codes.  Values equal their
    names so they are stable strings suitable for metrics and alerting.
    """

    # Provider configuration
    E_CONFIG_WRONG_TYPE = "E_CONFIG_WRONG_TYPE"
    E_CONFIG_CLIENT_BUILD = "E_CONFIG_CLIENT_BUILD"
    E_CONFIG_NOT_CONFIGURED = "E_CONFIG_NOT_CONFIGURED"

    # Validation
    E_VALIDATION_UUID = "E_VALIDATION_UUID"
    E_VALIDATION_SEPARATOR = "E_VALIDATION_SEPARATOR"
    E_VALIDATION_REQUIRED = "E_VALIDATION_REQUIRED"
    E_VALIDATION_IMPORT_ID = "E_VALIDATION_IMPORT_ID"

    # Remote service
    E_REMOTE_CALL = "E_REMOTE_CALL"
    E_REMOTE_NOT_FOUND = "E_REMOTE_NOT_FOUND"
    E_REMOTE_PARTIAL_CREATE = "E_REMOTE_PARTIAL_CREATE"

    # Mapping
    E_MAPPING_INVALID = "E_MAPPING_INVALID"
    E_MAPPING_TYPE_MISMATCH = "E_MAPPING_TYPE_MISMATCH"

    # Warnings (non-fatal)
    W_IMPORT_SECRET_UNAVAILABLE = "W_IMPORT_SECRET_UNAVAILABLE"


class FlexkitError(Exception):
    """Base exception for all flexkit errors.

    Subclasses set a default ``code``; callers may override it per instance
    when a more specific code applies.
    """

    code: str = CoreErrorCode.E_REMOTE_CALL

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        if code is not None:
            self.code = code


class ConfigurationError(FlexkitError):
    """Provider-level setup is unusable (wrong shape, client construction)."""

    code = CoreErrorCode.E_CONFIG_CLIENT_BUILD


class ValidationError(FlexkitError):
    """Malformed identifier or attribute value."""

    code = CoreErrorCode.E_VALIDATION_REQUIRED


class NotFoundError(FlexkitError):
    """The remote object does not exist (any more)."""

    code = CoreErrorCode.E_REMOTE_NOT_FOUND


class PartialFailureError(FlexkitError):
    """A remote side effect may have happened although the call looked failed.

    The caller must not blindly retry: manual cleanup may be required first.
    """

    code = CoreErrorCode.E_REMOTE_PARTIAL_CREATE


class RemoteCallError(FlexkitError):
    """Transport or service failure, carrying the HTTP status when known."""

    code = CoreErrorCode.E_REMOTE_CALL

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message, code)
        self.status_code = status_code


class TypeMismatchError(FlexkitError):
    """A remote payload field had an unexpected type."""

    code = CoreErrorCode.E_MAPPING_TYPE_MISMATCH
