"""Error codes and structured diagnostic model for the flexkit-postgresflex package.

``ErrorCode`` contains all error/warning codes relevant to the database
resource.  ``ResourceDiagnostic`` extends ``Diagnostic`` with an
``attribute`` field for location context.
"""

from __future__ import annotations

from enum import Enum

from flexkit_core.diagnostics import Diagnostic


class ErrorCode(str, Enum):
    """Error codes for the Postgres Flex database resource.

    Values equal their names so they are stable strings suitable for
    metrics and alerting.  ``E_`` prefix = fatal, ``W_`` prefix = warning.
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

    # Database resource
    E_DATABASE_UPDATE_UNSUPPORTED = "E_DATABASE_UPDATE_UNSUPPORTED"

    # Warnings (non-fatal)
    W_IMPORT_SECRET_UNAVAILABLE = "W_IMPORT_SECRET_UNAVAILABLE"


class ResourceDiagnostic(Diagnostic):
    """Diagnostic with attribute-level location context.

    Extends the core ``Diagnostic`` with an ``attribute`` field naming the
    schema attribute that caused the issue (e.g. ``"project_id"``).
    """

    attribute: str | None = None
