"""flexkit-core -- Shared primitives for flexkit resource adapters.

Re-exports all public types: errors, diagnostics, models, identifier codec,
and validators.
"""

from flexkit_core.diagnostics import (
    Diagnostic,
    Diagnostics,
    Severity,
    log_and_add_error,
    log_and_add_warning,
)
from flexkit_core.errors import (
    ConfigurationError,
    CoreErrorCode,
    FlexkitError,
    NotFoundError,
    PartialFailureError,
    RemoteCallError,
    TypeMismatchError,
    ValidationError,
)
from flexkit_core.ids import SEPARATOR, build_id, parse_id
from flexkit_core.models import ProviderData
from flexkit_core.validate import (
    AttributeValidator,
    NoSeparatorValidator,
    UUIDValidator,
    no_separator_validator,
    uuid_validator,
)

__all__ = [
    # Errors
    "CoreErrorCode",
    "FlexkitError",
    "ConfigurationError",
    "ValidationError",
    "NotFoundError",
    "PartialFailureError",
    "RemoteCallError",
    "TypeMismatchError",
    # Diagnostics
    "Severity",
    "Diagnostic",
    "Diagnostics",
    "log_and_add_error",
    "log_and_add_warning",
    # Models
    "ProviderData",
    # Identifiers
    "SEPARATOR",
    "build_id",
    "parse_id",
    # Validators
    "AttributeValidator",
    "UUIDValidator",
    "NoSeparatorValidator",
    "uuid_validator",
    "no_separator_validator",
]
