"""Attribute validators shared by resource schemas.

A validator's :meth:`check` returns an error message, or *None* when the
value is acceptable.  Unset values (``None``) are always accepted;
required-ness is checked by the schema itself.
"""

from __future__ import annotations

import uuid

from flexkit_core.errors import CoreErrorCode
from flexkit_core.ids import SEPARATOR


class AttributeValidator:
    """Base class for string attribute validators."""

    code: str = CoreErrorCode.E_VALIDATION_REQUIRED
    description: str = ""

    def check(self, attribute: str, value: str | None) -> str | None:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class UUIDValidator(AttributeValidator):
    """Reject values that do not parse as a UUID."""

    code = CoreErrorCode.E_VALIDATION_UUID
    description = "value must be a UUID"

    def check(self, attribute: str, value: str | None) -> str | None:
        if value is None:
            return None
        try:
            uuid.UUID(value)
        except ValueError:
            return f"Attribute {attribute} must be a UUID, got {value!r}"
        return None


class NoSeparatorValidator(AttributeValidator):
    """Reject values containing the composite-identifier separator."""

    code = CoreErrorCode.E_VALIDATION_SEPARATOR
    description = f"value must not contain {SEPARATOR!r}"

    def check(self, attribute: str, value: str | None) -> str | None:
        if value is None:
            return None
        if SEPARATOR in value:
            return (
                f"Attribute {attribute} must not contain the separator "
                f"{SEPARATOR!r}, got {value!r}"
            )
        return None


def uuid_validator() -> UUIDValidator:
    return UUIDValidator()


def no_separator_validator() -> NoSeparatorValidator:
    return NoSeparatorValidator()
