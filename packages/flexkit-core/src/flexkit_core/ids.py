"""Composite identifier codec.

Resources addressed by several component identifiers store them joined with
:data:`SEPARATOR` in a single ``id`` attribute, and accept the same format
as an import identifier.  Component identifiers are validated elsewhere to
never contain the separator, so :func:`parse_id` is the exact inverse of
:func:`build_id`.
"""

from __future__ import annotations

from flexkit_core.errors import CoreErrorCode, ValidationError

SEPARATOR = ","


def build_id(*parts: str) -> str:
    """Join component identifiers into a composite identifier."""
    return SEPARATOR.join(parts)


def parse_id(raw_id: str, field_names: list[str]) -> dict[str, str]:
    """Split *raw_id* into one non-empty part per entry in *field_names*.

    Parameters
    ----------
    raw_id:
        Composite identifier, e.g. ``"<project_id>,<instance_id>,<database_id>"``.
    field_names:
        Names of the component fields, in order.

    Returns
    -------
    dict[str, str]
        Mapping of field name to its part of *raw_id*.

    Raises
    ------
    ValidationError
        If the number of parts differs from ``len(field_names)`` or any part
        is empty.
    """
    parts = raw_id.split(SEPARATOR)
    if len(parts) != len(field_names) or any(part == "" for part in parts):
        expected = SEPARATOR.join(f"[{name}]" for name in field_names)
        raise ValidationError(
            f"Expected import identifier with format {expected}, got {raw_id!r}",
            code=CoreErrorCode.E_VALIDATION_IMPORT_ID,
        )
    return dict(zip(field_names, parts))
