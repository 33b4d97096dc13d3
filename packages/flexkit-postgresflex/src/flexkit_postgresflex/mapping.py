"""Field mapping between the declarative record and the remote API.

Provides ``map_fields()`` to refresh a :class:`DatabaseModel` from a
:class:`RemoteDatabase`, and ``to_create_payload()`` to build the body of
the create-database call.  Both are pure: the input record is never
mutated, so a failed mapping leaves the caller's record unchanged.
"""

from __future__ import annotations

from flexkit_core.errors import CoreErrorCode, TypeMismatchError, ValidationError
from flexkit_core.ids import build_id

from flexkit_postgresflex.models import (
    CreateDatabasePayload,
    DatabaseModel,
    RemoteDatabase,
)

OWNER_OPTION = "owner"


def map_fields(remote: RemoteDatabase | None, model: DatabaseModel | None) -> DatabaseModel:
    """Return *model* refreshed with the values reported by the service.

    ``database_id`` already on the record wins over the remote ``id``; the
    composite ``id`` is recomputed; ``name`` is copied verbatim; ``owner``
    is taken from ``options["owner"]`` when present and kept otherwise.

    Raises
    ------
    ValidationError
        If *remote* is None or has no id, or *model* is None.
    TypeMismatchError
        If ``options["owner"]`` is present but not a string.
    """
    if remote is None:
        raise ValidationError("response is nil", code=CoreErrorCode.E_MAPPING_INVALID)
    if not remote.id:
        raise ValidationError("id not present", code=CoreErrorCode.E_MAPPING_INVALID)
    if model is None:
        raise ValidationError("model input is nil", code=CoreErrorCode.E_MAPPING_INVALID)

    database_id = model.database_id or remote.id

    owner = model.owner
    if remote.options is not None and OWNER_OPTION in remote.options:
        remote_owner = remote.options[OWNER_OPTION]
        if not isinstance(remote_owner, str):
            raise TypeMismatchError(
                f"owner is not a string, got {type(remote_owner).__name__}"
            )
        owner = remote_owner

    return model.model_copy(
        update={
            "id": build_id(model.project_id or "", model.instance_id or "", database_id),
            "database_id": database_id,
            "name": remote.name,
            "owner": owner,
        }
    )


def to_create_payload(model: DatabaseModel | None) -> CreateDatabasePayload:
    """Build the create-database request body from *model*."""
    if model is None:
        raise ValidationError("nil model", code=CoreErrorCode.E_MAPPING_INVALID)

    return CreateDatabasePayload(
        name=model.name,
        options={OWNER_OPTION: model.owner or ""},
    )
