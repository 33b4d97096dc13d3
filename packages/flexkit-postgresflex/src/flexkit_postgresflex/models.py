"""Package-specific Pydantic models for the flexkit-postgresflex package.

Contains the declarative ``DatabaseModel``, the remote API shapes
(``RemoteDatabase``, ``CreateDatabasePayload``, ``CreateDatabaseResponse``,
``ListDatabasesResponse``), and the lifecycle ``ResourceResponse``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from flexkit_core.diagnostics import Diagnostics


# ---------------------------------------------------------------------------
# Declarative state
# ---------------------------------------------------------------------------


class DatabaseModel(BaseModel):
    """Declarative state record for one Postgres Flex database.

    ``id`` and ``database_id`` are computed: only the resource writes them.
    ``project_id``, ``instance_id``, ``name`` and ``owner`` come from the
    caller's configuration.  All fields are optional so that partially known
    states (plans, imports) can be represented.
    """

    id: str | None = None
    database_id: str | None = None
    instance_id: str | None = None
    project_id: str | None = None
    name: str | None = None
    owner: str | None = None


# ---------------------------------------------------------------------------
# Remote API shapes
# ---------------------------------------------------------------------------


class RemoteDatabase(BaseModel):
    """A database as reported by the Postgres Flex service."""

    id: str | None = None
    name: str | None = None
    options: dict[str, Any] | None = None


class CreateDatabasePayload(BaseModel):
    """Request body of the create-database call."""

    name: str | None = None
    options: dict[str, str] | None = None


class CreateDatabaseResponse(BaseModel):
    """Response body of the create-database call."""

    id: str | None = None


class ListDatabasesResponse(BaseModel):
    """Response body of the list-databases call."""

    databases: list[RemoteDatabase] | None = None


# ---------------------------------------------------------------------------
# Lifecycle results
# ---------------------------------------------------------------------------


class ResourceResponse(BaseModel):
    """Result of a lifecycle call, handed back to the driver.

    ``state`` is the record the driver should persist.  ``remove_resource``
    tells the driver to drop the record because the remote object is gone.
    """

    state: DatabaseModel | None = None
    remove_resource: bool = False
    diagnostics: Diagnostics = Field(default_factory=Diagnostics)
