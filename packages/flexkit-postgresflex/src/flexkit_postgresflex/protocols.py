"""Client protocols for the flexkit-postgresflex resource.

Defines the structural-subtyping interfaces the resource depends on.  Both
protocols are ``@runtime_checkable`` so callers can optionally verify
conformance with ``isinstance`` checks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from flexkit_core.models import ProviderData

    from flexkit_postgresflex.config import PostgresFlexConfig
    from flexkit_postgresflex.models import (
        CreateDatabasePayload,
        CreateDatabaseResponse,
        ListDatabasesResponse,
    )


@runtime_checkable
class PostgresFlexClient(Protocol):
    """Interface for the Postgres Flex database API.

    Implementations raise :class:`~flexkit_core.errors.RemoteCallError`
    (with ``status_code`` when known) on failure.
    """

    def create_database(
        self,
        project_id: str,
        instance_id: str,
        payload: CreateDatabasePayload,
    ) -> CreateDatabaseResponse:
        """Create a database in the instance and return its assigned id."""
        ...

    def list_databases(
        self, project_id: str, instance_id: str
    ) -> ListDatabasesResponse:
        """Return all databases of the instance."""
        ...

    def delete_database(
        self, project_id: str, instance_id: str, database_id: str
    ) -> None:
        """Delete one database of the instance."""
        ...


@runtime_checkable
class ClientFactory(Protocol):
    """Callable building a :class:`PostgresFlexClient` from provider setup."""

    def __call__(
        self, provider_data: ProviderData, config: PostgresFlexConfig
    ) -> PostgresFlexClient:
        ...
