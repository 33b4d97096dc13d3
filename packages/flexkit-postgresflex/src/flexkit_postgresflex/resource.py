"""DatabaseResource -- lifecycle adapter for Postgres Flex databases.

Translates each lifecycle call from the driver into Postgres Flex API calls:

1. ``configure`` builds the API client from :class:`ProviderData`.
2. ``create`` posts the database, then re-reads it by scanning the list
   endpoint and maps the result into state.
3. ``read`` scans the list endpoint; a missing database removes the
   resource from state.
4. ``update`` always fails: every user attribute requires replacement.
5. ``delete`` deletes the database.
6. ``import_state`` seeds the identifiers from a composite import id.

Every call enforces **fail-closed** semantics: failures never raise, they
return a :class:`ResourceResponse` whose diagnostics carry the error.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from flexkit_core.diagnostics import Diagnostics, log_and_add_error, log_and_add_warning
from flexkit_core.errors import (
    CoreErrorCode,
    FlexkitError,
    NotFoundError,
    PartialFailureError,
    ValidationError,
)
from flexkit_core.ids import parse_id
from flexkit_core.models import ProviderData

from flexkit_postgresflex.client import build_client
from flexkit_postgresflex.config import PostgresFlexConfig
from flexkit_postgresflex.errors import ErrorCode
from flexkit_postgresflex.lookup import get_database
from flexkit_postgresflex.mapping import map_fields, to_create_payload
from flexkit_postgresflex.models import DatabaseModel, ResourceResponse
from flexkit_postgresflex.protocols import ClientFactory, PostgresFlexClient
from flexkit_postgresflex.schema import ResourceSchema, database_schema, validate_model

logger = logging.getLogger("flexkit_postgresflex")

_IMPORT_FIELDS = ["project_id", "instance_id", "database_id"]

_PROVIDER_CONFIG_HINT = (
    "This is an error related to the provider configuration, "
    "not to the resource configuration"
)


def _code_of(exc: Exception) -> str:
    if isinstance(exc, FlexkitError):
        return exc.code
    return CoreErrorCode.E_REMOTE_CALL


class DatabaseResource:
    """Lifecycle adapter for the ``postgresflex_database`` resource type.

    Holds no state across calls other than the API client, which is built
    at most once by :meth:`configure`.

    Parameters
    ----------
    config:
        Resource configuration.  Uses defaults when *None*.
    client_factory:
        Builds the API client from provider data.  Defaults to
        :func:`~flexkit_postgresflex.client.build_client`.
    client:
        Pre-built API client; when given, :meth:`configure` is a no-op.
    """

    def __init__(
        self,
        config: PostgresFlexConfig | None = None,
        client_factory: ClientFactory | None = None,
        client: PostgresFlexClient | None = None,
    ) -> None:
        self._config = config or PostgresFlexConfig()
        self._client_factory = client_factory or build_client
        self._client = client

    @property
    def client(self) -> PostgresFlexClient | None:
        return self._client

    # ------------------------------------------------------------------
    # Metadata / schema
    # ------------------------------------------------------------------

    def metadata(self, provider_type_name: str) -> str:
        """Return the resource type name, e.g. ``"stackit_postgresflex_database"``."""
        return provider_type_name + self._config.type_name_suffix

    def schema(self) -> ResourceSchema:
        return database_schema()

    # ------------------------------------------------------------------
    # Configure
    # ------------------------------------------------------------------

    def configure(self, provider_data: Any) -> Diagnostics:
        """Build the API client from *provider_data*.

        Does nothing when the provider has not been configured yet
        (*provider_data* is None) or when a client already exists.
        """
        diags = Diagnostics()
        if provider_data is None:
            return diags
        if self._client is not None:
            logger.debug("flexkit_postgresflex | op=configure | client already configured")
            return diags

        summary = "Error configuring API client"
        if not isinstance(provider_data, ProviderData):
            log_and_add_error(
                logger,
                diags,
                summary,
                f"Expected configure type ProviderData, got {type(provider_data).__name__}",
                ErrorCode.E_CONFIG_WRONG_TYPE,
                {"op": "configure"},
            )
            return diags

        try:
            self._client = self._client_factory(provider_data, self._config)
        except Exception as exc:
            log_and_add_error(
                logger,
                diags,
                summary,
                f"Configuring client: {exc}. {_PROVIDER_CONFIG_HINT}",
                ErrorCode.E_CONFIG_CLIENT_BUILD,
                {"op": "configure"},
            )
            return diags

        logger.info(
            "flexkit_postgresflex | op=configure | path=%s | Postgres Flex database client configured",
            "endpoint" if provider_data.postgresflex_custom_endpoint else "region",
        )
        return diags

    def _require_client(
        self, diags: Diagnostics, summary: str, fields: dict[str, Any]
    ) -> PostgresFlexClient | None:
        if self._client is None:
            log_and_add_error(
                logger,
                diags,
                summary,
                f"API client not configured. {_PROVIDER_CONFIG_HINT}",
                ErrorCode.E_CONFIG_NOT_CONFIGURED,
                fields,
            )
        return self._client

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def create(self, plan: DatabaseModel) -> ResourceResponse:
        """Create the database and return the fully populated state."""
        response = ResourceResponse()
        diags = response.diagnostics
        summary = "Error creating database"
        project_id = plan.project_id or ""
        instance_id = plan.instance_id or ""
        fields: dict[str, Any] = {
            "op": "create",
            "project_id": project_id,
            "instance_id": instance_id,
        }

        # ==============================================================
        # Step 1: Validate plan
        # ==============================================================
        for diag in validate_model(plan):
            logger.error(
                "flexkit_postgresflex | op=create | attribute=%s | code=%s | detail=%s",
                diag.attribute,
                diag.code,
                diag.detail,
            )
            diags.append(diag)
        if diags.has_error():
            return response

        client = self._require_client(diags, summary, fields)
        if client is None:
            return response

        # ==============================================================
        # Step 2: Build payload and create
        # ==============================================================
        try:
            payload = to_create_payload(plan)
        except FlexkitError as exc:
            log_and_add_error(
                logger, diags, summary, f"Creating API payload: {exc}", exc.code, fields
            )
            return response

        try:
            created = client.create_database(project_id, instance_id, payload)
            if created is None or not created.id:
                raise PartialFailureError("API didn't return database Id")
        except PartialFailureError as exc:
            log_and_add_error(
                logger,
                diags,
                summary,
                f"{exc}. A database might have been created",
                ErrorCode.E_REMOTE_PARTIAL_CREATE,
                fields,
            )
            return response
        except Exception as exc:
            log_and_add_error(
                logger, diags, summary, f"Calling API: {exc}", _code_of(exc), fields
            )
            return response

        database_id = created.id
        fields["database_id"] = database_id

        # ==============================================================
        # Step 3: Re-read through the list endpoint
        # ==============================================================
        try:
            database = get_database(client, project_id, instance_id, database_id)
        except Exception as exc:
            log_and_add_error(
                logger,
                diags,
                summary,
                f"Getting database details after creation: {exc}",
                _code_of(exc),
                fields,
            )
            return response

        # ==============================================================
        # Step 4: Map into state
        # ==============================================================
        # id and database_id come from the service only
        planned = plan.model_copy(update={"id": None, "database_id": None})
        try:
            response.state = map_fields(database, planned)
        except FlexkitError as exc:
            log_and_add_error(
                logger, diags, summary, f"Processing API payload: {exc}", exc.code, fields
            )
            return response

        logger.info(
            "flexkit_postgresflex | op=create | project_id=%s | instance_id=%s | "
            "database_id=%s | Postgres Flex database created",
            project_id,
            instance_id,
            database_id,
        )
        return response

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def read(self, state: DatabaseModel) -> ResourceResponse:
        """Refresh *state* from the service, or ask the driver to drop it."""
        response = ResourceResponse(state=state)
        diags = response.diagnostics
        summary = "Error reading database"
        project_id = state.project_id or ""
        instance_id = state.instance_id or ""
        database_id = state.database_id or ""
        fields = {
            "op": "read",
            "project_id": project_id,
            "instance_id": instance_id,
            "database_id": database_id,
        }

        client = self._require_client(diags, summary, fields)
        if client is None:
            return response

        try:
            database = get_database(client, project_id, instance_id, database_id)
        except NotFoundError:
            logger.info(
                "flexkit_postgresflex | op=read | project_id=%s | instance_id=%s | "
                "database_id=%s | Postgres Flex database not found, removing from state",
                project_id,
                instance_id,
                database_id,
            )
            response.state = None
            response.remove_resource = True
            return response
        except Exception as exc:
            log_and_add_error(
                logger, diags, summary, f"Calling API: {exc}", _code_of(exc), fields
            )
            return response

        try:
            response.state = map_fields(database, state)
        except FlexkitError as exc:
            log_and_add_error(
                logger, diags, summary, f"Processing API payload: {exc}", exc.code, fields
            )
            return response

        logger.info(
            "flexkit_postgresflex | op=read | project_id=%s | instance_id=%s | "
            "database_id=%s | Postgres Flex database read",
            project_id,
            instance_id,
            database_id,
        )
        return response

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------

    def update(self, plan: DatabaseModel, state: DatabaseModel) -> ResourceResponse:
        """Reject the update; every user attribute requires replacement."""
        response = ResourceResponse(state=state)
        log_and_add_error(
            logger,
            response.diagnostics,
            "Error updating database",
            "Database can't be updated",
            ErrorCode.E_DATABASE_UPDATE_UNSUPPORTED,
            {"op": "update", "database_id": state.database_id},
        )
        return response

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    def delete(self, state: DatabaseModel) -> ResourceResponse:
        """Delete the database.  Failures are reported, never retried."""
        response = ResourceResponse(state=state)
        diags = response.diagnostics
        summary = "Error deleting database"
        project_id = state.project_id or ""
        instance_id = state.instance_id or ""
        database_id = state.database_id or ""
        fields = {
            "op": "delete",
            "project_id": project_id,
            "instance_id": instance_id,
            "database_id": database_id,
        }

        client = self._require_client(diags, summary, fields)
        if client is None:
            return response

        try:
            client.delete_database(project_id, instance_id, database_id)
        except Exception as exc:
            log_and_add_error(
                logger, diags, summary, f"Calling API: {exc}", _code_of(exc), fields
            )
            return response

        response.state = None
        logger.info(
            "flexkit_postgresflex | op=delete | project_id=%s | instance_id=%s | "
            "database_id=%s | Postgres Flex database deleted",
            project_id,
            instance_id,
            database_id,
        )
        return response

    # ------------------------------------------------------------------
    # Import
    # ------------------------------------------------------------------

    def import_state(self, raw_id: str) -> ResourceResponse:
        """Seed state from ``[project_id],[instance_id],[database_id]``."""
        response = ResourceResponse()
        diags = response.diagnostics

        try:
            parts = parse_id(raw_id, _IMPORT_FIELDS)
        except ValidationError as exc:
            log_and_add_error(
                logger, diags, "Error importing database", str(exc), exc.code, {"op": "import"}
            )
            return response

        response.state = DatabaseModel(**parts)
        log_and_add_warning(
            logger,
            diags,
            "Postgresflex database imported with empty password",
            "The database password is not imported as it is only available upon "
            "creation of a new database. The password field will be empty.",
            ErrorCode.W_IMPORT_SECRET_UNAVAILABLE,
            {"op": "import", **parts},
        )
        logger.info(
            "flexkit_postgresflex | op=import | id=%s | Postgres Flex database state imported",
            raw_id,
        )
        return response

    # ------------------------------------------------------------------
    # Async wrappers
    # ------------------------------------------------------------------

    async def acreate(self, plan: DatabaseModel) -> ResourceResponse:
        """Async wrapper around :meth:`create` via ``asyncio.to_thread()``."""
        return await asyncio.to_thread(self.create, plan)

    async def aread(self, state: DatabaseModel) -> ResourceResponse:
        return await asyncio.to_thread(self.read, state)

    async def aupdate(self, plan: DatabaseModel, state: DatabaseModel) -> ResourceResponse:
        return await asyncio.to_thread(self.update, plan, state)

    async def adelete(self, state: DatabaseModel) -> ResourceResponse:
        return await asyncio.to_thread(self.delete, state)

    async def aimport_state(self, raw_id: str) -> ResourceResponse:
        return await asyncio.to_thread(self.import_state, raw_id)
