"""flexkit-postgresflex -- Postgres Flex database resource adapter.

Public API re-exports for convenient access.
"""

from flexkit_postgresflex.client import PostgresFlexAPIClient, build_client
from flexkit_postgresflex.config import PostgresFlexConfig
from flexkit_postgresflex.errors import ErrorCode, ResourceDiagnostic
from flexkit_postgresflex.lookup import get_database
from flexkit_postgresflex.mapping import map_fields, to_create_payload
from flexkit_postgresflex.models import (
    CreateDatabasePayload,
    CreateDatabaseResponse,
    DatabaseModel,
    ListDatabasesResponse,
    RemoteDatabase,
    ResourceResponse,
)
from flexkit_postgresflex.protocols import ClientFactory, PostgresFlexClient
from flexkit_postgresflex.resource import DatabaseResource
from flexkit_postgresflex.schema import (
    AttributeSchema,
    ResourceSchema,
    database_schema,
    validate_model,
)

__all__ = [
    "DatabaseResource",
    "PostgresFlexConfig",
    "ErrorCode",
    "ResourceDiagnostic",
    "DatabaseModel",
    "RemoteDatabase",
    "CreateDatabasePayload",
    "CreateDatabaseResponse",
    "ListDatabasesResponse",
    "ResourceResponse",
    "PostgresFlexClient",
    "ClientFactory",
    "PostgresFlexAPIClient",
    "build_client",
    "get_database",
    "map_fields",
    "to_create_payload",
    "AttributeSchema",
    "ResourceSchema",
    "database_schema",
    "validate_model",
]
