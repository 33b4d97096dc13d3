"""Shared test fixtures for flexkit-postgresflex tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from flexkit_postgresflex.config import PostgresFlexConfig
from flexkit_postgresflex.models import (
    CreateDatabaseResponse,
    DatabaseModel,
    ListDatabasesResponse,
    RemoteDatabase,
)
from flexkit_postgresflex.resource import DatabaseResource

PROJECT_ID = "6f1c0a8e-3b5d-4c1e-9f2a-7d8e9b0c1d2e"
INSTANCE_ID = "0b7e9d4a-2c6f-4e8b-a1d3-5f9c8e7b6a54"


@pytest.fixture
def default_config() -> PostgresFlexConfig:
    """Return a default PostgresFlexConfig."""
    return PostgresFlexConfig()


@pytest.fixture
def plan() -> DatabaseModel:
    """Return a planned record as the driver hands it to create()."""
    return DatabaseModel(
        project_id=PROJECT_ID,
        instance_id=INSTANCE_ID,
        name="mydb",
        owner="alice",
    )


@pytest.fixture
def state() -> DatabaseModel:
    """Return a fully populated stored record."""
    return DatabaseModel(
        id=f"{PROJECT_ID},{INSTANCE_ID},db-1",
        database_id="db-1",
        project_id=PROJECT_ID,
        instance_id=INSTANCE_ID,
        name="mydb",
        owner="alice",
    )


@pytest.fixture
def mock_client() -> MagicMock:
    """Return a mock PostgresFlexClient that knows one database, ``db-1``."""
    mock = MagicMock()
    mock.create_database.return_value = CreateDatabaseResponse(id="db-1")
    mock.list_databases.return_value = ListDatabasesResponse(
        databases=[
            RemoteDatabase(id="db-1", name="mydb", options={"owner": "alice"}),
        ]
    )
    mock.delete_database.return_value = None
    return mock


@pytest.fixture
def resource(mock_client: MagicMock) -> DatabaseResource:
    """Return a DatabaseResource wired to the mock client."""
    return DatabaseResource(client=mock_client)
