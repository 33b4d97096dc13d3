"""Lookup of a single database through the list endpoint.

The Postgres Flex API has no get-database-by-id call, only list-databases,
so a database is found by scanning its instance's databases in the order the
server returned them.  Nothing is cached.
"""

from __future__ import annotations

from flexkit_core.errors import NotFoundError, RemoteCallError

from flexkit_postgresflex.models import RemoteDatabase
from flexkit_postgresflex.protocols import PostgresFlexClient


def get_database(
    client: PostgresFlexClient,
    project_id: str,
    instance_id: str,
    database_id: str,
) -> RemoteDatabase:
    """Return the first database of the instance whose id is *database_id*.

    Raises
    ------
    NotFoundError
        If no listed database matches, or the list call answered 404.
    RemoteCallError
        If the list call failed for any other reason or returned no list.
    """
    try:
        resp = client.list_databases(project_id, instance_id)
    except RemoteCallError as exc:
        if exc.status_code == 404:
            raise NotFoundError(str(exc)) from exc
        raise

    if resp is None or resp.databases is None:
        raise RemoteCallError("response is nil")

    match = next((db for db in resp.databases if db.id == database_id), None)
    if match is None:
        raise NotFoundError(f"database {database_id!r} not found")
    return match
