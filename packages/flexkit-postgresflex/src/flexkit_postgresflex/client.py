"""HTTP client for the Postgres Flex database API.

Provides :class:`PostgresFlexAPIClient`, a concrete implementation of the
:class:`~flexkit_postgresflex.protocols.PostgresFlexClient` protocol on top
of ``httpx``, and :func:`build_client`, the default client factory used by
:meth:`DatabaseResource.configure`.
"""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from flexkit_core.errors import ConfigurationError, PartialFailureError, RemoteCallError
from flexkit_core.models import ProviderData

from flexkit_postgresflex.config import PostgresFlexConfig
from flexkit_postgresflex.models import (
    CreateDatabasePayload,
    CreateDatabaseResponse,
    ListDatabasesResponse,
)

logger = logging.getLogger("flexkit_postgresflex")


def _extract_error_message(response: httpx.Response) -> str:
    """Pull a human-readable message out of an error response body."""
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict):
        return str(body.get("message") or body.get("error") or body)
    return str(body)


class PostgresFlexAPIClient:
    """httpx-backed Postgres Flex API client.

    Satisfies :class:`~flexkit_postgresflex.protocols.PostgresFlexClient`
    via structural subtyping (no inheritance required).

    Parameters
    ----------
    base_url:
        Service base URL (e.g. ``"https://postgres-flex-service.api.eu01.stackit.cloud"``).
    token:
        Bearer token sent in the ``Authorization`` header.
    config:
        Resource configuration providing API version, timeout and retry
        settings.
    user_agent:
        Value of the ``User-Agent`` header.
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        config: PostgresFlexConfig | None = None,
        user_agent: str = "flexkit",
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._config = config or PostgresFlexConfig()
        self._headers = {
            "Authorization": f"Bearer {token}",
            "User-Agent": user_agent,
            "Accept": "application/json",
        }

    @property
    def base_url(self) -> str:
        return self._base_url

    def _databases_url(self, project_id: str, instance_id: str) -> str:
        return (
            f"{self._base_url}/{self._config.api_version}/projects/{project_id}"
            f"/instances/{instance_id}/databases"
        )

    def _request(
        self,
        method: str,
        url: str,
        payload: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Send a request and return the successful response.

        Retries on connection errors, timeouts and 5xx answers using the
        configured retry settings.  Any other non-2xx answer raises
        :class:`RemoteCallError` immediately.
        """
        last_exc: Exception | None = None
        max_attempts = 1 + self._config.max_retries

        for attempt in range(max_attempts):
            try:
                response = httpx.request(
                    method,
                    url,
                    json=payload,
                    headers=self._headers,
                    timeout=self._config.request_timeout_seconds,
                )
                response.raise_for_status()
                return response
            except httpx.HTTPStatusError as exc:
                status = exc.response.status_code
                if status < 500:
                    raise RemoteCallError(
                        f"{method} {url} failed with HTTP {status}: "
                        f"{_extract_error_message(exc.response)}",
                        status_code=status,
                    ) from exc
                last_exc = exc
                reason = f"HTTP {status}"
            except httpx.TimeoutException as exc:
                last_exc = exc
                reason = "timeout"
            except httpx.TransportError as exc:
                last_exc = exc
                reason = "connection error"

            if attempt < max_attempts - 1:
                sleep_time = self._config.backoff_base * (2 ** attempt)
                logger.warning(
                    "Postgres Flex %s %s failed with %s (attempt %d/%d), retrying in %.1fs",
                    method,
                    url,
                    reason,
                    attempt + 1,
                    max_attempts,
                    sleep_time,
                )
                time.sleep(sleep_time)

        status_code = None
        if isinstance(last_exc, httpx.HTTPStatusError):
            status_code = last_exc.response.status_code
        raise RemoteCallError(
            f"{method} {url} failed after {max_attempts} attempts: {last_exc}",
            status_code=status_code,
        ) from last_exc

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def create_database(
        self,
        project_id: str,
        instance_id: str,
        payload: CreateDatabasePayload,
    ) -> CreateDatabaseResponse:
        """Post to ``.../databases`` and return the assigned id.

        Raises :class:`PartialFailureError` when the service accepted the
        request but its body cannot be read, since the database may exist.
        """
        url = self._databases_url(project_id, instance_id)
        response = self._request("POST", url, payload.model_dump(exclude_none=True))
        try:
            return CreateDatabaseResponse.model_validate(response.json() or {})
        except ValueError as exc:
            raise PartialFailureError(
                f"POST {url} answered HTTP {response.status_code} with an unreadable body: {exc}"
            ) from exc

    def list_databases(
        self, project_id: str, instance_id: str
    ) -> ListDatabasesResponse:
        """Get ``.../databases``, preserving the server's ordering."""
        response = self._request("GET", self._databases_url(project_id, instance_id))
        return ListDatabasesResponse.model_validate(response.json() or {})

    def delete_database(
        self, project_id: str, instance_id: str, database_id: str
    ) -> None:
        """Delete ``.../databases/{database_id}``."""
        self._request(
            "DELETE",
            f"{self._databases_url(project_id, instance_id)}/{database_id}",
        )


def build_client(
    provider_data: ProviderData, config: PostgresFlexConfig
) -> PostgresFlexAPIClient:
    """Default client factory.

    Uses ``provider_data.postgresflex_custom_endpoint`` when set, otherwise
    derives the base URL from ``provider_data.region``.

    Raises
    ------
    ConfigurationError
        If no token is configured, the custom endpoint is not an http(s)
        URL, or neither an endpoint nor a region is available.
    """
    if provider_data.service_account_token is None:
        raise ConfigurationError("no service account token configured")
    token = provider_data.service_account_token.get_secret_value()

    if provider_data.postgresflex_custom_endpoint:
        endpoint = provider_data.postgresflex_custom_endpoint
        if not endpoint.startswith(("http://", "https://")):
            raise ConfigurationError(
                f"custom endpoint must be an http(s) URL, got {endpoint!r}"
            )
        base_url = endpoint
    elif provider_data.region:
        base_url = config.region_url(provider_data.region)
    else:
        raise ConfigurationError("neither a custom endpoint nor a region is configured")

    return PostgresFlexAPIClient(
        base_url=base_url,
        token=token,
        config=config,
        user_agent=provider_data.user_agent,
    )
