"""Shared Pydantic models for the flexkit framework.

``ProviderData`` is the provider-level setup the driver hands to every
resource's ``configure()`` call.
"""

from __future__ import annotations

from pydantic import BaseModel, SecretStr


class ProviderData(BaseModel):
    """Credentials and endpoint selection shared by all resources.

    A non-empty ``postgresflex_custom_endpoint`` takes precedence over
    ``region`` when the Postgres Flex client is built.
    """

    region: str = ""
    postgresflex_custom_endpoint: str = ""
    service_account_token: SecretStr | None = None
    user_agent: str = "flexkit"
