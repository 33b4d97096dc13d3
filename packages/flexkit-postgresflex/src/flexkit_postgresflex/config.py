"""Configuration model for the flexkit-postgresflex resource.

Provides ``PostgresFlexConfig`` with the endpoint layout and transport
settings of the Postgres Flex API.  Overrides can be loaded from a YAML or
JSON file with ``from_file()``; the file may hold the keys at top level or
under a ``postgresflex`` section shared with other provider settings.
"""

from __future__ import annotations

import json
import pathlib
from typing import Any

from pydantic import BaseModel

CONFIG_SECTION = "postgresflex"


class PostgresFlexConfig(BaseModel):
    """Tunable parameters of the database resource and its HTTP client."""

    # --- Identity ---
    type_name_suffix: str = "_postgresflex_database"

    # --- Endpoint ---
    base_url_template: str = "https://postgres-flex-service.api.{region}.stackit.cloud"
    api_version: str = "v1"

    # --- Transport Resilience ---
    request_timeout_seconds: float = 30.0
    max_retries: int = 2
    backoff_base: float = 1.0

    def region_url(self, region: str) -> str:
        """Return the regional service URL, e.g. for ``"eu01"``."""
        return self.base_url_template.format(region=region)

    @classmethod
    def from_file(cls, path: str) -> PostgresFlexConfig:
        """Load overrides from a ``.yaml``/``.yml`` or ``.json`` file.

        Keys missing from the file keep their defaults.  An empty file yields
        the default configuration.
        """
        file_path = pathlib.Path(path)
        if not file_path.is_file():
            raise FileNotFoundError(f"Config file not found: {path}")

        text = file_path.read_text()
        suffix = file_path.suffix.lower()
        data: Any
        if suffix == ".json":
            data = json.loads(text) if text.strip() else None
        elif suffix in (".yaml", ".yml"):
            try:
                import yaml  # type: ignore[import-untyped]
            except ImportError as exc:
                raise ImportError(
                    "pyyaml is required for YAML config files: pip install flexkit[yaml]"
                ) from exc
            data = yaml.safe_load(text)
        else:
            raise ValueError(
                f"Unsupported config file extension '{suffix}' for {path}; "
                "expected .yaml, .yml or .json"
            )

        data = data or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        if isinstance(data.get(CONFIG_SECTION), dict):
            data = data[CONFIG_SECTION]
        return cls.model_validate(data)
