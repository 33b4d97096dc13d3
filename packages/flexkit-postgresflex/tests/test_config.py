"""Tests for flexkit_postgresflex.config."""

from __future__ import annotations

import json

import pytest

from flexkit_postgresflex.config import PostgresFlexConfig


class TestDefaults:

    def test_type_name_suffix(self):
        assert PostgresFlexConfig().type_name_suffix == "_postgresflex_database"

    def test_region_url(self):
        assert (
            PostgresFlexConfig().region_url("eu01")
            == "https://postgres-flex-service.api.eu01.stackit.cloud"
        )

    def test_transport_settings(self):
        config = PostgresFlexConfig()
        assert config.api_version == "v1"
        assert config.max_retries == 2
        assert config.request_timeout_seconds == 30.0


class TestFromFile:
    """Loading overrides from YAML and JSON."""

    def test_json_overrides_keep_other_defaults(self, tmp_path):
        path = tmp_path / "pgflex.json"
        path.write_text(json.dumps({"api_version": "v2", "max_retries": 0}))

        config = PostgresFlexConfig.from_file(str(path))
        assert (config.api_version, config.max_retries) == ("v2", 0)
        assert config.backoff_base == 1.0

    def test_yaml_section(self, tmp_path):
        yaml = pytest.importorskip("yaml")
        path = tmp_path / "provider.yaml"
        path.write_text(yaml.dump({
            "region": "eu01",
            "postgresflex": {"request_timeout_seconds": 5.0},
        }))

        assert PostgresFlexConfig.from_file(str(path)).request_timeout_seconds == 5.0

    @pytest.mark.parametrize("name", ["empty.yml", "empty.json"])
    def test_empty_file_is_default(self, tmp_path, name):
        if name.endswith(".yml"):
            pytest.importorskip("yaml")
        path = tmp_path / name
        path.write_text("")

        assert PostgresFlexConfig.from_file(str(path)) == PostgresFlexConfig()

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")

        with pytest.raises(ValueError, match="mapping"):
            PostgresFlexConfig.from_file(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            PostgresFlexConfig.from_file(str(tmp_path / "absent.json"))

    def test_unknown_extension(self, tmp_path):
        path = tmp_path / "pgflex.toml"
        path.write_text("")

        with pytest.raises(ValueError, match="Unsupported config file extension"):
            PostgresFlexConfig.from_file(str(path))
