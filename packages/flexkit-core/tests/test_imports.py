"""Tests for import paths and re-exports."""

from __future__ import annotations

from pydantic import SecretStr


class TestCoreImportable:
    """Core package is importable and exports expected symbols."""

    def test_import_package(self):
        import flexkit_core
        assert flexkit_core is not None

    def test_all_exports(self):
        import flexkit_core
        expected = {
            "CoreErrorCode",
            "FlexkitError",
            "ConfigurationError",
            "ValidationError",
            "NotFoundError",
            "PartialFailureError",
            "RemoteCallError",
            "TypeMismatchError",
            "Diagnostic",
            "Diagnostics",
            "ProviderData",
            "SEPARATOR",
            "build_id",
            "parse_id",
        }
        assert expected <= set(flexkit_core.__all__)
        for name in flexkit_core.__all__:
            assert hasattr(flexkit_core, name)


class TestProviderData:
    """ProviderData defaults and secret handling."""

    def test_defaults(self):
        from flexkit_core.models import ProviderData

        data = ProviderData()
        assert data.region == ""
        assert data.postgresflex_custom_endpoint == ""
        assert data.service_account_token is None

    def test_token_is_secret(self):
        from flexkit_core.models import ProviderData

        data = ProviderData(region="eu01", service_account_token="s3cret")
        assert isinstance(data.service_account_token, SecretStr)
        assert "s3cret" not in repr(data)
        assert data.service_account_token.get_secret_value() == "s3cret"
