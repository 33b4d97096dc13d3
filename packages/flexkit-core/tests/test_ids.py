"""Tests for flexkit_core.ids -- composite identifier codec."""

from __future__ import annotations

import pytest

from flexkit_core.errors import CoreErrorCode, ValidationError
from flexkit_core.ids import SEPARATOR, build_id, parse_id

_FIELDS = ["project_id", "instance_id", "database_id"]


class TestBuildId:

    def test_separator_is_comma(self):
        assert SEPARATOR == ","

    def test_joins_in_order(self):
        assert build_id("p", "i", "db-1") == "p,i,db-1"


class TestParseId:

    def test_three_parts(self):
        assert parse_id("p,i,d", _FIELDS) == {
            "project_id": "p",
            "instance_id": "i",
            "database_id": "d",
        }

    def test_inverse_of_build_id(self):
        parts = ["6f1c0a8e-0000-4000-8000-000000000001", "inst", "db-42"]
        assert list(parse_id(build_id(*parts), _FIELDS).values()) == parts

    @pytest.mark.parametrize("raw_id", [
        "",
        "p",
        "p,i",
        "p,i,d,extra",
        ",i,d",
        "p,,d",
        "p,i,",
        ",,",
    ])
    def test_rejects_malformed(self, raw_id):
        with pytest.raises(ValidationError) as excinfo:
            parse_id(raw_id, _FIELDS)
        assert excinfo.value.code == CoreErrorCode.E_VALIDATION_IMPORT_ID
        assert "[project_id],[instance_id],[database_id]" in str(excinfo.value)
