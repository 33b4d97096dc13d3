"""Tests for flexkit_postgresflex.mapping."""

from __future__ import annotations

import pytest

from flexkit_core.errors import CoreErrorCode, TypeMismatchError, ValidationError
from flexkit_postgresflex.mapping import map_fields, to_create_payload
from flexkit_postgresflex.models import CreateDatabasePayload, DatabaseModel, RemoteDatabase

P = "pid"
I = "iid"


def _model(**kwargs) -> DatabaseModel:
    return DatabaseModel(project_id=P, instance_id=I, **kwargs)


class TestMapFields:
    """Remote database -> declarative record."""

    def test_default_values(self):
        result = map_fields(RemoteDatabase(id="uid"), _model())
        assert result == DatabaseModel(
            id="pid,iid,uid",
            database_id="uid",
            project_id=P,
            instance_id=I,
            name=None,
            owner=None,
        )

    def test_simple_values(self):
        remote = RemoteDatabase(id="uid", name="dbname", options={"owner": "username"})
        result = map_fields(remote, _model())
        assert result.id == "pid,iid,uid"
        assert result.database_id == "uid"
        assert result.name == "dbname"
        assert result.owner == "username"

    def test_existing_database_id_wins(self):
        result = map_fields(RemoteDatabase(id="remote-id"), _model(database_id="stored-id"))
        assert result.database_id == "stored-id"
        assert result.id == "pid,iid,stored-id"

    def test_empty_name_and_options(self):
        remote = RemoteDatabase(id="uid", name="", options={})
        result = map_fields(remote, _model(owner="prev"))
        assert result.name == ""
        assert result.owner == "prev"

    def test_missing_owner_key_keeps_previous_owner(self):
        remote = RemoteDatabase(id="uid", options={"encoding": "UTF8"})
        assert map_fields(remote, _model(owner="prev")).owner == "prev"

    def test_nil_options_keeps_previous_owner(self):
        remote = RemoteDatabase(id="uid", options=None)
        assert map_fields(remote, _model(owner="prev")).owner == "prev"

    def test_name_passthrough_overwrites(self):
        remote = RemoteDatabase(id="uid", name=None)
        assert map_fields(remote, _model(name="old")).name is None

    def test_nil_response(self):
        with pytest.raises(ValidationError) as excinfo:
            map_fields(None, _model())
        assert excinfo.value.code == CoreErrorCode.E_MAPPING_INVALID

    @pytest.mark.parametrize("remote_id", [None, ""])
    def test_no_resource_id(self, remote_id):
        with pytest.raises(ValidationError):
            map_fields(RemoteDatabase(id=remote_id), _model())

    def test_nil_model(self):
        with pytest.raises(ValidationError):
            map_fields(RemoteDatabase(id="uid"), None)

    @pytest.mark.parametrize("owner", [42, 1.5, True, ["alice"], {"name": "alice"}])
    def test_owner_type_mismatch(self, owner):
        model = _model(owner="prev", name="keep")
        before = model.model_copy()
        with pytest.raises(TypeMismatchError):
            map_fields(RemoteDatabase(id="uid", name="new", options={"owner": owner}), model)
        assert model == before

    def test_input_not_mutated(self):
        model = _model()
        map_fields(RemoteDatabase(id="uid", name="n", options={"owner": "o"}), model)
        assert model.id is None
        assert model.database_id is None

    def test_idempotent(self):
        remote = RemoteDatabase(id="uid", name="dbname", options={"owner": "username"})
        once = map_fields(remote, _model())
        twice = map_fields(remote, once)
        assert once == twice


class TestToCreatePayload:
    """Declarative record -> create request body."""

    def test_default_values(self):
        assert to_create_payload(DatabaseModel()) == CreateDatabasePayload(
            name=None, options={"owner": ""}
        )

    def test_simple_values(self):
        payload = to_create_payload(DatabaseModel(name="dbname", owner="username"))
        assert payload.name == "dbname"
        assert payload.options == {"owner": "username"}

    def test_options_has_exactly_owner(self):
        payload = to_create_payload(_model(name="n", owner="o", database_id="d"))
        assert list(payload.options) == ["owner"]

    def test_nil_model(self):
        with pytest.raises(ValidationError):
            to_create_payload(None)
