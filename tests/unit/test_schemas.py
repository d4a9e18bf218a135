"""Tests for the user search configuration models."""

import pytest
from pydantic import ValidationError

from searchprep.models.domain import FieldConfig
from searchprep.models.schemas import UserFieldConfig, UserSearchConfig


def test_user_search_config_defaults():
    cfg = UserSearchConfig.model_validate({})
    assert cfg.field_specs is None
    assert cfg.bool_model is None
    assert cfg.field_bool is None
    assert cfg.expand is None


def test_user_search_config_aliases():
    cfg = UserSearchConfig.model_validate(
        {"fields": {"title": {"boost": 2, "bool": "AND"}}, "bool": "OR", "fieldBool": "AND", "expand": True}
    )
    assert cfg.bool_model == "OR"
    assert cfg.field_bool == "AND"
    assert cfg.expand is True
    assert cfg.field_specs["title"] == {"boost": 2, "bool": "AND"}


def test_bool_model_case_insensitive():
    cfg = UserSearchConfig.model_validate({"bool": " and ", "fieldBool": "or"})
    assert cfg.bool_model == "AND"
    assert cfg.field_bool == "OR"


def test_falsy_globals_mean_unset():
    cfg = UserSearchConfig.model_validate({"bool": "", "fieldBool": None, "expand": 0})
    assert cfg.bool_model is None
    assert cfg.field_bool is None
    assert cfg.expand is None


def test_invalid_bool_model():
    with pytest.raises(ValidationError):
        UserSearchConfig.model_validate({"bool": "XOR"})


def test_field_boost_zero_preserved():
    spec = UserFieldConfig.model_validate({"boost": 0})
    assert spec.boost == 0


def test_field_boost_negative_rejected():
    with pytest.raises(ValidationError):
        UserFieldConfig.model_validate({"boost": -1})


def test_field_entries_left_raw():
    cfg = UserSearchConfig.model_validate({"fields": {"title": 2, "author": {"boost": -1}}})
    assert cfg.field_specs == {"title": 2, "author": {"boost": -1}}


def test_field_entry_must_be_object():
    with pytest.raises(ValidationError):
        UserFieldConfig.model_validate(2)


def test_fields_must_be_object():
    with pytest.raises(ValidationError):
        UserSearchConfig.model_validate({"fields": ["title"]})


def test_field_boost_keeps_int_type():
    assert type(UserFieldConfig.model_validate({"boost": 2}).boost) is int
    assert type(UserFieldConfig.model_validate({"boost": 1.5}).boost) is float


def test_field_boost_non_numeric_rejected():
    with pytest.raises(ValidationError):
        UserFieldConfig.model_validate({"boost": "high"})


def test_unknown_keys_ignored():
    spec = UserFieldConfig.model_validate({"boost": 3, "fieldBool": "AND", "color": "red"})
    assert spec.boost == 3
    assert not hasattr(spec, "field_bool")


def test_field_config_defaults_and_wire_form():
    cfg = FieldConfig()
    assert cfg.to_dict() == {"boost": 1, "bool": "OR", "fieldBool": "OR", "expand": False}
