"""Tests for RuntypeFactory (from_dict, from_json, validate)."""

from __future__ import annotations

import json
import logging

import pytest

from runtypes_core import (
    Boolean,
    DefinitionError,
    Failcode,
    Lazy,
    Number,
    RuntypeFactory,
    String,
    Tuple,
    TupleRuntype,
    UnknownTagError,
)

PAIR = {
    "tag": "tuple",
    "components": [{"tag": "number"}, {"tag": "string"}],
}


# -- from_dict ---------------------------------------------------------------


def test_from_dict_builds_tuple():
    runtype = RuntypeFactory.from_dict(PAIR)
    assert isinstance(runtype, TupleRuntype)
    assert runtype.components == (Number, String)
    assert runtype.is_readonly is False
    assert runtype.validate([1, "a"]).success is True
    assert runtype.validate([1, 2]).code is Failcode.CONTENT_INCORRECT


def test_from_dict_atomic():
    assert RuntypeFactory.from_dict({"tag": "boolean"}) is Boolean


def test_from_dict_readonly_and_nested():
    runtype = RuntypeFactory.from_dict(
        {
            "tag": "tuple",
            "is_readonly": True,
            "components": [PAIR, {"tag": "unknown"}],
        }
    )
    assert runtype.is_readonly is True
    assert runtype.validate([[1, "a"], None]).success is True
    assert runtype.validate([[1, 2], None]).details == {
        0: {1: "Expected string, but was int"}
    }


def test_from_dict_empty_components_default():
    runtype = RuntypeFactory.from_dict({"tag": "tuple"})
    assert runtype.validate([]).success is True


def test_to_dict_round_trip():
    original = Tuple(Number, Tuple(Boolean, String)).as_readonly()
    rebuilt = RuntypeFactory.from_dict(original.to_dict())
    assert rebuilt == original


def test_from_dict_unknown_tag_suggests():
    with pytest.raises(UnknownTagError) as exc_info:
        RuntypeFactory.from_dict({"tag": "nmber"})
    assert "number" in exc_info.value.suggestions
    assert exc_info.value.tag == "nmber"


def test_from_dict_nested_unknown_tag_has_path():
    with pytest.raises(UnknownTagError) as exc_info:
        RuntypeFactory.from_dict(
            {"tag": "tuple", "components": [{"tag": "number"}, {"tag": "strin"}]}
        )
    assert exc_info.value.path == "components.1"


def test_from_dict_root_unknown_tag_path():
    with pytest.raises(UnknownTagError) as exc_info:
        RuntypeFactory.from_dict({"tag": "tupel"})
    assert exc_info.value.path == "<root>"


def test_unknown_and_disallowed_tags_share_path_format():
    with pytest.raises(UnknownTagError) as unknown:
        RuntypeFactory.from_dict(
            {"tag": "tuple", "components": [{"tag": "number"}, {"tag": "strin"}]}
        )
    with pytest.raises(DefinitionError) as disallowed:
        RuntypeFactory.from_dict(PAIR, allowed_tags={"tuple", "number"})
    assert unknown.value.path == disallowed.value.path == "components.1"


def test_nested_extra_field_path():
    with pytest.raises(DefinitionError) as exc_info:
        RuntypeFactory.from_dict(
            {
                "tag": "tuple",
                "components": [
                    {"tag": "number"},
                    {"tag": "tuple", "components": [{"tag": "number", "x": 1}]},
                ],
            }
        )
    assert exc_info.value.path == "components.1.components.0.x"


def test_from_dict_rejects_lazy():
    with pytest.raises(UnknownTagError):
        RuntypeFactory.from_dict(Lazy(lambda: Number).to_dict())


def test_from_dict_missing_tag():
    with pytest.raises(DefinitionError):
        RuntypeFactory.from_dict({"components": []})


def test_from_dict_extra_field_rejected():
    with pytest.raises(DefinitionError):
        RuntypeFactory.from_dict({"tag": "number", "min": 3})


def test_from_dict_allowed_tags():
    runtype = RuntypeFactory.from_dict(
        PAIR, allowed_tags={"tuple", "number", "string"}
    )
    assert runtype.is_valid([1, "a"])

    with pytest.raises(DefinitionError, match="'string' is not allowed") as exc_info:
        RuntypeFactory.from_dict(PAIR, allowed_tags={"tuple", "number"})
    assert exc_info.value.path == "components.1"


def test_from_dict_logs_build(caplog):
    with caplog.at_level(logging.DEBUG, logger="runtypes.factory"):
        RuntypeFactory.from_dict(PAIR)
    assert "Built tuple runtype" in caplog.text


# -- from_json ---------------------------------------------------------------


def test_from_json_basic():
    runtype = RuntypeFactory.from_json(json.dumps(PAIR))
    assert runtype.validate([1, "a"]).success is True


def test_from_json_invalid_json():
    with pytest.raises(DefinitionError, match="Invalid JSON"):
        RuntypeFactory.from_json("not json {")


def test_from_json_non_object():
    with pytest.raises(DefinitionError, match="object") as exc_info:
        RuntypeFactory.from_json('"just a string"')
    assert exc_info.value.path == "<root>"


# -- validate ----------------------------------------------------------------


def test_validate_valid_definition():
    assert RuntypeFactory.validate(PAIR) == []


def test_validate_collects_errors():
    errors = RuntypeFactory.validate(
        {"tag": "tuple", "components": [{"tag": "nmber"}, {"tag": "strng"}]}
    )
    assert len(errors) == 2
    assert errors[0].startswith("components.0: Unknown runtype tag: 'nmber'.")
    assert errors[1].startswith("components.1: Unknown runtype tag: 'strng'.")


def test_validate_extra_field_message_has_path():
    errors = RuntypeFactory.validate(
        {"tag": "tuple", "components": [{"tag": "number"}, {"tag": "number", "x": 1}]}
    )
    assert len(errors) == 1
    assert errors[0].startswith("components.1.x: ")


def test_validate_allowed_tags():
    errors = RuntypeFactory.validate(PAIR, allowed_tags={"tuple"})
    assert errors == [
        "components.0: Runtype tag 'number' is not allowed",
        "components.1: Runtype tag 'string' is not allowed",
    ]


def test_validate_non_dict_does_not_raise():
    assert RuntypeFactory.validate("tuple") != []
