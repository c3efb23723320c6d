from dataclasses import dataclass

import pytest

from lazyent.options import (
    Annotation,
    ValidationRules,
    merge_annotations,
    validation_enum,
    validation_float,
    validation_int,
    validation_repeated,
    validation_string,
    with_biz_name,
    with_biz_type,
    with_edge_field_strategy,
    with_enum_values,
    with_proto_field_id,
    with_proto_name,
    with_proto_type,
    with_proto_validation,
    with_validation,
)


@dataclass
class _Rules:
    min_len: int = 0


def test_with_enum_values_sets_only_enum_values():
    ann = with_enum_values({"ACTIVE": 1, "INACTIVE": 2})
    assert ann.enum_values == {"ACTIVE": 1, "INACTIVE": 2}
    assert ann == Annotation(enum_values={"ACTIVE": 1, "INACTIVE": 2})


def test_with_edge_field_strategy():
    ann = with_edge_field_strategy(2)
    assert ann.edge_field_strategy == 2
    assert ann.biz_name == ""


@pytest.mark.parametrize(
    "factory, attr, value",
    [
        (with_biz_name, "biz_name", "Owner"),
        (with_biz_type, "biz_type", "json.RawMessage"),
        (with_proto_name, "proto_name", "owner_id"),
        (with_proto_type, "proto_type", "string"),
        (with_proto_validation, "proto_validation", ".string.email = true"),
        (with_proto_field_id, "proto_field_id", 7),
    ],
)
def test_single_setting_helpers(factory, attr, value):
    ann = factory(value)
    assert getattr(ann, attr) == value
    assert ann == Annotation(**{attr: value})


def test_with_validation():
    rules = ValidationRules(string=_Rules(3))
    ann = with_validation(rules)
    assert ann.validation is rules


@pytest.mark.parametrize(
    "factory, attr",
    [
        (validation_string, "string"),
        (validation_int, "number"),
        (validation_float, "number"),
        (validation_repeated, "repeated"),
        (validation_enum, "enum"),
    ],
)
def test_validation_helpers_wrap_a_copy(factory, attr):
    rules = _Rules(5)
    wrapped = factory(rules)
    assert getattr(wrapped, attr) == rules
    assert getattr(wrapped, attr) is not rules
    others = {"string", "number", "repeated", "enum"} - {attr}
    assert all(getattr(wrapped, name) is None for name in others)


def test_merge_later_overrides_earlier():
    merged = merge_annotations(with_biz_name("First"), with_biz_name("Second"))
    assert merged.biz_name == "Second"


def test_merge_unset_values_do_not_override():
    merged = merge_annotations(
        with_proto_field_id(4),
        with_proto_name("owner_id"),
        Annotation(),
    )
    assert merged.proto_field_id == 4
    assert merged.proto_name == "owner_id"


def test_merge_combines_all_fields():
    rules = validation_string(_Rules(1))
    merged = merge_annotations(
        with_enum_values({"ACTIVE": 1}),
        with_edge_field_strategy(3),
        with_biz_name("Owner"),
        with_biz_type("json.RawMessage"),
        with_proto_name("owner"),
        with_proto_type("string"),
        with_proto_field_id(9),
        with_proto_validation(".string.email = true"),
        with_validation(rules),
    )
    assert merged == Annotation(
        enum_values={"ACTIVE": 1},
        edge_field_strategy=3,
        biz_name="Owner",
        biz_type="json.RawMessage",
        proto_name="owner",
        proto_type="string",
        proto_field_id=9,
        proto_validation=".string.email = true",
        validation=rules,
    )


def test_merge_empty_enum_map_counts_as_set():
    merged = merge_annotations(with_enum_values({"ACTIVE": 1}), with_enum_values({}))
    assert merged.enum_values == {}


def test_merge_nothing_gives_default():
    assert merge_annotations() == Annotation()


def test_merge_does_not_mutate_inputs():
    first = with_biz_name("A")
    second = with_biz_type("B")
    merge_annotations(first, second)
    assert first == Annotation(biz_name="A")
    assert second == Annotation(biz_type="B")