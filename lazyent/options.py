"""Field annotations and helpers for building them.

An :class:`Annotation` carries per-field settings for the generated business
structs and proto messages. The ``with_*`` helpers each build an annotation
with a single setting, and :func:`merge_annotations` combines several of them.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass
class ValidationRules:
    """Structured validation rules; normally only one kind is set."""

    string: Optional[Any] = None
    number: Optional[Any] = None
    repeated: Optional[Any] = None
    enum: Optional[Any] = None


@dataclass
class Annotation:
    """Per-field generation settings.

    Empty strings, zero numbers and ``None`` mean "not set".
    """

    enum_values: Optional[dict[str, int]] = None
    edge_field_strategy: int = 0
    biz_name: str = ""
    biz_type: str = ""
    proto_name: str = ""
    proto_type: str = ""
    proto_field_id: int = 0
    proto_validation: str = ""
    validation: Optional[ValidationRules] = None


def with_enum_values(values: Mapping[str, int]) -> Annotation:
    """Map enum names (e.g. ``"ACTIVE"``) to their numeric values."""
    return Annotation(enum_values=dict(values))


def with_edge_field_strategy(strategy: int) -> Annotation:
    """Choose how edge fields are generated."""
    return Annotation(edge_field_strategy=strategy)


def with_biz_name(name: str) -> Annotation:
    """Override the field name in the generated business struct."""
    return Annotation(biz_name=name)


def with_biz_type(type_name: str) -> Annotation:
    """Override the field type in the generated business struct."""
    return Annotation(biz_type=type_name)


def with_proto_name(name: str) -> Annotation:
    """Override the proto message field name (snake_case recommended)."""
    return Annotation(proto_name=name)


def with_proto_type(type_name: str) -> Annotation:
    """Override the proto message field type."""
    return Annotation(proto_type=type_name)


def with_proto_field_id(field_id: int) -> Annotation:
    """Fix the proto field tag instead of assigning one automatically."""
    return Annotation(proto_field_id=field_id)


def with_proto_validation(rules: str) -> Annotation:
    """Attach raw validation rules, e.g. ``".string.email = true"``."""
    return Annotation(proto_validation=rules)


def with_validation(rules: Optional[ValidationRules]) -> Annotation:
    """Attach structured validation rules."""
    return Annotation(validation=rules)


def validation_string(rules: Any) -> ValidationRules:
    """Wrap string rules into a :class:`ValidationRules`."""
    return ValidationRules(string=copy.copy(rules))


def validation_int(rules: Any) -> ValidationRules:
    """Wrap integer rules into a :class:`ValidationRules`."""
    return ValidationRules(number=copy.copy(rules))


def validation_float(rules: Any) -> ValidationRules:
    """Wrap float rules into a :class:`ValidationRules`."""
    return ValidationRules(number=copy.copy(rules))


def validation_repeated(rules: Any) -> ValidationRules:
    """Wrap repeated-field rules into a :class:`ValidationRules`."""
    return ValidationRules(repeated=copy.copy(rules))


def validation_enum(rules: Any) -> ValidationRules:
    """Wrap enum rules into a :class:`ValidationRules`."""
    return ValidationRules(enum=copy.copy(rules))


def merge_annotations(*args: Annotation) -> Annotation:
    """Combine annotations; set values in later ones override earlier ones."""
    merged = Annotation()
    for opt in args:
        if opt.enum_values is not None:
            merged.enum_values = opt.enum_values
        if opt.edge_field_strategy != 0:
            merged.edge_field_strategy = opt.edge_field_strategy
        if opt.biz_name:
            merged.biz_name = opt.biz_name
        if opt.biz_type:
            merged.biz_type = opt.biz_type
        if opt.proto_name:
            merged.proto_name = opt.proto_name
        if opt.proto_type:
            merged.proto_type = opt.proto_type
        if opt.proto_field_id != 0:
            merged.proto_field_id = opt.proto_field_id
        if opt.proto_validation:
            merged.proto_validation = opt.proto_validation
        if opt.validation is not None:
            merged.validation = opt.validation
    return merged