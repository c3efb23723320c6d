# lazyent

Annotation options for entity schema fields. An option describes how a field
should appear in generated business structs and protobuf messages. Each
`with_*` helper in `lazyent.options` returns an `Annotation` with one setting
filled in. `merge_annotations` combines several annotations into one.

## Installation

From a checkout of the project:

```
pip install .
```

## Usage

```python
from lazyent.options import (
    merge_annotations,
    validation_string,
    with_biz_name,
    with_proto_field_id,
    with_proto_name,
    with_validation,
)

annotation = merge_annotations(
    with_biz_name("DisplayName"),
    with_proto_name("display_name"),
    with_proto_field_id(7),
    with_validation(validation_string({"min_len": 1})),
)

assert annotation.biz_name == "DisplayName"
assert annotation.proto_field_id == 7
assert annotation.validation.string == {"min_len": 1}
```

### `Annotation`

`Annotation` is a dataclass with these fields:

- `enum_values`
- `edge_field_strategy`
- `biz_name`
- `biz_type`
- `proto_name`
- `proto_type`
- `proto_field_id`
- `proto_validation`
- `validation`

A field counts as unset when it holds an empty string, `0` or `None`.

### Options

- `with_enum_values(values)` maps enum names to numbers, for example
  `{"ACTIVE": 1}`. The mapping is copied into a new dict.
- `with_edge_field_strategy(strategy)` sets the edge field strategy as an integer.
- `with_biz_name(name)` sets the name of the field in the business struct.
- `with_biz_type(type_name)` sets the type of the field in the business struct.
- `with_proto_name(name)` sets the name of the field in the protobuf message.
  snake_case is recommended.
- `with_proto_type(type_name)` sets the type of the field in the protobuf message.
- `with_proto_field_id(field_id)` sets a fixed protobuf field tag. `0` means
  no tag is set.
- `with_proto_validation(rules)` attaches validation rules written as text, for
  example `".string.email = true"`.
- `with_validation(rules)` attaches a structured `ValidationRules` value.

### Structured validation

`ValidationRules` is a dataclass with four fields: `string`, `number`,
`repeated` and `enum`. The helpers below each wrap a shallow copy of the given
rules in a `ValidationRules`, with only one field set:

| Helper | Field set |
| --- | --- |
| `validation_string(rules)` | `string` |
| `validation_int(rules)` | `number` |
| `validation_float(rules)` | `number` |
| `validation_repeated(rules)` | `repeated` |
| `validation_enum(rules)` | `enum` |

### Merging

`merge_annotations(*annotations)` returns a new `Annotation`. It goes through
the annotations in order. Each set value replaces the value gathered so far.
Unset values leave earlier values in place.

## Limitations

This package only builds and merges annotation values. It does not:

- read entity schemas,
- generate business structs or `.proto` files,
- assign protobuf field tags,
- check values against validation rules.

## Running the tests

```
pip install ".[test]"
pytest
```