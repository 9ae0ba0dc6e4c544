from modelgen.codegen.core.spec import (
    FieldDescriptor,
    build_model_spec,
    parse_field,
    parse_fields,
    parse_type_code,
)
from modelgen.codegen.core.types import TypeTag


def test_parse_fields_basic_entries():
    descriptors = parse_fields("name:z,age:i,active:b")

    assert [(d.raw_name, d.type_tag) for d in descriptors] == [
        ("name", TypeTag.TEXT),
        ("age", TypeTag.INT32),
        ("active", TypeTag.BOOL),
    ]


def test_entry_without_code_is_text():
    descriptor = parse_field("title")
    assert descriptor.type_tag is TypeTag.TEXT
    assert descriptor.recognized


def test_unknown_code_falls_back_to_text():
    descriptor = parse_field("price:money")

    assert descriptor.type_tag is TypeTag.TEXT
    assert descriptor.type_code == "money"
    assert not descriptor.recognized


def test_collections_and_aliases():
    descriptors = parse_fields("tags:z[],ids:i[],big:i64[],flags:b[],n:i32")

    assert [d.type_tag for d in descriptors] == [
        TypeTag.TEXT_ARRAY,
        TypeTag.INT32_ARRAY,
        TypeTag.INT64_ARRAY,
        TypeTag.BOOL_ARRAY,
        TypeTag.INT32,
    ]
    assert all(d.is_collection for d in descriptors[:4])
    assert not descriptors[4].is_collection


def test_whitespace_is_trimmed():
    descriptors = parse_fields(" name : z , age:i ")
    assert [(d.raw_name, d.type_tag) for d in descriptors] == [
        ("name", TypeTag.TEXT),
        ("age", TypeTag.INT32),
    ]


def test_empty_spec_yields_no_fields():
    assert parse_fields("") == []
    assert parse_fields("   ") == []
    assert parse_fields("a:z,,b:b") == [
        FieldDescriptor("a", TypeTag.TEXT, "z"),
        FieldDescriptor("b", TypeTag.BOOL, "b"),
    ]


def test_duplicates_are_preserved_in_order():
    spec = build_model_spec("Thing", "name:z,age:i,name:b")

    assert spec.field_names() == ["name", "age", "name"]
    assert spec.duplicate_names() == ["name"]
    assert len(spec) == 3


def test_build_model_spec_accepts_entry_list():
    spec = build_model_spec("Todo", ["title:z", "done:b"])

    assert spec.name == "Todo"
    assert [d.type_tag for d in spec.fields] == [TypeTag.TEXT, TypeTag.BOOL]


def test_parse_type_code():
    assert parse_type_code("dt") is TypeTag.DATETIME
    assert parse_type_code("d[]") is TypeTag.TEXT
