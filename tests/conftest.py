"""Shared pytest fixtures for ros-msggen tests."""

import pytest
from ros_msggen import (
    EnumFieldType,
    FoxgloveEnum,
    FoxgloveEnumValue,
    FoxgloveField,
    FoxgloveMessageSchema,
    FoxglovePrimitive,
    NestedFieldType,
    PrimitiveFieldType,
)

FLOAT64 = PrimitiveFieldType(FoxglovePrimitive.FLOAT64)
STRING = PrimitiveFieldType(FoxglovePrimitive.STRING)


def make_schema(name: str, *fields: FoxgloveField, **kwargs) -> FoxgloveMessageSchema:
    """Build a schema from fields with less boilerplate."""
    return FoxgloveMessageSchema(name=name, fields=fields, **kwargs)


def make_enum(name: str, **values: int | float) -> FoxgloveEnum:
    """Build an enum from NAME=value keyword arguments."""
    return FoxgloveEnum(
        name=name,
        values=tuple(FoxgloveEnumValue(key, value) for key, value in values.items()),
    )


@pytest.fixture
def chain_schemas() -> dict[str, FoxgloveMessageSchema]:
    """Schemas A -> B -> C, where A references B twice."""
    c = make_schema("C", FoxgloveField("value", FLOAT64))
    b = make_schema("B", FoxgloveField("c", NestedFieldType(c)))
    a = make_schema(
        "A",
        FoxgloveField("first", NestedFieldType(b)),
        FoxgloveField("second", NestedFieldType(b)),
    )
    return {"A": a, "B": b, "C": c}


@pytest.fixture
def enum_schema() -> FoxgloveMessageSchema:
    """Schema with a single enum field."""
    return make_schema(
        "Status",
        FoxgloveField("state", EnumFieldType(make_enum("State", A=0, B=1))),
    )
