"""Tests for converting Foxglove schemas into ROS message definitions."""

import pytest
from ros_msggen import (
    ArrayOfBytesError,
    EnumFieldType,
    EnumNameCollisionError,
    EnumValueRangeError,
    FoxgloveEnumValue,
    FoxgloveField,
    FoxglovePrimitive,
    NestedFieldType,
    PrimitiveFieldType,
    RosVersion,
    generate_ros_msg_definition,
    primitive_to_ros,
    time_duration_to_ros,
)
from ros_msggen.models import FoxgloveEnum

from conftest import FLOAT64, STRING, make_enum, make_schema


class TestTypeMapping:
    """Test primitive and time/duration type mapping."""

    def test_primitives(self):
        assert primitive_to_ros(FoxglovePrimitive.STRING) == "string"
        assert primitive_to_ros(FoxglovePrimitive.BOOLEAN) == "bool"
        assert primitive_to_ros(FoxglovePrimitive.FLOAT64) == "float64"

    @pytest.mark.parametrize("primitive", [FoxglovePrimitive.UINT32, FoxglovePrimitive.BYTES])
    def test_primitive_without_mapping(self, primitive):
        with pytest.raises(TypeError):
            primitive_to_ros(primitive)

    def test_time_duration_ros1(self):
        assert time_duration_to_ros("time", RosVersion.ROS1) == "time"
        assert time_duration_to_ros("duration", RosVersion.ROS1) == "duration"

    def test_time_duration_ros2(self):
        assert time_duration_to_ros("time", RosVersion.ROS2) == "builtin_interfaces/Time"
        assert time_duration_to_ros("duration", RosVersion.ROS2) == "builtin_interfaces/Duration"


def test_interface_names():
    """Test ROS 1 and ROS 2 interface names."""
    schema = make_schema("Point2", FoxgloveField("x", FLOAT64))

    ros1 = generate_ros_msg_definition(schema, RosVersion.ROS1)
    assert ros1.original_name == "Point2"
    assert ros1.ros_msg_interface_name == "foxglove_msgs/Point2"
    assert ros1.ros_full_interface_name == "foxglove_msgs/Point2"

    ros2 = generate_ros_msg_definition(schema, RosVersion.ROS2)
    assert ros2.ros_msg_interface_name == "foxglove_msgs/Point2"
    assert ros2.ros_full_interface_name == "foxglove_msgs/msg/Point2"


def test_field_name_casing():
    """ROS 2 field names are lower-cased, ROS 1 names are kept."""
    schema = make_schema("Named", FoxgloveField("FrameId", STRING))
    assert generate_ros_msg_definition(schema, RosVersion.ROS1).fields[0].name == "FrameId"
    assert generate_ros_msg_definition(schema, RosVersion.ROS2).fields[0].name == "frameid"


def test_primitive_field_types():
    """Test that primitive fields keep their order and mapped types."""
    schema = make_schema(
        "Primitives",
        FoxgloveField("s", STRING),
        FoxgloveField("b", PrimitiveFieldType(FoxglovePrimitive.BOOLEAN)),
        FoxgloveField("f", FLOAT64),
        FoxgloveField("u", PrimitiveFieldType(FoxglovePrimitive.UINT32)),
        FoxgloveField("t", PrimitiveFieldType(FoxglovePrimitive.TIME)),
        FoxgloveField("d", PrimitiveFieldType(FoxglovePrimitive.DURATION)),
    )
    definition = generate_ros_msg_definition(schema, RosVersion.ROS2)
    assert [(f.type, f.name) for f in definition.fields] == [
        ("string", "s"),
        ("bool", "b"),
        ("float64", "f"),
        ("uint32", "u"),
        # Substituted at render time
        ("time", "t"),
        ("duration", "d"),
    ]
    assert not any(f.is_array or f.is_constant or f.is_complex for f in definition.fields)


class TestArrays:
    """Test array and bytes handling."""

    def test_dynamic_array(self):
        schema = make_schema("Values", FoxgloveField("values", FLOAT64, array=True))
        field = generate_ros_msg_definition(schema, RosVersion.ROS1).fields[0]
        assert field.is_array
        assert field.array_length is None

    def test_fixed_array(self):
        schema = make_schema("Covariance", FoxgloveField("covariance", FLOAT64, array=9))
        field = generate_ros_msg_definition(schema, RosVersion.ROS1).fields[0]
        assert field.is_array
        assert field.array_length == 9

    def test_bytes_become_uint8_array(self):
        schema = make_schema(
            "Blob", FoxgloveField("data", PrimitiveFieldType(FoxglovePrimitive.BYTES))
        )
        field = generate_ros_msg_definition(schema, RosVersion.ROS2).fields[0]
        assert field.type == "uint8"
        assert field.is_array
        assert field.array_length is None

    def test_array_of_bytes_rejected(self):
        schema = make_schema(
            "Blobs",
            FoxgloveField("data", PrimitiveFieldType(FoxglovePrimitive.BYTES), array=True),
        )
        with pytest.raises(ArrayOfBytesError, match="Array of bytes"):
            generate_ros_msg_definition(schema, RosVersion.ROS1)


class TestNested:
    """Test nested schema references."""

    def test_foxglove_nested(self):
        inner = make_schema("Color", FoxgloveField("r", FLOAT64))
        schema = make_schema("Marker", FoxgloveField("color", NestedFieldType(inner)))
        field = generate_ros_msg_definition(schema, RosVersion.ROS2).fields[0]
        assert field.type == "foxglove_msgs/Color"
        assert field.is_complex

    def test_ros_equivalent(self):
        inner = make_schema(
            "Point3", FoxgloveField("x", FLOAT64), ros_equivalent="geometry_msgs/Point"
        )
        schema = make_schema("Marker", FoxgloveField("points", NestedFieldType(inner), array=True))
        field = generate_ros_msg_definition(schema, RosVersion.ROS1).fields[0]
        assert field.type == "geometry_msgs/Point"
        assert field.is_array
        assert field.is_complex


class TestEnums:
    """Test enum expansion into constants."""

    def test_constants_precede_value_field(self, enum_schema):
        definition = generate_ros_msg_definition(enum_schema, RosVersion.ROS1)
        assert [(f.name, f.type, f.is_constant, f.value_text) for f in definition.fields] == [
            ("A", "uint8", True, "0"),
            ("B", "uint8", True, "1"),
            ("state", "uint8", False, None),
        ]
        assert [c.name for c in definition.constants] == ["A", "B"]

    def test_constant_names_not_lower_cased(self):
        schema = make_schema(
            "Status",
            FoxgloveField("State", EnumFieldType(make_enum("State", IDLE=0))),
        )
        definition = generate_ros_msg_definition(schema, RosVersion.ROS2)
        assert [f.name for f in definition.fields] == ["IDLE", "state"]

    def test_constant_descriptions(self):
        enum = FoxgloveEnum(
            name="Level",
            values=(FoxgloveEnumValue("LOW", 0, "Low level"),),
        )
        schema = make_schema("Levels", FoxgloveField("level", EnumFieldType(enum)))
        definition = generate_ros_msg_definition(schema, RosVersion.ROS1)
        assert definition.fields[0].description == "Low level"

    def test_repeated_enum_emits_constants_once(self):
        state = EnumFieldType(make_enum("State", A=0, B=1))
        schema = make_schema(
            "Transition",
            FoxgloveField("from_state", state),
            FoxgloveField("to_state", state),
        )
        definition = generate_ros_msg_definition(schema, RosVersion.ROS1)
        assert [f.name for f in definition.fields] == ["A", "B", "from_state", "to_state"]

    def test_name_collision_across_enums(self):
        schema = make_schema(
            "Both",
            FoxgloveField("a", EnumFieldType(make_enum("First", UNKNOWN=0))),
            FoxgloveField("b", EnumFieldType(make_enum("Second", UNKNOWN=0))),
        )
        with pytest.raises(EnumNameCollisionError, match="UNKNOWN occurs in more than one enum"):
            generate_ros_msg_definition(schema, RosVersion.ROS1)

    @pytest.mark.parametrize("value", [256, -1, 1.5, 1000, True])
    def test_value_out_of_range(self, value):
        schema = make_schema(
            "Bad", FoxgloveField("state", EnumFieldType(make_enum("State", BAD=value)))
        )
        with pytest.raises(EnumValueRangeError, match="Only uint8 enums"):
            generate_ros_msg_definition(schema, RosVersion.ROS1)

    def test_integral_float_value(self):
        schema = make_schema(
            "Ok", FoxgloveField("state", EnumFieldType(make_enum("State", MAX=255.0)))
        )
        definition = generate_ros_msg_definition(schema, RosVersion.ROS1)
        assert definition.fields[0].value_text == "255"

    def test_state_is_per_call(self, enum_schema):
        """Building the same schema twice must not report a collision."""
        first = generate_ros_msg_definition(enum_schema, RosVersion.ROS1)
        second = generate_ros_msg_definition(enum_schema, RosVersion.ROS1)
        assert first == second
