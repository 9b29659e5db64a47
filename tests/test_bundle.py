"""Tests for merged message definitions."""

import pytest
from ros_msggen import (
    FOXGLOVE_SCHEMAS,
    MSG_DELIMITER,
    ROS1_MSGS,
    EnumFieldType,
    EnumValueRangeError,
    FoxgloveField,
    NestedFieldType,
    RosVersion,
    generate_ros_msg,
    generate_ros_msg_definition,
    generate_ros_msg_merged_schema,
    get_schema_dependencies,
    unique_dependencies,
)
from ros_msggen.bundle import catalog_msg_definition

from conftest import make_enum, make_schema

GENERATED_BY = "# Generated by https://github.com/foxglove/schemas"


def split_blocks(text: str) -> list[str]:
    return text.split(f"{MSG_DELIMITER}\n")


def test_delimiter_is_80_equals():
    assert MSG_DELIMITER == "=" * 80


def test_schema_without_dependencies_is_unchanged():
    schema = FOXGLOVE_SCHEMAS["Color"]
    for ros_version in RosVersion:
        definition = generate_ros_msg_definition(schema, ros_version)
        assert generate_ros_msg_merged_schema(schema, ros_version) == generate_ros_msg(
            definition, ros_version
        )


def test_chain_blocks(chain_schemas):
    text = generate_ros_msg_merged_schema(chain_schemas["A"], RosVersion.ROS2)
    blocks = split_blocks(text)
    assert len(blocks) == 3
    assert blocks[0].startswith("# foxglove_msgs/msg/A\n")
    assert blocks[0].endswith("foxglove_msgs/B first\nfoxglove_msgs/B second\n")
    # MSG lines use the short interface name, the comment the full ROS 2 name
    assert blocks[1].startswith("MSG: foxglove_msgs/B\n# foxglove_msgs/msg/B\n")
    assert blocks[2].startswith("MSG: foxglove_msgs/C\n# foxglove_msgs/msg/C\n")


def test_pose_in_frame_ros1():
    text = generate_ros_msg_merged_schema(FOXGLOVE_SCHEMAS["PoseInFrame"], RosVersion.ROS1)
    blocks = split_blocks(text)
    assert blocks[1] == (
        "MSG: geometry_msgs/Pose\n"
        "# geometry_msgs/Pose\n"
        "\n"
        f"{GENERATED_BY}\n"
        "\n"
        "geometry_msgs/Point position\n"
        "geometry_msgs/Quaternion orientation\n"
    )
    assert blocks[2] == (
        "MSG: geometry_msgs/Point\n"
        "# geometry_msgs/Point\n"
        "\n"
        f"{GENERATED_BY}\n"
        "\n"
        "float64 x\n"
        "float64 y\n"
        "float64 z\n"
    )
    assert blocks[3].startswith("MSG: geometry_msgs/Quaternion\n")


@pytest.mark.parametrize("ros_version", list(RosVersion))
@pytest.mark.parametrize("name", sorted(FOXGLOVE_SCHEMAS))
def test_block_count_matches_dependencies(name, ros_version):
    schema = FOXGLOVE_SCHEMAS[name]
    dependencies = unique_dependencies(get_schema_dependencies(schema, ROS1_MSGS))
    blocks = split_blocks(generate_ros_msg_merged_schema(schema, ros_version))

    assert len(blocks) == 1 + len(dependencies)
    for block, dep in zip(blocks[1:], dependencies, strict=True):
        msg_line = block.split("\n", 1)[0]
        expected = dep.key[1] if dep.key[0] == "ros" else f"foxglove_msgs/{dep.key[1]}"
        assert msg_line == f"MSG: {expected}"


def test_catalog_entries_render_as_is_in_ros2():
    """Catalog entries keep their field names and only get time substitution."""
    definition = catalog_msg_definition(ROS1_MSGS["std_msgs/Header"])
    assert generate_ros_msg(definition, RosVersion.ROS2).endswith(
        "uint32 seq\nbuiltin_interfaces/Time stamp\nstring frame_id\n"
    )


def test_custom_catalog():
    catalog = {
        "geometry_msgs/Point": ROS1_MSGS["geometry_msgs/Point"],
    }
    inner = make_schema("Point3", ros_equivalent="geometry_msgs/Point")
    schema = make_schema("Outer", FoxgloveField("point", NestedFieldType(inner)))
    blocks = split_blocks(generate_ros_msg_merged_schema(schema, RosVersion.ROS1, catalog))
    assert len(blocks) == 2


def test_error_in_dependency_aborts_merge():
    bad = make_schema(
        "Bad", FoxgloveField("state", EnumFieldType(make_enum("State", HUGE=300)))
    )
    schema = make_schema("Outer", FoxgloveField("bad", NestedFieldType(bad)))
    with pytest.raises(EnumValueRangeError):
        generate_ros_msg_merged_schema(schema, RosVersion.ROS2)
