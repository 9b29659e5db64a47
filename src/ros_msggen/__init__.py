"""Generate ROS .msg definitions from Foxglove message schemas.

Supports ROS 1 and ROS 2 output, either as a single definition:
    from ros_msggen import generate_ros_msg, generate_ros_msg_definition

or merged with all dependencies, as used in MCAP schemas and connection headers:
    from ros_msggen import generate_ros_msg_merged_schema
"""

from .builder import generate_ros_msg_definition, primitive_to_ros, time_duration_to_ros
from .bundle import generate_ros_msg_merged_schema
from .dependencies import get_ros_dependencies, get_schema_dependencies, unique_dependencies
from .exceptions import (
    ArrayOfBytesError,
    DependencyCycleError,
    EnumNameCollisionError,
    EnumValueRangeError,
    InvalidConstantError,
    RosMsgGenError,
    UnknownRosTypeError,
)
from .exporter import export_schemas, generate_schema_text
from .models import (
    FOXGLOVE_NAMESPACE,
    MSG_DELIMITER,
    Dependency,
    EnumFieldType,
    FoxgloveDependency,
    FoxgloveEnum,
    FoxgloveEnumValue,
    FoxgloveField,
    FoxgloveMessageSchema,
    FoxglovePrimitive,
    NestedFieldType,
    PrimitiveFieldType,
    RosCatalogDefinition,
    RosDependency,
    RosField,
    RosMsgDefinition,
    RosVersion,
)
from .render import generate_ros_msg
from .ros1_msgs import ROS1_MSGS
from .schemas import FOXGLOVE_SCHEMAS

__all__ = [
    "FOXGLOVE_NAMESPACE",
    "FOXGLOVE_SCHEMAS",
    "MSG_DELIMITER",
    "ROS1_MSGS",
    "ArrayOfBytesError",
    "Dependency",
    "DependencyCycleError",
    "EnumFieldType",
    "EnumNameCollisionError",
    "EnumValueRangeError",
    "FoxgloveDependency",
    "FoxgloveEnum",
    "FoxgloveEnumValue",
    "FoxgloveField",
    "FoxgloveMessageSchema",
    "FoxglovePrimitive",
    "InvalidConstantError",
    "NestedFieldType",
    "PrimitiveFieldType",
    "RosCatalogDefinition",
    "RosDependency",
    "RosField",
    "RosMsgDefinition",
    "RosMsgGenError",
    "RosVersion",
    "UnknownRosTypeError",
    "export_schemas",
    "generate_ros_msg",
    "generate_ros_msg_definition",
    "generate_ros_msg_merged_schema",
    "generate_schema_text",
    "get_ros_dependencies",
    "get_schema_dependencies",
    "primitive_to_ros",
    "time_duration_to_ros",
    "unique_dependencies",
]
