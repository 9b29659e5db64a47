"""Data models for Foxglove schemas and generated ROS message definitions."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, IntEnum

# Package that generated Foxglove message definitions live in
FOXGLOVE_NAMESPACE = "foxglove_msgs"

# Separator between definitions in a merged (multi-definition) schema
MSG_DELIMITER = "=" * 80

GENERATED_BY_COMMENT = "# Generated by https://github.com/foxglove/schemas"


class RosVersion(IntEnum):
    """ROS message dialect to generate."""

    ROS1 = 1
    ROS2 = 2


class FoxglovePrimitive(str, Enum):
    """Primitive type names available in Foxglove schemas."""

    STRING = "string"
    BOOLEAN = "boolean"
    FLOAT64 = "float64"
    UINT32 = "uint32"
    BYTES = "bytes"
    TIME = "time"
    DURATION = "duration"


@dataclass(frozen=True)
class FoxgloveEnumValue:
    """A single named value of a Foxglove enum."""

    name: str
    value: int | float
    description: str | None = None


@dataclass(frozen=True)
class FoxgloveEnum:
    """An enumeration referenced by schema fields."""

    name: str
    values: tuple[FoxgloveEnumValue, ...]
    description: str | None = None


@dataclass(frozen=True)
class PrimitiveFieldType:
    name: FoxglovePrimitive


@dataclass(frozen=True)
class NestedFieldType:
    schema: "FoxgloveMessageSchema"


@dataclass(frozen=True)
class EnumFieldType:
    enum: FoxgloveEnum


FieldType = PrimitiveFieldType | NestedFieldType | EnumFieldType


@dataclass(frozen=True)
class FoxgloveField:
    """A field of a Foxglove schema.

    ``array`` is ``None`` for scalar fields, ``True`` for variable-length arrays,
    and an ``int`` for fixed-length arrays.
    """

    name: str
    type: FieldType
    array: bool | int | None = None
    description: str | None = None


@dataclass(frozen=True)
class FoxgloveMessageSchema:
    """A Foxglove message schema.

    Schemas with a ``ros_equivalent`` are represented in ROS by that existing
    message type rather than by a generated ``foxglove_msgs`` definition.
    """

    name: str
    fields: tuple[FoxgloveField, ...]
    description: str | None = None
    ros_equivalent: str | None = None


@dataclass(frozen=True)
class RosField:
    """A field or constant in a ROS message definition."""

    name: str
    type: str
    is_array: bool = False
    array_length: int | None = None
    is_constant: bool = False
    value_text: str | None = None
    is_complex: bool = False
    description: str | None = None

    def __str__(self) -> str:
        """Return the field line as it appears in a .msg file (without comments)."""
        result = self.type
        if self.is_array:
            result += f"[{self.array_length if self.array_length is not None else ''}]"
        result += f" {self.name}"
        if self.is_constant:
            result += f"={self.value_text}"
        return result


@dataclass(frozen=True)
class RosCatalogDefinition:
    """A predefined ROS message type (e.g. ``geometry_msgs/Point``)."""

    name: str
    fields: tuple[RosField, ...]


@dataclass
class RosMsgDefinition:
    """Intermediate ROS message definition, ready to be rendered as text."""

    original_name: str
    # Name used in .msg files (foo_msgs/Bar)
    ros_msg_interface_name: str
    # Name used to refer to the type in ROS (foo_msgs/Bar or foo_msgs/msg/Bar)
    ros_full_interface_name: str
    fields: list[RosField] = field(default_factory=list)
    description: str | None = None

    @property
    def constants(self) -> list[RosField]:
        """Return only the constant fields."""
        return [f for f in self.fields if f.is_constant]


@dataclass(frozen=True)
class RosDependency:
    """Dependency on a message type from the ROS catalog."""

    name: str

    @property
    def key(self) -> tuple[str, str]:
        return ("ros", self.name)


@dataclass(frozen=True)
class FoxgloveDependency:
    """Dependency on another Foxglove schema."""

    schema: FoxgloveMessageSchema

    @property
    def key(self) -> tuple[str, str]:
        return ("foxglove", self.schema.name)


Dependency = RosDependency | FoxgloveDependency

RosCatalog = Mapping[str, RosCatalogDefinition]
SchemaCatalog = Mapping[str, FoxgloveMessageSchema]
