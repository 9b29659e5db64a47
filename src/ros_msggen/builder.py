"""Conversion of Foxglove schemas into intermediate ROS message definitions."""

from ros_msggen.exceptions import ArrayOfBytesError, EnumNameCollisionError, EnumValueRangeError
from ros_msggen.models import (
    FOXGLOVE_NAMESPACE,
    EnumFieldType,
    FoxgloveEnum,
    FoxgloveMessageSchema,
    FoxglovePrimitive,
    NestedFieldType,
    PrimitiveFieldType,
    RosField,
    RosMsgDefinition,
    RosVersion,
)

# Enum values are encoded as uint8 in ROS msg files
ENUM_VALUE_TYPE = "uint8"
_UINT8_MAX = 255


def primitive_to_ros(primitive: FoxglovePrimitive) -> str:
    """Map a Foxglove primitive to the equivalent ROS primitive type name.

    uint32, bytes, time and duration are resolved by the caller since they
    either need special handling or depend on the ROS version.
    """
    if primitive == FoxglovePrimitive.STRING:
        return "string"
    if primitive == FoxglovePrimitive.BOOLEAN:
        return "bool"
    if primitive == FoxglovePrimitive.FLOAT64:
        return "float64"
    raise TypeError(f"Primitive {primitive} has no direct ROS equivalent")


def time_duration_to_ros(type_name: str, ros_version: RosVersion) -> str:
    """Map time/duration to the builtin type of the given ROS version."""
    if type_name == FoxglovePrimitive.TIME:
        return "builtin_interfaces/Time" if ros_version == RosVersion.ROS2 else "time"
    if type_name == FoxglovePrimitive.DURATION:
        return "builtin_interfaces/Duration" if ros_version == RosVersion.ROS2 else "duration"
    raise TypeError(f"{type_name} is neither time nor duration")


def foxglove_interface_name(schema_name: str) -> str:
    return f"{FOXGLOVE_NAMESPACE}/{schema_name}"


def _enum_value_text(name: str, value: object) -> str:
    """Validate an enum value and return its text for the constant line."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise EnumValueRangeError(name, value)
    if isinstance(value, float) and not value.is_integer():
        raise EnumValueRangeError(name, value)
    if value < 0 or value > _UINT8_MAX:
        raise EnumValueRangeError(name, value)
    return str(int(value))


def _enum_constants(
    enum: FoxgloveEnum,
    schema_name: str,
    enum_field_names: set[str],
) -> list[RosField]:
    """Build constant fields for every value of an enum.

    Names are recorded in ``enum_field_names`` so that collisions with other
    enums of the same schema are detected.
    """
    constants: list[RosField] = []
    for enum_value in enum.values:
        if enum_value.name in enum_field_names:
            raise EnumNameCollisionError(enum_value.name, schema_name)
        value_text = _enum_value_text(enum_value.name, enum_value.value)
        enum_field_names.add(enum_value.name)
        constants.append(
            RosField(
                name=enum_value.name,
                type=ENUM_VALUE_TYPE,
                is_constant=True,
                value_text=value_text,
                description=enum_value.description,
            )
        )
    return constants


def generate_ros_msg_definition(
    schema: FoxgloveMessageSchema,
    ros_version: RosVersion,
) -> RosMsgDefinition:
    """Convert a Foxglove schema into a ROS message definition.

    Enum fields become uint8 fields preceded by one constant per enum value, so
    that tools can display the symbolic names. Each enum's constants are only
    emitted for its first field.

    Args:
        schema: The schema to convert
        ros_version: Target ROS version; ROS 2 lower-cases field names

    Returns:
        The intermediate definition, with fields in output order

    Raises:
        EnumNameCollisionError: Two enums of the schema share a value name
        EnumValueRangeError: An enum value does not fit in a uint8
        ArrayOfBytesError: A bytes field is declared as an array
    """
    enum_field_names: set[str] = set()
    seen_enum_names: set[str] = set()

    fields: list[RosField] = []
    for schema_field in schema.fields:
        is_array = schema_field.array is not None and schema_field.array is not False
        array_length = (
            schema_field.array
            if isinstance(schema_field.array, int) and not isinstance(schema_field.array, bool)
            else None
        )
        field_type = schema_field.type

        if isinstance(field_type, EnumFieldType):
            ros_type = ENUM_VALUE_TYPE
            if field_type.enum.name not in seen_enum_names:
                fields.extend(_enum_constants(field_type.enum, schema.name, enum_field_names))
                seen_enum_names.add(field_type.enum.name)
        elif isinstance(field_type, NestedFieldType):
            if field_type.schema.ros_equivalent is not None:
                ros_type = field_type.schema.ros_equivalent
            else:
                ros_type = foxglove_interface_name(field_type.schema.name)
        elif isinstance(field_type, PrimitiveFieldType):
            primitive = FoxglovePrimitive(field_type.name)
            if primitive == FoxglovePrimitive.BYTES:
                if is_array:
                    raise ArrayOfBytesError(schema_field.name)
                ros_type = "uint8"
                is_array = True
            elif primitive in (
                FoxglovePrimitive.UINT32,
                FoxglovePrimitive.TIME,
                FoxglovePrimitive.DURATION,
            ):
                # time/duration are substituted when rendering
                ros_type = primitive.value
            else:
                ros_type = primitive_to_ros(primitive)
        else:
            raise TypeError(f"Unsupported field type {type(field_type).__name__}")

        fields.append(
            RosField(
                name=(
                    schema_field.name.lower()
                    if ros_version == RosVersion.ROS2
                    else schema_field.name
                ),
                type=ros_type,
                is_array=is_array,
                array_length=array_length,
                is_complex=isinstance(field_type, NestedFieldType),
                description=schema_field.description,
            )
        )

    interface_name = foxglove_interface_name(schema.name)
    return RosMsgDefinition(
        original_name=schema.name,
        ros_msg_interface_name=interface_name,
        ros_full_interface_name=(
            f"{FOXGLOVE_NAMESPACE}/msg/{schema.name}"
            if ros_version == RosVersion.ROS2
            else interface_name
        ),
        fields=fields,
        description=schema.description,
    )
