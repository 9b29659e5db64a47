"""Foxglove message schemas bundled with ros-msggen."""

from types import MappingProxyType

from ros_msggen.models import (
    EnumFieldType,
    FoxgloveEnum,
    FoxgloveEnumValue,
    FoxgloveField,
    FoxgloveMessageSchema,
    FoxglovePrimitive,
    NestedFieldType,
    PrimitiveFieldType,
)

STRING = PrimitiveFieldType(FoxglovePrimitive.STRING)
FLOAT64 = PrimitiveFieldType(FoxglovePrimitive.FLOAT64)
UINT32 = PrimitiveFieldType(FoxglovePrimitive.UINT32)
BYTES = PrimitiveFieldType(FoxglovePrimitive.BYTES)
TIME = PrimitiveFieldType(FoxglovePrimitive.TIME)


def _xyz(kind: str, *names: str) -> tuple[FoxgloveField, ...]:
    return tuple(
        FoxgloveField(name, FLOAT64, description=f"{name} {kind}") for name in names
    )


def _timestamp(description: str = "Timestamp of the message") -> FoxgloveField:
    return FoxgloveField("timestamp", TIME, description=description)


def _frame_id(description: str = "Frame of reference") -> FoxgloveField:
    return FoxgloveField("frame_id", STRING, description=description)


Color = FoxgloveMessageSchema(
    name="Color",
    description="A color in RGBA format",
    fields=(
        FoxgloveField("r", FLOAT64, description="Red value between 0 and 1"),
        FoxgloveField("g", FLOAT64, description="Green value between 0 and 1"),
        FoxgloveField("b", FLOAT64, description="Blue value between 0 and 1"),
        FoxgloveField("a", FLOAT64, description="Alpha value between 0 and 1"),
    ),
)

Point2 = FoxgloveMessageSchema(
    name="Point2",
    description="A point representing a position in 2D space",
    fields=_xyz("coordinate", "x", "y"),
)

Vector2 = FoxgloveMessageSchema(
    name="Vector2",
    description="A vector in 2D space that represents a direction only",
    fields=_xyz("component", "x", "y"),
)

Point3 = FoxgloveMessageSchema(
    name="Point3",
    description="A point representing a position in 3D space",
    ros_equivalent="geometry_msgs/Point",
    fields=_xyz("coordinate", "x", "y", "z"),
)

Vector3 = FoxgloveMessageSchema(
    name="Vector3",
    description="A vector in 3D space that represents a direction only",
    ros_equivalent="geometry_msgs/Vector3",
    fields=_xyz("component", "x", "y", "z"),
)

Quaternion = FoxgloveMessageSchema(
    name="Quaternion",
    description="A [quaternion](https://eater.net/quaternions) representing a rotation in 3D space",
    ros_equivalent="geometry_msgs/Quaternion",
    fields=_xyz("value", "x", "y", "z", "w"),
)

Pose = FoxgloveMessageSchema(
    name="Pose",
    description="A position and orientation for an object or reference frame in 3D space",
    ros_equivalent="geometry_msgs/Pose",
    fields=(
        FoxgloveField(
            "position",
            NestedFieldType(Vector3),
            description="Point denoting position in 3D space",
        ),
        FoxgloveField(
            "orientation",
            NestedFieldType(Quaternion),
            description="Quaternion denoting orientation in 3D space",
        ),
    ),
)

KeyValuePair = FoxgloveMessageSchema(
    name="KeyValuePair",
    description="A key with its associated value",
    fields=(
        FoxgloveField("key", STRING, description="Key"),
        FoxgloveField("value", STRING, description="Value"),
    ),
)

PoseInFrame = FoxgloveMessageSchema(
    name="PoseInFrame",
    description="A timestamped pose for an object or reference frame in 3D space",
    fields=(
        _timestamp("Timestamp of pose"),
        _frame_id("Frame of reference for pose position and orientation"),
        FoxgloveField("pose", NestedFieldType(Pose), description="Pose in 3D space"),
    ),
)

PosesInFrame = FoxgloveMessageSchema(
    name="PosesInFrame",
    description="An array of timestamped poses for an object or reference frame in 3D space",
    fields=(
        _timestamp("Timestamp of pose"),
        _frame_id("Frame of reference for pose position and orientation"),
        FoxgloveField(
            "poses", NestedFieldType(Pose), array=True, description="Poses in 3D space"
        ),
    ),
)

FrameTransform = FoxgloveMessageSchema(
    name="FrameTransform",
    description="A transform between two reference frames in 3D space",
    fields=(
        _timestamp("Timestamp of transform"),
        FoxgloveField("parent_frame_id", STRING, description="Name of the parent frame"),
        FoxgloveField("child_frame_id", STRING, description="Name of the child frame"),
        FoxgloveField(
            "translation",
            NestedFieldType(Vector3),
            description="Translation component of the transform",
        ),
        FoxgloveField(
            "rotation",
            NestedFieldType(Quaternion),
            description="Rotation component of the transform",
        ),
    ),
)

CompressedImage = FoxgloveMessageSchema(
    name="CompressedImage",
    description="A compressed image",
    fields=(
        _timestamp("Timestamp of image"),
        _frame_id(
            "Frame of reference for the image. The origin of the frame is the optical "
            "center of the camera. +x points to the right in the image, +y points down, "
            "and +z points into the plane of the image."
        ),
        FoxgloveField("data", BYTES, description="Compressed image data"),
        FoxgloveField(
            "format",
            STRING,
            description="Image format\n\nSupported values: `webp`, `jpeg`, `png`",
        ),
    ),
)

LogLevel = FoxgloveEnum(
    name="LogLevel",
    description="Log level",
    values=(
        FoxgloveEnumValue("UNKNOWN", 0),
        FoxgloveEnumValue("DEBUG", 1),
        FoxgloveEnumValue("INFO", 2),
        FoxgloveEnumValue("WARNING", 3),
        FoxgloveEnumValue("ERROR", 4),
        FoxgloveEnumValue("FATAL", 5),
    ),
)

Log = FoxgloveMessageSchema(
    name="Log",
    description="A log message",
    fields=(
        _timestamp("Timestamp of log message"),
        FoxgloveField("level", EnumFieldType(LogLevel), description="Log level"),
        FoxgloveField("message", STRING, description="Log message"),
        FoxgloveField("name", STRING, description="Process or node name"),
        FoxgloveField("file", STRING, description="Filename"),
        FoxgloveField("line", UINT32, description="Line number in the file"),
    ),
)

PositionCovarianceType = FoxgloveEnum(
    name="PositionCovarianceType",
    description="Type of position covariance",
    values=(
        FoxgloveEnumValue("UNKNOWN", 0, "Unknown position covariance type"),
        FoxgloveEnumValue("APPROXIMATED", 1, "Position covariance is approximated"),
        FoxgloveEnumValue(
            "DIAGONAL_KNOWN", 2, "Position covariance is per-axis, so put it along the diagonal"
        ),
        FoxgloveEnumValue("KNOWN", 3, "Position covariance of the fix is known"),
    ),
)

LocationFix = FoxgloveMessageSchema(
    name="LocationFix",
    description="A navigation satellite fix for any Global Navigation Satellite System",
    fields=(
        _timestamp(),
        _frame_id(
            "Frame for the sensor. Latitude and longitude readings are at the origin of the frame."
        ),
        FoxgloveField("latitude", FLOAT64, description="Latitude in degrees"),
        FoxgloveField("longitude", FLOAT64, description="Longitude in degrees"),
        FoxgloveField("altitude", FLOAT64, description="Altitude in meters"),
        FoxgloveField(
            "position_covariance",
            FLOAT64,
            array=9,
            description=(
                "Position covariance (m^2) defined relative to a tangential plane "
                "through the reported position. The components are East, North, and "
                "Up (ENU), in row-major order."
            ),
        ),
        FoxgloveField(
            "position_covariance_type",
            EnumFieldType(PositionCovarianceType),
            description=(
                "If `position_covariance` is available, `position_covariance_type` "
                "must be set to indicate the type of covariance."
            ),
        ),
    ),
)

NumericType = FoxgloveEnum(
    name="NumericType",
    description="Numeric type",
    values=(
        FoxgloveEnumValue("UNKNOWN", 0),
        FoxgloveEnumValue("UINT8", 1),
        FoxgloveEnumValue("INT8", 2),
        FoxgloveEnumValue("UINT16", 3),
        FoxgloveEnumValue("INT16", 4),
        FoxgloveEnumValue("UINT32", 5),
        FoxgloveEnumValue("INT32", 6),
        FoxgloveEnumValue("FLOAT32", 7),
        FoxgloveEnumValue("FLOAT64", 8),
    ),
)

PackedElementField = FoxgloveMessageSchema(
    name="PackedElementField",
    description="A field present within each element in a byte array of packed elements.",
    fields=(
        FoxgloveField("name", STRING, description="Name of the field"),
        FoxgloveField(
            "offset",
            UINT32,
            description="Byte offset from start of data buffer",
        ),
        FoxgloveField(
            "type",
            EnumFieldType(NumericType),
            description="Type of data in the field. Integers are stored using little-endian byte order.",
        ),
    ),
)

PointCloud = FoxgloveMessageSchema(
    name="PointCloud",
    description=(
        "A collection of N-dimensional points, which may contain additional fields "
        "with information like normals, intensity, etc."
    ),
    fields=(
        _timestamp("Timestamp of point cloud"),
        _frame_id(),
        FoxgloveField(
            "pose",
            NestedFieldType(Pose),
            description="The origin of the point cloud relative to the frame of reference",
        ),
        FoxgloveField(
            "point_stride",
            UINT32,
            description="Number of bytes between points in the `data`",
        ),
        FoxgloveField(
            "fields",
            NestedFieldType(PackedElementField),
            array=True,
            description="Fields in `data`. At least 2 coordinate fields from `x`, `y`, and `z` are required for each point's position.",
        ),
        FoxgloveField("data", BYTES, description="Point data, interpreted using `fields`"),
    ),
)

ArrowPrimitive = FoxgloveMessageSchema(
    name="ArrowPrimitive",
    description="A primitive representing an arrow",
    fields=(
        FoxgloveField(
            "pose",
            NestedFieldType(Pose),
            description="Position of the arrow's tail and orientation of the arrow.",
        ),
        FoxgloveField("shaft_length", FLOAT64, description="Length of the arrow shaft"),
        FoxgloveField("shaft_diameter", FLOAT64, description="Diameter of the arrow shaft"),
        FoxgloveField("head_length", FLOAT64, description="Length of the arrow head"),
        FoxgloveField("head_diameter", FLOAT64, description="Diameter of the arrow head"),
        FoxgloveField("color", NestedFieldType(Color), description="Color of the arrow"),
    ),
)

FOXGLOVE_SCHEMAS = MappingProxyType(
    {
        schema.name: schema
        for schema in (
            ArrowPrimitive,
            Color,
            CompressedImage,
            FrameTransform,
            KeyValuePair,
            LocationFix,
            Log,
            PackedElementField,
            Point2,
            Point3,
            PointCloud,
            Pose,
            PoseInFrame,
            PosesInFrame,
            Quaternion,
            Vector2,
            Vector3,
        )
    }
)
