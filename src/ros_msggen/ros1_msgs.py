"""Common ROS 1 message definitions that Foxglove schemas can map onto."""

from types import MappingProxyType

from ros_msggen.models import RosCatalogDefinition, RosField


def _msg(name: str, *fields: RosField) -> RosCatalogDefinition:
    return RosCatalogDefinition(name=name, fields=fields)


def _complex(type_name: str, name: str) -> RosField:
    return RosField(name=name, type=type_name, is_complex=True)


_DEFINITIONS = [
    _msg(
        "std_msgs/Header",
        RosField("seq", "uint32"),
        RosField("stamp", "time"),
        RosField("frame_id", "string"),
    ),
    _msg(
        "std_msgs/ColorRGBA",
        RosField("r", "float32"),
        RosField("g", "float32"),
        RosField("b", "float32"),
        RosField("a", "float32"),
    ),
    _msg(
        "geometry_msgs/Point",
        RosField("x", "float64"),
        RosField("y", "float64"),
        RosField("z", "float64"),
    ),
    _msg(
        "geometry_msgs/Point32",
        RosField("x", "float32"),
        RosField("y", "float32"),
        RosField("z", "float32"),
    ),
    _msg(
        "geometry_msgs/Vector3",
        RosField("x", "float64"),
        RosField("y", "float64"),
        RosField("z", "float64"),
    ),
    _msg(
        "geometry_msgs/Quaternion",
        RosField("x", "float64"),
        RosField("y", "float64"),
        RosField("z", "float64"),
        RosField("w", "float64"),
    ),
    _msg(
        "geometry_msgs/Pose",
        _complex("geometry_msgs/Point", "position"),
        _complex("geometry_msgs/Quaternion", "orientation"),
    ),
    _msg(
        "geometry_msgs/PoseStamped",
        _complex("std_msgs/Header", "header"),
        _complex("geometry_msgs/Pose", "pose"),
    ),
    _msg(
        "geometry_msgs/PoseWithCovariance",
        _complex("geometry_msgs/Pose", "pose"),
        RosField("covariance", "float64", is_array=True, array_length=36),
    ),
    _msg(
        "geometry_msgs/Transform",
        _complex("geometry_msgs/Vector3", "translation"),
        _complex("geometry_msgs/Quaternion", "rotation"),
    ),
    _msg(
        "geometry_msgs/Twist",
        _complex("geometry_msgs/Vector3", "linear"),
        _complex("geometry_msgs/Vector3", "angular"),
    ),
]

ROS1_MSGS = MappingProxyType({definition.name: definition for definition in _DEFINITIONS})
