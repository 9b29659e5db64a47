"""Rendering of ROS message definitions as .msg text."""

from ros_msggen.builder import time_duration_to_ros
from ros_msggen.exceptions import InvalidConstantError
from ros_msggen.models import GENERATED_BY_COMMENT, FoxglovePrimitive, RosMsgDefinition, RosVersion

_TIME_TYPES = {FoxglovePrimitive.TIME.value, FoxglovePrimitive.DURATION.value}


def _comment_lines(text: str) -> list[str]:
    return [f"# {line}" for line in text.split("\n")]


def generate_ros_msg(definition: RosMsgDefinition, ros_version: RosVersion) -> str:
    """Render a message definition as .msg file contents.

    A blank line separates every field that carries a comment from its
    neighbours. time and duration are written as the builtin type of the
    requested ROS version.

    Raises:
        InvalidConstantError: A constant field has no value text
    """
    lines = [f"# {definition.ros_full_interface_name}"]
    if definition.description is not None:
        lines.extend(_comment_lines(definition.description))
    lines.append("")
    lines.append(GENERATED_BY_COMMENT)

    # The header comment counts as a comment preceding the first field
    prev_field_had_comment = True
    for ros_field in definition.fields:
        if prev_field_had_comment or ros_field.description is not None:
            lines.append("")
        prev_field_had_comment = False
        if ros_field.description is not None:
            lines.extend(_comment_lines(ros_field.description.strip()))
            prev_field_had_comment = True

        constant = ""
        if ros_field.is_constant:
            if ros_field.value_text is None:
                raise InvalidConstantError(ros_field.name)
            constant = f"={ros_field.value_text}"

        field_type = ros_field.type
        if field_type in _TIME_TYPES:
            field_type = time_duration_to_ros(field_type, ros_version)
        array = ""
        if ros_field.is_array:
            array = f"[{ros_field.array_length if ros_field.array_length is not None else ''}]"
        lines.append(f"{field_type}{array} {ros_field.name}{constant}")

    return "\n".join(lines) + "\n"
