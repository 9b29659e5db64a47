"""Merged (multi-definition) ROS schemas."""

import logging

from ros_msggen.builder import generate_ros_msg_definition
from ros_msggen.dependencies import get_schema_dependencies, unique_dependencies
from ros_msggen.models import (
    MSG_DELIMITER,
    FoxgloveDependency,
    FoxgloveMessageSchema,
    RosCatalog,
    RosCatalogDefinition,
    RosDependency,
    RosMsgDefinition,
    RosVersion,
)
from ros_msggen.render import generate_ros_msg
from ros_msggen.ros1_msgs import ROS1_MSGS

logger = logging.getLogger(__name__)


def catalog_msg_definition(definition: RosCatalogDefinition) -> RosMsgDefinition:
    """Wrap a catalog entry so it can be rendered; its fields are used as-is."""
    return RosMsgDefinition(
        original_name=definition.name,
        ros_msg_interface_name=definition.name,
        ros_full_interface_name=definition.name,
        fields=list(definition.fields),
    )


def generate_ros_msg_merged_schema(
    schema: FoxgloveMessageSchema,
    ros_version: RosVersion,
    catalog: RosCatalog = ROS1_MSGS,
) -> str:
    """Generate the schema text followed by every type it depends on.

    Each dependency is appended after a line of 80 ``=`` and a
    ``MSG: <name>`` line, the format ROS uses for full message definitions
    in connection headers and MCAP schemas.

    Args:
        schema: The root schema
        ros_version: Target ROS version
        catalog: Predefined ROS message types that schemas may map onto

    Returns:
        The merged message definition text
    """
    dependencies = unique_dependencies(get_schema_dependencies(schema, catalog))
    logger.debug(f"{schema.name} has {len(dependencies)} dependencies")

    result = generate_ros_msg(generate_ros_msg_definition(schema, ros_version), ros_version)
    for dep in dependencies:
        if isinstance(dep, RosDependency):
            name = dep.name
            source = generate_ros_msg(catalog_msg_definition(catalog[dep.name]), ros_version)
        elif isinstance(dep, FoxgloveDependency):
            definition = generate_ros_msg_definition(dep.schema, ros_version)
            name = definition.ros_msg_interface_name
            source = generate_ros_msg(definition, ros_version)
        else:
            raise TypeError(f"Unsupported dependency {type(dep).__name__}")
        result += f"{MSG_DELIMITER}\nMSG: {name}\n{source}"
    return result
