"""Writing generated ROS message definitions to .msg files."""

import logging
from collections.abc import Iterable
from pathlib import Path

from ros_msggen.builder import generate_ros_msg_definition
from ros_msggen.bundle import generate_ros_msg_merged_schema
from ros_msggen.models import FoxgloveMessageSchema, RosCatalog, RosVersion
from ros_msggen.render import generate_ros_msg
from ros_msggen.ros1_msgs import ROS1_MSGS

logger = logging.getLogger(__name__)


def generate_schema_text(
    schema: FoxgloveMessageSchema,
    ros_version: RosVersion,
    *,
    merged: bool = False,
    catalog: RosCatalog = ROS1_MSGS,
) -> str:
    """Generate .msg text for a schema, optionally with all its dependencies."""
    if merged:
        return generate_ros_msg_merged_schema(schema, ros_version, catalog)
    return generate_ros_msg(generate_ros_msg_definition(schema, ros_version), ros_version)


def export_schemas(
    schemas: Iterable[FoxgloveMessageSchema],
    output_dir: Path,
    ros_version: RosVersion,
    *,
    merged: bool = False,
    catalog: RosCatalog = ROS1_MSGS,
) -> list[Path]:
    """Write one ``<Name>.msg`` file per schema into ``output_dir``.

    Schemas with a ROS equivalent are skipped since they are represented by
    the existing ROS message type. All files are generated before any is
    written, so an invalid schema leaves ``output_dir`` untouched.

    Args:
        schemas: Schemas to export
        output_dir: Directory to write to (created if missing)
        ros_version: Target ROS version
        merged: Append all dependencies to each file
        catalog: Predefined ROS message types that schemas may map onto

    Returns:
        Paths of the written files, in schema order
    """
    outputs: list[tuple[Path, str]] = []
    for schema in schemas:
        if schema.ros_equivalent is not None:
            logger.debug(f"Skipping {schema.name}, using {schema.ros_equivalent}")
            continue
        text = generate_schema_text(schema, ros_version, merged=merged, catalog=catalog)
        outputs.append((output_dir / f"{schema.name}.msg", text))

    output_dir.mkdir(parents=True, exist_ok=True)
    for path, text in outputs:
        logger.debug(f"Writing {path}")
        path.write_text(text, encoding="utf-8")

    logger.info(f"Wrote {len(outputs)} ROS {int(ros_version)} message definitions to {output_dir}")
    return [path for path, _ in outputs]
