"""Generate command - write .msg files for all bundled schemas."""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from ros_msggen.exceptions import RosMsgGenError
from ros_msggen.exporter import export_schemas
from ros_msggen.models import RosVersion
from ros_msggen.options import (
    ForceOverwriteOption,
    MergedOption,
    RosVersionsOption,
    VerboseOption,
    confirm_output_overwrite,
)
from ros_msggen.schemas import FOXGLOVE_SCHEMAS

console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
        force=True,
    )


def generate(
    output_dir: Path,
    *,
    ros_version: RosVersionsOption = None,
    merged: MergedOption = False,
    force: ForceOverwriteOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Generate ROS .msg files for all bundled Foxglove schemas.

    With several ROS versions, each version is written to its own
    ``ros1``/``ros2`` subdirectory of the output directory.

    Parameters
    ----------
    output_dir
        Directory to write .msg files to.
    ros_version
        ROS versions to generate for (default: both).
    merged
        Append the definitions of all dependencies to each file.
    force
        Overwrite a non-empty output directory without confirmation.
    verbose
        Enable debug logging.

    Examples
    --------
    ```
    ros-msggen generate out/ --ros-version ros2
    ```
    """
    _setup_logging(verbose)
    versions = ros_version or [RosVersion.ROS1, RosVersion.ROS2]

    confirm_output_overwrite(output_dir, force)

    written: list[Path] = []
    for version in versions:
        target = output_dir / f"ros{int(version)}" if len(versions) > 1 else output_dir
        try:
            written.extend(
                export_schemas(FOXGLOVE_SCHEMAS.values(), target, version, merged=merged)
            )
        except RosMsgGenError as e:
            console.print(f"[red]Error generating ROS {int(version)} definitions: {e}[/red]")
            raise SystemExit(1) from e

    console.print(f"[green]✓ Generated {len(written)} message definitions[/green]")
