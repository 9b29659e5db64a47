"""CLI parameter types shared by ros-msggen commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from cyclopts import Group, Parameter

from ros_msggen.models import RosVersion

DEFAULT_ROS_VERSION = RosVersion.ROS2

OUTPUT_OPTIONS_GROUP = Group("Output Options")

RosVersionOption = Annotated[
    RosVersion,
    Parameter(
        name=["-r", "--ros-version"],
    ),
]

RosVersionsOption = Annotated[
    list[RosVersion] | None,
    Parameter(
        name=["-r", "--ros-version"],
    ),
]

MergedOption = Annotated[
    bool,
    Parameter(
        name=["-m", "--merged"],
        group=OUTPUT_OPTIONS_GROUP,
    ),
]

ForceOverwriteOption = Annotated[
    bool,
    Parameter(
        name=["-f", "--force"],
        group=OUTPUT_OPTIONS_GROUP,
    ),
]

VerboseOption = Annotated[
    bool,
    Parameter(
        name=["-v", "--verbose"],
    ),
]


def confirm_output_overwrite(output_dir: Path, force: bool) -> None:
    """Confirm overwrite if output_dir has files in it and force=False.

    Raises:
        SystemExit: If user declines to overwrite
    """
    if output_dir.exists() and any(output_dir.iterdir()) and not force:
        response = input(f"Output directory '{output_dir}' is not empty. Overwrite? [y/N]: ")
        if response.lower() not in ("y", "yes"):
            print("Aborted.")  # noqa: T201
            raise SystemExit(1)
