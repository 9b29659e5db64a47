"""Show command - print the ROS message definition of a schema."""

from rich.console import Console

from ros_msggen.exceptions import RosMsgGenError
from ros_msggen.exporter import generate_schema_text
from ros_msggen.options import DEFAULT_ROS_VERSION, MergedOption, RosVersionOption
from ros_msggen.schemas import FOXGLOVE_SCHEMAS

console = Console()
err_console = Console(stderr=True)


def show(
    name: str,
    *,
    ros_version: RosVersionOption = DEFAULT_ROS_VERSION,
    merged: MergedOption = False,
) -> None:
    """Print the generated .msg definition of a Foxglove schema.

    Parameters
    ----------
    name
        Schema name, e.g. ``PoseInFrame``.
    ros_version
        ROS version to generate for.
    merged
        Append the definitions of all dependencies.

    Examples
    --------
    ```
    ros-msggen show LocationFix --ros-version ros1 --merged
    ```
    """
    schema = FOXGLOVE_SCHEMAS.get(name)
    if schema is None:
        err_console.print(f"[red]Unknown schema '{name}'[/red]")
        raise SystemExit(1)

    try:
        text = generate_schema_text(schema, ros_version, merged=merged)
    except RosMsgGenError as e:
        err_console.print(f"[red]Error generating {name}: {e}[/red]")
        raise SystemExit(1) from e

    console.out(text, end="", highlight=False)
