"""List command - show the bundled Foxglove schemas."""

from rich.console import Console
from rich.table import Table

from ros_msggen.schemas import FOXGLOVE_SCHEMAS

console = Console()


def list_schemas() -> None:
    """List the Foxglove schemas that ros-msggen can generate."""
    table = Table()
    table.add_column("Schema", style="bold white")
    table.add_column("ROS equivalent", style="cyan")
    table.add_column("Fields", style="green", justify="right")

    for schema in FOXGLOVE_SCHEMAS.values():
        table.add_row(schema.name, schema.ros_equivalent or "-", str(len(schema.fields)))

    console.print(table)
