"""Main CLI entry point for ros-msggen using Cyclopts."""

from cyclopts import App

from ros_msggen.cmd import generate_cmd, list_cmd, show_cmd

app = App(
    name="ros-msggen",
    help="Generate ROS 1 and ROS 2 .msg definitions from Foxglove schemas.",
    help_format="rich",
)

app.command(name="list")(list_cmd.list_schemas)
app.command(name="show")(show_cmd.show)
app.command(name="generate")(generate_cmd.generate)


if __name__ == "__main__":
    app()
