from ros_msggen.cli import app

app()
