class RosMsgGenError(Exception):
    pass


class InvalidConstantError(RosMsgGenError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Constant {name} has no valueText")


class EnumValueRangeError(RosMsgGenError):
    def __init__(self, name: str, value: object) -> None:
        super().__init__(
            f"Only uint8 enums are currently supported; value {name}={value} is out of range"
        )


class EnumNameCollisionError(RosMsgGenError):
    def __init__(self, name: str, schema_name: str) -> None:
        super().__init__(
            f"Enum value {name} occurs in more than one enum referenced by {schema_name}, "
            "this is not supported in ROS msg files"
        )


class ArrayOfBytesError(RosMsgGenError):
    def __init__(self, field_name: str) -> None:
        super().__init__(f"Array of bytes is not supported in ROS msg (field '{field_name}')")


class UnknownRosTypeError(RosMsgGenError):
    def __init__(self, name: str, *, referenced_by: str | None = None) -> None:
        if referenced_by is not None:
            msg = f"ROS message type {name} referenced by {referenced_by} is not in the catalog"
        else:
            msg = f"ROS message type {name} is not in the catalog"
        super().__init__(msg)


class DependencyCycleError(RosMsgGenError):
    def __init__(self, path: list[str]) -> None:
        super().__init__(f"cyclic message dependency: {' -> '.join(path)}")
