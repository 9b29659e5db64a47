"""Discovery of the message types a Foxglove schema depends on."""

from collections.abc import Iterable

from ros_msggen.exceptions import DependencyCycleError, UnknownRosTypeError
from ros_msggen.models import (
    Dependency,
    FoxgloveDependency,
    FoxgloveMessageSchema,
    NestedFieldType,
    RosCatalog,
    RosCatalogDefinition,
    RosDependency,
)


def _lookup(catalog: RosCatalog, name: str, referenced_by: str) -> RosCatalogDefinition:
    definition = catalog.get(name)
    if definition is None:
        raise UnknownRosTypeError(name, referenced_by=referenced_by)
    return definition


def _walk_ros(
    definition: RosCatalogDefinition,
    catalog: RosCatalog,
    path: list[str],
    out: list[Dependency],
) -> None:
    for ros_field in definition.fields:
        if not ros_field.is_complex:
            continue
        if ros_field.type in path:
            raise DependencyCycleError([*path, ros_field.type])
        out.append(RosDependency(ros_field.type))
        nested = _lookup(catalog, ros_field.type, definition.name)
        _walk_ros(nested, catalog, [*path, ros_field.type], out)


def _walk_schema(
    schema: FoxgloveMessageSchema,
    catalog: RosCatalog,
    path: list[str],
    out: list[Dependency],
) -> None:
    for schema_field in schema.fields:
        field_type = schema_field.type
        if not isinstance(field_type, NestedFieldType):
            continue
        nested = field_type.schema
        if nested.ros_equivalent is not None:
            out.append(RosDependency(nested.ros_equivalent))
            definition = _lookup(catalog, nested.ros_equivalent, schema.name)
            _walk_ros(definition, catalog, [*path, nested.ros_equivalent], out)
        else:
            if nested.name in path:
                raise DependencyCycleError([*path, nested.name])
            out.append(FoxgloveDependency(nested))
            _walk_schema(nested, catalog, [*path, nested.name], out)


def get_ros_dependencies(
    definition: RosCatalogDefinition,
    catalog: RosCatalog,
) -> list[Dependency]:
    """Return all catalog types a ROS catalog definition depends on.

    Dependencies are listed depth-first in field order and may repeat.
    """
    out: list[Dependency] = []
    _walk_ros(definition, catalog, [definition.name], out)
    return out


def get_schema_dependencies(
    schema: FoxgloveMessageSchema,
    catalog: RosCatalog,
) -> list[Dependency]:
    """Return all message types a schema depends on, including transitively.

    Nested schemas with a ROS equivalent contribute the ROS type and its own
    dependencies from ``catalog``; other nested schemas contribute themselves
    and their dependencies. The list is in depth-first pre-order and may
    contain repeats; use :func:`unique_dependencies` to drop them.

    Raises:
        UnknownRosTypeError: A referenced ROS type is missing from ``catalog``
        DependencyCycleError: A type (indirectly) depends on itself
    """
    out: list[Dependency] = []
    _walk_schema(schema, catalog, [schema.name], out)
    return out


def unique_dependencies(dependencies: Iterable[Dependency]) -> list[Dependency]:
    """Drop repeated dependencies, keeping the first occurrence of each."""
    unique: dict[tuple[str, str], Dependency] = {}
    for dep in dependencies:
        unique.setdefault(dep.key, dep)
    return list(unique.values())
