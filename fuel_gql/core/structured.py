"""Conversion of typed values into generic structured values.

Structured values are plain JSON-like trees meant for dynamic consumers.
Numbers never appear in them: integers and timestamps are rendered as
base-10 strings so that 64-bit values survive the trip.
"""

from enum import Enum
from typing import TYPE_CHECKING, Any, Union

from .ir import FieldDescriptor, FieldKind
from .union import TYPENAME, TaggedUnion

if TYPE_CHECKING:
    from .ir import TypeRegistry

StructuredValue = Union[None, bool, str, list["StructuredValue"], dict[str, "StructuredValue"]]


def to_structured(registry: "TypeRegistry", value: Any, type_name: str | None = None) -> StructuredValue:
    """Convert a record, union, list, enum or scalar into a structured value.

    Record fields whose value converts to None are omitted, except list
    fields, which always appear (an absent list becomes ``[]``). Union
    values become the map of their variant with ``__typename`` put first.

    Args:
        registry: Type table used to find descriptors and scalar handlers
        value: The value to convert
        type_name: Scalar type name; required when ``value`` is a bare scalar

    Raises:
        TypeError: ``value`` is a scalar and no scalar type name was given
        LookupError: ``type_name`` has no registered scalar handler
    """
    if value is None:
        return None
    if isinstance(value, list):
        return [to_structured(registry, item, type_name) for item in value]
    if isinstance(value, TaggedUnion):
        return _union(registry, value)
    if isinstance(value, Enum):
        return value.value
    descriptor = registry.descriptor_of(value)
    if descriptor is not None:
        return _record(registry, value)
    if type_name is None:
        raise TypeError(f"cannot convert {type(value).__name__} without a scalar type name")
    return registry.scalars.get(type_name).to_structured(value)


def _union(registry: "TypeRegistry", value: TaggedUnion) -> StructuredValue:
    if not value.typename:
        return None
    payload = _record(registry, value.value)
    structured = {TYPENAME: value.typename}
    structured.update(payload)
    return structured


def _record(registry: "TypeRegistry", value: Any) -> dict[str, StructuredValue]:
    descriptor = registry.descriptor_of(value)
    if descriptor is None:
        raise TypeError(f"{type(value).__name__} is not a registered schema type")
    result: dict[str, StructuredValue] = {}
    for field in descriptor.fields:
        converted = _field(registry, field, getattr(value, field.attr, None))
        if converted is not None:
            result[field.name] = converted
    return result


def _field(registry: "TypeRegistry", field: FieldDescriptor, value: Any) -> StructuredValue:
    if field.is_list:
        return [_element(registry, field, item) for item in value or []]
    return _element(registry, field, value)


def _element(registry: "TypeRegistry", field: FieldDescriptor, value: Any) -> StructuredValue:
    if value is None:
        return None
    if field.kind is FieldKind.SCALAR:
        return registry.scalars.get(field.type_name).to_structured(value)
    return to_structured(registry, value)
