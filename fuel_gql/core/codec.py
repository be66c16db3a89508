"""JSON codec for schema values.

Decodes API responses into the generated records, enums and unions, and
encodes them back into the JSON shape the API uses. Union values travel in
their flattened form: ``__typename`` followed by the variant's own fields.

Example:
    from fuel_gql.core.codec import Codec
    from fuel_gql.types import SCHEMA, TransactionStatus

    codec = Codec(SCHEMA)
    status = codec.decode(TransactionStatus, '{"__typename":"SqueezedOutStatus","reason":"gas"}')
    status.typename        # "SqueezedOutStatus"
    codec.encode(status)   # '{"__typename":"SqueezedOutStatus","reason":"gas"}'
"""

import json
from enum import Enum
from typing import Any

from .errors import CodecError, InvalidEnumValueError
from .ir import FieldDescriptor, FieldKind, TypeDescriptor, TypeRegistry
from .structured import StructuredValue, to_structured
from .union import decode_union, encode_union


class Codec:
    """Maps JSON trees onto registered schema types and back."""

    def __init__(self, registry: TypeRegistry):
        self.registry = registry

    def decode(self, root: Any, data: bytes | str) -> Any:
        """Decode JSON text into an instance of ``root``.

        Args:
            root: Type name, descriptor or generated class
            data: JSON document

        Returns:
            A record, a union value, or None for a ``null`` record
        """
        try:
            raw = json.loads(data)
        except json.JSONDecodeError as e:
            raise CodecError(f"invalid JSON for {self.registry.resolve(root).name}: {e}") from e
        return self.decode_value(root, raw)

    def decode_value(self, root: Any, raw: Any) -> Any:
        """Decode an already parsed JSON tree."""
        descriptor = self.registry.resolve(root)
        if descriptor.is_union:
            return decode_union(self.registry, descriptor, raw, self._decode_record)
        return self._decode_record(descriptor, raw)

    def _decode_record(self, descriptor: TypeDescriptor, raw: Any) -> Any:
        if raw is None:
            return None
        if not isinstance(raw, dict):
            raise CodecError(f"expected an object for {descriptor.name}, got {type(raw).__name__}")
        kwargs = {}
        for field in descriptor.fields:
            if field.name in raw:
                kwargs[field.attr] = self._decode_field(field, raw[field.name])
        return self.registry.python_type(descriptor.name)(**kwargs)

    def _decode_field(self, field: FieldDescriptor, raw: Any) -> Any:
        if raw is None:
            return None
        if field.is_list:
            if not isinstance(raw, list):
                raise CodecError(f"expected a list for {field.owner}.{field.name}")
            return [self._decode_element(field, item) for item in raw]
        return self._decode_element(field, raw)

    def _decode_element(self, field: FieldDescriptor, raw: Any) -> Any:
        if raw is None:
            return None
        if field.kind is FieldKind.SCALAR:
            handler = self.registry.scalars.get(field.type_name)
            try:
                return handler.deserialize(raw)
            except (TypeError, ValueError) as e:
                raise CodecError(f"invalid {field.type_name} for {field.owner}.{field.name}: {e}") from e
        if field.kind is FieldKind.ENUM:
            return self._decode_enum(field.type_name, raw)
        return self.decode_value(field.type_name, raw)

    def _decode_enum(self, enum_name: str, raw: Any) -> Enum:
        enum_type = self.registry.enum_type(enum_name)
        try:
            return enum_type(raw)
        except ValueError:
            raise InvalidEnumValueError(enum_name, raw) from None

    def encode(self, value: Any, root: Any = None, indent: int | None = None) -> str:
        """Encode a record or union value as JSON text.

        Compact separators are used unless ``indent`` is given.
        """
        tree = self.encode_value(value, root)
        if indent is None:
            return json.dumps(tree, separators=(",", ":"))
        return json.dumps(tree, indent=indent)

    def encode_value(self, value: Any, root: Any = None) -> Any:
        """Encode into a JSON tree; ``root`` is only needed for None values."""
        descriptor = self._descriptor_for(value, root)
        if descriptor.is_union:
            return encode_union(self.registry, descriptor, value, self._encode_record)
        if value is None:
            return None
        return self._encode_record(descriptor, value)

    def _descriptor_for(self, value: Any, root: Any) -> TypeDescriptor:
        if root is not None:
            return self.registry.resolve(root)
        descriptor = self.registry.descriptor_of(value)
        if descriptor is None:
            raise TypeError(f"{type(value).__name__} is not a registered schema type")
        return descriptor

    def _encode_record(self, descriptor: TypeDescriptor, value: Any) -> dict[str, Any]:
        return {
            field.name: self._encode_field(field, getattr(value, field.attr, None))
            for field in descriptor.fields
        }

    def _encode_field(self, field: FieldDescriptor, value: Any) -> Any:
        if value is None:
            return None
        if field.is_list:
            return [self._encode_element(field, item) for item in value]
        return self._encode_element(field, value)

    def _encode_element(self, field: FieldDescriptor, value: Any) -> Any:
        if value is None:
            return None
        if field.kind is FieldKind.SCALAR:
            return self.registry.scalars.get(field.type_name).serialize(value)
        if field.kind is FieldKind.ENUM:
            return value.value if isinstance(value, Enum) else str(value)
        if field.kind is FieldKind.UNION:
            return encode_union(self.registry, self.registry.get(field.type_name), value, self._encode_record)
        return self._encode_record(self.registry.get(field.type_name), value)

    def to_structured(self, value: Any, type_name: str | None = None) -> StructuredValue:
        """Generic structured form of a value (see :func:`to_structured`)."""
        return to_structured(self.registry, value, type_name)
