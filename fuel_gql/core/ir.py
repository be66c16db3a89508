"""Type descriptors for the GraphQL schema types.

Every record, union and input type of the schema is described once, when
the types module is imported, by a :class:`TypeDescriptor`. The descriptors
are immutable and drive both the query builder and the codec, so nothing in
this package needs to inspect Python classes at runtime.
"""

import keyword
import re
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from .scalars import ScalarRegistry
from .union import TYPENAME, TaggedUnion

# Reserved field carrying the variant name of a union value.
TYPENAME_FIELD = TYPENAME


class FieldKind(Enum):
    """Structural kind of the (unwrapped) type a field points at."""
    SCALAR = "SCALAR"
    ENUM = "ENUM"
    OBJECT = "OBJECT"
    UNION = "UNION"
    INPUT_OBJECT = "INPUT_OBJECT"

    @property
    def is_leaf(self) -> bool:
        return self in (FieldKind.SCALAR, FieldKind.ENUM)


def to_snake_case(name: str) -> str:
    """Convert camelCase or PascalCase to snake_case."""
    s1 = re.sub("(.)([A-Z][a-z]+)", r"\1_\2", name)
    return re.sub("([a-z0-9])([A-Z])", r"\1_\2", s1).lower()


def safe_attr_name(name: str) -> str:
    """Python attribute name for an exposed field name, e.g. ``is`` -> ``is_``."""
    attr = to_snake_case(name)
    if keyword.iskeyword(attr):
        return f"{attr}_"
    return attr


@dataclass(frozen=True)
class FieldDescriptor:
    """A field of a record, input or union type.

    ``type_name`` is the named type after looking through list and non-null
    wrappers; the wrappers themselves are kept in ``is_list`` and
    ``is_optional``.
    """
    name: str
    type_name: str
    kind: FieldKind
    is_list: bool = False
    is_optional: bool = True
    attr: str = ""
    owner: str = ""

    def __post_init__(self):
        if not self.attr:
            object.__setattr__(self, "attr", safe_attr_name(self.name))

    @property
    def is_composite(self) -> bool:
        """True when the field needs a nested selection set."""
        return self.kind in (FieldKind.OBJECT, FieldKind.UNION)


def scalar(name: str, type_name: str, **kwargs) -> FieldDescriptor:
    return FieldDescriptor(name, type_name, FieldKind.SCALAR, **kwargs)


def enum(name: str, type_name: str, **kwargs) -> FieldDescriptor:
    return FieldDescriptor(name, type_name, FieldKind.ENUM, **kwargs)


def record(name: str, type_name: str, **kwargs) -> FieldDescriptor:
    return FieldDescriptor(name, type_name, FieldKind.OBJECT, **kwargs)


def union(name: str, type_name: str, **kwargs) -> FieldDescriptor:
    return FieldDescriptor(name, type_name, FieldKind.UNION, **kwargs)


def input_object(name: str, type_name: str, **kwargs) -> FieldDescriptor:
    return FieldDescriptor(name, type_name, FieldKind.INPUT_OBJECT, **kwargs)


@dataclass(frozen=True)
class TypeDescriptor:
    """Static description of a record, union or input type.

    A union-like type carries the reserved discriminator slot and one
    variant slot per member type; a plain record has no discriminator.
    Field order is the declared order and is what the query builder and
    the codec emit.
    """
    name: str
    fields: tuple[FieldDescriptor, ...] = ()
    discriminator: str | None = None
    is_input: bool = False
    description: str | None = None
    _by_name: dict[str, FieldDescriptor] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self):
        owned = tuple(replace(f, owner=self.name) for f in self.fields)
        object.__setattr__(self, "fields", owned)
        object.__setattr__(self, "_by_name", {f.name: f for f in owned})

    @classmethod
    def union(
        cls,
        name: str,
        variants: tuple[str, ...] | list[str],
        description: str | None = None,
    ) -> "TypeDescriptor":
        """Describe a union whose members are the given record types."""
        slots = tuple(record(v, v) for v in variants)
        return cls(name, slots, discriminator=TYPENAME_FIELD, description=description)

    @property
    def is_union(self) -> bool:
        return self.discriminator is not None

    @property
    def variants(self) -> tuple[str, ...]:
        """Member type names of a union, in declared order."""
        if not self.is_union:
            return ()
        return tuple(f.type_name for f in self.fields)

    def get_field(self, name: str) -> FieldDescriptor | None:
        """Look up a field by exposed name."""
        return self._by_name.get(name)


def type_name_of(obj: Any) -> str:
    """Stable type tag of a type name, descriptor or generated class."""
    if isinstance(obj, str):
        return obj
    if isinstance(obj, TypeDescriptor):
        return obj.name
    if isinstance(obj, type):
        return obj.__name__
    raise TypeError(f"cannot derive a type name from {obj!r}")


class TypeRegistry:
    """The table of all schema types known to the process.

    Built once at import time of the types module and only read afterwards,
    so it can be shared between concurrent callers without locking.
    """

    def __init__(self, scalars: ScalarRegistry | None = None):
        self.scalars = scalars or ScalarRegistry()
        self._descriptors: dict[str, TypeDescriptor] = {}
        self._classes: dict[str, type] = {}
        self._names_by_class: dict[type, str] = {}
        self._enums: dict[str, type[Enum]] = {}

    def register(self, python_type: type, descriptor: TypeDescriptor) -> TypeDescriptor:
        """Bind a generated class to its descriptor."""
        if descriptor.is_union:
            if not (isinstance(python_type, type) and issubclass(python_type, TaggedUnion)):
                raise TypeError(f"{python_type!r} must subclass TaggedUnion to describe union {descriptor.name}")
            declared = tuple(v.__name__ for v in python_type.variants)
            if declared != descriptor.variants:
                raise ValueError(
                    f"union {descriptor.name} declares variants {descriptor.variants}, "
                    f"but {python_type.__name__} has {declared}"
                )
        self._descriptors[descriptor.name] = descriptor
        self._classes[descriptor.name] = python_type
        self._names_by_class[python_type] = descriptor.name
        return descriptor

    def register_enum(self, name: str, enum_type: type[Enum]):
        self._enums[name] = enum_type

    def get(self, name: str) -> TypeDescriptor:
        try:
            return self._descriptors[name]
        except KeyError:
            raise KeyError(f"unknown type {name!r}") from None

    def find(self, name: str) -> TypeDescriptor | None:
        return self._descriptors.get(name)

    def resolve(self, root: Any) -> TypeDescriptor:
        """Accept a type name, a descriptor or a generated class."""
        if isinstance(root, TypeDescriptor):
            return root
        return self.get(type_name_of(root))

    def python_type(self, name: str) -> type:
        return self._classes[name]

    def enum_type(self, name: str) -> type[Enum]:
        try:
            return self._enums[name]
        except KeyError:
            raise KeyError(f"unknown enum type {name!r}") from None

    def descriptor_of(self, value: Any) -> TypeDescriptor | None:
        """Descriptor of a generated class or of one of its instances."""
        cls = value if isinstance(value, type) else type(value)
        name = self._names_by_class.get(cls)
        if name is None:
            return None
        return self._descriptors[name]

    def target(self, field_descriptor: FieldDescriptor) -> TypeDescriptor | None:
        """Descriptor of the element type a composite field points at.

        List and optional wrappers are looked through; leaf fields have no
        target.
        """
        if field_descriptor.kind.is_leaf:
            return None
        return self.get(field_descriptor.type_name)

    def __contains__(self, name: str) -> bool:
        return name in self._descriptors

    def __iter__(self):
        return iter(self._descriptors.values())

    def __len__(self) -> int:
        return len(self._descriptors)


@dataclass
class SchemaIR:
    """Everything the code generator needs to know about a parsed schema.

    Record, union and input types are kept as descriptors in schema order;
    ``inputs`` also holds one ``Query<Field>Params`` type per root query
    field that takes arguments.
    """
    scalars: dict[str, str | None] = field(default_factory=dict)
    enums: dict[str, list[str]] = field(default_factory=dict)
    types: dict[str, TypeDescriptor] = field(default_factory=dict)
    unions: dict[str, TypeDescriptor] = field(default_factory=dict)
    inputs: dict[str, TypeDescriptor] = field(default_factory=dict)
    root_fields: dict[str, str] = field(default_factory=dict)

    def get_type_by_name(self, name: str) -> TypeDescriptor | None:
        """Get a record, union or input type by name."""
        return self.types.get(name) or self.unions.get(name) or self.inputs.get(name)
