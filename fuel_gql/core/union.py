"""Tagged union values and their flattened wire form.

A union value holds a discriminator (the variant type name, or "" when the
value is absent) and the payload of exactly that variant. On the wire the
payload fields are flattened into one object next to ``__typename``.
"""

from typing import TYPE_CHECKING, Any, Callable, ClassVar

from .errors import CodecError, MalformedUnionTypeError, UnionInvariantError, UnknownVariantError

if TYPE_CHECKING:
    from .ir import TypeDescriptor, TypeRegistry

TYPENAME = "__typename"


class TaggedUnion:
    """Base class for the generated union types.

    Subclasses list their member record classes in ``variants``:

        class Consensus(TaggedUnion):
            variants = (Genesis, PoAConsensus)

        Consensus(PoAConsensus(signature=b"..."))   # typename "PoAConsensus"
        Consensus()                                 # absent value
    """

    variants: ClassVar[tuple[type, ...]] = ()

    def __init__(self, value: Any = None, typename: str | None = None):
        if typename is None:
            typename = type(value).__name__ if value is not None else ""
        if typename:
            variant_type = self.variant(typename)
            if value is None:
                raise UnionInvariantError(
                    f"{type(self).__name__} names variant {typename} but has no payload"
                )
            if not isinstance(value, variant_type):
                raise UnionInvariantError(
                    f"{type(self).__name__} names variant {typename} "
                    f"but holds a {type(value).__name__}"
                )
        elif value is not None:
            raise UnionInvariantError(f"{type(self).__name__} has a payload but no discriminator")
        self.typename = typename
        self.value = value

    @classmethod
    def variant(cls, typename: str) -> type:
        """Member class for a discriminator value."""
        for variant_type in cls.variants:
            if variant_type.__name__ == typename:
                return variant_type
        raise UnknownVariantError(cls.__name__, typename)

    @classmethod
    def absent(cls) -> "TaggedUnion":
        return cls()

    def get(self, variant_type: type) -> Any:
        """Payload if this value holds the given variant, else None."""
        if self.typename == variant_type.__name__:
            return self.value
        return None

    def __bool__(self) -> bool:
        return bool(self.typename)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.typename == other.typename and self.value == other.value

    def __hash__(self):
        return hash((type(self).__name__, self.typename))

    def __repr__(self) -> str:
        if not self.typename:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({self.value!r})"


def _check_union(descriptor: "TypeDescriptor"):
    if not descriptor.is_union:
        raise MalformedUnionTypeError(descriptor.name)


def decode_union(
    registry: "TypeRegistry",
    descriptor: "TypeDescriptor",
    raw: dict[str, Any] | None,
    decode_record: Callable[["TypeDescriptor", dict[str, Any]], Any],
) -> TaggedUnion:
    """Decode a flattened union object.

    ``null`` and an empty discriminator both give the absent value.

    Raises:
        MalformedUnionTypeError: ``descriptor`` is not a union
        UnknownVariantError: the discriminator is not a declared member
    """
    _check_union(descriptor)
    union_type = registry.python_type(descriptor.name)
    if raw is None:
        return union_type.absent()
    if not isinstance(raw, dict):
        raise CodecError(f"expected an object for {descriptor.name}, got {type(raw).__name__}")
    typename = raw.get(TYPENAME) or ""
    if not typename:
        return union_type.absent()
    slot = descriptor.get_field(typename)
    if slot is None:
        raise UnknownVariantError(descriptor.name, typename)
    payload = {k: v for k, v in raw.items() if k != TYPENAME}
    value = decode_record(registry.get(slot.type_name), payload)
    return union_type(value, typename)


def encode_union(
    registry: "TypeRegistry",
    descriptor: "TypeDescriptor",
    value: TaggedUnion | None,
    encode_record: Callable[["TypeDescriptor", Any], dict[str, Any]],
) -> dict[str, Any] | None:
    """Flatten a union value into one object, discriminator first.

    Returns None for the absent value.

    Raises:
        MalformedUnionTypeError: ``descriptor`` is not a union
        UnknownVariantError: the discriminator is not a declared member
        UnionInvariantError: the discriminator and the payload disagree
    """
    _check_union(descriptor)
    if value is None:
        return None
    if not value.typename:
        if value.value is not None:
            raise UnionInvariantError(f"{descriptor.name} has a payload but no discriminator")
        return None
    slot = descriptor.get_field(value.typename)
    if slot is None:
        raise UnknownVariantError(descriptor.name, value.typename)
    if value.value is None:
        raise UnionInvariantError(
            f"{descriptor.name} names variant {value.typename} but has no payload"
        )
    flattened = {TYPENAME: value.typename}
    flattened.update(encode_record(registry.get(slot.type_name), value.value))
    return flattened
