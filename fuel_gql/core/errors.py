"""Exceptions raised while encoding and decoding schema values.

Transport-level failures live in :mod:`fuel_gql.core.executor`.
"""


class CodecError(ValueError):
    """Base class for payloads that cannot be mapped onto the schema types."""


class UnknownVariantError(CodecError):
    """The discriminator names a variant the union type does not declare."""

    def __init__(self, union_name: str, typename: str):
        self.union_name = union_name
        self.typename = typename
        super().__init__(f'union type {union_name} does not have member "{typename}"')


class UnionInvariantError(CodecError):
    """The discriminator and the variant payload disagree."""


class InvalidEnumValueError(CodecError):
    """A value outside the declared members of an enum type."""

    def __init__(self, enum_name: str, value):
        self.enum_name = enum_name
        self.value = value
        super().__init__(f'invalid value "{value}" for enum type {enum_name}')


class MalformedUnionTypeError(TypeError):
    """A type used as a union has no discriminator slot.

    This is a schema or code generation mistake, not a runtime condition.
    """

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"{type_name} is not a union type because it has no discriminator field")
