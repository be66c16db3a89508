"""Core modules: type descriptors, query synthesis, codec and transport."""

from .codec import Codec
from .errors import (
    CodecError,
    InvalidEnumValueError,
    MalformedUnionTypeError,
    UnionInvariantError,
    UnknownVariantError,
)
from .executor import (
    GraphQLError,
    GraphQLExecutor,
    QueryError,
    QueryErrorLocation,
    QueryResponse,
)
from .generator import CodeGenerator
from .ir import (
    FieldDescriptor,
    FieldKind,
    SchemaIR,
    TypeDescriptor,
    TypeRegistry,
)
from .parser import SchemaParser
from .query_builder import Layout, QueryBuilder
from .scalars import ScalarHandler, ScalarRegistry
from .structured import StructuredValue, to_structured
from .suppress import NEVER, SuppressionRule, keep_only, merge, suppress_field, suppress_type
from .union import TaggedUnion

__all__ = [
    # Type descriptors
    "FieldDescriptor",
    "FieldKind",
    "SchemaIR",
    "TypeDescriptor",
    "TypeRegistry",
    "TaggedUnion",
    # Scalars
    "ScalarHandler",
    "ScalarRegistry",
    # Suppression
    "NEVER",
    "SuppressionRule",
    "keep_only",
    "merge",
    "suppress_field",
    "suppress_type",
    # Query Builder
    "Layout",
    "QueryBuilder",
    # Codec
    "Codec",
    "StructuredValue",
    "to_structured",
    # Errors
    "CodecError",
    "InvalidEnumValueError",
    "MalformedUnionTypeError",
    "UnionInvariantError",
    "UnknownVariantError",
    # Parser / Generator
    "SchemaParser",
    "CodeGenerator",
    # Executor
    "GraphQLError",
    "GraphQLExecutor",
    "QueryError",
    "QueryErrorLocation",
    "QueryResponse",
]
