"""Query builder for the Fuel GraphQL API.

Synthesizes selection sets by walking the type descriptors and applying
suppression rules, encodes query arguments, and assembles complete query
text. The output is deterministic: fields appear in declared order and
union fragments in declared variant order.

Example:
    from fuel_gql.core.query_builder import Layout, QueryBuilder
    from fuel_gql.core.suppress import suppress_type
    from fuel_gql.types import SCHEMA, Block, Transaction

    builder = QueryBuilder(SCHEMA)
    builder.selection(Block, suppress_type(Transaction))
    # 'id header { id daHeight ... } consensus { __typename ... } '

    QueryBuilder(SCHEMA, Layout.PRETTY).selection(Block, suppress_type(Transaction))
    # 'id\\nheader {\\n  id\\n  daHeight\\n...'
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence

from .ir import TYPENAME_FIELD, FieldKind, TypeDescriptor, TypeRegistry
from .suppress import NEVER, SuppressionRule


@dataclass(frozen=True)
class Layout:
    """Whitespace used between tokens.

    Both layouts produce the same fields and fragments; only the indentation
    unit and the token separator differ.
    """
    indent: str
    eol: str

    @classmethod
    def pretty(cls, unit: str = "  ") -> "Layout":
        """One token per line, nested levels indented by ``unit``."""
        return cls(indent=unit, eol="\n")


Layout.COMPACT = Layout(indent="", eol=" ")
Layout.PRETTY = Layout.pretty()


class QueryBuilder:
    """Builds selection sets, arguments and queries from type descriptors."""

    def __init__(
        self,
        registry: TypeRegistry,
        layout: Layout = Layout.COMPACT,
        prefix: str = "",
    ):
        """Initialize the builder.

        Args:
            registry: The type table to walk
            layout: Compact (single line) or pretty (indented) output
            prefix: Text put in front of every emitted line
        """
        self.registry = registry
        self.layout = layout
        self.prefix = prefix

    def selection(self, root: Any, suppress: SuppressionRule = NEVER) -> str:
        """Selection set for ``root`` (a type name, descriptor or generated class).

        There is no cycle detection: a self-referencing type graph must be cut
        with ``suppress_type`` or the walk does not terminate.
        """
        lines: list[str] = []
        self._select(self.registry.resolve(root), self.prefix, suppress, lines)
        return "".join(lines)

    def _select(
        self,
        descriptor: TypeDescriptor,
        prefix: str,
        suppress: SuppressionRule,
        out: list[str],
    ):
        eol = self.layout.eol
        nested = prefix + self.layout.indent
        if descriptor.is_union:
            out.append(f"{prefix}{TYPENAME_FIELD}{eol}")
            for slot in descriptor.fields:
                if suppress(descriptor.name, slot):
                    continue
                out.append(f"{prefix}... on {slot.type_name} {{{eol}")
                self._select(self.registry.get(slot.type_name), nested, suppress, out)
                out.append(f"{prefix}}}{eol}")
            return

        for field in descriptor.fields:
            if suppress(descriptor.name, field):
                continue
            if field.is_composite:
                out.append(f"{prefix}{field.name} {{{eol}")
                self._select(self.registry.target(field), nested, suppress, out)
                out.append(f"{prefix}}}{eol}")
            else:
                out.append(f"{prefix}{field.name}{eol}")

    def params(self, values: Any) -> str:
        """Argument list for a generated parameter record.

        Absent (None) fields are skipped, embedded input objects are wrapped
        in braces, enums are bare tokens, and scalars are quoted unless their
        handler says otherwise.
        """
        descriptor = self.registry.descriptor_of(values)
        if descriptor is None:
            raise TypeError(f"{type(values).__name__} is not a registered parameter type")
        lines: list[str] = []
        self._params(descriptor, values, self.prefix, lines)
        return "".join(lines)

    def _params(self, descriptor: TypeDescriptor, values: Any, prefix: str, out: list[str]):
        eol = self.layout.eol
        for field in descriptor.fields:
            value = getattr(values, field.attr, None)
            if value is None:
                continue
            if field.kind is FieldKind.INPUT_OBJECT:
                out.append(f"{prefix}{field.name}: {{{eol}")
                self._params(self.registry.get(field.type_name), value, prefix + self.layout.indent, out)
                out.append(f"{prefix}}}{eol}")
            else:
                out.append(f"{prefix}{field.name}: {self._render_value(field.kind, field.type_name, value)}{eol}")

    def _render_value(self, kind: FieldKind, type_name: str, value: Any) -> str:
        if kind is FieldKind.ENUM:
            return value.value if isinstance(value, Enum) else str(value)
        if kind is not FieldKind.SCALAR:
            raise TypeError(f"cannot render a {kind.value} value of type {type_name} as an argument")
        handler = self.registry.scalars.get(type_name)
        text = handler.render(value)
        if handler.quoted:
            return json.dumps(text)
        return text

    def query(
        self,
        root_field: str,
        root: Any,
        params: Any = None,
        suppress: SuppressionRule = NEVER,
    ) -> str:
        """Complete query text: ``{ <root_field>(<params>) { <selection>} }``."""
        return self._document([(root_field, params)], root, suppress)

    def batch(
        self,
        root_field: str,
        root: Any,
        params_list: Sequence[Any],
        suppress: SuppressionRule = NEVER,
        alias_prefix: str = "b",
    ) -> str:
        """One query requesting ``root_field`` once per parameter record.

        Each occurrence is aliased ``<alias_prefix><index>`` so the response
        keeps the results apart.
        """
        entries = [
            (f"{alias_prefix}{i}: {root_field}", params)
            for i, params in enumerate(params_list)
        ]
        return self._document(entries, root, suppress)

    def _document(self, entries: list[tuple[str, Any]], root: Any, suppress: SuppressionRule) -> str:
        eol = self.layout.eol
        outer = self.prefix + self.layout.indent
        body = QueryBuilder(self.registry, self.layout, outer + self.layout.indent)
        selection = body.selection(root, suppress)
        parts = ["{", eol]
        for head, params in entries:
            parts.append(f"{outer}{head}{self._head_args(params)} {{{eol}")
            parts.append(selection)
            parts.append(f"{outer}}}{eol}")
        parts.append("}")
        return "".join(parts)

    def _head_args(self, params: Any) -> str:
        if params is None:
            return ""
        args = QueryBuilder(self.registry, Layout.COMPACT).params(params).strip()
        return f"({args})" if args else ""
