"""GraphQL schema parser using graphql-core.

Parses .graphqls files and produces a SchemaIR.
"""

import logging
import os
from typing import Any

from graphql import (
    EnumTypeDefinitionNode,
    GraphQLSyntaxError,
    InputObjectTypeDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    ScalarTypeDefinitionNode,
    TypeNode,
    UnionTypeDefinitionNode,
    parse,
)

from .ir import FieldDescriptor, FieldKind, SchemaIR, TypeDescriptor

logger = logging.getLogger(__name__)

BUILTIN_SCALARS = ("String", "Int", "Float", "Boolean", "ID")


def _description(node) -> str | None:
    return node.description.value if node.description else None


def _pascal_case(name: str) -> str:
    return name[:1].upper() + name[1:]


class SchemaParser:
    """Parses GraphQL schema files into IR.

    Definitions are collected first and resolved afterwards, so a field may
    refer to a type defined later or in another file.
    """

    def __init__(self, schema_path: str):
        """Initialize a parser with a path to a schema file or directory."""
        self.schema_path = schema_path
        self.ir = SchemaIR()
        self.current_file = ""
        self._kinds: dict[str, FieldKind] = {name: FieldKind.SCALAR for name in BUILTIN_SCALARS}
        self._objects: list[ObjectTypeDefinitionNode] = []
        self._input_nodes: list[InputObjectTypeDefinitionNode] = []
        self._union_nodes: list[UnionTypeDefinitionNode] = []
        self._root_nodes: list[ObjectTypeDefinitionNode | ObjectTypeExtensionNode] = []

    def parse_all(self) -> SchemaIR:
        """Parse all schema files and return the complete IR."""
        schema_files = self._collect_schema_files()
        if not schema_files:
            raise FileNotFoundError(f"no .graphqls files found at {self.schema_path}")

        for file_path in schema_files:
            self.current_file = os.path.basename(file_path)
            with open(file_path) as f:
                content = f.read()
            self._parse_source(content)

        self._resolve()
        return self.ir

    def _parse_source(self, content: str):
        """Collect the definitions of one schema document."""
        try:
            ast = parse(content)
        except GraphQLSyntaxError:
            logger.error("error parsing %s", self.current_file or "<string>")
            raise
        logger.debug("parsed %d definitions from %s", len(ast.definitions), self.current_file or "<string>")
        self._process_ast(ast)

    def _collect_schema_files(self) -> list[str]:
        """Collect all .graphqls files from path."""
        files = []
        if os.path.isfile(self.schema_path):
            if self.schema_path.endswith(".graphqls"):
                files.append(self.schema_path)
        else:
            for root, _, filenames in os.walk(self.schema_path):
                for filename in filenames:
                    if filename.endswith(".graphqls"):
                        files.append(os.path.join(root, filename))
        return sorted(files)

    def _process_ast(self, ast):
        for definition in ast.definitions:
            if isinstance(definition, ScalarTypeDefinitionNode):
                name = definition.name.value
                self.ir.scalars[name] = _description(definition)
                self._kinds[name] = FieldKind.SCALAR
            elif isinstance(definition, EnumTypeDefinitionNode):
                name = definition.name.value
                self.ir.enums[name] = [v.name.value for v in definition.values]
                self._kinds[name] = FieldKind.ENUM
            elif isinstance(definition, UnionTypeDefinitionNode):
                self._union_nodes.append(definition)
                self._kinds[definition.name.value] = FieldKind.UNION
            elif isinstance(definition, (ObjectTypeDefinitionNode, ObjectTypeExtensionNode)):
                if definition.name.value == "Query":
                    self._root_nodes.append(definition)
                elif isinstance(definition, ObjectTypeDefinitionNode):
                    self._objects.append(definition)
                    self._kinds[definition.name.value] = FieldKind.OBJECT
            elif isinstance(definition, InputObjectTypeDefinitionNode):
                self._input_nodes.append(definition)
                self._kinds[definition.name.value] = FieldKind.INPUT_OBJECT

    def _resolve(self):
        for node in self._objects:
            name = node.name.value
            self.ir.types[name] = TypeDescriptor(
                name,
                self._process_fields(node.fields),
                description=_description(node),
            )
        for node in self._union_nodes:
            name = node.name.value
            members = [t.name.value for t in node.types]
            for member in members:
                if self._kinds.get(member) is not FieldKind.OBJECT:
                    raise ValueError(f"union {name} member {member} is not an object type")
            self.ir.unions[name] = TypeDescriptor.union(name, members, description=_description(node))
        for node in self._input_nodes:
            name = node.name.value
            self.ir.inputs[name] = TypeDescriptor(
                name,
                self._process_fields(node.fields),
                is_input=True,
                description=_description(node),
            )
        for node in self._root_nodes:
            self._process_root_fields(node)

    def _process_root_fields(self, node: ObjectTypeDefinitionNode | ObjectTypeExtensionNode):
        """Record each root query field and build a parameter type for its arguments."""
        for field_node in node.fields:
            field_name = field_node.name.value
            self.ir.root_fields[field_name] = self._get_type_info(field_node.type)["name"]
            if not field_node.arguments:
                continue
            params_name = f"Query{_pascal_case(field_name)}Params"
            self.ir.inputs[params_name] = TypeDescriptor(
                params_name,
                self._process_fields(field_node.arguments),
                is_input=True,
                description=_description(field_node),
            )

    def _process_fields(self, field_nodes) -> tuple[FieldDescriptor, ...]:
        """Process field or argument definitions into descriptors."""
        fields = []
        for node in field_nodes:
            type_info = self._get_type_info(node.type)
            kind = self._kinds.get(type_info["name"])
            if kind is None:
                raise ValueError(f"field {node.name.value} refers to unknown type {type_info['name']}")
            fields.append(
                FieldDescriptor(
                    name=node.name.value,
                    type_name=type_info["name"],
                    kind=kind,
                    is_list=type_info["is_list"],
                    is_optional=type_info["is_optional"],
                )
            )
        return tuple(fields)

    @staticmethod
    def _get_type_info(type_node: TypeNode) -> dict[str, Any]:
        """Extract the type name, is_list, and is_optional from the type node."""
        is_optional = True
        is_list = False

        # NonNull wrapper means not optional
        if isinstance(type_node, NonNullTypeNode):
            is_optional = False
            type_node = type_node.type

        # List wrapper
        if isinstance(type_node, ListTypeNode):
            is_list = True
            type_node = type_node.type
            # Handle non-null inside a list [Type!]
            if isinstance(type_node, NonNullTypeNode):
                type_node = type_node.type

        if not isinstance(type_node, NamedTypeNode):
            raise ValueError("nested list types are not supported")

        return {
            "name": type_node.name.value,
            "is_list": is_list,
            "is_optional": is_optional,
        }
