"""Code generator for the schema types module.

Renders a Jinja2 template to produce the Python types module (enums,
dataclass records, tagged unions, parameter records and the type table)
from a SchemaIR.

Supports custom templates via the template_dir parameter:
    generator = CodeGenerator(ir, "types.py", template_dir="./my_templates")

Template lookup order:
1. User's template directory (if provided)
2. Package default templates
"""

import ast
import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from .ir import FieldDescriptor, FieldKind, SchemaIR, TypeDescriptor
from .scalars import ScalarRegistry

logger = logging.getLogger(__name__)

_HELPERS = {
    FieldKind.SCALAR: "scalar",
    FieldKind.ENUM: "enum",
    FieldKind.OBJECT: "record",
    FieldKind.UNION: "union",
    FieldKind.INPUT_OBJECT: "input_object",
}


def safe_docstring(text: str) -> str:
    """Escape text for use in docstrings."""
    if not text:
        return ""
    text = text.replace('"""', '\\"\\"\\"')
    if text.endswith('"'):
        text += " "
    return text


def descriptor_call(field: FieldDescriptor) -> str:
    """Source of the helper call that builds ``field``'s descriptor."""
    args = [json.dumps(field.name), json.dumps(field.type_name)]
    if field.is_list:
        args.append("is_list=True")
    if not field.is_optional:
        args.append("is_optional=False")
    return f"{_HELPERS[field.kind]}({', '.join(args)})"


def _is_public(name: str) -> bool:
    return not name.startswith("_")


class CodeGenerator:
    """Generates the Python types module from schema IR.

    Supports custom templates via the template_dir parameter.
    Templates in template_dir take precedence over the built-in template.

    Available templates to override:
        - types.py.j2: the whole types module

    Example:
        generator = CodeGenerator(
            ir=schema,
            output_path="./fuel_gql/types.py",
            template_dir="./my_templates"
        )
        generator.generate()
    """

    def __init__(
        self,
        ir: SchemaIR,
        output_path: str,
        template_dir: Optional[str] = None,
        scalars: Optional[ScalarRegistry] = None,
        source: str = "",
    ):
        """Initialize the code generator.

        Args:
            ir: The intermediate representation of the GraphQL schema
            output_path: File the generated module is written to
            template_dir: Optional directory with custom Jinja2 templates.
                          Templates here override the built-in template.
            scalars: Scalar handlers deciding the Python type of each scalar
            source: Schema location mentioned in the generated docstring
        """
        self.ir = ir
        self.output_path = output_path
        self.template_dir = template_dir
        self.scalars = scalars or ScalarRegistry()
        self.source = source

        # Build template loader - custom templates take precedence
        loaders = []
        if template_dir:
            template_path = Path(template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("fuel_gql", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        # Register custom filters
        self.env.filters["quote"] = json.dumps
        self.env.filters["safe_docstring"] = safe_docstring
        self.env.filters["annotation"] = self._annotation
        self.env.filters["descriptor_call"] = descriptor_call

    def _annotation(self, field: FieldDescriptor) -> str:
        """Type hint of the dataclass attribute for a field."""
        if field.kind is FieldKind.SCALAR:
            base = self.scalars.get(field.type_name).python_type
        else:
            base = field.type_name
        if field.is_list:
            base = f"list[{base}]"
        return f"{base} | None"

    def _check_scalars(self):
        used = set(self.ir.scalars)
        for descriptor in self._public(self.ir.types) + self._public(self.ir.inputs):
            used.update(f.type_name for f in descriptor.fields if f.kind is FieldKind.SCALAR)
        missing = sorted(name for name in used if not self.scalars.has(name))
        if missing:
            raise ValueError(f"no scalar handler registered for: {', '.join(missing)}")
        return used

    @staticmethod
    def _public(descriptors: dict[str, TypeDescriptor]) -> list[TypeDescriptor]:
        result = []
        for name, descriptor in descriptors.items():
            if not _is_public(name):
                continue
            fields = tuple(f for f in descriptor.fields if _is_public(f.type_name))
            if len(fields) != len(descriptor.fields):
                descriptor = TypeDescriptor(
                    descriptor.name,
                    fields,
                    discriminator=descriptor.discriminator,
                    is_input=descriptor.is_input,
                    description=descriptor.description,
                )
            result.append(descriptor)
        return result

    def _context(self) -> dict[str, Any]:
        used_scalars = self._check_scalars()
        imports = {"from dataclasses import dataclass"}
        imports.update(self.scalars.get_all_imports(used_scalars))
        enums = {name: values for name, values in self.ir.enums.items() if _is_public(name)}
        if enums:
            imports.add("from enum import Enum")
        return {
            "source": self.source,
            "imports": sorted(imports),
            "enums": enums,
            "types": self._public(self.ir.types),
            "unions": self._public(self.ir.unions),
            "inputs": self._public(self.ir.inputs),
        }

    def render(self, template_name: str = "types.py.j2") -> str:
        """Render the types module and check that it is valid Python."""
        template = self.env.get_template(template_name)
        content = template.render(self._context())

        # Validate Python syntax
        try:
            ast.parse(content)
        except SyntaxError as e:
            raise ValueError(
                f"Generated invalid Python for {self.output_path}: {e}\n"
                f"Template: {template_name}"
            )
        return content

    def generate(self) -> str:
        """Render the types module and write it to ``output_path``."""
        content = self.render()
        directory = os.path.dirname(self.output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.output_path, "w") as f:
            f.write(content)
        logger.info("wrote %s", self.output_path)
        return content
