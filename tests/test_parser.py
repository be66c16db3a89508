"""Tests for the GraphQL schema parser."""

from pathlib import Path

import pytest
from graphql import GraphQLSyntaxError

import fuel_gql
from fuel_gql.core.ir import FieldKind
from fuel_gql.core.parser import SchemaParser
from fuel_gql.types import SCHEMA

SCHEMA_DIR = Path(fuel_gql.__file__).parent / "schema"

SAMPLE_SDL = '''
scalar U32
scalar BlockId

enum Color {
  RED
  GREEN
}

"""A block."""
type Block {
  id: BlockId!
  height: U32
  color: Color
  tags: [String!]!
  header: Header
  status: Status
}

type Header {
  height: U32!
}

type Ok {
  at: U32!
}

type Failed {
  reason: String!
}

union Status = Ok | Failed

input Range {
  from: U32!
  to: U32
}

type Query {
  block(id: BlockId, height: U32): Block
  blocks(range: Range!): [Block!]!
  head: Header!
}
'''


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "sample.graphqls"
    path.write_text(SAMPLE_SDL)
    return path


@pytest.fixture
def sample_ir(schema_file):
    return SchemaParser(str(schema_file)).parse_all()


@pytest.fixture(scope="module")
def fuel_ir():
    return SchemaParser(str(SCHEMA_DIR)).parse_all()


class TestSchemaParser:
    """Tests for SchemaParser."""

    def test_scalars_and_enums(self, sample_ir):
        assert set(sample_ir.scalars) == {"U32", "BlockId"}
        assert sample_ir.enums == {"Color": ["RED", "GREEN"]}

    def test_record(self, sample_ir):
        block = sample_ir.types["Block"]
        assert block.description == "A block."
        assert [f.name for f in block.fields] == ["id", "height", "color", "tags", "header", "status"]
        kinds = {f.name: f.kind for f in block.fields}
        assert kinds == {
            "id": FieldKind.SCALAR,
            "height": FieldKind.SCALAR,
            "color": FieldKind.ENUM,
            "tags": FieldKind.SCALAR,
            "header": FieldKind.OBJECT,
            "status": FieldKind.UNION,
        }

    def test_wrappers(self, sample_ir):
        block = sample_ir.types["Block"]
        assert not block.get_field("id").is_optional
        assert block.get_field("height").is_optional
        tags = block.get_field("tags")
        assert tags.is_list
        assert not tags.is_optional
        assert tags.type_name == "String"

    def test_union(self, sample_ir):
        status = sample_ir.unions["Status"]
        assert status.is_union
        assert status.variants == ("Ok", "Failed")

    def test_input(self, sample_ir):
        range_type = sample_ir.inputs["Range"]
        assert range_type.is_input
        assert range_type.get_field("from").attr == "from_"

    def test_root_fields(self, sample_ir):
        assert sample_ir.root_fields == {"block": "Block", "blocks": "Block", "head": "Header"}
        assert "Query" not in sample_ir.types

    def test_query_params(self, sample_ir):
        params = sample_ir.inputs["QueryBlockParams"]
        assert [f.name for f in params.fields] == ["id", "height"]
        assert params.is_input
        blocks = sample_ir.inputs["QueryBlocksParams"]
        assert blocks.get_field("range").kind is FieldKind.INPUT_OBJECT
        assert "QueryHeadParams" not in sample_ir.inputs

    def test_get_type_by_name(self, sample_ir):
        assert sample_ir.get_type_by_name("Header").name == "Header"
        assert sample_ir.get_type_by_name("Status").is_union
        assert sample_ir.get_type_by_name("Range").is_input
        assert sample_ir.get_type_by_name("Nope") is None

    def test_directory(self, tmp_path):
        (tmp_path / "a.graphqls").write_text("scalar U32\ntype Header { height: U32! }\n")
        (tmp_path / "b.graphqls").write_text("type Block { header: Header! }\n")
        (tmp_path / "notes.txt").write_text("ignored")
        ir = SchemaParser(str(tmp_path)).parse_all()
        assert set(ir.types) == {"Header", "Block"}

    def test_no_schema_files(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            SchemaParser(str(tmp_path)).parse_all()

    def test_syntax_error(self, tmp_path):
        (tmp_path / "bad.graphqls").write_text("type Block {")
        with pytest.raises(GraphQLSyntaxError):
            SchemaParser(str(tmp_path)).parse_all()

    def test_unknown_type(self, tmp_path):
        (tmp_path / "bad.graphqls").write_text("type Block { header: Header }")
        with pytest.raises(ValueError, match="Header"):
            SchemaParser(str(tmp_path)).parse_all()

    def test_union_of_scalar(self, tmp_path):
        (tmp_path / "bad.graphqls").write_text("scalar U32\nunion Bad = U32")
        with pytest.raises(ValueError, match="not an object type"):
            SchemaParser(str(tmp_path)).parse_all()

    def test_nested_list(self, tmp_path):
        (tmp_path / "bad.graphqls").write_text("type Grid { cells: [[Int]] }")
        with pytest.raises(ValueError, match="nested list"):
            SchemaParser(str(tmp_path)).parse_all()


class TestBundledSchema:
    """The bundled Fuel schema describes the same types as fuel_gql.types."""

    def test_records_match(self, fuel_ir):
        for name, descriptor in fuel_ir.types.items():
            assert descriptor == SCHEMA.get(name), name

    def test_unions_match(self, fuel_ir):
        for name, descriptor in fuel_ir.unions.items():
            assert descriptor == SCHEMA.get(name), name

    def test_params_match(self, fuel_ir):
        assert set(fuel_ir.inputs) == {"QueryBlockParams", "QueryTransactionParams"}
        for name, descriptor in fuel_ir.inputs.items():
            assert descriptor == SCHEMA.get(name), name

    def test_enums_match(self, fuel_ir):
        for name, values in fuel_ir.enums.items():
            assert [m.value for m in SCHEMA.enum_type(name)] == values
