"""Tests for the command-line interface."""

import json

import httpx
import pytest
from click.testing import CliRunner

import fuel_gql
from fuel_gql.cli import main

BLOCK_ID = "0x5d7f48fc777144b21ea760525936db069329dee2ccce509550c1478c1c0b5b2c"


@pytest.fixture
def runner(monkeypatch):
    monkeypatch.delenv("FUEL_GRAPHQL_ENDPOINT", raising=False)
    monkeypatch.delenv("FUEL_GRAPHQL_TIMEOUT", raising=False)
    return CliRunner()


def node(body, queries=None):
    def handler(request):
        if queries is not None:
            queries.append(json.loads(request.content)["query"])
        return httpx.Response(200, json=body)

    return httpx.MockTransport(handler)


class TestSelectionCommand:
    """Tests for the selection command."""

    def test_compact(self, runner):
        result = runner.invoke(main, ["selection", "Header", "--keep-only", "Header:id,height"])
        assert result.exit_code == 0
        assert result.output == "id height \n"

    def test_pretty(self, runner):
        result = runner.invoke(main, ["selection", "Block", "--pretty", "--suppress-type", "Transaction",
                                      "--suppress-field", "Block.consensus", "--keep-only", "Header:height"])
        assert result.exit_code == 0
        assert result.output == "id\nheader {\n  height\n}\n"

    def test_unknown_root(self, runner):
        result = runner.invoke(main, ["selection", "Nope"])
        assert result.exit_code == 2
        assert "unknown type 'Nope'" in result.output

    def test_bad_suppress_field(self, runner):
        result = runner.invoke(main, ["selection", "Block", "--suppress-field", "Block"])
        assert result.exit_code == 2
        assert "TYPE.FIELD" in result.output


class TestBlockCommand:
    """Tests for the block command."""

    def test_by_height(self, runner):
        queries = []
        body = {"data": {"block": {
            "id": BLOCK_ID,
            "header": {"id": BLOCK_ID, "height": "9758550", "time": "4611686020140536983"},
        }}}
        result = runner.invoke(main, ["block", "--height", "9758550"], obj={"transport": node(body, queries)})
        assert result.exit_code == 0, result.output
        assert queries[0].startswith('{ block(height: "9758550") { id header { ')
        assert json.loads(result.output) == {
            "id": BLOCK_ID,
            "header": {"id": BLOCK_ID, "height": "9758550", "time": "4611686020140536983"},
            "transactions": [],
        }

    def test_by_id(self, runner):
        queries = []
        body = {"data": {"block": {"id": BLOCK_ID}}}
        result = runner.invoke(main, ["block", "--id", BLOCK_ID], obj={"transport": node(body, queries)})
        assert result.exit_code == 0, result.output
        assert queries[0].startswith('{ block(id: "' + BLOCK_ID + '") {')

    def test_requires_height_or_id(self, runner):
        result = runner.invoke(main, ["block"])
        assert result.exit_code == 2
        assert "one of --height or --id is required" in result.output

    def test_invalid_id(self, runner):
        result = runner.invoke(main, ["block", "--id", "0xzz"])
        assert result.exit_code == 2
        assert "invalid BlockId" in result.output

    def test_not_found(self, runner):
        result = runner.invoke(main, ["block", "--height", "1"], obj={"transport": node({"data": {"block": None}})})
        assert result.exit_code == 1
        assert "block not found" in result.output

    def test_query_error(self, runner):
        body = {"data": None, "errors": [{"message": "boom", "locations": [{"line": 1, "column": 2}]}]}
        result = runner.invoke(main, ["block", "--height", "1"], obj={"transport": node(body)})
        assert result.exit_code == 1
        assert "execute query failed: (line:1,column:2): boom" in result.output


class TestTransactionCommand:
    def test_with_status(self, runner):
        body = {"data": {"transaction": {
            "id": "0x01",
            "status": {"__typename": "SqueezedOutStatus", "reason": "gas"},
        }}}
        result = runner.invoke(main, ["transaction", "0x01", "--with-status"], obj={"transport": node(body)})
        assert result.exit_code == 0, result.output
        output = json.loads(result.output)
        assert output["status"] == {"__typename": "SqueezedOutStatus", "reason": "gas"}


class TestChainCommand:
    """Tests for the chain command."""

    def test_height_only(self, runner):
        queries = []
        body = {"data": {"chain": {"latestBlock": {"header": {"height": "9758550"}}}}}
        result = runner.invoke(main, ["chain", "--height-only"], obj={"transport": node(body, queries)})
        assert result.exit_code == 0, result.output
        assert result.output == "9758550\n"
        assert queries == ["{ chain { latestBlock { header { height } } } }"]

    def test_chain(self, runner):
        body = {"data": {"chain": {"name": "testnet", "daHeight": "5700482"}}}
        result = runner.invoke(main, ["chain"], obj={"transport": node(body)})
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {"name": "testnet", "daHeight": "5700482"}


class TestMain:
    def test_invalid_endpoint(self, runner):
        result = runner.invoke(main, ["--endpoint", "node.example", "chain"])
        assert result.exit_code == 2
        assert "http(s) URL" in result.output

    def test_endpoint_from_env(self, runner):
        queries = []
        body = {"data": {"chain": {"latestBlock": {"header": {"height": "1"}}}}}
        result = runner.invoke(
            main,
            ["chain", "--height-only"],
            obj={"transport": node(body, queries)},
            env={"FUEL_GRAPHQL_ENDPOINT": "http://127.0.0.1:4000/v1/graphql"},
        )
        assert result.exit_code == 0, result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert fuel_gql.__version__ in result.output


class TestGenerateCommand:
    """Tests for the generate command."""

    def test_generate(self, runner, tmp_path):
        schema = tmp_path / "schema.graphqls"
        schema.write_text("scalar U32\ntype Header { height: U32! }\ntype Query { head: Header! }\n")
        output = tmp_path / "types.py"
        result = runner.invoke(main, ["generate", "--schema", str(schema), "--output", str(output)])
        assert result.exit_code == 0, result.output
        assert "Types: 1" in result.output
        assert "class Header:" in output.read_text()

    def test_missing_handler(self, runner, tmp_path):
        schema = tmp_path / "schema.graphqls"
        schema.write_text("scalar Money\ntype Price { amount: Money! }\n")
        result = runner.invoke(main, ["generate", "--schema", str(schema), "--output", str(tmp_path / "t.py")])
        assert result.exit_code == 1
        assert "Money" in result.output
