"""Tests for suppression rules."""

from fuel_gql.core.ir import record, scalar
from fuel_gql.core.query_builder import QueryBuilder
from fuel_gql.core.suppress import NEVER, keep_only, merge, suppress_field, suppress_type
from fuel_gql.types import SCHEMA, Block, Header, Transaction


class TestSuppressType:
    """Tests for suppress_type."""

    def test_matches_element_type(self):
        rule = suppress_type("Transaction")
        assert rule("Block", record("transactions", "Transaction", is_list=True))
        assert rule("SuccessStatus", record("block", "Transaction"))
        assert not rule("Block", record("header", "Header"))

    def test_accepts_classes(self):
        rule = suppress_type(Transaction, Header)
        assert rule("Block", SCHEMA.get("Block").get_field("transactions"))
        assert rule("Block", SCHEMA.get("Block").get_field("header"))
        assert not rule("Block", SCHEMA.get("Block").get_field("id"))

    def test_scalar_type(self):
        rule = suppress_type("Bytes32")
        assert rule("Header", SCHEMA.get("Header").get_field("prevRoot"))
        assert not rule("Header", SCHEMA.get("Header").get_field("id"))


class TestSuppressField:
    """Tests for suppress_field."""

    def test_exact_pair(self):
        rule = suppress_field(Block, "consensus")
        assert rule("Block", SCHEMA.get("Block").get_field("consensus"))

    def test_other_owner_not_matched(self):
        rule = suppress_field("SuccessStatus", "block")
        assert not rule("FailureStatus", SCHEMA.get("FailureStatus").get_field("block"))

    def test_other_field_not_matched(self):
        rule = suppress_field(Block, "consensus")
        assert not rule("Block", SCHEMA.get("Block").get_field("header"))


class TestKeepOnly:
    """Tests for keep_only."""

    def test_suppresses_everything_else(self):
        rule = keep_only(Header, "id", "height")
        header = SCHEMA.get("Header")
        suppressed = [f.name for f in header.fields if rule("Header", f)]
        assert "id" not in suppressed
        assert "height" not in suppressed
        assert len(suppressed) == len(header.fields) - 2

    def test_other_owner_untouched(self):
        rule = keep_only(Header, "id")
        assert not rule("Block", SCHEMA.get("Block").get_field("header"))


class TestMerge:
    """Tests for merge."""

    def test_no_rules(self):
        assert merge() is NEVER
        assert merge(None, NEVER) is NEVER

    def test_single_rule_returned_unchanged(self):
        rule = suppress_type(Transaction)
        assert merge(rule) is rule
        assert merge(None, rule) is rule

    def test_or(self):
        rule = merge(suppress_field(Block, "id"), suppress_field(Block, "header"))
        block = SCHEMA.get("Block")
        assert rule("Block", block.get_field("id"))
        assert rule("Block", block.get_field("header"))
        assert not rule("Block", block.get_field("consensus"))

    def test_never(self):
        assert not NEVER("Block", scalar("id", "BlockId"))


class TestSuppressionProperties:
    """Selection sets produced under suppression."""

    def test_suppress_field_removes_only_that_field(self, tiny_registry):
        builder = QueryBuilder(tiny_registry)
        text = builder.selection("TinyHeader")
        assert text == "height "
        text = builder.selection("Tiny", merge(
            suppress_field("Tiny", "header"),
            suppress_type("TinyTx"),
        ))
        assert text == "id "

    def test_keep_only(self, tiny_registry):
        text = QueryBuilder(tiny_registry).selection("Tiny", keep_only("Tiny", "header"))
        assert text == "header { height } "

    def test_same_type_expanded_and_stubbed(self):
        builder = QueryBuilder(SCHEMA)
        rule = merge(
            suppress_type(Transaction),
            suppress_field(Block, "consensus"),
            keep_only("ChainInfo", "latestBlock"),
            keep_only(Header, "height"),
        )
        text = builder.selection("ChainInfo", rule)
        assert text == "latestBlock { id header { height } } "

    def test_cycle_broken(self, cyclic_registry):
        text = QueryBuilder(cyclic_registry).selection("Y", suppress_type("X"))
        assert text == "name "
        assert "x" not in text.split()

    def test_cycle_broken_one_level_down(self, cyclic_registry):
        text = QueryBuilder(cyclic_registry).selection("X", suppress_field("Y", "x"))
        assert text == "name y { name } "

    def test_rule_order_does_not_matter(self):
        builder = QueryBuilder(SCHEMA)
        a = suppress_type(Transaction)
        b = suppress_field(Block, "consensus")
        c = keep_only(Header, "id", "height")
        assert builder.selection(Block, merge(a, b, c)) == builder.selection(Block, merge(c, a, b))
