"""Tests for tagged union values and their flattened wire form."""

import json
from datetime import datetime, timezone

import pytest

from fuel_gql.core.codec import Codec
from fuel_gql.core.errors import MalformedUnionTypeError, UnionInvariantError, UnknownVariantError
from fuel_gql.core.ir import FieldKind
from fuel_gql.core.union import decode_union, encode_union
from fuel_gql.types import (
    SCHEMA,
    Block,
    Consensus,
    FailureStatus,
    Genesis,
    PoAConsensus,
    SqueezedOutStatus,
    SubmittedStatus,
    SuccessStatus,
    TransactionStatus,
)

SIGNATURE = "0x724028a0724428785d451000724828802d41148a24040000"


@pytest.fixture
def codec():
    return Codec(SCHEMA)


class TestTaggedUnion:
    """Tests for TaggedUnion values."""

    def test_typename_from_payload(self):
        value = Consensus(PoAConsensus(signature=b"\x01"))
        assert value.typename == "PoAConsensus"
        assert value

    def test_absent(self):
        value = Consensus.absent()
        assert value.typename == ""
        assert value.value is None
        assert not value
        assert value == Consensus()

    def test_get(self):
        payload = PoAConsensus(signature=b"\x01")
        value = Consensus(payload)
        assert value.get(PoAConsensus) is payload
        assert value.get(Genesis) is None

    def test_variant(self):
        assert TransactionStatus.variant("FailureStatus") is FailureStatus
        with pytest.raises(UnknownVariantError):
            TransactionStatus.variant("Pending")

    def test_equality(self):
        a = TransactionStatus(SqueezedOutStatus(reason="gas"))
        b = TransactionStatus(SqueezedOutStatus(reason="gas"))
        assert a == b
        assert hash(a) == hash(b)
        assert a != TransactionStatus(SqueezedOutStatus(reason="fee"))
        assert a != Consensus()

    def test_repr(self):
        assert repr(Consensus()) == "Consensus()"
        assert repr(TransactionStatus(SqueezedOutStatus(reason="gas"))) == (
            "TransactionStatus(SqueezedOutStatus(reason='gas'))"
        )

    def test_typename_without_payload(self):
        with pytest.raises(UnionInvariantError):
            TransactionStatus(typename="SuccessStatus")

    def test_payload_of_other_variant(self):
        with pytest.raises(UnionInvariantError):
            TransactionStatus(SubmittedStatus(), typename="SuccessStatus")

    def test_payload_without_typename(self):
        with pytest.raises(UnionInvariantError):
            TransactionStatus(SubmittedStatus(), typename="")

    def test_payload_not_a_member(self):
        with pytest.raises(UnknownVariantError):
            TransactionStatus(Block())


class TestDecode:
    """Tests for decoding flattened union objects."""

    def test_success_status(self, codec):
        status = codec.decode(TransactionStatus, '{"__typename":"SuccessStatus","transactionId":"0x01"}')
        assert status.typename == "SuccessStatus"
        success = status.get(SuccessStatus)
        assert success.transaction_id == b"\x00" * 31 + b"\x01"
        assert success.block is None
        assert status.get(SubmittedStatus) is None
        assert status.get(SqueezedOutStatus) is None
        assert status.get(FailureStatus) is None

    def test_empty_typename(self, codec):
        status = codec.decode(TransactionStatus, '{"__typename":""}')
        assert status.typename == ""
        assert status.value is None
        assert isinstance(status, TransactionStatus)

    def test_null(self, codec):
        assert codec.decode(Consensus, "null") == Consensus()
        assert codec.decode(TransactionStatus, "null") == TransactionStatus()

    def test_unknown_variant(self, codec):
        with pytest.raises(UnknownVariantError, match='union type TransactionStatus does not have member "Pending"'):
            codec.decode(TransactionStatus, '{"__typename":"Pending"}')

    def test_unknown_variant_fields(self, codec):
        with pytest.raises(UnknownVariantError) as exc_info:
            codec.decode(Consensus, '{"__typename":"Genesis2"}')
        assert exc_info.value.union_name == "Consensus"
        assert exc_info.value.typename == "Genesis2"

    def test_not_an_object(self, codec):
        with pytest.raises(ValueError):
            codec.decode(Consensus, '"PoAConsensus"')

    def test_malformed_union_type(self):
        with pytest.raises(MalformedUnionTypeError, match="Block is not a union type"):
            decode_union(SCHEMA, SCHEMA.get("Block"), {"__typename": "Block"}, lambda d, raw: raw)


class TestEncode:
    """Tests for encoding union values."""

    def test_variant(self, codec):
        value = Consensus(PoAConsensus(signature=bytes.fromhex(SIGNATURE[2:])))
        assert codec.encode(value) == '{"__typename":"PoAConsensus","signature":"' + SIGNATURE + '"}'

    def test_discriminator_first(self, codec):
        value = TransactionStatus(SqueezedOutStatus(reason="gas"))
        assert list(codec.encode_value(value)) == ["__typename", "reason"]

    def test_absent(self, codec):
        assert codec.encode(TransactionStatus()) == "null"
        assert codec.encode(None, TransactionStatus) == "null"

    def test_missing_payload(self, codec):
        value = TransactionStatus()
        value.typename = "SuccessStatus"
        with pytest.raises(UnionInvariantError):
            codec.encode(value)

    def test_unknown_typename(self, codec):
        value = TransactionStatus()
        value.typename = "Pending"
        value.value = SubmittedStatus()
        with pytest.raises(UnknownVariantError):
            codec.encode(value)

    def test_malformed_union_type(self):
        with pytest.raises(MalformedUnionTypeError):
            encode_union(SCHEMA, SCHEMA.get("Header"), Consensus(), lambda d, v: {})


class TestRoundTrip:
    """Decode then encode gives the same flattened shape."""

    @pytest.mark.parametrize(
        "root, text",
        [
            (Consensus, '{"__typename":"PoAConsensus","signature":"' + SIGNATURE + '"}'),
            (TransactionStatus, '{"__typename":"SqueezedOutStatus","reason":"gas"}'),
            (TransactionStatus, '{"__typename":"SubmittedStatus","time":"4611686020140536983"}'),
        ],
    )
    def test_bytes(self, codec, root, text):
        assert codec.encode(codec.decode(root, text)) == text

    def test_value(self, codec):
        value = TransactionStatus(SqueezedOutStatus(reason="gas"))
        assert codec.decode(TransactionStatus, codec.encode(value)) == value


SAMPLES = {
    "int": 12,
    "float": 1.5,
    "bool": True,
    "str": "abc",
    "bytes": b"\x11" * 32,
    "datetime": datetime(2024, 1, 1, tzinfo=timezone.utc),
}

UNION_VARIANTS = [(d.name, variant) for d in SCHEMA if d.is_union for variant in d.variants]


def sample_wire(variant_name):
    """Flattened wire form of a variant with every leaf field populated."""
    wire = {"__typename": variant_name}
    for field in SCHEMA.get(variant_name).fields:
        if field.kind is FieldKind.SCALAR:
            handler = SCHEMA.scalars.get(field.type_name)
            value = handler.serialize(SAMPLES[handler.python_type])
        elif field.kind is FieldKind.ENUM:
            value = next(iter(SCHEMA.enum_type(field.type_name))).value
        else:
            value = None
        wire[field.name] = [value] if field.is_list and value is not None else value
    return json.dumps(wire, separators=(",", ":"))


class TestEveryVariantRoundTrip:
    """Every declared union variant survives decode and encode unchanged."""

    def test_all_unions_covered(self):
        unions = {name for name, _ in UNION_VARIANTS}
        assert unions == {"Consensus", "Input", "Output", "TransactionStatus"}

    @pytest.mark.parametrize(
        "union_name, variant_name", UNION_VARIANTS, ids=[f"{u}-{v}" for u, v in UNION_VARIANTS],
    )
    def test_round_trip(self, codec, union_name, variant_name):
        text = sample_wire(variant_name)
        value = codec.decode(union_name, text)
        assert value.typename == variant_name
        assert type(value.value).__name__ == variant_name
        encoded = codec.encode(value)
        assert encoded == text
        assert codec.decode(union_name, encoded) == value
