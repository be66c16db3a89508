"""Shared fixtures: a tiny hand-written type table for synthesis tests."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from fuel_gql.core.ir import TypeDescriptor, TypeRegistry, record, scalar


@dataclass
class Tiny:
    id: bytes | None = None
    header: TinyHeader | None = None
    transactions: list[TinyTx] | None = None


@dataclass
class TinyHeader:
    height: int | None = None


@dataclass
class TinyTx:
    id: bytes | None = None


@dataclass
class X:
    name: str | None = None
    y: Y | None = None


@dataclass
class Y:
    name: str | None = None
    x: X | None = None


@pytest.fixture
def tiny_registry():
    """Record with a scalar, a nested record and a list of records."""
    registry = TypeRegistry()
    registry.register(Tiny, TypeDescriptor("Tiny", (
        scalar("id", "BlockId"),
        record("header", "TinyHeader"),
        record("transactions", "TinyTx", is_list=True),
    )))
    registry.register(TinyHeader, TypeDescriptor("TinyHeader", (
        scalar("height", "U32"),
    )))
    registry.register(TinyTx, TypeDescriptor("TinyTx", (
        scalar("id", "TransactionId"),
    )))
    return registry


@pytest.fixture
def cyclic_registry():
    """Two record types referencing each other."""
    registry = TypeRegistry()
    registry.register(X, TypeDescriptor("X", (
        scalar("name", "String"),
        record("y", "Y"),
    )))
    registry.register(Y, TypeDescriptor("Y", (
        scalar("name", "String"),
        record("x", "X"),
    )))
    return registry
