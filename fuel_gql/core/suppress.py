"""Suppression rules for selection-set synthesis.

A rule is a plain predicate ``rule(owner, field) -> bool`` answering whether
``field`` of the type named ``owner`` is left out of the selection set. The
predicate is asked once per field occurrence, so a type may be expanded in
full in one place and stubbed in another.

Types can be given either as type names or as the generated classes:

    from fuel_gql.types import Block, Header, Transaction

    rule = merge(
        suppress_type(Transaction),
        suppress_field(Block, "consensus"),
        keep_only(Header, "id", "height"),
    )
"""

from typing import Any, Callable

from .ir import FieldDescriptor, type_name_of

SuppressionRule = Callable[[str, FieldDescriptor], bool]


def NEVER(owner: str, field: FieldDescriptor) -> bool:
    """The rule that suppresses nothing."""
    return False


def suppress_type(*types: Any) -> SuppressionRule:
    """Suppress every field whose element type is one of ``types``.

    List and optional wrappers are looked through. Meant for cutting
    reference cycles such as Transaction -> status -> Block -> Transaction.
    """
    names = frozenset(type_name_of(t) for t in types)

    def rule(owner: str, field: FieldDescriptor) -> bool:
        return field.type_name in names

    return rule


def suppress_field(owner_type: Any, field_name: str) -> SuppressionRule:
    """Suppress exactly one field of one type."""
    target = type_name_of(owner_type)

    def rule(owner: str, field: FieldDescriptor) -> bool:
        return owner == target and field.name == field_name

    return rule


def keep_only(owner_type: Any, *field_names: str) -> SuppressionRule:
    """Suppress every field of ``owner_type`` except ``field_names``."""
    target = type_name_of(owner_type)
    allowed = frozenset(field_names)

    def rule(owner: str, field: FieldDescriptor) -> bool:
        return owner == target and field.name not in allowed

    return rule


def merge(*rules: SuppressionRule | None) -> SuppressionRule:
    """Combine rules with a short-circuit OR. ``None`` entries are ignored."""
    active = tuple(r for r in rules if r is not None and r is not NEVER)
    if not active:
        return NEVER
    if len(active) == 1:
        return active[0]

    def rule(owner: str, field: FieldDescriptor) -> bool:
        return any(r(owner, field) for r in active)

    return rule
