"""Scalar handlers for the Fuel GraphQL schema.

A handler maps a GraphQL scalar onto a Python type and knows its three
external forms: the JSON wire form used in responses, the textual form used
in query arguments, and the structured form used when results are exported
as generic JSON-like trees.

Example usage:
    from fuel_gql.core.scalars import ScalarRegistry

    registry = ScalarRegistry()
    u64 = registry.get("U64")
    u64.deserialize("18446744073709551615")  # 18446744073709551615
    u64.serialize(1234)                      # "1234"

    # Register a custom handler
    class MoneyHandler:
        python_type = "Decimal"
        import_statement = "from decimal import Decimal"
        quoted = True

        def serialize(self, value):
            return str(value)

        def deserialize(self, value):
            from decimal import Decimal
            return Decimal(value)

        def render(self, value):
            return str(value)

        def to_structured(self, value):
            return str(value)

    registry.register("Money", MoneyHandler())
"""

from datetime import datetime, timezone
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ScalarHandler(Protocol):
    """Protocol for scalar handlers.

    Attributes:
        python_type: The Python type name used in generated code (e.g. "int")
        import_statement: Import needed by generated code, or "" for builtins
        quoted: Whether the textual form is quoted in query arguments
    """

    python_type: str
    import_statement: str
    quoted: bool

    def serialize(self, value: Any) -> Any:
        """Convert a Python value to its JSON wire form."""
        ...

    def deserialize(self, value: Any) -> Any:
        """Convert a JSON wire value to the Python type."""
        ...

    def render(self, value: Any) -> str:
        """Textual form of a value, used in query arguments."""
        ...

    def to_structured(self, value: Any) -> Any:
        """Generic structured form of a value."""
        ...


def _strip_quotes(value: Any) -> Any:
    if isinstance(value, str) and len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


def _parse_integer(value: Any, scalar_name: str) -> int:
    """Parse a JSON number or base-10 string; floats and booleans are rejected."""
    value = _strip_quotes(value)
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"invalid {scalar_name} value {value!r}")
    return int(value)


class UnsignedHandler:
    """Fixed-width unsigned integers (U8..U64).

    Rendered as base-10 strings so that 64-bit values survive JSON consumers
    that only have double precision numbers.
    """

    python_type = "int"
    import_statement = ""
    quoted = True

    def __init__(self, bits: int):
        self.bits = bits
        self.max_value = (1 << bits) - 1

    def serialize(self, value: int) -> str:
        return self.render(value)

    def deserialize(self, value: Any) -> int:
        number = _parse_integer(value, f"U{self.bits}")
        if not 0 <= number <= self.max_value:
            raise ValueError(f"value {number} out of range for U{self.bits}")
        return number

    def render(self, value: int) -> str:
        return str(int(value))

    def to_structured(self, value: int) -> str:
        return self.render(value)


class IntHandler:
    """The builtin GraphQL Int, a JSON number on the wire."""

    python_type = "int"
    import_statement = ""
    quoted = False

    def serialize(self, value: int) -> int:
        return int(value)

    def deserialize(self, value: Any) -> int:
        return _parse_integer(value, "Int")

    def render(self, value: int) -> str:
        return str(int(value))

    def to_structured(self, value: int) -> str:
        return self.render(value)


class FloatHandler:
    python_type = "float"
    import_statement = ""
    quoted = False

    def serialize(self, value: float) -> float:
        return float(value)

    def deserialize(self, value: Any) -> float:
        return float(_strip_quotes(value))

    def render(self, value: float) -> str:
        return repr(float(value))

    def to_structured(self, value: float) -> str:
        return self.render(value)


class BooleanHandler:
    """JSON booleans, rendered as bare tokens."""

    python_type = "bool"
    import_statement = ""
    quoted = False

    def serialize(self, value: bool) -> bool:
        return bool(value)

    def deserialize(self, value: Any) -> bool:
        if not isinstance(value, bool):
            raise ValueError(f"invalid Boolean value {value!r}")
        return value

    def render(self, value: bool) -> str:
        return "true" if value else "false"

    def to_structured(self, value: bool) -> bool:
        return bool(value)


class StringHandler:
    """Opaque strings (String, ID, Nonce, Salt, TxPointer)."""

    python_type = "str"
    import_statement = ""
    quoted = True

    def serialize(self, value: str) -> str:
        return str(value)

    def deserialize(self, value: Any) -> str:
        if not isinstance(value, str):
            raise ValueError(f"invalid string value {value!r}")
        return value

    def render(self, value: str) -> str:
        return str(value)

    def to_structured(self, value: str) -> str:
        return str(value)


class HexStringHandler:
    """Variable-length byte strings encoded as 0x-prefixed hex."""

    python_type = "bytes"
    import_statement = ""
    quoted = True

    def serialize(self, value: bytes) -> str:
        return self.render(value)

    def deserialize(self, value: Any) -> bytes:
        if not isinstance(value, str):
            raise ValueError(f"invalid hex string {value!r}")
        text = value[2:] if value[:2] in ("0x", "0X") else value
        if len(text) % 2:
            text = "0" + text
        return bytes.fromhex(text)

    def render(self, value: bytes) -> str:
        return "0x" + bytes(value).hex()

    def to_structured(self, value: bytes) -> str:
        return self.render(value)


class Hash32Handler(HexStringHandler):
    """32-byte identifiers and hashes (Address, BlockId, Bytes32, ...).

    Shorter input is left-padded with zeros and longer input keeps its
    trailing 32 bytes, so ``0x01`` decodes to the hash with value one.
    """

    size = 32

    def deserialize(self, value: Any) -> bytes:
        return self.pad(super().deserialize(value))

    def render(self, value: bytes) -> str:
        return super().render(self.pad(bytes(value)))

    @classmethod
    def pad(cls, raw: bytes) -> bytes:
        if len(raw) > cls.size:
            return raw[-cls.size:]
        return raw.rjust(cls.size, b"\x00")


# TAI64 labels count seconds from 1970-01-01 TAI, offset by 2**62.
TAI64_BASE = 1 << 62

# Unix time at which each TAI-UTC offset took effect (IERS bulletin C).
LEAP_SECONDS = (
    (63072000, 10),    # 1972-01-01
    (78796800, 11),    # 1972-07-01
    (94694400, 12),    # 1973-01-01
    (126230400, 13),   # 1974-01-01
    (157766400, 14),   # 1975-01-01
    (189302400, 15),   # 1976-01-01
    (220924800, 16),   # 1977-01-01
    (252460800, 17),   # 1978-01-01
    (283996800, 18),   # 1979-01-01
    (315532800, 19),   # 1980-01-01
    (362793600, 20),   # 1981-07-01
    (394329600, 21),   # 1982-07-01
    (425865600, 22),   # 1983-07-01
    (489024000, 23),   # 1985-07-01
    (567993600, 24),   # 1988-01-01
    (631152000, 25),   # 1990-01-01
    (662688000, 26),   # 1991-01-01
    (709948800, 27),   # 1992-07-01
    (741484800, 28),   # 1993-07-01
    (773020800, 29),   # 1994-07-01
    (820454400, 30),   # 1996-01-01
    (867715200, 31),   # 1997-07-01
    (915148800, 32),   # 1999-01-01
    (1136073600, 33),  # 2006-01-01
    (1230768000, 34),  # 2009-01-01
    (1341100800, 35),  # 2012-07-01
    (1435708800, 36),  # 2015-07-01
    (1483228800, 37),  # 2017-01-01
)


def _tai_offset_for_unix(unix_seconds: int) -> int:
    for since, offset in reversed(LEAP_SECONDS):
        if unix_seconds >= since:
            return offset
    return 0


def _tai_offset_for_tai(tai_seconds: int) -> int:
    for since, offset in reversed(LEAP_SECONDS):
        if tai_seconds >= since + offset:
            return offset
    return 0


class Tai64Handler:
    """TAI64 timestamps, exchanged as base-10 labels and exposed as UTC datetimes."""

    python_type = "datetime"
    import_statement = "from datetime import datetime"
    quoted = True

    def serialize(self, value: datetime) -> str:
        return self.render(value)

    def deserialize(self, value: Any) -> datetime:
        label = _parse_integer(value, "Tai64Timestamp")
        tai_seconds = label - TAI64_BASE
        unix_seconds = tai_seconds - _tai_offset_for_tai(tai_seconds)
        try:
            return datetime.fromtimestamp(unix_seconds, tz=timezone.utc)
        except (OverflowError, OSError) as e:
            raise ValueError(f"TAI64 label {label} out of range") from e

    def render(self, value: datetime) -> str:
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        unix_seconds = int(value.timestamp())
        return str(TAI64_BASE + unix_seconds + _tai_offset_for_unix(unix_seconds))

    def to_structured(self, value: datetime) -> str:
        return self.render(value)


class ScalarRegistry:
    """Registry for scalar handlers.

    Manages the mapping between GraphQL scalar names and their handlers.
    Looking up a scalar without a handler is a programming error and fails
    immediately.

    Example:
        registry = ScalarRegistry()
        handler = registry.get("Tai64Timestamp")
        handler.python_type  # "datetime"
    """

    def __init__(self):
        self._handlers: dict[str, ScalarHandler] = {}
        self._register_defaults()

    def _register_defaults(self):
        """Register the builtin GraphQL scalars and the Fuel scalars."""
        self.register("Boolean", BooleanHandler())
        self.register("Int", IntHandler())
        self.register("Float", FloatHandler())
        strings = StringHandler()
        for name in ("String", "ID", "Nonce", "Salt", "TxPointer"):
            self.register(name, strings)
        for bits in (8, 16, 32, 64):
            self.register(f"U{bits}", UnsignedHandler(bits))
        hashes = Hash32Handler()
        for name in ("Address", "AssetId", "BlockId", "Bytes32", "ContractId", "TransactionId"):
            self.register(name, hashes)
        hex_strings = HexStringHandler()
        for name in ("HexString", "Signature", "UtxoId"):
            self.register(name, hex_strings)
        self.register("Tai64Timestamp", Tai64Handler())

    def register(self, scalar_name: str, handler: ScalarHandler):
        """Register a handler for a scalar type."""
        self._handlers[scalar_name] = handler

    def get(self, scalar_name: str) -> ScalarHandler:
        """Get the handler for a scalar type."""
        try:
            return self._handlers[scalar_name]
        except KeyError:
            raise LookupError(f"scalar {scalar_name} has no registered handler") from None

    def has(self, scalar_name: str) -> bool:
        """Check if a handler is registered for a scalar type."""
        return scalar_name in self._handlers

    def get_all_imports(self, scalar_names=None) -> set:
        """Get the import statements needed for the given scalars, or for all registered handlers."""
        names = self._handlers if scalar_names is None else scalar_names
        return {self.get(name).import_statement for name in names if self.get(name).import_statement}
