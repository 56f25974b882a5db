"""Untyped values whose schema is defined by the caller (policy values, resource data)."""

from __future__ import annotations

import json
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from .errors import TurbotError


class ValueKind(StrEnum):
    NULL = "null"
    STRING = "string"
    NUMBER = "number"
    BOOL = "bool"
    LIST = "list"
    MAP = "map"


class TypeMismatchError(TurbotError):
    """Raised when a dynamic value is read as a kind it does not hold."""

    def __init__(self, expected: ValueKind, actual: ValueKind) -> None:
        super().__init__(f"Expected a {expected} value but found {actual}")
        self.expected = expected
        self.actual = actual


def _kind_of(raw: object) -> ValueKind:
    # bool before number: bool is a subclass of int
    if raw is None:
        return ValueKind.NULL
    if isinstance(raw, bool):
        return ValueKind.BOOL
    if isinstance(raw, int | float):
        return ValueKind.NUMBER
    # YAML decodes unquoted timestamps to dates; they read back as strings
    if isinstance(raw, str | date):
        return ValueKind.STRING
    if isinstance(raw, Mapping):
        return ValueKind.MAP
    if isinstance(raw, Sequence):
        return ValueKind.LIST
    raise TypeError(f"Unsupported dynamic value type: {type(raw).__name__}")


@dataclass(frozen=True, slots=True)
class DynamicValue:
    """A decoded JSON value; nested containers are wrapped lazily on access."""

    raw: object = None

    def __post_init__(self) -> None:
        _kind_of(self.raw)

    @property
    def kind(self) -> ValueKind:
        return _kind_of(self.raw)

    @property
    def is_null(self) -> bool:
        return self.raw is None

    def _expect(self, kind: ValueKind) -> None:
        actual = self.kind
        if actual is not kind:
            raise TypeMismatchError(kind, actual)

    def as_str(self) -> str:
        self._expect(ValueKind.STRING)
        return self.to_text()

    def as_number(self) -> int | float:
        self._expect(ValueKind.NUMBER)
        return self.raw  # type: ignore[return-value]

    def as_bool(self) -> bool:
        self._expect(ValueKind.BOOL)
        return bool(self.raw)

    def as_list(self) -> list[DynamicValue]:
        self._expect(ValueKind.LIST)
        return [DynamicValue(item) for item in self.raw]  # type: ignore[union-attr]

    def as_map(self) -> dict[str, DynamicValue]:
        self._expect(ValueKind.MAP)
        return {str(key): DynamicValue(item) for key, item in self.raw.items()}  # type: ignore[union-attr]

    def get(self, key: str) -> DynamicValue:
        """Return the member ``key`` of a map value, or a null value when absent."""

        self._expect(ValueKind.MAP)
        return DynamicValue(self.raw.get(key))  # type: ignore[union-attr]

    def to_text(self) -> str:
        """Render the value as the string stored in resource state.

        Scalars render the way YAML would read them back (``true``, ``42``,
        ``1.5``); null renders as the empty string; lists and maps render as
        compact JSON.
        """

        kind = self.kind
        if kind is ValueKind.NULL:
            return ""
        if kind is ValueKind.BOOL:
            return "true" if self.raw else "false"
        if kind is ValueKind.NUMBER:
            return _number_to_text(self.raw)  # type: ignore[arg-type]
        if kind is ValueKind.STRING:
            return self.raw.isoformat() if isinstance(self.raw, date) else str(self.raw)
        return json.dumps(self.raw, separators=(",", ":"), default=str)


def _number_to_text(number: int | float) -> str:
    if isinstance(number, float) and math.isfinite(number) and number.is_integer():
        if abs(number) < 1e21:
            return str(int(number))
    return repr(number)


NULL = DynamicValue()

__all__ = ["NULL", "DynamicValue", "TypeMismatchError", "ValueKind"]
