from __future__ import annotations

from typing import Any

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def quote_ident(name: str) -> str:
    return '"%s"' % name.replace('"', '""')


class UpdateBuilder:
    """
    Assembles `UPDATE "<table>" SET "a" = ?, "b" = ? WHERE "<key>" = ?`.

    Bind values are kept in the order columns were added; the key value is
    always appended last by build().
    """

    def __init__(self, table: str, key_column: str) -> None:
        self.table = table
        self.key_column = key_column
        self._columns: list[str] = []
        self._values: list[Any] = []

    def set(self, column: str, value: Any) -> "UpdateBuilder":
        self._columns.append(column)
        self._values.append(value)
        return self

    def set_present(self, payload: dict[str, Any], columns: tuple[str, ...]) -> "UpdateBuilder":
        # Presence, not truthiness: "" is a value, a missing key is not.
        for col in columns:
            if col in payload:
                self.set(col, payload[col])
        return self

    @property
    def columns(self) -> list[str]:
        return list(self._columns)

    def has_changes(self) -> bool:
        return bool(self._columns)

    def build(self, key_value: Any) -> tuple[str, list[Any]]:
        if not self._columns:
            raise ValueError("No columns to update")
        clause = ", ".join(f"{quote_ident(col)} = ?" for col in self._columns)
        sql = f"UPDATE {quote_ident(self.table)} SET {clause} WHERE {quote_ident(self.key_column)} = ?"
        return sql, [*self._values, key_value]


def coerce_customer_id(raw: Any) -> Any:
    """
    Query-string ids arrive as text. Plain ASCII decimal strings within the
    signed 64-bit range become ints; anything else is bound as given.
    """
    if not isinstance(raw, str):
        return raw
    s = raw.strip()
    if not (s.isascii() and s.lstrip("-").isdigit() and s.count("-") <= 1):
        return raw
    value = int(s)
    if not INT64_MIN <= value <= INT64_MAX:
        return raw
    return value
