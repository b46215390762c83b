"""
Schema objects consumed by the DDL generator.

These are read-only descriptions of a table: the generator never mutates
them. Build them by hand or from SQLAlchemy tables with
schema_mysql.reflection.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


class _Undefined:
    """Marker for a column without a DEFAULT clause (None means NULL)."""

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __copy__(self) -> "_Undefined":
        return self

    def __deepcopy__(self, memo: dict) -> "_Undefined":
        return self


UNDEFINED: Any = _Undefined()


@dataclass(frozen=True)
class Type:
    """Logical column type."""

    name: str
    length: int | None = None
    precision: int | None = None
    max_value: int | None = None
    signed: bool = True
    zero_fill: bool = False
    variable_length: bool = False
    collate: str | None = None
    values: tuple[str, ...] = ()


@dataclass(frozen=True)
class Column:
    """Table column."""

    name: str
    type: Type
    can_be_null: bool = True
    default: Any = UNDEFINED
    auto_increment: bool = False


@dataclass(frozen=True)
class IndexKey:
    """One indexed column, with an optional prefix length."""

    column_name: str
    length: int | None = None


@dataclass(frozen=True)
class Index:
    """
    Table index.

    type is "primary", "unique" or anything else for a plain KEY.
    The name is ignored for primary keys.
    """

    type: str
    name: str = ""
    keys: tuple[IndexKey, ...] = ()

    @property
    def is_primary(self) -> bool:
        return self.type == "primary"

    @property
    def is_unique(self) -> bool:
        return self.type == "unique"


@dataclass(frozen=True)
class Table:
    """Table with its columns, indexes and storage options."""

    name: str
    columns: tuple[Column, ...] = ()
    indexes: tuple[Index, ...] = ()
    charset: str = "utf8mb4"
    collation: str = "utf8mb4_0900_ai_ci"
    engine: str = "InnoDB"


__all__ = [
    "UNDEFINED",
    "Type",
    "Column",
    "IndexKey",
    "Index",
    "Table",
]
