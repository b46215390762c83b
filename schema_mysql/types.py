"""
Logical type to MySQL type mapping.

Each logical type name maps to a function returning the MySQL type token.
Names without a registered function are emitted verbatim by the generator.

Usage:
    from schema_mysql.types import register_type

    @register_type("uuid")
    def uuid_sql(type_: Type) -> str:
        return "char(36)"
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, overload

if TYPE_CHECKING:
    from schema_mysql.schema import Type

TypeSql = Callable[["Type"], str]


_TYPES: dict[str, TypeSql] = {}

# Type names whose columns accept a COLLATE modifier
COLLATABLE_TYPES = frozenset({"enum", "string", "set"})

# Native MySQL type names accepted verbatim in strict mode
MYSQL_TYPES = frozenset({
    "bigint", "binary", "bit", "blob", "bool", "boolean", "char", "date",
    "datetime", "dec", "decimal", "double", "enum", "float", "geometry",
    "int", "integer", "json", "linestring", "longblob", "longtext",
    "mediumblob", "mediumint", "mediumtext", "multilinestring",
    "multipoint", "multipolygon", "numeric", "point", "polygon", "real",
    "set", "smallint", "text", "time", "timestamp", "tinyblob", "tinyint",
    "tinytext", "varbinary", "varchar", "year",
})

# (upper bound, type) pairs, largest first
SIGNED_INTEGER_RANGES = (
    (2_147_483_647, "bigint"),
    (8_388_607, "int"),
    (32_767, "mediumint"),
    (127, "smallint"),
)
UNSIGNED_INTEGER_RANGES = (
    (4_294_967_295, "bigint"),
    (16_777_215, "int"),
    (65_535, "mediumint"),
    (255, "smallint"),
)
# Decimal digit counts
INTEGER_DIGITS = (
    (9, "bigint"),
    (7, "int"),
    (4, "mediumint"),
    (2, "smallint"),
)
STRING_LENGTHS = (
    (16_777_215, "longtext"),
    (65_535, "mediumtext"),
    (255, "text"),
)


@overload
def register_type(name: str, function: TypeSql) -> TypeSql: ...
@overload
def register_type(name: str, function: None = None) -> Callable[[TypeSql], TypeSql]: ...


def register_type(name: str, function: TypeSql | None = None):
    """
    Register the SQL function of a logical type name.

    Works as a plain call or as a decorator. Registering an existing name
    replaces its function.
    """
    if function is not None:
        _TYPES[name] = function
        return function

    def decorator(func: TypeSql) -> TypeSql:
        _TYPES[name] = func
        return func

    return decorator


def unregister_type(name: str) -> None:
    """Remove a registered type; its name falls back to passthrough."""
    _TYPES.pop(name, None)


def get_type_sql(name: str) -> TypeSql | None:
    """Return the SQL function registered for `name`, or None."""
    return _TYPES.get(name)


def registered_types() -> dict[str, TypeSql]:
    """Return a copy of the registry."""
    return dict(_TYPES)


def is_known_type(name: str) -> bool:
    """Check whether `name` is registered or a native MySQL type."""
    return name in _TYPES or name.split("(")[0].strip().lower() in MYSQL_TYPES


def _pick(value: int, ranges: tuple[tuple[int, str], ...], smallest: str) -> str:
    for bound, type_name in ranges:
        if value > bound:
            return type_name
    return smallest


def quote_value(value: str) -> str:
    """Single-quote a string, doubling embedded quotes."""
    return "'" + value.replace("'", "''") + "'"


# ── Built-in types ────────────────────────────────────────────────────


@register_type("decimal")
def decimal_sql(type_: "Type") -> str:
    return f"decimal({type_.length},{type_.precision})"


@register_type("integer")
def integer_sql(type_: "Type") -> str:
    """
    Smallest integer type covering the range.

    max_value wins when present; otherwise length is a count of decimal
    digits, and no length at all means bigint.
    """
    if type_.max_value is not None:
        ranges = SIGNED_INTEGER_RANGES if type_.signed else UNSIGNED_INTEGER_RANGES
        return _pick(type_.max_value, ranges, "tinyint")
    if type_.length is None:
        return "bigint"
    return _pick(type_.length, INTEGER_DIGITS, "tinyint")


@register_type("string")
def string_sql(type_: "Type") -> str:
    length = type_.length
    if length is None:
        return "longtext"
    text_type = _pick(length, STRING_LENGTHS, "")
    if text_type:
        return text_type
    return ("var" if type_.variable_length else "") + f"char({length})"


def _values_sql(type_: "Type") -> str:
    if not type_.values:
        return type_.name
    return type_.name + "(" + ",".join(quote_value(str(v)) for v in type_.values) + ")"


register_type("enum", _values_sql)
register_type("set", _values_sql)


__all__ = [
    "TypeSql",
    "COLLATABLE_TYPES",
    "MYSQL_TYPES",
    "register_type",
    "unregister_type",
    "get_type_sql",
    "registered_types",
    "is_known_type",
    "quote_value",
    "decimal_sql",
    "integer_sql",
    "string_sql",
]
