"""
MySQL CREATE TABLE generator.

Translates schema_mysql.schema objects into literal MySQL DDL. Every method
is a pure function of its argument: the instance only carries the output
options captured at construction.

Usage:
    from schema_mysql import SchemaToMysql

    ddl = SchemaToMysql().sql(table)

    # Without indexes, column collation and table options
    ddl = SchemaToMysql(minimal=True).sql(table)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from datetime import date, datetime, time, timezone
from typing import Any

from schema_mysql.config import get_settings
from schema_mysql.exceptions import UnknownTypeError
from schema_mysql.schema import UNDEFINED, Column, Index, Table, Type
from schema_mysql.types import (
    COLLATABLE_TYPES,
    TypeSql,
    get_type_sql,
    is_known_type,
    quote_value,
)

logger = logging.getLogger("schema_mysql.generator")


class SchemaToMysql:
    """
    SQL generator for MySQL / MariaDB CREATE TABLE statements.

    Options left to None are read from get_settings():
    - emit_indexes: PRIMARY KEY / KEY clauses
    - emit_collation: COLLATE on enum/string/set columns
    - emit_table_options: CHARSET / COLLATE / ENGINE suffix
    - minimal: turns the three options above off unless they are passed explicitly
    - strict: raise UnknownTypeError instead of passing unknown type names through

    type_mapping overrides the global type registry for this instance only.
    """

    def __init__(
        self,
        *,
        emit_indexes: bool | None = None,
        emit_collation: bool | None = None,
        emit_table_options: bool | None = None,
        minimal: bool | None = None,
        strict: bool | None = None,
        type_mapping: Mapping[str, TypeSql] | None = None,
    ) -> None:
        settings = get_settings()
        if minimal is None:
            minimal = settings.minimal

        # explicit flags win over minimal
        def option(value: bool | None, default: bool) -> bool:
            if value is not None:
                return value
            return False if minimal else default

        self.emit_indexes = option(emit_indexes, settings.emit_indexes)
        self.emit_collation = option(emit_collation, settings.emit_collation)
        self.emit_table_options = option(emit_table_options, settings.emit_table_options)
        self.strict = settings.strict_types if strict is None else strict
        self.type_mapping: dict[str, TypeSql] = dict(type_mapping or {})

    # ── Columns ───────────────────────────────────────────────────────

    def column_sql(self, column: Column) -> str:
        """Full column definition: name, type and modifiers."""
        parts = ["`" + column.name + "` " + self.type_sql(column.type, column.name)]
        if column.can_be_null is False:
            parts.append(" NOT NULL")
        if column.default is not UNDEFINED:
            parts.append(" DEFAULT " + self.default_sql(column.default))
        if column.auto_increment:
            parts.append(" AUTO_INCREMENT")
        if (
            self.emit_collation
            and column.type.name in COLLATABLE_TYPES
            and column.type.collate
        ):
            parts.append(" COLLATE " + column.type.collate)
        return "".join(parts)

    def columns_sql(self, columns: Iterable[Column]) -> str:
        return ",\n".join(self.column_sql(column) for column in columns)

    # ── Default formatting ────────────────────────────────────────────

    def default_sql(self, value: Any) -> str:
        """
        Format a Python value as a DEFAULT literal.

        Datetimes are written in UTC, naive ones being taken as UTC already.
        A datetime at exact UTC midnight is written as a date only.
        """
        if value is None:
            return "NULL"
        if isinstance(value, str):
            return quote_value(value)
        if isinstance(value, datetime):
            if value.tzinfo is not None:
                value = value.astimezone(timezone.utc).replace(tzinfo=None)
            if value.time() == time(0):
                return "'" + value.date().isoformat() + "'"
            return "'" + value.isoformat(" ", "seconds") + "'"
        if isinstance(value, date):
            return "'" + value.isoformat() + "'"
        if isinstance(value, time):
            return "'" + value.replace(tzinfo=None).isoformat("seconds") + "'"
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    # ── Indexes ───────────────────────────────────────────────────────

    def index_sql(self, index: Index) -> str:
        keys_sql = " (" + ",".join(
            "`" + key.column_name + "`" + (f"({key.length})" if key.length else "")
            for key in index.keys
        ) + ")"
        if index.is_primary:
            return "PRIMARY KEY" + keys_sql
        return ("UNIQUE " if index.is_unique else "") + "KEY `" + index.name + "`" + keys_sql

    def indexes_sql(self, indexes: Iterable[Index]) -> str:
        return ",\n".join(self.index_sql(index) for index in indexes)

    # ── Table ─────────────────────────────────────────────────────────

    def sql(self, table: Table) -> str:
        """Return the full CREATE TABLE statement, without a trailing semicolon."""
        logger.debug("Generating CREATE TABLE for '%s'", table.name)
        columns_sql = self.columns_sql(table.columns)
        indexes_sql = self.indexes_sql(table.indexes) if self.emit_indexes else ""
        return (
            self.table_sql(table) + " (\n"
            + columns_sql
            + ("," + indexes_sql if indexes_sql else "") + "\n)"
            + self.table_sql_end(table)
        )

    def table_sql(self, table: Table) -> str:
        return "CREATE TABLE `" + table.name + "`"

    def table_sql_end(self, table: Table) -> str:
        if not self.emit_table_options:
            return ""
        return (
            " CHARSET " + table.charset
            + " COLLATE " + table.collation
            + " ENGINE " + table.engine
        )

    def statements(self, tables: Iterable[Table]) -> Iterator[str]:
        """Yield one CREATE TABLE statement per table."""
        for table in tables:
            yield self.sql(table)

    def script(self, tables: Iterable[Table]) -> str:
        """Join statements into a ';'-terminated script."""
        statements = list(self.statements(tables))
        if not statements:
            return ""
        return ";\n\n".join(statements) + ";\n"

    # ── Types ─────────────────────────────────────────────────────────

    def type_sql(self, type_: Type, column_name: str | None = None) -> str:
        """
        Map a logical type to its MySQL type token and modifiers.

        Unregistered names are emitted verbatim unless strict is set.
        UNSIGNED and ZEROFILL apply to every type.
        """
        function = self.type_mapping.get(type_.name) or get_type_sql(type_.name)
        if function is not None:
            type_sql = function(type_)
        else:
            if not is_known_type(type_.name):
                if self.strict:
                    raise UnknownTypeError(type_.name, column=column_name)
                logger.debug("Passing unknown type '%s' through verbatim", type_.name)
            type_sql = type_.name
        return (
            type_sql
            + (" UNSIGNED" if type_.signed is False else "")
            + (" ZEROFILL" if type_.zero_fill else "")
        )


__all__ = ["SchemaToMysql"]
