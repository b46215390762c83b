"""
Extração de tabelas a partir de metadata SQLAlchemy.

Converte sqlalchemy.Table (ou uma MetaData inteira) nos objetos de
schema_mysql.schema consumidos pelo gerador.

Uso:
    from schema_mysql.reflection import tables_from_metadata
    from myapp.models import Base

    for table in tables_from_metadata(Base.metadata):
        print(SchemaToMysql().sql(table))
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import (
    BigInteger,
    Boolean,
    CHAR,
    Double,
    Enum,
    Float,
    Integer,
    MetaData,
    NCHAR,
    Numeric,
    SmallInteger,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy import Column as SAColumn
from sqlalchemy import Index as SAIndex
from sqlalchemy import Table as SATable
from sqlalchemy.dialects import mysql
from sqlalchemy.exc import CompileError
from sqlalchemy.types import TypeEngine

from schema_mysql.config import Settings, get_settings
from schema_mysql.schema import UNDEFINED, Column, Index, IndexKey, Table, Type

logger = logging.getLogger("schema_mysql.reflection")


# (signed max, unsigned max) por classe de inteiro; ordem importa (subclasses primeiro)
INTEGER_RANGES: tuple[tuple[type, tuple[int, int] | None], ...] = (
    (BigInteger, None),
    (SmallInteger, (32_767, 65_535)),
    (mysql.TINYINT, (127, 255)),
    (mysql.MEDIUMINT, (8_388_607, 16_777_215)),
    (Integer, (2_147_483_647, 4_294_967_295)),
)

# Tipos de texto MySQL sem length explícito
TEXT_LENGTHS: tuple[tuple[type, int | None], ...] = (
    (mysql.MEDIUMTEXT, 16_777_215),
    (mysql.LONGTEXT, None),
)

_mysql_dialect = mysql.dialect()


def compiled_type_name(sa_type: TypeEngine[Any]) -> str:
    """Nome do tipo compilado para MySQL, em minúsculas."""
    try:
        return sa_type.compile(dialect=_mysql_dialect).lower()
    except CompileError:
        logger.debug("Cannot compile %r for MySQL, using its class name", sa_type)
        return type(sa_type).__name__.lower()


def type_from_sqlalchemy(sa_type: TypeEngine[Any]) -> Type:
    """Converte um tipo SQLAlchemy no Type lógico equivalente."""
    signed = not getattr(sa_type, "unsigned", False)
    zero_fill = bool(getattr(sa_type, "zerofill", False))
    collate = getattr(sa_type, "collation", None)

    if isinstance(sa_type, Integer):
        for integer_class, ranges in INTEGER_RANGES:
            if isinstance(sa_type, integer_class):
                max_value = None if ranges is None else ranges[0 if signed else 1]
                return Type("integer", max_value=max_value, signed=signed, zero_fill=zero_fill)

    if isinstance(sa_type, Boolean):
        return Type("tinyint(1)")

    if isinstance(sa_type, Float):
        name = "double" if isinstance(sa_type, Double) else "float"
        return Type(name, signed=signed, zero_fill=zero_fill)

    if isinstance(sa_type, Numeric):
        return Type(
            "decimal",
            length=sa_type.precision if sa_type.precision is not None else 10,
            precision=sa_type.scale if sa_type.scale is not None else 0,
            signed=signed,
            zero_fill=zero_fill,
        )

    if isinstance(sa_type, mysql.SET):
        return Type("set", values=tuple(sa_type.values), collate=collate)

    if isinstance(sa_type, Enum):
        return Type("enum", values=tuple(sa_type.enums), collate=collate)

    # CHAR(36) com hífens, não o hex de 32 do SQLAlchemy
    if isinstance(sa_type, Uuid):
        return Type("string", length=36)

    if isinstance(sa_type, mysql.TINYTEXT):
        return Type("tinytext")

    if isinstance(sa_type, Text):
        length = sa_type.length
        for text_class, text_length in TEXT_LENGTHS:
            if isinstance(sa_type, text_class):
                length = text_length
        return Type("string", length=length, collate=collate)

    if isinstance(sa_type, String):
        return Type(
            "string",
            length=sa_type.length,
            variable_length=not isinstance(sa_type, (CHAR, NCHAR)),
            collate=collate,
        )

    return Type(compiled_type_name(sa_type))


def _column_default(sa_column: SAColumn[Any]) -> Any:
    default = sa_column.default
    if default is not None and default.is_scalar:
        # Enum(PyEnum) grava o nome do membro
        if isinstance(default.arg, enum.Enum):
            return default.arg.name
        return default.arg

    server_default = sa_column.server_default
    server_arg = getattr(server_default, "arg", None)
    if isinstance(server_arg, str):
        return server_arg

    if default is not None or server_default is not None:
        logger.debug(
            "Skipping non-literal default of column '%s.%s'",
            sa_column.table.name,
            sa_column.name,
        )
    return UNDEFINED


def _is_auto_increment(sa_column: SAColumn[Any], sa_table: SATable) -> bool:
    # "auto" e "ignore_fk" seguem a regra do próprio SQLAlchemy
    if sa_column.autoincrement is True:
        return True
    return sa_column is sa_table.autoincrement_column


def column_from_sqlalchemy(sa_column: SAColumn[Any], sa_table: SATable) -> Column:
    """Converte uma coluna SQLAlchemy."""
    return Column(
        name=sa_column.name,
        type=type_from_sqlalchemy(sa_column.type),
        can_be_null=bool(sa_column.nullable),
        default=_column_default(sa_column),
        auto_increment=_is_auto_increment(sa_column, sa_table),
    )


def _index_keys(
    columns: list[SAColumn[Any]],
    lengths: int | Mapping[str, int] | None = None,
) -> tuple[IndexKey, ...]:
    keys = []
    for column in columns:
        if isinstance(lengths, Mapping):
            length = lengths.get(column.name)
        else:
            length = lengths
        keys.append(IndexKey(column.name, length))
    return tuple(keys)


def _index_name(name: Any, columns: list[SAColumn[Any]]) -> str:
    # Sem nome: MySQL usa o nome da primeira coluna
    if isinstance(name, str) and name:
        return name
    return columns[0].name


def indexes_from_sqlalchemy(sa_table: SATable) -> tuple[Index, ...]:
    """
    Extrai índices da tabela.

    Ordem: primary key, unique constraints, depois Index() por nome.
    """
    indexes: list[Index] = []

    pk_columns = list(sa_table.primary_key.columns)
    if pk_columns:
        indexes.append(Index("primary", "PRIMARY", _index_keys(pk_columns)))

    uniques = [
        constraint
        for constraint in sa_table.constraints
        if isinstance(constraint, UniqueConstraint) and len(constraint.columns)
    ]
    uniques.sort(key=lambda c: (c.name or "", [col.name for col in c.columns]))
    for constraint in uniques:
        columns = list(constraint.columns)
        indexes.append(Index("unique", _index_name(constraint.name, columns), _index_keys(columns)))

    sa_indexes: list[SAIndex] = sorted(sa_table.indexes, key=lambda i: i.name or "")
    for sa_index in sa_indexes:
        columns = list(sa_index.columns)
        if not columns:
            logger.debug("Skipping expression index '%s'", sa_index.name)
            continue
        indexes.append(Index(
            "unique" if sa_index.unique else "key",
            _index_name(sa_index.name, columns),
            _index_keys(columns, sa_index.dialect_kwargs.get("mysql_length")),
        ))

    return tuple(indexes)


def table_from_sqlalchemy(sa_table: SATable, settings: Settings | None = None) -> Table:
    """
    Converte um sqlalchemy.Table em Table.

    CHARSET / COLLATE / ENGINE vêm de mysql_charset, mysql_collate e
    mysql_engine; sem eles, dos defaults de Settings.
    """
    settings = settings or get_settings()
    options = sa_table.dialect_kwargs

    return Table(
        name=sa_table.name,
        columns=tuple(column_from_sqlalchemy(c, sa_table) for c in sa_table.columns),
        indexes=indexes_from_sqlalchemy(sa_table),
        charset=(
            options.get("mysql_charset")
            or options.get("mysql_default_charset")
            or settings.default_charset
        ),
        collation=options.get("mysql_collate") or settings.default_collation,
        engine=options.get("mysql_engine") or settings.default_engine,
    )


def tables_from_metadata(
    metadata: MetaData,
    settings: Settings | None = None,
    only: list[str] | None = None,
) -> list[Table]:
    """Converte todas as tabelas da metadata, em ordem de dependência."""
    tables = []
    for sa_table in metadata.sorted_tables:
        if only and sa_table.name not in only:
            continue
        tables.append(table_from_sqlalchemy(sa_table, settings))
    return tables


__all__ = [
    "compiled_type_name",
    "type_from_sqlalchemy",
    "column_from_sqlalchemy",
    "indexes_from_sqlalchemy",
    "table_from_sqlalchemy",
    "tables_from_metadata",
]
