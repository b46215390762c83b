"""
schema-mysql - MySQL CREATE TABLE generation from schema objects.

Translates tables, columns, types and indexes into literal MySQL DDL:
- Range-driven integer and length-driven string type selection
- Default value escaping (strings, dates, scalars)
- PRIMARY KEY / UNIQUE KEY / KEY clauses with prefix lengths
- CHARSET / COLLATE / ENGINE table options
- SQLAlchemy metadata reflection

Usage:
    from schema_mysql import SchemaToMysql, Table, Column, Type, Index, IndexKey

    table = Table(
        name="users",
        columns=(
            Column("id", Type("integer", max_value=2_147_483_647), can_be_null=False, auto_increment=True),
            Column("email", Type("string", length=255, variable_length=True)),
        ),
        indexes=(Index("primary", keys=(IndexKey("id"),)),),
    )
    print(SchemaToMysql().sql(table))
"""

from schema_mysql.config import Settings, configure, get_settings
from schema_mysql.exceptions import SchemaMysqlError, TargetError, UnknownTypeError
from schema_mysql.generator import SchemaToMysql
from schema_mysql.schema import UNDEFINED, Column, Index, IndexKey, Table, Type
from schema_mysql.types import register_type, unregister_type

__version__ = "0.1.0"

__all__ = [
    # Generator
    "SchemaToMysql",
    # Schema
    "UNDEFINED",
    "Table",
    "Column",
    "Type",
    "Index",
    "IndexKey",
    # Types
    "register_type",
    "unregister_type",
    # Config
    "Settings",
    "get_settings",
    "configure",
    # Exceptions
    "SchemaMysqlError",
    "UnknownTypeError",
    "TargetError",
]
