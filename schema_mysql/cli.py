"""
CLI do schema-mysql.

Uso:
    schema-mysql <module:attribute> [options]

O alvo pode ser uma MetaData SQLAlchemy, uma base declarativa (qualquer
objeto com .metadata), um model (com __table__) ou um Table.

Exemplos:
    schema-mysql example.models:Base
    schema-mysql example.models:Base --table users --minimal
    schema-mysql myapp.db:metadata --strict > schema.sql
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from typing import Any

from sqlalchemy import MetaData
from sqlalchemy import Table as SATable

from schema_mysql import __version__
from schema_mysql.config import configure, get_settings
from schema_mysql.exceptions import SchemaMysqlError, TargetError
from schema_mysql.generator import SchemaToMysql
from schema_mysql.reflection import table_from_sqlalchemy, tables_from_metadata
from schema_mysql.schema import Table

logger = logging.getLogger("schema_mysql.cli")


# Cores para output
class Colors:
    FAIL = '\033[91m'
    ENDC = '\033[0m'


def color(text: str, c: str) -> str:
    """Aplica cor ao texto."""
    return f"{c}{text}{Colors.ENDC}"


def error(text: str) -> str:
    return color(text, Colors.FAIL)


def load_target(target: str) -> Any:
    """Importa `module:attribute` e retorna o atributo."""
    module_name, _, attribute = target.partition(":")
    if not module_name or not attribute:
        raise TargetError(target, "expected 'module:attribute'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise TargetError(target, str(exc)) from exc

    obj: Any = module
    for part in attribute.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise TargetError(target, f"no attribute '{part}'") from exc
    return obj


def resolve_tables(obj: Any, target: str, only: list[str] | None = None) -> list[Table]:
    """Extrai as tabelas de uma MetaData, base declarativa, model ou Table."""
    settings = get_settings()

    if isinstance(obj, SATable):
        tables = [table_from_sqlalchemy(obj, settings)]
    elif isinstance(getattr(obj, "__table__", None), SATable):
        tables = [table_from_sqlalchemy(obj.__table__, settings)]
    else:
        metadata = obj if isinstance(obj, MetaData) else getattr(obj, "metadata", None)
        if not isinstance(metadata, MetaData):
            raise TargetError(target, "not a MetaData, declarative base, model or Table")
        tables = tables_from_metadata(metadata, settings)

    if only:
        tables = [table for table in tables if table.name in only]
        missing = sorted(set(only) - {table.name for table in tables})
        if missing:
            raise TargetError(target, "unknown table(s): " + ", ".join(missing))

    if not tables:
        raise TargetError(target, "no tables found")
    return tables


def cmd_ddl(args: argparse.Namespace) -> int:
    """Imprime o CREATE TABLE de cada tabela do alvo."""
    overrides: dict[str, Any] = {}
    if args.minimal:
        overrides["minimal"] = True
    if args.strict:
        overrides["strict_types"] = True
    if args.no_indexes:
        overrides["emit_indexes"] = False
    if args.no_collation:
        overrides["emit_collation"] = False
    if args.no_table_options:
        overrides["emit_table_options"] = False
    if args.engine:
        overrides["default_engine"] = args.engine
    if args.charset:
        overrides["default_charset"] = args.charset
    if args.collation:
        overrides["default_collation"] = args.collation
    if overrides:
        configure(**overrides)

    try:
        tables = resolve_tables(load_target(args.target), args.target, args.table)
        script = SchemaToMysql().script(tables)
    except SchemaMysqlError as exc:
        print(error(f"Error: {exc.message}"), file=sys.stderr)
        return 1

    logger.info("Generated %d CREATE TABLE statement(s)", len(tables))
    sys.stdout.write(script)
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Cria o parser de argumentos."""
    parser = argparse.ArgumentParser(
        prog="schema-mysql",
        description="Generate MySQL CREATE TABLE statements from SQLAlchemy metadata",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  schema-mysql example.models:Base                   All tables
  schema-mysql example.models:Base -t users          One table
  schema-mysql example.models:Base --minimal         No indexes, collation or table options
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("target", help="module:attribute holding a MetaData, base, model or Table")
    parser.add_argument(
        "-t", "--table",
        action="append",
        help="Only this table (repeatable)",
    )
    parser.add_argument("--minimal", action="store_true", help="Omit indexes, collation and table options")
    parser.add_argument("--strict", action="store_true", help="Fail on unknown column types")
    parser.add_argument("--no-indexes", action="store_true", help="Omit PRIMARY KEY / KEY clauses")
    parser.add_argument("--no-collation", action="store_true", help="Omit column COLLATE")
    parser.add_argument("--no-table-options", action="store_true", help="Omit CHARSET / COLLATE / ENGINE")
    parser.add_argument("--engine", help="Default ENGINE for tables without mysql_engine")
    parser.add_argument("--charset", help="Default CHARSET for tables without mysql_charset")
    parser.add_argument("--collation", help="Default COLLATE for tables without mysql_collate")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.set_defaults(func=cmd_ddl)
    return parser


def cli(argv: list[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    level = "DEBUG" if args.verbose else get_settings().log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    return args.func(args)


def main() -> None:
    """Entry point principal."""
    sys.exit(cli())


if __name__ == "__main__":
    main()
