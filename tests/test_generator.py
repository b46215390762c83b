"""
Tests for CREATE TABLE assembly: defaults, columns, indexes and tables.
"""

from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal

import pytest

from schema_mysql import SchemaToMysql, configure
from schema_mysql.schema import UNDEFINED, Column, Index, IndexKey, Table, Type


class TestDefaultSql:
    """DEFAULT literal formatting."""

    def test_null(self, generator):
        assert generator.default_sql(None) == "NULL"

    def test_string_quotes_doubled(self, generator):
        assert generator.default_sql("O'Brien") == "'O''Brien'"

    def test_string_other_characters_untouched(self, generator):
        assert generator.default_sql("a\\b\n\"c\"") == "'a\\b\n\"c\"'"

    def test_empty_string(self, generator):
        assert generator.default_sql("") == "''"

    def test_datetime_at_utc_midnight_is_date_only(self, generator):
        value = datetime(2024, 3, 5, tzinfo=timezone.utc)
        assert generator.default_sql(value) == "'2024-03-05'"

    def test_datetime_with_time(self, generator):
        value = datetime(2024, 3, 5, 14, 7, 9, tzinfo=timezone.utc)
        assert generator.default_sql(value) == "'2024-03-05 14:07:09'"

    def test_datetime_converted_to_utc(self, generator):
        value = datetime(2024, 3, 5, 2, 0, tzinfo=timezone(timedelta(hours=2)))
        assert generator.default_sql(value) == "'2024-03-05'"

    def test_naive_datetime_taken_as_utc(self, generator):
        assert generator.default_sql(datetime(1999, 12, 31, 23, 59, 59)) == "'1999-12-31 23:59:59'"

    def test_microseconds_are_not_midnight(self, generator):
        value = datetime(2024, 1, 1, 0, 0, 0, 500_000)
        assert generator.default_sql(value) == "'2024-01-01 00:00:00'"

    def test_date(self, generator):
        assert generator.default_sql(date(2020, 2, 29)) == "'2020-02-29'"

    def test_time(self, generator):
        assert generator.default_sql(time(8, 30)) == "'08:30:00'"

    @pytest.mark.parametrize("value, expected", [
        (0, "0"),
        (-12, "-12"),
        (1.5, "1.5"),
        (Decimal("9.99"), "9.99"),
        (True, "true"),
        (False, "false"),
    ])
    def test_other_scalars_unquoted(self, generator, value, expected):
        assert generator.default_sql(value) == expected


class TestColumnSql:
    """Column definition and modifier order."""

    def test_auto_increment_id(self, generator):
        column = Column(
            "id",
            Type("integer", max_value=2_147_483_647, signed=True),
            can_be_null=False,
            auto_increment=True,
        )
        assert generator.column_sql(column) == "`id` int NOT NULL AUTO_INCREMENT"

    def test_all_modifiers_in_order(self, generator):
        column = Column(
            "status",
            Type("enum", values=("on", "off"), collate="utf8mb4_bin"),
            can_be_null=False,
            default="on",
        )
        assert generator.column_sql(column) == (
            "`status` enum('on','off') NOT NULL DEFAULT 'on' COLLATE utf8mb4_bin"
        )

    def test_nullable_without_default(self, generator):
        column = Column("bio", Type("string"))
        assert generator.column_sql(column) == "`bio` longtext"

    def test_default_null(self, generator):
        column = Column("deleted_at", Type("datetime"), default=None)
        assert generator.column_sql(column) == "`deleted_at` datetime DEFAULT NULL"

    def test_undefined_default_omitted(self, generator):
        column = Column("deleted_at", Type("datetime"), default=UNDEFINED)
        assert "DEFAULT" not in generator.column_sql(column)

    def test_falsy_default_emitted(self, generator):
        column = Column("count", Type("integer", length=3), can_be_null=False, default=0)
        assert generator.column_sql(column) == "`count` smallint NOT NULL DEFAULT 0"

    @pytest.mark.parametrize("type_name", ["enum", "string", "set"])
    def test_collate_on_text_types(self, generator, type_name):
        column = Column("c", Type(type_name, length=10, collate="latin1_bin"))
        assert generator.column_sql(column).endswith(" COLLATE latin1_bin")

    def test_no_collate_on_integer(self, generator):
        column = Column("n", Type("integer", max_value=10, collate="latin1_bin"))
        assert generator.column_sql(column) == "`n` tinyint"

    def test_no_collate_when_disabled(self):
        generator = SchemaToMysql(emit_collation=False)
        column = Column("c", Type("string", length=10, collate="latin1_bin"))
        assert generator.column_sql(column) == "`c` char(10)"

    def test_columns_joined_in_order(self, generator):
        columns = [Column("b", Type("date")), Column("a", Type("time"))]
        assert generator.columns_sql(columns) == "`b` date,\n`a` time"


class TestIndexSql:
    """PRIMARY KEY / UNIQUE KEY / KEY clauses."""

    def test_primary_key(self, generator):
        index = Index("primary", keys=(IndexKey("id"),))
        assert generator.index_sql(index) == "PRIMARY KEY (`id`)"

    def test_primary_key_ignores_name(self, generator):
        index = Index("primary", "pk_users", (IndexKey("a"), IndexKey("b")))
        assert generator.index_sql(index) == "PRIMARY KEY (`a`,`b`)"

    def test_unique_with_prefix_length(self, generator):
        index = Index("unique", "uq_email", (IndexKey("email", 191),))
        assert generator.index_sql(index) == "UNIQUE KEY `uq_email` (`email`(191))"

    def test_plain_key(self, generator):
        index = Index("key", "ix_name", (IndexKey("last"), IndexKey("first", 10)))
        assert generator.index_sql(index) == "KEY `ix_name` (`last`,`first`(10))"

    def test_unknown_kind_is_plain_key(self, generator):
        index = Index("fulltext", "ix_body", (IndexKey("body"),))
        assert generator.index_sql(index) == "KEY `ix_body` (`body`)"

    def test_zero_length_has_no_suffix(self, generator):
        index = Index("index", "ix_a", (IndexKey("a", 0),))
        assert generator.index_sql(index) == "KEY `ix_a` (`a`)"

    def test_indexes_joined(self, generator):
        indexes = [
            Index("primary", keys=(IndexKey("id"),)),
            Index("key", "ix_a", (IndexKey("a"),)),
        ]
        assert generator.indexes_sql(indexes) == "PRIMARY KEY (`id`),\nKEY `ix_a` (`a`)"


class TestTableSql:
    """Full statement assembly."""

    def test_full_statement(self, generator, users_table):
        assert generator.sql(users_table) == (
            "CREATE TABLE `users` (\n"
            "`id` int UNSIGNED NOT NULL AUTO_INCREMENT,\n"
            "`email` varchar(255) NOT NULL COLLATE utf8mb4_bin,\n"
            "`name` varchar(100) DEFAULT 'O''Brien',"
            "PRIMARY KEY (`id`),\n"
            "UNIQUE KEY `uq_email` (`email`(191))\n"
            ") CHARSET utf8mb4 COLLATE utf8mb4_unicode_ci ENGINE InnoDB"
        )

    def test_without_indexes_has_no_separator(self, generator):
        table = Table(
            "logs",
            columns=(Column("message", Type("string")),),
            charset="latin1",
            collation="latin1_swedish_ci",
            engine="MyISAM",
        )
        assert generator.sql(table) == (
            "CREATE TABLE `logs` (\n"
            "`message` longtext\n"
            ") CHARSET latin1 COLLATE latin1_swedish_ci ENGINE MyISAM"
        )

    def test_idempotent(self, generator, users_table):
        assert generator.sql(users_table) == generator.sql(users_table)

    def test_table_sql(self, generator, users_table):
        assert generator.table_sql(users_table) == "CREATE TABLE `users`"

    def test_table_sql_end(self, generator, users_table):
        assert generator.table_sql_end(users_table) == (
            " CHARSET utf8mb4 COLLATE utf8mb4_unicode_ci ENGINE InnoDB"
        )

    def test_minimal(self, minimal_generator, users_table):
        assert minimal_generator.sql(users_table) == (
            "CREATE TABLE `users` (\n"
            "`id` int UNSIGNED NOT NULL AUTO_INCREMENT,\n"
            "`email` varchar(255) NOT NULL,\n"
            "`name` varchar(100) DEFAULT 'O''Brien'\n"
            ")"
        )

    def test_minimal_with_explicit_indexes(self, users_table):
        generator = SchemaToMysql(minimal=True, emit_indexes=True)
        sql = generator.sql(users_table)

        assert "PRIMARY KEY (`id`)" in sql
        assert "COLLATE" not in sql
        assert sql.endswith("\n)")

    def test_without_table_options(self, users_table):
        generator = SchemaToMysql(emit_table_options=False)
        assert generator.sql(users_table).endswith("(`email`(191))\n)")

    def test_does_not_mutate_input(self, generator, users_table):
        before = repr(users_table)
        generator.sql(users_table)
        assert repr(users_table) == before


class TestScript:
    """Multi-table output."""

    def test_script_terminates_statements(self, generator, users_table):
        logs = Table("logs", columns=(Column("id", Type("integer")),))
        script = generator.script([users_table, logs])

        assert script.count(";\n") == 2
        assert ";\n\nCREATE TABLE `logs`" in script
        assert script.endswith("ENGINE InnoDB;\n")

    def test_empty_script(self, generator):
        assert generator.script([]) == ""

    def test_statements_preserve_order(self, generator):
        tables = [Table("b", columns=(Column("x", Type("date")),)), Table("a", columns=(Column("x", Type("date")),))]
        statements = list(generator.statements(tables))

        assert statements[0].startswith("CREATE TABLE `b`")
        assert statements[1].startswith("CREATE TABLE `a`")


class TestSettingsDefaults:
    """Unset options come from settings."""

    def test_minimal_from_settings(self, users_table):
        configure(minimal=True)
        assert SchemaToMysql().sql(users_table).endswith("\n)")

    def test_strict_from_settings(self):
        configure(strict_types=True)
        assert SchemaToMysql().strict is True

    def test_explicit_argument_wins(self):
        configure(emit_indexes=False)
        assert SchemaToMysql(emit_indexes=True).emit_indexes is True
