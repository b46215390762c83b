"""
Configurações de teste compartilhadas.
"""

import os

import pytest

from schema_mysql import SchemaToMysql
from schema_mysql.config import reset_settings
from schema_mysql.schema import Column, Index, IndexKey, Table, Type


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Settings novos por teste, sem .env nem variáveis SCHEMA_MYSQL_*."""
    for key in list(os.environ):
        if key.upper().startswith("SCHEMA_MYSQL_"):
            monkeypatch.delenv(key)
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def generator():
    return SchemaToMysql()


@pytest.fixture
def minimal_generator():
    return SchemaToMysql(minimal=True)


@pytest.fixture
def users_table():
    """Tabela com chave primária, índice único e collation."""
    return Table(
        name="users",
        columns=(
            Column(
                "id",
                Type("integer", max_value=2_147_483_647, signed=False),
                can_be_null=False,
                auto_increment=True,
            ),
            Column(
                "email",
                Type("string", length=255, variable_length=True, collate="utf8mb4_bin"),
                can_be_null=False,
            ),
            Column("name", Type("string", length=100, variable_length=True), default="O'Brien"),
        ),
        indexes=(
            Index("primary", keys=(IndexKey("id"),)),
            Index("unique", "uq_email", (IndexKey("email", 191),)),
        ),
        charset="utf8mb4",
        collation="utf8mb4_unicode_ci",
        engine="InnoDB",
    )
