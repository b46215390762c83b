"""
Configurações centralizadas do schema-mysql.

Uso:
    from schema_mysql.config import configure, get_settings

    configure(minimal=True)
    settings = get_settings()

Configuração via .env (prefixo SCHEMA_MYSQL_):
    SCHEMA_MYSQL_STRICT_TYPES=true
    SCHEMA_MYSQL_DEFAULT_ENGINE=MyISAM

Resolução de .env por ambiente:
    Precedência (maior para menor):
    1. Variáveis de ambiente do OS
    2. .env.{ENVIRONMENT} (ex: .env.production)
    3. .env (base)
    4. Defaults da classe Settings
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Literal

from pydantic import Field as PydanticField
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("schema_mysql.config")


def _resolve_env_files() -> tuple[str, ...]:
    """
    Resolve .env files baseado na variável ENVIRONMENT.

    Returns:
        Tupla de paths de .env files para carregar
    """
    env = os.environ.get("ENVIRONMENT", "development")
    files: list[str] = []

    if Path(".env").is_file():
        files.append(".env")

    env_file = f".env.{env}"
    if Path(env_file).is_file():
        files.append(env_file)

    # pydantic ignora .env inexistente
    return tuple(files) if files else (".env",)


class Settings(BaseSettings):
    """
    Configurações do gerador de DDL.

    Variáveis de ambiente carregadas automaticamente com prefixo
    SCHEMA_MYSQL_ (ex: SCHEMA_MYSQL_MINIMAL=true).
    """

    model_config = SettingsConfigDict(
        env_prefix="SCHEMA_MYSQL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # =========================================================================
    # Output shape
    # =========================================================================

    emit_indexes: bool = PydanticField(
        default=True,
        description="Inclui PRIMARY KEY / KEY no CREATE TABLE",
    )
    emit_collation: bool = PydanticField(
        default=True,
        description="Inclui COLLATE nas colunas enum/string/set",
    )
    emit_table_options: bool = PydanticField(
        default=True,
        description="Inclui CHARSET / COLLATE / ENGINE ao final da tabela",
    )
    minimal: bool = PydanticField(
        default=False,
        description="Saída mínima: sem índices, collation ou opções de tabela",
    )
    strict_types: bool = PydanticField(
        default=False,
        description="Rejeita nomes de tipo desconhecidos em vez de repassá-los",
    )

    # =========================================================================
    # Table defaults (usados na reflexão de tabelas SQLAlchemy)
    # =========================================================================

    default_charset: str = PydanticField(
        default="utf8mb4",
        description="CHARSET quando a tabela não define mysql_charset",
    )
    default_collation: str = PydanticField(
        default="utf8mb4_0900_ai_ci",
        description="COLLATE quando a tabela não define mysql_collate",
    )
    default_engine: str = PydanticField(
        default="InnoDB",
        description="ENGINE quando a tabela não define mysql_engine",
    )

    # =========================================================================
    # Logging
    # =========================================================================

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = PydanticField(
        default="WARNING",
        description="Nível de log usado pela CLI",
    )


# =========================================================================
# GLOBAL SETTINGS SINGLETON
# =========================================================================

_settings: Settings | None = None


def get_settings() -> Settings:
    """Retorna o singleton de Settings, criando-o na primeira chamada."""
    global _settings

    if _settings is None:
        _settings = Settings(_env_file=_resolve_env_files())

    return _settings


def configure(**overrides: Any) -> Settings:
    """
    Configura o gerador antes do uso.

    Args:
        **overrides: Valores para sobrescrever

    Returns:
        Settings configurado

    Exemplo:
        configure(minimal=True, default_engine="MyISAM")
    """
    global _settings

    if overrides:
        known_fields = set(Settings.model_fields.keys())
        unknown = set(overrides.keys()) - known_fields
        if unknown:
            logger.warning(
                "Unknown settings keys passed to configure(): %s.",
                ", ".join(sorted(unknown)),
            )

    _settings = Settings(_env_file=_resolve_env_files(), **overrides)
    return _settings


def is_configured() -> bool:
    """Verifica se as configurações já foram carregadas."""
    return _settings is not None


def reset_settings() -> None:
    """Reseta configurações. Útil para testes."""
    global _settings
    _settings = None


__all__ = [
    "Settings",
    "get_settings",
    "configure",
    "is_configured",
    "reset_settings",
]
