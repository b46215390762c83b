"""
Models da aplicação de exemplo.

Demonstra:
- Seleção de tipo inteiro pelo tamanho (SmallInteger, Integer, unsigned)
- Strings de tamanho fixo e variável, texto longo
- Defaults literais e collation por coluna
- Índices únicos, compostos e com prefix length
"""

from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import (
    CHAR,
    Boolean,
    Date,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Numeric,
    SmallInteger,
    String,
    Text,
)
from sqlalchemy.dialects import mysql
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base declarativa dos models de exemplo."""


class User(Base):
    """
    Model de usuário.

    Gera:
        CREATE TABLE `users` (
        `id` int NOT NULL AUTO_INCREMENT,
        `email` varchar(255) NOT NULL,
        ...
    """

    __tablename__ = "users"
    __table_args__ = (
        Index("uq_users_email", "email", unique=True, mysql_length=191),
        {"mysql_engine": "InnoDB", "mysql_charset": "utf8mb4"},
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    email: Mapped[str] = mapped_column(String(255))
    name: Mapped[str] = mapped_column(String(100, collation="utf8mb4_unicode_ci"))
    status: Mapped[str] = mapped_column(
        Enum("active", "blocked", name="user_status"),
        default="active",
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.now)


class Post(Base):
    """
    Model de post/artigo.

    Demonstra inteiro unsigned, decimal e texto sem limite (longtext).
    """

    __tablename__ = "posts"
    __table_args__ = (
        Index("ix_posts_author_published", "author_id", "published_on"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    author_id: Mapped[int] = mapped_column(ForeignKey("users.id"))
    title: Mapped[str] = mapped_column(String(200))
    content: Mapped[str] = mapped_column(Text)
    views_count: Mapped[int] = mapped_column(mysql.INTEGER(unsigned=True), default=0)
    rating: Mapped[float] = mapped_column(Numeric(3, 2), default=0)
    published_on: Mapped[date | None] = mapped_column(Date)


class Tag(Base):
    """
    Model de tag para posts.

    Exemplo simples: chave smallint, código de tamanho fixo.
    """

    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(SmallInteger, primary_key=True)
    name: Mapped[str] = mapped_column(String(50), unique=True)
    code: Mapped[str] = mapped_column(CHAR(8), default="")
