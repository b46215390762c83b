"""
Exception classes for schema-mysql.

Exception Hierarchy:
    SchemaMysqlError (base)
    ├── UnknownTypeError
    └── TargetError

The generator itself is permissive and raises nothing by default.
UnknownTypeError only appears when strict type checking is enabled.

Example:
    from schema_mysql import SchemaToMysql
    from schema_mysql.exceptions import UnknownTypeError

    try:
        SchemaToMysql(strict=True).sql(table)
    except UnknownTypeError as exc:
        print(exc.type_name)
"""

from __future__ import annotations

from typing import Any


class SchemaMysqlError(Exception):
    """
    Base exception for schema-mysql.

    Attributes:
        message: Human-readable error message
        code: Machine-readable error code
        details: Additional error details
    """

    message: str = "An error occurred"
    code: str = "error"

    def __init__(
        self,
        message: str | None = None,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.message
        self.code = code or self.code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary."""
        result = {
            "message": self.message,
            "code": self.code,
        }
        if self.details:
            result["details"] = self.details
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, code={self.code!r})"


class UnknownTypeError(SchemaMysqlError):
    """Raised in strict mode for a type name with no MySQL mapping."""

    message = "Unknown column type"
    code = "unknown_type"

    def __init__(self, type_name: str, column: str | None = None) -> None:
        self.type_name = type_name
        details: dict[str, Any] = {"type": type_name}
        if column is not None:
            details["column"] = column
        super().__init__(
            message=f"Unknown column type '{type_name}'",
            details=details,
        )


class TargetError(SchemaMysqlError):
    """Raised when a CLI target cannot be imported or holds no tables."""

    message = "Invalid target"
    code = "invalid_target"

    def __init__(self, target: str, reason: str) -> None:
        self.target = target
        super().__init__(
            message=f"Cannot load '{target}': {reason}",
            details={"target": target},
        )
