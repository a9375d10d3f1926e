"""SQL dialect variants and the name-keyed dialect table."""

from __future__ import annotations

from abc import ABC, abstractmethod

from sqlalchemy.dialects.mysql.base import MySQLDialect
from sqlalchemy.dialects.postgresql.base import PGDialect
from sqlalchemy.engine import Dialect


class SqlDialect(ABC):
    """Stateless set of SQL rules for one database engine.

    Variants are singletons: drivers reference them by identity and
    never copy them.
    """

    name: str = ""
    sqlalchemy_dialect_cls: type[Dialect] = Dialect

    def sqlalchemy_dialect(self) -> Dialect:
        """Return a fresh SQLAlchemy dialect for this engine."""
        return self.sqlalchemy_dialect_cls()

    @abstractmethod
    def placeholder(self, position: int) -> str:
        """Render the bind placeholder for the 1-based parameter ``position``."""

    def quote_identifier(self, identifier: str) -> str:
        """Quote a table or column name using the engine's quoting rules."""
        return self.sqlalchemy_dialect().identifier_preparer.quote_identifier(identifier)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class PostgresDialect(SqlDialect):
    name = "postgres"
    sqlalchemy_dialect_cls = PGDialect

    def placeholder(self, position: int) -> str:
        if position < 1:
            raise ValueError(f"Placeholder positions start at 1, got {position}")
        return f"${position}"


class MySqlDialect(SqlDialect):
    name = "mysql"
    sqlalchemy_dialect_cls = MySQLDialect

    def placeholder(self, position: int) -> str:
        if position < 1:
            raise ValueError(f"Placeholder positions start at 1, got {position}")
        return "?"


POSTGRES = PostgresDialect()
MYSQL = MySqlDialect()

_DIALECTS: dict[str, SqlDialect] = {
    POSTGRES.name: POSTGRES,
    MYSQL.name: MYSQL,
}


def dialect_by_name(name: str) -> SqlDialect | None:
    """Look up a dialect by name, or None if the name is unknown."""
    return _DIALECTS.get(name)


def register_dialect(dialect: SqlDialect) -> None:
    """Add a dialect variant to the table, replacing any with the same name."""
    if not dialect.name:
        raise ValueError("Dialect must have a non-empty name")
    _DIALECTS[dialect.name] = dialect


def list_dialects() -> list[str]:
    """List registered dialect names."""
    return list(_DIALECTS.keys())
