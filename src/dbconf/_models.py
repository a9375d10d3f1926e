"""Pydantic models for resolved driver and database configuration."""

from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic.alias_generators import to_camel

from ._dialects import SqlDialect


# === Base class for camelCase serialization ===


class CamelModel(BaseModel):
    """Immutable base model that serializes to camelCase."""

    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
        frozen=True,
        arbitrary_types_allowed=True,
    )


# === Resolved configuration ===


class Driver(CamelModel):
    """A database driver binding."""

    name: str
    connection_string: str
    import_path: str = ""
    dialect: SqlDialect | None = None

    @field_serializer("dialect")
    def serialize_dialect(self, dialect: SqlDialect | None) -> str | None:
        return dialect.name if dialect is not None else None

    def is_valid(self) -> bool:
        """Check the driver has both an import path and a dialect."""
        return len(self.import_path) > 0 and self.dialect is not None


class DBConf(CamelModel):
    """Fully resolved configuration handed to the migration runner."""

    migrations_dir: str
    env: str
    driver: Driver
