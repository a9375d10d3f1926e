"""Error types raised while resolving a database configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._models import Driver


class DBConfError(Exception):
    """Base error with a machine-readable error type."""

    def __init__(self, error_type: str, message: str):
        self.error_type = error_type
        self.message = message
        super().__init__(message)


class ConfigSourceUnreadable(DBConfError):
    """The configuration source could not be loaded or parsed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__("ConfigSourceUnreadable", f"Cannot read config '{path}': {reason}")


class ConfigFieldMissing(DBConfError):
    """A required field is absent for the requested environment."""

    def __init__(self, path: str):
        self.path = path
        super().__init__("ConfigFieldMissing", f"Missing required config field: '{path}'")


class InvalidDriverConfig(DBConfError):
    """The resolved driver lacks an import path or a dialect."""

    def __init__(self, driver: Driver):
        self.driver = driver
        dialect = driver.dialect.name if driver.dialect is not None else None
        super().__init__(
            "InvalidDriverConfig",
            f"Invalid driver config: name={driver.name!r}, "
            f"import={driver.import_path!r}, dialect={dialect!r}",
        )
