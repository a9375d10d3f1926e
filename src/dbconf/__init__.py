"""Resolve per-environment database configuration for schema migrations."""

from importlib.metadata import version

from ._config import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_ENV,
    DEFAULT_MIGRATIONS_DIR,
    load_dbconf,
    resolve,
)
from ._dialects import (
    MySqlDialect,
    PostgresDialect,
    SqlDialect,
    dialect_by_name,
    list_dialects,
    register_dialect,
)
from ._drivers import known_drivers, new_driver
from ._errors import (
    ConfigFieldMissing,
    ConfigSourceUnreadable,
    DBConfError,
    InvalidDriverConfig,
)
from ._models import DBConf, Driver
from ._postgres import parse_postgres_url
from ._source import ConfigSource, expand_env

__version__ = version("dbconf")
__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_ENV",
    "DEFAULT_MIGRATIONS_DIR",
    "ConfigFieldMissing",
    "ConfigSource",
    "ConfigSourceUnreadable",
    "DBConf",
    "DBConfError",
    "Driver",
    "InvalidDriverConfig",
    "MySqlDialect",
    "PostgresDialect",
    "SqlDialect",
    "dialect_by_name",
    "expand_env",
    "known_drivers",
    "list_dialects",
    "load_dbconf",
    "new_driver",
    "parse_postgres_url",
    "register_dialect",
    "resolve",
]
