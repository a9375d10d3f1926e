"""Registry of the database drivers known without configuration overrides."""

from typing import NamedTuple

from ._dialects import MYSQL, POSTGRES, SqlDialect
from ._models import Driver


class DriverDefaults(NamedTuple):
    import_path: str
    dialect: SqlDialect


_KNOWN_DRIVERS: dict[str, DriverDefaults] = {
    "postgres": DriverDefaults("psycopg2", POSTGRES),
    "mymysql": DriverDefaults("pymysql", MYSQL),
}


def new_driver(name: str, connection_string: str) -> Driver:
    """Create a Driver, filling in defaults for drivers we know about.

    Unknown names get an empty import path and no dialect. The result is
    then invalid unless the configuration supplies ``import`` and
    ``dialect`` overrides.
    """
    defaults = _KNOWN_DRIVERS.get(name)
    if defaults is None:
        return Driver(name=name, connection_string=connection_string)
    return Driver(
        name=name,
        connection_string=connection_string,
        import_path=defaults.import_path,
        dialect=defaults.dialect,
    )


def known_drivers() -> list[str]:
    """List driver names with built-in defaults."""
    return list(_KNOWN_DRIVERS.keys())
