"""CLI entry point for inspecting a resolved database configuration."""

import argparse
import json
import logging
import sys

from ._config import DEFAULT_CONFIG_PATH, DEFAULT_ENV, DEFAULT_MIGRATIONS_DIR, resolve
from ._errors import ConfigFieldMissing, DBConfError
from ._source import ConfigSource


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Resolve and show a database configuration")
    parser.add_argument(
        "--cfg",
        default=DEFAULT_CONFIG_PATH,
        help=f"Path to a db configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "--path",
        default=DEFAULT_MIGRATIONS_DIR,
        help=f"Folder containing the migrations (default: {DEFAULT_MIGRATIONS_DIR})",
    )
    parser.add_argument(
        "--env",
        default=DEFAULT_ENV,
        help=f"Which DB environment to use (default: {DEFAULT_ENV})",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        dest="as_json",
        help="Print the resolved configuration as JSON.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log resolution details to stderr.",
    )
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if not args.env:
        print("error: --env must name an environment", file=sys.stderr)
        return 1

    try:
        source = ConfigSource.from_file(args.cfg)
        conf = resolve(source, args.path, args.env)
    except ConfigFieldMissing as e:
        print(f"error: {e.message}", file=sys.stderr)
        envs = source.environments()
        if args.env not in envs:
            print(f"Available environments: {', '.join(envs) or '(none)'}", file=sys.stderr)
        return 1
    except DBConfError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return 1

    if args.as_json:
        print(json.dumps(conf.model_dump(by_alias=True), indent=2))
        return 0

    driver = conf.driver
    print(f"env: {conf.env}")
    print(f"migrations dir: {conf.migrations_dir}")
    print(f"driver: {driver.name}")
    print(f"import: {driver.import_path}")
    print(f"dialect: {driver.dialect.name if driver.dialect else ''}")
    print(f"open: {driver.connection_string}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
