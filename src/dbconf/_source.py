"""YAML configuration source with dotted key-path lookups."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from ._errors import ConfigFieldMissing, ConfigSourceUnreadable

logger = logging.getLogger(__name__)

# $NAME, ${NAME}, or a single special character such as $1 or $?.
# An unterminated "${" is dropped.
_ENV_VAR = re.compile(
    r"\$(?:\{(?P<braced>[^}]*)\}|(?P<bad>\{)|(?P<special>[*#$@!?\-0-9])|(?P<name>[A-Za-z_][A-Za-z0-9_]*))"
)


def expand_env(value: str, environ: Mapping[str, str] | None = None) -> str:
    """Substitute ``$VAR`` and ``${VAR}`` references shell-style.

    Unset variables expand to an empty string. A ``$`` not followed by a
    variable name is kept as-is, and a "${" with no closing brace is
    removed.
    """
    env = os.environ if environ is None else environ

    def replace(match: re.Match[str]) -> str:
        if match.group("bad") is not None:
            return ""
        name = match.group("braced")
        if name is None:
            name = match.group("special") or match.group("name")
        return env.get(name, "")

    return _ENV_VAR.sub(replace, value)


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    # Mappings and lists are present but unusable as a field value
    return ""


class ConfigSource:
    """A parsed configuration document addressed by dotted paths."""

    def __init__(self, data: Mapping[str, Any], origin: str = "<memory>"):
        self._data = data
        self.origin = origin

    @classmethod
    def from_text(cls, text: str, origin: str = "<string>") -> ConfigSource:
        """Parse a YAML document.

        Raises:
            ConfigSourceUnreadable: If the YAML is invalid or its top level
                is not a mapping.
        """
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigSourceUnreadable(origin, f"invalid YAML ({e})") from e
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigSourceUnreadable(origin, "top level must be a mapping of environments")
        return cls(data, origin)

    @classmethod
    def from_file(cls, path: str | Path) -> ConfigSource:
        """Read and parse a YAML config file."""
        try:
            with open(path, encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            raise ConfigSourceUnreadable(str(path), e.strerror or str(e)) from e
        except UnicodeDecodeError as e:
            raise ConfigSourceUnreadable(
                str(path), f"not valid UTF-8 ({e.reason} at byte {e.start})"
            ) from e
        logger.debug("Read config file %s", path)
        return cls.from_text(text, origin=str(path))

    def _lookup(self, path: str) -> tuple[bool, Any]:
        node: Any = self._data
        for part in path.split("."):
            if not isinstance(node, Mapping):
                return False, None
            if part in node:
                node = node[part]
                continue
            # YAML keys such as 2024: or on: load as int or bool
            for key, child in node.items():
                if _to_text(key) == part:
                    node = child
                    break
            else:
                return False, None
        return True, node

    def get(self, path: str) -> str | None:
        """Get the text at ``path``, or None if the field is absent.

        A present field always yields a string: null becomes "" and
        non-scalar values become "" so callers can tell "absent" apart
        from "present but unusable".
        """
        found, value = self._lookup(path)
        if not found:
            return None
        return _to_text(value)

    def require(self, path: str) -> str:
        """Get the text at ``path``, raising ConfigFieldMissing if absent."""
        value = self.get(path)
        if value is None:
            raise ConfigFieldMissing(path)
        return value

    def environments(self) -> list[str]:
        """List the top-level environment section names."""
        return [_to_text(name) for name in self._data]
