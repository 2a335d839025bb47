"""Typed configuration for the sysfs feature source."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Tuple

from sysfeatures.config.exceptions import ConfigError, ConfigValidationError
from sysfeatures.config.validate import WHITELIST_KEY, validate_config

_LOGGER = logging.getLogger("sysfeatures.config")

DEFAULT_WHITELIST: Tuple[str, ...] = ("",)


@dataclass(frozen=True)
class SysfsConfig:
    """Whitelisted attribute paths, relative to the sysfs tree root."""

    whitelist: Tuple[str, ...] = DEFAULT_WHITELIST

    @classmethod
    def from_paths(cls, paths: Iterable[str]) -> "SysfsConfig":
        entries = tuple(paths)
        non_strings = [entry for entry in entries if not isinstance(entry, str)]
        if non_strings:
            raise ConfigValidationError(
                [{"message": f"{entry!r} is not of type 'string'", "path": [WHITELIST_KEY]} for entry in non_strings]
            )
        return cls(whitelist=entries)

    def to_dict(self) -> Dict[str, Any]:
        return {WHITELIST_KEY: list(self.whitelist)}


def load_config(payload: Mapping[str, Any]) -> SysfsConfig:
    """Validate *payload* and build a :class:`SysfsConfig` from it.

    A payload without ``sysfsWhitelist`` yields the default whitelist.
    """

    result = validate_config(payload)
    if not result["ok"]:
        raise ConfigValidationError(result["errors"])

    if WHITELIST_KEY not in payload:
        return SysfsConfig()
    return SysfsConfig(whitelist=tuple(payload[WHITELIST_KEY]))


def load_config_file(path: str) -> SysfsConfig:
    try:
        with open(path, "r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except OSError as exc:
        raise ConfigError(f"cannot read configuration file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"configuration file {path} is not valid JSON: {exc}") from exc

    config = load_config(payload)
    _LOGGER.debug("Loaded %d whitelist entries from %s", len(config.whitelist), path)
    return config


__all__ = ["DEFAULT_WHITELIST", "SysfsConfig", "load_config", "load_config_file"]
