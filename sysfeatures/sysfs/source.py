"""Sysfs feature source: whitelist-driven attribute discovery."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from sysfeatures.config import ConfigTypeError, SysfsConfig
from sysfeatures.core import Resolver, build_resolver, normalize_attribute_path
from sysfeatures.features import Features, new_attribute_features, new_features
from sysfeatures.logging import log_discovery_run
from sysfeatures.sysfs.normalize import build_attribute_name, sanitize_label_component
from sysfeatures.sysfs.walker import read_single_parameter

SOURCE_NAME = "sysfs"
ATTRIBUTE_FEATURE = "attribute"

_LOGGER = logging.getLogger("sysfeatures.sysfs.source")

SkippedEntry = Tuple[str, str, Optional[str]]


class DiscoverySession:
    """One discovery run over a fixed configuration snapshot.

    Entries are resolved and read one after another. A failing entry is
    logged and left out of the result; it never stops the run.
    """

    def __init__(
        self,
        config: SysfsConfig,
        resolver: Optional[Resolver] = None,
        *,
        log_path: Optional[str] = None,
    ) -> None:
        self.config = config
        self._resolve = resolver or build_resolver()
        self.log_path = log_path
        self.skipped: List[SkippedEntry] = []

    def run(self) -> Features:
        features = new_features()
        elements: Dict[str, str] = {}
        self.skipped = []

        for entry in self.config.whitelist:
            attr = normalize_attribute_path(entry)
            result = read_single_parameter(self._resolve(attr))
            if not result.ok:
                self.skipped.append((attr, result.reason, result.error))
                if result.reason == "not_found":
                    _LOGGER.debug("Attribute not present: parameter=%s", attr)
                else:
                    _LOGGER.warning("Reading parameter failed: parameter=%s error=%s", attr, result.error)
                continue

            name = build_attribute_name(attr)
            if not name:
                _LOGGER.debug("Skipping tree root entry %r; it has no attribute name", entry)
                continue
            elements[name] = result.value

        features.attributes[ATTRIBUTE_FEATURE] = new_attribute_features(elements)

        if self.log_path:
            log_discovery_run(
                self.log_path,
                source=SOURCE_NAME,
                attributes=elements,
                skipped=self.skipped,
            )
        return features


class SysfsSource:
    """Feature and label source exposing whitelisted sysfs attributes."""

    def __init__(
        self,
        config: Optional[SysfsConfig] = None,
        *,
        resolver: Optional[Resolver] = None,
        log_path: Optional[str] = None,
    ) -> None:
        self._config = config or self.new_config()
        self._resolver = resolver
        self.log_path = log_path
        self._features: Optional[Features] = None

    def name(self) -> str:
        return SOURCE_NAME

    def new_config(self) -> SysfsConfig:
        return SysfsConfig()

    def get_config(self) -> SysfsConfig:
        return self._config

    def set_config(self, config: SysfsConfig) -> None:
        if not isinstance(config, SysfsConfig):
            raise ConfigTypeError(f"invalid config type: {type(config).__name__}")
        self._config = config

    def priority(self) -> int:
        return 0

    def discover(self) -> Features:
        """Run discovery and replace the held feature set with the result."""

        session = DiscoverySession(self._config, self._resolver, log_path=self.log_path)
        self._features = session.run()
        return self._features

    def get_features(self) -> Features:
        if self._features is None:
            self._features = new_features()
        return self._features

    def get_labels(self) -> Dict[str, str]:
        """Return the discovered attributes as label-safe key/value pairs."""

        attributes = self.get_features().attributes.get(ATTRIBUTE_FEATURE)
        if attributes is None:
            return {}
        return {
            sanitize_label_component(key): sanitize_label_component(value)
            for key, value in attributes.elements.items()
        }


__all__ = ["ATTRIBUTE_FEATURE", "DiscoverySession", "SOURCE_NAME", "SysfsSource"]
