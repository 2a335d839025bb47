"""sysfeatures package exposing the sysfs feature source."""

from .config import SysfsConfig, load_config
from .sysfs import DiscoverySession, SysfsSource

__all__ = ["DiscoverySession", "SysfsConfig", "SysfsSource", "load_config"]
