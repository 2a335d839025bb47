"""Sysfs attribute discovery."""

from __future__ import annotations

from .normalize import build_attribute_name, convert_to_label, sanitize_label_component
from .source import ATTRIBUTE_FEATURE, SOURCE_NAME, DiscoverySession, SysfsSource
from .walker import ReadResult, read_single_parameter

__all__ = [
    "ATTRIBUTE_FEATURE",
    "DiscoverySession",
    "ReadResult",
    "SOURCE_NAME",
    "SysfsSource",
    "build_attribute_name",
    "convert_to_label",
    "read_single_parameter",
    "sanitize_label_component",
]
