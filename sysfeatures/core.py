"""Core utilities for sysfs path handling."""

from __future__ import annotations

import logging
import os
import posixpath
from typing import Callable, Optional

_LOGGER = logging.getLogger("sysfeatures.core")

SYSFS_MOUNT_PREFIX = "/sys"
_SYSFS_ROOT_ENV = "SYSFEATURES_SYSFS_ROOT"
_DEFAULT_SYSFS_ROOT = "/sys"

Resolver = Callable[[str], str]


def _strip_mount_prefix(value: str) -> str:
    if value == SYSFS_MOUNT_PREFIX or value.startswith(SYSFS_MOUNT_PREFIX + "/"):
        _LOGGER.debug("Stripping %s mount prefix from '%s'", SYSFS_MOUNT_PREFIX, value)
        return value[len(SYSFS_MOUNT_PREFIX):]
    return value


def normalize_attribute_path(value: str) -> str:
    """Return *value* as a cleaned absolute path under the sysfs tree root.

    Relative entries are rooted at ``/`` rather than the working directory and
    the result is cleaned lexically, so ``..`` segments can never climb above
    the tree root. No filesystem access happens here.
    """

    candidate = _strip_mount_prefix(value or "")
    if not candidate.startswith("/"):
        candidate = posixpath.join("/", candidate)

    cleaned = posixpath.normpath(candidate)
    # POSIX keeps a leading "//" as implementation defined; collapse it.
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


class HostDir:
    """Map logical sysfs paths onto the directory the tree is mounted at."""

    def __init__(self, root: str) -> None:
        if not root:
            raise ValueError("root must be a non-empty string")
        self.root = root

    def path(self, logical_path: str) -> str:
        relative = posixpath.normpath("/" + (logical_path or "")).lstrip("/")
        if not relative:
            return self.root
        return os.path.join(self.root, relative)

    def __repr__(self) -> str:
        return f"HostDir({self.root!r})"


def sysfs_root_from_env() -> str:
    raw = os.getenv(_SYSFS_ROOT_ENV, "").strip()
    return raw or _DEFAULT_SYSFS_ROOT


def build_resolver(root: Optional[str] = None) -> Resolver:
    """Return the logical-to-real path resolver for *root* (or the env default)."""

    return HostDir(root or sysfs_root_from_env()).path


__all__ = [
    "HostDir",
    "Resolver",
    "SYSFS_MOUNT_PREFIX",
    "build_resolver",
    "normalize_attribute_path",
    "sysfs_root_from_env",
]
