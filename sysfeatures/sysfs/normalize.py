"""Turn sysfs paths into attribute names and file contents into label values."""

from __future__ import annotations

import re

ATTRIBUTE_NAME_MAX_LEN = 55
LABEL_VALUE_MAX_LEN = 62

_LEADING_INVALID = re.compile(r"^[^-A-Za-z0-9]+")
_TRAILING_INVALID = re.compile(r"[^-A-Za-z0-9]+$")
_INTERIOR_INVALID_RUN = re.compile(r"[^-A-Za-z0-9_.]+")
_INVALID_CHAR = re.compile(r"[^-A-Za-z0-9_.]")


def build_attribute_name(path: str, *, max_len: int = ATTRIBUTE_NAME_MAX_LEN) -> str:
    """Return the dotted attribute name for the cleaned absolute *path*.

    Overlong names are truncated from the front so the leaf segments survive.
    The cut lands just after the first ``.`` inside the kept tail, so the name
    starts on a whole path segment and may end up shorter than *max_len*.
    When the tail holds no separator at all the last *max_len* characters are
    kept as-is.
    """

    name = path.replace("/", ".").lstrip(".")

    if len(name) > max_len:
        start = len(name) - max_len
        offset = name.find(".", start)
        if offset == -1:
            name = name[start:]
        else:
            name = name[offset + 1:].lstrip(".")
    return name


def convert_to_label(raw: str) -> str:
    """Sanitize raw attribute content into a label-safe value.

    The result holds only ``[-A-Za-z0-9_.]``, starts and ends with
    ``[-A-Za-z0-9]`` and is at most :data:`LABEL_VALUE_MAX_LEN` characters.
    """

    if not raw:
        return raw

    value = _LEADING_INVALID.sub("", raw)
    value = _INTERIOR_INVALID_RUN.sub("_", value)
    value = value[:LABEL_VALUE_MAX_LEN]
    return _TRAILING_INVALID.sub("", value)


def sanitize_label_component(text: str) -> str:
    """Replace every character a label key or value cannot hold with ``_``."""

    return _INVALID_CHAR.sub("_", text)


__all__ = [
    "ATTRIBUTE_NAME_MAX_LEN",
    "LABEL_VALUE_MAX_LEN",
    "build_attribute_name",
    "convert_to_label",
    "sanitize_label_component",
]
