"""Structured JSONL run records for sysfs discovery."""

from __future__ import annotations

import datetime as _dt
import json
import os
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple


def _timestamp() -> str:
    return _dt.datetime.now(tz=_dt.timezone.utc).isoformat()


def log_jsonl(path: str, record: Mapping[str, Any]) -> Dict[str, Any]:
    """Append *record* to the JSONL file at *path* and return what was written.

    Records without a ``timestamp`` are stamped with the current UTC time.
    Missing parent directories are created.
    """

    payload = dict(record)
    payload.setdefault("timestamp", _timestamp())

    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(path, "a", encoding="utf-8") as handle:
        handle.write(json.dumps(payload, sort_keys=True) + "\n")
    return payload


def log_discovery_run(
    path: str,
    *,
    source: str,
    attributes: Mapping[str, str],
    skipped: Iterable[Tuple[str, str, Optional[str]]] = (),
) -> Dict[str, Any]:
    """Append a summary of one discovery run to the JSONL log at *path*."""

    return log_jsonl(
        path,
        {
            "source": source,
            "attributes": dict(attributes),
            "skipped": [
                {"parameter": parameter, "reason": reason, "error": error}
                for parameter, reason, error in skipped
            ],
        },
    )


__all__ = ["log_discovery_run", "log_jsonl"]
