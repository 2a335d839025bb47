"""Read single sysfs attribute nodes and classify the outcome."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from typing import Optional

from sysfeatures.sysfs.normalize import convert_to_label

# sysfs attributes never exceed one page.
MAX_ATTRIBUTE_BYTES = 4096


@dataclass(frozen=True)
class ReadResult:
    """Outcome of reading one attribute node.

    ``ok`` results carry the sanitized value (empty for directories and
    unreadable files); failed results carry the reason and the error text.
    """

    ok: bool
    value: str = ""
    reason: str = "read"
    error: Optional[str] = None

    @classmethod
    def failure(cls, reason: str, error: BaseException | str) -> "ReadResult":
        return cls(ok=False, value="", reason=reason, error=str(error))


def _read_bounded(real_path: str, limit: int = MAX_ATTRIBUTE_BYTES) -> bytes:
    with open(real_path, "rb") as handle:
        return handle.read(limit)


def read_single_parameter(real_path: str) -> ReadResult:
    """Stat and read *real_path*, never raising for filesystem conditions."""

    try:
        info = os.stat(real_path)
    except (FileNotFoundError, NotADirectoryError) as exc:
        return ReadResult.failure("not_found", f"failed to read parameter {real_path}: {exc}")
    except OSError as exc:
        return ReadResult.failure("stat_failed", f"failed to read parameter {real_path}: {exc}")

    if stat.S_ISDIR(info.st_mode):
        # presence alone is the signal
        return ReadResult(ok=True, value="", reason="directory")

    if not stat.S_ISREG(info.st_mode):
        return ReadResult.failure(
            "not_regular_file", f"refusing to read parameter {real_path}: not a regular file"
        )

    try:
        data = _read_bounded(real_path)
    except PermissionError:
        return ReadResult(ok=True, value="", reason="permission_denied")
    except OSError as exc:
        return ReadResult.failure("read_failed", f"failed to read parameter {real_path}: {exc}")

    return ReadResult(ok=True, value=convert_to_label(data.decode("utf-8", errors="replace")))


__all__ = ["MAX_ATTRIBUTE_BYTES", "ReadResult", "read_single_parameter"]
