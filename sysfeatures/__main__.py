"""Allow ``python -m sysfeatures``."""

from __future__ import annotations

from sysfeatures.cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
