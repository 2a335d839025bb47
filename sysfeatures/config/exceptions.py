"""Configuration errors raised at load time."""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class ConfigError(ValueError):
    """Base error for configuration that cannot be loaded."""


class ConfigValidationError(ConfigError):
    """Raised when a configuration payload fails schema validation."""

    def __init__(self, errors: Optional[List[Dict[str, Any]]] = None) -> None:
        self.errors = list(errors or [])
        detail = "; ".join(_format_error(error) for error in self.errors) or "invalid configuration"
        super().__init__(f"configuration validation failed: {detail}")


class ConfigTypeError(ConfigError, TypeError):
    """Raised when a source is handed a configuration object of the wrong type."""


def _format_error(error: Dict[str, Any]) -> str:
    path = "/".join(str(part) for part in error.get("path", []))
    message = error.get("message", "")
    return f"{path}: {message}" if path else str(message)


__all__ = ["ConfigError", "ConfigTypeError", "ConfigValidationError"]
