"""JSON Schema validation for sysfs source configuration payloads."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping

from jsonschema import Draft202012Validator, ValidationError
from referencing import Registry, Resource, exceptions

_SCHEMA_BASE = "https://schemas.sysfeatures.dev/config/"
_DRAFT = "https://json-schema.org/draft/2020-12/schema"

WHITELIST_KEY = "sysfsWhitelist"

WHITELIST_SCHEMA: Dict[str, Any] = {
    "$schema": _DRAFT,
    "$id": _SCHEMA_BASE + "whitelist.schema.json",
    "type": "array",
    "items": {"type": "string"},
}

CONFIG_SCHEMA: Dict[str, Any] = {
    "$schema": _DRAFT,
    "$id": _SCHEMA_BASE + "sysfs-config.schema.json",
    "type": "object",
    "properties": {
        WHITELIST_KEY: {"$ref": "whitelist.schema.json"},
    },
    "additionalProperties": False,
}


def validate_config(payload: Any) -> Dict[str, Any]:
    """Validate a configuration *payload* and report the outcome."""

    if not isinstance(payload, Mapping):
        return {
            "ok": False,
            "reason": "invalid_type",
            "errors": [{"message": f"configuration must be an object, got {type(payload).__name__}", "path": []}],
        }

    validator = Draft202012Validator(CONFIG_SCHEMA, registry=_build_registry())
    errors = list(_collect_errors(validator.iter_errors(dict(payload))))
    if errors:
        return {"ok": False, "reason": "validation_failed", "errors": errors}
    return {"ok": True, "reason": "validation_passed", "errors": []}


def _collect_errors(raw_errors: Iterable[ValidationError]):
    for error in sorted(raw_errors, key=lambda item: [str(part) for part in item.absolute_path]):
        yield {
            "message": error.message,
            "path": list(error.absolute_path),
        }


def _build_registry() -> Registry:
    """Create a referencing registry holding the bundled config schemas."""

    def _retrieve(uri: str):
        raise exceptions.NoSuchResource(uri=uri)

    registry = Registry(retrieve=_retrieve)
    return registry.with_resources(
        (schema["$id"], Resource.from_contents(schema))
        for schema in (CONFIG_SCHEMA, WHITELIST_SCHEMA)
    )


__all__ = ["CONFIG_SCHEMA", "WHITELIST_KEY", "WHITELIST_SCHEMA", "validate_config"]
