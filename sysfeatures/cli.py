"""Command line entry point for sysfeatures."""

from __future__ import annotations

import argparse
import json
import logging
import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from sysfeatures.config import ConfigError, SysfsConfig, load_config_file, validate_config
from sysfeatures.core import build_resolver, sysfs_root_from_env
from sysfeatures.sysfs import SysfsSource

_LOGGER = logging.getLogger("sysfeatures.cli")

_ENV_FILE_ENV = "SYSFEATURES_ENV_FILE"
_CONFIG_ENV = "SYSFEATURES_CONFIG"
_RUN_LOG_ENV = "SYSFEATURES_RUN_LOG"


def _load_env_file(path: str | None = None) -> None:
    """Load environment variables from a ``.env`` file using python-dotenv."""

    env_path = path or os.getenv(_ENV_FILE_ENV) or os.path.join(os.getcwd(), ".env")
    load_dotenv(dotenv_path=env_path)


def _configure_logging() -> None:
    log_level = os.getenv("SYSFEATURES_LOG_LEVEL", "INFO")
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _load_json(path: str) -> Any:
    with open(path, "r", encoding="utf-8") as handle:
        return json.load(handle)


def _resolve_config(args: argparse.Namespace) -> SysfsConfig:
    if args.whitelist:
        return SysfsConfig.from_paths(args.whitelist)

    config_path = args.config or os.getenv(_CONFIG_ENV)
    if config_path:
        return load_config_file(config_path)

    _LOGGER.warning("No whitelist configured; using the default whitelist")
    return SysfsConfig()


def _run_discover(args: argparse.Namespace) -> int:
    try:
        config = _resolve_config(args)
    except ConfigError as exc:
        _LOGGER.error("Invalid configuration: %s", exc)
        return 2

    root = args.sysfs_root or sysfs_root_from_env()
    source = SysfsSource(
        config,
        resolver=build_resolver(root),
        log_path=args.log_path or os.getenv(_RUN_LOG_ENV),
    )
    _LOGGER.info("Discovering %d sysfs attributes under %s", len(config.whitelist), root)
    features = source.discover()

    payload: Dict[str, Any]
    if args.features:
        payload = features.to_dict()
    else:
        payload = source.get_labels()
    print(json.dumps(payload, indent=2, sort_keys=True))
    return 0


def _run_validate(args: argparse.Namespace) -> int:
    try:
        payload = _load_json(args.path)
    except (OSError, json.JSONDecodeError) as exc:
        _LOGGER.error("Cannot load configuration %s: %s", args.path, exc)
        return 2

    result = validate_config(payload)
    print(json.dumps(result, indent=2))
    if not result["ok"]:
        for error in result["errors"]:
            _LOGGER.error("  - %s: %s", "/".join(str(part) for part in error["path"]) or "<root>", error["message"])
        return 1
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for the sysfeatures CLI."""

    _load_env_file()
    _configure_logging()

    parser = argparse.ArgumentParser(description="Discover whitelisted sysfs attributes as labels")
    subparsers = parser.add_subparsers(dest="command", required=True)

    discover_parser = subparsers.add_parser("discover", help="Read whitelisted attributes and print labels")
    discover_parser.add_argument("--config", help=f"JSON configuration file (default: ${_CONFIG_ENV})")
    discover_parser.add_argument(
        "--whitelist",
        action="append",
        metavar="PATH",
        help="Attribute path relative to the sysfs root; repeatable, overrides --config",
    )
    discover_parser.add_argument("--sysfs-root", dest="sysfs_root", help="Directory the sysfs tree is mounted at")
    discover_parser.add_argument("--features", action="store_true", help="Print the full feature set instead of labels")
    discover_parser.add_argument("--log-path", dest="log_path", help="Append a JSONL record of the run to this file")

    validate_parser = subparsers.add_parser("validate-config", help="Validate a JSON configuration file")
    validate_parser.add_argument("path", help="Path to the configuration file")

    args = parser.parse_args(argv)

    if args.command == "discover":
        return _run_discover(args)
    if args.command == "validate-config":
        return _run_validate(args)

    parser.error(f"Unknown command {args.command}")
    return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
