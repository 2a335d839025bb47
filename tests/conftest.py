"""Shared pytest fixtures building a fake sysfs tree."""

from __future__ import annotations

import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from sysfeatures.core import HostDir


@pytest.fixture()
def sysfs_root(tmp_path) -> pathlib.Path:
    """A small sysfs-like tree mounted under ``tmp_path/sys``."""

    root = tmp_path / "sys"
    battery = root / "class" / "power_supply" / "BAT0"
    battery.mkdir(parents=True)
    (battery / "capacity").write_text("87\n", encoding="utf-8")
    (battery / "model_name").write_text("  DELL GPM0365 \n", encoding="utf-8")
    (battery / "serial_number").write_bytes(b"\xff\xfe 12/34 \x00")

    net = root / "class" / "net" / "eth0"
    net.mkdir(parents=True)
    (net / "address").write_text("52:54:00:12:34:56\n", encoding="utf-8")

    (root / "module" / "kvm").mkdir(parents=True)
    return root


@pytest.fixture()
def resolver(sysfs_root):
    return HostDir(str(sysfs_root)).path
