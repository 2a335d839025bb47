"""Tests for attribute name and label value normalization."""

from __future__ import annotations

import re

import pytest

from sysfeatures.sysfs.normalize import (
    ATTRIBUTE_NAME_MAX_LEN,
    LABEL_VALUE_MAX_LEN,
    build_attribute_name,
    convert_to_label,
    sanitize_label_component,
)

_LABEL_CHARS = re.compile(r"^[-A-Za-z0-9_.]*$")


def test_build_attribute_name_short_path() -> None:
    name = build_attribute_name("/class/power_supply/BAT0/capacity")
    assert name == "class.power_supply.BAT0.capacity"
    assert len(name) == 32


def test_build_attribute_name_root_is_empty() -> None:
    assert build_attribute_name("/") == ""


def test_build_attribute_name_truncates_on_segment_boundary() -> None:
    # 70 characters once dotted; the only separator in the kept tail sits 14
    # characters from the end.
    path = "/" + "a" * 56 + "/" + "b" * 13
    dotted = path[1:].replace("/", ".")
    assert len(dotted) == 70
    assert dotted.rindex(".") == 70 - 14

    name = build_attribute_name(path)

    assert name == "b" * 13
    assert len(name) <= ATTRIBUTE_NAME_MAX_LEN


def test_build_attribute_name_cuts_after_first_separator_in_tail() -> None:
    path = "/devices/platform/soc/fe300000.mmcnr/mmc_host/mmc1/mmc1:0001/vendor_id"
    dotted = path[1:].replace("/", ".")
    assert len(dotted) > ATTRIBUTE_NAME_MAX_LEN

    name = build_attribute_name(path)

    start = len(dotted) - ATTRIBUTE_NAME_MAX_LEN
    cut = dotted.index(".", start)
    assert name == dotted[cut + 1:]
    assert dotted.endswith("." + name)
    assert not name.startswith(".")
    assert len(name) <= ATTRIBUTE_NAME_MAX_LEN


def test_build_attribute_name_separator_exactly_at_start() -> None:
    path = "/" + "x" * 10 + "/" + "y" * 54
    name = build_attribute_name(path)
    assert name == "y" * 54


def test_build_attribute_name_without_separator_keeps_tail() -> None:
    path = "/" + "a" * 10 + "/" + "z" * 80
    name = build_attribute_name(path)
    assert name == "z" * ATTRIBUTE_NAME_MAX_LEN


def test_build_attribute_name_hidden_leaf_after_cut() -> None:
    name = build_attribute_name("/" + "a" * 60 + "/.hidden")
    assert name == "hidden"
    assert not name.startswith(".")


@pytest.mark.parametrize(
    "path",
    [
        "/" + "a" * 60 + "/.hidden",
        "/" + "a" * 30 + "/." + "b" * 30 + "/.c",
        "/" + "x" * 20 + "/../" + "y" * 50,
        "/devices/" + "/".join(".seg%d" % i for i in range(12)),
    ],
)
def test_build_attribute_name_never_starts_with_dot(path) -> None:
    name = build_attribute_name(path)
    assert not name.startswith(".")
    assert len(name) <= ATTRIBUTE_NAME_MAX_LEN


def test_build_attribute_name_custom_cap() -> None:
    assert build_attribute_name("/class/net/eth0/address", max_len=64) == "class.net.eth0.address"
    assert build_attribute_name("/class/net/eth0/address", max_len=12) == "address"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("", ""),
        ("87\n", "87"),
        ("  DELL GPM0365 \n", "DELL_GPM0365"),
        ("52:54:00:12:34:56\n", "52_54_00_12_34_56"),
        ("__init__", "init"),
        ("...1.2.3...", "1.2.3"),
        ("-1", "-1"),
        ("[always] madvise never\n", "always_madvise_never"),
        ("\n\t  \n", ""),
    ],
)
def test_convert_to_label(raw, expected) -> None:
    assert convert_to_label(raw) == expected


def test_convert_to_label_truncates_before_trailing_cleanup() -> None:
    raw = "a" * 61 + " tail"
    value = convert_to_label(raw)
    assert value == "a" * 61
    assert len(value) <= LABEL_VALUE_MAX_LEN


def test_convert_to_label_bounds_long_content() -> None:
    value = convert_to_label("0123456789" * 20)
    assert len(value) == LABEL_VALUE_MAX_LEN


@pytest.mark.parametrize(
    "raw",
    [
        "87\n",
        "\xff\xfe 12/34 \x00",
        "  leading and trailing !!",
        "a" * 61 + "._" + "b" * 10,
        "x" * 200,
        "ünïcödé välue",
        "....",
    ],
)
def test_convert_to_label_invariants(raw) -> None:
    value = convert_to_label(raw)
    assert len(value) <= LABEL_VALUE_MAX_LEN
    assert _LABEL_CHARS.match(value)
    if value:
        assert value[0] not in "_."
        assert value[-1] not in "_."
    assert convert_to_label(value) == value


def test_sanitize_label_component() -> None:
    assert sanitize_label_component("mmc1:0001.vendor id") == "mmc1_0001.vendor_id"
    assert sanitize_label_component("already-clean_1.2") == "already-clean_1.2"
    assert sanitize_label_component("") == ""
