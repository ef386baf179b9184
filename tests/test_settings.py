"""Unit tests for :mod:`halving.settings`."""

from __future__ import annotations

import pytest

from halving import DEFAULT_SETTINGS, CodecSettings


def test_defaults_sort_keys_with_two_space_indent() -> None:
    assert DEFAULT_SETTINGS == CodecSettings(indent=2, sort_keys=True, ensure_ascii=False)


def test_from_mapping_uses_defaults_for_missing_keys() -> None:
    assert CodecSettings.from_mapping({}) == DEFAULT_SETTINGS


def test_from_mapping_reads_parsed_json_values() -> None:
    settings = CodecSettings.from_mapping(
        {"indent": None, "sort_keys": False, "ensure_ascii": True}
    )

    assert settings == CodecSettings(indent=None, sort_keys=False, ensure_ascii=True)


def test_from_mapping_rejects_unknown_keys() -> None:
    with pytest.raises(ValueError, match="width"):
        CodecSettings.from_mapping({"width": 80})


def test_negative_indent_is_rejected() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        CodecSettings(indent=-1)


def test_string_values_are_rejected() -> None:
    with pytest.raises(TypeError):
        CodecSettings(indent="4")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        CodecSettings.from_mapping({"sort_keys": "false"})
    with pytest.raises(TypeError):
        CodecSettings(ensure_ascii=1)  # type: ignore[arg-type]
