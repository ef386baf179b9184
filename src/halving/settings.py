"""Configuration for how halved documents are written."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


def _validate_indent(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"indent must be an int or None, got {type(value)!r}")
    if value < 0:
        raise ValueError("indent must be a non-negative integer.")
    return value


def _validate_flag(value: Any, *, name: str) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"{name} must be a bool, got {type(value)!r}")
    return value


@dataclass(frozen=True)
class CodecSettings:
    """Formatting options used when encoding records.

    The defaults sort object keys so encoded documents can be compared byte
    for byte. ``indent=None`` writes each document on a single line.
    """

    indent: int | None = 2
    sort_keys: bool = True
    ensure_ascii: bool = False

    def __post_init__(self) -> None:
        _validate_indent(self.indent)
        _validate_flag(self.sort_keys, name="sort_keys")
        _validate_flag(self.ensure_ascii, name="ensure_ascii")

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "CodecSettings":
        """Return settings populated from ``values``, such as a parsed JSON object.

        Missing keys fall back to the defaults. Unknown keys are rejected.
        """

        unknown = sorted(set(values) - {"indent", "sort_keys", "ensure_ascii"})
        if unknown:
            raise ValueError(f"Unknown codec settings: {', '.join(unknown)}")
        return cls(**values)


DEFAULT_SETTINGS = CodecSettings()


__all__ = ["CodecSettings", "DEFAULT_SETTINGS"]
