"""Exceptions raised by the halving package."""

from __future__ import annotations

from typing import Iterable


class HalvingError(Exception):
    """Base class for errors raised by this package."""


class DecodeError(HalvingError, ValueError):
    """Raised when a document cannot be decoded into a record tree."""

    def __init__(self, record_type: str, errors: Iterable[str]) -> None:
        self.record_type = record_type
        self.errors = tuple(errors)
        detail = "; ".join(self.errors) if self.errors else "invalid document"
        super().__init__(f"Could not decode {record_type}: {detail}")


class IncompleteHalvingError(HalvingError, TypeError):
    """Raised when a record's ``by_halving`` does not assign every field."""

    def __init__(
        self,
        record_type: str,
        missing: Iterable[str] = (),
        *,
        reason: str | None = None,
    ) -> None:
        self.record_type = record_type
        self.missing = tuple(sorted(missing))
        if reason is None:
            reason = "by_halving does not assign " + ", ".join(
                f"'{name}'" for name in self.missing
            )
        super().__init__(f"{record_type}: {reason}")


__all__ = ["DecodeError", "HalvingError", "IncompleteHalvingError"]
