"""A retry budget that is either a finite count or infinite."""

from __future__ import annotations

import re
from dataclasses import dataclass

_UINT64_LIMIT = 2**64
_DIGITS = re.compile(r"[0-9]+")


@dataclass
class Retries:
    """How many retries are left; a fresh instance is infinite."""

    infinite: bool = True
    value: int = 0

    @classmethod
    def from_string(cls, text: str) -> Retries:
        """Parse a positive count or the keyword ``infinite``."""
        retries = cls()
        if text == "infinite":
            return retries
        if not _DIGITS.fullmatch(text) or int(text) >= _UINT64_LIMIT:
            raise ValueError(
                "cannot create retries from string:"
                f" `{text}` is neither a positive number nor the `infinite` key word"
            )
        value = int(text)
        if value == 0:
            raise ValueError("retries value should be greater or equal than one")
        retries.set(value)
        return retries

    def set(self, value: int) -> None:
        """Make the budget finite with ``value`` retries."""
        if value < 0:
            raise ValueError("retries value cannot be negative")
        self.infinite = False
        self.value = value

    def sub(self) -> None:
        """Use up one retry; an infinite budget never changes."""
        if self.infinite:
            return
        if self.value == 0:
            raise ValueError("underflow error, Retries is already zero")
        self.value -= 1

    def is_zero(self) -> bool:
        """Whether a finite budget has run out."""
        return not self.infinite and self.value == 0

    def __str__(self) -> str:
        return "infinite" if self.infinite else str(self.value)