"""Starknet field elements, addresses and entry point selectors."""

from __future__ import annotations

import re
from dataclasses import dataclass

from Crypto.Hash import keccak

#: Order of the Starknet base field.
FIELD_PRIME = 2**251 + 17 * 2**192 + 1

_SELECTOR_MASK = (1 << 250) - 1
_DEFAULT_ENTRY_POINTS = frozenset({"__default__", "__l1_default__"})
_NUMBER_PATTERN = re.compile(r"0[xX][0-9a-fA-F]+|0[bB][01]+|0[oO][0-7]+|[0-9]+")


@dataclass(frozen=True, order=True)
class Felt:
    """An element of the Starknet field, always kept in ``[0, FIELD_PRIME)``."""

    value: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError(f"felt value must be an int, got {type(self.value).__name__}")
        if not 0 <= self.value < FIELD_PRIME:
            raise ValueError(f"value {self.value} does not fit in a felt")

    @classmethod
    def from_string(cls, text: str) -> Felt:
        """Parse a hexadecimal (``0x``), binary, octal or decimal string."""
        if not _NUMBER_PATTERN.fullmatch(text):
            raise ValueError(f"invalid felt string: `{text}`")
        return cls(int(text, 0))

    def to_json(self) -> str:
        """Return the value as it appears in JSON-RPC payloads: lower-case hex."""
        return str(self)

    def __str__(self) -> str:
        return hex(self.value)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value


#: An account or contract address.
Address = Felt
#: The hash of a block.
BlockHash = Felt
#: The height of a block.
BlockNumber = int


def address_from_string(text: str) -> Felt:
    """Parse an address, raising ``ValueError`` if the text is not a felt."""
    try:
        return Felt.from_string(text)
    except ValueError as err:
        raise ValueError(f"cannot turn string `{text}` into an address: {err}") from err


def selector_from_name(name: str) -> Felt:
    """Return the entry point selector (Starknet keccak) of a function name."""
    if name in _DEFAULT_ENTRY_POINTS:
        return Felt(0)
    digest = keccak.new(digest_bits=256, data=name.encode("utf-8")).digest()
    return Felt(int.from_bytes(digest, "big") & _SELECTOR_MASK)