"""Staking data: balances, epochs, attestation windows and contract addresses."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from fractions import Fraction

from attestor.felt import Felt, address_from_string

_WEI_PER_STRK = 10**18
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"


@dataclass(frozen=True, order=True)
class Balance:
    """A STRK balance in wei."""

    wei: int = 0

    @classmethod
    def from_felts(cls, low: Felt, high: Felt) -> Balance:
        """Combine the low and high 128-bit halves of a u256."""
        return cls(int(low) + (int(high) << 128))

    def text(self, base: int) -> str:
        """Render the balance in a base from 2 to 62."""
        if not 2 <= base <= len(_DIGITS):
            raise ValueError(f"invalid base {base}")
        magnitude = abs(self.wei)
        digits = []
        while True:
            magnitude, digit = divmod(magnitude, base)
            digits.append(_DIGITS[digit])
            if magnitude == 0:
                break
        sign = "-" if self.wei < 0 else ""
        return sign + "".join(reversed(digits))

    def strk(self) -> float:
        """The balance in STRK; infinity when it does not fit a float."""
        try:
            return float(Fraction(self.wei, _WEI_PER_STRK))
        except OverflowError:
            return math.inf if self.wei > 0 else -math.inf


@dataclass(frozen=True)
class PrepareAttest:
    """Tells the dispatcher to prepare the next attestation."""

    block_hash: Felt = field(default_factory=Felt)


@dataclass(frozen=True)
class DoAttest:
    """Tells the dispatcher to send the attestation transaction."""

    block_hash: Felt = field(default_factory=Felt)


@dataclass
class AttestInfo:
    """The block to attest to and the window in which to do it."""

    target_block: int = 0
    target_block_hash: Felt = field(default_factory=Felt)
    window_start: int = 0
    window_end: int = 0


@dataclass(frozen=True)
class EpochInfo:
    """The staker's view of the current epoch."""

    staker_address: Felt = field(default_factory=Felt)
    stake: int = 0
    epoch_len: int = 0
    epoch_id: int = 0
    starting_block: int = 0

    def to_json(self) -> str:
        """Compact JSON with the field names used by the staking contract."""
        return json.dumps(
            {
                "staker_address": self.staker_address.to_json(),
                "stake": str(self.stake),
                "epoch_len": self.epoch_len,
                "epoch_id": self.epoch_id,
                "current_epoch_starting_block": self.starting_block,
            },
            separators=(",", ":"),
        )

    def __str__(self) -> str:
        return self.to_json()


@dataclass(frozen=True)
class ValidationContracts:
    """Addresses of the staking and attestation contracts."""

    staking: Felt
    attest: Felt

    @classmethod
    def from_addresses(cls, staking: str, attest: str) -> ValidationContracts:
        """Build from the textual contract addresses."""
        return cls(staking=address_from_string(staking), attest=address_from_string(attest))

    def __str__(self) -> str:
        return (
            "{\n"
            f"        Staking contract address: {self.staking},\n"
            f"        Attestation contract address: {self.attest},\n"
            "    }"
        )