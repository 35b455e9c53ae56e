"""Read-only queries against the staking, attestation and token contracts."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol

from attestor.errors import entrypoint_internal_error, entrypoint_response_error
from attestor.felt import Felt, selector_from_name
from attestor.staking import Balance, EpochInfo, ValidationContracts

#: Block identifier used for every query.
LATEST = "latest"

_EPOCH_INFO_ENTRYPOINT = "get_attestation_info_by_operational_address"
_ATTEST_WINDOW_ENTRYPOINT = "attestation_window"
_BALANCE_ENTRYPOINT = "balance_of"

_U64_MASK = (1 << 64) - 1
_U128_MASK = (1 << 128) - 1


@dataclass(frozen=True)
class FunctionCall:
    """A call to a contract entry point."""

    contract_address: Felt
    entry_point_selector: Felt
    calldata: tuple[Felt, ...] = ()


class Signer(Protocol):
    """What the queries need from an account able to talk to the chain."""

    def call(self, call: FunctionCall, block_id: str) -> Sequence[Felt]:
        """Execute ``call`` at ``block_id`` and return the raw result."""

    def address(self) -> Felt:
        """The operational address of the account."""

    def validation_contracts(self) -> ValidationContracts:
        """The staking and attestation contracts in use."""


def _call_entrypoint(
    signer: Signer,
    contract: Felt,
    name: str,
    calldata: Iterable[Felt],
    expected_len: int,
) -> list[Felt]:
    call = FunctionCall(
        contract_address=contract,
        entry_point_selector=selector_from_name(name),
        calldata=tuple(calldata),
    )
    try:
        result = list(signer.call(call, LATEST))
    except Exception as err:
        raise entrypoint_internal_error(name, err) from err
    if len(result) != expected_len:
        raise entrypoint_response_error(name, result)
    return result


def fetch_epoch_info(signer: Signer) -> EpochInfo:
    """Fetch the current epoch as seen by the signer's operational address."""
    staker, stake, epoch_len, epoch_id, starting_block = _call_entrypoint(
        signer,
        signer.validation_contracts().staking,
        _EPOCH_INFO_ENTRYPOINT,
        [signer.address()],
        5,
    )
    return EpochInfo(
        staker_address=staker,
        stake=int(stake) & _U128_MASK,
        epoch_len=int(epoch_len) & _U64_MASK,
        epoch_id=int(epoch_id) & _U64_MASK,
        starting_block=int(starting_block) & _U64_MASK,
    )


def fetch_attest_window(signer: Signer) -> int:
    """Fetch the length of the attestation window in blocks."""
    (window,) = _call_entrypoint(
        signer,
        signer.validation_contracts().attest,
        _ATTEST_WINDOW_ENTRYPOINT,
        [],
        1,
    )
    return int(window) & _U64_MASK


def fetch_validator_balance(signer: Signer, token_address: Felt) -> Balance:
    """Fetch the signer's balance held by the token contract at ``token_address``."""
    low, high = _call_entrypoint(
        signer,
        token_address,
        _BALANCE_ENTRYPOINT,
        [signer.address()],
        2,
    )
    return Balance.from_felts(low, high)