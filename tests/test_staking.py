import json
import math

import pytest

from attestor.felt import Felt
from attestor.staking import (
    AttestInfo,
    Balance,
    DoAttest,
    EpochInfo,
    PrepareAttest,
    ValidationContracts,
)


def test_balance_from_low_only():
    assert Balance.from_felts(Felt(5), Felt(0)).wei == 5


def test_balance_high_half_is_shifted():
    balance = Balance.from_felts(Felt(0), Felt(1))
    assert int(balance.text(16), 16) == 1 << 128
    assert balance.wei == 2**128


def test_balance_text_round_trips_for_standard_bases():
    balance = Balance.from_felts(Felt(123456789), Felt(987))
    for base in (2, 8, 10, 16, 36):
        assert int(balance.text(base), base) == balance.wei


def test_balance_text_zero():
    assert Balance(0).text(10) == "0"


def test_balance_text_large_base_uses_upper_case():
    assert Balance(61).text(62) == "Z"


def test_balance_text_invalid_base():
    with pytest.raises(ValueError):
        Balance(1).text(1)
    with pytest.raises(ValueError):
        Balance(1).text(63)


def test_balance_strk_one_token():
    assert Balance(10**18).strk() == 1.0


def test_balance_strk_scales_linearly():
    assert Balance(3 * 10**18).strk() == 3 * Balance(10**18).strk()


def test_balance_strk_overflow_is_infinite():
    assert Balance(10**400).strk() == math.inf


def test_epoch_info_json_fields():
    epoch = EpochInfo(
        staker_address=Felt(0x123),
        stake=1000000000000000000,
        epoch_len=40,
        epoch_id=1516,
        starting_block=639270,
    )
    parsed = json.loads(epoch.to_json())
    assert parsed["staker_address"] == "0x123"
    assert int(parsed["stake"]) == epoch.stake
    assert parsed["epoch_len"] == 40
    assert parsed["epoch_id"] == 1516
    assert parsed["current_epoch_starting_block"] == 639270
    assert str(epoch) == epoch.to_json()


def test_epoch_info_json_is_compact_and_ordered():
    text = EpochInfo(staker_address=Felt(1)).to_json()
    assert " " not in text
    assert list(json.loads(text)) == [
        "staker_address",
        "stake",
        "epoch_len",
        "epoch_id",
        "current_epoch_starting_block",
    ]


def test_attest_info_defaults_to_zero_hash():
    info = AttestInfo(target_block=639276, window_start=639287, window_end=639292)
    assert info.target_block_hash == Felt(0)
    assert info.window_end - info.target_block == 16


def test_events_are_hashable_and_compare_by_hash():
    counts = {}
    for event in [DoAttest(Felt(1)), DoAttest(Felt(1)), DoAttest(Felt(2))]:
        counts[event] = counts.get(event, 0) + 1
    assert counts == {DoAttest(Felt(1)): 2, DoAttest(Felt(2)): 1}
    assert PrepareAttest().block_hash == Felt(0)


def test_validation_contracts_from_addresses():
    contracts = ValidationContracts.from_addresses("0xabc", "0xdef")
    assert contracts.staking == Felt(0xABC)
    assert contracts.attest == Felt(0xDEF)
    text = str(contracts)
    assert "Staking contract address: 0xabc" in text
    assert "Attestation contract address: 0xdef" in text


def test_validation_contracts_invalid_address():
    with pytest.raises(ValueError, match="into an address"):
        ValidationContracts.from_addresses("bad", "0x1")