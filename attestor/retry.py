"""Fetching epoch and attestation info with a retry budget."""

from __future__ import annotations

import dataclasses
import logging
import time
from collections.abc import Callable

from attestor.retries import Retries
from attestor.staking import AttestInfo, EpochInfo

logger = logging.getLogger(__name__)

EpochFetcher = Callable[[], "tuple[EpochInfo, AttestInfo]"]
EpochSwitchCheck = Callable[["EpochInfo | None", EpochInfo], bool]

_RETRY_DELAY_SECONDS = 1.0


class EpochFetchError(Exception):
    """Epoch info could not be fetched, or the epoch switch never looked right."""


def correct_epoch_switch(prev_epoch: EpochInfo, new_epoch: EpochInfo) -> bool:
    """Whether ``new_epoch`` directly follows ``prev_epoch``."""
    return (
        new_epoch.epoch_id == prev_epoch.epoch_id + 1
        and new_epoch.starting_block == prev_epoch.starting_block + prev_epoch.epoch_len
    )


def _attempt(fetch: EpochFetcher):
    try:
        epoch, attest = fetch()
    except Exception as err:
        return None, None, err
    return epoch, attest, None


def fetch_epoch_and_attest_info_with_retry(
    fetch: EpochFetcher,
    prev_epoch: EpochInfo | None,
    is_epoch_switch_correct: EpochSwitchCheck,
    max_retries: Retries,
    new_epoch_id: str,
    sleep: Callable[[float], None] = time.sleep,
) -> tuple[EpochInfo, AttestInfo]:
    """Call ``fetch`` until it succeeds with a correct epoch switch or retries run out."""
    retries = dataclasses.replace(max_retries)
    total_retries = str(retries)

    epoch, attest, error = _attempt(fetch)
    while (
        error is not None or not is_epoch_switch_correct(prev_epoch, epoch)
    ) and not retries.is_zero():
        if error is not None:
            logger.debug("Failed to fetch epoch info (epoch id %s): %s", new_epoch_id, error)
        else:
            logger.debug("Wrong epoch switch from %s to %s", prev_epoch, epoch)
        logger.debug("Retrying to fetch epoch info: %s retries remaining", retries)

        sleep(_RETRY_DELAY_SECONDS)

        epoch, attest, error = _attempt(fetch)
        retries.sub()

    if error is not None:
        raise EpochFetchError(
            f"Failed to fetch epoch info after {total_retries} retries. "
            f"Epoch id: {new_epoch_id}. Error: {error}"
        ) from error
    if not is_epoch_switch_correct(prev_epoch, epoch):
        raise EpochFetchError(
            f"Wrong epoch switch after {total_retries} retries from epoch:\n"
            f"{prev_epoch}\nTo epoch:\n{epoch}"
        )
    return epoch, attest