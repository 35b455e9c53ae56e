"""Signing invoke transactions through an external signing service."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

import requests

from attestor.felt import Felt

#: Path of the signing endpoint, appended to the service's base URL.
SIGN_ENDPOINT = "/sign"

_TIMEOUT_SECONDS = 30.0
_RESOURCE_KINDS = ("l1_gas", "l1_data_gas", "l2_gas")


class SignError(Exception):
    """The signing service answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"server error {status_code}: {body}")
        self.status_code = status_code
        self.body = body


@dataclass(frozen=True)
class SignResponse:
    """The two components of a transaction signature."""

    signature: tuple[Felt, Felt]


def _encode(value: Any) -> Any:
    if isinstance(value, Felt):
        return value.to_json()
    raise TypeError(f"cannot encode {type(value).__name__} as JSON")


def _parse_response(text: str) -> SignResponse:
    data = json.loads(text)
    signature = data.get("signature") if isinstance(data, dict) else None
    if not isinstance(signature, list) or len(signature) != 2:
        raise ValueError(f"invalid sign response: {text}")
    if not all(isinstance(part, str) for part in signature):
        raise ValueError(f"invalid sign response: {text}")
    r, s = (Felt.from_string(part) for part in signature)
    return SignResponse(signature=(r, s))


def hash_and_sign_tx(txn: dict[str, Any], chain_id: Felt, url: str) -> SignResponse:
    """Ask the signing service at ``url`` to hash and sign ``txn``."""
    body = json.dumps({"transaction": txn, "chain_id": chain_id.to_json()}, default=_encode)
    response = requests.post(
        url + SIGN_ENDPOINT,
        data=body,
        headers={"Content-Type": "application/json"},
        timeout=_TIMEOUT_SECONDS,
    )
    if not 200 <= response.status_code < 300:
        raise SignError(response.status_code, response.text.strip())
    return _parse_response(response.text)


def sign_invoke_tx(txn: dict[str, Any], chain_id: Felt, url: str) -> None:
    """Sign ``txn`` in place; its signature is left untouched on failure."""
    response = hash_and_sign_tx(txn, chain_id, url)
    txn["signature"] = [str(part) for part in response.signature]


def default_resources() -> dict[str, dict[str, str]]:
    """Zeroed resource bounds, to be replaced after fee estimation."""
    return {kind: {"max_amount": "0x0", "max_price_per_unit": "0x0"} for kind in _RESOURCE_KINDS}