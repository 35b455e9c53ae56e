# attestor

Building blocks for a Starknet staking validator: Starknet field elements
and entry-point selectors, reading the current epoch and the attestation
window from the staking and attestation contracts, a retry budget that is
either finite or infinite, retrying an epoch fetch until the epoch switch
looks right, and asking an external signing service to sign an invoke
transaction.

## Installation

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Modules

- `attestor.felt`
  - `Felt`: a frozen, ordered value in `[0, FIELD_PRIME)`. `Felt.from_string`
    parses hexadecimal (`0x`), binary (`0b`), octal (`0o`) or decimal text
    and raises `ValueError` otherwise; `str()` and `to_json()` give
    lower-case hex.
  - `address_from_string(text)`: parse an address, raising `ValueError`
    with a message naming the text.
  - `selector_from_name(name)`: the Starknet-keccak entry-point selector
    (`__default__` and `__l1_default__` give zero).
  - `Address`, `BlockHash` (aliases of `Felt`) and `BlockNumber` (`int`).
- `attestor.retries`
  - `Retries`: a fresh instance is infinite. `Retries.from_string` accepts
    `"infinite"` or a decimal count of at least one that fits in 64 bits;
    anything else raises `ValueError`. `set(value)` makes it finite,
    `sub()` uses one retry (an infinite budget never changes; a finite one
    at zero raises `ValueError`), `is_zero()` tells whether a finite budget
    has run out. `str()` gives the count or `"infinite"`.
- `attestor.staking`
  - `Balance`: a wei amount. `Balance.from_felts(low, high)` joins the two
    128-bit halves of a u256, `text(base)` renders it in base 2 to 62,
    `strk()` converts to STRK as a float.
  - `EpochInfo`: staker address, stake, epoch length, epoch id and starting
    block. `to_json()` (also `str()`) gives compact JSON with the keys
    `staker_address`, `stake`, `epoch_len`, `epoch_id` and
    `current_epoch_starting_block`.
  - `AttestInfo`: target block, target block hash, window start and end.
  - `ValidationContracts`: staking and attestation contract addresses;
    `ValidationContracts.from_addresses(staking, attest)` parses them from
    text.
  - `PrepareAttest` and `DoAttest`: events carrying a block hash.
- `attestor.errors`
  - `EntrypointError`, with the failing entry point in `entrypoint`, and
    the helpers `entrypoint_internal_error(name, error)` and
    `entrypoint_response_error(name, result)` that build it.
- `attestor.queries`
  - `Signer`: a protocol for any object with `call(call, block_id)`,
    `address()` and `validation_contracts()`.
  - `FunctionCall`: contract address, entry-point selector and calldata.
  - `fetch_epoch_info(signer)`: calls
    `get_attestation_info_by_operational_address` on the staking contract
    at block `"latest"` and returns an `EpochInfo`.
  - `fetch_attest_window(signer)`: calls `attestation_window` on the
    attestation contract and returns the window length in blocks.
  - `fetch_validator_balance(signer, token_address)`: calls `balance_of`
    on the given token contract and returns a `Balance`.

  A call that raises, or a result with the wrong number of values, raises
  `EntrypointError`.
- `attestor.external`
  - `hash_and_sign_tx(txn, chain_id, url)`: POSTs
    `{"transaction": txn, "chain_id": "0x..."}` as JSON to `url + "/sign"`
    (30 second timeout) and returns a `SignResponse` holding the two
    signature felts. A non-2xx status raises `SignError` with the message
    `server error <status>: <body>`; a body that is not a valid
    `{"signature": [r, s]}` raises a JSON decoding error or `ValueError`.
  - `sign_invoke_tx(txn, chain_id, url)`: signs the transaction dict in
    place, setting `txn["signature"]` to the two signature parts as hex
    strings; on failure the dict is left as it was.
  - `default_resources()`: zeroed `l1_gas`, `l1_data_gas` and `l2_gas`
    resource bounds.
- `attestor.retry`
  - `correct_epoch_switch(prev_epoch, new_epoch)`: true when the new epoch
    id is one more than the previous one and it starts exactly where the
    previous epoch ends.
  - `fetch_epoch_and_attest_info_with_retry(fetch, prev_epoch,
    is_epoch_switch_correct, max_retries, new_epoch_id, sleep=time.sleep)`:
    calls `fetch()` (which returns an `(EpochInfo, AttestInfo)` pair) until
    it succeeds and the switch check passes, sleeping one second between
    attempts, for at most `max_retries` retries (the budget passed in is
    not modified). When the budget runs out it raises `EpochFetchError`.

## Example

    from attestor.felt import selector_from_name
    from attestor.retries import Retries

    str(selector_from_name("attestation_window"))
    # '0x821e1f8dcf2ef7b00b980fd8f2e0761838cfd3b2328bd8494d6985fc3e910c'

    budget = Retries.from_string("10")
    while not budget.is_zero():
        budget.sub()

    Retries.from_string("infinite").is_zero()   # always False

Querying the contracts with a signer of your own:

    from attestor.queries import fetch_attest_window, fetch_epoch_info

    epoch = fetch_epoch_info(signer)
    window = fetch_attest_window(signer)

## What this package does not do

- It does not talk to a Starknet node itself: every contract call goes
  through the `call` method of the `Signer` you supply.
- It does not compute the block to attest to within an epoch; the
  `fetch` callable given to `fetch_epoch_and_attest_info_with_retry` must
  produce the `AttestInfo`.
- It does not subscribe to block headers, dispatch attestation events,
  build, estimate, submit or track attestation transactions, or sign with
  a local private key; signing is only done through an external service.
- It has no command-line program, no configuration loading and no
  metrics.