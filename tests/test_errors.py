from attestor.errors import (
    EntrypointError,
    entrypoint_internal_error,
    entrypoint_response_error,
)
from attestor.felt import Felt


def test_internal_error_message():
    err = entrypoint_internal_error("attestation_window", ValueError("some contract error"))
    assert str(err) == "Error when calling entrypoint `attestation_window`: some contract error"


def test_internal_error_keeps_entrypoint_name():
    err = entrypoint_internal_error("balance_of", RuntimeError("boom"))
    assert isinstance(err, EntrypointError)
    assert err.entrypoint == "balance_of"
    assert "boom" in str(err)


def test_response_error_single_felt():
    err = entrypoint_response_error(
        "get_attestation_info_by_operational_address", [Felt(1)]
    )
    assert str(err) == (
        "invalid response from entrypoint "
        "`get_attestation_info_by_operational_address`. Response: [0x1]"
    )


def test_response_error_empty():
    err = entrypoint_response_error("attestation_window", [])
    assert str(err) == "invalid response from entrypoint `attestation_window`. Response: []"


def test_response_error_several_felts():
    err = entrypoint_response_error("balance_of", [Felt(1), Felt(255)])
    assert str(err).endswith("Response: [0x1, 0xff]")
    assert err.entrypoint == "balance_of"


def test_response_error_is_an_entrypoint_error():
    err = entrypoint_response_error("attestation_window", [])
    assert isinstance(err, EntrypointError)
    assert isinstance(err, Exception)
    assert err.entrypoint == "attestation_window"
    assert str(err).endswith("Response: []")