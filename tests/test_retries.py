import pytest

from attestor.retries import Retries


@pytest.mark.parametrize("text", ["infinte", "somtehing", ""])
def test_from_string_invalid(text):
    with pytest.raises(ValueError) as info:
        Retries.from_string(text)
    message = str(info.value)
    assert "cannot create retries from string" in message
    assert text in message


def test_from_string_zero():
    with pytest.raises(ValueError, match="value should be greater or equal than one"):
        Retries.from_string("0")


@pytest.mark.parametrize("text", ["1", "123", "infinite", "1999"])
def test_from_string_valid(text):
    assert str(Retries.from_string(text)) == text


def test_from_string_rejects_sign_and_overflow():
    for text in ["+5", "-5", str(2**64)]:
        with pytest.raises(ValueError, match="cannot create retries from string"):
            Retries.from_string(text)


def test_retry_is_zero():
    retries = Retries()
    assert str(retries) == "infinite"
    retries.sub()
    assert str(retries) == "infinite"

    retries.set(3)
    for remaining in range(3, 0, -1):
        assert str(retries) == str(remaining)
        retries.sub()
    assert retries.is_zero()


def test_infinite_is_never_zero():
    retries = Retries()
    for _ in range(5):
        retries.sub()
    assert not retries.is_zero()


def test_sub_underflow():
    retries = Retries()
    retries.set(1)
    retries.sub()
    with pytest.raises(ValueError, match="underflow"):
        retries.sub()