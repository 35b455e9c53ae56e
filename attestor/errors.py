"""Errors raised when a contract entry point cannot be used."""

from __future__ import annotations

from collections.abc import Iterable

from attestor.felt import Felt


class EntrypointError(Exception):
    """A contract entry point failed or answered with an unexpected shape."""

    def __init__(self, entrypoint: str, message: str) -> None:
        super().__init__(message)
        self.entrypoint = entrypoint


def entrypoint_internal_error(name: str, error: BaseException) -> EntrypointError:
    """Wrap an error raised while calling the entry point ``name``."""
    return EntrypointError(name, f"Error when calling entrypoint `{name}`: {error}")


def entrypoint_response_error(name: str, result: Iterable[Felt]) -> EntrypointError:
    """Report a response from ``name`` that has the wrong shape."""
    rendered = "[" + ", ".join(str(felt) for felt in result) + "]"
    return EntrypointError(
        name, f"invalid response from entrypoint `{name}`. Response: {rendered}"
    )