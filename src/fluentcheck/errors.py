"""Failure type raised by every check."""

from __future__ import annotations


class FluentCheckException(AssertionError):
    """A check did not hold.

    The message is the whole diagnostic: it is the text rendered by
    :class:`fluentcheck.messages.MessageBuilder`, kept verbatim so tests can
    assert on it.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message
