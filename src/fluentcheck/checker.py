"""Check execution and negation.

Every concrete check funnels through :meth:`Check.execute`. The check supplies
its positive logic as an action that raises :class:`FluentCheckException` when
the value does not satisfy it, plus the message to report when the check holds
although it was negated. ``execute`` then decides, from the action's outcome
and the check's negation flag alone, whether the caller sees a failure:

============  =================  =========================
negated       action raised      result
============  =================  =========================
no            no                 pass, returns a link
no            yes                the action's failure
yes           no                 failure, negated message
yes           yes                pass, returns a link
============  =================  =========================
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, TypeVar, Union

from fluentcheck.config import CheckSettings, get_settings
from fluentcheck.errors import FluentCheckException
from fluentcheck.messages import MessageBuilder

T = TypeVar("T")
C = TypeVar("C", bound="Check")

NegatedMessage = Union[str, MessageBuilder, Callable[[], Union[str, MessageBuilder]]]


class Check(Generic[T]):
    """Holds a checked value and whether the next check is negated.

    Instances are immutable: :attr:`not_` returns a new check over the same
    value instead of flipping a flag in place.
    """

    def __init__(self, value: T, *, negated: bool = False):
        self._value = value
        self._negated = negated

    @classmethod
    def that(cls, value: object) -> Check:
        """Start a chain on ``value`` (same as :func:`fluentcheck.check_that`)."""
        from fluentcheck import check_that

        return check_that(value)

    @property
    def value(self) -> T:
        return self._value

    @property
    def negated(self) -> bool:
        return self._negated

    @property
    def not_(self: C) -> C:
        return type(self)(self._value, negated=not self._negated)

    @property
    def settings(self) -> CheckSettings:
        return get_settings()

    def build_message(self, template: str) -> MessageBuilder:
        return MessageBuilder(template, self._value, self.settings)

    def execute(self: C, action: Callable[[], None], negated_message: NegatedMessage) -> CheckLink[C]:
        """Run ``action`` and interpret its outcome against the negation flag.

        Args:
            action: Positive check logic; raises FluentCheckException when the
                value does not satisfy the check.
            negated_message: Failure text used when the check holds while
                negated. A callable is only evaluated if that failure happens.

        Returns:
            A link for chaining further checks on the same value.
        """
        settings = self.settings
        check_name = getattr(action, "__qualname__", repr(action))
        try:
            action()
        except FluentCheckException:
            if not self._negated:
                self._trace(settings, check_name, "failed")
                raise
            self._trace(settings, check_name, "passed")
            return CheckLink(self)

        if self._negated:
            self._trace(settings, check_name, "failed")
            if callable(negated_message):
                negated_message = negated_message()
            raise FluentCheckException(str(negated_message))

        self._trace(settings, check_name, "passed")
        return CheckLink(self)

    def _trace(self, settings: CheckSettings, check_name: str, outcome: str) -> None:
        if not settings.trace_checks:
            return
        logger = logging.getLogger(settings.logger_name)
        logger.debug(
            "%s %s on %s (negated=%s)",
            check_name.split(".<locals>")[0],
            outcome,
            type(self._value).__qualname__,
            self._negated,
        )

    def fail(self, message: str | MessageBuilder) -> None:
        """Raise the failure for the positive case of a check."""
        raise FluentCheckException(str(message))


class CheckLink(Generic[C]):
    """Returned by a passing check to chain further checks on the same value."""

    def __init__(self, check: C):
        self._check = check

    @property
    def check(self) -> C:
        return self._check

    @property
    def and_(self) -> C:
        return type(self._check)(self._check.value)

    @property
    def which(self) -> C:
        return self.and_
