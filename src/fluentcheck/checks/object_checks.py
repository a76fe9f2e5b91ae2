"""Checks available on every value."""

from __future__ import annotations

from typing import Any, TypeVar

from fluentcheck.checker import Check, CheckLink
from fluentcheck.errors import FluentCheckException
from fluentcheck.fields import (
    ComparisonOutcome,
    FieldMismatch,
    FieldMissingOnActual,
    FieldMissingOnExpected,
    ValueMismatch,
    compare_fields,
    describe_fields,
    values_equal,
)
from fluentcheck.messages import MessageBuilder, type_name

T = TypeVar("T")

_SAME_INSTANCE = "The {0} must be the same instance than expected one."
_DISTINCT_INSTANCE = "The {0} must have be an instance distinct from expected one."


class ObjectCheck(Check[T]):
    def is_equal_to(self, expected: Any) -> CheckLink[ObjectCheck[T]]:
        def action() -> None:
            if not values_equal(self.value, expected):
                self.fail(self.build_message("The {0} is different from the expected one.").expected(expected))

        return self.execute(
            action,
            lambda: self.build_message("The {0} is equal to the expected one whereas it must not.")
            .expected(expected)
            .comparison("different from"),
        )

    def is_not_equal_to(self, expected: Any) -> CheckLink[ObjectCheck[T]]:
        return self.not_.is_equal_to(expected)

    def is_same_reference_than(self, expected: Any) -> CheckLink[ObjectCheck[T]]:
        def action() -> None:
            if self.value is not expected:
                self.fail(
                    self.build_message(_SAME_INSTANCE)
                    .for_entity("object")
                    .expected(expected)
                    .comparison("same instance than")
                )

        return self.execute(
            action,
            lambda: self.build_message(_DISTINCT_INSTANCE)
            .for_entity("object")
            .expected(expected)
            .comparison("distinct from"),
        )

    def is_distinct_from(self, expected: Any) -> CheckLink[ObjectCheck[T]]:
        def action() -> None:
            if self.value is expected:
                self.fail(
                    self.build_message(_DISTINCT_INSTANCE)
                    .for_entity("object")
                    .expected(expected)
                    .comparison("distinct from")
                )

        return self.execute(
            action,
            lambda: self.build_message(_SAME_INSTANCE)
            .for_entity("object")
            .expected(expected)
            .comparison("same instance than"),
        )

    def is_instance_of(self, expected_type: type | tuple[type, ...]) -> CheckLink[ObjectCheck[T]]:
        _require_type(expected_type)

        def action() -> None:
            if not isinstance(self.value, expected_type):
                self.fail(
                    self.build_message("The {0} is not an instance of the expected type.")
                    .expected(expected_type)
                    .label("Expected type:")
                )

        return self.execute(
            action,
            lambda: self.build_message("The {0} is an instance of the given type whereas it must not.")
            .expected(expected_type)
            .label("Forbidden type:"),
        )

    def is_not_instance_of(self, expected_type: type | tuple[type, ...]) -> CheckLink[ObjectCheck[T]]:
        return self.not_.is_instance_of(expected_type)

    def is_none(self) -> CheckLink[ObjectCheck[T]]:
        def action() -> None:
            if self.value is not None:
                self.fail(self.build_message("The {0} must be None."))

        return self.execute(action, lambda: self.build_message("The {0} must not be None."))

    def is_not_none(self) -> CheckLink[ObjectCheck[T]]:
        return self.not_.is_none()

    def has_fields_equal_to_those(self, expected: Any) -> CheckLink[ObjectCheck[T]]:
        """Check that every field of the value equals the same field of ``expected``.

        Fields are instance attributes, private ones included; ``__eq__`` of the
        compared objects themselves is not used. The first differing or missing
        field is reported.
        """

        def action() -> None:
            outcome = compare_fields(self.value, expected)
            message = self._describe_difference(outcome)
            if message is not None:
                self.fail(message.expected(expected))

        return self.execute(action, lambda: self._same_fields_message(expected))

    def has_fields_not_equal_to_those(self, expected: Any) -> CheckLink[ObjectCheck[T]]:
        """Check that at least one field differs from ``expected``.

        A field present on one side only counts as a difference.
        """
        return self.not_.has_fields_equal_to_those(expected)

    def _describe_difference(self, outcome: ComparisonOutcome) -> MessageBuilder | None:
        if isinstance(outcome, FieldMismatch):
            return self.build_message(f"The {{0}}'s field {_escape(outcome.name)} does not have the expected value.")
        if isinstance(outcome, FieldMissingOnExpected):
            return self.build_message(f"The {{0}} has a field that is absent from the expected one: {_escape(outcome.name)}.")
        if isinstance(outcome, FieldMissingOnActual):
            return self.build_message(f"The expected value has a field that is absent from the checked one: {_escape(outcome.name)}.")
        if isinstance(outcome, ValueMismatch):
            if not outcome.same_type:
                return self.build_message("The {0} is not of the same type as the expected one.")
            return self.build_message("The {0} does not have the expected value.")
        return None

    def _same_fields_message(self, expected: Any) -> MessageBuilder:
        fields = describe_fields(self.value)
        if fields:
            template = f"The {{0}}'s field {_escape(fields[0].name)} has the same value in the comparand, whereas it must not."
        else:
            template = "The {0} is equal to the comparand, whereas it must not."
        return self.build_message(template).expected(expected).comparison("different from")


def _escape(text: str) -> str:
    return text.replace("{", "{{").replace("}", "}}")


def _require_type(expected_type: Any) -> None:
    candidates = expected_type if isinstance(expected_type, tuple) else (expected_type,)
    for candidate in candidates:
        if not isinstance(candidate, type):
            raise FluentCheckException(
                f"\nThe given type is not a class: {type_name(type(candidate))} {candidate!r}."
            )
