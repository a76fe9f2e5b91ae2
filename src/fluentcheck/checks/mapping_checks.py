"""Checks for dictionaries and other :class:`~collections.abc.Mapping` values."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from fluentcheck.checker import CheckLink
from fluentcheck.checks.object_checks import ObjectCheck
from fluentcheck.fields import values_equal

K = TypeVar("K")
V = TypeVar("V")


class MappingCheck(ObjectCheck[Mapping[K, V]]):
    def contains_key(self, key: K) -> CheckLink[MappingCheck[K, V]]:
        def action() -> None:
            if key not in self.value:
                self.fail(
                    self.build_message("The {0} does not contain the expected key.")
                    .expected(key)
                    .label("Expected key:")
                )

        return self.execute(
            action,
            lambda: self.build_message("The {0} does contain the given key, whereas it must not.")
            .expected(key)
            .label("Given key:"),
        )

    def contains_value(self, expected_value: V) -> CheckLink[MappingCheck[K, V]]:
        def action() -> None:
            if any(values_equal(value, expected_value) for value in self.value.values()):
                return
            self.fail(
                self.build_message("The {0} does not contain the expected value.")
                .expected(expected_value)
                .label("Expected value:")
            )

        return self.execute(action, lambda: self._contains_value_negated(expected_value))

    def contains_pair(self, expected_key: K, expected_value: V) -> CheckLink[MappingCheck[K, V]]:
        def action() -> None:
            checked = self.value
            if expected_key in checked and values_equal(checked[expected_key], expected_value):
                return

            if expected_key not in checked:
                template = "The {0} does not contain the expected key-value pair. The given key was not found."
            else:
                template = "The {0} does not contain the expected value for the given key."
            self.fail(
                self.build_message(template)
                .expected((expected_key, expected_value))
                .label("Expected pair:")
            )

        # the negated case shares its wording with contains_value
        return self.execute(action, lambda: self._contains_value_negated(expected_value))

    def _contains_value_negated(self, expected_value: Any):
        return (
            self.build_message("The {0} does contain the given value, whereas it must not.")
            .expected(expected_value)
            .label("Expected value:")
        )
