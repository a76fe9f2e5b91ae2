"""Checks for sized iterables: lists, tuples, sets and the like."""

from __future__ import annotations

from collections.abc import Collection
from typing import Any, TypeVar

from fluentcheck.checker import CheckLink
from fluentcheck.checks.object_checks import ObjectCheck

E = TypeVar("E")


class CollectionCheck(ObjectCheck[Collection[E]]):
    def contains(self, *items: Any) -> CheckLink[CollectionCheck[E]]:
        def action() -> None:
            missing = [item for item in items if item not in self.value]
            if missing:
                self.fail(
                    self.build_message("The {0} does not contain the expected value(s).")
                    .expected(missing)
                    .label("The missing value(s):")
                )

        return self.execute(
            action,
            lambda: self.build_message("The {0} contains all the given value(s) whereas it must not.")
            .expected(list(items))
            .label("The given value(s):"),
        )

    def is_empty(self) -> CheckLink[CollectionCheck[E]]:
        def action() -> None:
            if len(self.value) != 0:
                self.fail(self.build_message("The {0} is not empty."))

        return self.execute(action, lambda: self.build_message("The {0} is empty, whereas it must not."))

    def is_not_empty(self) -> CheckLink[CollectionCheck[E]]:
        return self.not_.is_empty()

    def has_size(self, expected_size: int) -> CheckLink[CollectionCheck[E]]:
        def action() -> None:
            if len(self.value) != expected_size:
                self.fail(
                    self.build_message(f"The {{0}} has {len(self.value)} element(s) instead of {expected_size}.")
                    .expected(expected_size)
                    .label("Expected size:")
                )

        return self.execute(
            action,
            lambda: self.build_message("The {0} has the given number of elements, whereas it must not.")
            .expected(expected_size)
            .label("Given size:"),
        )
