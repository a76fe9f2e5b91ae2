"""Checks for numbers."""

from __future__ import annotations

from numbers import Real
from typing import Any

from fluentcheck.checker import CheckLink
from fluentcheck.checks.object_checks import ObjectCheck


class NumberCheck(ObjectCheck[Any]):
    def is_zero(self) -> CheckLink[NumberCheck]:
        def action() -> None:
            if self.value != 0:
                self.fail(self.build_message("The {0} is different from zero."))

        return self.execute(action, lambda: self.build_message("The {0} is equal to zero whereas it must not."))

    def is_positive(self) -> CheckLink[NumberCheck]:
        def action() -> None:
            if not self.value > 0:
                self.fail(self.build_message("The {0} is not strictly positive."))

        return self.execute(action, lambda: self.build_message("The {0} is positive, whereas it must not."))

    def is_negative(self) -> CheckLink[NumberCheck]:
        def action() -> None:
            if not self.value < 0:
                self.fail(self.build_message("The {0} is not strictly negative."))

        return self.execute(action, lambda: self.build_message("The {0} is negative, whereas it must not."))

    def is_greater_than(self, threshold: Real) -> CheckLink[NumberCheck]:
        def action() -> None:
            if not self.value > threshold:
                self.fail(
                    self.build_message("The {0} is less than or equal to the threshold.")
                    .expected(threshold)
                    .comparison("greater than")
                )

        return self.execute(
            action,
            lambda: self.build_message("The {0} is greater than the threshold, whereas it must not.")
            .expected(threshold)
            .comparison("less than or equal to"),
        )

    def is_less_than(self, threshold: Real) -> CheckLink[NumberCheck]:
        def action() -> None:
            if not self.value < threshold:
                self.fail(
                    self.build_message("The {0} is greater than or equal to the threshold.")
                    .expected(threshold)
                    .comparison("less than")
                )

        return self.execute(
            action,
            lambda: self.build_message("The {0} is less than the threshold, whereas it must not.")
            .expected(threshold)
            .comparison("greater than or equal to"),
        )
