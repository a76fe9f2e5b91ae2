"""Checks for strings."""

from __future__ import annotations

import re

from fluentcheck.checker import CheckLink
from fluentcheck.checks.collection_checks import CollectionCheck


class StringCheck(CollectionCheck[str]):
    def contains(self, *fragments: str) -> CheckLink[StringCheck]:
        def action() -> None:
            missing = [fragment for fragment in fragments if fragment not in self.value]
            if missing:
                self.fail(
                    self.build_message("The {0} does not contain the expected substring(s).")
                    .expected(missing)
                    .label("The missing substring(s):")
                )

        return self.execute(
            action,
            lambda: self.build_message("The {0} contains all the given substring(s) whereas it must not.")
            .expected(list(fragments))
            .label("The given substring(s):"),
        )

    def starts_with(self, prefix: str) -> CheckLink[StringCheck]:
        def action() -> None:
            if not self.value.startswith(prefix):
                self.fail(
                    self.build_message("The {0} does not start with the expected prefix.")
                    .expected(prefix)
                    .label("Expected prefix:")
                )

        return self.execute(
            action,
            lambda: self.build_message("The {0} starts with the given prefix, whereas it must not.")
            .expected(prefix)
            .label("Given prefix:"),
        )

    def ends_with(self, suffix: str) -> CheckLink[StringCheck]:
        def action() -> None:
            if not self.value.endswith(suffix):
                self.fail(
                    self.build_message("The {0} does not end with the expected suffix.")
                    .expected(suffix)
                    .label("Expected suffix:")
                )

        return self.execute(
            action,
            lambda: self.build_message("The {0} ends with the given suffix, whereas it must not.")
            .expected(suffix)
            .label("Given suffix:"),
        )

    def matches(self, pattern: str | re.Pattern[str]) -> CheckLink[StringCheck]:
        """Check that ``pattern`` is found somewhere in the value (``re.search``)."""
        compiled = re.compile(pattern)

        def action() -> None:
            if compiled.search(self.value) is None:
                self.fail(
                    self.build_message("The {0} does not match the expected pattern.")
                    .expected(compiled.pattern)
                    .label("Expected pattern:")
                )

        return self.execute(
            action,
            lambda: self.build_message("The {0} matches the given pattern, whereas it must not.")
            .expected(compiled.pattern)
            .label("Given pattern:"),
        )
