"""Failure message construction.

Every failing check reports through the same layout::

    <blank line>
    The checked value <headline>.
    The checked value:
    \t[<type or rendering>]
    The expected value: <comparison>
    \t[<type or rendering>]

Values whose class keeps the default ``object.__repr__`` are shown by type name
only; everything else is shown as its type name followed by a tab-indented
``repr`` dump.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fluentcheck.config import CheckSettings, get_settings


def type_name(cls: type) -> str:
    """Return ``module.QualName`` for ``cls``, without the ``builtins.`` prefix."""
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def has_default_repr(value: Any) -> bool:
    return type(value).__repr__ is object.__repr__


def render_value(value: Any, settings: CheckSettings | None = None) -> list[str]:
    """Render ``value`` as the indented lines of a message section."""
    if value is None:
        return ["\t[None]"]

    lines = [f"\t[{type_name(type(value))}]"]
    if has_default_repr(value):
        return lines

    dump = repr(value)
    limit = (settings or get_settings()).max_rendering_length
    if limit is not None and len(dump) > limit:
        dump = dump[:limit] + "..."
    lines.extend(f"\t{line}" for line in dump.splitlines() or [""])
    return lines


@dataclass
class _Section:
    role: str
    value: Any
    label: str | None = None
    comparison: str | None = None

    def caption(self, entity: str) -> str:
        if self.label is not None:
            return self.label
        caption = f"The {self.role} {entity}:"
        if self.comparison:
            caption = f"{caption} {self.comparison}"
        return caption


class MessageBuilder:
    """Builds the text of a :class:`~fluentcheck.errors.FluentCheckException`.

    The builder only records what to show; the text is produced by
    :meth:`to_string`, so rendering it twice yields the same message.
    """

    def __init__(
        self,
        template: str,
        checked_value: Any,
        settings: CheckSettings | None = None,
    ):
        self._template = template
        self._entity = "value"
        self._settings = settings
        self._sections = [_Section("checked", checked_value)]

    def for_entity(self, entity: str) -> MessageBuilder:
        """Name what is checked ("value", "object", "dictionary"...)."""
        self._entity = entity
        return self

    def expected(self, value: Any) -> MessageBuilder:
        self._sections.append(_Section("expected", value))
        return self

    def label(self, text: str) -> MessageBuilder:
        """Replace the caption of the last added section."""
        self._sections[-1].label = text
        return self

    def comparison(self, text: str) -> MessageBuilder:
        """Qualify the caption of the last added section, e.g. "different from"."""
        self._sections[-1].comparison = text
        return self

    def to_string(self) -> str:
        lines = ["", self._template.format(f"checked {self._entity}")]
        for section in self._sections:
            lines.append(section.caption(self._entity))
            lines.extend(render_value(section.value, self._settings))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_string()
