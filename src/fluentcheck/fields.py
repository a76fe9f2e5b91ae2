"""Field-by-field comparison of object state.

Two objects are compared through their instance attributes rather than through
``__eq__``, so classes that never defined an equality contract can still be
checked for equal state. Attributes are read directly from ``__dict__`` and
``__slots__``; properties are never evaluated and nothing is written back.
"""

from __future__ import annotations

import inspect
import math
import re
from dataclasses import dataclass
from typing import Any, Union

_MANGLED = re.compile(r"^_(?P<owner>[^_].*?)(?P<name>__.*)$")
_SKIPPED_SLOTS = ("__dict__", "__weakref__")


@dataclass(frozen=True)
class FieldDescriptor:
    """One instance field, as seen by the comparator.

    Attributes:
        name: Declared name. Name-mangled private attributes are reported
            unmangled (``_Point__x`` is reported as ``__x``).
        attribute: Raw attribute name on the instance.
        declaring_level: 0 for the instance's own class, increasing toward
            its base classes.
        value: Current value of the field.
    """

    name: str
    attribute: str
    declaring_level: int
    value: Any


@dataclass(frozen=True)
class Equal:
    pass


@dataclass(frozen=True)
class FieldMismatch:
    name: str
    actual_value: Any
    expected_value: Any


@dataclass(frozen=True)
class FieldMissingOnExpected:
    """The checked object has a field that the expected one lacks."""

    name: str


@dataclass(frozen=True)
class FieldMissingOnActual:
    """The expected object has a field that the checked one lacks."""

    name: str


@dataclass(frozen=True)
class ValueMismatch:
    """Neither object exposes fields, and the values themselves differ.

    ``same_type`` is false when the runtime types already differ.
    """

    actual_value: Any
    expected_value: Any
    same_type: bool


ComparisonOutcome = Union[Equal, FieldMismatch, FieldMissingOnExpected, FieldMissingOnActual, ValueMismatch]


def _hierarchy(cls: type) -> list[type]:
    return [klass for klass in cls.__mro__ if klass is not object]


def _declared_slots(cls: type) -> list[str]:
    slots = cls.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    return [slot for slot in slots if slot not in _SKIPPED_SLOTS]


def _mangle(cls: type, name: str) -> str:
    if name.startswith("__") and not name.endswith("__"):
        return f"_{cls.__name__.lstrip('_')}{name}"
    return name


def _owner_of_mangled(attribute: str, levels: dict[str, int]) -> tuple[str, int] | None:
    match = _MANGLED.match(attribute)
    if match is None or match.group("owner") not in levels:
        return None
    return match.group("name"), levels[match.group("owner")]


def describe_fields(instance: Any) -> list[FieldDescriptor]:
    """List the instance fields of ``instance`` in comparison order.

    Fields of the most-derived class come first, then those of each base class
    in MRO order. Within one class, annotated fields keep their annotation
    order, followed by slots and then attributes in assignment order.
    """
    hierarchy = _hierarchy(type(instance))
    levels = {cls.__name__.lstrip("_"): level for level, cls in reversed(list(enumerate(hierarchy)))}

    # attribute -> (name, level, rank within level)
    found: dict[str, tuple[str, int, int]] = {}
    values: dict[str, Any] = {}
    order = 0

    def record(attribute: str, name: str, level: int, rank: int) -> None:
        found.setdefault(attribute, (name, level, rank))

    for level, cls in enumerate(hierarchy):
        annotations = inspect.get_annotations(cls)
        for rank, annotated in enumerate(annotations):
            attribute = _mangle(cls, annotated)
            if attribute not in found:
                record(attribute, annotated, level, rank)

        for rank, slot in enumerate(_declared_slots(cls), start=len(annotations)):
            attribute = _mangle(cls, slot)
            try:
                values[attribute] = object.__getattribute__(instance, attribute)
            except AttributeError:
                # declared but never assigned
                continue
            record(attribute, slot, level, rank)

    instance_dict = getattr(instance, "__dict__", None)
    if isinstance(instance_dict, dict):
        for attribute, value in instance_dict.items():
            values[attribute] = value
            order += 1
            if attribute in found:
                continue
            owner = _owner_of_mangled(attribute, levels)
            if owner is not None:
                record(attribute, owner[0], owner[1], 10_000 + order)
            else:
                record(attribute, attribute, 0, 10_000 + order)

    fields = [
        FieldDescriptor(name=name, attribute=attribute, declaring_level=level, value=values[attribute])
        for attribute, (name, level, _rank) in found.items()
        if attribute in values
    ]
    ranks = {attribute: (level, rank) for attribute, (_name, level, rank) in found.items()}
    return sorted(fields, key=lambda f: ranks[f.attribute])


def _find(field: FieldDescriptor, candidates: list[FieldDescriptor]) -> FieldDescriptor | None:
    for candidate in candidates:
        if candidate.attribute == field.attribute:
            return candidate
    for candidate in candidates:
        if candidate.name == field.name:
            return candidate
    return None


def values_equal(actual: Any, expected: Any) -> bool:
    if actual is expected:
        return True
    if isinstance(actual, float) and isinstance(expected, float) and math.isnan(actual) and math.isnan(expected):
        return True
    return bool(actual == expected)


def compare_fields(actual: Any, expected: Any) -> ComparisonOutcome:
    """Compare two objects field by field, stopping at the first difference.

    The checked object's fields are walked first: a field absent from
    ``expected`` yields :class:`FieldMissingOnExpected`, a differing value
    yields :class:`FieldMismatch`. Fields that only ``expected`` has are then
    reported as :class:`FieldMissingOnActual`.

    Objects without introspectable state (ints, lists, dates...) are compared
    as whole values and yield :class:`ValueMismatch` when they differ.
    """
    actual_fields = describe_fields(actual)
    expected_fields = describe_fields(expected)

    if not actual_fields and not expected_fields:
        same_type = type(actual) is type(expected)
        if same_type and (type(actual).__eq__ is object.__eq__ or values_equal(actual, expected)):
            # a stateless plain object has nothing that could differ
            return Equal()
        return ValueMismatch(actual, expected, same_type)

    for field in actual_fields:
        counterpart = _find(field, expected_fields)
        if counterpart is None:
            return FieldMissingOnExpected(field.name)
        if not values_equal(field.value, counterpart.value):
            return FieldMismatch(field.name, field.value, counterpart.value)

    for field in expected_fields:
        if _find(field, actual_fields) is None:
            return FieldMissingOnActual(field.name)

    return Equal()
