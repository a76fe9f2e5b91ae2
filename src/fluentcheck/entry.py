"""Entry point choosing the check class for a value."""

from __future__ import annotations

from collections.abc import Collection, Mapping
from functools import singledispatch
from numbers import Number
from typing import Any

from fluentcheck.checker import Check
from fluentcheck.checks import (
    CollectionCheck,
    MappingCheck,
    NumberCheck,
    ObjectCheck,
    StringCheck,
)


@singledispatch
def check_that(value: Any) -> Check:
    """Start a fluent chain of checks on ``value``.

    The returned check exposes the checks that make sense for the value's type;
    register additional types with ``check_that.register``.
    """
    return ObjectCheck(value)


@check_that.register
def _(value: Mapping) -> MappingCheck:
    return MappingCheck(value)


@check_that.register
def _(value: Collection) -> CollectionCheck:
    return CollectionCheck(value)


@check_that.register
def _(value: str) -> StringCheck:
    return StringCheck(value)


@check_that.register
def _(value: Number) -> NumberCheck:
    return NumberCheck(value)


@check_that.register
def _(value: bool) -> ObjectCheck:
    return ObjectCheck(value)
