"""Fluent checks for test code.

    check_that(answer).is_equal_to(42)
    check_that(settings).contains_key("timeout").and_.not_.contains_key("retries")
"""

from fluentcheck.checker import Check, CheckLink
from fluentcheck.checks import (
    CollectionCheck,
    MappingCheck,
    NumberCheck,
    ObjectCheck,
    StringCheck,
)
from fluentcheck.config import CheckSettings, configure, get_settings, load_settings
from fluentcheck.entry import check_that
from fluentcheck.errors import FluentCheckException
from fluentcheck.fields import compare_fields, describe_fields
from fluentcheck.messages import MessageBuilder

__all__ = [
    "Check",
    "CheckLink",
    "CheckSettings",
    "CollectionCheck",
    "FluentCheckException",
    "MappingCheck",
    "MessageBuilder",
    "NumberCheck",
    "ObjectCheck",
    "StringCheck",
    "check_that",
    "compare_fields",
    "configure",
    "describe_fields",
    "get_settings",
    "load_settings",
]
