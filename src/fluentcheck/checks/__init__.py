"""Concrete checks, one class per kind of value."""

from fluentcheck.checks.collection_checks import CollectionCheck
from fluentcheck.checks.mapping_checks import MappingCheck
from fluentcheck.checks.number_checks import NumberCheck
from fluentcheck.checks.object_checks import ObjectCheck
from fluentcheck.checks.string_checks import StringCheck

__all__ = ["CollectionCheck", "MappingCheck", "NumberCheck", "ObjectCheck", "StringCheck"]
