"""
Constraint Resolver

This module maps the validation constraints documented on a field to the
scalar values a JSON schema declares for it: required-ness, string length
bounds, numeric bounds, array size bounds and regex patterns.

Every function is a pure query over an immutable ``FieldDescriptor``. When no
constraint of the relevant kind is present the result is ``None``. Lookups
that pick a single constraint honour the order of the constraint list
(first match wins).

Configuration Reads
-------------------
- Mandatory keys (Length ``min``/``max``, Min/Max ``value``) must be present
  and integral, otherwise ``ConstraintConfigurationError`` is raised.
- Optional keys (Size ``min``/``max``, Pattern ``regexp``) may be absent.
  A present value of the wrong type raises, unless
  ``settings.lenient_configuration`` is enabled, in which case it is logged
  and ignored.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from .config import settings
from .constraints import (
    MAX_CONSTRAINTS,
    MIN_CONSTRAINTS,
    PATTERN_CONSTRAINTS,
    REQUIRED_CONSTRAINTS,
    SIZE_CONSTRAINTS,
    implies_min_length,
    is_length,
)
from .core.errors import ConstraintConfigurationError
from .models import Constraint, FieldDescriptor


logger = logging.getLogger("apispec.resolver")


# ---------------------------------------------------------------------
# Typed Configuration Reads
# ---------------------------------------------------------------------

def _is_instance(value: Any, expected: type) -> bool:
    # bool subclasses int but is never a valid bound
    if expected is int and isinstance(value, bool):
        return False
    return isinstance(value, expected)


def _require(
    constraint: Constraint,
    key: str,
    expected: type,
    field: FieldDescriptor,
) -> Any:
    value = constraint.configuration.get(key)
    if value is None or not _is_instance(value, expected):
        raise ConstraintConfigurationError(
            constraint.name, key, value, expected, path=field.path
        )
    return value


def _optional(
    constraint: Constraint,
    key: str,
    expected: type,
    field: FieldDescriptor,
) -> Optional[Any]:
    value = constraint.configuration.get(key)
    if value is None or _is_instance(value, expected):
        return value

    if settings.lenient_configuration:
        logger.warning(
            "Ignoring '%s' of %s on field '%s': expected %s, got %r",
            key,
            constraint.name,
            field.path,
            expected.__name__,
            value,
        )
        return None

    raise ConstraintConfigurationError(
        constraint.name, key, value, expected, path=field.path
    )


def _first(field: FieldDescriptor, predicate) -> Optional[Constraint]:
    return next((c for c in field.constraints if predicate(c.name)), None)


def _first_size(field: FieldDescriptor) -> Optional[Constraint]:
    return _first(field, lambda name: name in SIZE_CONSTRAINTS)


def _first_pattern(field: FieldDescriptor) -> Optional[Constraint]:
    return _first(field, lambda name: name in PATTERN_CONSTRAINTS)


# ---------------------------------------------------------------------
# Required-ness
# ---------------------------------------------------------------------

def is_required(field: FieldDescriptor) -> bool:
    """
    A field is required when a NotNull/NotEmpty/NotBlank rule is present or
    when it is not documented as optional.
    """
    result = (
        any(c.name in REQUIRED_CONSTRAINTS for c in field.constraints)
        or not field.optional
    )
    logger.debug("Resolved required=%s for field '%s'", result, field.path)
    return result


# ---------------------------------------------------------------------
# String Length
# ---------------------------------------------------------------------

def min_length_string(field: FieldDescriptor) -> Optional[int]:
    """
    Minimum string length from the first NotEmpty, NotBlank or Length rule.

    NotEmpty and NotBlank carry no explicit minimum and imply a floor of 1.
    """
    constraint = _first(field, implies_min_length)
    if constraint is None:
        return None
    result = _require(constraint, "min", int, field) if is_length(constraint.name) else 1
    logger.debug("Resolved minLength %s for field '%s'", result, field.path)
    return result


def max_length_string(field: FieldDescriptor) -> Optional[int]:
    constraint = _first(field, is_length)
    if constraint is None:
        return None
    result = _require(constraint, "max", int, field)
    logger.debug("Resolved maxLength %s for field '%s'", result, field.path)
    return result


# ---------------------------------------------------------------------
# Numeric Bounds
# ---------------------------------------------------------------------

def _bound_candidates(
    field: FieldDescriptor,
    bound_names,
    size_key: str,
) -> List[int]:
    candidates: List[int] = []
    for constraint in field.constraints:
        if constraint.name in bound_names:
            candidates.append(_require(constraint, "value", int, field))
        elif constraint.name in SIZE_CONSTRAINTS:
            value = _optional(constraint, size_key, int, field)
            if value is not None:
                candidates.append(value)
    return candidates


def min_integer(field: FieldDescriptor) -> Optional[int]:
    """
    Tightest lower bound: the largest of every Min ``value`` and Size ``min``.
    """
    candidates = _bound_candidates(field, MIN_CONSTRAINTS, "min")
    result = max(candidates) if candidates else None
    logger.debug("Resolved minimum %s for field '%s'", result, field.path)
    return result


def max_integer(field: FieldDescriptor) -> Optional[int]:
    """
    Tightest upper bound: the smallest of every Max ``value`` and Size ``max``.
    """
    candidates = _bound_candidates(field, MAX_CONSTRAINTS, "max")
    result = min(candidates) if candidates else None
    logger.debug("Resolved maximum %s for field '%s'", result, field.path)
    return result


# ---------------------------------------------------------------------
# Array Size & Pattern
# ---------------------------------------------------------------------

def maybe_min_size_array(field: Optional[FieldDescriptor]) -> Optional[int]:
    if field is None:
        return None
    constraint = _first_size(field)
    if constraint is None:
        return None
    result = _optional(constraint, "min", int, field)
    logger.debug("Resolved minItems %s for field '%s'", result, field.path)
    return result


def maybe_max_size_array(field: Optional[FieldDescriptor]) -> Optional[int]:
    if field is None:
        return None
    constraint = _first_size(field)
    if constraint is None:
        return None
    result = _optional(constraint, "max", int, field)
    logger.debug("Resolved maxItems %s for field '%s'", result, field.path)
    return result


def maybe_pattern(field: Optional[FieldDescriptor]) -> Optional[str]:
    if field is None:
        return None
    constraint = _first_pattern(field)
    if constraint is None:
        return None
    result = _optional(constraint, "regexp", str, field)
    logger.debug("Resolved pattern %r for field '%s'", result, field.path)
    return result
