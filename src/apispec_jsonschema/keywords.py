"""
JSON Schema Keyword Emission

Translates the values resolved from a field's constraints into the
JSON-schema keywords a schema generator attaches to that field's node.
Absent values are omitted, never emitted as ``null``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from .models import FieldDescriptor
from .resolver import (
    is_required,
    max_integer,
    max_length_string,
    maybe_max_size_array,
    maybe_min_size_array,
    maybe_pattern,
    min_integer,
    min_length_string,
)


logger = logging.getLogger("apispec.keywords")

NUMERIC_TYPES = ("integer", "number")


def _drop_none(keywords: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in keywords.items() if v is not None}


def constraint_keywords(
    field: FieldDescriptor,
    json_type: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build the constraint keywords for one field.

    Parameters
    ----------
    field : FieldDescriptor
        The documented field.

    json_type : Optional[str]
        JSON-schema type of the node. Defaults to ``field.type``.

    Returns
    -------
    Dict[str, Any]
        Keywords such as ``minLength`` or ``maximum``; empty for types that
        carry no constraint keywords.
    """
    resolved_type = (json_type or field.type or "").lower()

    if resolved_type == "string":
        return _drop_none({
            "minLength": min_length_string(field),
            "maxLength": max_length_string(field),
            "pattern": maybe_pattern(field),
        })

    if resolved_type in NUMERIC_TYPES:
        return _drop_none({
            "minimum": min_integer(field),
            "maximum": max_integer(field),
        })

    if resolved_type == "array":
        return _drop_none({
            "minItems": maybe_min_size_array(field),
            "maxItems": maybe_max_size_array(field),
        })

    logger.debug(
        "No constraint keywords for field '%s' of type %r", field.path, resolved_type
    )
    return {}


def required_properties(fields: Iterable[FieldDescriptor]) -> List[str]:
    """
    Paths of the required top-level fields, in order and without duplicates.
    """
    required: List[str] = []
    for field in fields:
        if "." in field.path or "[]" in field.path:
            continue
        if field.path not in required and is_required(field):
            required.append(field.path)
    return required
