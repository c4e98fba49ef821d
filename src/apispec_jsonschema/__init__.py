"""
Constraint resolution for JSON schema generation.

Resolves the validation constraints documented on API fields into the
keyword values a generated JSON schema declares.
"""

from .config import Settings, settings
from .core.errors import ConstraintConfigurationError, ConstraintResolutionError
from .keywords import constraint_keywords, required_properties
from .models import Constraint, FieldAttributes, FieldDescriptor
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

__all__ = [
    "Settings",
    "settings",
    "ConstraintConfigurationError",
    "ConstraintResolutionError",
    "Constraint",
    "FieldAttributes",
    "FieldDescriptor",
    "constraint_keywords",
    "required_properties",
    "is_required",
    "min_length_string",
    "max_length_string",
    "min_integer",
    "max_integer",
    "maybe_min_size_array",
    "maybe_max_size_array",
    "maybe_pattern",
]
