"""
Constraint Name Sets

Bean Validation rules live under several package namespaces: the legacy
``javax`` one, the ``jakarta`` one that replaced it, and Hibernate
Validator's extensions. Every set below lists all known names of one logical
rule so lookups stay agnostic to the namespace a field was documented with.
"""

from __future__ import annotations

from typing import Final, FrozenSet


# ---------------------------------------------------------------------
# Constraint Name Sets (Single Source of Truth)
# ---------------------------------------------------------------------

# NotEmpty moved into javax.validation with validation-api 2.0
NOT_EMPTY_CONSTRAINTS: Final[FrozenSet[str]] = frozenset({
    "org.hibernate.validator.constraints.NotEmpty",
    "javax.validation.constraints.NotEmpty",
    "jakarta.validation.constraints.NotEmpty",
})

NOT_BLANK_CONSTRAINTS: Final[FrozenSet[str]] = frozenset({
    "javax.validation.constraints.NotBlank",
    "org.hibernate.validator.constraints.NotBlank",
    "jakarta.validation.constraints.NotBlank",
})

NOT_NULL_CONSTRAINTS: Final[FrozenSet[str]] = frozenset({
    "javax.validation.constraints.NotNull",
    "jakarta.validation.constraints.NotNull",
})

REQUIRED_CONSTRAINTS: Final[FrozenSet[str]] = (
    NOT_NULL_CONSTRAINTS | NOT_EMPTY_CONSTRAINTS | NOT_BLANK_CONSTRAINTS
)

LENGTH_CONSTRAINT: Final[str] = "org.hibernate.validator.constraints.Length"

SIZE_CONSTRAINTS: Final[FrozenSet[str]] = frozenset({
    "javax.validation.constraints.Size",
    "jakarta.validation.constraints.Size",
})

PATTERN_CONSTRAINTS: Final[FrozenSet[str]] = frozenset({
    "javax.validation.constraints.Pattern",
    "jakarta.validation.constraints.Pattern",
})

MIN_CONSTRAINTS: Final[FrozenSet[str]] = frozenset({
    "javax.validation.constraints.Min",
    "jakarta.validation.constraints.Min",
})

MAX_CONSTRAINTS: Final[FrozenSet[str]] = frozenset({
    "javax.validation.constraints.Max",
    "jakarta.validation.constraints.Max",
})


# ---------------------------------------------------------------------
# Classification Helpers
# ---------------------------------------------------------------------

def is_length(name: str) -> bool:
    return name == LENGTH_CONSTRAINT


def implies_min_length(name: str) -> bool:
    """NotEmpty, NotBlank and Length all put a floor on string length."""
    return (
        name in NOT_EMPTY_CONSTRAINTS
        or name in NOT_BLANK_CONSTRAINTS
        or is_length(name)
    )
