"""
Resolution Errors

This module defines the exceptions raised when constraint metadata supplied
by the upstream descriptor extractor violates its contract.

Design Goals
------------
- Absence of a constraint is never an error (callers receive ``None``)
- Configuration faults surface with enough context to locate the bad field
- Remain compatible with callers that already catch ``ValueError``
"""

from __future__ import annotations

from typing import Any, Optional


class ConstraintResolutionError(ValueError):
    """
    Base class for every fault raised while resolving constraints.
    """


class ConstraintConfigurationError(ConstraintResolutionError):
    """
    A constraint configuration value is missing or of the wrong type.

    Parameters
    ----------
    constraint_name : str
        Fully-qualified name of the offending constraint.

    key : str
        Configuration key that was read.

    value : Any
        The value found under ``key`` (``None`` when the key is absent).

    expected : type
        The scalar type the key must hold.

    path : Optional[str]
        Documented path of the field carrying the constraint, if known.
    """

    def __init__(
        self,
        constraint_name: str,
        key: str,
        value: Any,
        expected: type,
        path: Optional[str] = None,
    ) -> None:
        self.constraint_name = constraint_name
        self.key = key
        self.value = value
        self.expected = expected
        self.path = path

        location = f" on field '{path}'" if path else ""
        if value is None:
            reason = "is missing"
        else:
            reason = f"must be {expected.__name__}, got {type(value).__name__} {value!r}"

        super().__init__(
            f"Configuration '{key}' of constraint {constraint_name}{location} {reason}"
        )
