"""
Field Descriptor Models

This module defines the strongly-typed input contract handed to the
constraint resolver by the descriptor extractor. The models mirror the JSON
shape produced upstream (camelCase keys) while exposing snake_case
attributes to Python callers.

Design Goals
------------
- Immutable after construction
- Safe defaults (no shared mutable state)
- Strict: unexpected keys are rejected rather than silently dropped
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Constraint(BaseModel):
    """
    A named validation rule attached to a documented field.
    """

    name: str = Field(
        ...,
        min_length=1,
        description="Fully-qualified name of the rule (e.g. javax.validation.constraints.NotNull).",
    )

    configuration: Dict[str, Any] = Field(
        default_factory=dict,
        description="Rule options such as min, max, value or regexp.",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")


class FieldAttributes(BaseModel):
    """
    Extra attributes documented alongside a field.
    """

    validation_constraints: List[Constraint] = Field(
        default_factory=list,
        alias="validationConstraints",
        description="Constraints in discovery order; order decides first-match lookups.",
    )

    enum_values: List[Any] = Field(default_factory=list, alias="enumValues")
    items_type: Optional[str] = Field(default=None, alias="itemsType")

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
    )


class FieldDescriptor(BaseModel):
    """
    Metadata describing one field of a documented request or response.
    """

    path: str = Field(..., min_length=1)
    description: Optional[str] = None
    type: Optional[str] = None
    optional: bool = False
    ignored: bool = False
    attributes: FieldAttributes = Field(default_factory=FieldAttributes)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def constraints(self) -> List[Constraint]:
        return self.attributes.validation_constraints
