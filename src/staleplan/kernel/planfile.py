"""Plan file schema models and conversion into a Plan."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..config import PlannerConfig
from .plan import Plan, add_target, start_planning


class TargetSpec(BaseModel):
    outputs: List[str] = Field(..., min_length=1)
    inputs: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    @field_validator("outputs", "inputs")
    @classmethod
    def validate_filenames(cls, v: List[str]) -> List[str]:
        for filename in v:
            if not filename:
                raise ValueError("Filenames must be non-empty strings")
        return v


class PlanFile(BaseModel):
    config: PlannerConfig = Field(default_factory=PlannerConfig)
    targets: List[TargetSpec]

    model_config = ConfigDict(extra="forbid")


def build_plan(plan_file: PlanFile) -> Plan:
    """Apply every target of ``plan_file`` to a fresh plan, in file order."""
    plan = start_planning()
    for target in plan_file.targets:
        add_target(plan, target.outputs, target.inputs)
    return plan
