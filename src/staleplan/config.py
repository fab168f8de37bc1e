"""Planner configuration."""

import sys
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PlannerConfig(BaseModel):
    """Settings for running a plan."""
    script_suffixes: Tuple[str, ...] = (".py",)  # dependencies with these suffixes are executed
    interpreter: str = Field(default_factory=lambda: sys.executable)
    max_iterations: Optional[int] = Field(None, ge=1)  # None: loop until nothing is stale

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("script_suffixes")
    @classmethod
    def validate_script_suffixes(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """Suffixes must be non-empty and start with a dot."""
        if not v:
            raise ValueError("script_suffixes must not be empty")
        for suffix in v:
            if not suffix.startswith(".") or len(suffix) < 2:
                raise ValueError(f"Script suffix '{suffix}' must look like '.py'")
        return tuple(v)

    def is_script(self, filename: str) -> bool:
        return filename.endswith(self.script_suffixes)
