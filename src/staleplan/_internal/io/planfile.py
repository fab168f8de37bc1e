"""Load a plan file from disk."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from staleplan.kernel.errors import PlanFileError
from staleplan.kernel.planfile import PlanFile


def load_plan_file(path: Path) -> PlanFile:
    """Read and validate a JSON plan file."""
    if not path.exists():
        raise PlanFileError(f"Plan file not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise PlanFileError(f"Plan file is not valid JSON: {path}: {e}") from e
    if not isinstance(data, dict):
        raise PlanFileError(f"Plan file must contain a JSON object: {path}")
    try:
        return PlanFile(**data)
    except ValidationError as e:
        raise PlanFileError(f"Invalid plan file {path}:\n{e}") from e
