"""Public API for staleplan.

High-level functions that take a plan file path and return structured
results. Fine-grained plan construction lives in staleplan.kernel.
"""

import os
from pathlib import Path
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel

from staleplan._internal.io.filesystem import last_modified as filesystem_last_modified
from staleplan._internal.io.planfile import load_plan_file
from staleplan.config import PlannerConfig
from staleplan.kernel.plan import Plan
from staleplan.kernel.planfile import build_plan
from staleplan.kernel.scheduler import Executor, RunResult, run_plan
from staleplan.kernel.staleness import TimestampSource, stale_targets


def _normalize_path(path: Union[str, os.PathLike, Path]) -> Path:
    """Normalize path input to Path object."""
    return Path(path) if not isinstance(path, Path) else path


class NodeStatus(BaseModel):
    """Staleness of one tracked file."""
    index: int
    filename: str
    stale: bool
    dependencies: List[str]


class StatusResult(BaseModel):
    """Result of a status check, nodes in topological order."""
    up_to_date: bool
    nodes: List[NodeStatus]

    @property
    def stale_filenames(self) -> List[str]:
        return [node.filename for node in self.nodes if node.stale]


def load_plan(planfile: Union[str, os.PathLike, Path]) -> Tuple[Plan, PlannerConfig]:
    """Load a JSON plan file into a Plan plus its configuration."""
    plan_file = load_plan_file(_normalize_path(planfile))
    return build_plan(plan_file), plan_file.config


def status(
    planfile: Union[str, os.PathLike, Path],
    last_modified: TimestampSource = filesystem_last_modified,
) -> StatusResult:
    """Report which nodes of a plan file are stale, without running anything."""
    plan, _ = load_plan(planfile)
    order, flags = stale_targets(plan, last_modified)
    nodes = [
        NodeStatus(
            index=index,
            filename=plan.filename(index),
            stale=flag,
            dependencies=[plan.filename(dep) for dep in plan.dependencies(index)],
        )
        for index, flag in zip(order, flags)
    ]
    return StatusResult(up_to_date=not any(flags), nodes=nodes)


def build(
    planfile: Union[str, os.PathLike, Path],
    executor: Optional[Executor] = None,
    last_modified: TimestampSource = filesystem_last_modified,
    config: Optional[PlannerConfig] = None,
) -> RunResult:
    """Load a plan file and run it until nothing is stale.

    ``config`` overrides the plan file's own config block.
    """
    plan, file_config = load_plan(planfile)
    return run_plan(plan, executor=executor, last_modified=last_modified, config=config or file_config)
