"""Fixpoint loop that re-runs producer scripts until nothing is stale."""

import logging
from typing import Callable, List, Optional

from pydantic import BaseModel, Field

from .._internal.executor import ScriptExecutor
from .._internal.io.filesystem import last_modified as filesystem_last_modified
from ..config import PlannerConfig
from .errors import NoProgressError
from .plan import Plan
from .staleness import TimestampSource, stale_targets

logger = logging.getLogger(__name__)

Executor = Callable[[str], None]


class RunResult(BaseModel):
    """What a run_plan call did."""
    iterations: int = 0  # staleness passes that found something stale
    updated_targets: List[str] = Field(default_factory=list)  # in the order they were handled
    executed_scripts: List[str] = Field(default_factory=list)


def run_dependencies(
    index: int,
    plan: Plan,
    executor: Optional[Executor] = None,
    config: Optional[PlannerConfig] = None,
) -> List[str]:
    """Execute every script among the direct dependencies of ``index``.

    Plain data dependencies are skipped. Returns the executed filenames.
    """
    config = config or PlannerConfig()
    executor = executor or ScriptExecutor(config.interpreter)
    executed = []
    for dep in plan.dependencies(index):
        filename = plan.filename(dep)
        if not config.is_script(filename):
            continue
        logger.info("Running file %s.", filename)
        executor(filename)
        executed.append(filename)
    return executed


def run_plan(
    plan: Plan,
    executor: Optional[Executor] = None,
    last_modified: TimestampSource = filesystem_last_modified,
    config: Optional[PlannerConfig] = None,
) -> RunResult:
    """Rebuild stale targets until the plan is up to date.

    Each pass recomputes staleness and runs the scripts feeding the
    topologically-earliest stale target. Without ``config.max_iterations``
    the loop only ends when nothing is stale, so a script that does not
    refresh its output keeps it running.
    """
    config = config or PlannerConfig()
    executor = executor or ScriptExecutor(config.interpreter)
    result = RunResult()

    while True:
        order, flags = stale_targets(plan, last_modified)
        stale = [index for index, flag in zip(order, flags) if flag]
        if not stale:
            logger.info("Plan is up to date.")
            return result

        if config.max_iterations is not None and result.iterations >= config.max_iterations:
            raise NoProgressError(result.iterations, [plan.filename(i) for i in stale])

        target = stale[0]
        filename = plan.filename(target)
        result.iterations += 1
        logger.info("Updating target %s", filename)
        executed = run_dependencies(target, plan, executor, config)
        if not executed:
            logger.warning("Target %s is stale but has no script dependency to run", filename)
        result.updated_targets.append(filename)
        result.executed_scripts.extend(executed)
