"""Tests for cycle detection in the dependency graph."""

import pytest

from staleplan.kernel.errors import CyclicGraphError
from staleplan.kernel.plan import add_target, start_planning
from staleplan.kernel.staleness import stale_targets


def test_two_node_cycle(fake_files):
    plan = start_planning()
    add_target(plan, ["b.csv"], ["a.csv"])
    add_target(plan, ["a.csv"], ["b.csv"])
    fake_files.touch("a.csv", "b.csv")

    with pytest.raises(CyclicGraphError) as exc_info:
        stale_targets(plan, fake_files)
    cycle = exc_info.value.cycle
    assert set(cycle) == {"a.csv", "b.csv"}
    assert "a.csv -> b.csv -> a.csv" in str(exc_info.value)


def test_self_loop():
    plan = start_planning()
    add_target(plan, ["a.csv"], ["a.csv"])
    with pytest.raises(CyclicGraphError) as exc_info:
        plan.topological_order()
    assert exc_info.value.cycle == ["a.csv"]


def test_cycle_behind_valid_prefix():
    plan = start_planning()
    add_target(plan, ["b.csv"], ["a.csv", "make_b.py"])
    add_target(plan, ["c.csv"], ["b.csv"])
    add_target(plan, ["b.csv"], ["c.csv"])
    with pytest.raises(CyclicGraphError) as exc_info:
        plan.topological_order()
    assert set(exc_info.value.cycle) == {"b.csv", "c.csv"}


def test_cycle_is_reported_before_timestamps_are_read(fake_files):
    plan = start_planning()
    add_target(plan, ["b.csv"], ["a.csv"])
    add_target(plan, ["a.csv"], ["b.csv"])
    # No files known to the timestamp source: a lookup would raise FileNotFoundError
    with pytest.raises(CyclicGraphError):
        stale_targets(plan, fake_files)


def test_no_cycle_valid_graph():
    plan = start_planning()
    add_target(plan, ["b.csv"], ["a.csv"])
    add_target(plan, ["c.csv"], ["a.csv", "b.csv"])
    assert plan.topological_order() == [1, 2, 3]
