"""Tests for the plan-file based public API."""

import json

import pytest

from staleplan.api import build, load_plan, status
from staleplan.config import PlannerConfig
from staleplan.kernel.errors import PlanFileError


def _write_plan(path, data):
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


PLAN = {
    "targets": [
        {"outputs": ["out1.csv"], "inputs": ["t1.py", "in1.csv"]},
        {"outputs": ["out2.csv"], "inputs": ["out1.csv", "t2.py"]},
    ]
}


def test_load_plan(tmp_path):
    plan, config = load_plan(_write_plan(tmp_path / "plan.json", PLAN))
    assert plan.filenames() == ["t1.py", "in1.csv", "out1.csv", "t2.py", "out2.csv"]
    assert plan.edge_count == 4
    assert config == PlannerConfig()


def test_load_plan_with_config(tmp_path):
    data = dict(PLAN, config={"script_suffixes": [".R", ".py"], "max_iterations": 10})
    _, config = load_plan(_write_plan(tmp_path / "plan.json", data))
    assert config.script_suffixes == (".R", ".py")
    assert config.max_iterations == 10


@pytest.mark.parametrize(
    "data",
    [
        {"targets": [{"outputs": [], "inputs": ["a"]}]},
        {"targets": [{"outputs": ["a"], "inputs": ["b"], "command": "x"}]},
        {"target": []},
        {"targets": [], "config": {"script_suffixes": ["py"]}},
        ["not", "an", "object"],
    ],
)
def test_load_plan_rejects_invalid(tmp_path, data):
    with pytest.raises(PlanFileError):
        load_plan(_write_plan(tmp_path / "plan.json", data))


def test_load_plan_missing_and_malformed(tmp_path):
    with pytest.raises(PlanFileError, match="not found"):
        load_plan(tmp_path / "missing.json")
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(PlanFileError, match="not valid JSON"):
        load_plan(bad)
    # PlanFileError is also a ValueError
    with pytest.raises(ValueError):
        load_plan(bad)


def test_status(tmp_path, fake_files):
    planfile = _write_plan(tmp_path / "plan.json", PLAN)
    fake_files.touch("t1.py", "in1.csv", "t2.py", at=1.0)
    fake_files.touch("out1.csv", "out2.csv", at=2.0)

    result = status(planfile, last_modified=fake_files)
    assert result.up_to_date is True
    assert result.stale_filenames == []

    fake_files.touch("in1.csv", at=3.0)
    result = status(planfile, last_modified=fake_files)
    assert result.up_to_date is False
    assert result.stale_filenames == ["out1.csv", "out2.csv"]
    out2 = next(node for node in result.nodes if node.filename == "out2.csv")
    assert out2.dependencies == ["out1.csv", "t2.py"]


def test_build(tmp_path, fake_files):
    planfile = _write_plan(tmp_path / "plan.json", PLAN)
    fake_files.touch("t1.py", "in1.csv", "t2.py", at=1.0)
    fake_files.touch("out1.csv", "out2.csv", at=2.0)
    fake_files.touch("t2.py", at=3.0)
    calls = []

    def executor(path):
        calls.append(path)
        fake_files.touch("out2.csv")

    result = build(planfile, executor=executor, last_modified=fake_files)
    assert calls == ["t2.py"]
    assert result.updated_targets == ["out2.csv"]
