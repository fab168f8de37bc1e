"""Tests for PlannerConfig."""

import sys

import pytest
from pydantic import ValidationError

from staleplan.config import PlannerConfig


def test_defaults():
    config = PlannerConfig()
    assert config.script_suffixes == (".py",)
    assert config.interpreter == sys.executable
    assert config.max_iterations is None


def test_is_script():
    config = PlannerConfig(script_suffixes=(".py", ".sh"))
    assert config.is_script("scripts/clean.py")
    assert config.is_script("run.sh")
    assert not config.is_script("data.csv")
    assert not config.is_script("notes.pyc")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"script_suffixes": ()},
        {"script_suffixes": ("py",)},
        {"script_suffixes": (".",)},
        {"max_iterations": 0},
        {"unknown": True},
    ],
)
def test_invalid_config(kwargs):
    with pytest.raises(ValidationError):
        PlannerConfig(**kwargs)


def test_config_is_frozen():
    config = PlannerConfig()
    with pytest.raises(ValidationError):
        config.max_iterations = 5
