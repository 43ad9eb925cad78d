"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default factories (warnings)
    - has_warning() method
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pydescriptive.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


class TestResultConstruction:
    """Result can be created with any payload type."""

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=42.0),
            info={"outcomes": {"mean": "ok"}},
            timing={"total_seconds": 0.01},
            backend_name="cpu_randvar",
        )
        assert result.params.value == 42.0
        assert result.info["outcomes"]["mean"] == "ok"
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu_randvar"

    def test_timing_none(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        assert result.timing is None

    def test_frozen(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "other"


class TestWarnings:
    """Warnings default to an empty tuple and are searchable."""

    def test_warnings_default_empty(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        assert result.warnings == ()
        assert isinstance(result.warnings, tuple)

    def test_has_warning(self):
        result = Result(
            params=FakeParams(1.0),
            info={},
            timing=None,
            backend_name="cpu",
            warnings=("weighted_mean: weights not defined",),
        )
        assert result.has_warning("weights not defined")
        assert not result.has_warning("skewness")
