"""
Tests for the Timer utility.
"""

import pytest

from pydescriptive.core.compute.timing import Timer


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('mean'):
            pass
        with timer.section('mean'):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'mean'}
        assert result['mean'] >= 0.0
        assert result['total_seconds'] >= 0.0

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()

    def test_section_recorded_on_exception(self):
        timer = Timer()
        timer.start()
        with pytest.raises(ZeroDivisionError):
            with timer.section('failing'):
                1 / 0
        timer.stop()
        assert 'failing' in timer.result()

