"""
Tests for Timer.
"""

import pytest

from pydescriptive.core.compute.timing import Timer


class TestTimer:

    def test_sections_recorded(self):
        timer = Timer()
        timer.start()
        with timer.section('mean'):
            sum(range(100))
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'mean'}
        assert result['total_seconds'] >= 0.0
        assert result['mean'] >= 0.0

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('a'):
            pass
        first = timer._sections['a']
        with timer.section('a'):
            pass
        timer.stop()
        assert timer.result()['a'] >= first

    def test_section_recorded_on_exception(self):
        timer = Timer()
        timer.start()
        with pytest.raises(ZeroDivisionError):
            with timer.section('boom'):
                1 / 0
        timer.stop()
        assert 'boom' in timer.result()

    def test_stop_before_start_raises(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop_raises(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()
