"""
Tests for Timer.
"""

import pytest

from pyfreqstats.core.compute.timing import Timer


class TestTimer:

    def test_sections_recorded(self):
        timer = Timer()
        timer.start()
        with timer.section('a'):
            pass
        with timer.section('b'):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'a', 'b'}
        assert result['total_seconds'] >= 0.0

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        for _ in range(3):
            with timer.section('loop'):
                pass
        timer.stop()
        assert list(timer.result()) == ['total_seconds', 'loop']

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()
