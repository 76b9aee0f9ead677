"""
Training Calendar - Repetitions Tests
"""
import pytest
import sys
import os

# srcディレクトリをパスに追加
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.workout.repetitions import repetition_totals, should_show_totals


class TestRepetitionTotals:
    """repetition_totals関数のテスト"""

    def test_basic(self):
        """5km × 3回"""
        result = repetition_totals("5.00", "00:25:00", 3)
        assert result == {"total_distance": "15.00", "total_duration": "01:15:00"}

    def test_intervals(self):
        """6 × 400m"""
        result = repetition_totals("0.4", "00:01:30", 6)
        assert result == {"total_distance": "2.40", "total_duration": "00:09:00"}

    def test_single_repetition(self):
        result = repetition_totals("10", "00:50:00", 1)
        assert result == {"total_distance": "10.00", "total_duration": "00:50:00"}

    def test_mmss_duration(self):
        """時間がmm:ssでも受け付ける"""
        result = repetition_totals("1", "04:00", 5)
        assert result["total_duration"] == "00:20:00"

    @pytest.mark.parametrize("distance,duration", [
        ("", "00:25:00"),
        ("abc", "00:25:00"),
        ("5", ""),
        ("5", "00:00:00"),
        ("5", "xx:yy"),
    ])
    def test_not_applicable(self, distance, duration):
        """合計が計算できない場合はNone"""
        assert repetition_totals(distance, duration, 3) is None

    def test_invalid_repetitions(self):
        with pytest.raises(ValueError):
            repetition_totals("5", "00:25:00", 0)


class TestShouldShowTotals:
    def test_show_only_for_repeats(self):
        assert should_show_totals(2) is True
        assert should_show_totals(1) is False
        assert should_show_totals(None) is False
