"""
Training Calendar - Statistics Tests
"""
import pytest
import sys
import os

# srcディレクトリをパスに追加
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.config import NO_DATA_LABEL
from src.workout.stats import (
    band_distribution,
    format_share,
    group_by_band,
    segment_totals,
    workout_totals,
)


@pytest.fixture
def workouts():
    """easy 5km と interval 3km × 2 の2つのワークアウト"""
    return [
        {"date": "2026-10-05", "name": "Rozbieganie",
         "segments": [{"type": "easy", "distance": 5}]},
        {"date": "2026-10-07", "name": "Interwały",
         "segments": [{"type": "interval", "distance": 3, "repetitions": 2}]},
    ]


class TestSegmentTotals:
    """segment_totals関数のテスト"""

    def test_raw_totals(self, workouts):
        assert segment_totals(workouts) == {"easy": 5, "tempo": 0, "interval": 6, "time_trial": 0}

    def test_empty(self):
        assert segment_totals([]) == {"easy": 0, "tempo": 0, "interval": 0, "time_trial": 0}
        assert segment_totals(None) == {"easy": 0, "tempo": 0, "interval": 0, "time_trial": 0}

    def test_include_predicate(self, workouts):
        """日付で絞り込み"""
        totals = segment_totals(workouts, include=lambda w: w["date"] == "2026-10-07")
        assert totals["easy"] == 0
        assert totals["interval"] == 6

    def test_unknown_type_ignored(self):
        totals = segment_totals([{"segments": [{"type": "swim", "distance": 2}]}])
        assert sum(totals.values()) == 0

    def test_repetitions_none_counts_once(self):
        totals = segment_totals([{"segments": [{"type": "tempo", "distance": 4, "repetitions": None}]}])
        assert totals["tempo"] == 4


class TestBands:
    """難易度バンドのテスト"""

    def test_group_by_band(self, workouts):
        grouped = group_by_band(segment_totals(workouts))
        assert grouped == {"Łatwy": 5, "Średni": 0, "Trudny": 6}

    def test_interval_and_time_trial_share_label(self):
        grouped = group_by_band({"easy": 0, "tempo": 0, "interval": 2, "time_trial": 3})
        assert grouped["Trudny"] == 5

    def test_percentages(self, workouts):
        shares = {s.label: format_share(s) for s in band_distribution(segment_totals(workouts))}
        assert shares == {"Łatwy": "45%", "Średni": NO_DATA_LABEL, "Trudny": "55%"}

    def test_order_and_colors(self, workouts):
        shares = band_distribution(segment_totals(workouts))
        assert [s.label for s in shares] == ["Łatwy", "Średni", "Trudny"]
        assert all(s.color.startswith("#") for s in shares)

    def test_no_data(self):
        """合計0ならすべて「なし」"""
        shares = band_distribution(segment_totals([]))
        assert all(s.percentage is None for s in shares)
        assert all(format_share(s) == NO_DATA_LABEL for s in shares)


class TestWorkoutTotals:
    def test_totals_with_repetitions(self):
        segments = [
            {"type": "easy", "distance": 2, "pace": 360, "duration": 720},
            {"type": "interval", "distance": 1, "pace": 240, "duration": 240, "repetitions": 6},
        ]
        assert workout_totals(segments) == {"total_distance": 8, "total_duration": 2160}
