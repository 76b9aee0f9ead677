"""
Training Calendar - Data Loader Tests
"""
import pandas as pd
import sys
import os

# srcディレクトリをパスに追加
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.data_loader import parse_workouts_frame
from src.workout.stats import band_distribution, segment_totals


class TestParseWorkoutsFrame:
    """parse_workouts_frame関数のテスト"""

    def test_sample_csv(self):
        """サンプルCSVの読み込み"""
        data_path = os.path.join(
            os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
            "data", "sample_workouts.csv"
        )
        df = pd.read_csv(data_path, dtype={"pace": str, "duration": str})
        workouts, log = parse_workouts_frame(df)

        assert log["success"] is True
        assert log["warnings"] == []
        intervals = next(w for w in workouts if w["date"] == "2026-10-07")
        assert [s["type"] for s in intervals["segments"]] == ["easy", "interval", "easy"]
        assert intervals["segments"][1]["repetitions"] == 6
        assert intervals["segments"][1]["pace"] == 240

    def test_groups_rows(self):
        df = pd.DataFrame([
            {"date": "2026-10-01", "name": "A", "type": "easy", "distance": 2, "pace": "06:00", "duration": "00:12:00"},
            {"date": "2026-10-01", "name": "A", "type": "tempo", "distance": 4, "pace": "04:30", "duration": "00:18:00"},
            {"date": "2026-10-02", "name": "B", "type": "easy", "distance": 5, "pace": "06:00", "duration": "00:30:00"},
        ])
        workouts, log = parse_workouts_frame(df)
        assert len(workouts) == 2
        assert len(workouts[0]["segments"]) == 2
        assert workouts[0]["segments"][1]["duration"] == 1080
        assert workouts[0]["segments"][0]["repetitions"] == 1
        assert workouts[0]["description"] is None

    def test_missing_columns(self):
        workouts, log = parse_workouts_frame(pd.DataFrame([{"date": "2026-10-01"}]))
        assert workouts == []
        assert log["success"] is False
        assert log["errors"]

    def test_empty_distance_becomes_warning(self):
        """距離が空欄の行は読み込まず警告にする"""
        df = pd.DataFrame([
            {"date": "2026-10-01", "name": "A", "type": "easy", "distance": None, "pace": "06:00", "duration": "00:12:00"},
            {"date": "2026-10-02", "name": "B", "type": "tempo", "distance": 5, "pace": "04:30", "duration": "00:22:30"},
        ])
        workouts, log = parse_workouts_frame(df)
        assert len(log["warnings"]) == 1
        assert [w["name"] for w in workouts] == ["B"]

        shares = {s.label: s.percentage for s in band_distribution(segment_totals(workouts))}
        assert shares["Średni"] == 100

    def test_bad_rows_become_warnings(self):
        df = pd.DataFrame([
            {"date": "2026-10-01", "name": "A", "type": "swim", "distance": 2, "pace": "06:00", "duration": "00:12:00"},
            {"date": "2026-10-01", "name": "A", "type": "easy", "distance": 2, "pace": "6 min", "duration": "00:12:00"},
            {"date": "2026-10-01", "name": "A", "type": "easy", "distance": 2, "pace": "06:00", "duration": "00:12:00"},
        ])
        workouts, log = parse_workouts_frame(df)
        assert log["success"] is True
        assert len(log["warnings"]) == 2
        assert len(workouts[0]["segments"]) == 1
