"""
Training Calendar - Statistics
週・月単位の距離を種類別に集計し、難易度バンドの割合を算出
"""
import math
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from ..config import NO_DATA_LABEL
from .segment import CATEGORIES, SegmentType, segment_label


@dataclass(frozen=True)
class BandShare:
    label: str
    color: str
    total: float
    percentage: Optional[float]


def empty_totals() -> Dict[str, float]:
    return {t.value: 0.0 for t in SegmentType}


def segment_totals(workouts: Iterable[dict],
                   include: Optional[Callable[[dict], bool]] = None) -> Dict[str, float]:
    """ワークアウトの距離を種類別に合計

    Args:
        workouts: segments を持つワークアウトのリスト
        include: 集計対象のワークアウトを選ぶ条件（日付範囲など）

    Returns:
        {easy, tempo, interval, time_trial} → 距離（km）
    """
    totals = empty_totals()

    for workout in workouts or []:
        if include is not None and not include(workout):
            continue
        for segment in workout.get("segments", []):
            segment_type = segment.get("type")
            if segment_type not in totals:
                continue
            repetitions = segment.get("repetitions") or 1
            totals[segment_type] += float(segment.get("distance") or 0) * repetitions

    return totals


def group_by_band(totals: Dict[str, float]) -> Dict[str, float]:
    """種類別の合計を凡例ラベルごとにまとめる（interval と time_trial は同じラベル）"""
    grouped = {c["label"]: 0.0 for c in CATEGORIES}
    for segment_type, total in totals.items():
        label = segment_label(segment_type)
        grouped[label] = grouped.get(label, 0.0) + total
    return grouped


def band_distribution(totals: Dict[str, float]) -> List[BandShare]:
    """凡例用の割合一覧

    合計が0のバンドは割合なし（None）とし、「0%」と区別する。
    """
    grouped = group_by_band(totals)
    total_all = sum(totals.values())

    shares = []
    for category in CATEGORIES:
        total = grouped.get(category["label"], 0.0)
        percentage = None
        if total_all > 0 and total > 0:
            percentage = total / total_all * 100
        shares.append(BandShare(category["label"], category["color"], total, percentage))
    return shares


def format_share(share: BandShare) -> str:
    if share.percentage is None:
        return NO_DATA_LABEL
    return f"{int(math.floor(share.percentage + 0.5))}%"


def workout_totals(segments: Iterable[dict]) -> Dict[str, float]:
    """ワークアウト全体の合計距離（km）と合計時間（秒）"""
    total_distance = 0.0
    total_duration = 0
    for segment in segments:
        repetitions = segment.get("repetitions") or 1
        total_distance += float(segment.get("distance") or 0) * repetitions
        total_duration += int(segment.get("duration") or 0) * repetitions
    return {"total_distance": total_distance, "total_duration": total_duration}
