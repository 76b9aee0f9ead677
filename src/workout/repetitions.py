"""
Training Calendar - Repetitions
繰り返しセグメント（例: 6 × 400m）の合計距離・合計時間
"""
from typing import Optional

from loguru import logger

from ..config import DURATION_FIELDS
from .errors import FormatError
from .timefmt import (
    format_distance,
    format_seconds_to_clock,
    parse_clock_to_seconds,
    parse_distance,
)


def repetition_totals(distance: str, duration: str, repetitions: int = 1) -> Optional[dict]:
    """繰り返し回数を掛けた合計距離・合計時間を計算

    Args:
        distance: 1回あたりの距離（km）
        duration: 1回あたりの時間（hh:mm:ss）
        repetitions: 繰り返し回数（1以上）

    Returns:
        {"total_distance": "15.00", "total_duration": "01:15:00"}
        距離・時間が未入力または解釈できない場合はNone
    """
    if repetitions < 1:
        raise ValueError(f"Liczba powtórzeń musi być dodatnia: {repetitions}")

    distance_km = parse_distance(distance)
    if distance_km is None:
        return None

    try:
        duration_seconds = parse_clock_to_seconds(duration, DURATION_FIELDS)
    except FormatError as e:
        logger.debug(f"Pominięto sumę powtórzeń: {e}")
        return None

    if duration_seconds == 0:
        return None

    return {
        "total_distance": format_distance(distance_km * repetitions),
        "total_duration": format_seconds_to_clock(duration_seconds * repetitions, DURATION_FIELDS),
    }


def should_show_totals(repetitions: int) -> bool:
    """合計は2回以上の繰り返しでのみ表示する"""
    return (repetitions or 1) > 1
