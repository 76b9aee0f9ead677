"""
Training Calendar - Workout Package
セグメントの時間・距離・ペース計算と集計
"""
from .errors import FormatError, InvalidDateRangeError, RangeError, WorkoutError
from .timefmt import (
    parse_clock_to_seconds,
    format_seconds_to_clock,
    parse_distance,
    format_distance,
)
from .segment import (
    Field,
    Segment,
    SegmentType,
    band_of,
    new_segment_form,
    segment_color,
    segment_from_form,
    segment_label,
    segment_to_form,
)
from .reconcile import reconcile, apply_update
from .repetitions import repetition_totals, should_show_totals
from .stats import (
    band_distribution,
    format_share,
    group_by_band,
    segment_totals,
    workout_totals,
)
