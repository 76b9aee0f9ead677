"""
Training Calendar - Segment Reconciler
距離・ペース・合計時間のうち2つから残り1つを計算し、
「合計時間 = ペース × 距離」を保つ
"""
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Mapping, Optional, Tuple

from loguru import logger

from ..config import DISTANCE_DECIMALS, DURATION_FIELDS, PACE_FIELDS
from .errors import FormatError, RangeError
from .segment import Field
from .timefmt import (
    format_distance,
    format_seconds_to_clock,
    parse_clock_to_seconds,
    parse_distance,
)


class StateKind(Enum):
    COMPLETE = "complete"
    MISSING_ONE = "missing_one"
    MISSING_TWO_OR_MORE = "missing_two_or_more"


@dataclass(frozen=True)
class SegmentState:
    kind: StateKind
    missing: Optional[Field] = None


def _text(segment: Mapping, field: Field) -> str:
    value = segment.get(field.value)
    if value is None:
        return ""
    return str(value).strip()


def classify(segment: Mapping) -> SegmentState:
    """入力済み項目の数からセグメントの状態を判定"""
    missing = [f for f in Field if not _text(segment, f)]

    if not missing:
        return SegmentState(StateKind.COMPLETE)
    if len(missing) == 1:
        return SegmentState(StateKind.MISSING_ONE, missing[0])
    return SegmentState(StateKind.MISSING_TWO_OR_MORE)


def _derive_duration(segment: Mapping) -> Optional[str]:
    # duration = pace × distance
    distance = parse_distance(_text(segment, Field.DISTANCE))
    if distance is None:
        return None
    pace = parse_clock_to_seconds(_text(segment, Field.PACE), PACE_FIELDS)
    return format_seconds_to_clock(pace * distance, DURATION_FIELDS)


def _derive_pace(segment: Mapping) -> Optional[str]:
    # pace = duration / distance
    distance = parse_distance(_text(segment, Field.DISTANCE))
    if not distance:
        return None
    duration = parse_clock_to_seconds(_text(segment, Field.DURATION), DURATION_FIELDS)
    return format_seconds_to_clock(duration / distance, PACE_FIELDS)


def _derive_distance(segment: Mapping) -> Optional[str]:
    # distance = duration / pace
    pace = parse_clock_to_seconds(_text(segment, Field.PACE), PACE_FIELDS)
    if not pace:
        return None
    duration = parse_clock_to_seconds(_text(segment, Field.DURATION), DURATION_FIELDS)
    return format_distance(duration / pace)


DERIVERS: Dict[Field, Callable[[Mapping], Optional[str]]] = {
    Field.DISTANCE: _derive_distance,
    Field.PACE: _derive_pace,
    Field.DURATION: _derive_duration,
}

# (状態, 欠けている項目, 編集された項目) → 再計算する項目
DERIVATIONS: Dict[Tuple[StateKind, Optional[Field], Field], Field] = {
    # 全項目入力済み: 編集された項目に依存する項目だけを再計算
    (StateKind.COMPLETE, None, Field.DISTANCE): Field.DURATION,
    (StateKind.COMPLETE, None, Field.PACE): Field.DURATION,
    (StateKind.COMPLETE, None, Field.DURATION): Field.PACE,
    # 1項目だけ未入力: 編集された項目に関わらず未入力の項目を埋める
    (StateKind.MISSING_ONE, Field.DISTANCE, Field.DISTANCE): Field.DISTANCE,
    (StateKind.MISSING_ONE, Field.DISTANCE, Field.PACE): Field.DISTANCE,
    (StateKind.MISSING_ONE, Field.DISTANCE, Field.DURATION): Field.DISTANCE,
    (StateKind.MISSING_ONE, Field.PACE, Field.DISTANCE): Field.PACE,
    (StateKind.MISSING_ONE, Field.PACE, Field.PACE): Field.PACE,
    (StateKind.MISSING_ONE, Field.PACE, Field.DURATION): Field.PACE,
    (StateKind.MISSING_ONE, Field.DURATION, Field.DISTANCE): Field.DURATION,
    (StateKind.MISSING_ONE, Field.DURATION, Field.PACE): Field.DURATION,
    (StateKind.MISSING_ONE, Field.DURATION, Field.DURATION): Field.DURATION,
}


def _is_consistent(segment: Mapping) -> bool:
    """3項目が表示の丸め誤差の範囲で「時間 = ペース × 距離」を満たすか

    許容誤差: ペースの丸め（0.5秒/km × 距離）+ 距離の丸め（0.005km × ペース）
    + 時間の丸め（0.5秒）
    """
    distance = parse_distance(_text(segment, Field.DISTANCE))
    if distance is None:
        return False
    pace = parse_clock_to_seconds(_text(segment, Field.PACE), PACE_FIELDS)
    duration = parse_clock_to_seconds(_text(segment, Field.DURATION), DURATION_FIELDS)

    half_distance_unit = 0.5 / 10 ** DISTANCE_DECIMALS
    tolerance = 0.5 * distance + half_distance_unit * pace + 0.5
    return abs(pace * distance - duration) <= tolerance


def derivation_target(state: SegmentState, edited: Field) -> Optional[Field]:
    """再計算の対象項目（2項目以上未入力ならNone）"""
    return DERIVATIONS.get((state.kind, state.missing, Field(edited)))


def reconcile(segment: Mapping, edited) -> Dict[str, str]:
    """編集された項目に合わせて他の項目を再計算

    Args:
        segment: distance / pace / duration の文字列を持つフォームの値
        edited: 直前に編集された項目（Field または "distance" 等）

    Returns:
        変更された項目だけを含む辞書（変更なしなら空）
    """
    edited = Field(edited)
    state = classify(segment)
    target = derivation_target(state, edited)
    if target is None:
        return {}

    try:
        # 全項目入力済みで整合している場合は丸め済みの値を書き換えない
        if state.kind is StateKind.COMPLETE and _is_consistent(segment):
            return {}
        value = DERIVERS[target](segment)
    except (FormatError, RangeError) as e:
        logger.warning(f"Pominięto przeliczenie pola {target.value}: {e}")
        return {}

    if value is None:
        logger.debug(f"Brak danych do przeliczenia pola {target.value}")
        return {}

    # 値が変わらない場合は書き込まない
    if value == _text(segment, target):
        return {}

    logger.debug(f"{edited.value} → {target.value} = {value}")
    return {target.value: value}


def apply_update(segment: Mapping, update: Mapping) -> dict:
    """フォームの値に更新を反映した新しい辞書を返す"""
    merged = dict(segment)
    merged.update(update)
    return merged
