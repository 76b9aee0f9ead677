"""
Training Calendar - Segment
セグメントの種類・難易度バンド・保存形式と編集フォームの変換
"""
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Dict, List

from ..config import (
    DEFAULT_REPETITIONS,
    DEFAULT_SEGMENT_TYPE,
    DURATION_FIELDS,
    PACE_FIELDS,
)
from .timefmt import (
    format_distance,
    format_seconds_to_clock,
    parse_clock_to_seconds,
    parse_distance,
)


class SegmentType(str, Enum):
    EASY = "easy"
    TEMPO = "tempo"
    INTERVAL = "interval"
    TIME_TRIAL = "time_trial"


class Field(str, Enum):
    """相互に計算されるセグメントの入力項目"""
    DISTANCE = "distance"
    PACE = "pace"
    DURATION = "duration"


class Band(str, Enum):
    EASY = "easy"
    MODERATE = "moderate"
    HARD = "hard"


# セグメント種類 → 難易度バンド（固定）
BAND_BY_TYPE: Dict[SegmentType, Band] = {
    SegmentType.EASY: Band.EASY,
    SegmentType.TEMPO: Band.MODERATE,
    SegmentType.INTERVAL: Band.HARD,
    SegmentType.TIME_TRIAL: Band.HARD,
}

# 凡例の表示順・ラベル・色
CATEGORIES: List[Dict[str, str]] = [
    {"band": Band.EASY.value, "label": "Łatwy", "color": "#22c55e"},
    {"band": Band.MODERATE.value, "label": "Średni", "color": "#fb923c"},
    {"band": Band.HARD.value, "label": "Trudny", "color": "#ef4444"},
]

_CATEGORY_BY_BAND = {c["band"]: c for c in CATEGORIES}

# セグメントドットの色（種類ごと）
SEGMENT_COLORS: Dict[str, str] = {
    SegmentType.EASY.value: "#22c55e",
    SegmentType.TEMPO.value: "#fb923c",
    SegmentType.INTERVAL.value: "#ea580c",
    SegmentType.TIME_TRIAL.value: "#ef4444",
}
UNKNOWN_SEGMENT_COLOR = "#9ca3af"

SEGMENT_TYPE_NAMES: Dict[str, str] = {
    SegmentType.EASY.value: "Spokojny",
    SegmentType.TEMPO.value: "Tempo",
    SegmentType.INTERVAL.value: "Interwały",
    SegmentType.TIME_TRIAL.value: "Sprawdzian",
}


def band_of(segment_type: str) -> Band:
    """セグメント種類から難易度バンドを返す"""
    return BAND_BY_TYPE[SegmentType(segment_type)]


def segment_label(segment_type: str) -> str:
    """凡例用ラベル（未知の種類はそのまま返す）"""
    try:
        return _CATEGORY_BY_BAND[band_of(segment_type).value]["label"]
    except ValueError:
        return segment_type


def segment_color(segment_type: str) -> str:
    return SEGMENT_COLORS.get(segment_type, UNKNOWN_SEGMENT_COLOR)


@dataclass
class Segment:
    """保存されるセグメント

    Attributes:
        type: セグメント種類
        distance: 距離（km）
        pace: ペース（秒/km）
        duration: 合計時間（秒）
        repetitions: 繰り返し回数
    """
    type: str
    distance: float
    pace: int
    duration: int
    repetitions: int = DEFAULT_REPETITIONS

    @classmethod
    def from_dict(cls, data: dict) -> "Segment":
        return cls(
            type=data["type"],
            distance=float(data["distance"]),
            # 保存先によってはペースを "tempo" キーで持つ
            pace=int(data["pace"] if "pace" in data else data.get("tempo", 0)),
            duration=int(data.get("duration", 0)),
            repetitions=int(data.get("repetitions") or DEFAULT_REPETITIONS),
        )

    def to_dict(self) -> dict:
        return asdict(self)


def new_segment_form() -> dict:
    """新規セグメントの編集フォーム初期値"""
    return {
        "type": DEFAULT_SEGMENT_TYPE,
        Field.DISTANCE.value: "",
        Field.PACE.value: "",
        Field.DURATION.value: "",
        "repetitions": DEFAULT_REPETITIONS,
    }


def segment_to_form(segment: Segment) -> dict:
    """保存済みセグメントを編集フォームの文字列に変換"""
    return {
        "type": segment.type,
        Field.DISTANCE.value: format_distance(segment.distance),
        Field.PACE.value: format_seconds_to_clock(segment.pace, PACE_FIELDS),
        Field.DURATION.value: format_seconds_to_clock(segment.duration, DURATION_FIELDS),
        "repetitions": segment.repetitions,
    }


def segment_from_form(form: dict) -> Segment:
    """編集フォームの値を保存用セグメントに変換

    Raises:
        FormatError: ペース・時間の書式が不正
        ValueError: 距離・繰り返し回数・種類が不正
    """
    segment_type = SegmentType(form.get("type", DEFAULT_SEGMENT_TYPE)).value

    distance = parse_distance(form.get(Field.DISTANCE.value))
    if distance is None:
        raise ValueError(f"Nieprawidłowy dystans: {form.get(Field.DISTANCE.value)!r}")

    repetitions = int(form.get("repetitions") or DEFAULT_REPETITIONS)
    if repetitions < 1:
        raise ValueError(f"Liczba powtórzeń musi być dodatnia: {repetitions}")

    return Segment(
        type=segment_type,
        distance=distance,
        pace=parse_clock_to_seconds(form.get(Field.PACE.value), PACE_FIELDS),
        duration=parse_clock_to_seconds(form.get(Field.DURATION.value), DURATION_FIELDS),
        repetitions=repetitions,
    )
