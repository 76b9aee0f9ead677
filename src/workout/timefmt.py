"""
Training Calendar - Time Format
時間文字列（hh:mm:ss / mm:ss）と秒数、距離文字列と数値の相互変換
"""
import math
import numbers
from typing import Optional

from ..config import DISTANCE_DECIMALS, DURATION_FIELDS
from .errors import FormatError, RangeError


def parse_clock_to_seconds(text: Optional[str], expected_fields: int = DURATION_FIELDS) -> int:
    """時間文字列を秒に変換

    Args:
        text: 時間文字列 (例: "01:15:00", "05:30")
        expected_fields: 想定するフィールド数（3 = hh:mm:ss, 2 = mm:ss）

    Returns:
        秒数（空文字は未入力として0）

    Raises:
        FormatError: 数値以外、またはフィールド数が合わない場合
    """
    if text is None:
        return 0

    text = str(text).strip()
    if not text:
        return 0

    parts = text.replace("：", ":").split(":")

    # hh:mm:ss が想定される場所に mm:ss が来た場合は "00:" を補う
    if len(parts) == 2 and expected_fields == 3:
        parts = ["00"] + parts

    if len(parts) != expected_fields:
        raise FormatError(f"Nieprawidłowy format czasu: '{text}'")

    if not all(p.isdecimal() for p in parts):
        raise FormatError(f"Nieprawidłowy format czasu: '{text}'")

    values = [int(p) for p in parts]

    # 先頭以外のフィールドは60未満
    if any(v >= 60 for v in values[1:]):
        raise FormatError(f"Nieprawidłowy format czasu: '{text}'")

    seconds = 0
    for value in values:
        seconds = seconds * 60 + value
    return seconds


def format_seconds_to_clock(seconds: float, fields: int = DURATION_FIELDS) -> str:
    """秒を時間文字列に変換

    Args:
        seconds: 秒数（小数は四捨五入）
        fields: 3 なら hh:mm:ss、2 なら mm:ss

    Returns:
        ゼロ埋めした時間文字列 (例: "00:50:00" or "05:00")

    Raises:
        RangeError: 負数・非有限値の場合
    """
    if fields not in (2, 3):
        raise ValueError(f"fields must be 2 or 3, got {fields}")

    if isinstance(seconds, bool) or not isinstance(seconds, numbers.Real):
        raise RangeError(f"Nieprawidłowa liczba sekund: {seconds!r}")
    if not math.isfinite(seconds) or seconds < 0:
        raise RangeError(f"Nieprawidłowa liczba sekund: {seconds!r}")

    total = int(math.floor(seconds + 0.5))

    if fields == 3:
        hours = total // 3600
        minutes = (total % 3600) // 60
        secs = total % 60
        return f"{hours:02d}:{minutes:02d}:{secs:02d}"

    minutes = total // 60
    secs = total % 60
    return f"{minutes:02d}:{secs:02d}"


def parse_distance(text) -> Optional[float]:
    """距離文字列をkmの数値に変換

    カンマ区切りの小数（"5,5"）も受け付ける。

    Returns:
        距離（km）。空・数値以外・負数・非有限値の場合はNone
    """
    if text is None:
        return None

    text = str(text).strip().replace(",", ".")
    if not text:
        return None

    try:
        value = float(text)
    except ValueError:
        return None

    if not math.isfinite(value) or value < 0:
        return None
    return value


def format_distance(km: float) -> str:
    """距離を小数点以下2桁の文字列に変換"""
    return f"{km:.{DISTANCE_DECIMALS}f}"
