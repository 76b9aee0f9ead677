"""
Training Calendar - Calendar Grid
月表示のカレンダー（月曜始まり）と週単位の集計
"""
import re
from datetime import date, datetime, timedelta
from typing import Dict, List, Optional, Sequence, Tuple

import pandas as pd
from loguru import logger

from ..config import DATE_FORMAT, MONTH_NAMES, TOTAL_ROWS_TO_DISPLAY
from .errors import InvalidDateRangeError
from .stats import segment_totals

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _as_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(str(value), DATE_FORMAT).date()


def month_calendar_days(current: date) -> List[date]:
    """表示月の全日付（前月末・翌月初を含む、月曜〜日曜の週単位）

    Args:
        current: 表示月に含まれる任意の日付

    Returns:
        月初を含む週の月曜から月末を含む週の日曜までの日付リスト
    """
    current = _as_date(current)
    month_start = current.replace(day=1)
    month_end = (pd.Timestamp(month_start) + pd.offsets.MonthEnd(0)).date()

    # weekday(): 月曜 = 0
    calendar_start = month_start - timedelta(days=month_start.weekday())
    calendar_end = month_end + timedelta(days=6 - month_end.weekday())

    days = []
    day = calendar_start
    while day <= calendar_end:
        days.append(day)
        day += timedelta(days=1)
    return days


def get_weeks(days: Sequence[date], size: int = TOTAL_ROWS_TO_DISPLAY) -> List[List[date]]:
    """日付リストを週（7日ずつ）に分割"""
    return [list(days[i:i + size]) for i in range(0, len(days), size)]


def find_week_for_date(target, weeks: Sequence[Sequence[date]]) -> Optional[List[date]]:
    """指定日を含む週を返す（見つからなければNone）"""
    target = _as_date(target)
    for week in weeks:
        if target in week:
            return list(week)
    return None


def calendar_range(current: date) -> Tuple[str, str]:
    """カレンダー表示範囲を "YYYY-MM-DD" の組で返す"""
    days = month_calendar_days(current)
    return days[0].strftime(DATE_FORMAT), days[-1].strftime(DATE_FORMAT)


def shift_month(current: date, months: int) -> date:
    """前月・翌月への移動（月末日は移動先の月末に丸める）"""
    return (pd.Timestamp(_as_date(current)) + pd.DateOffset(months=months)).date()


def month_title(current: date) -> str:
    current = _as_date(current)
    return f"{MONTH_NAMES[current.month - 1]} {current.year}"


def validate_date_range(date_from: str, date_to: str) -> None:
    """日付範囲を検証

    Raises:
        InvalidDateRangeError: 形式が YYYY-MM-DD でない、または開始日が終了日より後
    """
    if not _DATE_RE.match(str(date_from)) or not _DATE_RE.match(str(date_to)):
        raise InvalidDateRangeError("Data musi mieć format YYYY-MM-DD")
    if date_from > date_to:
        raise InvalidDateRangeError("dateFrom musi być wcześniejsza lub równa dateTo")


def workouts_in_range(workouts: Sequence[dict], date_from: str, date_to: str) -> List[dict]:
    """期間内（両端を含む）のワークアウトを返す"""
    validate_date_range(date_from, date_to)
    selected = [w for w in workouts if date_from <= w["date"] <= date_to]
    logger.debug(f"{len(selected)} treningów w zakresie {date_from}..{date_to}")
    return selected


def workouts_for_day(workouts: Sequence[dict], day) -> List[dict]:
    key = _as_date(day).strftime(DATE_FORMAT)
    return [w for w in workouts if w["date"] == key]


def week_segment_totals(week: Sequence[date], workouts: Sequence[dict]) -> Dict[str, float]:
    """1週間分の種類別距離"""
    keys = {_as_date(day).strftime(DATE_FORMAT) for day in week}
    return segment_totals(workouts, include=lambda w: w["date"] in keys)
