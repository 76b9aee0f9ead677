"""
Training Calendar - Errors
ワークアウト計算で使用する例外
"""


class WorkoutError(ValueError):
    """ワークアウト計算の基底例外"""


class FormatError(WorkoutError):
    """時間文字列が mm:ss / hh:mm:ss として解釈できない"""


class RangeError(WorkoutError):
    """負数・非有限値など、時間文字列に変換できない秒数"""


class InvalidDateRangeError(WorkoutError):
    """日付範囲の形式または順序が不正"""
