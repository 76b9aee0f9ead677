"""
Training Calendar - Configuration
アプリケーション全体の設定値を管理
"""

# =============================================
# アプリ情報
# =============================================
APP_NAME = "Kalendarz treningowy"
APP_VERSION = "0.4.0"

# =============================================
# カレンダー設定
# =============================================
# 1週あたりの表示列数
TOTAL_ROWS_TO_DISPLAY = 7

DATE_FORMAT = "%Y-%m-%d"

MONTH_NAMES = [
    "Styczeń",
    "Luty",
    "Marzec",
    "Kwiecień",
    "Maj",
    "Czerwiec",
    "Lipiec",
    "Sierpień",
    "Wrzesień",
    "Październik",
    "Listopad",
    "Grudzień",
]

WEEKDAY_NAMES = ["Pon", "Wt", "Śr", "Czw", "Pt", "Sob", "Nie"]

# =============================================
# セグメント設定
# =============================================
# 距離の小数点以下桁数（2桁で統一）
DISTANCE_DECIMALS = 2

# 合計時間（hh:mm:ss）とペース（mm:ss/km）のフィールド数
DURATION_FIELDS = 3
PACE_FIELDS = 2

# 新規セグメントの初期値
DEFAULT_SEGMENT_TYPE = "easy"
DEFAULT_REPETITIONS = 1

# 割合が計算できない場合の表示
NO_DATA_LABEL = "brak"

# =============================================
# データファイルパス
# =============================================
DATA_DIR = "data"
SAMPLE_WORKOUTS_FILE = "sample_workouts.csv"
