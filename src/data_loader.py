"""
Training Calendar - Data Loader
サンプルワークアウトCSVの読み込みと検証
"""
import os
import pandas as pd
import streamlit as st
from loguru import logger
from typing import List, Tuple

from .config import DATA_DIR, DURATION_FIELDS, PACE_FIELDS, SAMPLE_WORKOUTS_FILE
from .workout import FormatError, SegmentType, parse_clock_to_seconds, parse_distance


REQUIRED_COLUMNS = ["date", "name", "type", "distance", "pace", "duration"]


def parse_workouts_frame(df: pd.DataFrame) -> Tuple[List[dict], dict]:
    """セグメント単位の行をワークアウト単位にまとめる

    同じ日付・名前の行を1つのワークアウトのセグメントとして扱う（行の順序を保持）。

    Returns:
        Tuple[workouts, verification_log]
    """
    verification_log = {
        "success": False,
        "errors": [],
        "warnings": []
    }

    missing_cols = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing_cols:
        verification_log["errors"].append(f"Brak wymaganych kolumn: {missing_cols}")
        return [], verification_log

    valid_types = {t.value for t in SegmentType}
    workouts = {}

    for index, row in df.iterrows():
        segment_type = str(row["type"]).strip()
        if segment_type not in valid_types:
            verification_log["warnings"].append(f"Wiersz {index + 2}: nieznany typ segmentu '{segment_type}'")
            continue

        distance = parse_distance(row["distance"])
        if distance is None:
            verification_log["warnings"].append(f"Wiersz {index + 2}: nieprawidłowy dystans '{row['distance']}'")
            continue

        try:
            segment = {
                "type": segment_type,
                "distance": distance,
                "pace": parse_clock_to_seconds(str(row["pace"]), PACE_FIELDS),
                "duration": parse_clock_to_seconds(str(row["duration"]), DURATION_FIELDS),
                "repetitions": int(row["repetitions"]) if "repetitions" in df.columns and pd.notna(row["repetitions"]) else 1,
            }
        except (FormatError, ValueError) as e:
            verification_log["warnings"].append(f"Wiersz {index + 2}: {e}")
            continue

        key = (str(row["date"]).strip(), str(row["name"]).strip())
        if key not in workouts:
            description = row["description"] if "description" in df.columns else None
            workouts[key] = {
                "date": key[0],
                "name": key[1],
                "description": description if pd.notna(description) else None,
                "segments": [],
            }
        workouts[key]["segments"].append(segment)

    for warning in verification_log["warnings"]:
        logger.warning(warning)

    verification_log["success"] = True
    return list(workouts.values()), verification_log


@st.cache_data
def load_sample_workouts() -> Tuple[List[dict], dict]:
    """サンプルワークアウトを読み込む

    Returns:
        Tuple[workouts, verification_log]
    """
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    path = os.path.join(base_dir, DATA_DIR, SAMPLE_WORKOUTS_FILE)

    if not os.path.exists(path):
        logger.error(f"Nie znaleziono pliku: {path}")
        return [], {"success": False, "errors": [f"Nie znaleziono pliku: {path}"], "warnings": []}

    try:
        df = pd.read_csv(path, dtype={"pace": str, "duration": str})
    except Exception as e:
        logger.exception("Błąd odczytu CSV")
        return [], {"success": False, "errors": [f"Błąd odczytu CSV: {str(e)}"], "warnings": []}

    return parse_workouts_frame(df)
