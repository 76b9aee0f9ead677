"""
Training Calendar - UI Components
再利用可能なUIコンポーネント
"""
import os
from datetime import date
from typing import Dict, List

import streamlit as st

from ..config import APP_NAME, APP_VERSION, DURATION_FIELDS, PACE_FIELDS
from ..workout import (
    band_distribution,
    format_distance,
    format_seconds_to_clock,
    format_share,
    segment_color,
    workout_totals,
)
from ..workout.segment import SEGMENT_TYPE_NAMES


def load_css() -> None:
    """外部CSSファイルを読み込んで適用"""
    css_path = os.path.join(os.path.dirname(__file__), "styles.css")

    if os.path.exists(css_path):
        with open(css_path, "r", encoding="utf-8") as f:
            css_content = f.read()
        st.markdown(f"<style>{css_content}</style>", unsafe_allow_html=True)
    else:
        # フォールバック：インラインCSS
        st.markdown("""
        <style>
            .main-header { font-size: 2rem; color: #111827; }
            .version-tag { font-size: 0.8rem; color: #888; }
            .dot { display: inline-block; width: 8px; height: 8px; border-radius: 50%; margin-right: 3px; }
        </style>
        """, unsafe_allow_html=True)


def render_header() -> None:
    """アプリヘッダーを表示"""
    st.markdown(f'<h1 class="main-header">🏃 {APP_NAME}</h1>', unsafe_allow_html=True)
    st.markdown(f'<p class="version-tag">Version {APP_VERSION}</p>', unsafe_allow_html=True)


def render_footer() -> None:
    """フッターを表示（更新履歴）"""
    st.markdown("---")

    with st.expander("📋 Historia zmian", expanded=False):
        changelog_path = os.path.join(os.path.dirname(__file__), "../../CHANGELOG.md")
        try:
            with open(changelog_path, "r", encoding="utf-8") as f:
                changelog_content = f.read()
            st.markdown(changelog_content)
        except FileNotFoundError:
            st.markdown("Nie znaleziono pliku z historią zmian.")


def segment_dots_html(segments: List[dict]) -> str:
    """セグメントの種類を色付きドットで表すHTML"""
    if not segments:
        return ""
    return "".join(
        f'<span class="dot" style="background:{segment_color(s["type"])}" title="{s["type"]}"></span>'
        for s in segments
    )


def render_monthly_stats(totals: Dict[str, float]) -> None:
    """月間の難易度バンド分布（バー + 凡例）を表示

    Args:
        totals: 種類別の距離（km）
    """
    shares = band_distribution(totals)
    visible = [s for s in shares if s.percentage is not None]

    if visible:
        bars = "".join(
            f'<div class="bar" style="width:{s.percentage}%;background:{s.color}" '
            f'title="{s.label}: {format_share(s)}"></div>'
            for s in visible
        )
    else:
        bars = '<div class="bar" style="width:100%;background:#d1d5db"></div>'
    st.markdown(f'<div class="stats-bar">{bars}</div>', unsafe_allow_html=True)

    legend = "".join(
        f'<span class="legend-item"><span class="dot" style="background:{s.color}"></span>'
        f'{s.label}: {format_share(s)}</span>'
        for s in shares
    )
    st.markdown(f'<div class="legend">{legend}</div>', unsafe_allow_html=True)


def render_week_summary(totals: Dict[str, float]) -> None:
    """週の難易度バンド割合を表示"""
    rows = "".join(
        f'<div><span class="dot" style="background:{s.color}"></span>{format_share(s)}</div>'
        for s in band_distribution(totals)
    )
    st.markdown(f'<div class="week-summary">{rows}</div>', unsafe_allow_html=True)


def day_button_label(day: date, in_month: bool, is_today: bool) -> str:
    label = str(day.day)
    if is_today:
        return f"**{label}** •"
    if not in_month:
        return f":gray[{label}]"
    return label


def render_day_cell(workouts: List[dict], in_month: bool) -> None:
    """カレンダーの1日分のワークアウトを表示"""
    classes = ["day-cell"]
    if not in_month:
        classes.append("other-month")

    names = "".join(
        f'<div class="workout-name">{w["name"]}</div><div>{segment_dots_html(w["segments"])}</div>'
        for w in workouts
    )
    st.markdown(f'<div class="{" ".join(classes)}">{names}</div>', unsafe_allow_html=True)


def render_workout_card(workout: dict) -> None:
    """ワークアウトの詳細（セグメント一覧と合計）を表示"""
    totals = workout_totals(workout["segments"])

    st.markdown(f"**{workout['name']}**")
    if workout.get("description"):
        st.caption(workout["description"])

    for segment in workout["segments"]:
        repetitions = segment.get("repetitions") or 1
        prefix = f"{repetitions} × " if repetitions > 1 else ""
        st.markdown(
            f'<span class="dot" style="background:{segment_color(segment["type"])}"></span>'
            f'{SEGMENT_TYPE_NAMES.get(segment["type"], segment["type"])}: '
            f'{prefix}{format_distance(segment["distance"])} km @ '
            f'{format_seconds_to_clock(segment["pace"], PACE_FIELDS)}/km '
            f'({format_seconds_to_clock(segment["duration"], DURATION_FIELDS)})',
            unsafe_allow_html=True,
        )

    st.caption(
        f"Razem: {format_distance(totals['total_distance'])} km, "
        f"{format_seconds_to_clock(totals['total_duration'], DURATION_FIELDS)}"
    )
