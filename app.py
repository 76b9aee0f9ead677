"""
Kalendarz treningowy - Streamlit App
ランニングのワークアウトをカレンダーで計画し、週・月の負荷分布を確認する
"""
from datetime import date

import streamlit as st
from loguru import logger

from src.config import APP_NAME, APP_VERSION, DATE_FORMAT, WEEKDAY_NAMES
from src.data_loader import load_sample_workouts
from src.ui.components import (
    day_button_label,
    load_css,
    render_day_cell,
    render_footer,
    render_header,
    render_monthly_stats,
    render_week_summary,
    render_workout_card,
)
from src.workout import (
    FormatError,
    Field,
    Segment,
    SegmentType,
    reconcile,
    repetition_totals,
    segment_from_form,
    should_show_totals,
    workout_totals,
)
from src.workout.calendar_grid import (
    calendar_range,
    get_weeks,
    month_calendar_days,
    month_title,
    shift_month,
    week_segment_totals,
    workouts_for_day,
    workouts_in_range,
)
from src.workout.segment import SEGMENT_TYPE_NAMES, new_segment_form, segment_to_form
from src.workout.stats import segment_totals

# =============================================
# ページ設定
# =============================================
st.set_page_config(
    page_title=f"{APP_NAME} v{APP_VERSION}",
    page_icon="🏃",
    layout="wide",
)

SEGMENT_FIELDS = ["type", Field.DISTANCE.value, Field.PACE.value, Field.DURATION.value, "repetitions"]


def _key(index: int, field: str) -> str:
    return f"seg_{index}_{field}"


# =============================================
# セッション状態の初期化
# =============================================
def init_session_state():
    """セッション状態を初期化"""
    if "current_date" not in st.session_state:
        st.session_state.current_date = date.today()
    if "selected_date" not in st.session_state:
        st.session_state.selected_date = None
    if "workouts" not in st.session_state:
        workouts, verification_log = load_sample_workouts()
        st.session_state.workouts = list(workouts)
        st.session_state.load_errors = verification_log["errors"]
    if "templates" not in st.session_state:
        st.session_state.templates = []
    if "segment_count" not in st.session_state or st.session_state.get("form_saved"):
        st.session_state.form_saved = False
        reset_segment_form()


# =============================================
# セグメント編集フォーム
# =============================================
def set_segment_form(index: int, form: dict) -> None:
    for field in SEGMENT_FIELDS:
        st.session_state[_key(index, field)] = form[field]


def read_segment_form(index: int) -> dict:
    return {field: st.session_state[_key(index, field)] for field in SEGMENT_FIELDS}


def reset_segment_form(segments=None):
    """編集フォームを初期化（既存セグメントがあればその値で）"""
    forms = [segment_to_form(s) for s in segments] if segments else [new_segment_form()]
    st.session_state.segment_count = len(forms)
    for index, form in enumerate(forms):
        set_segment_form(index, form)


def add_segment():
    set_segment_form(st.session_state.segment_count, new_segment_form())
    st.session_state.segment_count += 1


def remove_segment(index: int):
    forms = [read_segment_form(i) for i in range(st.session_state.segment_count) if i != index]
    st.session_state.segment_count = len(forms)
    for i, form in enumerate(forms):
        set_segment_form(i, form)


def on_segment_field_change(index: int, field: str):
    """入力された項目に合わせて他の項目を再計算"""
    update = reconcile(read_segment_form(index), field)
    for name, value in update.items():
        st.session_state[_key(index, name)] = value


def apply_template(template: dict):
    reset_segment_form([Segment.from_dict(s) for s in template["segments"]])
    st.session_state.workout_name = template["name"]
    st.session_state.workout_description = template.get("description") or ""


def render_segment_editor(index: int):
    """1セグメント分の入力欄"""
    types = [t.value for t in SegmentType]
    col1, col2, col3, col4, col5, col6 = st.columns([2, 2, 2, 2, 1, 1])
    with col1:
        st.selectbox(
            "Typ", types, key=_key(index, "type"),
            format_func=lambda t: SEGMENT_TYPE_NAMES.get(t, t),
        )
    with col2:
        st.text_input(
            "Dystans (km)", key=_key(index, Field.DISTANCE.value), placeholder="10.00",
            on_change=on_segment_field_change, args=(index, Field.DISTANCE.value),
        )
    with col3:
        st.text_input(
            "Tempo (mm:ss/km)", key=_key(index, Field.PACE.value), placeholder="05:00",
            on_change=on_segment_field_change, args=(index, Field.PACE.value),
        )
    with col4:
        st.text_input(
            "Czas (hh:mm:ss)", key=_key(index, Field.DURATION.value), placeholder="00:50:00",
            on_change=on_segment_field_change, args=(index, Field.DURATION.value),
        )
    with col5:
        st.number_input("Powt.", min_value=1, step=1, key=_key(index, "repetitions"))
    with col6:
        st.button("✕", key=f"remove_{index}", on_click=remove_segment, args=(index,),
                  disabled=st.session_state.segment_count <= 1)

    form = read_segment_form(index)
    if should_show_totals(form["repetitions"]):
        totals = repetition_totals(form[Field.DISTANCE.value], form[Field.DURATION.value],
                                   int(form["repetitions"]))
        if totals:
            st.caption(f"Razem: {totals['total_distance']} km, {totals['total_duration']}")


def render_workout_form(selected: date):
    """選択日のワークアウト作成フォーム"""
    st.markdown(f"### ➕ Nowy trening – {selected.strftime(DATE_FORMAT)}")

    if st.session_state.templates:
        names = [t["name"] for t in st.session_state.templates]
        col1, col2 = st.columns([3, 1])
        with col1:
            chosen = st.selectbox("Szablon", names, key="template_choice")
        with col2:
            st.button("Użyj szablonu", on_click=apply_template,
                      args=(st.session_state.templates[names.index(chosen)],))

    name = st.text_input("Nazwa treningu", key="workout_name")
    description = st.text_area("Opis (opcjonalnie)", key="workout_description", height=68)

    for index in range(st.session_state.segment_count):
        render_segment_editor(index)

    st.button("Dodaj segment", on_click=add_segment)

    col1, col2, col3 = st.columns(3)
    save = col1.button("Zapisz", type="primary")
    save_template = col2.button("Zapisz jako szablon")
    col3.button("Anuluj", on_click=reset_segment_form)

    if not (save or save_template):
        return

    if not name.strip():
        st.error("Podaj nazwę treningu.")
        return

    try:
        segments = [segment_from_form(read_segment_form(i)).to_dict()
                    for i in range(st.session_state.segment_count)]
    except (FormatError, ValueError) as e:
        st.error(f"Nie można zapisać segmentu: {e}")
        return

    if save:
        st.session_state.workouts.append({
            "date": selected.strftime(DATE_FORMAT),
            "name": name.strip(),
            "description": description.strip() or None,
            "segments": segments,
        })
        logger.info(f"Zapisano trening '{name.strip()}' ({selected})")
    else:
        totals = workout_totals(segments)
        st.session_state.templates.append({
            "name": name.strip(),
            "description": description.strip() or None,
            "segments": segments,
            "total_distance": totals["total_distance"],
            "total_duration": totals["total_duration"],
        })
        logger.info(f"Zapisano szablon '{name.strip()}'")

    # ウィジェット生成後は値を変更できないため、次回実行時に初期化する
    st.session_state.form_saved = True
    st.rerun()


# =============================================
# カレンダー
# =============================================
def go_to_previous_month():
    st.session_state.current_date = shift_month(st.session_state.current_date, -1)


def go_to_next_month():
    st.session_state.current_date = shift_month(st.session_state.current_date, 1)


def go_to_today():
    st.session_state.current_date = date.today()
    st.session_state.selected_date = date.today()


def select_day(day: date):
    st.session_state.selected_date = day
    reset_segment_form()


def render_calendar(workouts):
    current = st.session_state.current_date
    today = date.today()

    col1, col2, col3, col4 = st.columns([6, 1, 1, 1])
    with col1:
        st.subheader(month_title(current))
    col2.button("◀", on_click=go_to_previous_month)
    col3.button("Dzisiaj", on_click=go_to_today, disabled=current == today)
    col4.button("▶", on_click=go_to_next_month)

    render_monthly_stats(segment_totals(workouts))

    days = month_calendar_days(current)
    header = st.columns(8)
    for col, weekday in zip(header, WEEKDAY_NAMES + ["Σ"]):
        col.markdown(f"**{weekday}**")

    for week in get_weeks(days):
        cols = st.columns(8)
        for col, day in zip(cols, week):
            in_month = day.month == current.month
            with col:
                st.button(day_button_label(day, in_month, day == today),
                          key=f"day_{day.isoformat()}", on_click=select_day, args=(day,))
                render_day_cell(workouts_for_day(workouts, day), in_month)
        with cols[7]:
            render_week_summary(week_segment_totals(week, workouts))


# =============================================
# メイン UI
# =============================================
def main():
    init_session_state()
    load_css()
    render_header()

    for error in st.session_state.load_errors:
        st.error(error)

    date_from, date_to = calendar_range(st.session_state.current_date)
    visible = workouts_in_range(st.session_state.workouts, date_from, date_to)

    render_calendar(visible)

    selected = st.session_state.selected_date
    if selected is not None:
        st.markdown("---")
        day_workouts = workouts_for_day(st.session_state.workouts, selected)
        for workout in day_workouts:
            render_workout_card(workout)
        render_workout_form(selected)

    render_footer()


if __name__ == "__main__":
    main()
