"""Pace Conversion Page.

Convert running pace between minutes per mile and minutes per kilometer.
"""

import streamlit as st
from fitness_converter.converter import convert_pace_seconds, convert_pace_with_details
from fitness_converter.metrics import pace_to_speed, speed_to_pace
from fitness_converter.pace import PaceDecimal, PaceSeconds, PaceText, format_pace
from fitness_converter.units import PaceUnit
from fitness_converter.validation import validate_pace
from pages.components.result_display import render_conversion_result, render_range_warnings

st.set_page_config(page_title="Pace | Fitness Converter", page_icon="⏱️", layout="wide")
st.title("⏱️ Pace Conversion")

PACE_FORMATS = {
    "Minutes:Seconds (7:30)": "text",
    "Decimal minutes (7.5)": "decimal",
    "Total seconds (450)": "seconds",
}

st.markdown("### Convert Pace")

with st.form("pace_form"):
    col1, col2, col3 = st.columns(3)

    with col1:
        format_label = st.selectbox("Input format", list(PACE_FORMATS.keys()))
        pace_format = PACE_FORMATS[format_label]

    with col2:
        from_unit = st.selectbox(
            "From",
            list(PaceUnit),
            format_func=lambda u: u.full_name,
        )

    with col3:
        to_unit = st.selectbox(
            "To",
            list(PaceUnit),
            index=1,
            format_func=lambda u: u.full_name,
        )

    if pace_format == "text":
        raw = st.text_input("Pace*", value="7:30", help="Minutes and seconds, e.g. 7:30")
        pace = PaceText(raw.strip())
    elif pace_format == "decimal":
        raw = st.number_input("Pace (minutes)*", min_value=0.0, value=7.5, step=0.1)
        pace = PaceDecimal(float(raw))
    else:
        raw = st.number_input("Pace (seconds)*", min_value=0, value=450, step=1)
        pace = PaceSeconds(int(raw))

    check_range = st.checkbox("Warn about unusual paces", value=True)

    submitted = st.form_submit_button("🔄 Convert", use_container_width=True)

if submitted:
    result = convert_pace_with_details(pace, from_unit, to_unit)
    render_conversion_result(result, label=f"Pace ({to_unit.abbreviation})")

    if result.is_success and check_range:
        # Range is defined per mile
        seconds = convert_pace_seconds(pace.to_seconds(), from_unit, PaceUnit.MINUTES_PER_MILE)
        render_range_warnings([validate_pace(seconds)])

st.divider()

# Speed <-> pace
st.markdown("### Speed & Pace")
col1, col2 = st.columns(2)

with col1:
    speed = st.number_input("Speed (mph)", min_value=0.0, value=8.0, step=0.1)
    mile_pace = speed_to_pace(speed)
    if mile_pace:
        st.metric("Pace per mile", mile_pace)
    else:
        st.info("Enter a speed above zero")

with col2:
    pace_text = st.text_input("Pace per mile", value="7:30")
    mph = pace_to_speed(pace_text.strip())
    if mph is not None:
        st.metric("Speed", f"{mph:.1f} mph")
    else:
        st.error("⚠️ Enter pace as M:SS, e.g. 7:30")

st.markdown("---")
st.caption(
    f"💡 **Tip:** Paces are whole seconds; converted paces are truncated, "
    f"so 7:30 per mile shows as {format_pace(279)} per kilometer."
)
