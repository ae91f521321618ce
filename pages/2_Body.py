"""Body Measurements Page.

Convert weight, height and distance, and calculate BMI.
"""

import streamlit as st
from fitness_converter.converter import calculate_bmi_with_details, convert_with_details
from fitness_converter.units import DistanceUnit, HeightUnit, WeightUnit
from fitness_converter.validation import validate_height, validate_weight
from pages.components.charts import create_bmi_gauge
from pages.components.result_display import render_conversion_result, render_range_warnings
from pages.components.unit_converter import ft_in_to_height, height_to_ft_in

st.set_page_config(page_title="Body | Fitness Converter", page_icon="⚖️", layout="wide")
st.title("⚖️ Body Measurements")

# BMI Section
st.markdown("### Body Mass Index")

# Kept out of the form: the height inputs below depend on it
height_mode = st.radio("Height entry", ["Feet & inches", "Single unit"], horizontal=True, key="height_mode")

with st.form("bmi_form"):
    col1, col2 = st.columns(2)

    with col1:
        weight_unit = st.selectbox("Weight unit", list(WeightUnit), format_func=lambda u: u.full_name)
        weight = st.number_input("Weight*", min_value=0.0, value=150.0, step=0.5)

    with col2:
        if height_mode == "Feet & inches":
            ft_col, in_col = st.columns(2)
            with ft_col:
                feet = st.number_input("Feet*", min_value=0, max_value=8, value=5)
            with in_col:
                inches = st.number_input("Inches*", min_value=0.0, max_value=11.9, value=8.0, step=0.5)
            height_unit = HeightUnit.INCHES
            height = ft_in_to_height(feet, inches)
        else:
            height_unit = st.selectbox(
                "Height unit",
                list(HeightUnit),
                index=list(HeightUnit).index(HeightUnit.CENTIMETERS),
                format_func=lambda u: u.full_name,
            )
            height = st.number_input("Height*", min_value=0.0, value=172.7, step=0.5)
            height_ft, height_in = height_to_ft_in(height, height_unit)
            st.caption(f"That is {height_ft} ft {height_in} in")

    submitted = st.form_submit_button("🧮 Calculate BMI", use_container_width=True)

if submitted:
    result = calculate_bmi_with_details(weight, height, weight_unit, height_unit)
    render_range_warnings([
        validate_weight(weight, weight_unit),
        validate_height(height, height_unit),
    ])
    col1, col2 = st.columns(2)
    with col1:
        render_conversion_result(result, label="BMI")
    if result.is_success:
        with col2:
            st.plotly_chart(create_bmi_gauge(result.calculated_value), use_container_width=True)

st.divider()

# Unit conversion section
st.markdown("### Unit Conversion")

categories = {
    "Weight": list(WeightUnit),
    "Height": list(HeightUnit),
    "Distance": list(DistanceUnit),
}

category = st.radio("Measurement", list(categories.keys()), horizontal=True)
units = categories[category]

col1, col2, col3 = st.columns(3)
with col1:
    value = st.number_input("Value", value=1.0, step=0.1)
with col2:
    from_unit = st.selectbox("From", units, format_func=lambda u: u.full_name)
with col3:
    to_unit = st.selectbox("To", units, index=1, format_func=lambda u: u.full_name)

result = convert_with_details(value, from_unit, to_unit)
render_conversion_result(result, label=f"{value:g} {from_unit.abbreviation} =", suffix=to_unit.abbreviation)

st.markdown("---")
st.caption("💡 **Tip:** BMI is an estimate and does not account for muscle mass, so it carries 95% confidence.")
