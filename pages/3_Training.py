"""Training Metrics Page.

Heart rate zones, calorie estimates, cadence and daily energy needs.
"""

import streamlit as st
from fitness_converter.converter import convert_height, convert_weight
from fitness_converter.metrics import (
    calculate_bmr,
    calculate_ideal_cadence,
    calculate_tdee,
    estimate_running_calories,
    heart_rate_zones_for_profile,
)
from fitness_converter.models import ActivityLevel, FitnessProfile, Gender
from fitness_converter.pace import PaceText
from fitness_converter.units import HeightUnit, WeightUnit
from fitness_converter.validation import validate_profile
from pages.components.charts import create_heart_rate_zone_chart, zones_to_dataframe
from pages.components.result_display import render_range_warnings
from pages.components.unit_converter import ft_in_to_height

st.set_page_config(page_title="Training | Fitness Converter", page_icon="❤️", layout="wide")
st.title("❤️ Training Metrics")

profile = st.session_state.get("fitness_profile") or FitnessProfile()

# Profile form
st.markdown("### Your Profile")

with st.form("profile_form"):
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        age = st.number_input(
            "Age*",
            min_value=0,
            max_value=130,
            value=profile.age if profile.age is not None else 30,
            key="profile_age",
        )
    with col2:
        resting_hr = st.number_input(
            "Resting heart rate*",
            min_value=20,
            max_value=200,
            value=profile.resting_heart_rate if profile.resting_heart_rate is not None else 60,
            key="profile_resting_hr",
            help="Beats per minute, measured on waking"
        )
    with col3:
        genders = list(Gender)
        gender = st.selectbox(
            "Gender",
            genders,
            index=genders.index(profile.gender) if profile.gender else 0,
            format_func=lambda g: g.description,
        )
    with col4:
        levels = list(ActivityLevel)
        activity = st.selectbox(
            "Activity Level",
            levels,
            index=levels.index(profile.activity_level) if profile.activity_level else 2,
            format_func=lambda a: a.description,
        )

    submitted = st.form_submit_button("💾 Save Profile", use_container_width=True)

    if submitted:
        profile = FitnessProfile(
            age=age,
            gender=gender,
            activity_level=activity,
            resting_heart_rate=resting_hr,
        )
        st.session_state.fitness_profile = profile
        st.success("✅ Profile saved for this session")

render_range_warnings(validate_profile(profile))

# Heart rate zones
st.markdown("### Heart Rate Zones")
zones = heart_rate_zones_for_profile(profile)
if zones is None:
    if profile.age is None:
        st.info("Save your profile to see your heart rate zones.")
    else:
        st.error("⚠️ Resting heart rate must be below your maximum heart rate (220 - age).")
else:
    col1, col2 = st.columns([3, 2])
    with col1:
        st.plotly_chart(create_heart_rate_zone_chart(zones), use_container_width=True)
    with col2:
        st.dataframe(zones_to_dataframe(zones), hide_index=True, use_container_width=True)

st.divider()

# Body measurements shared by calories, cadence and energy
st.markdown("### Run Details")
col1, col2, col3, col4 = st.columns(4)
with col1:
    weight_lbs = st.number_input("Weight (lbs)", min_value=1.0, value=150.0, step=0.5)
with col2:
    feet = st.number_input("Height (feet)", min_value=0, max_value=8, value=5)
    inches = st.number_input("Height (inches)", min_value=0.0, max_value=11.9, value=8.0, step=0.5)
with col3:
    pace_text = st.text_input("Pace per mile", value="9:00")
with col4:
    distance_miles = st.number_input("Distance (miles)", min_value=0.0, value=3.1, step=0.1)

height_inches = ft_in_to_height(feet, inches)
pace_seconds = PaceText(pace_text.strip()).to_seconds()

col1, col2, col3 = st.columns(3)
with col1:
    if pace_seconds is None:
        st.error("⚠️ Enter pace as M:SS, e.g. 9:00")
    else:
        calories = estimate_running_calories(pace_seconds, distance_miles, weight_lbs, WeightUnit.POUNDS)
        st.metric("Calories burned", f"{calories:.0f} kcal")
with col2:
    st.metric("Suggested cadence", f"{calculate_ideal_cadence(height_inches)} spm")
with col3:
    if profile.age is not None and profile.gender is not None:
        weight_kg = convert_weight(weight_lbs, WeightUnit.POUNDS, WeightUnit.KILOGRAMS)
        height_cm = convert_height(height_inches, HeightUnit.INCHES, HeightUnit.CENTIMETERS)
        bmr = calculate_bmr(weight_kg, height_cm, profile.age, profile.gender)
        if bmr is None:
            st.info("Daily energy estimate needs male or female physiology constants.")
        else:
            tdee = calculate_tdee(bmr, profile.activity_level or ActivityLevel.SEDENTARY)
            st.metric("Daily energy (TDEE)", f"{tdee:.0f} kcal", delta=f"BMR {bmr:.0f} kcal", delta_color="off")
    else:
        st.info("Save your profile to estimate daily energy needs.")

st.markdown("---")
st.caption("💡 **Tip:** Zones use the heart rate reserve (Karvonen) method, so a lower resting rate widens every zone.")
