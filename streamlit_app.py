"""Streamlit frontend for the Fitness Converter.

Main entry point for the multi-page Streamlit application.
"""

import streamlit as st

from fitness_converter.converter import conversion_info
from fitness_converter.logging_config import setup_logging
from fitness_converter.models import FitnessProfile

st.set_page_config(
    page_title="Fitness Converter",
    page_icon="🏃",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Configure logging once per session
if 'logging_configured' not in st.session_state:
    setup_logging()
    st.session_state.logging_configured = True

# Profile shared by the pages, kept only for this browser session
if 'fitness_profile' not in st.session_state:
    st.session_state.fitness_profile = FitnessProfile()

info = conversion_info()

# Sidebar: Show capability summary
with st.sidebar:
    st.markdown("## 🏃 Fitness Converter")
    st.markdown("---")
    st.metric("Unit Conversions", info.total_unit_conversions)
    st.caption(f"{len(info.supported_calculations)} calculation types")

    st.markdown("---")
    st.markdown("### Navigation")
    st.markdown("Use the sidebar to navigate:")
    st.markdown("- ⏱️ **Pace** - Mile and kilometer pace")
    st.markdown("- ⚖️ **Body** - Weight, height, distance & BMI")
    st.markdown("- ❤️ **Training** - Zones, calories & cadence")

# Main home page
st.title("🏃 Fitness Converter")

st.markdown(f"""
{info.description}.

### Getting Started

1. **⏱️ Pace** - Convert running pace between minutes per mile and minutes per kilometer:
   - Enter pace as `7:30`, decimal minutes (`7.5`) or total seconds (`450`)
   - See the equivalent speed in mph

2. **⚖️ Body** - Convert body measurements and calculate BMI:
   - Weight in pounds, kilograms or stones
   - Height in feet/inches, centimeters or meters
   - BMI with its category

3. **❤️ Training** - Derived training metrics:
   - Heart rate zones from age and resting heart rate
   - Calories burned on a run
   - Suggested running cadence

### Supported Units
""")

cols = st.columns(4)
for col, (context, units) in zip(cols, info.units_by_context.items()):
    with col:
        st.markdown(f"#### {context}")
        for unit in units:
            st.write(f"- {unit}")

st.markdown("---")
st.markdown("### Calculations")
for description in info.available_calculations:
    st.write(f"- {description}")

st.markdown("---")
st.caption("💡 **Tip:** Range warnings are advisory. Conversions still run on unusual values.")
