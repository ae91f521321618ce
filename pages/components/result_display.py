"""Conversion result display components for Streamlit pages."""

import streamlit as st
from fitness_converter.models import ConversionResult


def render_conversion_result(result: ConversionResult, label: str = "Result", suffix: str = ""):
    """Render a conversion result as a metric, or its error.

    Args:
        result: ConversionResult from the converter
        label: Metric label (default "Result")
        suffix: Text appended to the value, e.g. a unit abbreviation
    """
    if not result.is_success:
        st.error(f"❌ {result.error.user_friendly_description}")
        st.caption(result.error.description)
        return

    value = result.result_value
    shown = getattr(value, "value", value)
    if isinstance(shown, float):
        shown = f"{shown:,.2f}"

    col1, col2 = st.columns([2, 1])
    with col1:
        st.metric(label, f"{shown} {suffix}".strip())
    with col2:
        st.metric("Confidence", f"{result.confidence:.0%}")

    if result.notes:
        st.caption(result.notes)


def render_range_warnings(warnings: list):
    """Render advisory range warnings (ValueOutOfRange errors).

    Args:
        warnings: List of errors, None entries are skipped
    """
    for warning in warnings:
        if warning is not None:
            st.warning(f"⚠️ {warning.user_friendly_description} (got {warning.value})")
