import streamlit as st

from note_calculator.backend_logic import RawEntry, aggregate, average, format_2dp

st.set_page_config(
    page_title="Average out of 20 (with coefficients)",
    page_icon="📘",
)

st.page_link("app.py", label="Go to the calculator", icon="⬅️")

EXAMPLE = [RawEntry("14", "2"), RawEntry("10", "1"), RawEntry("16", "3")]
example_agg = aggregate(EXAMPLE)

st.title("Average out of 20 (with coefficients)")
st.write(
    "This page explains how to compute an average out of 20 with coefficients "
    "(a weighted average). The formula is: Σ(note × coef) / Σ(coef)."
)
st.write(
    f"Example: (14×2 + 10×1 + 16×3) / (2+1+3) = {example_agg.weighted_sum:g} / "
    f"{example_agg.weight_sum:g} = {format_2dp(average(example_agg))}."
)
st.caption("Free tool, no account, no tracking.")
