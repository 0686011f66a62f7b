import streamlit as st

st.set_page_config(
    page_title="Average out of 6 (with coefficients)",
    page_icon="📗",
)

st.page_link("app.py", label="Go to the calculator", icon="⬅️")

st.title("Average out of 6 (with coefficients)")
st.write(
    "An average out of 6 is computed the same way: only the scale changes. "
    "You still use the weighted average: Σ(note × coef) / Σ(coef)."
)
st.write(
    "In the calculator, set the maximum grade to 6 so the simulation stays consistent "
    "with your scale."
)
st.caption("Free tool, no account, no tracking.")
