import streamlit as st

st.set_page_config(
    page_title="Guide: average with coefficients",
    page_icon="📙",
)

st.page_link("app.py", label="Go to the calculator", icon="⬅️")

st.title("Guide: average with coefficients")
st.write(
    "A weighted average gives more importance to the grades that carry a higher coefficient."
)
st.markdown(
    "1. Multiply each grade by its coefficient.\n"
    "2. Add up these products.\n"
    "3. Divide by the sum of the coefficients."
)
st.write(
    "To know which grade you need next, use the Simulation section of the calculator: "
    "x = ( M(Σc + c) − Σ(note·coef) ) / c, where M is the target average and c the "
    "coefficient of the upcoming grade."
)
st.caption("Free tool, no account, no tracking.")
