import streamlit as st

from note_calculator.backend_logic import (
    Tier,
    aggregate,
    average,
    format_2dp,
    resolve_scale_max,
    simulate,
)
from note_calculator.config import get_settings
from note_calculator.io_csv import (
    NOTE_COLUMN,
    WEIGHT_COLUMN,
    empty_entries_frame,
    entries_from_frame,
    read_csv_upload,
    validate_entries_csv,
)
from note_calculator.logging_config import configure_logging

# ------------------------
# Streamlit UI (recomputed on every edit)
# ------------------------

settings = get_settings()
configure_logging(settings.log_level)

st.set_page_config(
    page_title="Weighted Average Calculator | Grades & Coefficients",
    page_icon="🧮",
    layout="centered",
)

TIER_STYLE = {
    Tier.IMPOSSIBLE: st.error,
    Tier.ALREADY_ACHIEVED: st.success,
    Tier.DIFFICULT: st.warning,
    Tier.ACHIEVABLE: st.success,
}

DEFAULT_MAX_TEXT = f"{settings.default_max_note:g}"


def reset_all():
    st.session_state.pop("entries_df", None)
    st.session_state["entries_seed"] = empty_entries_frame(settings.initial_rows)
    st.session_state["max_note"] = DEFAULT_MAX_TEXT
    st.session_state["target"] = ""
    st.session_state["future_weight"] = ""


if "entries_seed" not in st.session_state:
    st.session_state["entries_seed"] = empty_entries_frame(settings.initial_rows)
if "max_note" not in st.session_state:
    st.session_state["max_note"] = DEFAULT_MAX_TEXT

st.title("🧮 Weighted average calculator")
st.write(
    "Enter your grades and their coefficients to get your weighted average. "
    "The **Simulation** section then estimates the grade you need on your next "
    "assessment to reach a target average."
)

# ------------------------
# Grades table
# ------------------------

col_title, col_reset = st.columns([5, 1])
with col_title:
    st.subheader("Grades")
with col_reset:
    st.button("Reset", on_click=reset_all)

entries_csv = st.file_uploader(
    "Optionally upload a CSV of grades (Note, Coefficient)",
    type=["csv"],
    key="entries_csv",
)

entries_seed = st.session_state["entries_seed"]
if entries_csv is not None:
    try:
        entries_seed = validate_entries_csv(read_csv_upload(entries_csv))
    except ValueError as e:
        st.error(f"CSV error: {e}")

entries_df = st.data_editor(
    entries_seed,
    key="entries_df",
    num_rows="dynamic",
    use_container_width=True,
    hide_index=True,
    column_config={
        NOTE_COLUMN: st.column_config.TextColumn("Note", help="Comma or dot as decimal separator"),
        WEIGHT_COLUMN: st.column_config.TextColumn("Coefficient"),
    },
)

agg = aggregate(entries_from_frame(entries_df))
current_average = average(agg)

col_max, col_avg = st.columns([1, 2])
with col_max:
    max_text = st.text_input(
        "Maximum grade",
        key="max_note",
        placeholder=DEFAULT_MAX_TEXT,
        help="Example: 20 (standard), 6 (grades out of 6), etc.",
    )
with col_avg:
    st.metric("Current average", format_2dp(current_average))
    if agg.weight_sum > 0:
        st.caption(f"Sum of coefficients: {format_2dp(agg.weight_sum)}")
    else:
        st.caption("Add at least one valid row (grade + coefficient).")

scale_max = resolve_scale_max(max_text, default=settings.default_max_note)

# ------------------------
# Simulation
# ------------------------

st.markdown("---")
st.subheader("Simulation (optional)")
st.write("Estimate the grade needed on your next assessment to reach a target average.")

col_target, col_weight = st.columns(2)
with col_target:
    target = st.text_input("Target average", key="target", placeholder="e.g. 12.5")
with col_weight:
    future_weight = st.text_input("Coefficient of the next grade", key="future_weight", placeholder="e.g. 2")

simulation = simulate(agg, target, future_weight, scale_max)

if simulation:
    st.metric("Estimated minimum grade", simulation["required_rounded"])
    TIER_STYLE[simulation["tier"]](simulation["message"])
    st.caption("Formula: x = ( M(Σc + c) − Σ(note·coef) ) / c")
else:
    st.info(
        "Enter a target average and a coefficient (with at least one valid grade) "
        "to see an estimate."
    )

st.caption("Local calculator: no account needed, nothing is stored.")

# ------------------------
# FAQ
# ------------------------

st.header("FAQ")

st.subheader("How is the average with coefficients calculated?")
st.write(
    "Each grade is multiplied by its coefficient, the products are added up, "
    "then divided by the sum of the coefficients: Σ(note × coef) / Σ(coef)."
)

st.subheader("Does it work for grades out of 20, out of 6, or something else?")
st.write(
    "Yes. Set the maximum grade (20, 6, etc.). The average is computed the same way, "
    "only the scale changes. The simulation also compares the required grade to the maximum."
)

st.subheader("What is the Simulation section for?")
st.write(
    "It estimates the minimum grade to obtain on an upcoming assessment (with its coefficient) "
    "to reach a target average. If the required grade exceeds the maximum grade, the objective "
    "is considered impossible on the chosen scale."
)

st.subheader("Can I type decimals with a comma?")
st.write("Yes. Inputs accept either a comma or a dot as the decimal separator.")

st.subheader("What happens to incomplete rows?")
st.write(
    "Rows with a missing or invalid grade, or a coefficient that is not strictly positive, "
    "are simply left out of the calculation."
)
