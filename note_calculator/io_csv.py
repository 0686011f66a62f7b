import logging
from typing import List

import pandas as pd

from note_calculator.backend_logic import RawEntry

logger = logging.getLogger(__name__)

NOTE_COLUMN = "Note"
WEIGHT_COLUMN = "Coefficient"

_NOTE_ALIASES = ("note", "grade")
_WEIGHT_ALIASES = ("coefficient", "coef", "weight", "credits", "credit")

# ------------------------
# CSV helpers (UI-side)
# ------------------------

def _normalise_cols(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    df.columns = [str(c).strip().lower() for c in df.columns]
    # first matching alias wins, e.g. "coef" or "credits" -> "coefficient"
    for canonical, aliases in (("note", _NOTE_ALIASES), ("coefficient", _WEIGHT_ALIASES)):
        if canonical in df.columns:
            continue
        for alias in aliases:
            if alias in df.columns:
                df = df.rename(columns={alias: canonical})
                break
    return df

def read_csv_upload(uploaded_file) -> pd.DataFrame:
    # keep every cell as text: "12,5" must reach the normalizer untouched
    df = pd.read_csv(uploaded_file, dtype=str, keep_default_na=False)
    return _normalise_cols(df)

def validate_entries_csv(df: pd.DataFrame) -> pd.DataFrame:
    required = {"note", "coefficient"}
    missing = required - set(df.columns)
    if missing:
        logger.warning("Rejected CSV upload, missing columns %s", sorted(missing))
        raise ValueError(f"Missing columns: {sorted(missing)}. Expected: Note, Coefficient.")
    out = df[["note", "coefficient"]].copy()
    out = out.rename(columns={"note": NOTE_COLUMN, "coefficient": WEIGHT_COLUMN})
    return out

def _cell_text(value) -> str:
    # None, nan and pd.NA all show up for freshly added editor rows
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return ""
    return str(value)

def entries_from_frame(df: pd.DataFrame) -> List[RawEntry]:
    """
    One RawEntry per table row. Invalid rows are kept here: dropping them
    is the aggregator's job.
    """
    rows = []
    for _, row in df.iterrows():
        rows.append(RawEntry(_cell_text(row.get(NOTE_COLUMN)), _cell_text(row.get(WEIGHT_COLUMN))))
    return rows

def empty_entries_frame(n_rows: int) -> pd.DataFrame:
    return pd.DataFrame(
        [{NOTE_COLUMN: "", WEIGHT_COLUMN: ""} for _ in range(n_rows)],
        columns=[NOTE_COLUMN, WEIGHT_COLUMN],
    )
