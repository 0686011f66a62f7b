from note_calculator.backend_logic import (
    Aggregate,
    Classification,
    RawEntry,
    Tier,
    aggregate,
    average,
    classify,
    normalize,
    solve_required,
)

__all__ = [
    "Aggregate",
    "Classification",
    "RawEntry",
    "Tier",
    "aggregate",
    "average",
    "classify",
    "normalize",
    "solve_required",
]
