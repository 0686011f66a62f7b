import logging
import math
import re
from decimal import Decimal, ROUND_HALF_UP, localcontext
from enum import Enum
from typing import Iterable, NamedTuple, Optional

import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_MAX_NOTE = 20.0
DIFFICULT_RATIO = 0.85

_DECIMAL_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$", re.ASCII)


class RawEntry(NamedTuple):
    note: str
    weight: str


class Aggregate(NamedTuple):
    weighted_sum: float
    weight_sum: float


class Tier(Enum):
    IMPOSSIBLE = "impossible"
    ALREADY_ACHIEVED = "already_achieved"
    DIFFICULT = "difficult"
    ACHIEVABLE = "achievable"


class Classification(NamedTuple):
    tier: Tier
    message: str


# ------------------------
# Core logic
# ------------------------
def normalize(text) -> float:
    """
    Free-form numeric text -> float, comma or dot as decimal separator.
    Returns nan for anything that is not a finite decimal number.
    """
    if text is None:
        return math.nan

    cleaned = str(text).replace(",", ".", 1).strip()
    if not _DECIMAL_RE.match(cleaned):
        return math.nan

    value = float(cleaned)
    if not math.isfinite(value):
        return math.nan
    return value


def aggregate(entries: Iterable) -> Aggregate:
    """
    entries: iterable of (note, weight) raw pairs
    returns: Aggregate(sum of note*weight, sum of weight) over the valid rows
    """
    rows = list(entries)
    if not rows:
        return Aggregate(0.0, 0.0)

    notes = np.array([normalize(note) for note, _ in rows], dtype=float)
    weights = np.array([normalize(weight) for _, weight in rows], dtype=float)

    # nan compares False, so weights > 0 also drops unparsable weights
    valid = ~np.isnan(notes) & ~np.isnan(weights) & (weights > 0)

    dropped = len(rows) - int(valid.sum())
    if dropped:
        logger.debug("Ignoring %d incomplete or invalid row(s)", dropped)

    weighted_sum = float(np.dot(notes[valid], weights[valid]))
    weight_sum = float(weights[valid].sum())
    return Aggregate(weighted_sum, weight_sum)


def average(agg: Aggregate) -> Optional[float]:
    if agg.weight_sum <= 0:
        return None
    return agg.weighted_sum / agg.weight_sum


def solve_required(agg: Aggregate, target, future_weight) -> Optional[float]:
    """
    Grade x a future entry of weight c needs so that the average becomes M:
        M = (W + x*c) / (C + c)  =>  x = (M*(C + c) - W) / c
    Returns None when there is no valid entry yet or when M / c are unusable.
    """
    W = agg.weighted_sum
    C = agg.weight_sum
    M = normalize(target)
    c = normalize(future_weight)

    if C <= 0 or math.isnan(M) or math.isnan(c) or c <= 0:
        return None

    x = (M * (C + c) - W) / c
    return x


def classify(required: float, scale_max: float) -> Classification:
    # Order matters: required == scale_max is DIFFICULT, 0.85*scale_max is ACHIEVABLE
    if required > scale_max:
        return Classification(
            Tier.IMPOSSIBLE,
            f"Objective impossible (required grade exceeds the maximum of {scale_max:g})",
        )
    elif required <= 0:
        return Classification(
            Tier.ALREADY_ACHIEVED,
            "Objective already met (even a zero would suffice)",
        )
    elif required > DIFFICULT_RATIO * scale_max:
        return Classification(
            Tier.DIFFICULT,
            "Objective hard (requires a grade near the maximum)",
        )
    else:
        return Classification(Tier.ACHIEVABLE, "Objective attainable")


# ------------------------
# Presentation helpers
# ------------------------
def resolve_scale_max(text, default: float = DEFAULT_MAX_NOTE) -> float:
    m = normalize(text)
    if math.isnan(m) or m <= 0:
        return default
    return m


def round_2dp_half_up(x: float) -> float:
    # precision wide enough for any finite float
    with localcontext() as ctx:
        ctx.prec = 400
        return float(Decimal(str(x)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def format_2dp(x: Optional[float]) -> str:
    # overflowing sums reach here as inf or nan
    if x is None or not math.isfinite(x):
        return "—"
    return f"{round_2dp_half_up(x):.2f}"


def simulate(agg: Aggregate, target, future_weight, scale_max: float) -> Optional[dict]:
    """
    Required grade on the next assessment plus its feasibility tier.
    None means there is nothing to show yet.
    """
    required = solve_required(agg, target, future_weight)
    if required is None or not math.isfinite(required):
        logger.debug("Simulation not available for target=%r weight=%r", target, future_weight)
        return None

    tier, message = classify(required, scale_max)
    return {
        "required": required,
        "required_rounded": format_2dp(required),
        "tier": tier,
        "message": message,
    }
