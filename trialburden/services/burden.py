"""
Patient burden score

Measures how demanding a clinical trial schedule is for one patient.

Given:
- the list of visits the patient has to attend, each with its duration,
  procedures, preparation requirements, travel time and scheduling window

We produce:
- a 0-100 score plus a low / medium / high category
- a per visit breakdown of the five burden components, so the number can be
  explained instead of just shown

Everything here is a pure function over fixed weight tables. No I/O, no
state, no clock. The same visits always give the same result, which also
makes it safe to call from any request or thread.
"""

from __future__ import annotations

import math
from typing import Sequence

from trialburden.schemas.burden import (
    BurdenBreakdown,
    BurdenCategory,
    BurdenCategoryInfo,
    PatientBurdenScoreResult,
    PreparationType,
    ProcedureType,
    VisitBurdenInput,
    VisitBurdenResult,
)


# -------------------------
# Scaling constants
# -------------------------

# (1) time on site: (duration / 30) * ALPHA
ALPHA = 0.5

# (2) procedures: sum(procedure weights) * BETA
BETA = 1.0

# (3) preparation: sum(preparation weights) * GAMMA
GAMMA = 1.0

# (4) travel: (travel minutes / 15) * DELTA
DELTA = 0.5

# (5) window tightness: (3 - window days) * EPSILON, only under 3 days
EPSILON = 1.5

# Normalization denominator per visit.
MAX_BURDEN_PER_VISIT = 25

TIME_ON_SITE_UNIT_MINUTES = 30
TRAVEL_UNIT_MINUTES = 15
TIGHT_WINDOW_DAYS = 3


# -------------------------
# Weight tables
# -------------------------

PROCEDURE_WEIGHTS: dict[ProcedureType, float] = {
    ProcedureType.vitals: 0.5,
    ProcedureType.ecg: 1.0,
    ProcedureType.blood_draw: 2.0,
    ProcedureType.infusion: 3.0,  # per hour
    ProcedureType.ct_scan: 4.0,
    ProcedureType.mri: 5.0,
    ProcedureType.biopsy: 7.0,
    ProcedureType.other: 1.0,
}

# A large draw is worth 3.0 in total, applied as +1.0 on top of blood_draw.
BLOOD_DRAW_LARGE_WEIGHT = 3.0
LARGE_BLOOD_DRAW_THRESHOLD_ML = 30
LARGE_BLOOD_DRAW_BONUS = BLOOD_DRAW_LARGE_WEIGHT - PROCEDURE_WEIGHTS[ProcedureType.blood_draw]

# An infusion with no duration is scored as one hour.
DEFAULT_INFUSION_HOURS = 1.0

PREPARATION_WEIGHTS: dict[PreparationType, float] = {
    PreparationType.fasting: 2.0,
    PreparationType.sedation: 4.0,
    PreparationType.bowel_prep: 6.0,
    PreparationType.contrast_dye: 2.0,
    PreparationType.medication_hold: 1.0,
}


# -------------------------
# Categories
# -------------------------

# Upper bound (inclusive) of each category. Anything above the last one is high.
CATEGORY_THRESHOLDS: list[tuple[int, BurdenCategory]] = [
    (33, BurdenCategory.low),
    (66, BurdenCategory.medium),
]

BURDEN_CATEGORY_INFO: dict[BurdenCategory, BurdenCategoryInfo] = {
    BurdenCategory.low: BurdenCategoryInfo(
        label="Low Burden",
        description="This trial schedule is manageable with minimal impact on daily life",
        color="text-green-600",
        bg_color="bg-green-50",
        border_color="border-green-200",
    ),
    BurdenCategory.medium: BurdenCategoryInfo(
        label="Medium Burden",
        description="This trial requires moderate time commitment and planning",
        color="text-yellow-600",
        bg_color="bg-yellow-50",
        border_color="border-yellow-200",
    ),
    BurdenCategory.high: BurdenCategoryInfo(
        label="High Burden",
        description="This trial is demanding and may require significant lifestyle adjustments",
        color="text-red-600",
        bg_color="bg-red-50",
        border_color="border-red-200",
    ),
}


def _round_half_up(value: float) -> int:
    """Rounds .5 up (2.5 -> 3). The builtin round() would give 2."""
    return int(math.floor(value + 0.5))


def _require_finite(value: float, what: str) -> float:
    # inf / nan have no meaningful score, and can't be rounded either.
    if not math.isfinite(value):
        raise ValueError(f"{what} is not a finite number ({value!r}).")
    return value


def _procedure_burden(visit: VisitBurdenInput) -> float:
    total = 0.0
    for proc in visit.procedures:
        weight = PROCEDURE_WEIGHTS.get(proc.type, PROCEDURE_WEIGHTS[ProcedureType.other])

        if (
            proc.type == ProcedureType.blood_draw
            and proc.blood_volume_ml is not None
            and proc.blood_volume_ml > LARGE_BLOOD_DRAW_THRESHOLD_ML
        ):
            weight += LARGE_BLOOD_DRAW_BONUS

        if proc.type == ProcedureType.infusion:
            hours = proc.infusion_hours if proc.infusion_hours is not None else DEFAULT_INFUSION_HOURS
            weight *= hours

        total += weight
    return total * BETA


def _window_tightness(window_days: float) -> float:
    # Not clamped: a negative window gives an even bigger penalty.
    if window_days < TIGHT_WINDOW_DAYS:
        return (TIGHT_WINDOW_DAYS - window_days) * EPSILON
    return 0.0


def calculate_visit_burden(visit: VisitBurdenInput, visit_number: int) -> VisitBurdenResult:
    """
    Scores a single visit.

    visit_number is the 1-based position of the visit in whatever list the
    caller is scoring. It is passed through untouched.
    """
    time_on_site = (visit.duration_minutes / TIME_ON_SITE_UNIT_MINUTES) * ALPHA
    procedures = _procedure_burden(visit)

    # Tags are unique on VisitBurdenInput, so a plain sum is enough.
    preparation = sum(PREPARATION_WEIGHTS[p] for p in visit.preparations) * GAMMA

    travel = (visit.travel_minutes / TRAVEL_UNIT_MINUTES) * DELTA
    window_tightness = _window_tightness(visit.window_days)

    total = time_on_site + procedures + preparation + travel + window_tightness
    _require_finite(total, f"Burden of visit {visit_number}")

    return VisitBurdenResult(
        visit_number=visit_number,
        total_burden=total,
        breakdown=BurdenBreakdown(
            time_on_site=time_on_site,
            procedures=procedures,
            preparation=preparation,
            travel=travel,
            window_tightness=window_tightness,
        ),
    )


def categorize(score: int) -> BurdenCategory:
    """Boundary scores belong to the lower category (33 is low, 66 is medium)."""
    for upper, category in CATEGORY_THRESHOLDS:
        if score <= upper:
            return category
    return BurdenCategory.high


def calculate_patient_burden_score(visits: Sequence[VisitBurdenInput]) -> PatientBurdenScoreResult:
    """
    Scores a whole visit schedule.

    The raw burden of all visits is normalized against MAX_BURDEN_PER_VISIT
    per visit, scaled to 0-100 and clamped. Schedules that are worse than the
    theoretical max still report 100.

    An empty schedule scores 0 (low) instead of dividing by zero.

    Raises ValueError if a burden comes out as inf or nan. Validated inputs
    are always finite, but they can still overflow.
    """
    if not visits:
        return PatientBurdenScoreResult(
            overall_score=0,
            category=BurdenCategory.low,
            total_raw_burden=0.0,
            max_possible_burden=0.0,
            visits=[],
        )

    results = [calculate_visit_burden(v, i + 1) for i, v in enumerate(visits)]

    # Finite visits can still overflow when summed.
    total_raw_burden = _require_finite(
        sum(r.total_burden for r in results), "Total burden"
    )
    max_possible_burden = float(MAX_BURDEN_PER_VISIT * len(visits))

    score = _round_half_up(total_raw_burden / max_possible_burden * 100)
    score = max(0, min(100, score))

    return PatientBurdenScoreResult(
        overall_score=score,
        category=categorize(score),
        total_raw_burden=total_raw_burden,
        max_possible_burden=max_possible_burden,
        visits=results,
    )


def get_burden_category_info(category: BurdenCategory) -> BurdenCategoryInfo:
    return BURDEN_CATEGORY_INFO[category]


def format_burden_score(score: int) -> str:
    return f"{score}/100"
