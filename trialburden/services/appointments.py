"""
Appointment -> visit conversion

Booked appointments only carry a duration and free text procedure names
("Blood Draw", "MRI Scan", "Colonoscopy"). The burden engine wants typed
procedures and preparation requirements, so this module fills the gap with
keyword matching plus a few standard assumptions (see Settings).

The matching is intentionally naive substring matching. It is a best guess
for scheduling data that was never entered with scoring in mind.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from trialburden.core.config import settings
from trialburden.schemas.appointments import Appointment, BurdenOptions
from trialburden.schemas.burden import (
    PatientBurdenScoreResult,
    PreparationType,
    Procedure,
    ProcedureType,
    VisitBurdenInput,
)
from trialburden.services.burden import calculate_patient_burden_score

logger = logging.getLogger(__name__)


# First match wins, so order matters ("vital" is checked before "iv").
PROCEDURE_KEYWORDS: list[tuple[ProcedureType, tuple[str, ...]]] = [
    (ProcedureType.vitals, ("vital",)),
    (ProcedureType.ecg, ("ecg", "ekg")),
    (ProcedureType.blood_draw, ("blood",)),
    (ProcedureType.infusion, ("infusion", "iv")),
    (ProcedureType.ct_scan, ("ct", "cat scan")),
    (ProcedureType.mri, ("mri",)),
    (ProcedureType.biopsy, ("biopsy",)),
]

PREPARATION_KEYWORDS: list[tuple[PreparationType, tuple[str, ...]]] = [
    (PreparationType.fasting, ("fast",)),
    (PreparationType.sedation, ("sedat", "anesthesia")),
    (PreparationType.contrast_dye, ("contrast",)),
    (PreparationType.bowel_prep, ("bowel", "colonoscopy")),
]


def classify_procedure(name: str) -> ProcedureType:
    lowered = name.lower()
    for proc_type, keywords in PROCEDURE_KEYWORDS:
        if any(k in lowered for k in keywords):
            return proc_type

    logger.debug("No procedure type matched %r, scoring it as other", name)
    return ProcedureType.other


def infer_preparations(procedure_names: Iterable[str]) -> list[PreparationType]:
    """
    Guesses preparation requirements from the procedure names of one visit.

    Each requirement shows up at most once no matter how many procedures
    mention it.
    """
    joined = " ".join(n.lower() for n in procedure_names)
    return [
        prep
        for prep, keywords in PREPARATION_KEYWORDS
        if any(k in joined for k in keywords)
    ]


def _to_procedure(name: str) -> Procedure:
    proc_type = classify_procedure(name)
    return Procedure(
        type=proc_type,
        name=name,
        blood_volume_ml=settings.standard_blood_volume_ml if proc_type == ProcedureType.blood_draw else None,
        infusion_hours=settings.standard_infusion_hours if proc_type == ProcedureType.infusion else None,
    )


def appointment_to_visit(
    appointment: Appointment,
    travel_minutes: Optional[float] = None,
    window_days: Optional[float] = None,
) -> VisitBurdenInput:
    names = [p.name for p in appointment.procedures]

    return VisitBurdenInput(
        duration_minutes=appointment.duration_minutes or settings.default_duration_minutes,
        procedures=[_to_procedure(n) for n in names],
        preparations=infer_preparations(names),
        travel_minutes=settings.default_travel_minutes if travel_minutes is None else travel_minutes,
        window_days=settings.default_window_days if window_days is None else window_days,
    )


def calculate_patient_burden(
    appointments: Sequence[Appointment],
    options: Optional[BurdenOptions] = None,
) -> PatientBurdenScoreResult:
    """
    Scores a patient's booked appointments.

    options applies the same travel time and window to every appointment.
    Anything left unset falls back to the configured defaults.
    """
    options = options or BurdenOptions()

    visits = [
        appointment_to_visit(a, options.travel_minutes, options.window_days)
        for a in appointments
    ]
    return calculate_patient_burden_score(visits)
