"""
burden score routes

thin http wrapper around the scoring engine.
all the math lives in services/burden.py, these handlers only validate the
request shape and log what was scored.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from trialburden.schemas.appointments import (
    PatientBurdenRequest,
    PatientBurdenScoreResponse,
)
from trialburden.schemas.burden import (
    BurdenCategory,
    BurdenCategoryInfo,
    BurdenScoreRequest,
    PatientBurdenScoreResult,
)
from trialburden.services.appointments import calculate_patient_burden
from trialburden.services.burden import BURDEN_CATEGORY_INFO, calculate_patient_burden_score

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/burden-score")


def _unscorable(exc: ValueError) -> HTTPException:
    # numbers so large the burden overflows to inf
    logger.warning("Rejected unscorable request: %s", exc)
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=str(exc),
    )


@router.post("/calculate", response_model=PatientBurdenScoreResult)
def calculate(req: BurdenScoreRequest) -> PatientBurdenScoreResult:
    """
    Scores a list of fully described visits.

    The engine itself is fine with an empty list (score 0), but over http an
    empty request is almost always a client bug, so we reject it.
    """
    if not req.visits:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="No visits provided",
        )

    try:
        result = calculate_patient_burden_score(req.visits)
    except ValueError as exc:
        raise _unscorable(exc) from exc
    logger.info(
        "Scored %d visits: %d (%s)",
        len(req.visits),
        result.overall_score,
        result.category.value,
    )
    return result


@router.post("/patient/{patient_id}", response_model=PatientBurdenScoreResponse)
def patient_burden(patient_id: str, req: PatientBurdenRequest) -> PatientBurdenScoreResponse:
    """
    Scores a patient's booked appointments.

    Procedure types and preparations are inferred from procedure names, see
    services/appointments.py.
    """
    try:
        result = calculate_patient_burden(req.appointments, req.options)
    except ValueError as exc:
        raise _unscorable(exc) from exc
    logger.info(
        "Scored %d appointments for patient %s: %d (%s)",
        len(req.appointments),
        patient_id,
        result.overall_score,
        result.category.value,
    )
    return PatientBurdenScoreResponse(**result.model_dump(), patient_id=patient_id)


@router.get("/categories", response_model=dict[BurdenCategory, BurdenCategoryInfo])
def categories() -> dict[BurdenCategory, BurdenCategoryInfo]:
    return BURDEN_CATEGORY_INFO
