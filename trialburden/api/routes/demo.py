"""
demo routes

this file exists for one reason:
making the project easy to try for other people (teammates, mentors, reviewers).

the calculate endpoint wants a fully described visit list, which is tedious to
type by hand in swagger. this endpoint returns a realistic one:
four visits of a made up trial (screening, week 4, week 8, week 12).

we are NOT using real trial protocols or PHI.
"""

from fastapi import APIRouter

from trialburden.schemas.burden import (
    BurdenScoreRequest,
    PreparationType,
    Procedure,
    ProcedureType,
    VisitBurdenInput,
)

router = APIRouter()


def sample_visits() -> list[VisitBurdenInput]:
    return [
        # screening
        VisitBurdenInput(
            duration_minutes=90,
            procedures=[
                Procedure(type=ProcedureType.blood_draw, name="Blood Draw", blood_volume_ml=25),
                Procedure(type=ProcedureType.ecg, name="ECG"),
                Procedure(type=ProcedureType.vitals, name="Vital Signs"),
            ],
            preparations=[PreparationType.fasting],
            travel_minutes=60,
            window_days=3,
        ),
        # week 4
        VisitBurdenInput(
            duration_minutes=120,
            procedures=[
                Procedure(type=ProcedureType.mri, name="MRI Scan"),
                Procedure(type=ProcedureType.vitals, name="Vital Signs"),
            ],
            preparations=[PreparationType.contrast_dye],
            travel_minutes=90,
            window_days=2,
        ),
        # week 8
        VisitBurdenInput(
            duration_minutes=60,
            procedures=[
                Procedure(type=ProcedureType.infusion, name="IV Infusion", infusion_hours=1),
            ],
            preparations=[],
            travel_minutes=90,
            window_days=3,
        ),
        # week 12
        VisitBurdenInput(
            duration_minutes=45,
            procedures=[
                Procedure(type=ProcedureType.ct_scan, name="CT Scan"),
                Procedure(type=ProcedureType.blood_draw, name="Blood Draw", blood_volume_ml=20),
            ],
            preparations=[PreparationType.medication_hold],
            travel_minutes=30,
            window_days=3,
        ),
    ]


@router.get("/demo/visits", response_model=BurdenScoreRequest)
def demo_visits() -> BurdenScoreRequest:
    """
    returns a sample BurdenScoreRequest that will work immediately in /docs.

    how to use (in swagger):
    1) call GET /demo/visits and copy the response json
    2) paste it into POST /burden-score/calculate and hit execute
    """
    return BurdenScoreRequest(visits=sample_visits())
