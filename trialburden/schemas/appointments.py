from __future__ import annotations

from typing import Optional

from pydantic import Field

from trialburden.schemas.burden import CamelModel, PatientBurdenScoreResult


class AppointmentProcedure(CamelModel):
    name: str


class Appointment(CamelModel):
    """
    A booked appointment as the scheduling side stores it.

    It only knows procedure names, so types and preparations get inferred
    before scoring.
    """
    id: Optional[str] = None
    duration_minutes: Optional[int] = None
    procedures: list[AppointmentProcedure] = Field(default_factory=list)


class BurdenOptions(CamelModel):
    travel_minutes: Optional[float] = None
    window_days: Optional[float] = None


class PatientBurdenRequest(CamelModel):
    appointments: list[Appointment]
    options: Optional[BurdenOptions] = None


class PatientBurdenScoreResponse(PatientBurdenScoreResult):
    patient_id: str
