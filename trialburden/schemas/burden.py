from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ProcedureType(str, Enum):
    vitals = "vitals"
    ecg = "ecg"
    blood_draw = "blood_draw"
    infusion = "infusion"
    ct_scan = "ct_scan"
    mri = "mri"
    biopsy = "biopsy"
    other = "other"


class PreparationType(str, Enum):
    fasting = "fasting"
    sedation = "sedation"
    bowel_prep = "bowel_prep"
    contrast_dye = "contrast_dye"
    medication_hold = "medication_hold"


class BurdenCategory(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


class CamelModel(BaseModel):
    """
    Base for everything that crosses the API.

    Attributes stay snake_case in python, the json side is camelCase
    (durationMinutes, totalBurden, ...). Both spellings are accepted on input.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
        frozen=True,
    )


class Procedure(CamelModel):
    type: ProcedureType = ProcedureType.other

    # display only, never used in scoring
    name: str = ""

    # only meaningful for blood_draw
    blood_volume_ml: Optional[float] = Field(default=None, alias="bloodVolumeML")

    # only meaningful for infusion
    infusion_hours: Optional[float] = None

    @field_validator("type", mode="before")
    @classmethod
    def unknown_type_is_other(cls, v: Any) -> Any:
        # An unrecognized type is scored like "other" instead of rejecting the visit.
        try:
            return ProcedureType(v)
        except ValueError:
            return ProcedureType.other


class VisitBurdenInput(CamelModel):
    """
    The burden-relevant facts of one scheduled visit.

    Numbers are deliberately not range checked. A negative duration or travel
    time is the caller's problem and just produces a negative contribution.
    """
    duration_minutes: int
    procedures: list[Procedure] = Field(default_factory=list)
    preparations: list[PreparationType] = Field(default_factory=list)

    # round trip
    travel_minutes: float = 0.0

    # width of the scheduling window offered for this visit
    window_days: float

    @field_validator("preparations")
    @classmethod
    def preparations_are_unique(cls, v: list[PreparationType]) -> list[PreparationType]:
        if len(v) != len(set(v)):
            raise ValueError("Each preparation requirement may appear at most once.")
        return v


class BurdenBreakdown(CamelModel):
    time_on_site: float
    procedures: float
    preparation: float
    travel: float
    window_tightness: float


class VisitBurdenResult(CamelModel):
    # 1-based position in the list that was scored, not a stored id
    visit_number: int
    total_burden: float
    breakdown: BurdenBreakdown


class PatientBurdenScoreResult(CamelModel):
    overall_score: int = Field(ge=0, le=100)
    category: BurdenCategory
    total_raw_burden: float
    max_possible_burden: float
    visits: list[VisitBurdenResult]


class BurdenCategoryInfo(CamelModel):
    label: str
    description: str

    # colour tokens for whatever front end renders the score
    color: str
    bg_color: str
    border_color: str


class BurdenScoreRequest(CamelModel):
    visits: list[VisitBurdenInput]
