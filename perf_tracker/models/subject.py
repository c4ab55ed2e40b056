from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List


class EventDefinition(BaseModel):
    """
    A named, point-valued activity type in the event catalog.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    name: str = Field(
        ...,
        min_length=1,
        description="Unique event name (case-sensitive catalog key)"
    )

    base_points: float = Field(
        default=0.0,
        description="Points credited per attended occurrence"
    )


class AttendanceRecord(BaseModel):
    """
    One participation outcome for one occurrence of an event.

    Points are looked up by `event_name` in the current catalog at scoring
    time, so edits to the catalog apply retroactively.
    """

    event_name: str = Field(
        ...,
        min_length=1,
        description="Reference to EventDefinition.name"
    )

    attended: bool = Field(
        default=False,
        description="Whether the subject attended"
    )

    date: str = Field(
        default="",
        description="Occurrence date as entered by the operator"
    )


class Subject(BaseModel):
    """
    Employee or team being scored.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    id: str = Field(
        ...,
        min_length=1,
        description="Unique subject identifier (e.g. EMP-9921)"
    )

    name: Optional[str] = Field(
        default=None,
        description="Display label (role or team)"
    )

    base_score: float = Field(
        ...,
        ge=0.0,
        le=100.0,
        description="Starting score between 0 and 100"
    )

    inactivity_penalty: float = Field(
        default=0.0,
        ge=0.0,
        description="Inactivity decay in points, before weighting"
    )

    records: List[AttendanceRecord] = Field(
        default_factory=list,
        description="Attendance history, oldest first"
    )


class ScoringConfig(BaseModel):
    """
    Process-wide multipliers applied to every subject.

    Zero and negative weights are accepted; range enforcement belongs to
    the operator layer.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    event_weight: float = Field(
        default=1.0,
        description="Multiplier on summed attended event points"
    )

    penalty_weight: float = Field(
        default=1.0,
        description="Multiplier on the inactivity penalty"
    )

    @classmethod
    def from_settings(cls, settings) -> "ScoringConfig":
        return cls(
            event_weight=settings.DEFAULT_EVENT_WEIGHT,
            penalty_weight=settings.DEFAULT_PENALTY_WEIGHT,
        )
