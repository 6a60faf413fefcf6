"""Assessment input schemas."""

from pydantic import BaseModel, ConfigDict, Field

from fitscreen.schemas.base import Gender


class MeasurementPair(BaseModel):
    """Two attempts at one measurement.

    None means the attempt was not recorded.
    """

    model_config = ConfigDict(frozen=True)

    attempt1: float | None = Field(None, description="First attempt")
    attempt2: float | None = Field(None, description="Second attempt")

    def recorded(self) -> list[float]:
        """Return the recorded attempts in order."""
        return [v for v in (self.attempt1, self.attempt2) if v is not None]


class GripPair(BaseModel):
    """Grip strength attempts for each hand (kg)."""

    model_config = ConfigDict(frozen=True)

    right: MeasurementPair = Field(default_factory=MeasurementPair)
    left: MeasurementPair = Field(default_factory=MeasurementPair)


class Subject(BaseModel):
    """Subject demographics.

    Identification fields are carried through for export only; scoring
    reads age and gender alone.
    """

    model_config = ConfigDict(frozen=True)

    age: int = Field(..., description="Age in years (not range-checked)")
    gender: Gender = Field(..., description="Gender for norm selection")
    company: str = Field("", description="Employer or organization name")
    subject_id: str = Field("", description="Employee or subject identifier")
    name: str = Field("", description="Subject display name")


class InputRecord(BaseModel):
    """One assessment session, as handed over by the input collector."""

    model_config = ConfigDict(frozen=True)

    subject: Subject
    grip: GripPair = Field(default_factory=GripPair)
    sit_to_stand: MeasurementPair = Field(
        default_factory=MeasurementPair, description="Repetitions in 30 seconds"
    )
    balance: MeasurementPair = Field(
        default_factory=MeasurementPair, description="Single-leg stance, seconds"
    )
    flexion: MeasurementPair = Field(
        default_factory=MeasurementPair,
        description="Fingertip-to-floor distance in cm; negative is past the floor",
    )
