"""Risk result schemas."""

from pydantic import BaseModel, ConfigDict, Field

from fitscreen.schemas.base import AgeGroup, Metric


class AdoptedValues(BaseModel):
    """The single value adopted per metric from the two attempts.

    NOTE: flexion is 0.0 when neither attempt was recorded. That value is
    a fallback, not a measurement; consumers cannot tell it apart from a
    real 0 cm reach.

    A recorded attempt always beats a missing one, so a hand with one
    negative attempt and one blank adopts the negative value rather than 0.
    Overall grip and every score are unaffected when the other hand was
    recorded.
    """

    model_config = ConfigDict(frozen=True)

    grip_right: float = Field(..., description="Best right-hand grip (kg)")
    grip_left: float = Field(..., description="Best left-hand grip (kg)")
    grip: float = Field(..., description="Best grip of either hand (kg)")
    sit_to_stand: float = Field(..., description="Best sit-to-stand count")
    balance: float = Field(..., description="Best single-leg balance (s)")
    flexion: float = Field(..., description="Best (smallest) flexion distance (cm)")


class ItemFlags(BaseModel):
    """Per-item warning flags used to highlight result table cells."""

    model_config = ConfigDict(frozen=True)

    grip: bool
    sit_to_stand: bool
    balance: bool
    flexion: bool


class ProfilePoint(BaseModel):
    """One metric on the comparison profile (radar chart)."""

    model_config = ConfigDict(frozen=True)

    metric: Metric
    label: str
    score: float = Field(..., description="Metric score; the scoring functions define the range")
    reference_average: float = Field(..., description="Reference line for comparison")
    scale_max: float = Field(..., description="Upper bound of the profile axis")


class RiskResult(BaseModel):
    """Complete screening outcome for one assessment."""

    model_config = ConfigDict(frozen=True)

    is_sarcopenia_risk: bool
    is_locomotive_risk: bool
    is_fall_risk: bool
    is_flexibility_low: bool
    item_flags: ItemFlags
    messages: tuple[str, ...] = Field(default_factory=tuple)
    profile: tuple[ProfilePoint, ...]
    age_group: AgeGroup
    age_group_label: str
    adopted: AdoptedValues

    def screening_flags(self) -> dict[str, bool]:
        """Return the four screening flags keyed by name."""
        return {
            "sarcopenia": self.is_sarcopenia_risk,
            "locomotive": self.is_locomotive_risk,
            "fall": self.is_fall_risk,
            "flexibility_low": self.is_flexibility_low,
        }
