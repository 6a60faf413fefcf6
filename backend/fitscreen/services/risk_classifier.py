"""Risk classification.

Applies screening cutoffs to adopted values and composes the advisory
messages. Classification runs in two passes:

1. compute_flags() evaluates every cutoff into a ScreeningFlags value.
2. compose_messages() walks MESSAGE_RULES in order; a rule emits its
   message when its trigger flag is set and none of its suppressing flags
   are set.

Cutoffs:
- Low muscle strength (AWGS 2019 grip): male < 28 kg, female < 18 kg
- Low physical performance (CS-30): male < 17, female < 15
- Fall risk: CS-30 <= 14 or balance < 2 s
- Fall caution: CS-30 <= 19
- Locomotive syndrome: CS-30 in the lowest grade, or low muscle strength
- Low flexibility: fingertip-to-floor > 5 cm
"""

import logging
from dataclasses import asdict, dataclass
from enum import Enum

from fitscreen.schemas.assessment import Subject
from fitscreen.schemas.base import Gender
from fitscreen.schemas.result import AdoptedValues, ItemFlags
from fitscreen.services.norms import score_sit_to_stand

logger = logging.getLogger(__name__)

GRIP_CUTOFF_KG: dict[Gender, float] = {Gender.MALE: 28, Gender.FEMALE: 18}
SIT_TO_STAND_CUTOFF: dict[Gender, float] = {Gender.MALE: 17, Gender.FEMALE: 15}

FALL_RISK_SIT_TO_STAND_MAX = 14
FALL_RISK_BALANCE_BELOW = 2.0
FALL_CAUTION_SIT_TO_STAND_MAX = 19
LOCOMOTIVE_SIT_TO_STAND_SCORE_MAX = 20
FLEXIBILITY_LOW_ABOVE_CM = 5.0

# Table highlighting uses its own thresholds
ITEM_SIT_TO_STAND_MAX = 14
ITEM_BALANCE_BELOW = 5.0


class AdvisoryMessage(str, Enum):
    """Advisory message kinds, in emission order."""

    SARCOPENIA = "sarcopenia"
    LOW_MUSCLE = "low_muscle"
    FALL_RISK = "fall_risk"
    FALL_CAUTION = "fall_caution"
    LOCOMOTIVE = "locomotive"
    FLEXIBILITY = "flexibility"


MESSAGE_TEXT: dict[AdvisoryMessage, str] = {
    AdvisoryMessage.SARCOPENIA: (
        "[Possible sarcopenia] Both muscle strength and physical function are reduced. "
        "Exercise under professional guidance is recommended."
    ),
    AdvisoryMessage.LOW_MUSCLE: (
        "[Low muscle strength] Grip strength is below the reference value. "
        "Focus on protein intake and strength training."
    ),
    AdvisoryMessage.FALL_RISK: (
        "[High fall risk] Balance or lower-limb strength is reduced. "
        "Take extra care to avoid falls."
    ),
    AdvisoryMessage.FALL_CAUTION: (
        "[Fall caution] Lower-limb strength is trending slightly low."
    ),
    AdvisoryMessage.LOCOMOTIVE: (
        "[Possible locomotive syndrome] Mobility may be starting to decline."
    ),
    AdvisoryMessage.FLEXIBILITY: (
        "[Low flexibility] Your body has become stiff. "
        "Daily stretching is recommended to help prevent low back pain."
    ),
}


@dataclass(frozen=True)
class ScreeningFlags:
    """Every cutoff outcome for one assessment."""

    low_muscle: bool
    low_performance: bool
    sarcopenia: bool
    fall_risk: bool
    fall_caution: bool
    locomotive: bool
    flexibility_low: bool
    sit_to_stand_score: int


@dataclass(frozen=True)
class MessageRule:
    """Emit `message` when `trigger` is set and no `suppressed_by` flag is."""

    message: AdvisoryMessage
    trigger: str
    suppressed_by: tuple[str, ...] = ()

    def applies(self, flags: ScreeningFlags) -> bool:
        if not getattr(flags, self.trigger):
            return False
        return not any(getattr(flags, name) for name in self.suppressed_by)


MESSAGE_RULES: tuple[MessageRule, ...] = (
    MessageRule(AdvisoryMessage.SARCOPENIA, "sarcopenia"),
    MessageRule(AdvisoryMessage.LOW_MUSCLE, "low_muscle", suppressed_by=("sarcopenia",)),
    MessageRule(AdvisoryMessage.FALL_RISK, "fall_risk"),
    MessageRule(AdvisoryMessage.FALL_CAUTION, "fall_caution", suppressed_by=("fall_risk",)),
    MessageRule(AdvisoryMessage.LOCOMOTIVE, "locomotive", suppressed_by=("sarcopenia",)),
    MessageRule(AdvisoryMessage.FLEXIBILITY, "flexibility_low"),
)


def compute_flags(adopted: AdoptedValues, subject: Subject) -> ScreeningFlags:
    """Evaluate all screening cutoffs.

    Args:
        adopted: Adopted values for the assessment.
        subject: Subject demographics.

    Returns:
        ScreeningFlags with every rule outcome.
    """
    low_muscle = adopted.grip < GRIP_CUTOFF_KG[subject.gender]
    low_performance = adopted.sit_to_stand < SIT_TO_STAND_CUTOFF[subject.gender]
    sit_to_stand_score = score_sit_to_stand(adopted.sit_to_stand, subject.age, subject.gender)

    flags = ScreeningFlags(
        low_muscle=low_muscle,
        low_performance=low_performance,
        sarcopenia=low_muscle and low_performance,
        fall_risk=(
            adopted.sit_to_stand <= FALL_RISK_SIT_TO_STAND_MAX
            or adopted.balance < FALL_RISK_BALANCE_BELOW
        ),
        fall_caution=adopted.sit_to_stand <= FALL_CAUTION_SIT_TO_STAND_MAX,
        locomotive=sit_to_stand_score <= LOCOMOTIVE_SIT_TO_STAND_SCORE_MAX or low_muscle,
        flexibility_low=adopted.flexion > FLEXIBILITY_LOW_ABOVE_CM,
        sit_to_stand_score=sit_to_stand_score,
    )
    logger.debug("Screening flags: %s", asdict(flags))
    return flags


def select_messages(flags: ScreeningFlags) -> list[AdvisoryMessage]:
    """Apply the suppression table and return message kinds in order."""
    return [rule.message for rule in MESSAGE_RULES if rule.applies(flags)]


def compose_messages(flags: ScreeningFlags) -> list[str]:
    """Return advisory message texts in emission order."""
    return [MESSAGE_TEXT[message] for message in select_messages(flags)]


def compute_item_flags(adopted: AdoptedValues, flags: ScreeningFlags) -> ItemFlags:
    """Compute the per-item highlight flags for the result table."""
    return ItemFlags(
        grip=flags.low_muscle,
        sit_to_stand=adopted.sit_to_stand <= ITEM_SIT_TO_STAND_MAX,
        balance=adopted.balance < ITEM_BALANCE_BELOW,
        flexion=flags.flexibility_low,
    )
