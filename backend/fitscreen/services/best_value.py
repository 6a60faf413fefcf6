"""Best-value selection.

Reduces each two-attempt measurement to the single adopted value used for
scoring and classification. Missing attempts are resolved here and
nowhere else:

- grip, sit-to-stand, balance: larger is better; a missing attempt never
  beats a recorded one; if neither was recorded the adopted value is 0.0.
- flexion: smaller is better; a missing attempt is ignored; if neither
  attempt was recorded the adopted value falls back to 0.0.
"""

import logging

from fitscreen.schemas.assessment import InputRecord, MeasurementPair
from fitscreen.schemas.result import AdoptedValues

logger = logging.getLogger(__name__)

MISSING_MAX_VALUE = 0.0
MISSING_FLEXION_FALLBACK = 0.0


def best_of_max(pair: MeasurementPair) -> float:
    """Return the larger recorded attempt.

    Returns 0.0 when neither attempt was recorded, which places the metric
    below every low-performance cutoff.
    """
    recorded = pair.recorded()
    if not recorded:
        return MISSING_MAX_VALUE
    return max(recorded)


def best_of_min(pair: MeasurementPair) -> float:
    """Return the smaller recorded attempt.

    Falls back to 0.0 when neither attempt was recorded.
    """
    recorded = pair.recorded()
    if not recorded:
        return MISSING_FLEXION_FALLBACK
    return min(recorded)


def adopt_values(record: InputRecord) -> AdoptedValues:
    """Select the adopted value for every metric of an assessment.

    Args:
        record: The assessment input.

    Returns:
        AdoptedValues with grip right/left/overall, sit-to-stand, balance
        and flexion.
    """
    grip_right = best_of_max(record.grip.right)
    grip_left = best_of_max(record.grip.left)

    if not record.flexion.recorded():
        logger.debug("No flexion attempts recorded; using %.1f fallback", MISSING_FLEXION_FALLBACK)

    return AdoptedValues(
        grip_right=grip_right,
        grip_left=grip_left,
        grip=max(grip_right, grip_left),
        sit_to_stand=best_of_max(record.sit_to_stand),
        balance=best_of_max(record.balance),
        flexion=best_of_min(record.flexion),
    )
