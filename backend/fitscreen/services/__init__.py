"""Services for Fitness Risk Screening.

Services implement the screening logic:
- best_value: adopted value per metric from two attempts
- norms: age/gender reference tables and 0-100 scoring
- risk_classifier: screening flags and advisory messages
- profile: comparison profile and age group
- risk_engine: evaluate() and FitnessRiskService
- submission: log sheet row export
"""

from fitscreen.services.best_value import adopt_values, best_of_max, best_of_min
from fitscreen.services.norms import (
    score_balance,
    score_flexion,
    score_grip,
    score_sit_to_stand,
)
from fitscreen.services.profile import build_profile, get_age_group, get_age_group_label
from fitscreen.services.risk_classifier import (
    AdvisoryMessage,
    ScreeningFlags,
    compose_messages,
    compute_flags,
    compute_item_flags,
)
from fitscreen.services.risk_engine import (
    FitnessRiskService,
    evaluate,
    get_fitness_risk_service,
    reset_fitness_risk_service,
)
from fitscreen.services.submission import (
    SUBMISSION_COLUMNS,
    SubmissionRecord,
    build_submission_record,
)

__all__ = [
    # Best value
    "adopt_values",
    "best_of_max",
    "best_of_min",
    # Norms
    "score_balance",
    "score_flexion",
    "score_grip",
    "score_sit_to_stand",
    # Profile
    "build_profile",
    "get_age_group",
    "get_age_group_label",
    # Classifier
    "AdvisoryMessage",
    "ScreeningFlags",
    "compose_messages",
    "compute_flags",
    "compute_item_flags",
    # Engine
    "FitnessRiskService",
    "evaluate",
    "get_fitness_risk_service",
    "reset_fitness_risk_service",
    # Export
    "SUBMISSION_COLUMNS",
    "SubmissionRecord",
    "build_submission_record",
]
