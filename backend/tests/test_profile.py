"""Tests for profile assembly and age groups."""

import pytest

from fitscreen.schemas.base import AgeGroup, Metric
from fitscreen.services.profile import (
    PROFILE_LABELS,
    PROFILE_ORDER,
    REFERENCE_SCORE,
    SCALE_MAX,
    build_profile,
    get_age_group,
    get_age_group_label,
)

SCORES = {
    Metric.GRIP: 41.2,
    Metric.SIT_TO_STAND: 40.0,
    Metric.BALANCE: 20.0,
    Metric.FLEXION: 60.0,
}


class TestAgeGroup:
    """Test display age groups."""

    @pytest.mark.parametrize(
        "age,expected",
        [
            (20, AgeGroup.YOUNG),
            (39, AgeGroup.YOUNG),
            (40, AgeGroup.MIDDLE),
            (59, AgeGroup.MIDDLE),
            (60, AgeGroup.SENIOR),
            (92, AgeGroup.SENIOR),
        ],
    )
    def test_boundaries(self, age, expected):
        """Test age group band edges."""
        assert get_age_group(age) == expected

    def test_labels(self):
        """Test display labels."""
        assert get_age_group_label(35) == "20s-30s"
        assert get_age_group_label(45) == "40s-50s"
        assert get_age_group_label(65) == "60 and over"


class TestBuildProfile:
    """Test profile point assembly."""

    def test_fixed_order(self):
        """Test that points follow grip, sit-to-stand, balance, flexion."""
        profile = build_profile(SCORES)
        assert [p.metric for p in profile] == list(PROFILE_ORDER)
        assert [p.label for p in profile] == [PROFILE_LABELS[m] for m in PROFILE_ORDER]

    def test_order_does_not_depend_on_input(self):
        """Test that dict ordering of the scores is ignored."""
        reversed_scores = dict(reversed(list(SCORES.items())))
        assert build_profile(reversed_scores) == build_profile(SCORES)

    def test_reference_line_and_scale(self):
        """Test the shared reference line and axis maximum."""
        for point in build_profile(SCORES):
            assert point.reference_average == REFERENCE_SCORE == 60
            assert point.scale_max == SCALE_MAX == 100

    def test_scores_carried_through(self):
        """Test that each point holds its metric's score."""
        for point in build_profile(SCORES):
            assert point.score == SCORES[point.metric]

    def test_missing_metric_raises(self):
        """Test that all four metrics are required."""
        partial = {Metric.GRIP: 50.0}
        with pytest.raises(KeyError):
            build_profile(partial)

    def test_score_passed_through_unchecked(self):
        """Test that scores outside the axis are carried, not rejected."""
        profile = build_profile({**SCORES, Metric.GRIP: -2.5})
        assert profile[0].score == -2.5
