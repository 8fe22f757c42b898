"""Tests for weekly cardio targets and recent cardio summaries."""

import math
from datetime import date, datetime
from itertools import product

import pytest

from fitness_engine.constants import CARDIO_TARGET_BOUNDS
from fitness_engine.metrics.cardio_targets import (
    CardioTargets,
    calculate_recent_weekly_cardio_average,
    calculate_weekly_cardio_targets,
    resolve_weekly_cardio_goal,
    start_of_week,
    summarize_weekly_cardio,
    weekly_cardio_totals,
)
from fitness_engine.models import (
    ActivityLevel,
    ExperienceLevel,
    LoggedExercise,
    UserProfile,
    WeightGoal,
)

# A Wednesday; the current week started Sunday 2024-06-09
TODAY = date(2024, 6, 12)


class TestCalculateWeeklyCardioTargets:
    """Tests for calculate_weekly_cardio_targets."""

    def test_empty_profile_uses_baseline(self):
        assert calculate_weekly_cardio_targets(UserProfile()) == CardioTargets(base_goal=600, stretch_goal=750)

    def test_reference_profile(self):
        profile = UserProfile(
            weight_value=70,
            weight_unit="kg",
            weight_goal="maintain",
            activity_level="moderately_active",
            experience_level="intermediate",
        )
        assert calculate_weekly_cardio_targets(profile) == CardioTargets(base_goal=600, stretch_goal=750)

    def test_all_multipliers_applied(self):
        profile = UserProfile(
            weight_value=100,
            weight_unit="kg",
            weight_goal="lose",
            activity_level="very_active",
            experience_level="advanced",
        )
        # 600 * 100/70 * 1.4 * 1.2 * 1.05
        targets = calculate_weekly_cardio_targets(profile)
        assert targets.base_goal == 1512
        assert targets.stretch_goal == 1890

    def test_weight_in_lbs(self):
        profile = UserProfile(weight_value=220.462, weight_unit="lbs")
        # ~100 kg -> 600 * 100/70
        assert calculate_weekly_cardio_targets(profile).base_goal == 857

    def test_clamped_to_minimum(self):
        profile = UserProfile(
            weight_value=50,
            weight_unit="kg",
            weight_goal="gain",
            activity_level="sedentary",
            experience_level="beginner",
        )
        targets = calculate_weekly_cardio_targets(profile)
        assert targets.base_goal == 400
        # Beginners get the largest stretch
        assert targets.stretch_goal == 520

    def test_clamped_to_maximum(self):
        profile = UserProfile(
            weight_value=150,
            weight_unit="kg",
            weight_goal="lose",
            activity_level="extremely_active",
            experience_level="advanced",
        )
        assert calculate_weekly_cardio_targets(profile) == CardioTargets(base_goal=2500, stretch_goal=3000)

    def test_recent_average_raises_base(self):
        targets = calculate_weekly_cardio_targets(UserProfile(), recent_weekly_average=900.4)
        assert targets == CardioTargets(base_goal=900, stretch_goal=1125)

    def test_recent_average_never_lowers_base(self):
        assert calculate_weekly_cardio_targets(UserProfile(), recent_weekly_average=300).base_goal == 600
        assert calculate_weekly_cardio_targets(UserProfile(), recent_weekly_average=0).base_goal == 600

    def test_recent_average_is_clamped(self):
        assert calculate_weekly_cardio_targets(UserProfile(), recent_weekly_average=9000).base_goal == 2500

    def test_non_finite_recent_average(self):
        assert calculate_weekly_cardio_targets(UserProfile(), recent_weekly_average=math.nan) == CardioTargets(
            base_goal=600, stretch_goal=750
        )
        assert calculate_weekly_cardio_targets(UserProfile(), recent_weekly_average=math.inf) == CardioTargets(
            base_goal=2500, stretch_goal=3000
        )

    @pytest.mark.parametrize("value", [math.inf, math.nan])
    def test_non_finite_bodyweight_ignored(self, value):
        profile = UserProfile.model_construct(weight_value=value, weight_unit="kg")
        assert calculate_weekly_cardio_targets(profile) == CardioTargets(base_goal=600, stretch_goal=750)

    def test_overflowing_bodyweight_hits_maximum(self):
        profile = UserProfile(weight_value=1e308, weight_unit="kg")
        assert calculate_weekly_cardio_targets(profile) == CardioTargets(base_goal=2500, stretch_goal=3000)

    def test_goal_ordering(self):
        """Losing weight asks for more cardio than maintaining, which asks for more than gaining."""
        goals = [
            calculate_weekly_cardio_targets(UserProfile(weight_goal=g)).base_goal
            for g in ("gain", "maintain", "lose")
        ]
        assert goals == sorted(goals)
        assert len(set(goals)) == 3

    def test_bounds_hold_for_every_profile(self):
        """Base and stretch stay inside their bands and stretch >= base."""
        weights = [None, 35, 55, 70, 95, 140, 250]
        for weight, goal, activity, experience in product(
            weights, [None, *WeightGoal], [None, *ActivityLevel], [None, *ExperienceLevel]
        ):
            profile = UserProfile(
                weight_value=weight,
                weight_unit="kg",
                weight_goal=goal,
                activity_level=activity,
                experience_level=experience,
            )
            for average in (None, 450, 5000):
                targets = calculate_weekly_cardio_targets(profile, average)
                assert CARDIO_TARGET_BOUNDS["min_base"] <= targets.base_goal <= CARDIO_TARGET_BOUNDS["max_base"]
                assert CARDIO_TARGET_BOUNDS["min_stretch"] <= targets.stretch_goal <= CARDIO_TARGET_BOUNDS["max_stretch"]
                assert targets.stretch_goal >= targets.base_goal

    def test_to_dict(self):
        assert calculate_weekly_cardio_targets(UserProfile()).to_dict() == {
            "base_goal": 600,
            "stretch_goal": 750,
        }


class TestRecentWeeklyAverage:
    """Tests for the recent weekly cardio average."""

    @pytest.fixture
    def logs(self, make_cardio, make_workout):
        return [
            # Week of Jun 2 (most recent completed)
            make_workout(datetime(2024, 6, 5, 18, 30), [
                make_cardio("Running", calories=300),
                make_cardio("Walk", calories=100),
                LoggedExercise(name="Bench Press", sets=3, reps=8, weight=100, calories=50),
            ]),
            # Week of May 19
            make_workout(datetime(2024, 5, 20), [make_cardio("Bike", calories=400)]),
            # Current week: excluded
            make_workout(datetime(2024, 6, 10), [make_cardio("Running", calories=1000)]),
            # Five weeks back: excluded
            make_workout(datetime(2024, 5, 5), [make_cardio("Running", calories=1000)]),
        ]

    def test_start_of_week_is_sunday(self):
        assert start_of_week(date(2024, 6, 12)) == date(2024, 6, 9)
        assert start_of_week(date(2024, 6, 9)) == date(2024, 6, 9)
        assert start_of_week(date(2024, 6, 8)) == date(2024, 6, 2)

    def test_average_over_four_completed_weeks(self, logs):
        assert calculate_recent_weekly_cardio_average(logs, TODAY) == pytest.approx(200.0)

    def test_accepts_datetime_today(self, logs):
        assert calculate_recent_weekly_cardio_average(logs, datetime(2024, 6, 12, 7, 0)) == pytest.approx(200.0)

    def test_weekly_totals(self, logs):
        totals = weekly_cardio_totals(logs, TODAY)

        assert [w.week_start for w in totals] == [
            date(2024, 6, 2), date(2024, 5, 26), date(2024, 5, 19), date(2024, 5, 12),
        ]
        assert [w.calories for w in totals] == [400, 0, 400, 0]

    def test_saturday_belongs_to_previous_week(self, make_cardio, make_workout):
        logs = [make_workout(datetime(2024, 6, 8), [make_cardio("Running", calories=800)])]
        assert calculate_recent_weekly_cardio_average(logs, date(2024, 6, 9)) == pytest.approx(200.0)

    def test_no_logs(self):
        assert calculate_recent_weekly_cardio_average([], TODAY) is None

    def test_no_cardio_calories(self, make_cardio, make_workout):
        logs = [make_workout(datetime(2024, 6, 5), [make_cardio("Running", distance=3, duration=30)])]
        assert calculate_recent_weekly_cardio_average(logs, TODAY) is None


class TestResolveWeeklyCardioGoal:
    """Tests for resolve_weekly_cardio_goal."""

    def test_auto_uses_base_goal(self):
        profile = UserProfile(
            cardio_calculation_method="auto",
            activity_level="moderately_active",
            weight_goal="maintain",
            weekly_cardio_calorie_goal=1234,
        )
        assert resolve_weekly_cardio_goal(profile) == 600

    def test_auto_with_recent_average(self):
        profile = UserProfile(
            cardio_calculation_method="auto",
            activity_level="moderately_active",
            weight_goal="maintain",
        )
        assert resolve_weekly_cardio_goal(profile, 800) == 800

    def test_auto_needs_activity_and_goal(self):
        assert resolve_weekly_cardio_goal(
            UserProfile(cardio_calculation_method="auto", activity_level="sedentary")
        ) is None
        assert resolve_weekly_cardio_goal(
            UserProfile(cardio_calculation_method="auto", weight_goal="lose")
        ) is None

    def test_manual_uses_stored_goal(self):
        profile = UserProfile(cardio_calculation_method="manual", weekly_cardio_calorie_goal=1234)
        assert resolve_weekly_cardio_goal(profile) == 1234

    def test_manual_without_goal(self):
        assert resolve_weekly_cardio_goal(UserProfile(cardio_calculation_method="manual")) is None


class TestSummarizeWeeklyCardio:
    """Tests for summarize_weekly_cardio."""

    def test_summary(self, make_cardio, make_workout):
        logs = [make_workout(datetime(2024, 6, 3), [make_cardio("Running", calories=4000)])]
        profile = UserProfile(
            cardio_calculation_method="auto",
            activity_level="moderately_active",
            weight_goal="maintain",
        )

        summary = summarize_weekly_cardio(logs, profile, TODAY)

        assert summary.recent_weekly_average == pytest.approx(1000.0)
        assert summary.weekly_goal == 1000
        assert len(summary.weeks) == 4

        data = summary.to_dict()
        assert data["weeks"][0] == {"week_start": "2024-06-02", "calories": 4000}
        assert data["recent_weekly_average"] == 1000

    def test_summary_without_data(self):
        summary = summarize_weekly_cardio([], UserProfile(), TODAY)

        assert summary.recent_weekly_average is None
        assert summary.weekly_goal is None
        assert all(w.calories == 0 for w in summary.weeks)
