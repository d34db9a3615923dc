import math

import pytest
from util import history, make_entry, scenario_one_entries

import standing
from standing import (
    Category,
    CategoryWeights,
    StandingOptions,
    Trend,
    compute_course_grade,
)


def test_weights_are_renormalized_over_active_categories():
    # given
    entries = scenario_one_entries()

    # when
    result = compute_course_grade("bio", entries, standing.DEFAULT_WEIGHTS)

    # then
    # .4/.9 * 90 + .3/.9 * 70 + .2/.9 * 100
    assert result.has_data
    assert result.overall_percentage == pytest.approx(85.5556, abs=1e-4)
    assert result.letter_grade == "B"
    assert [b.category for b in result.breakdowns] == [
        Category.ASSIGNMENT,
        Category.QUIZ,
        Category.PARTICIPATION,
    ]


def test_breakdowns_report_totals_and_weights():
    # given
    entries = scenario_one_entries()

    # when
    result = compute_course_grade("bio", entries)

    # then
    assignments = result.breakdown_for("assignment")
    assert assignments.total_earned == 180
    assert assignments.total_possible == 200
    assert assignments.percentage == 90
    assert assignments.configured_weight == 0.4
    assert assignments.effective_weight == pytest.approx(4 / 9)
    assert assignments.weighted_contribution == pytest.approx(40)
    assert result.breakdown_for(Category.ATTENDANCE) is None


def test_effective_weights_sum_to_one():
    result = compute_course_grade("bio", scenario_one_entries())
    total = sum(b.effective_weight for b in result.breakdowns)
    assert math.isclose(total, 1, abs_tol=1e-9)


def test_missing_weights_fall_back_to_defaults():
    # given
    entries = scenario_one_entries()

    # when
    implicit = compute_course_grade("bio", entries)
    explicit = compute_course_grade("bio", entries, standing.DEFAULT_WEIGHTS)

    # then
    assert implicit == explicit


def test_default_weights_can_be_set_through_options():
    # given
    options = StandingOptions(weights={"quiz": 1.0})

    # when
    result = compute_course_grade("bio", scenario_one_entries(), options=options)

    # then
    assert result.overall_percentage == pytest.approx(70)
    assert [b.category for b in result.breakdowns] == [Category.QUIZ]


def test_weights_given_as_plain_dict():
    # given
    entries = [make_entry("assignment", 50, 100), make_entry("quiz", 100, 100)]

    # when
    result = compute_course_grade("bio", entries, {"assignment": 0.75, "quiz": 0.25})

    # then
    assert result.overall_percentage == pytest.approx(62.5)
    assert result.letter_grade == "D"


def test_categories_are_weighted_not_pooled_by_points():
    # given
    # a 500 point project at 100% and a 10 point quiz at 0%
    entries = [make_entry("assignment", 500, 500), make_entry("quiz", 0, 10)]
    weights = CategoryWeights({"assignment": 0.5, "quiz": 0.5})

    # when
    result = compute_course_grade("bio", entries, weights)

    # then
    assert result.overall_percentage == pytest.approx(50)


def test_no_entries_means_no_data():
    # when
    result = compute_course_grade("bio", [])

    # then
    assert not result.has_data
    assert result.overall_percentage is None
    assert result.letter_grade is None
    assert result.breakdowns == ()
    assert result.trend is Trend.STABLE
    assert result.display_letter == standing.NO_GRADE_YET
    assert result.grade_points is None
    assert result.status is None


def test_only_zero_weight_categories_means_no_data():
    # given
    entries = [make_entry("attendance", 10, 10)]
    weights = CategoryWeights({"assignment": 0.5, "quiz": 0.5})

    # when
    result = compute_course_grade("bio", entries, weights)

    # then
    assert not result.has_data
    assert result.letter_grade is None


def test_zero_weight_categories_have_no_breakdown():
    # given
    entries = scenario_one_entries() + [make_entry("attendance", 5, 10)]
    weights = CategoryWeights({"assignment": 0.5, "quiz": 0.3, "participation": 0.2})

    # when
    result = compute_course_grade("bio", entries, weights)

    # then
    assert result.breakdown_for("attendance") is None
    assert all(b.effective_weight > 0 for b in result.breakdowns)
    # .5 * 90 + .3 * 70 + .2 * 100
    assert result.overall_percentage == pytest.approx(86)


def test_overall_percentage_is_clamped_to_one_hundred():
    # given
    entries = [make_entry("quiz", 15, 10)]

    # when
    result = compute_course_grade("bio", entries)

    # then
    assert result.overall_percentage == 100
    assert result.letter_grade == "A"


def test_composed_percentage_is_rounded_before_grading():
    # given
    # 90% in every category; the weighted sum is 90 up to floating-point noise
    entries = [
        make_entry("assignment", 90, 100),
        make_entry("quiz", 9, 10),
        make_entry("participation", 45, 50),
    ]

    # when
    result = compute_course_grade("bio", entries)

    # then
    assert result.overall_percentage == 90
    assert result.letter_grade == "A-"
    assert result.status == "Excellent"


def test_result_includes_trend():
    result = compute_course_grade("bio", history(65, 70, 75, 80))
    assert result.trend is Trend.IMPROVING


def test_trend_options_are_used():
    # given
    entries = history(70, 70, 70, 74)
    options = StandingOptions(trend_window=1)

    # when
    result = compute_course_grade("bio", entries, options=options)

    # then
    assert result.trend is Trend.IMPROVING


def test_grade_points_and_status():
    # when
    result = compute_course_grade("bio", scenario_one_entries())

    # then
    assert result.grade_points == 3.0
    assert result.status == "Good"
    assert result.display_letter == "B"


def test_composition_is_idempotent():
    # given
    entries = scenario_one_entries()

    # when
    first = compute_course_grade("bio", entries)
    second = compute_course_grade("bio", entries)

    # then
    assert first == second


def test_accepts_any_iterable_of_entries():
    result = compute_course_grade("bio", iter(scenario_one_entries()))
    assert result.letter_grade == "B"


def test_dropping_an_inactive_category_keeps_contribution_ratios():
    # given
    with_attendance = scenario_one_entries() + [make_entry("attendance", 1, 1)]

    # when
    full = compute_course_grade("bio", with_attendance)
    partial = compute_course_grade("bio", scenario_one_entries())

    # then
    def ratio(result):
        return (
            result.breakdown_for("assignment").effective_weight
            / result.breakdown_for("quiz").effective_weight
        )

    assert ratio(full) == pytest.approx(ratio(partial))


def test_invalid_options_are_rejected():
    with pytest.raises(ValueError):
        StandingOptions(trend_window=0)

    with pytest.raises(ValueError):
        StandingOptions(trend_deadband=-1)

    with pytest.raises(ValueError):
        StandingOptions(weights={"quiz": 2})
