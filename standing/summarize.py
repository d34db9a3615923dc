"""Summaries of grades: statistics, distributions, and what-if calculations."""

from __future__ import annotations

import dataclasses
import typing

import numpy as np
import pandas as pd

from .core import CourseGradeResult
from .scales import LETTER_SCALE


@dataclasses.dataclass(frozen=True)
class ScoreStatistics:
    """Descriptive statistics of a collection of percentage scores.

    Attributes
    ----------
    count : int
    mean : float
    median : float
    min : float
    max : float
    standard_deviation : float
        The population standard deviation.
    distribution : tuple[int, ...]
        A histogram with ten buckets: [0, 10), [10, 20), ..., [90, 100].
        Scores of 100 or more fall in the last bucket.

    """

    count: int
    mean: float
    median: float
    min: float
    max: float
    standard_deviation: float
    distribution: typing.Tuple[int, ...]


def score_statistics(scores: typing.Iterable[float]) -> ScoreStatistics:
    """Compute descriptive statistics of percentage scores.

    If there are no scores, all statistics are zero.

    Parameters
    ----------
    scores : Iterable[float]
        Percentage scores, typically between 0 and 100.

    Returns
    -------
    ScoreStatistics

    """
    scores = np.asarray(list(scores), dtype=float)

    if scores.size == 0:
        return ScoreStatistics(0, 0.0, 0.0, 0.0, 0.0, 0.0, (0,) * 10)

    buckets = np.clip((scores // 10).astype(int), 0, 9)
    distribution = np.bincount(buckets, minlength=10)

    return ScoreStatistics(
        count=int(scores.size),
        mean=float(np.mean(scores)),
        median=float(np.median(scores)),
        min=float(np.min(scores)),
        max=float(np.max(scores)),
        standard_deviation=float(np.std(scores)),
        distribution=tuple(int(n) for n in distribution),
    )


def percentage_needed(
    current_earned: float,
    current_possible: float,
    remaining_possible: float,
    target_percentage: float,
) -> typing.Optional[float]:
    """The percentage needed on the remaining work to reach a target.

    Parameters
    ----------
    current_earned : float
        Points earned so far.
    current_possible : float
        Points possible so far.
    remaining_possible : float
        Points possible on the work that remains.
    target_percentage : float
        The desired overall percentage.

    Returns
    -------
    Optional[float]
        The percentage needed on the remaining work, or `None` if there is no
        remaining work or the target cannot be reached without scoring more
        than 100%. If the target is already secured, this is zero.

    Example
    -------
    >>> percentage_needed(80, 100, 100, 85)
    90.0

    """
    if remaining_possible <= 0:
        return None

    total_possible = current_possible + remaining_possible
    needed = target_percentage / 100 * total_possible - current_earned
    needed_percentage = needed / remaining_possible * 100

    if needed_percentage > 100:
        return None

    return max(0.0, needed_percentage)


def letter_grade_distribution(letters, valid_letters=tuple(LETTER_SCALE)):
    """Counts the frequency of each letter grade.

    Parameters
    ----------
    letters : pd.Series or Iterable[str]
        The letter grades. Missing grades (`None`) are not counted.

    valid_letters : Sequence[str]
        The possible letter grades.

    Returns
    -------
    pd.Series
        The count of each letter grade. The letters are guaranteed to be in
        order, from highest to lowest.

    """
    letters = pd.Series(list(letters), dtype=object).dropna()
    counts = letters.value_counts().reindex(valid_letters)
    counts.index.name = "Letter"
    counts.name = "Frequency"
    return counts.fillna(0).astype(int)


def breakdown_table(result: CourseGradeResult) -> pd.DataFrame:
    """Tabulate the category breakdowns of a course result.

    Returns
    -------
    pd.DataFrame
        One row per active category, indexed by the category's display name,
        with columns "earned", "possible", "percentage", "configured weight",
        "effective weight" and "contribution". Empty if the course has no data.

    """
    columns = [
        "earned",
        "possible",
        "percentage",
        "configured weight",
        "effective weight",
        "contribution",
    ]
    rows = [
        [
            b.total_earned,
            b.total_possible,
            b.percentage,
            b.configured_weight,
            b.effective_weight,
            b.weighted_contribution,
        ]
        for b in result.breakdowns
    ]
    index = pd.Index([b.category.display_name for b in result.breakdowns], name="category")
    return pd.DataFrame(rows, index=index, columns=columns, dtype=float)


def course_letter_distribution(results: typing.Iterable[CourseGradeResult]) -> pd.Series:
    """The number of courses with each letter grade. Courses without data are skipped."""
    return letter_grade_distribution(r.letter_grade for r in results if r.has_data)
