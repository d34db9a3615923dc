"""Classify the direction of a course's recent grades."""

from __future__ import annotations

import enum
import logging
import typing

import pandas as pd

from .core.aggregate import entries_to_frame
from .core.entries import Entry

logger = logging.getLogger(__name__)

#: the number of most recent scores compared against the earlier ones
DEFAULT_WINDOW = 3

#: differences in average no larger than this (in percentage points) are "stable"
DEFAULT_DEADBAND = 2.0


class Trend(enum.Enum):
    """The direction in which a course grade is moving."""

    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"

    @property
    def display_name(self) -> str:
        return self.value.title()


def check_trend_parameters(window: int, deadband: float):
    """Raise `ValueError` if the window is not a positive integer or the deadband is negative."""
    if isinstance(window, bool) or not isinstance(window, int) or window < 1:
        raise ValueError(f"Trend window must be a positive integer, got {window!r}.")

    if not deadband >= 0:
        raise ValueError(f"Trend deadband must be non-negative, got {deadband!r}.")


def score_history(entries: typing.Iterable[Entry]) -> pd.Series:
    """The percentage earned on each entry, in the order they were recorded.

    Parameters
    ----------
    entries : Iterable[Entry]
        The entries of a single course, in any order.

    Returns
    -------
    pd.Series
        A series of percentages indexed by the time each entry was recorded.
        Entries recorded at the same time keep the order in which they were
        given.

    """
    table = entries_to_frame(entries)
    table = table.sort_values("recorded_at", kind="stable")
    history = 100 * table["earned"] / table["possible"]
    history.index = pd.Index(table["recorded_at"], name="recorded_at")
    history.name = "percentage"
    return history.astype(float)


def analyze_trend(
    entries: typing.Iterable[Entry],
    window: int = DEFAULT_WINDOW,
    deadband: float = DEFAULT_DEADBAND,
) -> Trend:
    """Determine whether a course grade is improving, declining, or stable.

    The entries' percentages are ordered by the time they were recorded. The
    last `window` of them form the *recent* scores, and all earlier ones form
    the *prior* scores. If there are no more than `window` scores, the recent
    window shrinks to leave the first score as the prior. The trend is
    determined by comparing the mean of the recent scores against the mean of
    the prior scores:

        - if the recent mean exceeds the prior mean by more than `deadband`,
          the trend is improving;
        - if it falls short of the prior mean by more than `deadband`, the
          trend is declining;
        - otherwise, the trend is stable.

    With fewer than two entries there is no signal and the trend is stable.

    Parameters
    ----------
    entries : Iterable[Entry]
        The entries of a single course, in any order.
    window : int
        How many of the most recent scores to average. Default: 3.
    deadband : float
        The difference in means, in percentage points, that must be exceeded
        before a trend is reported. Default: 2.0.

    Returns
    -------
    Trend

    Raises
    ------
    ValueError
        If `window` is not a positive integer, or `deadband` is negative.

    Example
    -------
    Four quizzes scoring 65, 70, 75 and 80 percent have a recent mean of 75
    and a prior mean of 65, and so are improving.

    """
    check_trend_parameters(window, deadband)

    history = score_history(entries)
    if len(history) < 2:
        return Trend.STABLE

    window = min(window, len(history) - 1)
    recent = history.iloc[-window:]
    prior = history.iloc[:-window]

    difference = recent.mean() - prior.mean()
    logger.debug(
        "Recent mean %.3f vs. prior mean %.3f (difference %.3f).",
        recent.mean(),
        prior.mean(),
        difference,
    )

    if difference > deadband:
        return Trend.IMPROVING
    elif difference < -deadband:
        return Trend.DECLINING
    else:
        return Trend.STABLE
