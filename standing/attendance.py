"""Attendance rates, reported alongside the GPA.

Attendance records are owned elsewhere; these helpers only turn counts of
attendance statuses into a rate. They share nothing with the grade engine.

"""

import collections
import typing

#: all recognized attendance statuses
STATUSES = ("present", "absent", "tardy", "excused")


def attendance_rate(present: int, excused: int, total: int) -> float:
    """The percentage of recorded days on which the student attended.

    Excused absences count as attended. With no recorded days, full
    attendance is assumed and the rate is 100.

    Parameters
    ----------
    present : int
        The number of days the student was present.
    excused : int
        The number of excused absences.
    total : int
        The total number of recorded days, of any status.

    Returns
    -------
    float
        A percentage between 0 and 100.

    Raises
    ------
    ValueError
        If a count is negative, or if `present` and `excused` together
        exceed `total`.

    """
    if min(present, excused, total) < 0:
        raise ValueError("Attendance counts cannot be negative.")

    if present + excused > total:
        raise ValueError(
            f"{present} present and {excused} excused exceeds {total} total days."
        )

    if total == 0:
        return 100.0

    return (present + excused) / total * 100


def attendance_rate_from_statuses(statuses: typing.Iterable[str]) -> float:
    """Compute the attendance rate from a sequence of daily statuses.

    Parameters
    ----------
    statuses : Iterable[str]
        One status per recorded day: "present", "absent", "tardy", or
        "excused" (case-insensitive).

    Raises
    ------
    ValueError
        If an unknown status is given.

    """
    counts = collections.Counter(s.strip().lower() for s in statuses)

    unknown = set(counts) - set(STATUSES)
    if unknown:
        raise ValueError(f"Unknown attendance statuses: {sorted(unknown)}.")

    return attendance_rate(
        present=counts["present"],
        excused=counts["excused"],
        total=sum(counts.values()),
    )
