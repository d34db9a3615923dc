"""Compute the standing of a student across all of their courses."""

from __future__ import annotations

import dataclasses
import logging
import typing
from collections.abc import Mapping

import pandas as pd

from ..exceptions import InvalidEntryError
from .course import CourseGradeResult, compute_course_grade
from .entries import Entry
from .gpa import GPASummary, average_grade_points, compute_gpa
from .options import StandingOptions

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class RejectedRecord:
    """A raw record that could not be turned into an :class:`Entry`.

    Attributes
    ----------
    record
        The record as given.
    error : InvalidEntryError
        Why it was rejected.
    course_id
        The course the record was given for, if known.

    """

    record: typing.Any
    error: InvalidEntryError
    course_id: typing.Any = None


def coerce_entries(records, course_id=None):
    """Split records into valid entries and rejected records.

    Each record may be an :class:`Entry`, which is kept as-is, or a mapping,
    which is converted with :meth:`Entry.from_record`. Records that cannot be
    converted are rejected and logged rather than raising.

    Returns
    -------
    tuple[list[Entry], list[RejectedRecord]]

    """
    entries, rejected = [], []
    for record in records:
        if isinstance(record, Entry):
            entries.append(record)
            continue

        try:
            if not isinstance(record, Mapping):
                raise InvalidEntryError(
                    "record", record, f"Cannot read an entry from {type(record).__name__}."
                )
            entries.append(Entry.from_record(record))
        except InvalidEntryError as exc:
            logger.warning("Rejected record %r for course %r: %s", record, course_id, exc)
            rejected.append(RejectedRecord(record=record, error=exc, course_id=course_id))

    return entries, rejected


@dataclasses.dataclass(frozen=True)
class Standing:
    """A student's grades in every course, along with their overall summary.

    Attributes
    ----------
    courses : dict
        Maps each course ID to its :class:`CourseGradeResult`, in the order the
        courses were given.
    summary : GPASummary
        The overall summary across courses.
    rejected : tuple[RejectedRecord, ...]
        Raw records that were rejected as invalid and left out.

    """

    courses: typing.Dict[typing.Any, CourseGradeResult]
    summary: GPASummary
    rejected: typing.Tuple[RejectedRecord, ...] = ()

    @property
    def transcript_gpa(self) -> float:
        """The mean of the letter grade points; see :func:`average_grade_points`."""
        return average_grade_points(self.courses.values())

    def table(self) -> pd.DataFrame:
        """Tabulate the course results, one row per course.

        Returns
        -------
        pd.DataFrame
            Indexed by course ID, with columns "percentage", "letter",
            "grade points", "status", "trend" and "has data". Courses without
            data have missing values in the first four columns.

        """
        columns = ["percentage", "letter", "grade points", "status", "trend", "has data"]
        rows = [
            [
                result.overall_percentage,
                result.letter_grade,
                result.grade_points,
                result.status,
                result.trend.value,
                result.has_data,
            ]
            for result in self.courses.values()
        ]
        index = pd.Index(list(self.courses), name="course")
        return pd.DataFrame(rows, index=index, columns=columns)


def compute_standing(
    courses: typing.Mapping[typing.Any, typing.Iterable],
    weights: typing.Optional[typing.Mapping] = None,
    credit_hours: typing.Optional[typing.Mapping] = None,
    *,
    options: typing.Optional[StandingOptions] = None,
) -> Standing:
    """Compute every course grade and the overall GPA for one student.

    Parameters
    ----------
    courses : Mapping
        Maps each course ID to the course's records. A record is either an
        :class:`Entry` or a mapping accepted by :meth:`Entry.from_record`.
        Invalid records are rejected (and reported in :attr:`Standing.rejected`)
        without preventing the rest from being graded.
    weights : Optional[Mapping]
        Maps course IDs to their category weights. Courses not in the mapping
        use the weights in `options`. Default: None.
    credit_hours : Optional[Mapping]
        Maps course IDs to credit hours. If given, the overall average is
        credit-weighted. Default: None.
    options : Optional[StandingOptions]
        Default: the default options.

    Returns
    -------
    Standing

    Example
    -------
    >>> standing = compute_standing({
    ...     "math": [Entry("quiz", 9, 10, datetime(2024, 9, 1))],
    ...     "art": [],
    ... })
    >>> standing.summary.course_count
    1

    """
    options = StandingOptions.resolve(options)
    weights = {} if weights is None else weights

    results = {}
    rejected = []
    for course_id, records in courses.items():
        entries, bad = coerce_entries(records, course_id=course_id)
        rejected.extend(bad)
        results[course_id] = compute_course_grade(
            course_id, entries, weights.get(course_id), options=options
        )

    summary = compute_gpa(results.values(), credit_hours=credit_hours, scale=options.scale)
    return Standing(courses=results, summary=summary, rejected=tuple(rejected))
