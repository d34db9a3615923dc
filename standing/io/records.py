"""Read grade entries exported by the grade record store.

Records are tabular, one row per graded item, with columns:

    - "course": identifies the course the item belongs to
    - "category": one of "assignment", "quiz", "participation", "attendance"
    - "earned": points earned
    - "possible": points possible
    - "recorded_at": when the grade was recorded
    - "name": (optional) the item's name

Rows that cannot be turned into an :class:`Entry` -- for instance, a row with
zero points possible -- are rejected and reported, never silently counted as
a zero.

"""

from __future__ import annotations

import dataclasses
import logging
import typing
from collections.abc import Mapping

import pandas as pd

from ..core import Entry
from ..core.standing import RejectedRecord, coerce_entries

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["course", "category", "earned", "possible", "recorded_at"]


@dataclasses.dataclass(frozen=True)
class RecordBatch:
    """The result of reading a batch of records.

    Attributes
    ----------
    entries : tuple[tuple[Any, Entry], ...]
        The course ID and entry of each valid record, in the order read.
    rejected : tuple[RejectedRecord, ...]
        The records which were rejected as invalid.

    """

    entries: typing.Tuple[typing.Tuple[typing.Any, Entry], ...]
    rejected: typing.Tuple[RejectedRecord, ...] = ()

    def by_course(self) -> dict[typing.Any, list[Entry]]:
        """Group the valid entries by course, keeping courses in the order first seen."""
        grouped = {}
        for course_id, entry in self.entries:
            grouped.setdefault(course_id, []).append(entry)
        return grouped


def from_records(records: typing.Iterable[typing.Mapping]) -> RecordBatch:
    """Read entries from an iterable of mappings, one per graded item.

    Parameters
    ----------
    records : Iterable[Mapping]
        The records. Each must have a "course" key in addition to the keys
        required by :meth:`Entry.from_record`.

    Returns
    -------
    RecordBatch

    """
    entries, rejected = [], []
    for record in records:
        course_id = record.get("course") if isinstance(record, Mapping) else None
        good, bad = coerce_entries([record], course_id=course_id)
        entries.extend((course_id, entry) for entry in good)
        rejected.extend(bad)

    if rejected:
        logger.warning("Rejected %d of %d records.", len(rejected), len(rejected) + len(entries))

    return RecordBatch(entries=tuple(entries), rejected=tuple(rejected))


def from_frame(table: pd.DataFrame) -> RecordBatch:
    """Read entries from a dataframe with one row per graded item.

    Raises
    ------
    ValueError
        If a required column is missing.

    """
    missing = [c for c in REQUIRED_COLUMNS if c not in table.columns]
    if missing:
        raise ValueError(f"Records are missing the columns {missing}.")

    table = table.copy()
    table["recorded_at"] = pd.to_datetime(table["recorded_at"], errors="coerce")

    # NaN in numeric columns becomes None so that it is reported as missing
    records = table.astype(object).where(table.notna(), None).to_dict(orient="records")
    return from_records(records)


def read(path, **kwargs) -> RecordBatch:
    """Read a CSV of grade records.

    Parameters
    ----------
    path : str or pathlib.Path
        Path to the CSV file that will be read.
    **kwargs
        Passed to :func:`pandas.read_csv`.

    Returns
    -------
    RecordBatch

    Raises
    ------
    ValueError
        If a required column is missing.

    """
    table = pd.read_csv(path, **kwargs)
    table.columns = [c.strip().lower() for c in table.columns]
    return from_frame(table)
