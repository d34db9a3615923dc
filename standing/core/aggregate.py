"""Reduce a course's entries to per-category point totals."""

from __future__ import annotations

import dataclasses
import typing

import pandas as pd

from .entries import Category, Entry


@dataclasses.dataclass(frozen=True)
class CategoryTotals:
    """Points earned and possible in one category of a course.

    Attributes
    ----------
    earned : float
        Total points earned across the category's entries.
    possible : float
        Total points possible across the category's entries. Always positive.

    """

    earned: float
    possible: float

    @property
    def percentage(self) -> float:
        return 100 * self.earned / self.possible


def entries_to_frame(entries: typing.Iterable[Entry]) -> pd.DataFrame:
    """Tabulate entries, one row per entry.

    Parameters
    ----------
    entries : Iterable[Entry]
        The entries to tabulate.

    Returns
    -------
    pd.DataFrame
        A table with columns "category" (the category's value as a string),
        "earned", "possible", "recorded_at", and "name". The rows are in the
        order the entries were given.

    Raises
    ------
    TypeError
        If something other than an :class:`Entry` is given.

    """
    rows = []
    for entry in entries:
        if not isinstance(entry, Entry):
            raise TypeError(f"Expected an Entry, got {type(entry).__name__}.")
        rows.append(
            {
                "category": entry.category.value,
                "earned": entry.earned,
                "possible": entry.possible,
                "recorded_at": entry.recorded_at,
                "name": entry.name,
            }
        )

    columns = ["category", "earned", "possible", "recorded_at", "name"]
    return pd.DataFrame(rows, columns=columns)


def aggregate_categories(entries: typing.Iterable[Entry]) -> dict[Category, CategoryTotals]:
    """Sum points earned and possible within each category.

    A category is *active* if it has at least one entry and its total points
    possible is positive. Inactive categories are absent from the result; they
    are not treated as a score of zero.

    Parameters
    ----------
    entries : Iterable[Entry]
        All of the entries for a single course.

    Returns
    -------
    dict[Category, CategoryTotals]
        The totals for each active category, in :class:`Category` order.

    Raises
    ------
    TypeError
        If something other than an :class:`Entry` is given.

    """
    table = entries_to_frame(entries)
    if table.empty:
        return {}

    sums = table.groupby("category")[["earned", "possible"]].sum()

    result = {}
    for category in Category:
        if category.value not in sums.index:
            continue

        earned = float(sums.loc[category.value, "earned"])
        possible = float(sums.loc[category.value, "possible"])
        if possible > 0:
            result[category] = CategoryTotals(earned=earned, possible=possible)

    return result
