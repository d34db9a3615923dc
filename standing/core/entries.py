"""Graded entries and the categories they belong to."""

from __future__ import annotations

import dataclasses
import enum
import math
import typing

import pandas as pd

from ..exceptions import InvalidEntryError


class Category(enum.Enum):
    """One of the four fixed components of a course grade.

    The order in which the members are declared is the order in which
    categories are iterated and summed everywhere in the package.

    """

    ASSIGNMENT = "assignment"
    QUIZ = "quiz"
    PARTICIPATION = "participation"
    ATTENDANCE = "attendance"

    @classmethod
    def coerce(cls, value) -> "Category":
        """Convert a member or its (case-insensitive) name to a :class:`Category`.

        Raises
        ------
        InvalidEntryError
            If the value does not name one of the categories.

        """
        if isinstance(value, cls):
            return value

        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass

        raise InvalidEntryError(
            "category",
            value,
            f"Unknown category {value!r}. Must be one of {[c.value for c in cls]}.",
        )

    @property
    def display_name(self) -> str:
        return {
            Category.ASSIGNMENT: "Assignments",
            Category.QUIZ: "Quizzes",
            Category.PARTICIPATION: "Participation",
            Category.ATTENDANCE: "Attendance",
        }[self]

    def __repr__(self):
        return f"Category.{self.name}"


def _is_missing(value):
    if value is None:
        return True
    return pd.api.types.is_scalar(value) and not isinstance(value, str) and pd.isna(value)


def _check_amount(field, value):
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise InvalidEntryError(field, value, f"{field!r} must be a number.") from None

    if not math.isfinite(amount):
        raise InvalidEntryError(field, value, f"{field!r} must be finite.")

    return amount


@dataclasses.dataclass(frozen=True)
class Entry:
    """A single graded item, such as one quiz or one homework.

    Entries are immutable. A regrade produces a new entry; see :meth:`regrade`.

    Attributes
    ----------
    category : Category
        The category the item counts toward. A string naming the category is
        also accepted, and is converted on construction.
    earned : float
        The number of points earned. Must be non-negative.
    possible : float
        The number of points possible. Must be strictly positive.
    recorded_at
        When the grade was recorded. Only used to order entries when
        determining a trend, so anything orderable will do, though typically
        this is a :class:`datetime.datetime`.
    name : Optional[str]
        An optional name for the item, used only for display.

    Raises
    ------
    InvalidEntryError
        If the category is unknown, if either amount is not a finite number,
        if `earned` is negative, or if `possible` is not positive.

    """

    category: Category
    earned: float
    possible: float
    recorded_at: typing.Any
    name: typing.Optional[str] = None

    def __post_init__(self):
        # frozen, so fields are set through object.__setattr__
        object.__setattr__(self, "category", Category.coerce(self.category))

        earned = _check_amount("earned", self.earned)
        possible = _check_amount("possible", self.possible)

        if earned < 0:
            raise InvalidEntryError(
                "earned", self.earned, "Points earned cannot be negative."
            )

        if possible <= 0:
            raise InvalidEntryError(
                "possible", self.possible, "Points possible must be positive."
            )

        if _is_missing(self.recorded_at):
            raise InvalidEntryError(
                "recorded_at", None, "Entries must have a recorded time."
            )

        object.__setattr__(self, "earned", earned)
        object.__setattr__(self, "possible", possible)

    @classmethod
    def from_record(cls, record: typing.Mapping) -> "Entry":
        """Create an entry from a mapping, such as one row of exported grades.

        The mapping must have the keys "category", "earned", "possible", and
        "recorded_at", and may have a "name". A string "recorded_at" is parsed
        as a timestamp. Other keys are ignored.

        Raises
        ------
        InvalidEntryError
            If a required key is missing or the record is otherwise invalid.

        """
        kwargs = {}
        for field in ("category", "earned", "possible", "recorded_at"):
            value = record.get(field)
            if _is_missing(value):
                raise InvalidEntryError(field, value, f"Record is missing {field!r}.")
            kwargs[field] = value

        if isinstance(kwargs["recorded_at"], str):
            try:
                kwargs["recorded_at"] = pd.Timestamp(kwargs["recorded_at"])
            except ValueError:
                raise InvalidEntryError(
                    "recorded_at",
                    kwargs["recorded_at"],
                    f"Could not parse {kwargs['recorded_at']!r} as a time.",
                ) from None

        name = record.get("name")
        if isinstance(name, str):
            kwargs["name"] = name

        return cls(**kwargs)

    @property
    def percentage(self) -> float:
        """The entry's own score, as a percentage of the points possible."""
        return 100 * self.earned / self.possible

    def regrade(self, earned: float, recorded_at=None) -> "Entry":
        """Return a new entry with a different number of points earned.

        Parameters
        ----------
        earned : float
            The new number of points earned.
        recorded_at
            When the regrade was recorded. If `None`, the original time is kept.

        Returns
        -------
        Entry
            The regraded entry. The original is unchanged.

        """
        changes = {"earned": earned}
        if recorded_at is not None:
            changes["recorded_at"] = recorded_at
        return dataclasses.replace(self, **changes)
