"""Category weights and their renormalization over active categories."""

from __future__ import annotations

import math
import typing
from collections.abc import Mapping

from .entries import Category


class CategoryWeights(Mapping):
    """The configured weight of each category in a course.

    Behaves like a read-only dictionary mapping every :class:`Category` to a
    weight between 0 and 1. Categories not given when the weights are created
    have weight zero. The weights need not sum to one; they are renormalized
    over the categories that actually have grades by :func:`normalize_weights`.

    Parameters
    ----------
    weights : Mapping
        A mapping from categories (or their names) to weights.

    Raises
    ------
    ValueError
        If a weight is not a number between 0 and 1.
    InvalidEntryError
        If a key does not name a category.

    Example
    -------
    >>> CategoryWeights({"assignment": 0.5, "quiz": 0.5})
    CategoryWeights({'assignment': 0.5, 'quiz': 0.5, 'participation': 0.0, 'attendance': 0.0})

    """

    def __init__(self, weights: typing.Mapping = None):
        weights = {} if weights is None else weights

        resolved = {category: 0.0 for category in Category}
        for key, weight in weights.items():
            category = Category.coerce(key)
            try:
                weight = float(weight)
            except (TypeError, ValueError):
                raise ValueError(f"Weight for {category.value} must be a number.") from None

            if math.isnan(weight) or not 0 <= weight <= 1:
                raise ValueError(
                    f"Weight for {category.value} must be between 0 and 1, got {weight}."
                )

            resolved[category] = weight

        self._weights = resolved

    def __getitem__(self, category):
        return self._weights[Category.coerce(category)]

    def __iter__(self):
        return iter(self._weights)

    def __len__(self):
        return len(self._weights)

    def __eq__(self, other):
        if isinstance(other, CategoryWeights):
            return self._weights == other._weights
        if isinstance(other, Mapping):
            try:
                return self == CategoryWeights(other)
            except ValueError:
                return False
        return NotImplemented

    def __hash__(self):
        return hash(tuple(self._weights.items()))

    def __repr__(self):
        inner = {c.value: w for c, w in self._weights.items()}
        return f"CategoryWeights({inner!r})"

    @property
    def total(self) -> float:
        """The sum of all configured weights."""
        return sum(self._weights.values())

    def replace(self, category, weight: float) -> "CategoryWeights":
        """Return new weights with a single category's weight changed."""
        new = {c.value: w for c, w in self._weights.items()}
        new[Category.coerce(category).value] = weight
        return CategoryWeights(new)

    @classmethod
    def resolve(cls, weights) -> "CategoryWeights":
        """Convert a mapping to :class:`CategoryWeights`, falling back to defaults on `None`."""
        if weights is None:
            return DEFAULT_WEIGHTS
        if isinstance(weights, cls):
            return weights
        return cls(weights)


DEFAULT_WEIGHTS = CategoryWeights(
    {
        Category.ASSIGNMENT: 0.4,
        Category.QUIZ: 0.3,
        Category.PARTICIPATION: 0.2,
        Category.ATTENDANCE: 0.1,
    }
)
"""The weights used when a course has no weight configuration of its own."""


def normalize_weights(
    weights: typing.Mapping, active: typing.Collection[Category]
) -> dict[Category, float]:
    """Renormalize configured weights over the active categories.

    The configured weights of the active categories are summed, and each is
    divided by that sum. The resulting effective weights therefore add to one
    and are in the same proportion to one another as the configured weights.
    Inactive categories, and active ones configured with a weight of zero,
    are left out of the result entirely.

    Parameters
    ----------
    weights : Mapping
        The configured weight of each category, such as a
        :class:`CategoryWeights`.
    active : Collection[Category]
        The categories which have grades.

    Returns
    -------
    dict[Category, float]
        A dictionary mapping each active category to its effective weight, in
        :class:`Category` order. If the active categories' configured weights
        sum to zero (for instance, if there are no active categories), this
        is empty: no grade can be computed.

    Example
    -------
    >>> normalize_weights(DEFAULT_WEIGHTS, [Category.ASSIGNMENT, Category.QUIZ])
    {Category.ASSIGNMENT: 0.5714285714285715, Category.QUIZ: 0.4285714285714286}

    """
    weights = CategoryWeights.resolve(weights)
    active = {Category.coerce(c) for c in active}

    ordered = [c for c in Category if c in active]
    active_sum = sum(weights[c] for c in ordered)

    if active_sum == 0:
        return {}

    return {c: weights[c] / active_sum for c in ordered if weights[c] > 0}
