"""Options configuring how a standing is computed."""

from __future__ import annotations

import dataclasses
import typing

from ..scales import LETTER_SCALE, check_scale
from ..trends import DEFAULT_DEADBAND, DEFAULT_WINDOW, check_trend_parameters
from .weights import DEFAULT_WEIGHTS, CategoryWeights


@dataclasses.dataclass(frozen=True)
class StandingOptions:
    """Configures the behavior of :func:`compute_course_grade` and friends.

    Attributes
    ----------
    weights: CategoryWeights
        The category weights used for any course that does not have weights
        of its own. Plain dictionaries are converted on construction.
        Default: :attr:`DEFAULT_WEIGHTS`.

    trend_window: int
        The number of most recent scores compared against the earlier scores
        when determining a course's trend. Default: 3.

    trend_deadband: float
        How far apart, in percentage points, the recent and earlier means must
        be before a course is considered improving or declining. Default: 2.0.

    scale: OrderedDict
        The letter grade scale. Default: :attr:`LETTER_SCALE`.

    Raises
    ------
    ValueError
        If any of the options is invalid.

    """

    weights: CategoryWeights = DEFAULT_WEIGHTS
    trend_window: int = DEFAULT_WINDOW
    trend_deadband: float = DEFAULT_DEADBAND
    scale: typing.Mapping[str, float] = dataclasses.field(
        default_factory=lambda: LETTER_SCALE.copy()
    )

    def __post_init__(self):
        object.__setattr__(self, "weights", CategoryWeights.resolve(self.weights))
        check_trend_parameters(self.trend_window, self.trend_deadband)
        check_scale(self.scale)

    @classmethod
    def resolve(cls, options) -> "StandingOptions":
        return cls() if options is None else options
