from .entries import Category, Entry
from .weights import CategoryWeights, DEFAULT_WEIGHTS, normalize_weights
from .aggregate import CategoryTotals, aggregate_categories, entries_to_frame
from .options import StandingOptions
from .course import CategoryBreakdown, CourseGradeResult, compute_course_grade
from .gpa import EMPTY_SUMMARY, GPASummary, compute_gpa, average_grade_points
from .standing import RejectedRecord, Standing, coerce_entries, compute_standing

__all__ = [
    "Category",
    "Entry",
    "CategoryWeights",
    "DEFAULT_WEIGHTS",
    "normalize_weights",
    "CategoryTotals",
    "aggregate_categories",
    "entries_to_frame",
    "StandingOptions",
    "CategoryBreakdown",
    "CourseGradeResult",
    "compute_course_grade",
    "EMPTY_SUMMARY",
    "GPASummary",
    "compute_gpa",
    "average_grade_points",
    "RejectedRecord",
    "Standing",
    "coerce_entries",
    "compute_standing",
]
