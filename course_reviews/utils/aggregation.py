"""Per-course statistics folded from review records."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Optional, Sequence

from course_reviews.models.review import CourseStats, Review

ONE_DECIMAL = Decimal("0.1")


def round_half_up(value, places: Decimal = ONE_DECIMAL) -> float:
    """Round in decimal, halves away from zero: 1.25 -> 1.3, 1.45 -> 1.5."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return float(value.quantize(places, rounding=ROUND_HALF_UP))


def mean(values: Sequence[Optional[int]]) -> float:
    """Mean of the non-null values, rounded to one decimal; 0 when none."""
    present = [v for v in values if v is not None]
    if not present:
        return 0
    total = sum(Decimal(str(v)) for v in present)
    return round_half_up(total / Decimal(len(present)))


def average_rating(reviews: Iterable[Review]) -> float:
    return mean([r.rating for r in reviews])


def compute_course_stats(course_code: str, reviews: Iterable[Review]) -> CourseStats:
    reviews: List[Review] = list(reviews)
    return CourseStats(
        course_code=course_code,
        total_reviews=len(reviews),
        average_rating=average_rating(reviews),
        average_difficulty=mean([r.difficulty_rating for r in reviews]),
        average_workload=mean([r.workload_rating for r in reviews]),
        average_prof_helpfulness=mean([r.prof_helpfulness_rating for r in reviews]),
    )
