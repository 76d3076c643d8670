"""Admissibility rules for raw review submissions.

Rules are checked in a fixed order (courseCode, rating, reviewText, then the
optional submetric ratings) and the first failure is raised, so callers can
display a single message per submission.
"""

import math
from collections.abc import Mapping
from typing import Any, Optional, Union

from course_reviews.core.exceptions import (
    InvalidRating,
    InvalidReviewText,
    MissingField,
)

RATING_MIN = 1
RATING_MAX = 5
MIN_REVIEW_TEXT_LENGTH = 20
OPTIONAL_RATING_FIELDS = ("difficultyRating", "workloadRating", "profHelpfulnessRating")

Number = Union[int, float]


def parse_number(value: Any) -> Optional[Number]:
    """Return `value` as a finite number, or None when it is not numeric.

    Numeric strings ("4", " 3.5 ") are accepted. Booleans are not numbers here.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except (ValueError, OverflowError):
            return None
        return number if math.isfinite(number) else None
    return None


def is_valid_rating(value: Any) -> bool:
    number = parse_number(value)
    return number is not None and RATING_MIN <= number <= RATING_MAX


def is_absent(value: Any) -> bool:
    """Optional fields are absent when missing, null or blank. 0 is a value."""
    return value is None or (isinstance(value, str) and not value.strip())


def validate_submission(submission: Any) -> None:
    """Raise the first failing rule's error; return None when accepted."""
    if not isinstance(submission, Mapping):
        raise MissingField("courseCode")

    course_code = submission.get("courseCode")
    if not isinstance(course_code, str) or not course_code.strip():
        raise MissingField("courseCode")

    if not is_valid_rating(submission.get("rating")):
        raise InvalidRating("rating")

    text = submission.get("reviewText")
    if not isinstance(text, str) or len(text.strip()) < MIN_REVIEW_TEXT_LENGTH:
        raise InvalidReviewText(MIN_REVIEW_TEXT_LENGTH)

    for field in OPTIONAL_RATING_FIELDS:
        value = submission.get(field)
        if not is_absent(value) and not is_valid_rating(value):
            raise InvalidRating(field)
