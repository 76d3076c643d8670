"""Turn an accepted submission into the canonical persisted review shape."""

import math
from collections.abc import Mapping
from typing import Any, Optional

from course_reviews.models.review import ANONYMOUS_AUTHOR, NewReview
from course_reviews.utils.validation import is_absent, parse_number


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def coerce_rating(value: Any) -> Optional[int]:
    """Truncate a numeric rating to int. Absent values stay None."""
    if is_absent(value):
        return None
    number = parse_number(value)
    if number is None:
        raise ValueError(f"not a numeric rating: {value!r}")
    return math.trunc(number)


def resolve_anonymity(submission: Mapping) -> bool:
    """Anonymous unless the caller explicitly sent `isAnonymous: false`."""
    return submission.get("isAnonymous") is not False


def normalize_submission(submission: Mapping) -> NewReview:
    """Build a NewReview from a submission that already passed validation.

    Timestamps are left to the store so every review is stamped by the
    database clock.
    """
    anonymous = resolve_anonymity(submission)
    if anonymous:
        author_name = ANONYMOUS_AUTHOR
        author_email = None
    else:
        author_name = _text(submission.get("authorName")) or ANONYMOUS_AUTHOR
        author_email = _text(submission.get("authorEmail")) or None

    return NewReview(
        course_code=_text(submission.get("courseCode")),
        course_name=_text(submission.get("courseName")),
        college_code=_text(submission.get("collegeCode")),
        subject_code=_text(submission.get("subjectCode")),
        course_number=_text(submission.get("courseNumber")),
        rating=coerce_rating(submission.get("rating")),
        review_text=_text(submission.get("reviewText")),
        difficulty_rating=coerce_rating(submission.get("difficultyRating")),
        workload_rating=coerce_rating(submission.get("workloadRating")),
        prof_helpfulness_rating=coerce_rating(submission.get("profHelpfulnessRating")),
        semester_taken=_text(submission.get("semesterTaken")),
        is_anonymous=anonymous,
        author_name=author_name,
        author_email=author_email,
        verified=False,
        helpful_votes=0,
        total_votes=0,
        reported_count=0,
    )
