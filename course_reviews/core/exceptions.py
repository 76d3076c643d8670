"""Error taxonomy shared by the server handlers and the client service."""

from typing import Optional


class CourseReviewError(Exception):
    """Base class for all course review errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ReviewValidationError(CourseReviewError):
    """A submission failed a field rule. Never retried."""

    kind = "ValidationError"

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class MissingField(ReviewValidationError):
    kind = "MissingField"

    def __init__(self, field: str = "courseCode"):
        super().__init__(f"{field} is required", field=field)


class InvalidRating(ReviewValidationError):
    kind = "InvalidRating"

    def __init__(self, field: str = "rating"):
        super().__init__(f"{field} must be between 1 and 5", field=field)


class InvalidReviewText(ReviewValidationError):
    kind = "InvalidReviewText"

    def __init__(self, min_length: int = 20):
        super().__init__(
            f"reviewText is required and must be at least {min_length} characters",
            field="reviewText",
        )


class ReviewNotFound(CourseReviewError):
    def __init__(self, review_id: str):
        self.review_id = review_id
        super().__init__("Review not found")


class StoreFailure(CourseReviewError):
    """A persistence-layer exception, with the underlying message kept for diagnostics."""

    def __init__(self, summary: str, details: str):
        self.summary = summary
        self.details = details
        super().__init__(summary)


class RecommendationFailure(CourseReviewError):
    def __init__(self, summary: str, details: str):
        self.summary = summary
        self.details = details
        super().__init__(summary)


class ReviewAPIError(CourseReviewError):
    """Non-2xx response received by the client that has no more specific mapping."""

    def __init__(self, status_code: int, message: str, details: Optional[str] = None):
        self.status_code = status_code
        self.details = details
        super().__init__(message)
