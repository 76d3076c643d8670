from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ANONYMOUS_AUTHOR = "Anonymous"


class CamelModel(BaseModel):
    """Snake-case attributes, camelCase on the wire and in MongoDB."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NewReview(CamelModel):
    """Canonical review shape ready for persistence (no id, no timestamps)."""

    course_code: str = Field(..., min_length=1)
    course_name: str = ""
    college_code: str = ""
    subject_code: str = ""
    course_number: str = ""

    rating: int = Field(..., ge=1, le=5)
    review_text: str

    difficulty_rating: Optional[int] = Field(None, ge=1, le=5)
    workload_rating: Optional[int] = Field(None, ge=1, le=5)
    prof_helpfulness_rating: Optional[int] = Field(None, ge=1, le=5)

    semester_taken: str = ""

    is_anonymous: bool = True
    author_name: str = ANONYMOUS_AUTHOR
    author_email: Optional[str] = None

    verified: bool = False
    helpful_votes: int = Field(0, ge=0)
    total_votes: int = Field(0, ge=0)
    reported_count: int = Field(0, ge=0)


class Review(NewReview):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ReviewList(CamelModel):
    reviews: List[Review]
    average_rating: float
    total_reviews: int


class CourseStats(CamelModel):
    course_code: str
    total_reviews: int = 0
    average_rating: float = 0
    average_difficulty: float = 0
    average_workload: float = 0
    average_prof_helpfulness: float = 0


class SubmitReviewResponse(CamelModel):
    success: bool = True
    review_id: str
    message: str = "Review submitted successfully"


class HelpfulVoteResponse(CamelModel):
    success: bool = True
    helpful_votes: int
    total_votes: int


class ReportResponse(CamelModel):
    success: bool = True
    message: str = "Review reported successfully"
