"""Course recommendation boundary.

Callers only depend on the result shapes in models.recommendation; the
provider behind it is swappable. The mock serves static course data.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from course_reviews.core.exceptions import RecommendationFailure
from course_reviews.models.recommendation import CourseDescriptor, CourseDetails, StudentProfile

log = logging.getLogger(__name__)


class RecommendationProvider(ABC):
    @abstractmethod
    def get_course_recommendations(self, profile: StudentProfile) -> List[CourseDescriptor]:
        """Ordered list of courses suggested for the student."""

    @abstractmethod
    def get_course_details(self, course_code: str) -> Optional[CourseDetails]:
        """Full course record, or None when the course is unknown."""

    @abstractmethod
    def search_courses(self, query: str) -> List[CourseDescriptor]:
        """Courses whose name or code contains the query, case-insensitively."""


_MOCK_COURSES = [
    CourseDescriptor(
        course_code="CASCS131",
        course_name="Combinatoric Structures",
        college_code="CAS",
        subject_code="CS",
        course_number="131",
        units=4,
        description="Fundamental concepts in discrete mathematics with a focus on combinatorics and graph theory.",
        prerequisites=["CASCS111"],
        hub_areas=["Quantitative Reasoning"],
        instructors=["Prof. Reyzin"],
        schedule="MWF 10:10-11:00",
        semester="Fall 2025",
    ),
    CourseDescriptor(
        course_code="CASCS132",
        course_name="Geometric Algorithms",
        college_code="CAS",
        subject_code="CS",
        course_number="132",
        units=4,
        description="Introduction to computational geometry and spatial algorithms.",
        prerequisites=["CASCS131"],
        hub_areas=["Quantitative Reasoning", "Critical Thinking"],
        instructors=["Prof. Smith"],
        schedule="TTH 11:00-12:30",
        semester="Fall 2025",
    ),
    CourseDescriptor(
        course_code="CASLF309",
        course_name="French Literature",
        college_code="CAS",
        subject_code="LF",
        course_number="309",
        units=4,
        description="Survey of French literature from the 18th century to present.",
        prerequisites=["CASLF210"],
        hub_areas=["Aesthetic Exploration", "Global Citizenship"],
        instructors=["Prof. Dubois"],
        schedule="MW 2:30-4:00",
        semester="Fall 2025",
    ),
]

_MOCK_DETAILS = {
    "CASCS131": CourseDetails(
        course_code="CASCS131",
        course_name="Combinatoric Structures",
        college_code="CAS",
        subject_code="CS",
        course_number="131",
        units=4,
        description=(
            "Fundamental concepts in discrete mathematics with a focus on combinatorics "
            "and graph theory. Topics include counting, recurrence relations, generating "
            "functions, and graph algorithms."
        ),
        prerequisites=["CASCS111"],
        corequisites=[],
        hub_areas=["Quantitative Reasoning"],
        instructors=["Prof. Reyzin", "Prof. Johnson"],
        schedule="MWF 10:10-11:00",
        semester="Fall 2025",
        location="STO B50",
        capacity=80,
        enrolled=65,
        waitlist=5,
    ),
}


class MockRecommendationProvider(RecommendationProvider):
    def get_course_recommendations(self, profile: StudentProfile) -> List[CourseDescriptor]:
        log.info("Serving mock recommendations (major=%s)", profile.major)
        return [c.model_copy() for c in _MOCK_COURSES]

    def get_course_details(self, course_code: str) -> Optional[CourseDetails]:
        details = _MOCK_DETAILS.get(course_code)
        return details.model_copy() if details else None

    def search_courses(self, query: str) -> List[CourseDescriptor]:
        needle = query.lower()
        return [
            c.model_copy()
            for c in _MOCK_COURSES
            if needle in c.course_name.lower() or needle in c.course_code.lower()
        ]


class RecommendationService:
    """Wraps a provider so any provider failure surfaces as RecommendationFailure."""

    def __init__(self, provider: RecommendationProvider):
        self.provider = provider

    def _call(self, summary: str, func, *args):
        try:
            return func(*args)
        except Exception as exc:
            log.exception(summary)
            raise RecommendationFailure(summary, str(exc)) from exc

    def recommend(self, profile: StudentProfile) -> List[CourseDescriptor]:
        return self._call(
            "Failed to get course recommendations",
            self.provider.get_course_recommendations,
            profile,
        )

    def course_details(self, course_code: str) -> Optional[CourseDetails]:
        return self._call("Failed to get course details", self.provider.get_course_details, course_code)

    def search(self, query: str) -> List[CourseDescriptor]:
        return self._call("Failed to search courses", self.provider.search_courses, query)
