from typing import List, Optional

from .review import CamelModel


class StudentProfile(CamelModel):
    major: Optional[str] = None
    semester: Optional[str] = None
    interests: List[str] = []
    preferences: Optional[str] = None
    completed_courses: List[str] = []


class CourseDescriptor(CamelModel):
    course_code: str
    course_name: str
    college_code: str = ""
    subject_code: str = ""
    course_number: str = ""
    units: int = 0
    description: str = ""
    prerequisites: List[str] = []
    hub_areas: List[str] = []
    instructors: List[str] = []
    schedule: str = ""
    semester: str = ""


class CourseDetails(CourseDescriptor):
    corequisites: List[str] = []
    location: str = ""
    capacity: int = 0
    enrolled: int = 0
    waitlist: int = 0


class RecommendationList(CamelModel):
    recommendations: List[CourseDescriptor]


class CourseSearchResult(CamelModel):
    courses: List[CourseDescriptor]
