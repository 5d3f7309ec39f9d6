"""
Student tool API endpoints.
"""

from typing import Dict, List, Optional

from fastapi import APIRouter
from pydantic import Field

from freetools.api.schemas import CamelModel, ToolResponse
from freetools.calculations import gpa

router = APIRouter()


class CourseInput(CamelModel):
    course_name: Optional[str] = None
    credits: Optional[float] = None
    grade: Optional[str] = None


class GPAInput(CamelModel):
    """Input for GPA calculation."""

    semester: Optional[int] = None
    courses: Optional[List[CourseInput]] = None


class CourseResult(CamelModel):
    course_name: str
    credits: float
    grade: str
    grade_points: float
    quality_points: float


class GPAResult(CamelModel):
    semester: Optional[int] = None
    courses: List[CourseResult]
    semester_gpa: float = Field(alias="semesterGPA")
    cumulative_gpa: float = Field(alias="cumulativeGPA")
    total_credits: float
    total_quality_points: float
    grade_distribution: Dict[str, int]


@router.post("/gpa-calculator/calculate", response_model=ToolResponse[GPAResult])
async def calculate_gpa(inputs: GPAInput):
    """Calculate semester GPA from course grades and credits."""
    courses = None
    if inputs.courses is not None:
        courses = [course.model_dump() for course in inputs.courses]
    result = gpa.calculate_gpa(inputs.semester, courses)
    return {"success": True, "data": result}
