"""
GPA Calculations

Semester GPA as credit-weighted grade points on a 4.0 scale.
"""

import logging
from typing import List, Dict, Optional

from freetools.calculations.rounding import round_money
from freetools.calculations.validation import (
    InvalidEnumError,
    MissingFieldError,
    OutOfRangeError,
)

logger = logging.getLogger(__name__)

GRADE_POINTS = {
    "A+": 4.0,
    "A": 4.0,
    "A-": 3.7,
    "B+": 3.3,
    "B": 3.0,
    "B-": 2.7,
    "C+": 2.3,
    "C": 2.0,
    "C-": 1.7,
    "D+": 1.3,
    "D": 1.0,
    "F": 0.0,
}


def calculate_grade_points(grade: str) -> float:
    """Grade points for a letter grade; unknown grades count as 0."""
    return GRADE_POINTS.get(grade, 0.0)


def calculate_grade_distribution(courses: List[Dict]) -> Dict[str, int]:
    """Count courses per letter grade."""
    distribution = {grade: 0 for grade in GRADE_POINTS}
    for course in courses:
        if course.get("grade") in distribution:
            distribution[course["grade"]] += 1
    return distribution


def validate_courses(courses: Optional[List[Dict]]) -> None:
    """
    Check every course has a name, a credit load of 1-10 and a known grade.

    Raises:
        CalculationValidationError: On the first invalid course
    """
    if not courses:
        raise MissingFieldError("courses", "At least one course is required")

    for course in courses:
        name = course.get("course_name") or ""
        if len(name.strip()) < 2:
            raise OutOfRangeError("courseName", "Invalid course name")

        credits = course.get("credits")
        if credits is None or credits < 1 or credits > 10:
            raise OutOfRangeError("credits", "Credits must be between 1 and 10")

        grade = course.get("grade")
        if grade not in GRADE_POINTS:
            raise InvalidEnumError("grade", f"Invalid grade: {grade}")


def calculate_gpa(semester: Optional[int], courses: Optional[List[Dict]]) -> Dict:
    """
    Calculate semester GPA, quality points and grade distribution.

    Cumulative GPA equals the semester GPA since earlier semesters are not
    stored.

    Args:
        semester: Semester number, echoed back
        courses: List of {"course_name", "credits", "grade"}

    Returns:
        GPA result
    """
    validate_courses(courses)

    total_quality_points = 0.0
    total_credits = 0.0
    rows = []

    for course in courses:
        grade_points = calculate_grade_points(course["grade"])
        quality_points = grade_points * course["credits"]
        total_quality_points += quality_points
        total_credits += course["credits"]

        rows.append(
            {
                "course_name": course["course_name"],
                "credits": course["credits"],
                "grade": course["grade"],
                "grade_points": grade_points,
                "quality_points": round_money(quality_points),
            }
        )

    semester_gpa = round_money(total_quality_points / total_credits)
    logger.debug(f"GPA over {total_credits} credits: {semester_gpa}")

    return {
        "semester": semester,
        "courses": rows,
        "semester_gpa": semester_gpa,
        "cumulative_gpa": semester_gpa,
        "total_credits": total_credits,
        "total_quality_points": round_money(total_quality_points),
        "grade_distribution": calculate_grade_distribution(courses),
    }
