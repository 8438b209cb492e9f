# app/services/matching.py

import math
from typing import List


def calculate_matching_percentage(student_tech_stack: List[str], adviser_expertise: List[str]) -> int:
    """
    Share of the student's technologies that the adviser lists as expertise,
    case-insensitive, rounded to a whole percent.
    """
    if not student_tech_stack or not adviser_expertise:
        return 0

    student_tech = [tech.lower() for tech in student_tech_stack]
    adviser_tech = {tech.lower() for tech in adviser_expertise}

    matches = [tech for tech in student_tech if tech in adviser_tech]
    # half-up, so 12.5 becomes 13
    return math.floor(len(matches) / len(student_tech) * 100 + 0.5)
