from pydantic import BaseModel, Field

from app.schemas.assignment import AssignmentGroup
from app.schemas.course import Course
from app.schemas.submission import LearnerSubmission


class LearnerSummary(BaseModel):
    id: int
    avg: float  # fraction, not clamped
    scores_by_assignment: dict[int, float] = Field(default_factory=dict)


class LearnerDataRequest(BaseModel):
    course: Course
    assignment_group: AssignmentGroup
    submissions: list[LearnerSubmission] = Field(default_factory=list)
