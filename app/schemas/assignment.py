from typing import Optional

from pydantic import BaseModel, Field


class Assignment(BaseModel):
    id: int
    name: Optional[str] = None
    # date-like string; parsed per submission by the aggregator
    due_at: str
    points_possible: float


class AssignmentGroup(BaseModel):
    id: int
    name: Optional[str] = None
    course_id: int
    group_weight: Optional[float] = None
    assignments: list[Assignment] = Field(default_factory=list)

    def find_assignment(self, assignment_id: int) -> Optional[Assignment]:
        for a in self.assignments:
            if a.id == assignment_id:
                return a
        return None
