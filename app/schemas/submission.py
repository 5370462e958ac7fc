from typing import Any, Optional

from pydantic import BaseModel


class SubmissionDetail(BaseModel):
    submitted_at: Optional[str] = None
    # raw value as received; parse_score decides whether it is a number
    score: Any = None


class LearnerSubmission(BaseModel):
    learner_id: int
    assignment_id: int
    submission: SubmissionDetail
