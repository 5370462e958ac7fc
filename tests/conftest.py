from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from app.core.deps import get_now
from app.main import app
from app.schemas.assignment import Assignment, AssignmentGroup
from app.schemas.course import Course
from app.schemas.submission import LearnerSubmission, SubmissionDetail

FIXED_NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def override_get_now():
    return FIXED_NOW


@pytest.fixture()
def client():
    """Test client with the clock pinned to FIXED_NOW."""
    app.dependency_overrides[get_now] = override_get_now
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def course():
    return Course(id=451, name="Introduction to JavaScript")


@pytest.fixture()
def group():
    """One assignment due in the past, one due after FIXED_NOW."""
    return AssignmentGroup(
        id=12345,
        course_id=451,
        assignments=[
            Assignment(id=1, due_at="2023-01-25", points_possible=50),
            Assignment(id=3, due_at="2030-01-01", points_possible=500),
        ],
    )


def make_submission(learner_id, assignment_id, submitted_at, score):
    return LearnerSubmission(
        learner_id=learner_id,
        assignment_id=assignment_id,
        submission=SubmissionDetail(submitted_at=submitted_at, score=score),
    )
