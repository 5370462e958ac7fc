from app.schemas.assignment import Assignment, AssignmentGroup
from app.schemas.course import Course
from app.schemas.submission import LearnerSubmission, SubmissionDetail

# Built-in dataset served by GET /learner-data. Fresh instances on every call
# so a request can never leak changes into the next one.


def get_sample_course() -> Course:
    return Course(id=451, name="Introduction to JavaScript")


def get_sample_assignment_group() -> AssignmentGroup:
    return AssignmentGroup(
        id=12345,
        name="Fundamentals of JavaScript",
        course_id=451,
        group_weight=25,
        assignments=[
            Assignment(id=1, name="Declare a Variable", due_at="2023-01-25", points_possible=50),
            Assignment(id=2, name="Write a Function", due_at="2023-02-27", points_possible=150),
            # far future: never due, never graded
            Assignment(id=3, name="Code the World", due_at="3156-11-15", points_possible=500),
        ],
    )


def get_sample_submissions() -> list[LearnerSubmission]:
    rows = [
        (125, 1, "2023-01-25", 47),
        (125, 2, "2023-02-12", 150),
        (125, 3, "2023-01-25", 400),
        (132, 1, "2023-01-24", 39),
        (132, 2, "2023-03-07", 140),  # late
    ]
    return [
        LearnerSubmission(
            learner_id=learner_id,
            assignment_id=assignment_id,
            submission=SubmissionDetail(submitted_at=submitted_at, score=score),
        )
        for learner_id, assignment_id, submitted_at, score in rows
    ]
