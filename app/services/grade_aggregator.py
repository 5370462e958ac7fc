import logging
import math
from datetime import date, datetime
from typing import Iterable, Optional

from pydantic import TypeAdapter, ValidationError

from app.core.config import LATE_PENALTY_FRACTION
from app.schemas.assignment import AssignmentGroup
from app.schemas.course import Course
from app.schemas.learner_summary import LearnerSummary
from app.schemas.submission import LearnerSubmission

logger = logging.getLogger(__name__)

_date_adapter = TypeAdapter(date)
_datetime_adapter = TypeAdapter(datetime)


class DomainMismatchError(ValueError):
    """The assignment group does not belong to the course."""


def parse_score(raw) -> Optional[float]:
    """
    Returns the score as a finite float, or None when it is not a number.

    Numeric strings ("150", " 42.5 ") are accepted. Empty strings, NaN,
    infinities, booleans and None are not.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        if not raw.strip():
            return None
        try:
            value = float(raw)
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(value):
        return None
    return value


def parse_date(raw) -> Optional[date]:
    """Reads a date, datetime or ISO-8601 string as a calendar date."""
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if not isinstance(raw, str) or not raw.strip():
        return None

    text = raw.strip()
    try:
        return _date_adapter.validate_python(text)
    except ValidationError:
        pass
    # "2023-01-25T23:59:00" is not an exact date; read it as a datetime
    try:
        return _datetime_adapter.validate_python(text).date()
    except ValidationError:
        return None


def _late_adjusted_score(
    score: float,
    points_possible: float,
    submitted: Optional[date],
    due: Optional[date],
) -> tuple[bool, float]:
    """
    Returns: (is_late, score)

    Late means submitted on a later calendar day than due. An unknown date on
    either side is never late. The deduction is a flat LATE_PENALTY_FRACTION
    of points_possible and may take the score below zero.
    """
    if submitted is None or due is None or submitted <= due:
        return (False, score)
    return (True, score - points_possible * LATE_PENALTY_FRACTION)


class _LearnerTotals:
    __slots__ = ("learner_id", "total_score", "total_possible", "scores_by_assignment")

    def __init__(self, learner_id: int):
        self.learner_id = learner_id
        self.total_score = 0.0
        self.total_possible = 0.0
        self.scores_by_assignment: dict[int, float] = {}

    def to_summary(self) -> LearnerSummary:
        avg = self.total_score / self.total_possible if self.total_possible > 0 else 0.0
        return LearnerSummary(
            id=self.learner_id,
            avg=avg,
            scores_by_assignment=dict(self.scores_by_assignment),
        )


def _process_submission(
    sub: LearnerSubmission,
    group: AssignmentGroup,
    today: date,
    learners: dict[int, _LearnerTotals],
) -> None:
    assignment = group.find_assignment(sub.assignment_id)
    if assignment is None:
        logger.warning(
            "Assignment %s not found (learner %s)", sub.assignment_id, sub.learner_id
        )
        return

    if assignment.points_possible <= 0:
        logger.warning(
            "Invalid points_possible %s for assignment %s",
            assignment.points_possible,
            assignment.id,
        )
        return

    due = parse_date(assignment.due_at)
    if due is None:
        # unknown due date: graded as already due, never late
        logger.warning("Invalid due_at %r for assignment %s", assignment.due_at, assignment.id)
    elif due > today:
        logger.debug("Assignment %s not yet due (%s), skipping", assignment.id, due)
        return

    score = parse_score(sub.submission.score)
    if score is None:
        logger.warning(
            "Invalid score %r for learner %s on assignment %s",
            sub.submission.score,
            sub.learner_id,
            assignment.id,
        )
        return

    submitted = parse_date(sub.submission.submitted_at)
    if submitted is None:
        logger.warning(
            "Invalid submitted_at %r for learner %s on assignment %s; no late penalty",
            sub.submission.submitted_at,
            sub.learner_id,
            assignment.id,
        )

    is_late, score = _late_adjusted_score(score, assignment.points_possible, submitted, due)
    if is_late:
        logger.info(
            "Late penalty applied: learner %s, assignment %s (submitted %s, due %s)",
            sub.learner_id,
            assignment.id,
            submitted,
            due,
        )

    totals = learners.get(sub.learner_id)
    if totals is None:
        totals = learners[sub.learner_id] = _LearnerTotals(sub.learner_id)

    if assignment.id in totals.scores_by_assignment:
        # list order decides: the later submission's fraction replaces the earlier one
        logger.warning(
            "Duplicate submission: learner %s, assignment %s; keeping the later one",
            sub.learner_id,
            assignment.id,
        )

    totals.total_score += score
    totals.total_possible += assignment.points_possible
    totals.scores_by_assignment[assignment.id] = score / assignment.points_possible


def aggregate(
    course: Course,
    assignment_group: AssignmentGroup,
    submissions: Iterable[LearnerSubmission],
    now: date,
) -> list[LearnerSummary]:
    """
    Weighted average per learner over the assignments that are already due.

    Raises DomainMismatchError if the group belongs to another course. Any
    submission that cannot be graded is logged and skipped; the rest are
    still aggregated. Learners come back in the order first seen.
    """
    if assignment_group.course_id != course.id:
        raise DomainMismatchError(
            f"Assignment group {assignment_group.id} belongs to course "
            f"{assignment_group.course_id}, not course {course.id}"
        )

    today = now.date() if isinstance(now, datetime) else now
    learners: dict[int, _LearnerTotals] = {}

    for sub in submissions:
        try:
            _process_submission(sub, assignment_group, today, learners)
        except Exception:
            logger.exception(
                "Error processing submission: learner %s, assignment %s",
                sub.learner_id,
                sub.assignment_id,
            )

    return [totals.to_summary() for totals in learners.values()]
