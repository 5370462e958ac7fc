import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import HTMLResponse

from app.core.deps import get_now
from app.db.sample_data import (
    get_sample_assignment_group,
    get_sample_course,
    get_sample_submissions,
)
from app.schemas.learner_summary import LearnerDataRequest, LearnerSummary
from app.services.grade_aggregator import DomainMismatchError, aggregate
from app.services.learner_report import render_error_report, render_learner_report

logger = logging.getLogger(__name__)

router = APIRouter()


def _aggregate_or_400(payload: LearnerDataRequest, now: datetime) -> list[LearnerSummary]:
    try:
        return aggregate(payload.course, payload.assignment_group, payload.submissions, now)
    except DomainMismatchError as e:
        logger.warning("Rejected learner data: %s", e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


def _sample_payload() -> LearnerDataRequest:
    return LearnerDataRequest(
        course=get_sample_course(),
        assignment_group=get_sample_assignment_group(),
        submissions=get_sample_submissions(),
    )


@router.get("/learner-data", response_model=list[LearnerSummary])
def sample_learner_data(now: datetime = Depends(get_now)):
    return _aggregate_or_400(_sample_payload(), now)


@router.post(
    "/learner-data",
    response_model=list[LearnerSummary],
    responses={
        400: {"description": "Assignment group does not belong to the course"},
    },
)
def learner_data(payload: LearnerDataRequest, now: datetime = Depends(get_now)):
    return _aggregate_or_400(payload, now)


@router.get("/learner-data/report", response_class=HTMLResponse)
def sample_learner_report(now: datetime = Depends(get_now)):
    return _report_response(_sample_payload(), now)


@router.post("/learner-data/report", response_class=HTMLResponse)
def learner_report(payload: LearnerDataRequest, now: datetime = Depends(get_now)):
    return _report_response(payload, now)


def _report_response(payload: LearnerDataRequest, now: datetime) -> HTMLResponse:
    try:
        summaries = aggregate(payload.course, payload.assignment_group, payload.submissions, now)
    except DomainMismatchError as e:
        logger.warning("Failed to process learner data: %s", e)
        return HTMLResponse(
            content=render_error_report(str(e)),
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    return HTMLResponse(content=render_learner_report(summaries))
