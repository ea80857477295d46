# quizdesk/routes/analytics.py
from fastapi import APIRouter

from quizdesk.schemas.analytics import (
    AssignmentStats,
    AssignmentStatsRequest,
    OverallStats,
    OverallStatsRequest,
    QuizResult,
    QuizScoreRequest,
)
from quizdesk.services import grading

router = APIRouter(prefix="/api", tags=["analytics"])


@router.post("/analytics/overall", response_model=OverallStats)
def get_overall_stats(payload: OverallStatsRequest):
    return grading.overall_stats(payload.submissions)


@router.post("/analytics/assignments/{assignment_id}", response_model=AssignmentStats)
def get_assignment_stats(assignment_id: str, payload: AssignmentStatsRequest):
    return grading.assignment_stats(assignment_id, payload.submissions, payload.total_students)


@router.post("/quiz/score", response_model=QuizResult)
def score_quiz(payload: QuizScoreRequest):
    return grading.score_quiz(payload.questions, payload.answers)
