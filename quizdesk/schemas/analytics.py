# quizdesk/schemas/analytics.py
from datetime import datetime
from typing import Dict, List, Optional
from pydantic import Field

from quizdesk.schemas.questions import CamelModel


class Submission(CamelModel):
    id: str
    assignment_id: str
    score: Optional[int] = Field(default=None, ge=0)  # None = 채점 대기
    total_questions: int = Field(ge=0)
    student_name: Optional[str] = None
    assignment_title: Optional[str] = None
    submitted_at: Optional[datetime] = None


class OverallStats(CamelModel):
    average_score: int
    total_submissions: int
    completed_submissions: int
    completion_rate: int


class GradeBucket(CamelModel):
    grade: str
    count: int
    percent: int  # 채점 완료 제출 대비 비율


class AssignmentStats(CamelModel):
    assignment_id: str
    total_submissions: int
    completed_submissions: int
    completion_rate: int
    average_score: int
    grade_distribution: Dict[str, int]
    grade_buckets: List[GradeBucket]


class QuizKeyItem(CamelModel):
    correct_answer: int = Field(ge=0)


class QuizScoreRequest(CamelModel):
    questions: List[QuizKeyItem] = Field(min_length=1)
    answers: List[Optional[int]]


class QuizResult(CamelModel):
    score: int
    total: int
    percent: int
    answered_count: int


# ── 요청 ──────────────────────────────────────────────────────
class OverallStatsRequest(CamelModel):
    submissions: List[Submission]


class AssignmentStatsRequest(CamelModel):
    submissions: List[Submission]
    total_students: int = Field(ge=0)
