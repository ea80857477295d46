# quizdesk/services/grading.py
"""
성적 통계
- 제출별 점수 비율
- 전체 통계 (평균/완료율)
- 과제별 통계 + 등급 분포 (A~F)
- 학생 퀴즈 채점
"""
import math
from typing import Dict, List, Optional, Sequence

from quizdesk.core.constants import GradeBuckets
from quizdesk.schemas.analytics import (
    AssignmentStats,
    GradeBucket,
    OverallStats,
    QuizKeyItem,
    QuizResult,
    Submission,
)


def round_half_up(value: float) -> int:
    # 내장 round()는 은행가 반올림(0.5 → 짝수)이라 사용하지 않음
    return int(math.floor(value + 0.5))


def percent(part: float, whole: float) -> int:
    """part / whole * 100 반올림, whole 이 0이면 0"""
    if whole <= 0:
        return 0
    return round_half_up(part / whole * 100)


def submission_percent(submission: Submission) -> Optional[int]:
    """채점 대기(score=None)면 None"""
    if submission.score is None:
        return None
    return percent(submission.score, submission.total_questions)


def grade_for(score_percent: int) -> str:
    for threshold, grade in GradeBuckets.THRESHOLDS:
        if score_percent >= threshold:
            return grade
    return GradeBuckets.FAILING


def grade_distribution(scores: Sequence[int]) -> Dict[str, int]:
    distribution = {grade: 0 for grade in GradeBuckets.ALL}
    for score in scores:
        distribution[grade_for(score)] += 1
    return distribution


def overall_stats(submissions: Sequence[Submission]) -> OverallStats:
    completed = [s for s in submissions if s.score is not None]
    total_score = sum(s.score for s in completed)
    total_possible = sum(s.total_questions for s in completed)
    return OverallStats(
        average_score=percent(total_score, total_possible),
        total_submissions=len(submissions),
        completed_submissions=len(completed),
        completion_rate=percent(len(completed), len(submissions)),
    )


def assignment_stats(
    assignment_id: str,
    submissions: Sequence[Submission],
    total_students: int,
) -> AssignmentStats:
    """
    과제 하나의 통계

    Args:
        assignment_id: 대상 과제 ID (다른 과제 제출은 제외)
        submissions: 제출 목록
        total_students: 전체 학생 수 (완료율 분모)
    """
    mine = [s for s in submissions if s.assignment_id == assignment_id]
    scores: List[int] = [
        p for p in (submission_percent(s) for s in mine) if p is not None
    ]
    average = round_half_up(sum(scores) / len(scores)) if scores else 0
    distribution = grade_distribution(scores)

    buckets = [
        GradeBucket(grade=grade, count=count, percent=percent(count, len(scores)))
        for grade, count in distribution.items()
    ]
    return AssignmentStats(
        assignment_id=assignment_id,
        total_submissions=len(mine),
        completed_submissions=len(scores),
        completion_rate=percent(len(mine), total_students),
        average_score=average,
        grade_distribution=distribution,
        grade_buckets=buckets,
    )


def score_quiz(questions: Sequence[QuizKeyItem], answers: Sequence[Optional[int]]) -> QuizResult:
    """선택한 답(0-based, 미응답 None)을 정답과 비교해 채점"""
    correct = 0
    for index, question in enumerate(questions):
        answer = answers[index] if index < len(answers) else None
        if answer is not None and answer == question.correct_answer:
            correct += 1
    return QuizResult(
        score=correct,
        total=len(questions),
        percent=percent(correct, len(questions)),
        answered_count=sum(1 for a in answers[:len(questions)] if a is not None),
    )
