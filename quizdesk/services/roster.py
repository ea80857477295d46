# quizdesk/services/roster.py
"""사용자 목록 분류 / 학생 배정 보조"""
from typing import Iterable, List, Sequence

from quizdesk.core.constants import Roles
from quizdesk.schemas.roster import (
    AssignAllResponse,
    InstructorOption,
    RosterPartition,
    UserProfile,
    UserRole,
    UserWithRole,
)


def attach_roles(profiles: Sequence[UserProfile], roles: Sequence[UserRole]) -> List[UserWithRole]:
    # 역할이 여러 개면 첫 번째만 사용
    role_by_user = {}
    for r in roles:
        role_by_user.setdefault(r.user_id, r.role)
    return [
        UserWithRole(**profile.model_dump(), role=role_by_user.get(profile.id))
        for profile in profiles
    ]


def instructor_options(users: Iterable[UserWithRole]) -> List[InstructorOption]:
    """과제 담당자 선택지: 인증된 강사 + 관리자"""
    return [
        InstructorOption(id=u.id, full_name=u.full_name)
        for u in users
        if u.verified and u.role in (Roles.INSTRUCTOR, Roles.ADMIN)
    ]


def partition_users(profiles: Sequence[UserProfile], roles: Sequence[UserRole]) -> RosterPartition:
    users = attach_roles(profiles, roles)
    return RosterPartition(
        pending=[u for u in users if not u.verified],
        students=[u for u in users if u.verified and u.role == Roles.STUDENT],
        instructors=[u for u in users if u.verified and u.role == Roles.INSTRUCTOR],
        instructor_options=instructor_options(users),
    )


def unassigned_students(students: Sequence[UserWithRole], assigned_ids: Iterable[str]) -> AssignAllResponse:
    """'전체 배정' 시 새로 추가할 학생 ID (인증된 학생만)"""
    assigned = set(assigned_ids)
    eligible = [s for s in students if s.verified]
    to_assign = [s.id for s in eligible if s.id not in assigned]
    return AssignAllResponse(
        to_assign=to_assign,
        assigned_count=len(eligible) - len(to_assign),
        total_students=len(eligible),
    )
