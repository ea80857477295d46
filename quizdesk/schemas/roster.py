# quizdesk/schemas/roster.py
from datetime import datetime
from typing import List, Optional

from quizdesk.schemas.questions import CamelModel


class UserProfile(CamelModel):
    id: str
    full_name: Optional[str] = None
    email: Optional[str] = None
    verified: bool = False
    created_at: Optional[datetime] = None


class UserRole(CamelModel):
    user_id: str
    role: str


class UserWithRole(UserProfile):
    role: Optional[str] = None


class InstructorOption(CamelModel):
    id: str
    full_name: Optional[str] = None


class RosterRequest(CamelModel):
    profiles: List[UserProfile]
    roles: List[UserRole]


class RosterPartition(CamelModel):
    pending: List[UserWithRole]
    students: List[UserWithRole]
    instructors: List[UserWithRole]
    instructor_options: List[InstructorOption]


class AssignAllRequest(CamelModel):
    students: List[UserWithRole]
    assigned_ids: List[str]


class AssignAllResponse(CamelModel):
    to_assign: List[str]
    assigned_count: int
    total_students: int
