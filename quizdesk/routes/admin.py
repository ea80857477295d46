# quizdesk/routes/admin.py
from fastapi import APIRouter

from quizdesk.schemas.attachments import AttachmentInfo, AttachmentPlan
from quizdesk.schemas.roster import (
    AssignAllRequest,
    AssignAllResponse,
    RosterPartition,
    RosterRequest,
)
from quizdesk.services.attachments import plan_attachment
from quizdesk.services.roster import partition_users, unassigned_students

router = APIRouter(prefix="/api", tags=["admin"])


@router.post("/attachments/validate", response_model=AttachmentPlan)
def validate_attachment(payload: AttachmentInfo):
    """업로드 전 크기/형식 확인 + 저장 경로 발급"""
    return plan_attachment(payload)


@router.post("/roster/partition", response_model=RosterPartition)
def roster_partition(payload: RosterRequest):
    return partition_users(payload.profiles, payload.roles)


@router.post("/roster/assign-all", response_model=AssignAllResponse)
def roster_assign_all(payload: AssignAllRequest):
    return unassigned_students(payload.students, payload.assigned_ids)
