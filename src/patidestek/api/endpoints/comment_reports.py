"""Comment report endpoints."""

from collections.abc import Sequence

from fastapi import APIRouter, Query, status

from patidestek.api.dependencies import ActiveUserDep, AdminUserDep, PathId, SessionDep
from patidestek.models import CommentReport, ReportStatus
from patidestek.schemas.comment_report import CommentReportCreate, CommentReportResponse
from patidestek.schemas.common import MessageResponse
from patidestek.services import comment_reports as report_service

router = APIRouter(prefix="/comment-reports", tags=["comment-reports"])


@router.post("", response_model=CommentReportResponse, status_code=status.HTTP_201_CREATED)
async def create_report(
    payload: CommentReportCreate,
    current_user: ActiveUserDep,
    db: SessionDep,
) -> CommentReport:
    """Flag a comment for admin review."""
    return report_service.create_report(db, payload, current_user)


@router.get("", response_model=list[CommentReportResponse])
async def list_reports(
    _: AdminUserDep,
    db: SessionDep,
    status_filter: ReportStatus | None = Query(None, alias="status"),
) -> Sequence[CommentReport]:
    """List reports newest first, optionally filtered by status."""
    return report_service.list_reports(db, status_filter)


@router.patch("/{report_id}/resolve", response_model=CommentReportResponse)
async def resolve_report(report_id: PathId, _: AdminUserDep, db: SessionDep) -> CommentReport:
    return report_service.resolve_report(db, report_id)


@router.delete("/{report_id}", response_model=MessageResponse)
async def delete_report(report_id: PathId, _: AdminUserDep, db: SessionDep) -> MessageResponse:
    report_service.delete_report(db, report_id)
    return MessageResponse(message="Report deleted successfully")
