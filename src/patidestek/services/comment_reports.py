"""Reporting abusive comments and the admin review queue."""
from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from patidestek.core.errors import NotFoundError
from patidestek.models import Comment, CommentReport, ReportStatus, User
from patidestek.schemas.comment_report import CommentReportCreate

logger = logging.getLogger(__name__)

_REPORT_RELATIONS = (
    joinedload(CommentReport.comment).joinedload(Comment.user),
    joinedload(CommentReport.reporter),
)


def _load_report(db: Session, report_id: int) -> CommentReport:
    stmt = (
        select(CommentReport)
        .options(*_REPORT_RELATIONS)
        .where(CommentReport.id == report_id)
    )
    report = db.scalars(stmt).first()
    if report is None:
        raise NotFoundError("Report not found")
    return report


def create_report(db: Session, payload: CommentReportCreate, reporter: User) -> CommentReport:
    """File a report against an existing comment; new reports are always OPEN."""
    if db.get(Comment, payload.comment_id) is None:
        raise NotFoundError("Comment not found")
    report = CommentReport(
        comment_id=payload.comment_id,
        reporter_id=reporter.id,
        reason=payload.reason,
        details=payload.details,
        status=ReportStatus.OPEN,
    )
    db.add(report)
    db.commit()
    logger.info(
        "User id=%s reported comment id=%s (%s)",
        reporter.id,
        payload.comment_id,
        payload.reason.value,
    )
    return _load_report(db, report.id)


def list_reports(db: Session, status_filter: ReportStatus | None = None) -> Sequence[CommentReport]:
    """Return reports newest first, optionally restricted to one status."""
    stmt = select(CommentReport).options(*_REPORT_RELATIONS)
    if status_filter is not None:
        stmt = stmt.where(CommentReport.status == status_filter)
    stmt = stmt.order_by(CommentReport.created_at.desc(), CommentReport.id.desc())
    return db.scalars(stmt).unique().all()


def resolve_report(db: Session, report_id: int) -> CommentReport:
    report = _load_report(db, report_id)
    report.status = ReportStatus.RESOLVED
    db.commit()
    logger.info("Report id=%s resolved", report_id)
    return _load_report(db, report_id)


def delete_report(db: Session, report_id: int) -> None:
    report = db.get(CommentReport, report_id)
    if report is None:
        raise NotFoundError("Report not found")
    db.delete(report)
    db.commit()
