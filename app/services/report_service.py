# /app/services/report_service.py
import io
import logging
import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Callable, Dict, Optional

import pandas as pd
from sqlalchemy.orm import Session

from app.models.activity import Activity
from app.models.alert import Alert
from app.models.student import Student
from app.models.tablet import Tablet

logger = logging.getLogger(__name__)

ACTIVITY_COLUMNS = [
    "timestamp", "student_name", "tablet_number", "activity_type",
    "application", "url", "title", "category", "duration", "is_blocked",
]
ALERT_COLUMNS = [
    "created_at", "student_name", "tablet_number", "alert_type",
    "severity", "title", "description", "is_resolved", "resolved_at",
]


def _apply_date_range(query, column, start_date: Optional[date], end_date: Optional[date]):
    # 종료일은 그날 하루 전체를 포함
    if start_date:
        query = query.filter(column >= datetime.combine(start_date, time.min))
    if end_date:
        query = query.filter(column < datetime.combine(end_date + timedelta(days=1), time.min))
    return query


def _activity_frame(db: Session, start_date, end_date, student_id) -> pd.DataFrame:
    query = (
        db.query(
            Activity.timestamp,
            Student.name.label("student_name"),
            Tablet.tablet_number,
            Activity.activity_type,
            Activity.application,
            Activity.url,
            Activity.title,
            Activity.category,
            Activity.duration,
            Activity.is_blocked,
        )
        .outerjoin(Student, Activity.student_id == Student.id)
        .outerjoin(Tablet, Activity.tablet_id == Tablet.id)
    )
    query = _apply_date_range(query, Activity.timestamp, start_date, end_date)
    if student_id:
        query = query.filter(Activity.student_id == student_id)
    rows = query.order_by(Activity.timestamp.desc()).all()
    return pd.DataFrame([row._asdict() for row in rows], columns=ACTIVITY_COLUMNS)


def _alert_frame(db: Session, start_date, end_date, student_id) -> pd.DataFrame:
    query = (
        db.query(
            Alert.created_at,
            Student.name.label("student_name"),
            Tablet.tablet_number,
            Alert.alert_type,
            Alert.severity,
            Alert.title,
            Alert.description,
            Alert.is_resolved,
            Alert.resolved_at,
        )
        .outerjoin(Student, Alert.student_id == Student.id)
        .outerjoin(Tablet, Alert.tablet_id == Tablet.id)
    )
    query = _apply_date_range(query, Alert.created_at, start_date, end_date)
    if student_id:
        query = query.filter(Alert.student_id == student_id)
    rows = query.order_by(Alert.created_at.desc()).all()
    return pd.DataFrame([row._asdict() for row in rows], columns=ALERT_COLUMNS)


def build_report_frame(
    db: Session,
    report_type: str,
    start_date: Optional[date],
    end_date: Optional[date],
    student_id: Optional[str] = None,
) -> pd.DataFrame:
    """
    리포트 종류별 표 데이터를 만듭니다.
    - student-activity : 활동 기록 원본
    - class-summary    : 학생별 활동 수 / 총 사용 시간 / 차단 횟수
    - website-visits   : URL 이 있는 활동만
    - app-usage        : 앱별 총 사용 시간
    - alerts-blocks    : 알림 기록
    알 수 없는 종류는 활동 기록 원본을 사용합니다.
    """
    if report_type == "alerts-blocks":
        return _alert_frame(db, start_date, end_date, student_id)

    activities = _activity_frame(db, start_date, end_date, student_id)

    if report_type == "class-summary":
        return (
            activities.groupby("student_name", dropna=False)
            .agg(
                activities=("activity_type", "size"),
                total_minutes=("duration", "sum"),
                blocked=("is_blocked", "sum"),
            )
            .reset_index()
        )
    if report_type == "website-visits":
        return activities[activities["url"].notna()].reset_index(drop=True)
    if report_type == "app-usage":
        return (
            activities.groupby("application", dropna=False)
            .agg(total_minutes=("duration", "sum"), sessions=("activity_type", "size"))
            .reset_index()
            .sort_values("total_minutes", ascending=False)
        )
    return activities


def generate_pdf_report(
    db: Session,
    report_type: str,
    start_date: Optional[date],
    end_date: Optional[date],
    student_id: Optional[str] = None,
) -> bytes:
    # TODO: PDF 렌더러 연동 전까지는 설명 텍스트만 반환
    text = f"PDF Report - Type: {report_type}, Period: {start_date or '-'} to {end_date or '-'}"
    if student_id:
        text += f", Student: {student_id}"
    return text.encode("utf-8")


def _sheet_title(report_type: Optional[str]) -> str:
    # 엑셀 시트 이름: 31자 이내, []:*?/\ 사용 불가
    return re.sub(r"[\[\]:*?/\\]", "-", report_type or "report")[:31] or "report"


def generate_excel_report(
    db: Session,
    report_type: str,
    start_date: Optional[date],
    end_date: Optional[date],
    student_id: Optional[str] = None,
) -> bytes:
    frame = build_report_frame(db, report_type, start_date, end_date, student_id)
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        frame.to_excel(writer, sheet_name=_sheet_title(report_type), index=False)
    logger.info("Excel report generated: type=%s rows=%d", report_type, len(frame))
    return buffer.getvalue()


@dataclass
class ReportRenderer:
    media_type: str
    extension: str
    render: Callable[..., bytes]


_EXCEL = ReportRenderer(
    media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    extension="xlsx",
    render=generate_excel_report,
)

REPORT_RENDERERS: Dict[str, ReportRenderer] = {
    "pdf": ReportRenderer(media_type="application/pdf", extension="pdf", render=generate_pdf_report),
    "excel": _EXCEL,
    "xlsx": _EXCEL,
}


def get_report_renderer(export_format: str) -> Optional[ReportRenderer]:
    return REPORT_RENDERERS.get(export_format)
