import time
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from app.dependencies.db import get_db
from app.services.report_service import get_report_renderer

router = APIRouter()


@router.get("/export", summary="리포트 다운로드")
def export_report(
    report_type: str = Query("dashboard", alias="type"),
    export_format: str = Query(..., alias="format"),
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    student_id: Optional[str] = Query(None, alias="studentId"),
    db: Session = Depends(get_db)
):
    """
    format=pdf 또는 format=excel(xlsx) 로 리포트 파일을 내려받습니다.
    """
    renderer = get_report_renderer(export_format)
    if renderer is None:
        raise HTTPException(status_code=400, detail="Invalid format specified")

    payload = renderer.render(db, report_type, start_date, end_date, student_id)
    filename = f"report-{report_type}-{int(time.time() * 1000)}.{renderer.extension}"
    return Response(
        content=payload,
        media_type=renderer.media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
