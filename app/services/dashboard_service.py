import math

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.alert import Alert
from app.models.blocked_site import BlockedSite
from app.models.tablet import Tablet
from app.schemas.dashboard import DashboardStats


def get_dashboard_stats(db: Session) -> DashboardStats:
    total_tablets = db.query(func.count(Tablet.id)).scalar()
    active_tablets = db.query(func.count(Tablet.id)).filter(Tablet.status == "online").scalar()
    active_alerts = db.query(func.count(Alert.id)).filter(Alert.is_resolved == False).scalar()  # noqa: E712
    blocked_sites = db.query(func.count(BlockedSite.id)).filter(BlockedSite.is_active == True).scalar()  # noqa: E712

    # online 태블릿의 평균 사용 시간 (분), 없으면 0
    avg_screen_time = (
        db.query(func.avg(func.coalesce(Tablet.screen_time, 0)))
        .filter(Tablet.status == "online")
        .scalar()
    )
    average_time = math.floor(float(avg_screen_time) + 0.5) if avg_screen_time is not None else 0

    return DashboardStats(
        active_tablets=active_tablets,
        total_tablets=total_tablets,
        active_alerts=active_alerts,
        average_time=average_time,
        blocked_sites=blocked_sites,
    )
