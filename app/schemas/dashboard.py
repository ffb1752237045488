from app.schemas.common import CamelModel


class DashboardStats(CamelModel):
    active_tablets: int
    total_tablets: int
    active_alerts: int
    average_time: int
    blocked_sites: int
