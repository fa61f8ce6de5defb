from pydantic import BaseModel


class DashboardStats(BaseModel):
    total_vehicles: int = 0
    operational: int = 0
    maintenance_due: int = 0
    in_repair: int = 0
    total_parts: int = 0
    parts_in_stock: int = 0
    parts_low_stock: int = 0
    parts_out_of_stock: int = 0
    unread_alerts: int = 0
