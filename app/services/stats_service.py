"""Dashboard summary: folds vehicles, parts and alerts into status counters."""

from typing import Iterable

from app.schemas.stats import DashboardStats
from app.services.status_classifier import (
    part_stock_status, IN_STOCK, LOW_STOCK, OUT_OF_STOCK,
    OPERATIONAL, MAINTENANCE_DUE, IN_REPAIR,
)


def aggregate_stats(vehicles: Iterable, parts: Iterable, alerts: Iterable) -> DashboardStats:
    stats = DashboardStats()

    for v in vehicles:
        stats.total_vehicles += 1
        if v.status == OPERATIONAL:
            stats.operational += 1
        elif v.status == MAINTENANCE_DUE:
            stats.maintenance_due += 1
        elif v.status == IN_REPAIR:
            stats.in_repair += 1

    for p in parts:
        stats.total_parts += 1
        status = part_stock_status(p.stock, p.min_stock)
        if status == OUT_OF_STOCK:
            stats.parts_out_of_stock += 1
        elif status == LOW_STOCK:
            stats.parts_low_stock += 1
        elif status == IN_STOCK:
            stats.parts_in_stock += 1

    stats.unread_alerts = sum(1 for a in alerts if not a.is_read)
    return stats
