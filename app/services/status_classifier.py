"""
Derived-status rules for parts and vehicles.

Pure functions: no DB access, no settings lookups beyond default thresholds.
Vehicle criteria, in priority order:

    in_repair        unread urgent alert, or a maintenance job still in progress
    maintenance_due  scheduled maintenance overdue, last service older than
                     MAINTENANCE_INTERVAL_DAYS, mileage above HIGH_MILEAGE_KM,
                     or any unread high/medium alert
    operational      none of the above

Read alerts count as resolved. A vehicle with no maintenance history is not
treated as overdue. The stored vehicle status is never an input, so applying
the rules twice gives the same answer.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Iterable, Optional

from app.config import settings

IN_STOCK = "in_stock"
LOW_STOCK = "low_stock"
OUT_OF_STOCK = "out_of_stock"

OPERATIONAL = "operational"
MAINTENANCE_DUE = "maintenance_due"
IN_REPAIR = "in_repair"


def part_stock_status(stock: int, min_stock: int) -> str:
    if stock == 0:
        return OUT_OF_STOCK
    if stock <= min_stock:
        return LOW_STOCK
    return IN_STOCK


@dataclass
class ValidationResult:
    status: str
    reasons: list = field(default_factory=list)
    urgent_issues: list = field(default_factory=list)
    last_inspection: Optional[datetime] = None
    next_maintenance_due: Optional[datetime] = None


def latest_completed(records: Iterable) -> Optional[object]:
    """Most recent finished maintenance record, or None."""
    done = [r for r in records if r.completed_at is not None]
    if not done:
        return None
    return max(done, key=lambda r: r.completed_at)


def classify_vehicle(
    vehicle,
    alerts: Iterable,
    maintenance_records: Iterable,
    today: Optional[date] = None,
    maintenance_interval_days: Optional[int] = None,
    mileage_limit: Optional[int] = None,
) -> ValidationResult:
    today = today or datetime.utcnow().date()
    interval = maintenance_interval_days if maintenance_interval_days is not None else settings.MAINTENANCE_INTERVAL_DAYS
    limit = mileage_limit if mileage_limit is not None else settings.HIGH_MILEAGE_KM

    records = [r for r in maintenance_records if r.vehicle_id == vehicle.id]
    unread = [a for a in alerts if a.vehicle_id == vehicle.id and not a.is_read]
    last = latest_completed(records)

    result = ValidationResult(
        status=OPERATIONAL,
        last_inspection=last.completed_at if last else None,
        next_maintenance_due=last.next_due if last else None,
    )

    # ── in_repair ─────────────────────────────────────────────────────────
    urgent = [a for a in unread if a.priority == "urgent"]
    in_progress = [r for r in records if r.completed_at is None]
    result.urgent_issues = [a.message for a in urgent]
    if urgent:
        result.reasons.append(f"{len(urgent)} unresolved urgent alert(s)")
    for r in in_progress:
        result.reasons.append(f"Maintenance in progress: {r.type}")
    if urgent or in_progress:
        result.status = IN_REPAIR
        return result

    # ── maintenance_due ───────────────────────────────────────────────────
    if last is not None:
        if last.next_due is not None and last.next_due.date() < today:
            result.reasons.append(f"Scheduled maintenance overdue since {last.next_due.date().isoformat()}")
        if last.completed_at.date() < today - timedelta(days=interval):
            result.reasons.append(
                f"Last maintenance on {last.completed_at.date().isoformat()}, more than {interval} days ago"
            )
    if vehicle.mileage is not None and vehicle.mileage > limit:
        result.reasons.append(f"High mileage: {vehicle.mileage} km (limit {limit} km)")
    if unread:
        result.reasons.append(f"{len(unread)} unread maintenance alert(s)")

    if result.reasons:
        result.status = MAINTENANCE_DUE
    return result
