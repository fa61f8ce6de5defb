"""
Fleet assistant: canned answers built from current fleet data.

Quick actions map straight to a response builder. Free text is routed by
keyword to the same builders; anything else gets the help message.
"""

from datetime import datetime, timedelta
from typing import Optional

from app.config import settings
from app.services.status_classifier import (
    latest_completed, OPERATIONAL, MAINTENANCE_DUE, IN_REPAIR, LOW_STOCK, OUT_OF_STOCK,
)
from app.services.storage import FleetStorage
from app.utils.logger import get_logger

logger = get_logger(__name__)

STATUS_LABELS = {
    OPERATIONAL: "operational",
    MAINTENANCE_DUE: "maintenance due",
    IN_REPAIR: "in repair",
}
PRIORITY_ORDER = {"urgent": 0, "high": 1, "medium": 2}

HELP_MESSAGE = (
    "I can help with your fleet. Ask me about vehicle status, maintenance alerts, "
    "parts inventory or maintenance scheduling, or use one of the quick actions."
)


def vehicle_status_response(storage: FleetStorage) -> str:
    vehicles = storage.list_vehicles()
    if not vehicles:
        return "No vehicles are registered in the fleet yet."

    stats = storage.get_dashboard_stats()
    lines = [
        f"Fleet status: {stats.total_vehicles} vehicle(s).",
        f"- Operational: {stats.operational}",
        f"- Maintenance due: {stats.maintenance_due}",
        f"- In repair: {stats.in_repair}",
    ]
    attention = [v for v in vehicles if v.status != OPERATIONAL]
    if attention:
        lines.append("Vehicles needing attention:")
        for v in attention:
            lines.append(f"- {v.plate} ({v.make} {v.model}): {STATUS_LABELS.get(v.status, v.status)}")
    return "\n".join(lines)


def maintenance_alerts_response(storage: FleetStorage) -> str:
    unread = [a for a in storage.list_alerts() if not a.is_read]
    if not unread:
        return "No unread maintenance alerts. Everything is up to date."

    plates = {v.id: v.plate for v in storage.list_vehicles()}
    unread.sort(key=lambda a: (PRIORITY_ORDER.get(a.priority, len(PRIORITY_ORDER)), a.id))
    lines = [f"{len(unread)} unread alert(s):"]
    for a in unread:
        plate = plates.get(a.vehicle_id, f"vehicle #{a.vehicle_id}")
        lines.append(f"- [{a.priority.upper()}] {plate}: {a.message}")
    return "\n".join(lines)


def parts_inventory_response(storage: FleetStorage) -> str:
    parts = storage.list_parts_with_status()
    if not parts:
        return "The parts inventory is empty."

    stats = storage.get_dashboard_stats()
    lines = [
        f"Parts inventory: {stats.total_parts} reference(s).",
        f"- In stock: {stats.parts_in_stock}",
        f"- Low stock: {stats.parts_low_stock}",
        f"- Out of stock: {stats.parts_out_of_stock}",
    ]
    reorder = [p for p in parts if p.status in (LOW_STOCK, OUT_OF_STOCK)]
    if reorder:
        lines.append("To reorder:")
        for p in reorder:
            lines.append(f"- {p.name} ({p.reference}): {p.stock} left, minimum {p.min_stock}")
    return "\n".join(lines)


def schedule_maintenance_response(storage: FleetStorage, now: Optional[datetime] = None) -> str:
    now = now or datetime.utcnow()
    horizon = now + timedelta(days=settings.UPCOMING_MAINTENANCE_DAYS)

    overdue, upcoming = [], []
    for v in storage.list_vehicles():
        last = latest_completed(storage.list_maintenance_by_vehicle(v.id))
        if last is None or last.next_due is None:
            continue
        if last.next_due < now:
            overdue.append((last.next_due, v))
        elif last.next_due <= horizon:
            upcoming.append((last.next_due, v))

    if not overdue and not upcoming:
        return (f"No maintenance is due in the next {settings.UPCOMING_MAINTENANCE_DAYS} days. "
                "Record a maintenance job from the maintenance page to plan a new intervention.")

    lines = []
    if overdue:
        lines.append("Overdue maintenance:")
        lines += [f"- {v.plate}: due {due.date().isoformat()}" for due, v in sorted(overdue, key=lambda x: x[0])]
    if upcoming:
        lines.append(f"Due within {settings.UPCOMING_MAINTENANCE_DAYS} days:")
        lines += [f"- {v.plate}: due {due.date().isoformat()}" for due, v in sorted(upcoming, key=lambda x: x[0])]
    return "\n".join(lines)


ACTIONS = {
    "vehicle-status": vehicle_status_response,
    "maintenance-alerts": maintenance_alerts_response,
    "parts-inventory": parts_inventory_response,
    "schedule-maintenance": schedule_maintenance_response,
}

# Checked in order; first match wins
KEYWORDS = [
    ("schedule-maintenance", ("schedule", "plan", "planifier", "programmer", "next service")),
    ("maintenance-alerts", ("alert", "alerte", "urgent", "warning")),
    ("parts-inventory", ("part", "pièce", "piece", "stock", "inventory", "inventaire")),
    ("vehicle-status", ("vehicle", "véhicule", "vehicule", "fleet", "flotte", "status", "état")),
]


def route_message(message: str) -> Optional[str]:
    text = message.lower()
    for action, words in KEYWORDS:
        if any(w in text for w in words):
            return action
    return None


def answer_query(storage: FleetStorage, message: Optional[str] = None, action: Optional[str] = None) -> str:
    if not action and message:
        action = route_message(message)

    handler = ACTIONS.get(action) if action else None
    if handler is None:
        logger.debug(f"[CHAT] No handler for action={action!r} message={message!r}")
        return HELP_MESSAGE

    logger.info(f"[CHAT] Answering {action}")
    return handler(storage)
