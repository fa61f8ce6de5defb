"""
Entity store for vehicles, parts, maintenance records, part usage and alerts.

FleetStorage implements every operation on top of six primitives
(_all/_get/_filter/_insert/_update/_delete). Two backends provide them:

    SqlStorage     SQLAlchemy session (one per request) — production
    MemoryStorage  process-local dicts keyed by id — tests and demo mode

Not-found is not an error: get/update return None, delete returns False.
Deleting a parent does not cascade; composed reads return None for any
related row that no longer exists.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from itertools import count
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.alert import Alert
from app.models.maintenance_record import MaintenanceRecord
from app.models.part import Part
from app.models.part_usage import PartUsage
from app.models.vehicle import Vehicle
from app.schemas.alert import AlertOut
from app.schemas.maintenance import (
    MaintenanceRecordOut, MaintenanceWithParts, PartUsageOut, VehicleSummary,
)
from app.schemas.part import PartOut, PartWithStatus
from app.schemas.stats import DashboardStats
from app.schemas.vehicle import VehicleWithAlerts
from app.services.stats_service import aggregate_stats
from app.services.status_classifier import latest_completed, part_stock_status
from app.utils.logger import get_logger

logger = get_logger(__name__)


class ConstraintViolation(Exception):
    """A unique or foreign-key constraint rejected the write."""


def _clean_patch(model, data: dict) -> dict:
    """Drop explicit nulls aimed at NOT NULL columns; nullable ones may be cleared."""
    columns = model.__table__.columns
    return {
        k: v for k, v in data.items()
        if v is not None or (k in columns and columns[k].nullable)
    }


class FleetStorage(ABC):

    # ── Backend primitives ────────────────────────────────────────────────
    @abstractmethod
    def _all(self, model) -> list: ...

    @abstractmethod
    def _get(self, model, entity_id: int): ...

    @abstractmethod
    def _filter(self, model, **criteria) -> list: ...

    @abstractmethod
    def _insert(self, model, data: dict): ...

    @abstractmethod
    def _update(self, model, entity_id: int, data: dict): ...

    @abstractmethod
    def _delete(self, model, entity_id: int) -> bool: ...

    # ── Vehicles ──────────────────────────────────────────────────────────
    def list_vehicles(self) -> list:
        return self._all(Vehicle)

    def get_vehicle(self, vehicle_id: int) -> Optional[Vehicle]:
        return self._get(Vehicle, vehicle_id)

    def get_vehicle_with_alerts(self, vehicle_id: int) -> Optional[VehicleWithAlerts]:
        vehicle = self.get_vehicle(vehicle_id)
        if vehicle is None:
            return None
        last = latest_completed(self.list_maintenance_by_vehicle(vehicle_id))
        detail = VehicleWithAlerts.model_validate(vehicle)
        detail.alerts = [AlertOut.model_validate(a) for a in self.list_alerts_by_vehicle(vehicle_id)]
        detail.last_maintenance = MaintenanceRecordOut.model_validate(last) if last else None
        return detail

    def create_vehicle(self, data: dict) -> Vehicle:
        vehicle = self._insert(Vehicle, {**data, "created_at": datetime.utcnow()})
        logger.info(f"[VEHICLE] Created {vehicle.plate} (id={vehicle.id})")
        return vehicle

    def update_vehicle(self, vehicle_id: int, data: dict) -> Optional[Vehicle]:
        return self._update(Vehicle, vehicle_id, _clean_patch(Vehicle, data))

    def delete_vehicle(self, vehicle_id: int) -> bool:
        deleted = self._delete(Vehicle, vehicle_id)
        if deleted:
            logger.info(f"[VEHICLE] Deleted id={vehicle_id} (maintenance records and alerts kept)")
        return deleted

    # ── Parts ─────────────────────────────────────────────────────────────
    def list_parts(self) -> list:
        return self._all(Part)

    def list_parts_with_status(self) -> list[PartWithStatus]:
        return [self.with_status(p) for p in self.list_parts()]

    @staticmethod
    def with_status(part: Part) -> PartWithStatus:
        return PartWithStatus(
            **PartOut.model_validate(part).model_dump(),
            status=part_stock_status(part.stock, part.min_stock),
        )

    def get_part(self, part_id: int) -> Optional[Part]:
        return self._get(Part, part_id)

    def create_part(self, data: dict) -> Part:
        part = self._insert(Part, {**data, "created_at": datetime.utcnow()})
        logger.info(f"[PART] Created {part.reference} stock={part.stock}")
        return part

    def update_part(self, part_id: int, data: dict) -> Optional[Part]:
        return self._update(Part, part_id, _clean_patch(Part, data))

    def delete_part(self, part_id: int) -> bool:
        return self._delete(Part, part_id)

    # ── Maintenance records ───────────────────────────────────────────────
    def list_maintenance_records(self) -> list:
        return self._all(MaintenanceRecord)

    def list_maintenance_with_parts(self) -> list[MaintenanceWithParts]:
        vehicles = {v.id: v for v in self.list_vehicles()}
        parts = {p.id: p for p in self.list_parts()}
        usages = self._all(PartUsage)

        result = []
        for record in self.list_maintenance_records():
            item = MaintenanceWithParts.model_validate(record)
            vehicle = vehicles.get(record.vehicle_id)
            item.vehicle = VehicleSummary.model_validate(vehicle) if vehicle else None
            item.parts_used = [self._usage_out(u, parts) for u in usages if u.maintenance_id == record.id]
            result.append(item)
        return result

    def get_maintenance_record(self, record_id: int) -> Optional[MaintenanceRecord]:
        return self._get(MaintenanceRecord, record_id)

    def list_maintenance_by_vehicle(self, vehicle_id: int) -> list:
        return self._filter(MaintenanceRecord, vehicle_id=vehicle_id)

    def create_maintenance_record(self, data: dict) -> MaintenanceRecord:
        data = dict(data)
        data.setdefault("completed_at", datetime.utcnow())
        record = self._insert(MaintenanceRecord, data)
        logger.info(f"[MAINTENANCE] {record.type} recorded for vehicle {record.vehicle_id} (id={record.id})")
        return record

    def update_maintenance_record(self, record_id: int, data: dict) -> Optional[MaintenanceRecord]:
        return self._update(MaintenanceRecord, record_id, _clean_patch(MaintenanceRecord, data))

    def delete_maintenance_record(self, record_id: int) -> bool:
        return self._delete(MaintenanceRecord, record_id)

    # ── Part usage ────────────────────────────────────────────────────────
    def list_part_usage(self, maintenance_id: int) -> list[PartUsageOut]:
        parts = {p.id: p for p in self.list_parts()}
        return [self._usage_out(u, parts) for u in self._filter(PartUsage, maintenance_id=maintenance_id)]

    def create_part_usage(self, data: dict) -> PartUsage:
        return self._insert(PartUsage, data)

    @staticmethod
    def _usage_out(usage: PartUsage, parts: dict) -> PartUsageOut:
        out = PartUsageOut.model_validate(usage)
        part = parts.get(usage.part_id)
        out.part = PartOut.model_validate(part) if part else None
        return out

    # ── Alerts ────────────────────────────────────────────────────────────
    def list_alerts(self) -> list:
        return self._all(Alert)

    def list_alerts_by_vehicle(self, vehicle_id: int) -> list:
        return self._filter(Alert, vehicle_id=vehicle_id)

    def create_alert(self, data: dict) -> Alert:
        alert = self._insert(Alert, {**data, "created_at": datetime.utcnow()})
        if alert.priority == "urgent":
            logger.warning(f"[ALERT][URGENT] vehicle {alert.vehicle_id}: {alert.message}")
        else:
            logger.info(f"[ALERT][{alert.priority.upper()}] vehicle {alert.vehicle_id}: {alert.message}")
        return alert

    def mark_alert_read(self, alert_id: int) -> bool:
        return self._update(Alert, alert_id, {"is_read": True}) is not None

    def delete_alert(self, alert_id: int) -> bool:
        return self._delete(Alert, alert_id)

    # ── Dashboard ─────────────────────────────────────────────────────────
    def get_dashboard_stats(self) -> DashboardStats:
        return aggregate_stats(self.list_vehicles(), self.list_parts(), self.list_alerts())

    def is_empty(self) -> bool:
        return not self.list_vehicles() and not self.list_parts()


class SqlStorage(FleetStorage):
    """Store backed by a SQLAlchemy session. Every write commits immediately."""

    def __init__(self, db: Session):
        self.db = db

    def _all(self, model) -> list:
        return self.db.query(model).order_by(model.id).all()

    def _get(self, model, entity_id: int):
        return self.db.query(model).filter(model.id == entity_id).first()

    def _filter(self, model, **criteria) -> list:
        return self.db.query(model).filter_by(**criteria).order_by(model.id).all()

    def _insert(self, model, data: dict):
        obj = model(**data)
        self.db.add(obj)
        self._commit()
        self.db.refresh(obj)
        return obj

    def _update(self, model, entity_id: int, data: dict):
        obj = self._get(model, entity_id)
        if obj is None:
            return None
        for key, value in data.items():
            setattr(obj, key, value)
        self._commit()
        self.db.refresh(obj)
        return obj

    def _delete(self, model, entity_id: int) -> bool:
        obj = self._get(model, entity_id)
        if obj is None:
            return False
        self.db.delete(obj)
        self._commit()
        return True

    def _commit(self):
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise ConstraintViolation(str(exc.orig)) from exc


class MemoryStorage(FleetStorage):
    """
    In-process store: one dict per table, ids from per-table counters.
    Holds transient ORM instances so both backends return the same types.
    Unique columns are enforced; foreign keys are not.
    """

    def __init__(self):
        self._tables = {m: {} for m in (Vehicle, Part, MaintenanceRecord, PartUsage, Alert)}
        self._ids = {m: count(1) for m in self._tables}

    def _all(self, model) -> list:
        return list(self._tables[model].values())

    def _get(self, model, entity_id: int):
        return self._tables[model].get(entity_id)

    def _filter(self, model, **criteria) -> list:
        return [
            obj for obj in self._tables[model].values()
            if all(getattr(obj, k) == v for k, v in criteria.items())
        ]

    def _insert(self, model, data: dict):
        row = self._with_defaults(model, data)
        self._check_unique(model, row)
        row["id"] = next(self._ids[model])
        obj = model(**row)
        self._tables[model][obj.id] = obj
        return obj

    def _update(self, model, entity_id: int, data: dict):
        obj = self._get(model, entity_id)
        if obj is None:
            return None
        self._check_unique(model, data, exclude_id=entity_id)
        for key, value in data.items():
            setattr(obj, key, value)
        return obj

    def _delete(self, model, entity_id: int) -> bool:
        return self._tables[model].pop(entity_id, None) is not None

    @staticmethod
    def _with_defaults(model, data: dict) -> dict:
        row = dict(data)
        for column in model.__table__.columns:
            if column.key not in row and column.default is not None and column.default.is_scalar:
                row[column.key] = column.default.arg
        return row

    def _check_unique(self, model, data: dict, exclude_id: Optional[int] = None):
        for column in model.__table__.columns:
            if not column.unique or column.key not in data:
                continue
            value = data[column.key]
            for obj in self._tables[model].values():
                if obj.id != exclude_id and getattr(obj, column.key) == value:
                    raise ConstraintViolation(
                        f"UNIQUE constraint failed: {model.__tablename__}.{column.key}"
                    )
