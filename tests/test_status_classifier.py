"""Unit tests for the derived-status rules (parts and vehicles)."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from datetime import date, datetime
from app.models.alert import Alert
from app.models.maintenance_record import MaintenanceRecord
from app.models.vehicle import Vehicle
from app.services.status_classifier import classify_vehicle, part_stock_status, latest_completed

TODAY = date(2024, 6, 1)


def make_vehicle(mileage=50000, status="operational"):
    return Vehicle(id=1, plate="ABC-123", make="Renault", model="Master", year=2020,
                   type="van", mileage=mileage, status=status)


def make_alert(priority="medium", is_read=False, vehicle_id=1, message="Check brakes"):
    return Alert(id=1, vehicle_id=vehicle_id, type="maintenance_due", message=message,
                 priority=priority, is_read=is_read)


def make_record(completed_at=datetime(2024, 4, 1), next_due=None, type="oil_change", vehicle_id=1):
    return MaintenanceRecord(id=1, vehicle_id=vehicle_id, type=type, description="Service",
                             cost=5000, duration=60, technician="J. Doe",
                             completed_at=completed_at, next_due=next_due)


class TestPartStockStatus:
    @pytest.mark.parametrize("stock,min_stock,expected", [
        (3, 5, "low_stock"),
        (0, 2, "out_of_stock"),
        (25, 5, "in_stock"),
        (5, 5, "low_stock"),
        (6, 5, "in_stock"),
        (0, 0, "out_of_stock"),
        (1, 0, "in_stock"),
    ])
    def test_examples(self, stock, min_stock, expected):
        assert part_stock_status(stock, min_stock) == expected

    def test_rule_holds_over_a_grid(self):
        for min_stock in range(0, 8):
            for stock in range(0, 12):
                status = part_stock_status(stock, min_stock)
                if stock == 0:
                    assert status == "out_of_stock"
                elif stock <= min_stock:
                    assert status == "low_stock"
                else:
                    assert status == "in_stock"


class TestClassifyVehicle:
    def test_clean_vehicle_is_operational(self):
        result = classify_vehicle(make_vehicle(), [], [make_record()], today=TODAY)
        assert result.status == "operational"
        assert result.reasons == []
        assert result.last_inspection == datetime(2024, 4, 1)

    def test_no_history_is_not_overdue(self):
        result = classify_vehicle(make_vehicle(), [], [], today=TODAY)
        assert result.status == "operational"
        assert result.last_inspection is None

    def test_unread_urgent_alert_means_in_repair(self):
        alert = make_alert(priority="urgent", message="Engine failure")
        result = classify_vehicle(make_vehicle(), [alert], [make_record()], today=TODAY)
        assert result.status == "in_repair"
        assert result.urgent_issues == ["Engine failure"]

    def test_read_urgent_alert_is_resolved(self):
        alert = make_alert(priority="urgent", is_read=True)
        result = classify_vehicle(make_vehicle(), [alert], [make_record()], today=TODAY)
        assert result.status == "operational"

    def test_job_in_progress_means_in_repair(self):
        result = classify_vehicle(make_vehicle(), [], [make_record(), make_record(completed_at=None, type="repair")],
                                  today=TODAY)
        assert result.status == "in_repair"
        assert any("repair" in r for r in result.reasons)

    def test_overdue_next_due(self):
        record = make_record(next_due=datetime(2024, 5, 1))
        result = classify_vehicle(make_vehicle(), [], [record], today=TODAY)
        assert result.status == "maintenance_due"
        assert result.next_maintenance_due == datetime(2024, 5, 1)

    def test_next_due_today_is_not_overdue(self):
        record = make_record(next_due=datetime(2024, 6, 1, 9, 0))
        result = classify_vehicle(make_vehicle(), [], [record], today=TODAY)
        assert result.status == "operational"

    def test_service_older_than_six_months(self):
        record = make_record(completed_at=datetime(2023, 10, 1))
        result = classify_vehicle(make_vehicle(), [], [record], today=TODAY)
        assert result.status == "maintenance_due"

    def test_only_latest_service_counts(self):
        old = make_record(completed_at=datetime(2022, 1, 1), next_due=datetime(2022, 7, 1))
        recent = make_record(completed_at=datetime(2024, 5, 1), next_due=datetime(2024, 11, 1))
        result = classify_vehicle(make_vehicle(), [], [old, recent], today=TODAY)
        assert result.status == "operational"
        assert result.last_inspection == datetime(2024, 5, 1)

    def test_high_mileage(self):
        result = classify_vehicle(make_vehicle(mileage=200_001), [], [make_record()], today=TODAY)
        assert result.status == "maintenance_due"

    def test_mileage_at_limit_is_acceptable(self):
        result = classify_vehicle(make_vehicle(mileage=200_000), [], [make_record()], today=TODAY)
        assert result.status == "operational"

    def test_thresholds_can_be_overridden(self):
        result = classify_vehicle(make_vehicle(mileage=120_000), [], [make_record()], today=TODAY,
                                  mileage_limit=100_000)
        assert result.status == "maintenance_due"

    @pytest.mark.parametrize("priority", ["medium", "high"])
    def test_unread_non_urgent_alert_means_maintenance_due(self, priority):
        result = classify_vehicle(make_vehicle(), [make_alert(priority=priority)], [make_record()], today=TODAY)
        assert result.status == "maintenance_due"
        assert result.urgent_issues == []

    def test_other_vehicles_signals_are_ignored(self):
        alerts = [make_alert(priority="urgent", vehicle_id=2)]
        records = [make_record(completed_at=None, vehicle_id=2), make_record()]
        result = classify_vehicle(make_vehicle(), alerts, records, today=TODAY)
        assert result.status == "operational"

    def test_stored_status_is_not_an_input(self):
        a = classify_vehicle(make_vehicle(status="in_repair"), [], [make_record()], today=TODAY)
        b = classify_vehicle(make_vehicle(status="operational"), [], [make_record()], today=TODAY)
        assert a.status == b.status == "operational"

    def test_latest_completed_skips_in_progress(self):
        done = make_record(completed_at=datetime(2024, 1, 1))
        assert latest_completed([done, make_record(completed_at=None)]) is done
        assert latest_completed([]) is None
