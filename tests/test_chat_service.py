"""Unit tests for the fleet assistant."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from datetime import datetime
from app.services.chat_service import (
    answer_query, route_message, schedule_maintenance_response, HELP_MESSAGE,
)
from app.services.sample_data import seed_sample_data
from app.services.storage import MemoryStorage


@pytest.fixture
def storage():
    s = MemoryStorage()
    seed_sample_data(s)
    return s


class TestActions:
    def test_vehicle_status(self, storage):
        response = answer_query(storage, action="vehicle-status")
        assert "3 vehicle(s)" in response
        assert "XYZ-789-FR" in response       # maintenance_due in sample data
        assert "ABC-123-FR" not in response   # operational

    def test_maintenance_alerts_urgent_first(self, storage):
        response = answer_query(storage, action="maintenance-alerts")
        lines = response.splitlines()
        assert lines[0] == "3 unread alert(s):"
        assert lines[1].startswith("- [URGENT] XYZ-789-FR")
        assert lines[2].startswith("- [HIGH]")

    def test_maintenance_alerts_all_read(self, storage):
        for a in storage.list_alerts():
            storage.mark_alert_read(a.id)
        assert "No unread" in answer_query(storage, action="maintenance-alerts")

    def test_parts_inventory(self, storage):
        response = answer_query(storage, action="parts-inventory")
        assert "- Low stock: 1" in response
        assert "- Out of stock: 1" in response
        assert "BRK-002-F" in response
        assert "BAT-003-70" in response
        assert "FLT-001-D" not in response

    def test_schedule_upcoming(self, storage):
        response = schedule_maintenance_response(storage, now=datetime(2024, 6, 20))
        assert "Overdue" not in response
        assert "Due within" in response
        assert "- ABC-123-FR: due 2024-07-08" in response
        assert "DEF-456-FR" not in response

    def test_schedule_overdue_sorted_by_date(self, storage):
        response = schedule_maintenance_response(storage, now=datetime(2025, 1, 10))
        assert response.splitlines() == [
            "Overdue maintenance:",
            "- ABC-123-FR: due 2024-07-08",
            "- DEF-456-FR: due 2024-12-22",
        ]

    def test_schedule_nothing_due(self):
        assert "No maintenance is due" in answer_query(MemoryStorage(), action="schedule-maintenance")

    def test_unknown_action(self, storage):
        assert answer_query(storage, action="launch-rocket") == HELP_MESSAGE

    def test_empty_store(self):
        empty = MemoryStorage()
        assert "No vehicles" in answer_query(empty, action="vehicle-status")
        assert "empty" in answer_query(empty, action="parts-inventory")


class TestFreeText:
    @pytest.mark.parametrize("message,action", [
        ("Show me the urgent alerts", "maintenance-alerts"),
        ("Which parts are low on stock?", "parts-inventory"),
        ("État des véhicules", "vehicle-status"),
        ("Can you schedule a service?", "schedule-maintenance"),
        ("Bonjour", None),
    ])
    def test_routing(self, message, action):
        assert route_message(message) == action

    def test_message_answered_like_action(self, storage):
        assert answer_query(storage, message="fleet status please") == answer_query(storage, action="vehicle-status")

    def test_action_wins_over_message(self, storage):
        assert answer_query(storage, message="parts", action="vehicle-status") == \
            answer_query(storage, action="vehicle-status")

    def test_no_input(self, storage):
        assert answer_query(storage) == HELP_MESSAGE
