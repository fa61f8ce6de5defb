# scripts/test/simulate_fleet.py
"""Drive a running backend: raise alerts, record maintenance, validate, ask the assistant."""

import argparse
import requests

BACKEND_URL = "http://localhost:8080/api"


def _headers(api_key):
    return {"X-API-Key": api_key} if api_key else {}


def raise_alert(plate, priority, message, api_key=None):
    vehicles = requests.get(f"{BACKEND_URL}/vehicles", headers=_headers(api_key), timeout=10).json()
    match = [v for v in vehicles if v["plate"] == plate]
    if not match:
        print(f"❌ Vehicle {plate} not found")
        return
    resp = requests.post(f"{BACKEND_URL}/alerts", headers=_headers(api_key), timeout=10, json={
        "vehicle_id": match[0]["id"], "type": "breakdown" if priority == "urgent" else "maintenance_due",
        "message": message, "priority": priority,
    })
    print(f"✅ Alert [{priority}] {plate} → HTTP {resp.status_code}: {resp.json()}")


def validate_all(api_key=None):
    resp = requests.post(f"{BACKEND_URL}/vehicles/validate-all", headers=_headers(api_key), timeout=10)
    body = resp.json()
    print(f"✅ Validated {body['validated']} vehicles, {body['changed']} changed")
    for r in body["results"]:
        v = r["validation"]
        print(f"   {r['vehicle']['plate']}: {r['previous_status']} → {v['status']}  {v['reasons']}")


def ask(action=None, message=None, api_key=None):
    resp = requests.post(f"{BACKEND_URL}/chat/query", headers=_headers(api_key), timeout=10,
                         json={"action": action, "message": message})
    print(f"💬 {resp.json()['response']}")


def show_stats(api_key=None):
    resp = requests.get(f"{BACKEND_URL}/dashboard/stats", headers=_headers(api_key), timeout=10)
    print(f"📊 {resp.json()}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Exercise the fleet API")
    parser.add_argument("command", choices=["alert", "validate", "chat", "stats"])
    parser.add_argument("--plate", default="ABC-123-FR")
    parser.add_argument("--priority", default="urgent", choices=["medium", "high", "urgent"])
    parser.add_argument("--message", default=None)
    parser.add_argument("--action", default=None,
                        choices=["vehicle-status", "maintenance-alerts", "parts-inventory", "schedule-maintenance"])
    parser.add_argument("--url", default=BACKEND_URL)
    parser.add_argument("--api-key", default=None)
    args = parser.parse_args()
    BACKEND_URL = args.url

    if args.command == "alert":
        raise_alert(args.plate, args.priority, args.message or "Breakdown reported by driver", args.api_key)
    elif args.command == "validate":
        validate_all(args.api_key)
    elif args.command == "chat":
        ask(args.action, args.message, args.api_key)
    else:
        show_stats(args.api_key)
