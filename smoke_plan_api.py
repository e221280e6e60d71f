import json
import os

import requests

BASE_URL = os.getenv("BUDGET_TRIP_BASE_URL", "http://127.0.0.1:8000")

# --- smoke payload ---
payload = {
    "budget": 25000,
    "source": "Mumbai",
    "destination": "Goa",
    "startDate": "2025-12-20",
    "endDate": "2025-12-24",
    "preference": "cheapest",
}

def run_smoke():
    url = f"{BASE_URL}/api/plan"
    headers = {"Content-Type": "application/json"}

    print(f"➡️ Sending POST {url}")
    print(json.dumps(payload, indent=2))

    resp = requests.post(url, headers=headers, json=payload, timeout=30)

    print(f"\n⬅️ Status: {resp.status_code}")
    try:
        data = resp.json()
    except ValueError:
        print(resp.text)
        return
    print(json.dumps(data, indent=2, ensure_ascii=False))

if __name__ == "__main__":
    run_smoke()
