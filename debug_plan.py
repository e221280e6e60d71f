# debug_plan.py
import asyncio
import json

from budget_trip.orchestrator import orchestrate_plan


async def main():
    payload = {
        "budget": 18000,
        "source": "Delhi",
        "destination": "Jaipur",
        "startDate": "2025-11-14",
        "endDate": "2025-11-17",
        "preference": "balanced",
    }

    # Call orchestrator directly
    result = await orchestrate_plan(payload)
    print("➡️ Orchestrator returned:\n")
    print(json.dumps(result, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    asyncio.run(main())
