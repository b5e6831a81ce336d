"""Smoke script for the calculator API.

Sequence:
 1. Spread 100/month across periods.
 2. Convert 10 USD into every currency.
 3. Toggle a used currency twice (list should come back unchanged).
 4. Recalculate the form with a pending USD -> EUR switch.
"""

import json
import os
import tempfile

from fastapi.testclient import TestClient

from costcalc.core.config import Settings
from costcalc.main import create_app


def run():
    with tempfile.TemporaryDirectory() as d:
        settings = Settings(data_dir=d, db_path=os.path.join(d, "smoke.db"))
        client = TestClient(create_app(settings_override=settings))

        results = {}
        results["by_period"] = client.post(
            "/calc/period", json={"amount": 100, "period": "monthly"}
        ).json()
        results["by_currency"] = client.post(
            "/calc/currency", json={"amount": 10, "currency": "USD"}
        ).json()
        results["used_initial"] = client.get("/currencies").json()["used"]
        results["used_after_toggle"] = client.post("/currencies/used/GBP/toggle").json()["used"]
        results["used_after_second_toggle"] = client.post(
            "/currencies/used/GBP/toggle"
        ).json()["used"]
        results["recalc_switch"] = client.post(
            "/calc/recalc",
            json={"price": "10", "period": "monthly", "currency": "EUR", "switch_from": "USD"},
        ).json()
        bad = client.post("/calc/period", json={"amount": 1, "period": "hourly"})
        results["unknown_period_status"] = bad.status_code
        print(json.dumps(results, indent=2))


if __name__ == "__main__":
    run()
