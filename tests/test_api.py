import pytest

from costcalc.core.config import Settings


def test_health_and_root(client):
    assert client.get("/health").json()["status"] == "ok"
    assert "version" in client.get("/").json()
    resp = client.get("/nope")
    assert resp.status_code == 404
    assert resp.json()["error"] == "not_found"


def test_request_id_header_echoed(client):
    resp = client.get("/health", headers={"x-request-id": "abc-123"})
    assert resp.headers["x-request-id"] == "abc-123"


def test_periods_endpoint_basic(client):
    body = client.get("/periods").json()
    assert body["edition"] == "basic"
    assert body["periods"] == ["once", "daily", "weekly", "monthly", "yearly"]
    assert body["default"] == "daily"
    assert body["multipliers"]["monthly"] == 12


def test_calc_period(client):
    body = client.post("/calc/period", json={"amount": 100, "period": "monthly"}).json()
    assert body == {"once": 100, "daily": 3, "weekly": 23, "monthly": 100, "yearly": 1200}


def test_calc_period_rejects_unknown_and_out_of_edition(make_client):
    client = make_client(period_edition="extended")
    resp = client.post("/calc/period", json={"amount": 1, "period": "hourly"})
    assert resp.status_code == 422
    assert resp.json()["error"] == "validation_error"
    resp = client.post("/calc/period", json={"amount": 1, "period": "once"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "invalid_input"
    ok = client.post("/calc/period", json={"amount": 14, "period": "biweekly"}).json()
    assert "once" not in ok
    assert ok["biweekly"] == 14


def test_calc_currency_and_convert(client):
    body = client.post("/calc/currency", json={"amount": 10, "currency": "usd"}).json()
    assert body["USD"] == 10
    assert body["RUB"] == 923.02
    assert len(body) == 12
    conv = client.post(
        "/calc/convert", json={"amount": 10, "currency": "USD", "target_currency": "RUB"}
    ).json()
    assert conv["converted"] == pytest.approx(923.0203, abs=1e-4)
    assert client.post("/calc/currency", json={"amount": 1, "currency": "XYZ"}).status_code == 422


def test_recalc_endpoint_consumes_switch(client):
    resp = client.post(
        "/calc/recalc",
        json={"price": "10", "count": "", "period": "monthly", "currency": "EUR", "switch_from": "USD"},
    )
    body = resp.json()
    assert resp.status_code == 200
    assert body["price"] == "9.21"
    assert body["by_period"]["monthly"] == 9.21
    assert body["formatted_by_currency"]["EUR"] == "9.21"
    assert body["state"] == {"selected_currency": "EUR", "switch_from": None}


def test_recalc_endpoint_blank_input(client):
    body = client.post("/calc/recalc", json={"price": "", "switch_from": ""}).json()
    assert body["amount"] == 0
    assert body["period"] == "daily"
    assert body["currency"] == "EUR"


def test_used_currency_endpoints(client):
    body = client.get("/currencies").json()
    assert body["base"] == "EUR"
    assert body["used"] == ["EUR", "USD", "RUB"]
    assert [c["code"] for c in body["currencies"]][:3] == ["EUR", "USD", "RUB"]

    assert client.post("/currencies/used/gel/toggle").json()["used"] == ["EUR", "USD", "RUB", "GEL"]
    assert client.post("/currencies/used/USD/toggle").json()["used"] == ["EUR", "RUB", "GEL"]
    assert client.get("/currencies").json()["used"] == ["EUR", "RUB", "GEL"]

    resp = client.post("/currencies/used/XYZ/toggle")
    assert resp.status_code == 400

    assert client.put("/currencies/used", json={"currencies": ["THB"]}).json()["used"] == ["THB"]
    assert client.delete("/currencies/used").json()["used"] == ["EUR", "USD", "RUB"]


def test_ui_page_renders_tables(client):
    client.post("/currencies/used/USD/toggle")
    resp = client.get("/ui", params={"price": "100", "period": "monthly", "currency": "EUR"})
    assert resp.status_code == 200
    html = resp.text
    assert 'class="USD unused"' in html
    assert "1,200" in html
    assert "10,024.00" in html


def test_ui_page_switch(client):
    resp = client.get(
        "/ui", params={"price": "10", "period": "daily", "currency": "EUR", "switch_from": "USD"}
    )
    assert 'value="9.21"' in resp.text


def test_invalid_edition_rejected(tmp_path):
    with pytest.raises(ValueError):
        Settings(data_dir=tmp_path, period_edition="weird", _env_file=None).init_post_load()
    with pytest.raises(ValueError):
        Settings(
            data_dir=tmp_path, period_edition="extended", default_period="once", _env_file=None
        ).init_post_load()


def test_non_finite_amounts_rejected(client):
    resp = client.post("/calc/recalc", json={"price": "1e400"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "invalid_input"
    resp = client.post("/calc/period", json={"amount": 1e307, "period": "daily"})
    assert resp.status_code == 400


def test_toggle_path_currency_is_trimmed(client):
    resp = client.post("/currencies/used/%20usd/toggle")
    assert resp.status_code == 200
    assert resp.json()["used"] == ["EUR", "RUB"]


def test_reset_restores_defaults_after_edits(client):
    client.put("/currencies/used", json={"currencies": []})
    assert client.get("/currencies").json()["used"] == []
    assert client.delete("/currencies/used").json()["used"] == ["EUR", "USD", "RUB"]
    assert client.get("/currencies").json()["used"] == ["EUR", "USD", "RUB"]
