def test_estimate_car(client):
    r = client.post("/emissions/estimate", json={"distance_km": 100, "mode": "car"})
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["status"] == "success"
    assert data["data"]["emission_kg"] == 19.2


def test_estimate_rejects_bad_input(client):
    r = client.post("/emissions/estimate", json={"distance_km": -1, "mode": "car"})
    assert r.status_code == 400
    r = client.post("/emissions/estimate", json={"distance_km": 10, "mode": "rocket"})
    assert r.status_code == 400
    assert "rocket" in r.json()["detail"]


def test_compare_is_sorted(client):
    r = client.post("/emissions/compare", json={"distance_km": 100})
    assert r.status_code == 200, r.text
    rows = r.json()["data"]
    assert [row["mode"] for row in rows] == ["bicycle", "bus", "car", "truck"]
    assert rows[1]["percentage_vs_car"] == 14.06
    assert rows[3]["percentage_vs_car"] == 468.75


def test_savings(client):
    r = client.post("/emissions/savings", json={"emission_kg": 90, "baseline_kg": 19.2})
    assert r.status_code == 200, r.text
    assert r.json()["data"] == {"saved_kg": 0.0, "percentage": 0.0}


def test_credits_and_price(client):
    r = client.post("/emissions/credits", json={"emission_kg": 1000})
    assert r.status_code == 200, r.text
    data = r.json()["data"]
    assert data["credits"] == 1.0
    assert data["price"] == {"min": 50.0, "max": 150.0, "average": 100.0}


def test_route_emission_by_label(client):
    payload = {
        "origin": "São Paulo, SP",
        "destination": "Rio de Janeiro, RJ",
        "distance_km": 430,
        "transport": "Ônibus",
    }
    r = client.post("/emissions/route", json=payload)
    assert r.status_code == 200, r.text
    data = r.json()["data"]
    assert data["route"] == {"origin": "São Paulo, SP", "destination": "Rio de Janeiro, RJ"}
    assert data["transport"] == "Ônibus"
    assert data["factor_kg_per_km"] == 0.027
    assert data["total_kg"] == 11.61


def test_status_modes_and_config(client):
    r = client.get("/status/modes")
    assert r.status_code == 200
    modes = {m["mode"]: m for m in r.json()["data"]}
    assert modes["car"]["factor_g_per_km"] == 192
    assert modes["car"]["label"] == "Carro"

    r = client.get("/status/config")
    data = r.json()["data"]
    assert data["carbon_credit"]["kg_per_credit"] == 1000
    assert data["routing"]["enabled"] is False
    assert data["distance_strategies"][0] == "catalog"


def test_savings_with_infinite_baseline_is_bad_request(client):
    r = client.post("/emissions/savings", json={"emission_kg": 1, "baseline_kg": "inf"})
    assert r.status_code == 400


def test_compare_defaults_to_reference_distance(client):
    r = client.post("/emissions/compare", json={})
    assert r.status_code == 200, r.text
    rows = {row["mode"]: row["emission"] for row in r.json()["data"]}
    # 100 km reference trip
    assert rows["car"] == 19.2
