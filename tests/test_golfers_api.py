# tests/test_golfers_api.py


def seed_golfers(client):
    for body in [
        {"name": "Al", "scores": {"2021 Wk 1": 90, "2021 Wk 2": "", "2021 Wk 3": 85}},
        {"name": "Bea", "scores": {"2020 WK 30": 44, "2021 Wk 1": 46}},
    ]:
        r = client.post("/golfers/", json=body)
        assert r.status_code == 200, r.text


def test_create_and_list_golfers(client):
    seed_golfers(client)

    r = client.get("/golfers/")
    assert r.status_code == 200
    docs = r.json()
    assert [d["Names"] for d in docs] == ["Al", "Bea"]
    assert docs[0]["2021 Wk 3"] == 85

    r = client.get("/golfers/Bea")
    assert r.status_code == 200
    assert r.json()["2020 WK 30"] == 44


def test_duplicate_golfer_is_rejected(client):
    seed_golfers(client)
    r = client.post("/golfers/", json={"name": "Al"})
    assert r.status_code == 400
    assert "already exists" in r.json()["detail"]


def test_golfer_stats(client):
    seed_golfers(client)

    r = client.get("/golfers/Al/stats")
    assert r.status_code == 200, r.text
    st = r.json()
    assert st["scores"] == [90, 85]
    assert st["dates"] == ["2021 Wk 1", "2021 Wk 3"]
    assert st["x_values"] == [202101, 202103]
    assert st["avg_score"] == 87.5


def test_golfer_stats_window(client):
    seed_golfers(client)

    r = client.get("/golfers/Bea/stats", params={"start_year": 2021, "start_week": 1})
    assert r.status_code == 200
    assert r.json()["scores"] == [46]

    r = client.get("/golfers/Bea/stats", params={"start_year": 2025})
    assert r.status_code == 200
    assert r.json() == {"handicap": 0, "avg_score": 0.0, "trend": [0.0, 0.0], "scores": [], "dates": [], "x_values": []}


def test_unknown_golfer_is_404(client):
    seed_golfers(client)
    assert client.get("/golfers/Nobody").status_code == 404
    assert client.get("/golfers/Nobody/stats").status_code == 404


def test_metadata_endpoint(client):
    seed_golfers(client)

    r = client.get("/golfers/metadata")
    assert r.status_code == 200
    meta = r.json()
    assert meta["names"] == ["Al", "Bea"]
    assert meta["years"] == [2021, 2020]
    assert meta["weeks"] == [1, 2, 3, 30]
    # JSON object keys come back as strings
    assert meta["years_to_weeks"] == {"2021": [1, 2, 3], "2020": [30]}
    assert meta["latest_year"] == 2021
    assert meta["latest_week"] == 3


def test_create_golfer_rejects_negative_scores(client):
    r = client.post("/golfers/", json={"name": "Neg", "scores": {"2021 Wk 1": -40}})
    assert r.status_code == 422
    r = client.post("/golfers/", json={"name": "Neg", "scores": {"2021 Wk 1": "-40"}})
    assert r.status_code == 422
    assert client.get("/golfers/Neg").status_code == 404


def test_create_golfer_stores_one_canonical_key_per_week(client):
    r = client.post("/golfers/", json={"name": "Cal", "scores": {"2021 WK 1": 44, "2019 Wk 2": "41"}})
    assert r.status_code == 200, r.text
    doc = client.get("/golfers/Cal").json()
    assert doc == {"Names": "Cal", "2021 Wk 1": 44, "2019 WK 2": "41"}

    r = client.post("/golfers/", json={"name": "Dup", "scores": {"2021 Wk 1": 44, "2021 WK 1": 45}})
    assert r.status_code == 422
