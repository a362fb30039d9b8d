from datetime import datetime


def test_name_from_query(client):
    resp = client.get("/message", params={"name": "Ada"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["name"] == "Ada"
    assert datetime.fromisoformat(data["timestamp"]).tzinfo is not None


def test_name_from_body_text(client):
    resp = client.post("/message", content="  Grace \n")
    assert resp.status_code == 200
    assert resp.json()["name"] == "Grace"


def test_query_wins_over_body(client):
    resp = client.post("/message", params={"name": "Ada"}, content="Grace")
    assert resp.json()["name"] == "Ada"


def test_defaults_to_unknown(client):
    assert client.get("/message").json()["name"] == "Unknown"
    assert client.post("/message", content="   ").json()["name"] == "Unknown"
    assert client.get("/message", params={"name": ""}).json()["name"] == "Unknown"


def test_other_methods_not_allowed(client):
    assert client.delete("/message").status_code == 405


def test_undecodable_body_is_internal_error(client):
    resp = client.post("/message", content=b"\xff\xfe\xfd")
    assert resp.status_code == 500
    assert resp.json() == {"message": "Internal Server Error"}
