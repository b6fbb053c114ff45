"""Tests for API endpoints."""

from fastapi.testclient import TestClient

QUERY_URL = "/proxy/v1/random/{}/queryContext"


def test_root(client):
    resp = client.get("/")
    assert resp.status_code == 200
    data = resp.json()
    assert data["name"] == "random-context-provider"
    assert data["endpoints"]["health"] == "GET /proxy/v1/random/health"
    assert data["endpoints"]["query_context"] == "POST /proxy/v1/random/{type}/queryContext"
    assert set(data["value_types"]) == {"boolean", "number", "structuredvalue", "text"}


def test_health(client):
    resp = client.get("/proxy/v1/random/health")
    assert resp.status_code == 200
    data = resp.json()
    assert set(data) == {"boolean", "number", "structuredValue", "text"}
    assert isinstance(data["boolean"], bool)
    assert isinstance(data["number"], int)
    assert 0 <= data["number"] < 43
    assert data["structuredValue"] == {"somevalue": "this"}
    assert isinstance(data["text"], str)
    assert 5 <= len(data["text"].split()) <= 14


def test_health_with_fixed_source(fixed_client):
    data = fixed_client.get("/proxy/v1/random/health").json()
    assert data == {
        "boolean": True,
        "number": 21,
        "structuredValue": {"somevalue": "this"},
        "text": " ea" * 10,
    }


def test_query_context(client):
    body = {"entities": [{"id": "E1", "type": "Room"}], "attributes": ["temperature"]}
    resp = client.post(QUERY_URL.format("number"), json=body)
    assert resp.status_code == 200

    data = resp.json()
    assert len(data["contextResponses"]) == 1
    entry = data["contextResponses"][0]
    assert entry["statusCode"] == {"code": "200", "reasonPhrase": "OK"}

    element = entry["contextElement"]
    assert element["id"] == "E1"
    assert element["type"] == "Room"
    assert element["isPattern"] == "false"
    assert len(element["attributes"]) == 1

    attribute = element["attributes"][0]
    assert attribute["name"] == "temperature"
    assert attribute["type"] == "Number"
    assert isinstance(attribute["value"], int)
    assert 0 <= attribute["value"] < 43


def test_query_context_with_fixed_source(fixed_client):
    body = {
        "entities": [{"id": "urn:ngsi-ld:Store:001", "type": "Store"}, {"id": "urn:ngsi-ld:Store:002", "type": "Store"}],
        "attributes": ["tweets", "temperature"],
    }
    data = fixed_client.post(QUERY_URL.format("BOOLEAN"), json=body).json()

    assert [r["contextElement"]["id"] for r in data["contextResponses"]] == [
        "urn:ngsi-ld:Store:001",
        "urn:ngsi-ld:Store:002",
    ]
    for entry in data["contextResponses"]:
        assert entry["contextElement"]["attributes"] == [
            {"name": "tweets", "type": "Boolean", "value": True},
            {"name": "temperature", "type": "Boolean", "value": True},
        ]


def test_query_context_text_type(client):
    body = {"entities": [{"id": "E1", "type": "Room"}], "attributes": ["description"]}
    data = client.post(QUERY_URL.format("text"), json=body).json()
    attribute = data["contextResponses"][0]["contextElement"]["attributes"][0]
    assert attribute["type"] == "Text"
    assert isinstance(attribute["value"], str)


def test_query_context_unknown_type(client):
    body = {"entities": [{"id": "E1", "type": "Room"}], "attributes": ["observedAt"]}
    resp = client.post(QUERY_URL.format("date"), json=body)
    assert resp.status_code == 200
    attribute = resp.json()["contextResponses"][0]["contextElement"]["attributes"][0]
    assert attribute == {"name": "observedAt", "type": "Date", "value": None}


def test_query_context_without_body(client):
    resp = client.post(QUERY_URL.format("number"))
    assert resp.status_code == 200
    assert resp.json() == {"contextResponses": []}


def test_query_context_without_attributes(client):
    body = {"entities": [{"id": "E1", "type": "Room"}, {"id": "E2", "type": "Room"}]}
    data = client.post(QUERY_URL.format("number"), json=body).json()
    assert len(data["contextResponses"]) == 2
    assert all(r["contextElement"]["attributes"] == [] for r in data["contextResponses"])


def test_query_context_malformed_entities(client):
    resp = client.post(QUERY_URL.format("number"), json={"entities": 5, "attributes": ["a"]})
    assert resp.status_code == 422


def test_process_time_header(client):
    resp = client.get("/proxy/v1/random/health")
    assert "X-Process-Time" in resp.headers
    assert "X-Timestamp" in resp.headers


def test_unexpected_error_returns_500(app):
    async def boom():
        raise RuntimeError("generator exploded")

    app.add_api_route("/boom", boom)

    with TestClient(app) as c:
        resp = c.get("/boom")

    assert resp.status_code == 500
    data = resp.json()
    assert data["success"] is False
    assert data["error_code"] == "INTERNAL_ERROR"
    assert data["details"] == {"path": "/boom", "method": "GET", "error_type": "RuntimeError"}


def test_custom_prefix():
    from random_provider.config import Settings
    from random_provider.main import create_app

    with TestClient(create_app(Settings(API_PREFIX="/v1/", _env_file=None))) as c:
        assert c.get("/v1/random/health").status_code == 200
        assert c.get("/proxy/v1/random/health").status_code == 404


def test_query_context_entity_without_type(fixed_client):
    body = {"entities": [{"id": "E1"}], "attributes": ["temperature"]}
    data = fixed_client.post(QUERY_URL.format("date"), json=body).json()
    assert data["contextResponses"][0]["contextElement"] == {
        "attributes": [{"name": "temperature", "type": "Date", "value": None}],
        "id": "E1",
        "isPattern": "false",
    }
