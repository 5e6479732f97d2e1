import pytest

# (method, path, expected status)
CASES = [
    ("GET", "/", 200),
    ("GET", "/persons", 200),
]

@pytest.mark.parametrize("method,path,expected", CASES)
def test_endpoints_basic(client, method, path, expected):
    r = client.request(method, path)
    assert r.status_code != 404, f"{path} not found"
    assert r.status_code != 405, f"{path} method not allowed"
    assert r.status_code == expected


def test_openapi_contains_person_routes(client):
    r = client.get("/openapi.json")
    assert r.status_code == 200
    paths = r.json().get("paths", {})
    assert set(paths["/persons"]) >= {"get", "post"}
    assert set(paths["/persons/{person_id}"]) >= {"get", "put", "delete"}
