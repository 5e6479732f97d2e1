import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.app.errors import ValidationError, register_error_handlers


def test_create_person_requires_names(client):
    response = client.post('/persons', json={})
    assert response.status_code == 400
    body = response.json()
    fields = {err['loc'][-1] for err in body.get('errors', []) if err.get('loc')}
    assert {'name', 'surname'} <= fields
    assert 'name' in body['detail']


@pytest.mark.parametrize("payload", [
    {"name": "", "surname": "Ivanov"},
    {"name": "Ivan", "surname": ""},
    {"surname": "Ivanov"},
])
def test_create_person_rejects_missing_or_empty_fields(client, enricher, payload):
    response = client.post('/persons', json=payload)
    assert response.status_code == 400
    assert enricher.calls == []


def test_non_numeric_id_is_rejected(client):
    response = client.get('/persons/abc')
    assert response.status_code == 400


def test_service_validation_error_maps_to_400():
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/boom")
    def boom():
        raise ValidationError("surname: must not be blank")

    resp = TestClient(app).get("/boom")
    assert resp.status_code == 400
    assert resp.json() == {"detail": "surname: must not be blank"}
