from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from api.app.dependencies import get_enrichment_client, get_person_store
from api.app.errors import EnrichmentError, NotFoundError, StorageError
from api.app.main import app
from api.app.schemas import Enrichment, Person


class InMemoryPersonStore:
    def __init__(self):
        self.rows: Dict[int, Person] = {}
        self._next_id = 1

    def create(self, data: Dict[str, Any]) -> Person:
        person = Person(id=self._next_id, **data)
        self._next_id += 1
        self.rows[person.id] = person
        return person

    def list(self, *, name: Optional[str] = None, page: int = 1, limit: int = 10) -> List[Person]:
        rows = [p for _, p in sorted(self.rows.items())]
        if name:
            rows = [p for p in rows if name.lower() in p.name.lower()]
        start = (page - 1) * limit
        return rows[start:start + limit]

    def get(self, person_id: int) -> Person:
        if person_id not in self.rows:
            raise NotFoundError("Person not found")
        return self.rows[person_id]

    def update(self, person: Person) -> Person:
        if person.id not in self.rows:
            raise NotFoundError("Person not found")
        self.rows[person.id] = person
        return person

    def delete(self, person_id: int) -> None:
        if self.rows.pop(person_id, None) is None:
            raise StorageError(f"Person {person_id} does not exist")


class StubEnricher:
    def __init__(self):
        self.results: Dict[str, Enrichment] = {}
        self.calls: List[str] = []
        self.fail = False

    def enrich(self, name: str) -> Enrichment:
        self.calls.append(name)
        if self.fail:
            raise EnrichmentError("age lookup failed")
        return self.results.get(name, Enrichment(age=30, gender="male", nationality="RU"))


@pytest.fixture
def store():
    return InMemoryPersonStore()


@pytest.fixture
def enricher():
    return StubEnricher()


@pytest.fixture
def client(store, enricher):
    app.dependency_overrides[get_person_store] = lambda: store
    app.dependency_overrides[get_enrichment_client] = lambda: enricher
    yield TestClient(app)
    app.dependency_overrides.clear()
