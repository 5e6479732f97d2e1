from fastapi import Depends, Request

from .schemas import Person
from .services.enrichment import EnrichmentClient
from .services.person_store import PersonStore


def get_person_store(request: Request) -> PersonStore:
    return request.app.state.person_store


def get_enrichment_client(request: Request) -> EnrichmentClient:
    return request.app.state.enrichment_client


def load_person(person_id: int, store: PersonStore = Depends(get_person_store)) -> Person:
    # resolved before the request body, so an unknown id wins over a bad body
    return store.get(person_id)
