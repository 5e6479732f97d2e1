from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ..dependencies import get_enrichment_client, get_person_store, load_person
from ..schemas import DeleteResult, Person, PersonCreate, PersonUpdate
from ..services import persons as person_service
from ..services.enrichment import EnrichmentClient
from ..services.person_store import PersonStore


router = APIRouter(
    prefix="/persons",
    tags=["persons"],
)


@router.get("", response_model=List[Person])
def list_persons(
    name: Optional[str] = Query(default=None, description="Case-insensitive substring of the name"),
    page: Optional[str] = Query(default=None, description="1-based page number"),
    limit: Optional[str] = Query(default=None, description="Page size"),
    store: PersonStore = Depends(get_person_store),
):
    page_num, page_size = person_service.pagination(page, limit)
    return store.list(name=name, page=page_num, limit=page_size)


@router.get("/{person_id}", response_model=Person)
def get_person(person: Person = Depends(load_person)):
    return person


@router.post("", response_model=Person)
def create_person(
    payload: PersonCreate,
    store: PersonStore = Depends(get_person_store),
    enricher: EnrichmentClient = Depends(get_enrichment_client),
):
    return person_service.create_person(store, enricher, payload)


@router.put("/{person_id}", response_model=Person)
def update_person(
    payload: PersonUpdate,
    person: Person = Depends(load_person),
    store: PersonStore = Depends(get_person_store),
    enricher: EnrichmentClient = Depends(get_enrichment_client),
):
    return person_service.update_person(store, enricher, person, payload)


@router.delete("/{person_id}", response_model=DeleteResult)
def delete_person(person_id: int, store: PersonStore = Depends(get_person_store)):
    person_service.delete_person(store, person_id)
    return DeleteResult(id=person_id)
