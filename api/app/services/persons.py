import logging
from typing import Optional, Tuple

from ..config import DEFAULT_LIMIT, DEFAULT_PAGE
from ..errors import ServiceError
from ..schemas import Person, PersonCreate, PersonUpdate
from .person_store import MAX_BIGINT

logger = logging.getLogger(__name__)


def _positive_int(raw: Optional[str], default: int) -> int:
    try:
        value = int(raw) if raw is not None else default
    except (TypeError, ValueError):
        return default
    return value if 1 <= value <= MAX_BIGINT else default


def pagination(page_raw: Optional[str], limit_raw: Optional[str]) -> Tuple[int, int]:
    return _positive_int(page_raw, DEFAULT_PAGE), _positive_int(limit_raw, DEFAULT_LIMIT)


def create_person(store, enricher, payload: PersonCreate) -> Person:
    try:
        enrichment = enricher.enrich(payload.name)
        person = store.create({**payload.model_dump(), **enrichment.model_dump()})
    except ServiceError as exc:
        logger.error("create person with name %r failed: %s", payload.name, exc)
        raise
    logger.info("created person %s (%s %s)", person.id, person.name, person.surname)
    return person


def update_person(store, enricher, person: Person, payload: PersonUpdate) -> Person:
    changes = {}
    try:
        if payload.name and payload.name != person.name:
            enrichment = enricher.enrich(payload.name)
            changes.update(name=payload.name, **enrichment.model_dump())
        if payload.surname:
            changes["surname"] = payload.surname
        if payload.patronymic:
            changes["patronymic"] = payload.patronymic
        updated = store.update(person.model_copy(update=changes))
    except ServiceError as exc:
        logger.error("update person %s failed: %s", person.id, exc)
        raise
    logger.info("updated person %s, changed fields: %s", person.id, sorted(changes))
    return updated


def delete_person(store, person_id: int) -> None:
    try:
        store.delete(person_id)
    except ServiceError as exc:
        logger.error("delete person %s failed: %s", person_id, exc)
        raise
    logger.info("deleted person %s", person_id)
