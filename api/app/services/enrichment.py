"""
Name enrichment via public lookup APIs.

Used endpoints (all GET, `?name=<name>`):
- agify.io        -> {"name": "...", "age": 42 | null}
- genderize.io    -> {"name": "...", "gender": "male" | "female" | null}
- nationalize.io  -> {"name": "...", "country": [{"country_id": "US", "probability": 0.6}, ...]}

The three lookups run one after another. The first transport or decode failure
aborts the whole enrichment and nothing from the earlier lookups is kept.
The HTTP status is not checked: an error reply such as a 429
`{"error": "Request limit reached"}` decodes to empty values.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Type, TypeVar

import pydantic
import requests
from pydantic import BaseModel

from .. import config
from ..errors import EnrichmentError
from ..schemas import Enrichment

logger = logging.getLogger(__name__)

ShapeT = TypeVar("ShapeT", bound=BaseModel)


class AgeLookup(BaseModel):
    age: Optional[int] = None


class GenderLookup(BaseModel):
    gender: Optional[str] = None


class CountryProbability(BaseModel):
    country_id: Optional[str] = None
    probability: Optional[float] = None


class NationalityLookup(BaseModel):
    # nationalize.io returns countries sorted by probability, highest first
    country: Optional[List[CountryProbability]] = None


class EnrichmentClient:
    def __init__(
        self,
        session: Optional[requests.Session] = None,
        *,
        age_url: str = config.AGIFY_URL,
        gender_url: str = config.GENDERIZE_URL,
        nationality_url: str = config.NATIONALIZE_URL,
        timeout: Optional[float] = config.ENRICHMENT_TIMEOUT_SECONDS,
    ):
        self.session = session or requests.Session()
        self.age_url = age_url
        self.gender_url = gender_url
        self.nationality_url = nationality_url
        self.timeout = timeout

    def close(self) -> None:
        self.session.close()

    def _lookup(self, lookup: str, url: str, name: str, shape: Type[ShapeT]) -> ShapeT:
        try:
            resp = self.session.get(url, params={"name": name}, timeout=self.timeout)
            data = resp.json()
        except requests.RequestException as exc:
            logger.error("%s lookup failed for name %r: %s", lookup, name, exc)
            raise EnrichmentError(f"{lookup} lookup failed") from exc
        except ValueError as exc:
            logger.error("%s lookup returned undecodable body for name %r: %s", lookup, name, exc)
            raise EnrichmentError(f"{lookup} lookup returned an invalid response") from exc

        try:
            return shape.model_validate(data)
        except pydantic.ValidationError as exc:
            logger.error("%s lookup returned unexpected payload for name %r: %s", lookup, name, exc)
            raise EnrichmentError(f"{lookup} lookup returned an invalid response") from exc

    def fetch_age(self, name: str) -> int:
        return self._lookup("age", self.age_url, name, AgeLookup).age or 0

    def fetch_gender(self, name: str) -> str:
        return self._lookup("gender", self.gender_url, name, GenderLookup).gender or ""

    def fetch_nationality(self, name: str) -> str:
        countries = self._lookup("nationality", self.nationality_url, name, NationalityLookup).country
        if not countries:
            return ""
        return countries[0].country_id or ""

    def enrich(self, name: str) -> Enrichment:
        age = self.fetch_age(name)
        gender = self.fetch_gender(name)
        nationality = self.fetch_nationality(name)
        result = Enrichment(age=age, gender=gender, nationality=nationality)
        logger.info(
            "enriched name %r: age=%d gender=%r nationality=%r",
            name, result.age, result.gender, result.nationality,
        )
        return result
