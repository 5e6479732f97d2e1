"""
Persistence for person records (raw SQL over psycopg).

The connection factory is passed in, so the store carries no global handle
and tests can hand it a fake connection.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

import psycopg

from ..config import DEFAULT_LIMIT, DEFAULT_PAGE
from ..db import get_connection
from ..errors import NotFoundError, StorageError
from ..schemas import Person

logger = logging.getLogger(__name__)

# LIMIT and OFFSET are bigint parameters in PostgreSQL
MAX_BIGINT = 2**63 - 1

PERSON_COLUMNS = "id, name, surname, patronymic, age, gender, nationality"

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS persons (
    id BIGSERIAL PRIMARY KEY,
    name TEXT NOT NULL,
    surname TEXT NOT NULL,
    patronymic TEXT,
    age INTEGER NOT NULL DEFAULT 0,
    gender TEXT NOT NULL DEFAULT '',
    nationality TEXT NOT NULL DEFAULT ''
);
"""


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class PersonStore:
    def __init__(self, connect: Callable[[], Any] = get_connection):
        self._connect = connect

    def ensure_schema(self) -> None:
        try:
            with self._connect() as conn, conn.cursor() as cur:
                cur.execute(SCHEMA_SQL)
                conn.commit()
        except psycopg.Error as exc:
            raise StorageError(f"Schema migration failed: {exc}") from exc
        logger.info("persons table ready")

    def create(self, data: Dict[str, Any]) -> Person:
        try:
            with self._connect() as conn, conn.cursor() as cur:
                cur.execute(
                    f"""
                    INSERT INTO persons (name, surname, patronymic, age, gender, nationality)
                    VALUES (%(name)s, %(surname)s, %(patronymic)s, %(age)s, %(gender)s, %(nationality)s)
                    RETURNING {PERSON_COLUMNS};
                    """,
                    data,
                )
                row = cur.fetchone()
                conn.commit()
        except psycopg.Error as exc:
            raise StorageError(f"Failed to create person: {exc}") from exc
        return Person.model_validate(row)

    def list(
        self,
        *,
        name: Optional[str] = None,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
    ) -> List[Person]:
        sql = f"SELECT {PERSON_COLUMNS} FROM persons WHERE 1=1"
        params: List[Any] = []
        if name:
            sql += " AND name ILIKE %s"
            params.append(f"%{_escape_like(name)}%")
        sql += " ORDER BY id LIMIT %s OFFSET %s"
        params += [limit, min((page - 1) * limit, MAX_BIGINT)]
        try:
            with self._connect() as conn, conn.cursor() as cur:
                cur.execute(sql, params)
                rows = cur.fetchall()
        except psycopg.Error as exc:
            raise StorageError(f"Failed to list persons: {exc}") from exc
        return [Person.model_validate(row) for row in rows]

    def get(self, person_id: int) -> Person:
        try:
            with self._connect() as conn, conn.cursor() as cur:
                cur.execute(f"SELECT {PERSON_COLUMNS} FROM persons WHERE id=%s;", (person_id,))
                row = cur.fetchone()
        except psycopg.Error as exc:
            raise StorageError(f"Failed to load person {person_id}: {exc}") from exc
        if not row:
            raise NotFoundError("Person not found")
        return Person.model_validate(row)

    def update(self, person: Person) -> Person:
        try:
            with self._connect() as conn, conn.cursor() as cur:
                cur.execute(
                    f"""
                    UPDATE persons
                    SET name=%(name)s, surname=%(surname)s, patronymic=%(patronymic)s,
                        age=%(age)s, gender=%(gender)s, nationality=%(nationality)s
                    WHERE id=%(id)s
                    RETURNING {PERSON_COLUMNS};
                    """,
                    person.model_dump(),
                )
                row = cur.fetchone()
                conn.commit()
        except psycopg.Error as exc:
            raise StorageError(f"Failed to update person {person.id}: {exc}") from exc
        if not row:
            raise NotFoundError("Person not found")
        return Person.model_validate(row)

    def delete(self, person_id: int) -> None:
        try:
            with self._connect() as conn, conn.cursor() as cur:
                cur.execute("DELETE FROM persons WHERE id=%s RETURNING id;", (person_id,))
                row = cur.fetchone()
                conn.commit()
        except psycopg.Error as exc:
            raise StorageError(f"Failed to delete person {person_id}: {exc}") from exc
        # a repeated delete is reported, not ignored
        if not row:
            raise StorageError(f"Person {person_id} does not exist")
