import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from . import config
from .errors import register_error_handlers
from .routers import persons
from .services.enrichment import EnrichmentClient
from .services.person_store import PersonStore


@asynccontextmanager
async def lifespan(app: FastAPI):
    store = PersonStore()
    store.ensure_schema()
    enricher = EnrichmentClient()
    app.state.person_store = store
    app.state.enrichment_client = enricher
    try:
        yield
    finally:
        enricher.close()


app = FastAPI(title="Person Enrichment API", lifespan=lifespan)

register_error_handlers(app)

app.include_router(persons.router)

@app.get("/")
def root():
    return {"status": "ok"}


def run() -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info("starting service on port %s", config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
