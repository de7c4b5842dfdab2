"""
Application factory / wiring.

Served by src/asgi.py:  uvicorn src.asgi:app
"""

import logging
from random import Random
from typing import Awaitable, Callable, Generator, Optional
from uuid import uuid4

from fastapi import FastAPI, Request, Response
from sqlalchemy.orm import sessionmaker

from src.api.errors import register_exception_handlers
from src.api.router import router
from src.core.config import Settings
from src.core.logging_config import configure_logging, request_id_var
from src.db.database import create_db_engine, sql_store_provider
from src.db.kv_store import InMemoryKeyValueStore
from src.services.hint_service import (
    DisabledHintGenerator,
    HintGenerator,
    LLMHintGenerator,
)
from src.wordle.dictionary import WordList

logger = logging.getLogger(__name__)


def build_dictionary(settings: Settings) -> WordList:
    if settings.words_file:
        return WordList.from_file(settings.words_file)
    return WordList.default()


def build_hint_generator(settings: Settings) -> HintGenerator:
    if not settings.hint_api_url:
        return DisabledHintGenerator()
    return LLMHintGenerator(
        api_url=settings.hint_api_url,
        model=settings.hint_model,
        api_key=settings.hint_api_key,
        timeout=settings.hint_timeout,
    )


def in_memory_store_provider(
    store: InMemoryKeyValueStore,
) -> Callable[[], Generator[InMemoryKeyValueStore, None, None]]:
    def get_store() -> Generator[InMemoryKeyValueStore, None, None]:
        yield store

    return get_store


def create_app(
    settings: Optional[Settings] = None,
    *,
    dictionary: Optional[WordList] = None,
    hint_generator: Optional[HintGenerator] = None,
    rng: Optional[Random] = None,
) -> FastAPI:
    """Every collaborator can be injected, anything not given is built from the settings."""
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    app = FastAPI(title="Wordle backend")
    app.state.settings = settings
    app.state.dictionary = dictionary or build_dictionary(settings)
    app.state.hint_generator = hint_generator or build_hint_generator(settings)
    app.state.rng = rng or Random()

    if settings.database_url:
        engine = create_db_engine(settings.database_url)
        app.state.store_provider = sql_store_provider(sessionmaker(bind=engine))
        logger.info("Using SQL key-value store (%s)", engine.url.render_as_string())
    else:
        app.state.store_provider = in_memory_store_provider(InMemoryKeyValueStore())
        logger.info("Using in-memory key-value store")

    @app.middleware("http")
    async def assign_request_id(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        token = request_id_var.set(str(uuid4()))
        try:
            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id_var.get()
            return response
        finally:
            request_id_var.reset(token)

    register_exception_handlers(app)
    app.include_router(router)
    return app
