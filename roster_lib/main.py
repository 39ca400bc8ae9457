"""Application factory for the Roster FastAPI app.

This module exposes `create_app(config: Config) -> FastAPI` which performs
all setup (logging, config loading, storage/service composition and router
registration). Nothing happens at import time so tests can construct
isolated apps.

To create an app for production or local runs:

    from roster_lib.main import create_app, Config
    app = create_app(Config())
"""
from dataclasses import dataclass
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from roster_lib.config.config import load_server_config
from roster_lib.logging_config import configure_logging
from roster_lib.storage import create_storage


@dataclass
class Config:
    data_dir: str = "data"
    storage_backend: str = "file"
    serializer: str = "yaml"
    # Load people from the server config's database_file on startup
    seed_people: bool = True


def create_app(config: Config) -> FastAPI:
    """Create and return a configured FastAPI application."""
    server_cfg = load_server_config(config.data_dir)
    logger = configure_logging(server_cfg.log_level)

    storage = create_storage(
        backend=config.storage_backend,
        serializer=config.serializer,
        data_dir=config.data_dir,
    )

    from roster_lib.people import PersonStore
    person_store = PersonStore(storage)
    if config.seed_people and server_cfg.database_file:
        database_file = Path(server_cfg.database_file)
        if not database_file.is_absolute():
            database_file = Path(config.data_dir) / database_file
        person_store.seed_from_file(database_file)

    from roster_lib.services import ServiceContainer
    container = ServiceContainer()
    container.register_singleton("server_config", server_cfg)
    container.register_singleton("people_storage", storage)
    container.register_singleton("person_store", person_store)

    app = FastAPI(title=server_cfg.server_name)
    app.state.container = container

    @app.exception_handler(StarletteHTTPException)
    async def starlette_http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            error_code = {'error': 'not_found', 'message': 'The requested resource was not found.'}
            return JSONResponse(status_code=404, content=error_code)
        return JSONResponse(status_code=exc.status_code, content={'detail': exc.detail}, headers=getattr(exc, 'headers', None))

    # Router registration: import routers here to avoid import-time side-effects
    from roster_lib.people.api import router as people_router
    from roster_lib.server.api import router as server_router

    app.include_router(people_router)
    app.include_router(server_router, prefix='/api')

    logger.info("Roster app created with %s storage", config.storage_backend)
    return app
