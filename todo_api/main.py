import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from todo_api.api.http import health_router, todos_router
from todo_api.api.responses import validation_exception_handler
from todo_api.config import Settings, get_settings
from todo_api.domains.todos.store import TodoStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"🚀 {app.title} started successfully")
    yield
    todo_count = await app.state.store.count()
    logger.info(f"{app.title} shutting down, discarding {todo_count} todos")


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[TodoStore] = None
) -> FastAPI:
    """Build the application around its own todo store"""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="In-memory todo list API",
        version=settings.version,
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.store = store or TodoStore()

    # Only the configured frontend may call the API from a browser
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["Authorization", "Accept", "Content-Type"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(health_router, prefix=settings.api_prefix)
    app.include_router(todos_router, prefix=settings.api_prefix)

    return app


app = create_app()
