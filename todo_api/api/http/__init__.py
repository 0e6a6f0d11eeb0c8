from todo_api.api.http.health import router as health_router
from todo_api.api.http.todos import router as todos_router

__all__ = [
    "health_router",
    "todos_router"
]
