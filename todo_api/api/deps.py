from fastapi import Request

from todo_api.config import Settings
from todo_api.domains.todos.store import TodoStore


def get_store(request: Request) -> TodoStore:
    """Store owned by the running application"""
    return request.app.state.store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
