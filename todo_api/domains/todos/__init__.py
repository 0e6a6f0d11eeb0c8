from todo_api.domains.todos.entities import Todo
from todo_api.domains.todos.exceptions import TodoError, TodoConflictError, TodoNotFoundError
from todo_api.domains.todos.schemas import (
    TodoCreate, TodoUpdate, TodoResponse, TodoData,
    SingleTodoResponse, TodoListResponse, GenericResponse, ErrorResponse
)
from todo_api.domains.todos.store import TodoStore

__all__ = [
    "Todo",
    "TodoError", "TodoConflictError", "TodoNotFoundError",
    "TodoCreate", "TodoUpdate", "TodoResponse", "TodoData",
    "SingleTodoResponse", "TodoListResponse", "GenericResponse", "ErrorResponse",
    "TodoStore"
]
