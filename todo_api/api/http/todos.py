from fastapi import APIRouter, Depends, Query, Response, status
from typing import Optional
import uuid

from todo_api.api.deps import get_app_settings, get_store
from todo_api.api.responses import fail_response, single_todo_response
from todo_api.config import Settings
from todo_api.domains.todos.exceptions import TodoConflictError, TodoNotFoundError
from todo_api.domains.todos.schemas import (
    ErrorResponse, SingleTodoResponse, TodoCreate, TodoListResponse,
    TodoResponse, TodoUpdate
)
from todo_api.domains.todos.store import TodoStore

router = APIRouter(prefix="/todos", tags=["todos"])

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


@router.get("", response_model=TodoListResponse)
async def list_todos(
    page: int = Query(1, ge=0),
    limit: Optional[int] = Query(None, ge=0),
    store: TodoStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings)
):
    """One page of todos in creation order"""
    if limit is None:
        limit = settings.default_page_limit

    todos = await store.list(page=page, limit=limit)

    return TodoListResponse(
        results=len(todos),
        todos=[TodoResponse.model_validate(todo) for todo in todos]
    )


@router.post(
    "",
    response_model=SingleTodoResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_409_CONFLICT: {"model": ErrorResponse}}
)
async def create_todo(
    todo_data: TodoCreate,
    store: TodoStore = Depends(get_store)
):
    try:
        todo = await store.create(todo_data.title, todo_data.content)
    except TodoConflictError as e:
        return fail_response(status.HTTP_409_CONFLICT, e.message)

    return single_todo_response(todo)


@router.get("/{todo_id}", response_model=SingleTodoResponse, responses=NOT_FOUND)
async def get_todo(
    todo_id: uuid.UUID,
    store: TodoStore = Depends(get_store)
):
    try:
        todo = await store.get(str(todo_id))
    except TodoNotFoundError as e:
        return fail_response(status.HTTP_404_NOT_FOUND, e.message)

    return single_todo_response(todo)


@router.patch("/{todo_id}", response_model=SingleTodoResponse, responses=NOT_FOUND)
async def update_todo(
    todo_id: uuid.UUID,
    update_data: TodoUpdate,
    store: TodoStore = Depends(get_store)
):
    """Partial update; empty title or content leaves the field unchanged"""
    try:
        todo = await store.update(
            str(todo_id),
            title=update_data.title,
            content=update_data.content,
            completed=update_data.completed
        )
    except TodoNotFoundError as e:
        return fail_response(status.HTTP_404_NOT_FOUND, e.message)

    return single_todo_response(todo)


@router.delete(
    "/{todo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND
)
async def delete_todo(
    todo_id: uuid.UUID,
    store: TodoStore = Depends(get_store)
):
    try:
        await store.delete(str(todo_id))
    except TodoNotFoundError as e:
        return fail_response(status.HTTP_404_NOT_FOUND, e.message)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
