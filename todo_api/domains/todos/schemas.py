from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Literal
from datetime import datetime


class TodoCreate(BaseModel):
    """Request body for creating a todo"""
    title: str
    content: Optional[str] = None


class TodoUpdate(BaseModel):
    """Request body for a partial update; empty strings keep the current value"""
    title: Optional[str] = None
    content: Optional[str] = None
    completed: Optional[bool] = None


class TodoResponse(BaseModel):
    id: str
    title: str
    content: str
    completed: bool
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    model_config = ConfigDict(from_attributes=True)


class TodoData(BaseModel):
    todo: TodoResponse


class SingleTodoResponse(BaseModel):
    status: Literal["success"] = "success"
    data: TodoData


class TodoListResponse(BaseModel):
    status: Literal["success"] = "success"
    results: int
    todos: List[TodoResponse]


class GenericResponse(BaseModel):
    status: str
    message: str


class ErrorResponse(BaseModel):
    status: Literal["fail"] = "fail"
    message: str
