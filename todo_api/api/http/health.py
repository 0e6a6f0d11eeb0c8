from fastapi import APIRouter, Depends

from todo_api.api.deps import get_app_settings
from todo_api.config import Settings
from todo_api.domains.todos.schemas import GenericResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=GenericResponse)
async def health_check(settings: Settings = Depends(get_app_settings)):
    """Liveness probe"""
    return GenericResponse(status="success", message=settings.health_message)
