"""Todo API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from achievify.api.dependencies import get_todo_service
from achievify.schemas.auth import MessageResponse
from achievify.schemas.todo import TodoCreate, TodoResponse, TodoUpdate
from achievify.services.todos import TodoService

router = APIRouter(prefix="/api/todos", tags=["todos"])


@router.get("", response_model=list[TodoResponse])
def list_todos(
    service: Annotated[TodoService, Depends(get_todo_service)],
    user_id: int | None = Query(default=None, alias="userId"),
    done: str | None = Query(default=None, description="'1' for done, '0' for open"),
):
    """List a user's todos, newest first."""
    return service.list_todos(user_id, done)


@router.post("", response_model=TodoResponse)
def create_todo(
    todo_data: TodoCreate,
    service: Annotated[TodoService, Depends(get_todo_service)],
):
    """Create a todo."""
    return service.create_todo(todo_data.user_id, todo_data.title)


@router.put("/{todo_id}", response_model=TodoResponse)
def update_todo(
    todo_id: int,
    todo_data: TodoUpdate,
    service: Annotated[TodoService, Depends(get_todo_service)],
):
    """Update a todo's title and/or done flag."""
    return service.update_todo(todo_id, todo_data)


@router.delete("/{todo_id}", response_model=MessageResponse)
def delete_todo(
    todo_id: int,
    service: Annotated[TodoService, Depends(get_todo_service)],
    user_id: int | None = Query(default=None, alias="userId"),
):
    """Delete a todo."""
    service.delete_todo(todo_id, user_id)
    return MessageResponse(message="Deleted")
