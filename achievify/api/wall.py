"""Inspiration wall API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile

from achievify.api.dependencies import get_wall_service
from achievify.schemas.auth import MessageResponse
from achievify.schemas.wall import QuoteCreate, WallItemResponse
from achievify.services.wall import WallService

router = APIRouter(prefix="/api/wall", tags=["wall"])


@router.get("", response_model=list[WallItemResponse])
def list_wall_items(
    service: Annotated[WallService, Depends(get_wall_service)],
    user_id: int | None = Query(default=None, alias="userId"),
    kind: str | None = Query(default=None, description="'quote' or 'image'"),
):
    """List a user's wall items, newest first."""
    return service.list_items(user_id, kind)


@router.post("/quote", response_model=WallItemResponse)
def add_quote(
    quote_data: QuoteCreate,
    service: Annotated[WallService, Depends(get_wall_service)],
):
    """Pin a quote to the wall."""
    return service.add_quote(
        quote_data.user_id,
        quote_data.text,
        author=quote_data.author,
        color=quote_data.color,
    )


@router.post("/image", response_model=WallItemResponse)
def add_image(
    service: Annotated[WallService, Depends(get_wall_service)],
    user_id: Annotated[int | None, Form(alias="userId")] = None,
    caption: Annotated[str | None, Form()] = None,
    file: Annotated[UploadFile | None, File(description="PNG, JPEG or WEBP image")] = None,
):
    """Pin an uploaded image to the wall."""
    return service.add_image(user_id, caption, file)


@router.delete("/{item_id}", response_model=MessageResponse)
def delete_wall_item(
    item_id: int,
    service: Annotated[WallService, Depends(get_wall_service)],
    user_id: int | None = Query(default=None, alias="userId"),
):
    """Delete a wall item and its image file, if any."""
    service.remove(item_id, user_id)
    return MessageResponse(message="Deleted")
