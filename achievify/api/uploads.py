"""Serves stored blobs at the public path kept in their rows."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from achievify.api.dependencies import get_blob_store
from achievify.exceptions import NotFoundError
from achievify.services.storage import PUBLIC_PREFIX, BlobStore

router = APIRouter(prefix=f"/{PUBLIC_PREFIX}", tags=["uploads"])


@router.get("/{subdir}/{filename}")
def get_upload(
    subdir: str,
    filename: str,
    blob_store: Annotated[BlobStore, Depends(get_blob_store)],
):
    """Stream a stored file from the blob store."""
    if subdir not in blob_store.subdirs:
        raise NotFoundError("File not found")
    try:
        path = blob_store.resolve(f"{PUBLIC_PREFIX}/{subdir}/{filename}")
    except ValueError:
        raise NotFoundError("File not found")
    if not path.is_file():
        raise NotFoundError("File not found")
    return FileResponse(path)
