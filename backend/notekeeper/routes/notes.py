"""
NoteKeeper Backend — Notes JSON API
=====================================

What:  CRUD endpoints under /api for the note collection.
How:   Parse the body (JSON or form-encoded), validate it into a request
       schema, delegate to NoteService, return JSON.

Route Inventory:
    GET    /api/notes             all notes, storage order
    POST   /api/notes             create (always succeeds)
    DELETE /api/notes             bulk delete: {"all": true} or {"ids": [...]}
    GET    /api/notes/{id}        single note or 404
    PUT    /api/notes/{id}        partial update or 404
    DELETE /api/notes/{id}        {"success": true} or 404
    GET    /api/dashboard         pinned / recent split used by the home page

Error bodies are produced by the global handlers in main.py.
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Request

from notekeeper.exceptions import NotFoundError, ValidationError
from notekeeper.models.note import Note
from notekeeper.schemas.note import (
    BulkDeleteRequest,
    BulkDeleteResponse,
    DashboardResponse,
    DeleteResponse,
    ErrorResponse,
    NoteCreate,
    NoteUpdate,
)
from notekeeper.services.note_service import note_service
from notekeeper.store import NoteStore, get_note_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Notes"])

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def _is_json_media_type(media_type: str) -> bool:
    return media_type == "application/json" or media_type.endswith("+json")


async def read_payload(request: Request) -> Dict[str, Any]:
    """
    Request body as a plain dict, from either JSON or an HTML form.

    Repeated form keys become lists (`tags=a&tags=b`). Bodies of any other
    media type (or with no Content-Type) are not read and yield {}, as does
    an empty body or a JSON body that is not an object, so every field
    falls back to its default.

    Raises:
        ValidationError: The body is declared JSON but does not parse (→ 400)
    """
    media_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if media_type in FORM_CONTENT_TYPES:
        form = await request.form()
        payload: Dict[str, Any] = {}
        for key in form.keys():
            values = form.getlist(key)
            payload[key] = values if len(values) > 1 else values[0]
        return payload

    if not _is_json_media_type(media_type) or not await request.body():
        return {}
    try:
        data = await request.json()
    except ValueError:
        raise ValidationError(message="Request body is not valid JSON", field="body")
    return data if isinstance(data, dict) else {}


def _body_schema(model) -> Dict[str, Any]:
    """OpenAPI requestBody for routes that parse the body themselves."""
    schema = model.model_json_schema(by_alias=True)
    return {
        "requestBody": {
            "content": {
                "application/json": {"schema": schema},
                "application/x-www-form-urlencoded": {"schema": schema},
            }
        }
    }


@router.get(
    "/notes",
    response_model=List[Note],
    summary="List all notes",
    description="Returns every note in storage order. No filtering, no pagination.",
)
async def list_notes(store: NoteStore = Depends(get_note_store)) -> List[Note]:
    return note_service.list_notes(store)


@router.get(
    "/dashboard",
    response_model=DashboardResponse,
    summary="Pinned and recent notes",
    description=(
        "Pinned notes in storage order, and unpinned notes sorted by most "
        "recent update. The two lists never overlap."
    ),
)
async def dashboard(store: NoteStore = Depends(get_note_store)) -> DashboardResponse:
    pinned, recent = note_service.dashboard(store)
    return DashboardResponse(pinned_notes=pinned, recent_notes=recent)


@router.get(
    "/notes/{note_id}",
    response_model=Note,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Get a single note by ID",
)
async def get_note(note_id: str, store: NoteStore = Depends(get_note_store)) -> Note:
    return note_service.get_note(store, note_id)


@router.post(
    "/notes",
    response_model=Note,
    summary="Create a note",
    description=(
        "Accepts any subset of title, content, tags, color, pinned, createdAt "
        "and updatedAt. Missing or malformed fields are defaulted, never rejected."
    ),
    openapi_extra=_body_schema(NoteCreate),
)
async def create_note(
    payload: Dict[str, Any] = Depends(read_payload),
    store: NoteStore = Depends(get_note_store),
) -> Note:
    return note_service.create_note(store, NoteCreate.model_validate(payload))


@router.put(
    "/notes/{note_id}",
    response_model=Note,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Update a note",
    description=(
        "Partial update. Absent or empty fields keep their prior value; "
        "updatedAt is always set to the current time."
    ),
    openapi_extra=_body_schema(NoteUpdate),
)
async def update_note(
    note_id: str,
    payload: Dict[str, Any] = Depends(read_payload),
    store: NoteStore = Depends(get_note_store),
) -> Note:
    logger.debug("PUT /api/notes/%s fields: %s", note_id, sorted(payload))
    return note_service.update_note(store, note_id, NoteUpdate.model_validate(payload))


@router.delete(
    "/notes/{note_id}",
    response_model=DeleteResponse,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Delete a note",
)
async def delete_note(
    note_id: str, store: NoteStore = Depends(get_note_store)
) -> DeleteResponse:
    if not note_service.delete_note(store, note_id):
        raise NotFoundError(resource="Note", resource_id=note_id)
    return DeleteResponse(success=True)


@router.delete(
    "/notes",
    response_model=BulkDeleteResponse,
    responses={400: {"description": "ids array required", "model": ErrorResponse}},
    summary="Delete many notes",
    description=(
        'Body {"all": true} removes every note (any ids are ignored); '
        'otherwise {"ids": [...]} removes each matching note and skips the rest.'
    ),
    openapi_extra=_body_schema(BulkDeleteRequest),
)
async def bulk_delete(
    payload: Dict[str, Any] = Depends(read_payload),
    store: NoteStore = Depends(get_note_store),
) -> BulkDeleteResponse:
    deleted = note_service.bulk_delete(store, BulkDeleteRequest.model_validate(payload))
    return BulkDeleteResponse(success=True, deleted=deleted)
