"""
FAQDesk Backend: FAQ Route Handlers
=====================================

What:  The HTTP surface of the FAQ service.
How:   Reads path/form input, delegates to FaqService, returns JSON.
Who:   Called by the static front-end and any API client.

Routes:
    GET    /faq        list entries, newest first
    GET    /faq/{id}   single entry
    POST   /faq        create from form fields question, answer
    PUT    /faq/{id}   replace question/answer from form fields
    DELETE /faq/{id}   remove entry

The `{faq_id:int}` convertor only matches digit strings, so a path such as
/faq/abc never reaches a handler and the router answers 404.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Form, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.faq import ErrorResponse, FaqEntryResponse
from app.services.faq_service import faq_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["FAQ"])

# Shared OpenAPI error documentation
_STORE_ERROR = {500: {"description": "Store error", "model": ErrorResponse}}
_NOT_FOUND = {404: {"description": "Entry not found", "model": ErrorResponse}}
_INVALID = {400: {"description": "Question is blank", "model": ErrorResponse}}


@router.get(
    "/faq",
    response_model=List[FaqEntryResponse],
    responses={**_STORE_ERROR},
    summary="List all FAQ entries",
    description="Returns every entry ordered by creation time, newest first.",
)
async def list_faqs(
    db: AsyncSession = Depends(get_db_session),
) -> List[FaqEntryResponse]:
    return await faq_service.list_entries(db)


@router.get(
    "/faq/{faq_id:int}",
    response_model=FaqEntryResponse,
    responses={**_NOT_FOUND, **_STORE_ERROR},
    summary="Get a single FAQ entry",
)
async def get_faq(
    faq_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> FaqEntryResponse:
    return await faq_service.get_entry(db, faq_id)


@router.post(
    "/faq",
    response_model=FaqEntryResponse,
    responses={**_INVALID, **_STORE_ERROR},
    summary="Create a FAQ entry",
    description=(
        "Accepts form-encoded `question` (required) and `answer` (optional). "
        "An empty answer is stored as null."
    ),
)
async def create_faq(
    # Missing fields default to blank so the service can answer 400
    # instead of FastAPI's generic 422
    question: str = Form(default=""),
    answer: Optional[str] = Form(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> FaqEntryResponse:
    return await faq_service.create_entry(db, question=question, answer=answer)


@router.put(
    "/faq/{faq_id:int}",
    response_model=FaqEntryResponse,
    responses={**_INVALID, **_NOT_FOUND, **_STORE_ERROR},
    summary="Replace a FAQ entry",
    description="Replaces both question and answer; the store stamps updatedAt.",
)
async def update_faq(
    faq_id: int,
    question: str = Form(default=""),
    answer: Optional[str] = Form(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> FaqEntryResponse:
    return await faq_service.update_entry(db, faq_id, question=question, answer=answer)


@router.delete(
    "/faq/{faq_id:int}",
    responses={
        200: {"description": "Entry deleted (empty body)"},
        **_NOT_FOUND,
        **_STORE_ERROR,
    },
    summary="Delete a FAQ entry",
)
async def delete_faq(
    faq_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await faq_service.delete_entry(db, faq_id)
    return Response(status_code=200)
