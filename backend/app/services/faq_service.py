"""
FAQDesk Backend: FAQ Service
==============================

What:  The five FAQ operations: list, get, create, update, delete.
How:   Each method receives the request's AsyncSession, executes exactly one
       statement, commits when it wrote, and maps the row to a response model.
Who:   Called by the route handlers in app/routes/faq.py.

Error Translation:
    blank question            → ValidationError (before any store access)
    zero rows matched         → NotFoundError
    id outside 1..2**31-1     → NotFoundError (before any store access)
    SQLAlchemyError / OSError → StoreError carrying the raw failure text

Nothing is retried. The service keeps no state between calls; the session
it is given is owned and closed by the get_db_session dependency.
"""

import logging
from typing import List, Optional, Tuple

from sqlalchemy import delete, desc, func, select, update
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import NotFoundError, StoreError, ValidationError
from app.models.faq import FaqEntry
from app.schemas.faq import FaqEntryResponse

logger = logging.getLogger(__name__)

# OSError covers drivers that fail to connect before SQLAlchemy can wrap it
STORE_ERRORS = (SQLAlchemyError, OSError)

# Ids are a 32-bit INTEGER column; anything outside this range cannot exist
MAX_FAQ_ID = 2**31 - 1


def describe_store_failure(exc: BaseException) -> str:
    """
    Returns the raw failure text for a store exception.

    DBAPI errors are unwrapped to the driver's own message, without the SQL
    statement and parameters SQLAlchemy appends to str(exc).
    """
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


class FaqService:
    """
    Business logic layer for FAQ entries.

    Responsibilities:
        - list_entries(): all entries, newest first
        - get_entry(): single entry by id
        - create_entry(): validate and insert
        - update_entry(): validate and fully replace question/answer
        - delete_entry(): remove by id
    """

    @staticmethod
    def validate_form(
        question: Optional[str],
        answer: Optional[str],
    ) -> Tuple[str, Optional[str]]:
        """
        Checks the submitted form fields and normalizes the answer.

        Returns:
            (question, answer) with an empty answer turned into None

        Raises:
            ValidationError: question is missing or whitespace-only
        """
        if question is None or not question.strip():
            raise ValidationError(message="Question is required.", field="question")
        return question, (answer or None)

    @staticmethod
    def ensure_storable_id(faq_id: int) -> None:
        """
        Raises NotFoundError for ids no row can have.

        The route matches any digit string, and an out-of-range value would
        otherwise fail inside the driver instead of matching zero rows.
        """
        if not 1 <= faq_id <= MAX_FAQ_ID:
            raise NotFoundError(resource="faq", resource_id=faq_id)

    def _store_error(self, operation: str, exc: BaseException) -> StoreError:
        detail = describe_store_failure(exc)
        logger.error("Store error during %s: %s", operation, detail)
        return StoreError(
            message=detail,
            context={"operation": operation, "error_type": type(exc).__name__},
        )

    async def list_entries(self, db: AsyncSession) -> List[FaqEntryResponse]:
        """
        Return every entry ordered by creation time, newest first.

        Query:
            SELECT ... FROM faq ORDER BY CreatedAt DESC, Id DESC
            Id breaks ties between rows inserted within the same clock tick.
        """
        try:
            result = await db.execute(
                select(FaqEntry).order_by(desc(FaqEntry.created_at), desc(FaqEntry.id))
            )
            entries = list(result.scalars().all())
        except STORE_ERRORS as e:
            raise self._store_error("list", e)

        logger.debug("Listed %d FAQ entries", len(entries))
        return [FaqEntryResponse.model_validate(entry) for entry in entries]

    async def get_entry(self, db: AsyncSession, faq_id: int) -> FaqEntryResponse:
        """
        Retrieve a single entry by id.

        Raises:
            NotFoundError: no entry has this id (→ 404)
            StoreError: query execution failed (→ 500)
        """
        self.ensure_storable_id(faq_id)

        try:
            result = await db.execute(select(FaqEntry).where(FaqEntry.id == faq_id))
            entry = result.scalar_one_or_none()
        except STORE_ERRORS as e:
            raise self._store_error("get", e)

        if entry is None:
            raise NotFoundError(resource="faq", resource_id=faq_id)
        return FaqEntryResponse.model_validate(entry)

    async def create_entry(
        self,
        db: AsyncSession,
        question: Optional[str],
        answer: Optional[str] = None,
    ) -> FaqEntryResponse:
        """
        Validate and insert a new entry.

        The store assigns Id and CreatedAt; both are read back during the
        flush and returned alongside the submitted question and answer.

        Raises:
            ValidationError: blank question (→ 400), store untouched
            StoreError: insert or commit failed (→ 500)
        """
        question, answer = self.validate_form(question, answer)

        entry = FaqEntry(question=question, answer=answer, updated_at=None)
        try:
            db.add(entry)
            await db.commit()
        except STORE_ERRORS as e:
            raise self._store_error("create", e)

        logger.info("FAQ entry %s created", entry.id)
        return FaqEntryResponse.model_validate(entry)

    async def update_entry(
        self,
        db: AsyncSession,
        faq_id: int,
        question: Optional[str],
        answer: Optional[str] = None,
    ) -> FaqEntryResponse:
        """
        Validate and fully replace the question and answer of an entry.

        Query:
            UPDATE faq SET Question = :q, Answer = :a, UpdatedAt = now()
            WHERE Id = :id RETURNING ...

        Raises:
            ValidationError: blank question (→ 400), store untouched
            NotFoundError: no entry has this id (→ 404)
            StoreError: update or commit failed (→ 500)
        """
        question, answer = self.validate_form(question, answer)
        self.ensure_storable_id(faq_id)

        stmt = (
            update(FaqEntry)
            .where(FaqEntry.id == faq_id)
            .values({
                FaqEntry.question: question,
                FaqEntry.answer: answer,
                FaqEntry.updated_at: func.now(),
            })
            .returning(FaqEntry)
            # the per-request session has no other loaded entries to refresh
            .execution_options(synchronize_session=False)
        )
        try:
            result = await db.execute(stmt)
            entry = result.scalar_one_or_none()
            await db.commit()
        except STORE_ERRORS as e:
            raise self._store_error("update", e)

        if entry is None:
            raise NotFoundError(resource="faq", resource_id=faq_id)

        logger.info("FAQ entry %s updated", faq_id)
        return FaqEntryResponse.model_validate(entry)

    async def delete_entry(self, db: AsyncSession, faq_id: int) -> None:
        """
        Remove an entry by id.

        Raises:
            NotFoundError: no entry has this id (→ 404)
            StoreError: delete or commit failed (→ 500)
        """
        self.ensure_storable_id(faq_id)

        try:
            result = await db.execute(delete(FaqEntry).where(FaqEntry.id == faq_id))
            await db.commit()
        except STORE_ERRORS as e:
            raise self._store_error("delete", e)

        if result.rowcount == 0:
            raise NotFoundError(resource="faq", resource_id=faq_id)

        logger.info("FAQ entry %s deleted", faq_id)


# ── Singleton Instance ────────────────────────────────────────────────────
faq_service = FaqService()
