"""
FAQDesk Backend: FaqEntry SQLAlchemy Model
============================================

What:  ORM model representing the `faq` table.
How:   Inherits from the shared DeclarativeBase; column names match the
       pre-existing store schema exactly (Id, Question, Answer, CreatedAt,
       UpdatedAt).
Who:   Used by FaqService for every CRUD statement.

Table:
    faq(
        Id         integer primary key, auto-increment
        Question   text not null
        Answer     text null
        CreatedAt  timestamp default now
        UpdatedAt  timestamp null
    )
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class FaqEntry(Base):
    """
    One frequently asked question.

    Lifecycle:
        1. Inserted by POST /faq; the store assigns Id and CreatedAt
        2. Fully replaced by PUT /faq/{id}; the store stamps UpdatedAt
        3. Removed by DELETE /faq/{id}
    """

    __tablename__ = "faq"

    # Server defaults are read back right after INSERT so the response can
    # carry them without a second round trip on RETURNING-capable stores
    __mapper_args__ = {"eager_defaults": True}

    id: Mapped[int] = mapped_column(
        "Id",
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    question: Mapped[str] = mapped_column(
        "Question",
        Text,
        nullable=False,
    )

    # NULL when no answer was supplied, never an empty string
    answer: Mapped[Optional[str]] = mapped_column(
        "Answer",
        Text,
        nullable=True,
        default=None,
    )

    created_at: Mapped[datetime] = mapped_column(
        "CreatedAt",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    # NULL until the first successful update
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        "UpdatedAt",
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )

    def __repr__(self) -> str:
        return f"<FaqEntry(id={self.id}, created_at='{self.created_at}')>"
