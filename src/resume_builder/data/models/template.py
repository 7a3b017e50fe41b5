"""Template model: an administrator-managed visual style for resumes."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Literal, get_args

from sqlalchemy import JSON, Boolean, CheckConstraint, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from resume_builder.data.db import Base

TemplateCategory = Literal["modern", "classic", "creative", "minimal", "professional"]
TEMPLATE_CATEGORIES: tuple[str, ...] = get_args(TemplateCategory)


class Template(Base):
    """A named style descriptor selectable by users.

    Attributes:
        config: JSON document with ``layout``, ``colors``, ``fonts`` and
            ``spacing`` keys.
        sections: JSON list of ``{name, required, order, style}`` entries.
        usage: Number of times the template has been picked.
    """

    __tablename__ = "templates"
    __table_args__ = (
        CheckConstraint(
            "category IN (" + ", ".join(f"'{c}'" for c in TEMPLATE_CATEGORIES) + ")",
            name="ck_templates_category",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    category: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    preview: Mapped[str] = mapped_column(String(1024), nullable=False, default="")

    config: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    sections: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    premium: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    usage: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    rating_average: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    rating_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )
