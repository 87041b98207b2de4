"""Item model for the legacy item collection."""

from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from songvote.models.base import Base, CreatedAtMixin, IntegerPrimaryKeyMixin


class Item(IntegerPrimaryKeyMixin, CreatedAtMixin, Base):
    """Free-form named item. Unrelated to ratings."""

    __tablename__ = "items"

    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Item(id={self.id}, name='{self.name}')>"
