"""
PetClinic Owners — Owner SQLAlchemy Model
==========================================

What:  ORM model representing the `owners` table.
Who:   Used by OwnerRepository for storage and by Alembic for schema management.
When:  Instantiated for new owners (create form) and loaded for edit/detail.

Table Design:
    - Integer primary key, assigned by the database on first insert and never
      changed afterwards (the HTTP layer never binds it from form data)
    - last_name is the search key; indexed for prefix (LIKE 'x%') lookups
    - telephone kept as a string of at most 10 digits (leading zeros matter)
"""

from typing import Optional

from sqlalchemy import Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from petclinic.database import Base


class Owner(Base):
    """
    A clinic client.

    Lifecycle:
        1. Built empty for the create form (id is None → `is_new`)
        2. Inserted on a valid create submission; the database assigns `id`
        3. Updated in place on a valid edit submission
    """

    __tablename__ = "owners"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    first_name: Mapped[str] = mapped_column(String(30), nullable=False, default="")
    last_name: Mapped[str] = mapped_column(String(30), nullable=False, default="")
    address: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    city: Mapped[str] = mapped_column(String(80), nullable=False, default="")
    telephone: Mapped[str] = mapped_column(String(20), nullable=False, default="")

    __table_args__ = (
        Index("idx_owners_last_name", "last_name"),
    )

    # Text attributes start empty (not None) so blank forms render cleanly
    TEXT_FIELDS = ("first_name", "last_name", "address", "city", "telephone")

    def __init__(self, **kwargs):
        for name in self.TEXT_FIELDS:
            kwargs.setdefault(name, "")
        super().__init__(**kwargs)

    @property
    def is_new(self) -> bool:
        """True until the owner has been persisted."""
        return self.id is None

    @property
    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()

    def apply(self, values: dict, owner_id: Optional[int] = None) -> "Owner":
        """Copy form values onto this owner, optionally forcing its id."""
        for name, value in values.items():
            setattr(self, name, value)
        if owner_id is not None:
            self.id = owner_id
        return self

    def __repr__(self) -> str:
        return f"<Owner(id={self.id}, last_name='{self.last_name}')>"
