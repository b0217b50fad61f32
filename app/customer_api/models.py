from __future__ import annotations

from sqlalchemy import Integer, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class Customer(Base):
    """
    Schema of the Customers table.
    Request handlers never go through the ORM; this model only feeds
    Base.metadata for schema creation and Alembic.
    """

    __tablename__ = "Customers"

    CustomerId: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    CompanyName: Mapped[str | None] = mapped_column(Text, nullable=True)
    ContactName: Mapped[str | None] = mapped_column(Text, nullable=True)
