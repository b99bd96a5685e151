"""
Database models for Duties (authoritative ORM definitions).

Defines the SQLAlchemy Base with a naming convention for stable Alembic
autogenerate diffs, and exposes `target_metadata` for Alembic.
"""

from sqlalchemy import MetaData, PrimaryKeyConstraint, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Naming convention for deterministic constraint/index names in Alembic diffs
naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for all database models with type checking support."""

    metadata = MetaData(naming_convention=naming_convention)


class Duties(Base):
    __tablename__ = "duty"
    # Name uniqueness is checked by the resolvers, not by a constraint
    __table_args__ = (PrimaryKeyConstraint("id", name="duty_pkey"),)

    id: Mapped[str] = mapped_column(String(64))
    name: Mapped[str] = mapped_column(String(255), nullable=False)


target_metadata = Base.metadata

__all__ = ["Base", "Duties", "target_metadata"]
