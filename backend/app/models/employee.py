"""
Employee Directory Backend - Employee SQLAlchemy Model
======================================================

What:  ORM model representing the `employee` table.
How:   Inherits from the shared DeclarativeBase; the gateway builds its
       INSERT/UPDATE ... RETURNING statements against it.
Who:   Used by EmployeeGateway, and by tests to create the table.

The table is owned by the store: this service never migrates it. The
definition here must match the deployed schema:

    CREATE TABLE employee (
        id          SERIAL PRIMARY KEY,
        first_name  TEXT,
        last_name   TEXT,
        email       TEXT
    );
"""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Employee(Base):
    """
    A single directory entry.

    Lifecycle:
        1. Inserted by POST /api/employees (id assigned by the store)
        2. Overwritten as a unit by PUT /api/employees/{id}
        3. Removed by DELETE /api/employees/{id}
    """

    __tablename__ = "employee"

    # Integer primary key: SERIAL on PostgreSQL, rowid alias on SQLite
    id: Mapped[int] = mapped_column(primary_key=True)

    # All three are nullable; NULL and "" are different values
    first_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    last_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    email: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        """Developer-friendly string representation for debugging."""
        return f"<Employee(id={self.id}, email='{self.email}')>"
