"""Student ORM — persists one student record.

Invariants:
    - id is an autoincrement integer primary key, assigned on insert
    - email is unique at the storage level (authoritative duplicate signal)
    - active defaults to True and is only ever set to False by the service

Design Decisions:
    - Unique index on email: closes the check-then-insert race the service cannot close alone
"""

from datetime import date

from sqlalchemy import Boolean, Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from student_records.core.domain_types import EMAIL_MAX_LENGTH, FULL_NAME_MAX_LENGTH
from student_records.db.base import Base


class Student(Base):
    __tablename__ = "students"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    full_name: Mapped[str] = mapped_column(
        String(FULL_NAME_MAX_LENGTH), nullable=False,
    )
    email: Mapped[str] = mapped_column(
        String(EMAIL_MAX_LENGTH), nullable=False, unique=True, index=True,
    )
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )

    def __repr__(self) -> str:
        return f"<Student id={self.id} email={self.email!r} active={self.active}>"
