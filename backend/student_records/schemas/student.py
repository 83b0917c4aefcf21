"""Student Schemas — Pydantic models for the student API boundary.

Invariants:
    - Wire format is camelCase (fullName, birthDate); Python attributes are snake_case
    - StudentRequestData is built only after validate_student_request passed
    - StudentRequestData has no id/active: the caller cannot set them
    - StudentResponse is a read projection built from ORM attributes

Design Decisions:
    - alias_generator=to_camel over per-field aliases: one rule for every field
    - Length/format rules live in core/validate_student.py, not in Field constraints
"""

from datetime import date

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StudentRequestData(BaseModel):
    """Student creation input."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    full_name: str
    email: str
    birth_date: date | None = None


class StudentResponse(BaseModel):
    """Student projection returned by every student endpoint."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: int
    full_name: str
    email: str
    birth_date: date | None = None
    active: bool


class StudentCount(BaseModel):
    """Total number of stored students."""
    count: int
