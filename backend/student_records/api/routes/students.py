"""Student Routes — create, read, list and deactivate students.

Invariants:
    - POST validates the raw body with validate_student_request BEFORE the service runs
    - Only the validated wire keys (REQUEST_FIELDS) reach StudentRequestData; others are ignored
    - Routes never map errors to status codes themselves (api/error_handlers.py does)
    - Static paths (/active, /count, /email/...) are declared before /{student_id}
    - One service instance per request, built by get_student_service

Design Decisions:
    - Raw dict body over a constrained Pydantic body: field errors come from one
      explicit function with stable messages (ADR: explicit validation)
    - get_student_service as a plain dependency: constructor injection, no container
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from student_records.core.domain_types import StudentId
from student_records.core.errors import FieldValidationError
from student_records.core.validate_student import (
    REQUEST_FIELDS, validate_student_request,
)
from student_records.infrastructure.database import get_db
from student_records.infrastructure.student_repository import SqlAlchemyStudentRepository
from student_records.schemas.student import (
    StudentCount, StudentRequestData, StudentResponse,
)
from student_records.services.student_service import StudentService

router = APIRouter(prefix="/api/students", tags=["students"])


def get_student_service(db: AsyncSession = Depends(get_db)) -> StudentService:
    """Wire repository → service for the current request."""
    return StudentService(SqlAlchemyStudentRepository(db))


@router.post(
    "", response_model=StudentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_student(
    payload: dict[str, Any] = Body(...),
    service: StudentService = Depends(get_student_service),
):
    """Create a student. 400 on invalid fields, 409 when the email is taken."""
    errors = validate_student_request(payload)
    if errors:
        raise FieldValidationError(errors)
    fields = {key: payload[key] for key in REQUEST_FIELDS if key in payload}
    return await service.create(StudentRequestData.model_validate(fields))


@router.get("", response_model=list[StudentResponse])
async def list_students(service: StudentService = Depends(get_student_service)):
    """List every student in insertion order."""
    return await service.list_all()


@router.get("/active", response_model=list[StudentResponse])
async def list_active_students(
    service: StudentService = Depends(get_student_service),
):
    """List students whose active flag is still set."""
    return await service.list_active()


@router.get("/count", response_model=StudentCount)
async def count_students(service: StudentService = Depends(get_student_service)):
    """Number of stored students, active or not."""
    return StudentCount(count=await service.count())


@router.get("/email/{email}", response_model=StudentResponse)
async def get_student_by_email(
    email: str, service: StudentService = Depends(get_student_service),
):
    """Look up a student by exact (case-sensitive) email."""
    return await service.get_by_email(email)


@router.get("/{student_id}", response_model=StudentResponse)
async def get_student(
    student_id: int,
    service: StudentService = Depends(get_student_service),
):
    """Get one student. 404 when the id was never assigned."""
    return await service.get_by_id(StudentId(student_id))


@router.patch("/{student_id}/deactivate", response_model=StudentResponse)
async def deactivate_student(
    student_id: int,
    service: StudentService = Depends(get_student_service),
):
    """Soft-delete: set active=false. Deactivating twice is not an error."""
    return await service.deactivate(StudentId(student_id))
