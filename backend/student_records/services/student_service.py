"""Student Service — business rules for creating, reading and deactivating students.

Invariants:
    - create: email must not exist yet (DuplicateEmailError), active forced True, id left to the store
    - get_by_id / get_by_email / deactivate share one fetch-or-fail path (NotFoundError)
    - deactivate is idempotent: an inactive student is re-persisted with active=False
    - list_all returns store order; empty list when nothing is stored
    - Returns StudentResponse projections, never ORM instances

Design Decisions:
    - Repository injected at construction: no container, tests pass an in-memory fake
    - exists_by_email pre-check kept as a fast path; the store's unique index
      remains the authoritative guard under concurrent creation
"""

import logging

from student_records.core.domain_types import StudentId
from student_records.core.errors import DuplicateEmailError, ErrorContext, NotFoundError
from student_records.core.repository_protocols import StudentLike, StudentRepository
from student_records.models.student import Student
from student_records.schemas.student import StudentRequestData, StudentResponse

logger = logging.getLogger(__name__)

STUDENT = "Student"


class StudentService:
    """Student use cases on top of a StudentRepository."""

    def __init__(self, repository: StudentRepository):
        self._repository = repository

    async def create(self, data: StudentRequestData) -> StudentResponse:
        if await self._repository.exists_by_email(data.email):
            raise DuplicateEmailError(data.email)
        student = Student(
            full_name=data.full_name,
            email=data.email,
            birth_date=data.birth_date,
            active=True,
        )
        saved = await self._repository.insert(student)
        logger.info("Student created", extra={"student_id": saved.id})
        return _to_response(saved)

    async def get_by_id(self, student_id: StudentId) -> StudentResponse:
        return _to_response(await self._get_or_raise(student_id))

    async def get_by_email(self, email: str) -> StudentResponse:
        student = await self._repository.get_by_email(email)
        if student is None:
            raise NotFoundError(STUDENT, email)
        return _to_response(student)

    async def list_all(self) -> list[StudentResponse]:
        return [_to_response(s) for s in await self._repository.list_all()]

    async def list_active(self) -> list[StudentResponse]:
        return [_to_response(s) for s in await self._repository.list_active()]

    async def count(self) -> int:
        return await self._repository.count()

    async def deactivate(self, student_id: StudentId) -> StudentResponse:
        student = await self._get_or_raise(student_id)
        student.active = False
        saved = await self._repository.update(student)
        logger.info("Student deactivated", extra={"student_id": saved.id})
        return _to_response(saved)

    async def _get_or_raise(self, student_id: StudentId) -> StudentLike:
        student = await self._repository.get_by_id(student_id)
        if student is None:
            raise NotFoundError(
                STUDENT, student_id, ErrorContext(student_id=student_id),
            )
        return student


def _to_response(student: StudentLike) -> StudentResponse:
    return StudentResponse.model_validate(student)
