"""In-memory StudentRepository — dict-backed store for service tests.

Mirrors the SQL store's observable behavior: ids assigned 1, 2, 3...,
unique email enforced on insert, id-ordered listings. Call counters let
tests assert how many writes a use case performed.
"""

from student_records.core.errors import DuplicateEmailError


class InMemoryStudentRepository:
    def __init__(self):
        self.rows: dict[int, object] = {}
        self.next_id = 1
        self.inserts = 0
        self.updates = 0

    async def insert(self, student):
        if any(s.email == student.email for s in self.rows.values()):
            raise DuplicateEmailError(student.email)
        student.id = self.next_id
        self.next_id += 1
        self.rows[student.id] = student
        self.inserts += 1
        return student

    async def get_by_id(self, student_id):
        return self.rows.get(student_id)

    async def get_by_email(self, email):
        return next((s for s in self.rows.values() if s.email == email), None)

    async def exists_by_email(self, email):
        return await self.get_by_email(email) is not None

    async def update(self, student):
        self.rows[student.id] = student
        self.updates += 1
        return student

    async def list_all(self):
        return [self.rows[k] for k in sorted(self.rows)]

    async def list_active(self):
        return [s for s in await self.list_all() if s.active]

    async def count(self):
        return len(self.rows)
